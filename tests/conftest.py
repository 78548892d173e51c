from __future__ import annotations

import pytest

from unistore import Action, Store, create_store

from .helpers import Counter, counter


@pytest.fixture
def store() -> Store[Counter, Action]:
    return create_store(counter)
