from datetime import datetime, timedelta, timezone

import pytest

from kvindex.config import IndexConfig
from kvindex.core.record import RecordSchema
from kvindex.core.types import FieldType
from kvindex.storage import MemoryStore

TEST_NAMESPACE = "kvindex_tests"


@pytest.fixture
def user_schema() -> RecordSchema:
    return RecordSchema("User", {
        "name": FieldType.STRING,
        "email": FieldType.STRING,
        "password": FieldType.STRING,
        "admin": FieldType.BOOLEAN,
        "last_logged_in_at": FieldType.DATETIME,
        "created_at": FieldType.DATETIME,
        "ttl": FieldType.DATETIME,
    })


@pytest.fixture
def config() -> IndexConfig:
    return IndexConfig(namespace=TEST_NAMESPACE)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def later(now) -> datetime:
    return now + timedelta(days=90)
