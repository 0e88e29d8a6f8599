"""Tests for the SQLAlchemy-backed record store."""
from datetime import datetime
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from chelto.models.registration import Registration
from chelto.services.exceptions import PersistenceError, UniqueViolation
from chelto.services.record_store import RecordStore


def _record(**overrides):
    fields = {
        "name": "Asha",
        "email": "asha@x.com",
        "phone_number": "9990001111",
        "city": "Guntur",
        "promocode": "CHELTO1234",
        "promocode_amount": 250,
        "status": "registered",
        "registered_at": datetime(2025, 1, 10, 9, 30),
    }
    fields.update(overrides)
    return Registration(**fields)


def test_insert_returns_id(store):
    assert store.insert(_record()) is not None


def test_query_equal(store):
    store.insert(_record())

    assert [r.promocode for r in store.query_equal("email", "asha@x.com")] == ["CHELTO1234"]
    assert store.query_equal("email", "nobody@x.com") == []


def test_query_equal_all_requires_every_field(store):
    store.insert(_record())
    store.insert(_record(email="ravi@x.com", phone_number="1112223333", promocode="CHELTO5678"))

    assert len(store.query_equal_all({"email": "asha@x.com", "phone_number": "9990001111"})) == 1
    assert store.query_equal_all({"email": "asha@x.com", "phone_number": "1112223333"}) == []


@pytest.mark.parametrize("overrides", [
    {"phone_number": "1112223333", "promocode": "CHELTO5678"},
    {"email": "ravi@x.com", "promocode": "CHELTO5678"},
    {"email": "ravi@x.com", "phone_number": "1112223333"},
])
def test_unique_indexes(store, overrides):
    store.insert(_record())

    with pytest.raises(UniqueViolation):
        store.insert(_record(**overrides))

    # session is usable after the rollback
    assert len(store.query_equal("email", "asha@x.com")) == 1


def test_query_failure_wrapped():
    db = MagicMock()
    db.query.side_effect = OperationalError("SELECT", {}, Exception("database is locked"))

    with pytest.raises(PersistenceError):
        RecordStore(db).query_equal("email", "asha@x.com")
    db.rollback.assert_called_once()


def test_insert_failure_wrapped():
    db = MagicMock()
    db.commit.side_effect = OperationalError("INSERT", {}, Exception("disk I/O error"))

    with pytest.raises(PersistenceError) as exc:
        RecordStore(db).insert(_record())

    assert not isinstance(exc.value, UniqueViolation)
    db.rollback.assert_called_once()


def test_list_all_newest_first(store):
    store.insert(_record())
    store.insert(_record(
        email="ravi@x.com",
        phone_number="1112223333",
        promocode="CHELTO5678",
        registered_at=datetime(2025, 1, 11, 9, 30),
    ))

    assert [r.email for r in store.list_all()] == ["ravi@x.com", "asha@x.com"]
