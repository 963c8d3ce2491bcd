# tests/services/test_kv_store.py
from projectplan.services.kv_store import KeyValueStore


def test_read_missing_key_returns_none(db_session):
    assert KeyValueStore(db_session).read_record("nothing-here") is None


def test_write_then_overwrite(db_session):
    kv = KeyValueStore(db_session)

    kv.write_record("alpha", {"value": 1})
    kv.write_record("alpha", {"value": 2})

    assert kv.read_record("alpha") == {"value": 2}


def test_delete_record(db_session):
    kv = KeyValueStore(db_session)
    kv.write_record("alpha", {"value": 1})

    assert kv.delete_record("alpha") is True
    assert kv.read_record("alpha") is None
    assert kv.delete_record("alpha") is False


def test_lists_are_rewritten_wholesale(db_session):
    kv = KeyValueStore(db_session)

    assert kv.read_list("ids") == []
    kv.write_list("ids", ["a", "b"])
    kv.write_list("ids", ["b"])

    assert kv.read_list("ids") == ["b"]
