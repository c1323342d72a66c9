import pytest

from grpcmon.entry import Entry, StatusCode, Store, new_id


def test_status_code_string_forms():
    assert str(Entry(status=StatusCode.OK).status) == "OK"
    assert str(Entry(status=StatusCode.NOT_FOUND).status) == "NotFound"
    assert f"{Entry(status=StatusCode.UNAVAILABLE).status}" == "Unavailable"


def test_entry_defaults():
    e = Entry()
    assert e.status is StatusCode.OK
    assert e.metadata is None
    assert e.timestamp is None


def test_new_id_is_unique():
    ids = {new_id() for _ in range(100)}
    assert len(ids) == 100


def test_store_keeps_insertion_order():
    store = Store(10)
    entries = [Entry(id=new_id(), method=m) for m in ("/a", "/b", "/c")]
    for e in entries:
        store.add(e)
    assert store.list() == entries
    assert len(store) == 3


def test_store_evicts_oldest_when_full():
    store = Store(2)
    entries = [Entry(id=str(i)) for i in range(3)]
    for e in entries:
        store.add(e)
    assert store.list() == entries[1:]


def test_store_clear():
    store = Store(5)
    store.add(Entry(id="x"))
    store.clear()
    assert store.list() == []
    assert len(store) == 0


def test_store_list_is_a_copy():
    store = Store(5)
    store.add(Entry(id="x"))
    snapshot = store.list()
    snapshot.clear()
    assert len(store) == 1


def test_store_rejects_zero_capacity():
    with pytest.raises(ValueError):
        Store(0)