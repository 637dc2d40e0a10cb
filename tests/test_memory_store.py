from movies_api.memory_store import InMemoryEntityStore, matches


def test_matches_scalar_in_list():
    assert matches({"genre": ["comedy", "drama"]}, {"genre": "drama"})
    assert not matches({"genre": ["comedy"]}, {"genre": "drama"})


def test_matches_whole_list_exactly():
    assert matches({"genre": ["comedy"]}, {"genre": ["comedy"]})
    assert not matches({"genre": ["comedy", "drama"]}, {"genre": ["comedy"]})


def test_missing_field_does_not_match():
    assert not matches({"title": "a"}, {"title": "a", "description": "b"})


def test_seeded_documents_get_ids():
    store = InMemoryEntityStore([{"name": "Action"}, {"name": "Drama"}])

    docs = store.find({})
    assert [d["name"] for d in docs] == ["Action", "Drama"]
    assert all(d["id"] for d in docs)


def test_returned_documents_are_copies():
    store = InMemoryEntityStore()
    created = store.create({"name": "Action"})

    created["name"] = "changed"

    assert store.find_by_id(created["id"])["name"] == "Action"


def test_update_keeps_id_and_returns_previous():
    store = InMemoryEntityStore()
    created = store.create({"name": "Action"})

    previous = store.find_by_id_and_update(created["id"], {"id": "other", "name": "Drama"})

    assert previous == created
    assert store.find_by_id(created["id"]) == {"id": created["id"], "name": "Drama"}


def test_update_and_delete_unknown_id():
    store = InMemoryEntityStore()
    assert store.find_by_id_and_update("missing", {"name": "x"}) is None
    assert store.find_by_id_and_delete("missing") is None
