import json
import pytest
from unittest.mock import MagicMock

from travel_store.domain.entities import CoinEntry, Post
from travel_store.domain.exceptions import CorruptCollectionError
from travel_store.infrastructure.repositories import CollectionRepository
from travel_store.infrastructure.storage import InMemoryStorage

# ---------- TEST DATA HELPERS ----------

def make_post(post_id, content="hello"):
    return Post(
        id=post_id,
        user_id="user_alice",
        username="alice",
        content=content,
        created_at="2024-06-01T12:00:00.000Z",
    )


def make_entry(entry_id, amount):
    return CoinEntry(
        id=entry_id,
        user_id="user_alice",
        amount=amount,
        reason="test",
        created_at="2024-06-01T12:00:00.000Z",
    )


@pytest.fixture
def posts(storage):
    return CollectionRepository(storage, "posts", Post.from_dict, Post.to_dict)

# ---------- READS ----------

def test_missing_key_is_empty(posts):
    assert posts.list() == []


@pytest.mark.parametrize("raw", ["{not json", '{"id": "p1"}', "42", '[{"id": "p1"}]'])
def test_invalid_data_is_empty(storage, posts, raw):
    storage.write("posts", raw)
    assert posts.list() == []


def test_read_failure_is_empty_on_list():
    storage = MagicMock()
    storage.read.side_effect = OSError("disk gone")
    repository = CollectionRepository(storage, "posts", Post.from_dict, Post.to_dict)

    assert repository.list() == []


def test_read_failure_propagates_on_update():
    storage = MagicMock()
    storage.read.side_effect = OSError("disk gone")
    repository = CollectionRepository(storage, "posts", Post.from_dict, Post.to_dict)

    with pytest.raises(OSError):
        repository.add(make_post("p1"))
    storage.write.assert_not_called()


@pytest.mark.parametrize("raw", ["{not json", '{"id": "p1"}', '[{"id": "p1"}]'])
def test_invalid_data_is_not_overwritten_on_update(storage, posts, raw):
    storage.write("posts", raw)

    with pytest.raises(CorruptCollectionError):
        posts.add(make_post("p_new"))
    assert storage.read("posts") == raw


def test_one_bad_record_does_not_wipe_its_siblings(storage, posts):
    good = make_post("p_good").to_dict()
    broken = make_post("p_broken").to_dict()
    del broken["username"]
    raw = json.dumps([good, broken])
    storage.write("posts", raw)

    with pytest.raises(CorruptCollectionError) as excinfo:
        posts.add(make_post("p_new"))

    assert excinfo.value.key == "posts"
    assert storage.read("posts") == raw
    assert [item["id"] for item in json.loads(storage.read("posts"))] == ["p_good", "p_broken"]
    assert posts.list() == []

# ---------- WRITES ----------

def test_prepend_orders_most_recent_first(posts):
    posts.add(make_post("p1"))
    posts.add(make_post("p2"))

    assert [post.id for post in posts.list()] == ["p2", "p1"]


def test_append_keeps_insertion_order(storage):
    ledger = CollectionRepository(storage, "coins", CoinEntry.from_dict, CoinEntry.to_dict, prepend=False)
    ledger.add(make_entry("c1", 10))
    ledger.add(make_entry("c2", -5))

    assert [entry.id for entry in ledger.list()] == ["c1", "c2"]


def test_whole_collection_written_as_json_array(storage, posts):
    posts.add(make_post("p1"))

    stored = json.loads(storage.read("posts"))
    assert stored == [make_post("p1").to_dict()]


def test_update_returning_none_skips_write(posts, storage):
    assert posts.update(lambda records: None) is None
    assert storage.read("posts") is None


def test_find(posts):
    posts.add(make_post("p1", content="first"))
    posts.add(make_post("p2", content="second"))

    assert posts.find(lambda post: post.id == "p1").content == "first"
    assert posts.find(lambda post: post.id == "missing") is None


def test_write_failure_propagates():
    storage = InMemoryStorage()
    storage.write = MagicMock(side_effect=OSError("quota exceeded"))
    repository = CollectionRepository(storage, "posts", Post.from_dict, Post.to_dict)

    with pytest.raises(OSError):
        repository.add(make_post("p1"))
