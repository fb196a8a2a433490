import json
import pytest
import redis
from unittest.mock import MagicMock

from travel_store.config.settings import TestingConfig
from travel_store.infrastructure.storage import InMemoryStorage, JsonFileStorage, RedisStorage, StorageFactory

# ---------- IN-MEMORY ----------

def test_memory_read_write_delete():
    storage = InMemoryStorage()
    assert storage.read("posts") is None

    storage.write("posts", "[]")
    assert storage.read("posts") == "[]"

    storage.delete("posts")
    assert storage.read("posts") is None
    storage.delete("posts")  # absent key is fine


def test_memory_keys_by_prefix():
    storage = InMemoryStorage({"file_a": "1", "file_b": "2", "posts": "[]"})
    assert sorted(storage.keys("file_")) == ["file_a", "file_b"]
    assert len(storage.keys()) == 3

# ---------- JSON FILE ----------

def test_file_storage_persists_across_instances(tmp_path):
    path = tmp_path / "store.json"
    JsonFileStorage(path).write("users", '[{"id": "u1"}]')

    reopened = JsonFileStorage(path)
    assert reopened.read("users") == '[{"id": "u1"}]'
    assert json.loads(path.read_text(encoding="utf-8")) == {"users": '[{"id": "u1"}]'}


def test_file_storage_missing_file_reads_empty(tmp_path):
    storage = JsonFileStorage(tmp_path / "nested" / "store.json")
    assert storage.read("users") is None
    assert storage.keys() == []

    storage.write("users", "[]")
    assert storage.read("users") == "[]"


def test_file_storage_bare_file_name_uses_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    JsonFileStorage("store.json").write("posts", "[]")

    assert json.loads((tmp_path / "store.json").read_text(encoding="utf-8")) == {"posts": "[]"}


def test_file_storage_corrupt_file_reads_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{broken", encoding="utf-8")

    storage = JsonFileStorage(path)
    assert storage.read("users") is None


def test_file_storage_truncated_file_is_not_overwritten(tmp_path):
    path = tmp_path / "store.json"
    storage = JsonFileStorage(path)
    storage.write("users", '[{"id": "u1"}]')
    storage.write("coins", "[]")
    truncated = path.read_text(encoding="utf-8")[:-1]
    path.write_text(truncated, encoding="utf-8")

    with pytest.raises(ValueError):
        storage.write("session", "{}")
    with pytest.raises(ValueError):
        storage.delete("users")

    assert path.read_text(encoding="utf-8") == truncated
    assert storage.keys() == []


def test_file_storage_non_object_file_is_not_overwritten(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        JsonFileStorage(path).write("session", "{}")
    assert path.read_text(encoding="utf-8") == "[1, 2]"


def test_file_storage_keeps_foreign_values_on_write(tmp_path):
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"version": 2, "users": "[]"}), encoding="utf-8")

    storage = JsonFileStorage(path)
    assert storage.read("version") is None
    storage.write("session", "{}")

    assert json.loads(path.read_text(encoding="utf-8")) == {"version": 2, "users": "[]", "session": "{}"}


def test_file_storage_delete_and_keys(tmp_path):
    storage = JsonFileStorage(tmp_path / "store.json")
    storage.write("session", "{}")
    storage.write("file_abc", "data:")
    storage.write("posts", "[]")

    storage.delete("session")
    assert storage.read("session") is None
    assert storage.keys("file_") == ["file_abc"]

# ---------- REDIS ----------

@pytest.fixture
def redis_mock():
    return MagicMock()


def test_redis_storage_prefixes_keys(redis_mock):
    redis_mock.get.return_value = "[]"
    storage = RedisStorage(redis_client=redis_mock, key_prefix="t:")

    assert storage.read("posts") == "[]"
    redis_mock.get.assert_called_once_with("t:posts")

    storage.write("posts", "[1]")
    redis_mock.set.assert_called_once_with("t:posts", "[1]")

    storage.delete("session")
    redis_mock.delete.assert_called_once_with("t:session")


def test_redis_storage_decodes_bytes(redis_mock):
    redis_mock.get.return_value = b"[]"
    storage = RedisStorage(redis_client=redis_mock, key_prefix="t:")
    assert storage.read("posts") == "[]"


def test_redis_storage_write_failure_propagates(redis_mock):
    redis_mock.set.side_effect = redis.ConnectionError("down")
    storage = RedisStorage(redis_client=redis_mock, key_prefix="t:")

    with pytest.raises(redis.ConnectionError):
        storage.write("posts", "[]")


def test_redis_storage_keys_strip_prefix(redis_mock):
    redis_mock.scan_iter.return_value = iter(["t:file_1", "t:file_2"])
    storage = RedisStorage(redis_client=redis_mock, key_prefix="t:")

    assert storage.keys("file_") == ["file_1", "file_2"]
    redis_mock.scan_iter.assert_called_once_with(match="t:file_*")


def test_redis_storage_keys_failure_propagates(redis_mock):
    redis_mock.scan_iter.side_effect = redis.ConnectionError("down")
    storage = RedisStorage(redis_client=redis_mock, key_prefix="t:")

    with pytest.raises(redis.ConnectionError):
        storage.keys("file_")

# ---------- FACTORY ----------

def test_factory_creates_backends(tmp_path):
    assert isinstance(StorageFactory.create_storage("memory"), InMemoryStorage)

    file_storage = StorageFactory.create_storage("file", file_path=str(tmp_path / "s.json"))
    assert isinstance(file_storage, JsonFileStorage)


def test_factory_rejects_unknown_backend():
    with pytest.raises(ValueError):
        StorageFactory.create_storage("s3")


def test_factory_redis_unavailable(monkeypatch):
    def unreachable(url):
        raise redis.ConnectionError("refused")

    monkeypatch.setattr(
        "travel_store.infrastructure.storage.factory.RedisClientFactory.get_client",
        unreachable,
    )
    with pytest.raises(redis.ConnectionError):
        StorageFactory.create_storage("redis", redis_url="redis://localhost:6379/15")


def test_factory_redis_uses_shared_client(monkeypatch):
    client = MagicMock()
    seen = []

    def connected(url):
        seen.append(url)
        return client

    monkeypatch.setattr(
        "travel_store.infrastructure.storage.factory.RedisClientFactory.get_client",
        connected,
    )
    storage = StorageFactory.create_storage("redis", redis_url="redis://localhost:6379/15", key_prefix="t:")

    assert isinstance(storage, RedisStorage)
    assert storage.redis is client
    assert seen == ["redis://localhost:6379/15"]


def test_factory_from_config():
    assert isinstance(StorageFactory.from_config(TestingConfig), InMemoryStorage)
