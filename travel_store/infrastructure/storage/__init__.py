"""Storage medium implementations (Infrastructure Layer).

These implement the IKeyValueStorage port defined in travel_store.domain.interfaces.
"""
from travel_store.infrastructure.storage.memory_storage import InMemoryStorage
from travel_store.infrastructure.storage.file_storage import JsonFileStorage
from travel_store.infrastructure.storage.redis_storage import RedisStorage
from travel_store.infrastructure.storage.factory import StorageFactory

__all__ = [
    "InMemoryStorage",
    "JsonFileStorage",
    "RedisStorage",
    "StorageFactory",
]
