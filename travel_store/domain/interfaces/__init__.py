"""Domain interfaces following Dependency Inversion Principle."""

from travel_store.domain.interfaces.storage import IKeyValueStorage
from travel_store.domain.interfaces.collection_repository import ICollectionRepository
from travel_store.domain.interfaces.session_storage import ISessionStorage

__all__ = [
    "IKeyValueStorage",
    "ICollectionRepository",
    "ISessionStorage",
]
