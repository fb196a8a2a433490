"""Repository implementations (Infrastructure Layer).

Repository implementations for data persistence.
These implement domain interfaces defined in travel_store.domain.interfaces.
"""
from travel_store.infrastructure.repositories.collection_repository import CollectionRepository
from travel_store.infrastructure.repositories.session_storage import KeyValueSessionStorage

__all__ = [
    "CollectionRepository",
    "KeyValueSessionStorage",
]
