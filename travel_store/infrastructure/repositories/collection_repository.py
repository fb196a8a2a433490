"""Generic whole-collection repository over a key-value storage medium."""
import json
import logging
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from travel_store.domain.exceptions import CorruptCollectionError
from travel_store.domain.interfaces.collection_repository import ICollectionRepository
from travel_store.domain.interfaces.storage import IKeyValueStorage

T = TypeVar("T")


class CollectionRepository(ICollectionRepository[T], Generic[T]):
    """
    Repository storing one entity type as a JSON array under one key.
    
    Follows Repository Pattern and Single Responsibility Principle.
    Every mutation reads the whole array, changes it in memory and writes
    it back in one ``write`` call. This is the only place the
    read-modify-write happens: two writers sharing the medium can lose
    each other's updates (last writer wins).
    """
    
    def __init__(
        self,
        storage: IKeyValueStorage,
        key: str,
        deserialize: Callable[[Dict[str, Any]], T],
        serialize: Callable[[T], Dict[str, Any]],
        prepend: bool = True
    ):
        """
        Initialize the collection repository.
        
        Args:
            storage: Storage medium (Dependency Injection)
            key: Storage key holding the collection
            deserialize: Builds a record from its persisted dict
            serialize: Turns a record into its persisted dict
            prepend: Insert new records first (feeds) instead of last (ledgers)
        """
        self.storage = storage
        self._key = key
        self._deserialize = deserialize
        self._serialize = serialize
        self.prepend = prepend
        self._logger = logging.getLogger(__name__)
    
    @property
    def key(self) -> str:
        return self._key
    
    def _decode(self, raw: Optional[str]) -> List[T]:
        """
        Decode a raw value strictly.
        
        Raises:
            CorruptCollectionError: If the value is present but is not a
                JSON array of decodable records
        """
        if raw is None:
            return []
        
        try:
            items = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptCollectionError(self._key, f"invalid JSON: {e}") from e
        
        if not isinstance(items, list):
            raise CorruptCollectionError(self._key, f"expected a JSON array, got {type(items).__name__}")
        
        try:
            return [self._deserialize(item) for item in items]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise CorruptCollectionError(self._key, f"invalid record: {e!r}") from e
    
    def list(self) -> List[T]:
        """Read the whole collection; never raises."""
        try:
            raw = self.storage.read(self._key)
        except Exception as e:
            self._logger.error(f"Failed to read {self._key}: {e}")
            return []
        
        try:
            return self._decode(raw)
        except CorruptCollectionError as e:
            self._logger.warning(f"{e}; treating as empty")
            return []
    
    def save_all(self, records: List[T]) -> None:
        """Serialize and write the whole collection; write failures propagate."""
        payload = json.dumps([self._serialize(record) for record in records])
        self.storage.write(self._key, payload)
        self._logger.debug(f"Saved {len(records)} records to {self._key}")
    
    def add(self, record: T) -> None:
        def insert(records: List[T]) -> List[T]:
            if self.prepend:
                records.insert(0, record)
            else:
                records.append(record)
            return records
        
        self.update(insert)
    
    def update(self, mutate: Callable[[List[T]], Optional[List[T]]]) -> Optional[List[T]]:
        """
        Read-modify-write the collection.
        
        A ``mutate`` result of None means nothing changed and skips the write.
        
        Unlike ``list``, a failing storage read and undecodable stored data
        both propagate here, so the stored collection is never overwritten
        with one built from a partial or empty read.
        
        Raises:
            CorruptCollectionError: If the stored value cannot be decoded
        """
        records = self._decode(self.storage.read(self._key))
        updated = mutate(records)
        if updated is None:
            return None
        self.save_all(updated)
        return updated
    
    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for record in self.list():
            if predicate(record):
                return record
        return None
