"""Interface for whole-collection repositories (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class ICollectionRepository(ABC, Generic[T]):
    """
    Interface for a collection of records persisted under one storage key.
    
    Every mutation is a read-modify-write of the whole collection.
    """
    
    @property
    @abstractmethod
    def key(self) -> str:
        """Storage key the collection lives under."""
        pass
    
    @abstractmethod
    def list(self) -> List[T]:
        """
        Read the whole collection.
        
        Returns:
            Records in persisted order; empty when absent or unreadable
        """
        pass
    
    @abstractmethod
    def save_all(self, records: List[T]) -> None:
        """
        Persist the whole collection in a single write.
        
        Args:
            records: Complete collection to store
        """
        pass
    
    @abstractmethod
    def add(self, record: T) -> None:
        """
        Insert a record (prepended or appended depending on the collection).
        
        Args:
            record: Fully populated record including its id
        """
        pass
    
    @abstractmethod
    def update(self, mutate: Callable[[List[T]], Optional[List[T]]]) -> Optional[List[T]]:
        """
        Apply a function to the collection and persist its result.
        
        Args:
            mutate: Function receiving the current collection and
                returning the collection to store, or None to skip the write
            
        Returns:
            The collection as written, or None if nothing was written
        """
        pass
    
    @abstractmethod
    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """
        Find the first record matching a predicate.
        
        Args:
            predicate: Filter function
            
        Returns:
            Matching record or None
        """
        pass
