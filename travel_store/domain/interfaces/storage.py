"""Interface for the key-value storage medium (Port)."""
from abc import ABC, abstractmethod
from typing import Optional, List


class IKeyValueStorage(ABC):
    """
    Interface for a string-keyed, string-valued storage medium.
    
    Every durable byte of the store passes through this port, so
    collection logic never depends on where the data actually lives
    (memory, a JSON file, Redis, ...).
    """
    
    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """
        Read the raw value stored under a key.
        
        Args:
            key: Storage key
            
        Returns:
            Stored string or None if the key is absent
        """
        pass
    
    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.
        
        Args:
            key: Storage key
            value: Serialized value
            
        Raises:
            Exception: Backend-specific failure (quota, disk, connection)
        """
        pass
    
    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove a key. Deleting an absent key is not an error.
        
        Args:
            key: Storage key
        """
        pass
    
    @abstractmethod
    def keys(self, prefix: str = "") -> List[str]:
        """
        List stored keys.
        
        Args:
            prefix: Only return keys starting with this prefix
            
        Returns:
            List of matching keys
        """
        pass
