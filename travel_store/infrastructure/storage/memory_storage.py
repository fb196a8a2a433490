"""In-memory storage implementation."""
import logging
from typing import Optional, Dict, List

from travel_store.domain.interfaces.storage import IKeyValueStorage


class InMemoryStorage(IKeyValueStorage):
    """
    Dictionary-backed storage medium.
    
    Nothing survives the process; used for tests and throwaway stores.
    """
    
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._logger = logging.getLogger(__name__)
    
    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)
    
    def write(self, key: str, value: str) -> None:
        self._data[key] = value
        self._logger.debug(f"Wrote {len(value)} chars to {key}")
    
    def delete(self, key: str) -> None:
        self._data.pop(key, None)
    
    def keys(self, prefix: str = "") -> List[str]:
        return [key for key in self._data if key.startswith(prefix)]
