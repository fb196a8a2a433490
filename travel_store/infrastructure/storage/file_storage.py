"""JSON-file storage implementation."""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from travel_store.domain.interfaces.storage import IKeyValueStorage


class JsonFileStorage(IKeyValueStorage):
    """
    Storage medium kept in a single JSON object file.
    
    Each write rewrites the whole file through a temporary file and
    ``os.replace`` so a crash never leaves a half-written file behind.
    Single writer only: two processes sharing one file lose updates.
    """
    
    def __init__(self, path: Union[str, Path]):
        """
        Initialize the file storage.
        
        Args:
            path: Location of the JSON file (created on first write)
        """
        self.path = Path(path)
        self._logger = logging.getLogger(__name__)
    
    def _load(self, strict: bool = False) -> Dict[str, Any]:
        """
        Load the whole medium.
        
        A missing file is empty. An unreadable or malformed file is empty
        for lookups, but with ``strict`` the error propagates so a write
        never replaces keys it could not read.
        """
        if not self.path.exists():
            return {}
        
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        except (OSError, ValueError) as e:
            if strict:
                self._logger.error(f"Refusing to rewrite unreadable storage file {self.path}: {e}")
                raise
            self._logger.warning(f"Could not read storage file {self.path}: {e}")
            return {}
        
        return data
    
    def _dump(self, data: Dict[str, Any]) -> None:
        """Atomically replace the file contents."""
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        
        fd, tmp_path = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=str(directory))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle)
            os.replace(tmp_path, self.path)
        except OSError as e:
            self._logger.error(f"Failed to write storage file {self.path}: {e}")
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
    
    def read(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None
    
    def write(self, key: str, value: str) -> None:
        data = self._load(strict=True)
        data[key] = value
        self._dump(data)
        self._logger.debug(f"Wrote {len(value)} chars to {key} in {self.path}")
    
    def delete(self, key: str) -> None:
        data = self._load(strict=True)
        if key in data:
            del data[key]
            self._dump(data)
    
    def keys(self, prefix: str = "") -> List[str]:
        return [key for key in self._load() if key.startswith(prefix)]
