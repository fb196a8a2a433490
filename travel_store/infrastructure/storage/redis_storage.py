"""Redis-based storage implementation."""
import logging
from typing import Optional, List
import redis

from travel_store.domain.interfaces.storage import IKeyValueStorage


class RedisStorage(IKeyValueStorage):
    """
    Redis-based storage medium.
    
    Follows Repository Pattern and Single Responsibility Principle.
    Keys are namespaced with a prefix so several stores can share one database.
    Values are stored without TTL; session expiry is checked on read.
    """
    
    def __init__(self, redis_client: redis.Redis, key_prefix: str = "travel:"):
        """
        Initialize the Redis storage.
        
        Args:
            redis_client: Redis client instance, usually from RedisClientFactory (Dependency Injection)
            key_prefix: Prefix prepended to every key
        """
        self.redis = redis_client
        self._logger = logging.getLogger(__name__)
        self._key_prefix = key_prefix
    
    def _get_key(self, key: str) -> str:
        """Generate Redis key for a storage key."""
        return f"{self._key_prefix}{key}"
    
    def _require_client(self) -> redis.Redis:
        if not self.redis:
            raise RuntimeError("Redis not available - storage is unusable")
        return self.redis
    
    def read(self, key: str) -> Optional[str]:
        """Read a value from Redis; failures propagate to the caller."""
        client = self._require_client()
        try:
            value = client.get(self._get_key(key))
        except redis.RedisError as e:
            self._logger.error(f"Error reading {key} from Redis: {e}")
            raise
        
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value
    
    def write(self, key: str, value: str) -> None:
        """Write a value to Redis; failures propagate to the caller."""
        client = self._require_client()
        try:
            client.set(self._get_key(key), value)
            self._logger.debug(f"Wrote {len(value)} chars to {key}")
        except redis.RedisError as e:
            self._logger.error(f"Failed to write {key} to Redis: {e}")
            raise
    
    def delete(self, key: str) -> None:
        """Delete a key from Redis."""
        client = self._require_client()
        try:
            client.delete(self._get_key(key))
        except redis.RedisError as e:
            self._logger.error(f"Failed to delete {key} from Redis: {e}")
            raise
    
    def keys(self, prefix: str = "") -> List[str]:
        """List keys under this store's namespace; failures propagate to the caller."""
        client = self._require_client()
        pattern = f"{self._key_prefix}{prefix}*"
        try:
            raw_keys = list(client.scan_iter(match=pattern))
        except redis.RedisError as e:
            self._logger.error(f"Error listing keys from Redis: {e}")
            raise
        
        result = []
        for raw_key in raw_keys:
            if isinstance(raw_key, bytes):
                raw_key = raw_key.decode("utf-8")
            result.append(raw_key[len(self._key_prefix):])
        return result
