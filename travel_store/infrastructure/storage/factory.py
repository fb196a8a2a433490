"""Factory for creating storage media (Factory Pattern)."""
import logging
from typing import Optional

from travel_store.config.settings import Config
from travel_store.domain.interfaces.storage import IKeyValueStorage
from travel_store.infrastructure.storage.memory_storage import InMemoryStorage
from travel_store.infrastructure.storage.file_storage import JsonFileStorage
from travel_store.infrastructure.storage.redis_storage import RedisStorage
from travel_store.infrastructure.redis_client import RedisClientFactory


logger = logging.getLogger(__name__)


class StorageFactory:
    """
    Factory for creating storage instances following Factory Pattern.
    
    Centralizes backend selection so callers only deal with IKeyValueStorage.
    """
    
    @staticmethod
    def create_storage(
        backend: str = "memory",
        file_path: Optional[str] = None,
        redis_url: Optional[str] = None,
        key_prefix: Optional[str] = None
    ) -> IKeyValueStorage:
        """
        Create a storage medium.
        
        Args:
            backend: "memory", "file" or "redis"
            file_path: JSON file location (file backend)
            redis_url: Redis connection URL (redis backend)
            key_prefix: Key namespace (redis backend)
            
        Returns:
            IKeyValueStorage instance
            
        Raises:
            ValueError: If backend type is not supported or the Redis URL is invalid
            redis.RedisError: If Redis was requested but is unreachable
        """
        backend = backend.lower()
        
        if backend == "memory":
            return InMemoryStorage()
        elif backend == "file":
            return JsonFileStorage(file_path or Config.STORAGE_FILE_PATH)
        elif backend == "redis":
            client = RedisClientFactory.get_client(redis_url or Config.REDIS_URL)
            return RedisStorage(
                redis_client=client,
                key_prefix=key_prefix if key_prefix is not None else Config.REDIS_KEY_PREFIX
            )
        else:
            raise ValueError(f"Unsupported storage backend: {backend}")
    
    @staticmethod
    def from_config(config: type[Config] = Config) -> IKeyValueStorage:
        """Create the storage medium described by a configuration class."""
        logger.info(f"Creating {config.STORAGE_BACKEND} storage")
        return StorageFactory.create_storage(
            backend=config.STORAGE_BACKEND,
            file_path=config.STORAGE_FILE_PATH,
            redis_url=config.REDIS_URL,
            key_prefix=config.REDIS_KEY_PREFIX,
        )
