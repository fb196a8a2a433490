"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from datetime import timedelta
from typing import Optional

from travel_store.config.settings import Config, get_config
from travel_store.domain.interfaces.storage import IKeyValueStorage
from travel_store.application.services.local_store import LocalStore
from travel_store.application.services.authentication_service import AuthenticationService
from travel_store.application.services.engagement_service import EngagementService
from travel_store.application.services.ticket_service import TicketService
from travel_store.infrastructure.storage.factory import StorageFactory


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.
    
    Follows Singleton pattern and Dependency Inversion Principle.
    Uses Factory Pattern to create the storage medium based on configuration.
    """
    
    _instance: Optional['ServiceContainer'] = None
    _config: Optional[type[Config]] = None
    _storage: Optional[IKeyValueStorage] = None
    _store: Optional[LocalStore] = None
    _authentication_service: Optional[AuthenticationService] = None
    _engagement_service: Optional[EngagementService] = None
    _ticket_service: Optional[TicketService] = None
    
    def __new__(cls, config: Optional[type[Config]] = None):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    
    def __init__(self, config: Optional[type[Config]] = None):
        """Initialize service container."""
        self._logger = logging.getLogger(__name__)
        if config is not None:
            ServiceContainer._config = config
        elif ServiceContainer._config is None:
            ServiceContainer._config = get_config()
    
    @property
    def config(self) -> type[Config]:
        return ServiceContainer._config
    
    def get_storage(self) -> IKeyValueStorage:
        """Get or create the storage medium."""
        if ServiceContainer._storage is None:
            try:
                ServiceContainer._storage = StorageFactory.from_config(self.config)
                self._logger.info(f"Storage created with {self.config.STORAGE_BACKEND} backend")
            except Exception as e:
                self._logger.error(f"Failed to create storage: {e}")
                raise
        return ServiceContainer._storage
    
    def get_store(self) -> LocalStore:
        """Get or create the local store."""
        if ServiceContainer._store is None:
            ServiceContainer._store = LocalStore(
                storage=self.get_storage(),
                session_ttl=timedelta(days=self.config.SESSION_TTL_DAYS),
                enforce_one_way_status=self.config.ENFORCE_ONE_WAY_STATUS,
                cache_files=self.config.CACHE_FILES,
            )
            self._logger.info("LocalStore created")
        return ServiceContainer._store
    
    def get_authentication_service(self) -> AuthenticationService:
        if ServiceContainer._authentication_service is None:
            ServiceContainer._authentication_service = AuthenticationService(self.get_store())
        return ServiceContainer._authentication_service
    
    def get_engagement_service(self) -> EngagementService:
        if ServiceContainer._engagement_service is None:
            ServiceContainer._engagement_service = EngagementService(self.get_store())
        return ServiceContainer._engagement_service
    
    def get_ticket_service(self) -> TicketService:
        if ServiceContainer._ticket_service is None:
            ServiceContainer._ticket_service = TicketService(self.get_store())
        return ServiceContainer._ticket_service
    
    @classmethod
    def reset(cls) -> None:
        """Reset all service instances (useful for testing)."""
        cls._instance = None
        cls._config = None
        cls._storage = None
        cls._store = None
        cls._authentication_service = None
        cls._engagement_service = None
        cls._ticket_service = None
