"""Local persistence store for the traveler social platform."""
import logging
import sys
from typing import Optional

from travel_store.config.settings import Config, get_config
from travel_store.application.services.local_store import LocalStore
from travel_store.infrastructure.service_container import ServiceContainer


def create_store(config_class: Optional[type[Config]] = None) -> LocalStore:
    """
    Create and configure a LocalStore with dependency injection.
    
    Args:
        config_class: Optional configuration class (for testing)
        
    Returns:
        Configured LocalStore
    """
    config = config_class or get_config()
    _configure_logging(config)
    _logger = logging.getLogger(__name__)
    
    config.validate()
    _initialize_error_tracking(config)
    
    container = ServiceContainer(config)
    store = container.get_store()
    _logger.info(f"Store ready with {config.STORAGE_BACKEND} backend")
    return store


def _configure_logging(config: type[Config]) -> None:
    """Configure package logging."""
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )


def _initialize_error_tracking(config: type[Config]) -> None:
    """Initialize Sentry if a DSN is configured."""
    if not config.SENTRY_DSN:
        return
    
    import sentry_sdk
    
    sentry_sdk.init(
        dsn=config.SENTRY_DSN,
        traces_sample_rate=0.1,
        environment="development" if config.DEBUG else "production",
    )
    logging.getLogger(__name__).info("Sentry error tracking initialized")


__all__ = ["create_store", "LocalStore", "ServiceContainer", "Config", "get_config"]
