"""Store configuration with environment-based settings."""
import os
from typing import Optional
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""
    
    # Load environment variables
    load_dotenv()
    
    # Storage backend: "memory", "file" or "redis"
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "memory")
    STORAGE_FILE_PATH: str = os.getenv("STORAGE_FILE_PATH", "travel_store.json")
    
    # Redis Configuration
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    REDIS_KEY_PREFIX: str = os.getenv("REDIS_KEY_PREFIX", "travel:")
    
    # Session / store behaviour
    SESSION_TTL_DAYS: int = int(os.getenv("SESSION_TTL_DAYS", "7"))
    ENFORCE_ONE_WAY_STATUS: bool = os.getenv("ENFORCE_ONE_WAY_STATUS", "false").lower() == "true"
    CACHE_FILES: bool = os.getenv("CACHE_FILES", "false").lower() == "true"
    
    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    
    # Application
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    
    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        backends = ("memory", "file", "redis")
        if cls.STORAGE_BACKEND.lower() not in backends:
            raise ValueError(
                f"Unsupported STORAGE_BACKEND {cls.STORAGE_BACKEND!r}, expected one of: {', '.join(backends)}"
            )
        
        if cls.SESSION_TTL_DAYS <= 0:
            raise ValueError("SESSION_TTL_DAYS must be positive")
        
        if cls.STORAGE_BACKEND.lower() == "file" and not cls.STORAGE_FILE_PATH:
            raise ValueError("STORAGE_FILE_PATH is required for the file backend")


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    STORAGE_BACKEND = "memory"
    REDIS_URL = "redis://localhost:6379/15"  # Use different DB for tests
    ENFORCE_ONE_WAY_STATUS = False
    CACHE_FILES = False


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("TRAVEL_STORE_ENV", "development").lower()
    
    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }
    
    return config_map.get(env, DevelopmentConfig)
