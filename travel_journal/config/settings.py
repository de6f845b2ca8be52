"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for storage, geocoding and logging.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional
from enum import Enum
from pathlib import Path


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class StorageBackend(str, Enum):
    """Where the profile blob lives"""
    MEMORY = "memory"
    FILE = "file"
    REDIS = "redis"


class StorageSettings(BaseSettings):
    """Blob store configuration"""

    backend: StorageBackend = Field(default=StorageBackend.FILE)
    data_dir: str = Field(default="data", description="Directory for the file backend")
    profile_key: str = Field(default="profile")
    first_launch_key: str = Field(default="first-launch")
    recent_searches_key: str = Field(default="recent_searches")

    @field_validator('backend', mode='before')
    @classmethod
    def normalize_backend(cls, v):
        """Accept backend names in any case"""
        if isinstance(v, str):
            return StorageBackend(v.lower())
        return v

    def get_data_dir(self) -> Path:
        """Get absolute path for the file backend"""
        return Path(self.data_dir).resolve()

    model_config = {"env_prefix": "STORAGE_"}


class RedisSettings(BaseSettings):
    """Redis blob store configuration"""

    host: str = Field(default="localhost")
    port: int = Field(default=6379, ge=1, le=65535)
    password: Optional[str] = Field(default=None)
    db: int = Field(default=0, ge=0, le=15)
    socket_timeout: int = Field(default=5, ge=1, le=30)
    key_prefix: str = Field(default="travel_journal:")

    @property
    def url(self) -> str:
        """Generate Redis URL from configuration"""
        auth = f":{self.password}@" if self.password else ""
        return f"redis://{auth}{self.host}:{self.port}/{self.db}"

    model_config = {"env_prefix": "REDIS_"}


class MapsSettings(BaseSettings):
    """Geocoding / place search provider configuration"""

    base_url: str = Field(default="https://nominatim.openstreetmap.org")
    user_agent: str = Field(default="travel-journal/1.0")
    timeout_seconds: float = Field(default=10.0, gt=0, le=60)
    search_span_m: float = Field(default=50000.0, gt=0, description="Edge of the search box around a center")
    nearby_span_m: float = Field(default=10000.0, gt=0)
    max_results: int = Field(default=20, ge=1, le=50)

    model_config = {
        "env_prefix": "MAPS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="Travel Journal")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="json", pattern="^(json|text)$")

    # Domain Configuration
    home_country: str = Field(default="USA", min_length=1)
    recent_visited_limit: int = Field(default=3, ge=1, le=100)
    recent_search_limit: int = Field(default=10, ge=1, le=100)

    # Nested Settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    maps: MapsSettings = Field(default_factory=MapsSettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings
