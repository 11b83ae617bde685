from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # Application
    APP_NAME: str = Field(default="AS400 Catalog API")
    APP_VERSION: str = Field(default="0.1.0")

    # Environment
    ENV: str = Field(default="development")

    # Catalog database
    DATABASE_URL: str = Field(default="sqlite+aiosqlite:///data/svp_catalog.sqlite")
    DB_POOL_SIZE: int = Field(default=10, description="Database connection pool size")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Maximum connections beyond pool_size")
    DB_POOL_TIMEOUT: int = Field(default=30, description="Seconds to wait for connection from pool")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Recycle connections after N seconds")

    # AS400 host (SSH)
    AS400_HOST: Optional[str] = Field(default=None)
    AS400_PORT: int = Field(default=22)
    AS400_USER: Optional[str] = Field(default=None)
    AS400_PASSWORD: Optional[str] = Field(default=None, description="Password authentication when set")
    AS400_KEY_PATH: Optional[str] = Field(default=None, description="Private key file for public key authentication")
    AS400_KNOWN_HOSTS: Optional[str] = Field(
        default=None,
        description="known_hosts file used to verify the host key; unset skips verification",
    )
    COMMAND_TIMEOUT_SECONDS: float = Field(default=60.0, description="Remote command timeout in seconds")
    SSH_RETRY_ATTEMPTS: int = Field(default=3, description="Attempts on SSH connection failures")

    # Source members
    DEFAULT_SOURCE_FILE: str = Field(default="QFUENTES")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


settings = Settings()
