"""Client configuration and logging setup.

Settings come from environment variables prefixed ``STOREFRONT_`` or a
``.env`` file in the working directory, e.g.::

    STOREFRONT_API_BASE_URL=http://localhost:8080/api
    STOREFRONT_DATA_DIRECTORY=/tmp/storefront
    STOREFRONT_DEBUG=true
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # BACKEND
    # ==========================================================================

    api_base_url: str = Field(
        default="http://api.sjtechnology.lk/api",
        description="Base URL of the restaurant REST backend",
    )
    request_timeout: float = Field(
        default=30.0,
        description="Seconds before an HTTP request is abandoned",
    )

    # ==========================================================================
    # LOCAL STORAGE
    # ==========================================================================

    data_directory: Path = Field(
        default=Path.home() / ".storefront",
        description="Directory holding the local storage file",
    )
    storage_filename: str = Field(
        default="storage.json",
        description="Key/value file for the token and the cart snapshot",
    )
    storage_lock_timeout: float = Field(
        default=10.0,
        description="Seconds to wait for the storage file lock",
    )
    token_key: str = Field(
        default="street_burger_jwt_token",
        description="Storage key of the authentication token",
    )
    cart_key: str = Field(
        default="@cart",
        description="Storage key of the cart snapshot",
    )

    # ==========================================================================
    # DEVICE
    # ==========================================================================

    push_token: Optional[str] = Field(
        default=None,
        description="Push notification token of this device, if any",
    )
    currency: str = Field(
        default="LKR",
        description="Currency the menu is priced in",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def storage_path(self) -> Path:
        return Path(self.data_directory).expanduser() / self.storage_filename


@lru_cache()
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(level: int = logging.WARNING, debug: bool = False) -> logging.Logger:
    """Configure application-wide logging.

    Logs go to stderr so they never mix with CLI output.
    """
    if debug:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s │ %(levelname)-8s │ %(name)-25s │ %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("filelock").setLevel(logging.WARNING)

    return logging.getLogger("storefront")
