"""Configuration for neutree-catalog using pydantic-settings.

Every setting can be supplied through the environment with the
``NEUTREE_CATALOG_`` prefix or through a ``.env`` file.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path
from urllib.parse import urlparse

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TransportMode(str, Enum):
    """MCP transport modes."""

    STDIO = "stdio"
    SSE = "sse"
    STREAMABLE_HTTP = "streamable-http"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class CatalogConfig(BaseSettings):
    """Settings shared by the hf2catalog CLI and the MCP server."""

    model_config = SettingsConfigDict(
        env_prefix="NEUTREE_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Hugging Face hub
    hub_endpoint: str = Field(
        default="https://huggingface.co",
        description="Base URL of the model hub",
    )
    hub_token: SecretStr | None = Field(
        default=None,
        description="Bearer token for gated or private repositories",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for the hub metadata request",
    )

    # Catalog index
    catalog_dir: Path = Field(
        default=Path("catalog"),
        description="Directory holding ModelCatalog YAML documents",
    )

    # Server
    transport: TransportMode = Field(default=TransportMode.STDIO)
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000, ge=1, le=65535)

    log_level: LogLevel = Field(default=LogLevel.INFO)

    @field_validator("hub_endpoint")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def hub_host(self) -> str:
        """Hostname accepted in repository URLs."""
        return urlparse(self.hub_endpoint).hostname or "huggingface.co"

    def auth_headers(self) -> dict[str, str]:
        """Headers for hub requests."""
        if self.hub_token is None:
            return {}
        return {"Authorization": f"Bearer {self.hub_token.get_secret_value()}"}


@lru_cache
def get_config() -> CatalogConfig:
    """Return the process-wide configuration."""
    return CatalogConfig()
