"""Application configuration via environment variables."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from .exceptions import MissingCredentialError, StorageError

APP_DIR_NAME = "godspeed-cli"

# Default timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = 10.0
DEFAULT_BASE_URL = "https://api.godspeedapp.com"


def _default_data_dir() -> Path:
    """Resolve the per-user data directory following the XDG convention."""
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        base = Path(xdg)
    elif os.environ.get("HOME"):
        base = Path(os.environ["HOME"]) / ".local" / "share"
    else:
        base = Path(".local") / "share"
    return base / APP_DIR_NAME


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Godspeed API
    api_key: str = Field("", validation_alias="GODSPEED_API")
    api_base_url: str = DEFAULT_BASE_URL
    request_timeout: float = DEFAULT_TIMEOUT

    # Storage
    data_dir: Path = Field(default_factory=_default_data_dir)

    # Behaviour
    notifications: bool = True
    resolve_labels: bool = True  # Off: send label names instead of ids
    titlecase_labels: bool = False
    debug: bool = False

    class Config:
        env_prefix = "GODSPEED_"
        env_file = ".env"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"

    @property
    def lists_path(self) -> Path:
        return self.data_dir / "lists.toml"

    @property
    def labels_path(self) -> Path:
        return self.data_dir / "labels.toml"

    @property
    def queue_path(self) -> Path:
        return self.data_dir / "cache"

    def require_api_key(self) -> str:
        """Return the API key or raise if it isn't configured."""
        if not self.api_key:
            raise MissingCredentialError("GODSPEED_API environment variable not set")
        return self.api_key


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings once per process."""
    return Settings()


def ensure_directories(settings: Settings) -> None:
    """Create the data directory holding caches and the retry queue."""
    try:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Failed to create directories: {e}") from e
