"""Configuration management for the Community Hub backend.

Uses Pydantic Settings for type-safe, environment-based configuration.
"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMATS = ("text", "json")


def _repo_root_from_this_file() -> Path:
    """Resolve repository root: <repo>/backend/src/community_hub/core/config.py -> <repo>."""
    here = Path(__file__).resolve()
    src_dir = here.parents[2]  # .../src
    candidate_parent = src_dir.parent  # repo/app or backend
    return candidate_parent.parent if candidate_parent.name == "backend" else candidate_parent


def _default_database_url() -> str:
    backend_dir = _repo_root_from_this_file() / "backend"
    return f"sqlite+aiosqlite:///{backend_dir / 'database.db'}"


def _resolve_against_repo_root(value: str) -> str:
    p = Path(value)
    if p.is_absolute():
        return str(p)
    return str((_repo_root_from_this_file() / p).resolve())


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # App configuration
    app_name: str = Field("Community Hub", alias="HUB_APP_NAME")
    version: str = Field("0.1.0", alias="HUB_APP_VERSION")
    debug: bool = Field(False, alias="HUB_DEBUG")
    environment: str = Field("development", alias="HUB_ENVIRONMENT")

    # API configuration
    api_prefix: str = "/api"
    api_host: str = Field("127.0.0.1", alias="HUB_API_HOST")
    api_port: int = Field(4000, alias="HUB_API_PORT")

    # Database configuration
    database_url: str = Field(default_factory=_default_database_url, alias="HUB_DATABASE_URL")
    database_echo: bool = Field(False, alias="HUB_DATABASE_ECHO")
    # Seconds a SQLite connection waits for the write lock before giving up
    database_busy_timeout: float = Field(15.0, alias="HUB_DATABASE_BUSY_TIMEOUT")
    # Pool sizing only applies to server databases; SQLite uses the dialect default pool
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Plugin creation writes the plugin row and its tag links in one transaction.
    # When disabled, the plugin commits first and each tag link commits on its own.
    atomic_plugin_create: bool = Field(True, alias="HUB_ATOMIC_PLUGIN_CREATE")

    # Logging configuration
    log_level: str = Field("INFO", alias="HUB_LOG_LEVEL")
    log_format: str = Field("text", alias="HUB_LOG_FORMAT")  # text or json
    log_dir: str = Field("./data/logs", alias="HUB_LOG_DIR")

    # Security / HTTP configuration
    allowed_origins: list[str] = Field(default=["*"], alias="HUB_ALLOWED_ORIGINS")

    # Static front-end pages
    public_dir: str = Field("./public", alias="HUB_PUBLIC_DIR")

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def _validate_log_format(cls, v: str) -> str:
        fmt = str(v).lower()
        if fmt not in _LOG_FORMATS:
            raise ValueError(f"Log format must be one of {', '.join(_LOG_FORMATS)}")
        return fmt

    @field_validator("log_dir", "public_dir", mode="before")
    @classmethod
    def _resolve_dirs(cls, v: str) -> str:
        return _resolve_against_repo_root(v)

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured store is a SQLite file."""
        return self.database_url.startswith("sqlite")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra environment variables instead of forbidding them
    )


def get_settings() -> Settings:
    """Build a fresh settings instance from the environment."""
    return Settings()  # type: ignore[call-arg]


# Global settings instance - will be created when first accessed
settings = None


def get_settings_instance() -> Settings:
    """Get the global settings instance, creating it if necessary."""
    global settings  # noqa: PLW0603
    if settings is None:
        settings = get_settings()
    return settings


def reset_settings_instance() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global settings  # noqa: PLW0603
    settings = None
