"""Environment-driven settings for the archive catalog.

Values come from ``ARCHIVE_``-prefixed environment variables or a ``.env``
file in the working directory.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class ArchiveSettings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ARCHIVE_",
        env_file=".env",
        extra="ignore",
    )

    secret_key: str = "dev-secret-key-change-in-production"
    debug: bool = False
    allowed_hosts: str = "localhost,127.0.0.1"
    log_level: str = "INFO"

    # sqlite for local work, postgresql in deployment
    database_engine: Literal["sqlite", "postgresql"] = "sqlite"
    sqlite_path: Path = BASE_DIR / "db.sqlite3"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "archive"
    postgres_password: str = ""
    postgres_db: str = "archive"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def allowed_host_list(self) -> list[str]:
        return [host.strip() for host in self.allowed_hosts.split(",") if host.strip()]

    def database(self) -> dict:
        """Django DATABASES["default"] entry for the configured engine."""
        if self.database_engine == "postgresql":
            return {
                "ENGINE": "django.db.backends.postgresql",
                "HOST": self.postgres_host,
                "PORT": self.postgres_port,
                "USER": self.postgres_user,
                "PASSWORD": self.postgres_password,
                "NAME": self.postgres_db,
            }
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": str(self.sqlite_path),
        }


@lru_cache
def get_settings() -> ArchiveSettings:
    return ArchiveSettings()
