"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults match a local MySQL install with the
``bdusuarios`` database and an HTTP listener on port 3000.  Override
them via environment variables in any other deployment.
"""

import os
from dataclasses import dataclass, field
from urllib.parse import quote_plus


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Usuarios API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))

    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "3000")))

    # Connection parameters for the relational store.  ``database_url``
    # takes precedence when set, which lets tests or other deployments
    # point at a different SQLAlchemy dialect.
    db_host: str = field(default_factory=lambda: _env("DB_HOST", "localhost"))
    db_port: int = field(default_factory=lambda: int(_env("DB_PORT", "3306")))
    db_user: str = field(default_factory=lambda: _env("DB_USER", "root"))
    db_password: str = field(default_factory=lambda: _env("DB_PASSWORD", ""))
    db_name: str = field(default_factory=lambda: _env("DB_NAME", "bdusuarios"))
    database_url: str = field(default_factory=lambda: _env("DATABASE_URL", ""))

    @property
    def sqlalchemy_url(self) -> str:
        """Return the URL handed to ``sqlalchemy.create_engine``."""
        if self.database_url:
            return self.database_url
        credentials = quote_plus(self.db_user)
        if self.db_password:
            credentials += ":" + quote_plus(self.db_password)
        return (
            f"mysql+pymysql://{credentials}@{self.db_host}:{self.db_port}/"
            f"{self.db_name}?charset=utf8mb4"
        )


def get_settings() -> Settings:
    """Build a fresh ``Settings`` from the current environment."""
    return Settings()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = get_settings()
