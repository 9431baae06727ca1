"""Centralized application settings loaded from environment variables.

All configuration is defined once here. Other modules should import
``get_settings()`` rather than calling ``os.getenv()`` directly.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide configuration backed by environment variables.

    Field names are **lowercased** versions of the env-var names.
    ``pydantic-settings`` maps them automatically (case-insensitive).

    Example::

        settings = Settings()  # reads .env + real env
        dsn = settings.build_connection_string()
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- PostgreSQL --------------------------------------------------------

    pg_host: str = "localhost"
    """Database server hostname."""

    pg_port: int = 5432
    """Database server port."""

    pg_user: str = "development"
    """Login role."""

    pg_password: str = "development"
    """Login password."""

    pg_database: str = "lightbnb"
    """Target database name."""

    odbc_driver: str = "PostgreSQL Unicode"
    """Name of the installed PostgreSQL ODBC driver."""

    # -- Pool --------------------------------------------------------------

    pool_min_size: int = 1
    """Connections opened when the pool is created."""

    pool_max_size: int = 10
    """Upper bound on pooled connections."""

    # -- Queries -----------------------------------------------------------

    default_result_limit: int = 10
    """Row cap used by list lookups when the caller gives none."""

    city_match_case_insensitive: bool = False
    """Match the city filter with ILIKE instead of LIKE."""

    # -- Operational -------------------------------------------------------

    log_level: str = "INFO"
    """Root log level applied by ``configure_logging``."""

    log_sql_params: bool = False
    """Include bound parameter values in SQL logs."""

    def build_connection_string(self) -> str:
        """Assemble the ODBC connection string for the configured database.

        Returns:
            A DSN string accepted by ``aioodbc.create_pool``.
        """
        return (
            f"DRIVER={{{self.odbc_driver}}};"
            f"SERVER={self.pg_host};"
            f"PORT={self.pg_port};"
            f"DATABASE={self.pg_database};"
            f"UID={self.pg_user};"
            f"PWD={self.pg_password};"
        )


def get_settings() -> Settings:
    """Return a cached ``Settings`` instance.

    Uses a module-level singleton so the ``.env`` file is read at most
    once per process.

    Returns:
        The global ``Settings`` object.
    """
    return _settings


_settings = Settings()
