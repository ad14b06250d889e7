"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

# Async drivers used for the dialect names accepted in DIALECT.
DIALECT_DRIVERS = {
    "postgres": "postgresql+asyncpg",
    "postgresql": "postgresql+asyncpg",
    "sqlite": "sqlite+aiosqlite",
}

# =====================================================================
# Database Configuration Model
# =====================================================================


class DatabaseConfig(BaseModel):
    """Relational database connection parameters."""

    dialect: str = Field(default="postgres", description="Database dialect (postgres, sqlite, ...)")
    host: str = Field(default="localhost", description="Database host address")
    port: int = Field(default=5432, description="Database port number")
    user: str = Field(default="postgres", description="Database user")
    name: str = Field(default="postgres", description="Database name, or file path for sqlite")
    password: SecretStr = Field(default=SecretStr(""), description="Database password")

    @property
    def driver(self) -> str:
        """SQLAlchemy driver name for the configured dialect."""
        return DIALECT_DRIVERS.get(self.dialect.lower(), self.dialect)

    def to_url(self) -> str:
        """Compose the SQLAlchemy connection URL.

        Returns:
            Connection URL string, password included.
        """
        if self.driver.startswith("sqlite"):
            return f"{self.driver}:///{self.name}"
        url = URL.create(
            self.driver,
            username=self.user or None,
            password=self.password.get_secret_value() or None,
            host=self.host or None,
            port=self.port,
            database=self.name or None,
        )
        return url.render_as_string(hide_password=False)


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Server host address to bind to",
        alias="SERVER_HOST",
    )
    server_port: int = Field(
        default=8080,
        description="Server port number",
        alias="SERVER_PORT",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="LOG_FORMAT",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write logs to LOG_FILE_DIR",
        alias="ENABLE_FILE_LOGGING",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file",
        alias="LOG_FILE_DIR",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    dialect: str = Field(default="postgres", alias="DIALECT", description="Database dialect")
    host: str = Field(default="localhost", alias="HOST", description="Database host address")
    db_port: int = Field(default=5432, alias="DBPORT", description="Database port number")
    user: str = Field(default="postgres", alias="USER", description="Database user")
    name: str = Field(default="postgres", alias="NAME", description="Database name")
    password: SecretStr = Field(default=SecretStr(""), alias="PASSWORD", description="Database password")
    database_url_override: Optional[str] = Field(
        default=None,
        alias="DATABASE_URL",
        description="Full connection URL; takes precedence over the individual DB variables",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration from environment variables."""
        return DatabaseConfig(
            dialect=self.dialect,
            host=self.host,
            port=self.db_port,
            user=self.user,
            name=self.name,
            password=self.password,
        )

    @property
    def database_url(self) -> str:
        """Connection URL used by the engine."""
        return self.database_url_override or self.database.to_url()


settings = Settings()
