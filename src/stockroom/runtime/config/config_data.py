"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class CORSConfig(BaseModel):
    """CORS configuration for the HTTP API."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PATCH", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class AppConfig(BaseModel):
    """Application-wide settings."""

    name: str = Field(default="stockroom", description="Application name")
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Deployment environment"
    )
    host: str = Field(default="127.0.0.1", description="Host the HTTP API binds to")
    port: int = Field(default=8000, description="Port the HTTP API binds to")
    cors: CORSConfig = Field(default_factory=CORSConfig)


class DatabaseConfig(BaseModel):
    """Database connection configuration."""

    url: str = Field(
        default="sqlite:///./stockroom.db", description="SQLAlchemy database URL"
    )
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(
        default=10, description="Connections allowed beyond pool_size"
    )
    pool_timeout: int = Field(
        default=30, description="Seconds to wait for a pooled connection"
    )
    pool_recycle: int = Field(
        default=1800, description="Seconds before a connection is recycled"
    )
    echo: bool = Field(default=False, description="Echo SQL statements")

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def is_in_memory(self) -> bool:
        """True for SQLite URLs that never touch the filesystem."""
        return self.is_sqlite and (
            self.url in ("sqlite://", "sqlite:///") or ":memory:" in self.url
        )


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Minimum log level")
    format: Literal["plain", "json"] = Field(
        default="plain", description="Format used by the file sink"
    )
    file: str | None = Field(default=None, description="Optional log file path")
    max_size_mb: int = Field(default=10, description="Rotate the log file at this size")
    backup_count: int = Field(default=5, description="Rotated log files to keep")


class ConfigData(BaseModel):
    """Root configuration model for the `config` section of config.yaml."""

    app: AppConfig = Field(default_factory=AppConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
