"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field

DEFAULT_SIGNING_SECRET = "change-me-bookshelf-dev-secret"


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(default=["http://localhost:3000"])
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class JWTConfig(BaseModel):
    """JWT generation and validation configuration."""

    signing_secret: str = Field(
        default=DEFAULT_SIGNING_SECRET, description="Secret used to sign HS256 tokens"
    )
    algorithm: str = Field(default="HS256", description="Signing algorithm")
    allowed_algorithms: list[str] = Field(
        default_factory=lambda: ["HS256"],
        description="JWT algorithms allowed for token validation",
    )
    gen_issuer: str = Field(
        default="bookshelf-api", description="Issuer name to use when generating tokens"
    )
    audiences: list[str] = Field(
        default_factory=lambda: ["bookshelf"],
        description="JWT audiences that this API accepts",
    )
    access_token_lifetime: int = Field(
        default=300, description="Access token lifetime in seconds"
    )
    refresh_token_lifetime: int = Field(
        default=86400, description="Refresh token lifetime in seconds"
    )
    clock_skew: int = Field(default=60, description="Clock skew tolerance in seconds")


class AuthConfig(BaseModel):
    """Authorization policy for the book endpoints."""

    protect_books: bool = Field(
        default=False,
        description="Require a valid access token on every book endpoint",
    )
    password_hash_iterations: int = Field(
        default=600_000, gt=0, description="PBKDF2 iterations for new password hashes"
    )


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./bookshelf.db",
        description="Database connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def is_memory(self) -> bool:
        """True for ``sqlite://`` and ``sqlite:///:memory:`` URLs."""
        return self.is_sqlite and (
            self.url.rstrip("/") == "sqlite:" or ":memory:" in self.url
        )


class FrontendConfig(BaseModel):
    """Settings for the list view client."""

    api_base_url: str = Field(
        default="http://localhost:8000/api/",
        description="Base URL the list view fetches books from",
    )
    timeout: float = Field(default=10.0, description="HTTP timeout in seconds")


class AppConfig(BaseModel):
    """Application configuration model."""

    name: str = Field(default="Bookshelf API", description="Application title")
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )

    @property
    def base_url(self) -> str:
        """Construct the base URL from host and port."""
        scheme = "https" if self.environment == "production" else "http"
        return f"{scheme}://{self.host}:{self.port}"


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    jwt: JWTConfig = Field(
        default_factory=JWTConfig, description="JWT configuration"
    )
    auth: AuthConfig = Field(
        default_factory=AuthConfig, description="Authorization configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    frontend: FrontendConfig = Field(
        default_factory=FrontendConfig, description="Frontend client configuration"
    )
