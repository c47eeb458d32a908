"""
CareBook Backend — Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py, the OpenAPI exporter and the uvicorn runner.
When:  Loaded once at module import time.

There is no database, API key or secret to configure: the stores live in
process memory, so the settings only cover the server, logging, CORS,
demo data and the documentation server list.
"""

from typing import List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for local development.
    """

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")

    # PORT is what most hosting platforms inject; BACKEND_PORT also works.
    backend_port: int = Field(
        default=3000,
        ge=1024,
        le=65535,
        validation_alias=AliasChoices("port", "backend_port"),
    )

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Demo Data ─────────────────────────────────────────────────────────
    # What: Start every store with the two demonstration records each
    # Turn off to boot with empty stores.
    seed_demo_data: bool = Field(default=True)

    # ── API Documentation ─────────────────────────────────────────────────
    # What: Optional public URL listed in the OpenAPI `servers` section,
    # ahead of the local development server.
    public_server_url: str = Field(default="")

    def openapi_servers(self) -> List[dict]:
        """Server entries for the generated OpenAPI document."""
        servers = []
        if self.public_server_url:
            servers.append(
                {"url": self.public_server_url, "description": "Production / Live API Server"}
            )
        servers.append(
            {
                "url": f"http://localhost:{self.backend_port}",
                "description": "Local development server",
            }
        )
        return servers

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


settings = Settings()
