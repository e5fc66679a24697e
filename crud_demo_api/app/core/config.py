"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
demo server starts without any setup; override them via environment
variables when running on another host or port.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "CRUD Demo API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Base URL quoted in usage hints and example curl commands.  When
    # unset it is derived from ``port`` in ``__post_init__``.
    public_url: str = os.getenv("PUBLIC_URL", "")

    # Roles permitted to call ``DELETE /secure/resource``.  Example:
    # ALLOWED_ROLES="admin,owner".
    allowed_roles: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("ALLOWED_ROLES", "admin"))
    )

    # Client side defaults used by ``crud_demo_client``.
    client_base_url: str = os.getenv("DEMO_API_BASE_URL", "http://localhost:3000")
    client_timeout: float = float(os.getenv("DEMO_API_TIMEOUT", "15"))

    def __post_init__(self) -> None:
        if not self.public_url:
            self.public_url = f"http://localhost:{self.port}"
        self.public_url = self.public_url.rstrip("/")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
