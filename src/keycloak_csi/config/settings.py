"""
Driver settings for keycloak-csi.

All values are read once at startup from the environment (or a ``.env`` file)
and treated as immutable for the lifetime of the process.
"""
import stat
from functools import lru_cache
from typing import Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Bits a materialized secret file may carry: read-only, at most world-readable.
ALLOWED_SECRET_MODE_BITS = stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH


class DriverSettings(BaseSettings):
    """Settings for the Keycloak CSI driver."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Server Configuration
    uds_path: str = Field(default="/csi/csi.sock", description="Path to the unix domain socket")
    host: Optional[str] = Field(default=None, description="TCP host, used when uds_path is empty")
    port: int = Field(default=8080, description="TCP port, used when uds_path is empty")
    request_timeout: float = Field(default=30.0, gt=0, description="Deadline for a publish call in seconds")

    # Keycloak Configuration
    keycloak_url: str = Field(default="", description="URL of the Keycloak instance")
    keycloak_realm: str = Field(default="master", description="Keycloak realm")
    keycloak_client_id: str = Field(default="k8s-csi-driver", description="The driver's own identity")
    keycloak_client_secret_file: str = Field(
        default="/etc/keycloak/password",
        description="Path to a file holding the password of keycloak_client_id",
    )
    keycloak_timeout: float = Field(default=10.0, gt=0, description="Timeout for requests to Keycloak in seconds")

    # Node Configuration
    node_id: str = Field(default="", description="Identifier reported by node info queries")
    secret_file_mode: int = Field(default=0o444, description="Permission bits for the client-secret file")

    @field_validator("secret_file_mode", mode="before")
    @classmethod
    def parse_secret_file_mode(cls, value: Union[str, int]) -> int:
        """Accept octal strings such as ``0440`` or ``0o440``."""
        if isinstance(value, str):
            value = value.strip().lower().removeprefix("0o")
            return int(value, 8)
        return value

    @field_validator("secret_file_mode")
    @classmethod
    def validate_secret_file_mode(cls, value: int) -> int:
        """Reject modes that are writable or wider than world-readable."""
        if value & ~ALLOWED_SECRET_MODE_BITS:
            raise ValueError(
                f"secret_file_mode {oct(value)} must be read-only and within {oct(ALLOWED_SECRET_MODE_BITS)}"
            )
        if not value & stat.S_IRUSR:
            raise ValueError(f"secret_file_mode {oct(value)} must be readable by its owner")
        return value

    @property
    def uses_unix_socket(self) -> bool:
        """Check if the server listens on a unix domain socket."""
        return bool(self.uds_path)


@lru_cache()
def get_settings() -> DriverSettings:
    """Get cached driver settings."""
    return DriverSettings()
