"""Core exceptions and protocols for keycloak-csi."""

from .protocols import ClientSecretGetter

__all__ = ["ClientSecretGetter"]
