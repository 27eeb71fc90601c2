"""Keycloak API payload models."""

from .keycloak_models import ClientRepresentation, ClientSecretResponse, TokenResponse

__all__ = [
    "TokenResponse",
    "ClientRepresentation",
    "ClientSecretResponse",
]
