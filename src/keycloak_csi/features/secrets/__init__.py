"""Secrets feature: client secret resolution against Keycloak.

Exports the Keycloak-backed ClientSecretGetter implementation and the
entities and payload models it works with.
"""

from .adapters import KeycloakSecretFetcher
from .entities import AccessToken
from .models import ClientRepresentation, ClientSecretResponse, TokenResponse

__all__ = [
    "KeycloakSecretFetcher",
    "AccessToken",
    "TokenResponse",
    "ClientRepresentation",
    "ClientSecretResponse",
]
