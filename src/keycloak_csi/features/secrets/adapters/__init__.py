"""Identity backend adapters for the secrets feature."""

from .keycloak_secret_fetcher import KeycloakSecretFetcher

__all__ = ["KeycloakSecretFetcher"]
