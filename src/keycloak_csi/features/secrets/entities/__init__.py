"""Secrets feature entities."""

from .access_token import TOKEN_LIFETIME_FRACTION, AccessToken

__all__ = ["AccessToken", "TOKEN_LIFETIME_FRACTION"]
