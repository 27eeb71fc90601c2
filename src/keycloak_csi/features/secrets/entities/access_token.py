"""Admin access token entity."""

from dataclasses import dataclass
from datetime import datetime, timedelta

# Fraction of the reported lifetime the token is trusted for.
TOKEN_LIFETIME_FRACTION = 0.75


@dataclass(frozen=True)
class AccessToken:
    """Bearer token for the Keycloak admin API together with its local expiry."""

    value: str
    expires_at: datetime

    def __repr__(self) -> str:
        return f"AccessToken(value='***', expires_at={self.expires_at.isoformat()})"

    @classmethod
    def issued(cls, value: str, expires_in: int, now: datetime) -> "AccessToken":
        """Build a token issued at ``now`` that Keycloak reports valid for ``expires_in`` seconds."""
        return cls(
            value=value,
            expires_at=now + timedelta(seconds=expires_in * TOKEN_LIFETIME_FRACTION),
        )

    def is_expired(self, now: datetime) -> bool:
        """Check if the token must be refreshed before use."""
        return now >= self.expires_at
