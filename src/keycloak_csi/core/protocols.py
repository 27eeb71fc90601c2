"""Protocol interfaces shared across features."""

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClientSecretGetter(Protocol):
    """Protocol for identity backends that hand out client secrets."""

    @abstractmethod
    async def fetch(self, client_name: str) -> bytes:
        """Return the secret of the client registered under ``client_name``."""
        ...
