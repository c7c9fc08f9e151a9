"""
Port interfaces (ABCs) for the auth bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from app.domain.auth.entities import Portfolio, User


class ChainHandler(ABC):
    """Port for a single link of a validation chain."""

    @abstractmethod
    def set_next(self, handler: "ChainHandler") -> "ChainHandler":
        """Attach the successor and return it, so calls can be chained."""
        raise NotImplementedError

    @abstractmethod
    def handle(self, request: Mapping[str, Any]) -> None:
        """Validate the request, raising on the first failure."""
        raise NotImplementedError


class Crypto(ABC):
    """Port for hashing and verifying credentials."""

    @abstractmethod
    async def hash(self, raw: str) -> str:
        """Return a salted hash of the raw string."""
        raise NotImplementedError

    @abstractmethod
    async def compare(self, raw: str, hashed: str) -> bool:
        """Return whether raw matches hashed.

        Raises:
            CryptoError: If the primitive itself fails.
        """
        raise NotImplementedError


class Token(ABC):
    """Port for signing access tokens."""

    @abstractmethod
    async def sign(self, payload: dict[str, Any]) -> str:
        """Sign the payload into an opaque token string.

        Raises:
            TokenError: If signing fails.
        """
        raise NotImplementedError


class UserRepository(ABC):
    """Port for persisting and retrieving users."""

    @abstractmethod
    async def find_one_by_username(self, username: str) -> Optional[User]:
        """Return the user registered under username, or None."""
        raise NotImplementedError

    @abstractmethod
    async def insert(self, user: User) -> User:
        """Persist a new user and return the stored record.

        Raises:
            DatabaseError: If the username or email is already registered.
        """
        raise NotImplementedError


class PortfolioRepository(ABC):
    """Port for persisting portfolios."""

    @abstractmethod
    async def insert(self, portfolio: Portfolio) -> Portfolio:
        """Persist a new portfolio and return the stored record."""
        raise NotImplementedError
