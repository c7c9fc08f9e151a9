"""
Data Transfer Objects for the auth application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class LoginDto:
    """Input DTO for logging in.

    Attributes:
        username: Account identifier.
        password: Raw password as typed by the user.
    """

    username: str
    password: str

    def as_request(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SignUpDto:
    """Input DTO for registering a new account.

    Attributes:
        username: Desired account identifier (3-24 chars).
        password: Raw password (at least 8 chars).
        email: Contact address, unique per account.
    """

    username: str
    password: str
    email: str

    def as_request(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CreatePortfolioDto:
    """Input DTO for creating a portfolio.

    Attributes:
        name: Display name (at most 50 chars).
    """

    name: str

    def as_request(self) -> dict[str, Any]:
        return asdict(self)
