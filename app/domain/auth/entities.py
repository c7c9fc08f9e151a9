"""
Domain entities for the auth bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


@dataclass(frozen=True)
class User:
    """A registered account.

    The username is the identity key. ``password`` always holds the
    hash produced by the Crypto port, never the raw secret.
    """

    username: str
    password: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def claims(self) -> dict[str, str]:
        """Return the public part of the record, safe to embed in a token."""
        return {"username": self.username, "email": self.email}


@dataclass(frozen=True)
class Portfolio:
    """A named portfolio created through the portfolio endpoint."""

    name: str
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None
