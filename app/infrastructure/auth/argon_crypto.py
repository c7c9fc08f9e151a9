"""
Adapter: argon2 credential hashing.

Implements the Crypto port with argon2-cffi. Hashing is CPU bound,
so both operations run in a worker thread to keep the event loop free.
"""

import asyncio

from argon2 import PasswordHasher
from argon2.exceptions import HashingError, InvalidHashError, VerificationError, VerifyMismatchError

from app.domain.auth.errors import CryptoError
from app.domain.auth.ports import Crypto


class Argon2Crypto(Crypto):
    """Argon2id hashing with the library's default cost parameters."""

    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        self._hasher = hasher or PasswordHasher()

    async def hash(self, raw: str) -> str:
        try:
            return await asyncio.to_thread(self._hasher.hash, raw)
        except HashingError as exc:
            raise CryptoError("Could not hash the provided string") from exc

    async def compare(self, raw: str, hashed: str) -> bool:
        """Return True when raw matches hashed, False on a plain mismatch.

        Raises:
            CryptoError: If hashed is not a valid argon2 hash or
                verification fails for a reason other than a mismatch.
        """
        try:
            return await asyncio.to_thread(self._hasher.verify, hashed, raw)
        except VerifyMismatchError:
            return False
        except (InvalidHashError, VerificationError) as exc:
            raise CryptoError("Plain string could not be verified against hash") from exc
