"""
Domain-specific errors for the auth bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class AuthDomainError(Exception):
    """Base error for all auth domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class MissingParamError(AuthDomainError):
    """Raised when a required request field is absent or empty."""

    def __init__(self, param: str) -> None:
        super().__init__(f"Missing param: {param}")
        self.param = param


class InvalidParamError(AuthDomainError):
    """Raised when a field is present but breaks a shape or length rule.

    Also used for credential mismatches on login.
    """


class DatabaseError(AuthDomainError):
    """Raised when the persistence layer rejects a write (e.g. duplicate username)."""


class CryptoError(AuthDomainError):
    """Raised when the hashing primitive fails internally."""


class TokenError(AuthDomainError):
    """Raised when an access token cannot be signed or decoded."""
