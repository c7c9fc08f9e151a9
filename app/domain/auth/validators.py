"""
Field validators for the auth bounded context.

Each handler checks exactly one key of an untyped request mapping and
then forwards to its successor. The first failure aborts the whole chain;
errors are never aggregated.

Handlers keep no per-request state, so a chain is built once at wiring
time and shared by every request.
"""

import re
from typing import Any, Mapping, Optional

from app.domain.auth.errors import InvalidParamError, MissingParamError
from app.domain.auth.ports import ChainHandler

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 24
PASSWORD_MIN_LENGTH = 8
PORTFOLIO_NAME_MAX_LENGTH = 50

EMAIL_PATTERN = re.compile(
    r'(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r"@"
    r"((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])"
    r"|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))"
)


class AbstractChainHandler(ChainHandler):
    """Base link: stores the successor and forwards to it."""

    def __init__(self) -> None:
        self._next: Optional[ChainHandler] = None

    def set_next(self, handler: ChainHandler) -> ChainHandler:
        self._next = handler
        return handler

    def handle(self, request: Mapping[str, Any]) -> None:
        if self._next is not None:
            self._next.handle(request)

    @staticmethod
    def _required(request: Mapping[str, Any], key: str) -> str:
        """Return the string under key or raise MissingParamError if empty."""
        value = request.get(key)
        if not value:
            raise MissingParamError(key)
        if not isinstance(value, str):
            raise InvalidParamError(f"{key} must be a string")
        return value


class UsernameValidatorChainHandler(AbstractChainHandler):
    """Username must be 3 to 24 characters long."""

    def handle(self, request: Mapping[str, Any]) -> None:
        username = self._required(request, "username")
        if len(username) < USERNAME_MIN_LENGTH:
            raise InvalidParamError(
                f"username must be at least {USERNAME_MIN_LENGTH} characters long"
            )
        if len(username) > USERNAME_MAX_LENGTH:
            raise InvalidParamError(
                f"username must be at most {USERNAME_MAX_LENGTH} characters long"
            )
        super().handle(request)


class PasswordValidatorChainHandler(AbstractChainHandler):
    """Password must be at least 8 characters long."""

    def handle(self, request: Mapping[str, Any]) -> None:
        password = self._required(request, "password")
        if len(password) < PASSWORD_MIN_LENGTH:
            raise InvalidParamError(
                f"password must be at least {PASSWORD_MIN_LENGTH} characters long"
            )
        super().handle(request)


class EmailValidatorChainHandler(AbstractChainHandler):
    """Email must look like local@domain.tld or local@[ip]."""

    def handle(self, request: Mapping[str, Any]) -> None:
        email = self._required(request, "email")
        if not EMAIL_PATTERN.fullmatch(email):
            raise InvalidParamError("email must be a valid email")
        super().handle(request)


class PortfolioNameValidatorChainHandler(AbstractChainHandler):
    """Portfolio name must be at most 50 characters long."""

    def handle(self, request: Mapping[str, Any]) -> None:
        name = self._required(request, "name")
        if len(name) > PORTFOLIO_NAME_MAX_LENGTH:
            raise InvalidParamError(
                f"name must be at most {PORTFOLIO_NAME_MAX_LENGTH} characters long"
            )
        super().handle(request)


def build_chain(*handlers: ChainHandler) -> ChainHandler:
    """Link handlers in the given order and return the head of the chain.

    Raises:
        ValueError: If no handler is given.
    """
    if not handlers:
        raise ValueError("a validation chain needs at least one handler")
    head = handlers[0]
    current = head
    for handler in handlers[1:]:
        current = current.set_next(handler)
    return head


def make_login_chain() -> ChainHandler:
    """Username then password."""
    return build_chain(
        UsernameValidatorChainHandler(),
        PasswordValidatorChainHandler(),
    )


def make_sign_up_chain() -> ChainHandler:
    """Username, password, then email."""
    return build_chain(
        UsernameValidatorChainHandler(),
        PasswordValidatorChainHandler(),
        EmailValidatorChainHandler(),
    )


def make_portfolio_chain() -> ChainHandler:
    return build_chain(PortfolioNameValidatorChainHandler())
