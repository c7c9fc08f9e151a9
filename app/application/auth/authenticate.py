"""
Use case: Log a user in and issue an access token.

Input: LoginDto (username, password)
Output: access token string, or None when no such user exists
Side effects: None.
Failure cases: MissingParamError, InvalidParamError, CryptoError, TokenError.
"""

import logging
from typing import Optional

from app.application.auth.dtos import LoginDto
from app.domain.auth.errors import InvalidParamError
from app.domain.auth.ports import ChainHandler, Crypto, Token, UserRepository

logger = logging.getLogger(__name__)

BAD_CREDENTIALS_MESSAGE = "username or password is not correct"


class AuthUseCase:
    """Orchestrates login: validate, look up, compare, sign.

    An unknown username is not an error here; the caller receives
    None and decides how to present it.
    """

    def __init__(
        self,
        validator_chain: ChainHandler,
        user_repository: UserRepository,
        crypto: Crypto,
        token: Token,
    ) -> None:
        self._validator_chain = validator_chain
        self._user_repository = user_repository
        self._crypto = crypto
        self._token = token

    async def execute(self, dto: LoginDto) -> Optional[str]:
        """Run the login use case.

        Args:
            dto: The submitted credentials.

        Returns:
            A signed access token, or None if the username is unknown.

        Raises:
            MissingParamError: If username or password is empty.
            InvalidParamError: If a field breaks a length rule or the
                password does not match the stored hash.
        """
        self._validator_chain.handle(dto.as_request())

        user = await self._user_repository.find_one_by_username(dto.username)
        if user is None:
            logger.info("Login for unknown username=%s", dto.username)
            return None

        if not await self._crypto.compare(dto.password, user.password):
            logger.info("Password mismatch for username=%s", dto.username)
            raise InvalidParamError(BAD_CREDENTIALS_MESSAGE)

        logger.info("Issuing access token for username=%s", user.username)
        return await self._token.sign({"user": user.claims()})
