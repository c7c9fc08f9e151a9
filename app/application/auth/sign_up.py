"""
Use case: Register a new user and issue an access token.

Input: SignUpDto (username, password, email)
Output: access token string
Side effects: Persists one user.
Failure cases: MissingParamError, InvalidParamError, DatabaseError,
    CryptoError, TokenError.
"""

import logging

from app.application.auth.dtos import SignUpDto
from app.domain.auth.entities import User
from app.domain.auth.ports import ChainHandler, Crypto, Token, UserRepository

logger = logging.getLogger(__name__)


class SignUpUseCase:
    """Orchestrates registration: validate, hash, insert, sign.

    Username uniqueness is left to the repository. If signing fails
    after the insert, the stored user is kept.
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

    async def execute(self, dto: SignUpDto) -> str:
        """Run the sign-up use case.

        Args:
            dto: The registration form.

        Returns:
            A signed access token for the new user.

        Raises:
            MissingParamError: If a field is empty.
            InvalidParamError: If a field breaks a shape or length rule.
            DatabaseError: If the username is already registered.
        """
        self._validator_chain.handle(dto.as_request())

        hashed = await self._crypto.hash(dto.password)
        user = await self._user_repository.insert(
            User(username=dto.username, password=hashed, email=dto.email)
        )

        logger.info("Registered username=%s", user.username)
        return await self._token.sign({"user": user.claims()})
