"""
Use case: Create a named portfolio.

Input: CreatePortfolioDto (name)
Output: Portfolio
Side effects: Persists one portfolio.
Failure cases: MissingParamError, InvalidParamError.
"""

import logging

from app.application.auth.dtos import CreatePortfolioDto
from app.domain.auth.entities import Portfolio
from app.domain.auth.ports import ChainHandler, PortfolioRepository

logger = logging.getLogger(__name__)


class CreatePortfolioUseCase:
    """Validates the portfolio name and stores the new portfolio."""

    def __init__(
        self,
        validator_chain: ChainHandler,
        portfolio_repository: PortfolioRepository,
    ) -> None:
        self._validator_chain = validator_chain
        self._portfolio_repository = portfolio_repository

    async def execute(self, dto: CreatePortfolioDto) -> Portfolio:
        self._validator_chain.handle(dto.as_request())
        portfolio = await self._portfolio_repository.insert(Portfolio(name=dto.name))
        logger.info("Created portfolio id=%s", portfolio.id)
        return portfolio
