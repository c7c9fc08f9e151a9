"""
Adapter: Portfolio persistence.

Implements the PortfolioRepository port.
Responsible for persisting portfolio data.
"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.auth.entities import Portfolio
from app.domain.auth.ports import PortfolioRepository
from app.infrastructure.auth.database import PortfolioModel


class SqlAlchemyPortfolioRepository(PortfolioRepository):
    """SQL implementation of the portfolio repository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def insert(self, portfolio: Portfolio) -> Portfolio:
        """Persist a portfolio.

        Args:
            portfolio: Portfolio entity to save.

        Returns:
            The stored portfolio with its creation timestamp.
        """
        row = PortfolioModel(id=str(portfolio.id), name=portfolio.name)
        async with self._session_factory() as session:
            session.add(row)
            await session.commit()
        return Portfolio(id=portfolio.id, name=row.name, created_at=row.created_at)
