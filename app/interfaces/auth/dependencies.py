"""
Dependency injection for the auth bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases and routers via constructor injection.
These are the composition root for the auth context.
"""

from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.application.auth.authenticate import AuthUseCase
from app.application.auth.create_portfolio import CreatePortfolioUseCase
from app.application.auth.sign_up import SignUpUseCase
from app.core.config import settings
from app.domain.auth.validators import (
    make_login_chain,
    make_portfolio_chain,
    make_sign_up_chain,
)
from app.infrastructure.auth.argon_crypto import Argon2Crypto
from app.infrastructure.auth.database import build_engine, build_session_factory
from app.infrastructure.auth.jwt_token import JwtToken
from app.infrastructure.auth.portfolio_repository import SqlAlchemyPortfolioRepository
from app.infrastructure.auth.user_repository import SqlAlchemyUserRepository
from app.interfaces.auth.routers import CreatePortfolioRouter, LoginRouter, SignUpRouter

# Chains are stateless and shared by every request.
LOGIN_CHAIN = make_login_chain()
SIGN_UP_CHAIN = make_sign_up_chain()
PORTFOLIO_CHAIN = make_portfolio_chain()


@lru_cache
def get_engine() -> AsyncEngine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return build_engine(settings.database_url)


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return build_session_factory(get_engine())


@lru_cache
def get_crypto() -> Argon2Crypto:
    return Argon2Crypto()


@lru_cache
def get_token() -> JwtToken:
    return JwtToken(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expiration_minutes=settings.jwt_expiration_minutes,
    )


def get_auth_use_case() -> AuthUseCase:
    """Build AuthUseCase with its infrastructure dependencies."""
    return AuthUseCase(
        validator_chain=LOGIN_CHAIN,
        user_repository=SqlAlchemyUserRepository(get_session_factory()),
        crypto=get_crypto(),
        token=get_token(),
    )


def get_sign_up_use_case() -> SignUpUseCase:
    """Build SignUpUseCase with its infrastructure dependencies."""
    return SignUpUseCase(
        validator_chain=SIGN_UP_CHAIN,
        user_repository=SqlAlchemyUserRepository(get_session_factory()),
        crypto=get_crypto(),
        token=get_token(),
    )


def get_create_portfolio_use_case() -> CreatePortfolioUseCase:
    """Build CreatePortfolioUseCase with its infrastructure dependencies."""
    return CreatePortfolioUseCase(
        validator_chain=PORTFOLIO_CHAIN,
        portfolio_repository=SqlAlchemyPortfolioRepository(get_session_factory()),
    )


def get_login_router() -> LoginRouter:
    return LoginRouter(auth_use_case=get_auth_use_case(), validator_chain=LOGIN_CHAIN)


def get_sign_up_router() -> SignUpRouter:
    return SignUpRouter(validator_chain=SIGN_UP_CHAIN, sign_up_use_case=get_sign_up_use_case())


def get_create_portfolio_router() -> CreatePortfolioRouter:
    return CreatePortfolioRouter(
        validator_chain=PORTFOLIO_CHAIN,
        create_portfolio_use_case=get_create_portfolio_use_case(),
    )
