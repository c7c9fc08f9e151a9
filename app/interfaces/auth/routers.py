"""
Use-case routers for the auth bounded context.

A router turns an untyped request mapping into a use-case call and the
outcome into an HttpBaseResponse. ``route`` never raises: this is the
single place where domain errors become HTTP statuses.

    MissingParamError, InvalidParamError -> 400 with the error attached
    anything else                        -> 500 "Unexpected error"
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

from app.application.auth.authenticate import AuthUseCase
from app.application.auth.create_portfolio import CreatePortfolioUseCase
from app.application.auth.dtos import CreatePortfolioDto, LoginDto, SignUpDto
from app.application.auth.sign_up import SignUpUseCase
from app.domain.auth.errors import InvalidParamError, MissingParamError
from app.domain.auth.ports import ChainHandler
from app.interfaces.http_response import HttpBaseResponse, HttpResponse

logger = logging.getLogger(__name__)


class Router(ABC):
    """Base router applying the uniform error-to-status policy."""

    async def route(self, request: Mapping[str, Any]) -> HttpBaseResponse:
        try:
            return await self._handle(request)
        except (MissingParamError, InvalidParamError) as exc:
            logger.warning("%s rejected request: %s", type(self).__name__, exc.message)
            return HttpResponse.bad_request(exc)
        except Exception:
            logger.exception("%s failed unexpectedly", type(self).__name__)
            return HttpResponse.server_error()

    @abstractmethod
    async def _handle(self, request: Mapping[str, Any]) -> HttpBaseResponse:
        """Validate, run the use case and build the success response."""
        raise NotImplementedError


class LoginRouter(Router):
    """POST /login: 200 with the access token."""

    def __init__(self, auth_use_case: AuthUseCase, validator_chain: ChainHandler) -> None:
        self._auth_use_case = auth_use_case
        self._validator_chain = validator_chain

    async def _handle(self, request: Mapping[str, Any]) -> HttpBaseResponse:
        self._validator_chain.handle(request)
        access_token = await self._auth_use_case.execute(
            LoginDto(username=request["username"], password=request["password"])
        )
        return HttpResponse.ok({"accessToken": access_token})


class SignUpRouter(Router):
    """POST /signup: 201 with the access token of the new account."""

    def __init__(self, validator_chain: ChainHandler, sign_up_use_case: SignUpUseCase) -> None:
        self._validator_chain = validator_chain
        self._sign_up_use_case = sign_up_use_case

    async def _handle(self, request: Mapping[str, Any]) -> HttpBaseResponse:
        self._validator_chain.handle(request)
        access_token = await self._sign_up_use_case.execute(
            SignUpDto(
                username=request["username"],
                password=request["password"],
                email=request["email"],
            )
        )
        return HttpResponse.created({"accessToken": access_token})


class CreatePortfolioRouter(Router):
    """POST /portfolios: 201 with the stored portfolio."""

    def __init__(
        self,
        validator_chain: ChainHandler,
        create_portfolio_use_case: CreatePortfolioUseCase,
    ) -> None:
        self._validator_chain = validator_chain
        self._create_portfolio_use_case = create_portfolio_use_case

    async def _handle(self, request: Mapping[str, Any]) -> HttpBaseResponse:
        self._validator_chain.handle(request)
        portfolio = await self._create_portfolio_use_case.execute(
            CreatePortfolioDto(name=request["name"])
        )
        return HttpResponse.created(
            {"portfolio": {"id": str(portfolio.id), "name": portfolio.name}}
        )
