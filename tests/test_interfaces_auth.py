"""
Tests for the auth use-case routers and response helpers.

Routers are exercised with mocked use cases and real validation chains.
Validates status codes, payloads and the error-to-status mapping.
"""

from unittest.mock import AsyncMock
from uuid import UUID

import pytest

from app.application.auth.dtos import CreatePortfolioDto, LoginDto, SignUpDto
from app.domain.auth.entities import Portfolio
from app.domain.auth.errors import (
    CryptoError,
    DatabaseError,
    InvalidParamError,
    MissingParamError,
)
from app.domain.auth.validators import (
    PasswordValidatorChainHandler,
    UsernameValidatorChainHandler,
    build_chain,
    make_login_chain,
    make_portfolio_chain,
    make_sign_up_chain,
)
from app.interfaces.auth.routers import CreatePortfolioRouter, LoginRouter, SignUpRouter
from app.interfaces.http_response import HttpBaseResponse, HttpResponse

VALID_LOGIN = {"username": "valid_username", "password": "valid_password"}
VALID_SIGN_UP = {**VALID_LOGIN, "email": "valid_email@mail.com"}


def _use_case(result=None, error: Exception | None = None) -> AsyncMock:
    use_case = AsyncMock()
    if error is not None:
        use_case.execute.side_effect = error
    else:
        use_case.execute.return_value = result
    return use_case


class TestHttpResponse:
    """Tests for HttpBaseResponse rendering."""

    def test_bad_request_carries_error_and_message(self) -> None:
        error = MissingParamError("username")
        response = HttpResponse.bad_request(error)
        assert response.status == 400
        assert response.error is error
        assert response.message == "Missing param: username"
        assert response.data is None

    def test_server_error_hides_details(self) -> None:
        assert HttpResponse.server_error().to_body() == {
            "status": 500,
            "message": "Unexpected error",
        }

    def test_body_renders_error_as_name_and_message(self) -> None:
        body = HttpResponse.bad_request(InvalidParamError("bad")).to_body()
        assert body == {
            "status": 400,
            "error": {"name": "InvalidParamError", "message": "bad"},
            "message": "bad",
        }

    def test_success_body(self) -> None:
        assert HttpResponse.created({"accessToken": "t"}).to_body() == {
            "status": 201,
            "data": {"accessToken": "t"},
        }


class TestLoginRouter:
    """Tests for the LoginRouter."""

    @pytest.mark.asyncio
    async def test_returns_200_with_access_token(self) -> None:
        use_case = _use_case("valid_token")
        response = await LoginRouter(use_case, make_login_chain()).route(VALID_LOGIN)

        assert response.status == 200
        assert response.data == {"accessToken": "valid_token"}
        use_case.execute.assert_awaited_once_with(
            LoginDto(username="valid_username", password="valid_password")
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "request_data, expected",
        [
            ({"password": "any_password", "username": ""}, MissingParamError("username")),
            ({"username": "any_username", "password": ""}, MissingParamError("password")),
            ({}, MissingParamError("username")),
            (
                {"username": "ab", "password": "valid_password"},
                InvalidParamError("username must be at least 3 characters long"),
            ),
            (
                {"username": "too_long_username_provided", "password": "valid_password"},
                InvalidParamError("username must be at most 24 characters long"),
            ),
            (
                {"username": "valid_username", "password": "1234567"},
                InvalidParamError("password must be at least 8 characters long"),
            ),
        ],
    )
    async def test_invalid_input_returns_400(self, request_data, expected) -> None:
        use_case = _use_case("valid_token")
        response = await LoginRouter(use_case, make_login_chain()).route(request_data)

        assert response.status == 400
        assert type(response.error) is type(expected)
        assert response.error.message == expected.message
        assert response.message == expected.message
        use_case.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_chain_order_decides_reported_field(self) -> None:
        chain = build_chain(PasswordValidatorChainHandler(), UsernameValidatorChainHandler())
        response = await LoginRouter(_use_case(), chain).route({"username": "", "password": ""})
        assert isinstance(response.error, MissingParamError)
        assert response.error.param == "password"

    @pytest.mark.asyncio
    async def test_credential_mismatch_returns_400(self) -> None:
        error = InvalidParamError("username or password is not correct")
        response = await LoginRouter(_use_case(error=error), make_login_chain()).route(VALID_LOGIN)

        assert response.status == 400
        assert response.error is error

    @pytest.mark.asyncio
    async def test_unknown_user_returns_null_token(self) -> None:
        response = await LoginRouter(_use_case(None), make_login_chain()).route(VALID_LOGIN)

        assert response.status == 200
        assert response.data == {"accessToken": None}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [RuntimeError(""), CryptoError("boom"), DatabaseError("db")])
    async def test_other_errors_return_500(self, error) -> None:
        response = await LoginRouter(_use_case(error=error), make_login_chain()).route(VALID_LOGIN)

        assert response == HttpResponse.server_error()
        assert response.error is None
        assert response.message == "Unexpected error"


class TestSignUpRouter:
    """Tests for the SignUpRouter."""

    @pytest.mark.asyncio
    async def test_returns_201_with_access_token(self) -> None:
        use_case = _use_case("valid_token")
        response = await SignUpRouter(make_sign_up_chain(), use_case).route(VALID_SIGN_UP)

        assert response.status == 201
        assert response.data == {"accessToken": "valid_token"}
        use_case.execute.assert_awaited_once_with(SignUpDto(**VALID_SIGN_UP))

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "override, expected",
        [
            ({"username": ""}, MissingParamError("username")),
            ({"username": "sh"}, InvalidParamError("username must be at least 3 characters long")),
            ({"password": ""}, MissingParamError("password")),
            ({"password": "short"}, InvalidParamError("password must be at least 8 characters long")),
            ({"email": ""}, MissingParamError("email")),
            ({"email": "malformedmail.com"}, InvalidParamError("email must be a valid email")),
        ],
    )
    async def test_invalid_input_returns_400(self, override, expected) -> None:
        use_case = _use_case("valid_token")
        response = await SignUpRouter(make_sign_up_chain(), use_case).route(
            {**VALID_SIGN_UP, **override}
        )

        assert response.status == 400
        assert type(response.error) is type(expected)
        assert response.error.message == expected.message
        use_case.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_user_returns_500(self) -> None:
        error = DatabaseError("user with username valid_username is already registered")
        response = await SignUpRouter(make_sign_up_chain(), _use_case(error=error)).route(VALID_SIGN_UP)

        assert response.status == 500
        assert response.to_body() == {"status": 500, "message": "Unexpected error"}


class TestCreatePortfolioRouter:
    """Tests for the CreatePortfolioRouter."""

    @pytest.mark.asyncio
    async def test_returns_201_with_portfolio(self) -> None:
        portfolio = Portfolio(id=UUID(int=1), name="valid_name")
        use_case = _use_case(portfolio)
        response = await CreatePortfolioRouter(make_portfolio_chain(), use_case).route(
            {"name": "valid_name"}
        )

        assert response.status == 201
        assert response.data == {"portfolio": {"id": str(UUID(int=1)), "name": "valid_name"}}
        use_case.execute.assert_awaited_once_with(CreatePortfolioDto(name="valid_name"))

    @pytest.mark.asyncio
    async def test_missing_name_returns_400(self) -> None:
        response = await CreatePortfolioRouter(make_portfolio_chain(), _use_case()).route({"name": ""})

        assert response.status == 400
        assert isinstance(response.error, MissingParamError)
        assert response.error.param == "name"

    @pytest.mark.asyncio
    async def test_long_name_returns_400(self) -> None:
        response = await CreatePortfolioRouter(make_portfolio_chain(), _use_case()).route(
            {"name": "x" * 51}
        )

        assert isinstance(response, HttpBaseResponse)
        assert isinstance(response.error, InvalidParamError)
        assert response.error.message == "name must be at most 50 characters long"
