"""
FastAPI routes for the auth bounded context.

Each route hands the parsed body to a use-case router and relays the
resulting HttpBaseResponse as JSON. No business logic here, and no
error mapping either: the use-case routers never raise.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.interfaces.auth.dependencies import (
    get_create_portfolio_router,
    get_login_router,
    get_sign_up_router,
)
from app.interfaces.auth.routers import CreatePortfolioRouter, LoginRouter, SignUpRouter
from app.interfaces.auth.schemas import (
    CreatePortfolioRequest,
    HttpBaseResponseSchema,
    LoginRequest,
    SignUpRequest,
)
from app.interfaces.http_response import HttpBaseResponse

router = APIRouter(tags=["auth"])

ERROR_RESPONSES = {
    400: {"model": HttpBaseResponseSchema},
    500: {"model": HttpBaseResponseSchema},
}


def _to_json(response: HttpBaseResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status, content=response.to_body())


@router.post(
    "/login",
    response_model=HttpBaseResponseSchema,
    responses=ERROR_RESPONSES,
    summary="Log in",
    description="Exchange username and password for an access token.",
)
async def login(
    request: LoginRequest,
    handler: LoginRouter = Depends(get_login_router),
) -> JSONResponse:
    """Authenticate a user."""
    return _to_json(await handler.route(request.model_dump(exclude_none=True)))


@router.post(
    "/signup",
    status_code=201,
    response_model=HttpBaseResponseSchema,
    responses=ERROR_RESPONSES,
    summary="Sign up",
    description="Register a new account and receive its access token.",
)
async def sign_up(
    request: SignUpRequest,
    handler: SignUpRouter = Depends(get_sign_up_router),
) -> JSONResponse:
    """Register a user."""
    return _to_json(await handler.route(request.model_dump(exclude_none=True)))


@router.post(
    "/portfolios",
    status_code=201,
    response_model=HttpBaseResponseSchema,
    responses=ERROR_RESPONSES,
    summary="Create portfolio",
    description="Create a named portfolio.",
)
async def create_portfolio(
    request: CreatePortfolioRequest,
    handler: CreatePortfolioRouter = Depends(get_create_portfolio_router),
) -> JSONResponse:
    """Create a portfolio."""
    return _to_json(await handler.route(request.model_dump(exclude_none=True)))
