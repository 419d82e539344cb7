"""Authentication API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials

from newstime.auth.exceptions import ConfigurationError, InvalidCredential
from newstime.auth.schemas import LoginRequest, LoginResponse, VerifyResponse
from newstime.auth.service import TokenService
from newstime.dependencies import bearer_scheme, get_token_service

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    service: Annotated[TokenService, Depends(get_token_service)],
) -> LoginResponse:
    """Exchange the admin password for a signed token.

    Args:
        data: Login request body.
        service: Token service.

    Returns:
        LoginResponse: Token and its lifetime in seconds.

    Raises:
        HTTPException: 400 without a password, 401 for a wrong password,
            500 when the server has no password hash configured.
    """
    if not data.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Password is required",
        )

    try:
        issued = service.login(data.password)
    except InvalidCredential:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid password",
        )
    except ConfigurationError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server configuration error",
        )

    return LoginResponse(success=True, token=issued.token, expiresIn=issued.expires_in)


@router.post("/verify", response_model=VerifyResponse)
async def verify(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    service: Annotated[TokenService, Depends(get_token_service)],
):
    """Check the bearer token presented in the Authorization header.

    Missing, malformed, forged and expired tokens all answer 401 with
    ``{"valid": false}``.

    Args:
        credentials: Bearer credentials, None if absent or not a Bearer scheme.
        service: Token service.

    Returns:
        VerifyResponse | JSONResponse: Token validity.
    """
    token = credentials.credentials if credentials is not None else None
    if not service.verify(token):
        return JSONResponse(
            {"valid": False},
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return VerifyResponse(valid=True)
