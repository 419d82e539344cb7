"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from newstime.auth.exceptions import ConfigurationError, InvalidOrExpiredToken
from newstime.auth.secret_store import SecretStore, get_secret_store
from newstime.auth.service import TokenService
from newstime.config import get_settings
from newstime.db.database import get_db

# Absent or non-Bearer Authorization headers resolve to None instead of a 403
bearer_scheme = HTTPBearer(auto_error=False)


def get_store() -> SecretStore:
    """Get the secret store.

    Returns:
        SecretStore: Process-wide secret store.

    Raises:
        HTTPException: If the signing secret is not configured.
    """
    try:
        return get_secret_store()
    except ConfigurationError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server configuration error",
        )


def get_token_service(
    store: Annotated[SecretStore, Depends(get_store)],
) -> TokenService:
    """Get token service dependency.

    Args:
        store: Secret store.

    Returns:
        TokenService: Token service configured with the current TTL.
    """
    return TokenService(store, ttl_seconds=get_settings().token_ttl_seconds)


async def get_current_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    service: Annotated[TokenService, Depends(get_token_service)],
) -> dict:
    """Require a valid admin bearer token.

    Args:
        credentials: HTTP Bearer token credentials.
        service: Token service.

    Returns:
        dict: Verified token claims.

    Raises:
        HTTPException: If the token is missing, malformed, forged or expired.
    """
    token = credentials.credentials if credentials is not None else None
    try:
        return service.decode(token)
    except InvalidOrExpiredToken:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )


# Type aliases for cleaner dependency injection
DbSession = Annotated[Session, Depends(get_db)]
CurrentAdmin = Annotated[dict, Depends(get_current_admin)]
