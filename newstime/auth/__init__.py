"""Authentication module."""

from newstime.auth.exceptions import (
    AuthError,
    ConfigurationError,
    InvalidCredential,
    InvalidOrExpiredToken,
)
from newstime.auth.secret_store import SecretStore, get_secret_store
from newstime.auth.service import IssuedToken, TokenService
from newstime.auth.utils import get_password_hash, verify_password

__all__ = [
    "AuthError",
    "ConfigurationError",
    "InvalidCredential",
    "InvalidOrExpiredToken",
    "IssuedToken",
    "SecretStore",
    "TokenService",
    "get_password_hash",
    "get_secret_store",
    "verify_password",
]
