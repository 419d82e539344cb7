"""Admin token issuance and verification."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from newstime.auth.exceptions import (
    ConfigurationError,
    InvalidCredential,
    InvalidOrExpiredToken,
)
from newstime.auth.secret_store import SecretStore
from newstime.auth.utils import decode_token, encode_token, verify_password

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"
ACCESS_TOKEN_TYPE = "access"
DEFAULT_TOKEN_TTL = 86_400  # 24 hours


@dataclass(frozen=True)
class IssuedToken:
    """A freshly minted admin token.

    Attributes:
        token: Encoded JWT.
        issued_at: Issue time, unix seconds.
        expires_at: Expiry time, unix seconds.
    """

    token: str
    issued_at: int
    expires_at: int

    @property
    def expires_in(self) -> int:
        """Lifetime of the token in seconds."""
        return self.expires_at - self.issued_at


class TokenService:
    """Checks the admin password and issues/verifies signed tokens.

    Validity lives entirely inside the signed token; there is no server-side
    session table, so a token can only be revoked early by rotating the
    signing secret.
    """

    def __init__(
        self,
        store: SecretStore,
        ttl_seconds: int = DEFAULT_TOKEN_TTL,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize token service.

        Args:
            store: Secret store holding the password hash and signing secret.
            ttl_seconds: Token lifetime.
            clock: Wall-clock source returning unix seconds.
        """
        if ttl_seconds <= 0:
            raise ConfigurationError("Token TTL must be positive")
        self.store = store
        self.ttl_seconds = ttl_seconds
        self._clock = clock

    def _now(self) -> int:
        return int(self._clock())

    def login(self, candidate_password: str) -> IssuedToken:
        """Check a candidate password and mint a token.

        Args:
            candidate_password: Password supplied by the operator.

        Returns:
            IssuedToken: Signed token with its issue and expiry times.

        Raises:
            ConfigurationError: If no usable password hash is configured.
            InvalidCredential: If the password does not match.
        """
        stored_hash = self.store.get_stored_hash()
        if stored_hash is None:
            logger.error("Login attempted but ADMIN_PASSWORD_HASH is not configured")
            raise ConfigurationError("ADMIN_PASSWORD_HASH is not configured")

        try:
            matches = verify_password(candidate_password, stored_hash)
        except ValueError as e:
            logger.error("ADMIN_PASSWORD_HASH is not a valid bcrypt hash")
            raise ConfigurationError("ADMIN_PASSWORD_HASH is not a valid bcrypt hash") from e

        if not matches:
            logger.warning("Rejected admin login with invalid password")
            raise InvalidCredential("Invalid password")

        issued_at = self._now()
        expires_at = issued_at + self.ttl_seconds
        claims = {
            "role": ADMIN_ROLE,
            "type": ACCESS_TOKEN_TYPE,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = encode_token(
            claims,
            self.store.get_signing_secret(),
            self.store.algorithm,
        )
        logger.info(f"Issued admin token valid for {self.ttl_seconds}s")
        return IssuedToken(token=token, issued_at=issued_at, expires_at=expires_at)

    def decode(self, token: str | None) -> dict:
        """Decode a presented token, enforcing signature, role and expiry.

        Args:
            token: Encoded JWT, possibly None.

        Returns:
            dict: Verified token claims.

        Raises:
            InvalidOrExpiredToken: For any failure; the cause is not disclosed.
        """
        if not token or not isinstance(token, str):
            raise InvalidOrExpiredToken("Invalid or expired token")

        payload = decode_token(
            token,
            self.store.get_signing_secret(),
            self.store.algorithm,
        )
        if payload is None:
            raise InvalidOrExpiredToken("Invalid or expired token")

        if payload.get("role") != ADMIN_ROLE or payload.get("type") != ACCESS_TOKEN_TYPE:
            raise InvalidOrExpiredToken("Invalid or expired token")

        expires_at = payload.get("exp")
        if isinstance(expires_at, bool) or not isinstance(expires_at, int):
            raise InvalidOrExpiredToken("Invalid or expired token")

        if self._now() > expires_at:
            raise InvalidOrExpiredToken("Invalid or expired token")

        return payload

    def verify(self, token: str | None) -> bool:
        """Return True only for a well-formed, correctly signed, unexpired token.

        Args:
            token: Encoded JWT, possibly None.

        Returns:
            bool: Token validity.
        """
        try:
            self.decode(token)
        except InvalidOrExpiredToken:
            return False
        return True
