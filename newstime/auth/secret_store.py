"""Process-wide admin secrets, loaded once from configuration."""

from dataclasses import dataclass
from functools import lru_cache

from newstime.auth.exceptions import ConfigurationError
from newstime.config import Settings, get_settings


@dataclass(frozen=True)
class SecretStore:
    """Immutable holder for the admin password hash and the signing secret.

    Attributes:
        password_hash: bcrypt hash of the admin password, or None if unset.
        signing_secret: Symmetric key for token signatures.
        algorithm: JWT signing algorithm.
    """

    password_hash: str | None
    signing_secret: str
    algorithm: str = "HS256"

    def __post_init__(self) -> None:
        if not self.signing_secret or not self.signing_secret.strip():
            raise ConfigurationError("JWT_SECRET is not configured")
        if self.password_hash is not None and not self.password_hash.strip():
            object.__setattr__(self, "password_hash", None)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SecretStore":
        """Build the store from application settings.

        Args:
            settings: Application settings.

        Returns:
            SecretStore: Populated secret store.

        Raises:
            ConfigurationError: If the signing secret is empty.
        """
        return cls(
            password_hash=settings.admin_password_hash or None,
            signing_secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

    def get_stored_hash(self) -> str | None:
        """Return the admin password hash, or None when not configured."""
        return self.password_hash

    def get_signing_secret(self) -> str:
        """Return the token signing secret."""
        return self.signing_secret


@lru_cache
def get_secret_store() -> SecretStore:
    """Get the cached secret store built from settings.

    Returns:
        SecretStore: The process-wide secret store.

    Raises:
        ConfigurationError: If the signing secret is empty.
    """
    return SecretStore.from_settings(get_settings())
