"""Authentication error taxonomy."""


class AuthError(Exception):
    """Base class for authentication failures."""


class ConfigurationError(AuthError):
    """The stored password hash or signing secret is missing or unusable."""


class InvalidCredential(AuthError):
    """The candidate password does not match the stored hash."""


class InvalidOrExpiredToken(AuthError):
    """The presented token is missing, malformed, forged or expired.

    The individual cause is never exposed to callers.
    """
