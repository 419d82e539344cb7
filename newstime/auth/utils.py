"""Password hashing and JWT encoding helpers."""

import bcrypt
from jose import JWTError, jwt

# bcrypt only looks at the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Args:
        plain_password: Plain text password.
        hashed_password: Hashed password to compare against.

    Returns:
        bool: True if password matches, False otherwise.

    Raises:
        ValueError: If the stored hash is not a valid bcrypt hash.
    """
    return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))


def get_password_hash(password: str, rounds: int = 12) -> str:
    """Hash a password.

    Args:
        password: Plain text password.
        rounds: bcrypt cost factor.

    Returns:
        str: Hashed password.
    """
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(_password_bytes(password), salt)
    return hashed.decode("utf-8")


def encode_token(claims: dict, secret: str, algorithm: str) -> str:
    """Sign a claims dictionary into a JWT.

    Args:
        claims: Token payload.
        secret: Signing secret.
        algorithm: JWT algorithm.

    Returns:
        str: Encoded JWT token.
    """
    return jwt.encode(claims, secret, algorithm=algorithm)


def decode_token(token: str, secret: str, algorithm: str) -> dict | None:
    """Check a JWT signature and return its payload.

    Expiry is not checked here; callers compare ``exp`` against their own clock.

    Args:
        token: JWT token string.
        secret: Signing secret.
        algorithm: JWT algorithm.

    Returns:
        dict | None: Token payload if the signature is valid, None otherwise.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"verify_exp": False},
        )
    except JWTError:
        return None

    if not isinstance(payload, dict):
        return None
    return payload
