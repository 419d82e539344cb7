"""Admin token persistence.

The session gate only needs ``get``/``set``/``clear``; the in-memory store
serves tests and embedded use, the file store keeps the token between CLI
runs.
"""

import logging
import os
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class TokenStore(Protocol):
    """Key-value port holding at most one admin token."""

    def get(self) -> str | None: ...

    def set(self, token: str) -> None: ...

    def clear(self) -> None: ...


class MemoryTokenStore:
    """Token store kept in process memory."""

    def __init__(self, token: str | None = None):
        self._token = token or None

    def get(self) -> str | None:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileTokenStore:
    """Token store backed by a single owner-readable file.

    Attributes:
        path: Location of the token file.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def get(self) -> str | None:
        """Read the stored token.

        Returns:
            str | None: Token, or None if the file is missing, empty or unreadable.
        """
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Could not read token file {self.path}: {e}")
            return None
        return token or None

    def set(self, token: str) -> None:
        """Write the token, readable by the owner only.

        Args:
            token: Token to persist.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(token)
        # Secure the token file even if it already existed
        os.chmod(self.path, 0o600)

    def clear(self) -> None:
        """Remove the token file if present."""
        self.path.unlink(missing_ok=True)
