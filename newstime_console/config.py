"""Configuration management for the admin console."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Default configuration directory
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "newstime"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"
DEFAULT_TOKEN_FILE = DEFAULT_CONFIG_DIR / "admin_token"

# Default API server
DEFAULT_SERVER_URL = "http://localhost:3001"


@dataclass
class ConsoleConfig:
    """Configuration for the admin console.

    Attributes:
        server_url: Base URL of the News Time API.
        token_file: File holding the admin token between runs.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """

    server_url: str = DEFAULT_SERVER_URL
    token_file: Path = DEFAULT_TOKEN_FILE
    log_level: str = "WARNING"

    def save(self, config_path: Path | None = None) -> None:
        """Save config to file.

        Args:
            config_path: Path to config file (default: ~/.config/newstime/config.json).
        """
        path = config_path or DEFAULT_CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "server_url": self.server_url,
            "token_file": str(self.token_file),
            "log_level": self.log_level,
        }

        with open(path, "w") as f:
            json.dump(data, f, indent=2)

    @classmethod
    def load(cls, config_path: Path | None = None) -> "ConsoleConfig":
        """Load configuration from file.

        Args:
            config_path: Path to config file.

        Returns:
            ConsoleConfig: Loaded configuration or default.
        """
        path = config_path or DEFAULT_CONFIG_FILE

        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, TypeError, OSError) as e:
            logger.warning(f"Error loading config {path}: {e}")
            return cls()

        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed config {path}")
            return cls()

        return cls(
            server_url=data.get("server_url") or DEFAULT_SERVER_URL,
            token_file=Path(data.get("token_file") or DEFAULT_TOKEN_FILE),
            log_level=data.get("log_level", "WARNING"),
        )


def get_config(config_path: Path | None = None) -> ConsoleConfig:
    """Get the current configuration.

    Args:
        config_path: Optional custom config path.

    Returns:
        ConsoleConfig: Current configuration.
    """
    return ConsoleConfig.load(config_path)
