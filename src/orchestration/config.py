"""
Client Configuration.

Centralized configuration for the collection client.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ClientConfig:
    """
    Central configuration for the client.

    All connection and prompt settings are configurable through this object.
    """
    # Server address
    host: str = "localhost"
    port: int = 5454

    # Transport settings
    max_payload_size: int = 64 * 1024
    connect_timeout: float | None = 5.0

    # Console settings
    prompt: str = "> "

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.host:
            raise ValueError("Host cannot be empty")
        if not 0 < self.port < 65536:
            raise ValueError(f"Port must be in 1-65535, got {self.port}")
        if self.max_payload_size <= 0:
            raise ValueError(f"Max payload size must be positive, got {self.max_payload_size}")
        if self.connect_timeout is not None and self.connect_timeout <= 0:
            raise ValueError(f"Connect timeout must be positive, got {self.connect_timeout}")

    @classmethod
    def from_defaults(cls) -> "ClientConfig":
        """
        Create configuration with default values.

        Returns:
            ClientConfig with standard defaults
        """
        return cls(
            host="localhost",
            port=5454,
            max_payload_size=64 * 1024,
            connect_timeout=5.0,
            prompt="> "
        )

    @classmethod
    def for_testing(cls) -> "ClientConfig":
        """
        Create configuration for testing environment.

        Returns:
            ClientConfig with testing defaults
        """
        return cls(
            host="127.0.0.1",
            port=15454,
            max_payload_size=1024,
            connect_timeout=1.0,
            prompt=""
        )

    @classmethod
    def from_env_file(cls, env_path: Path) -> "ClientConfig":
        """
        Create configuration from a KEY=VALUE file.

        Recognized keys: COLLECTION_HOST, COLLECTION_PORT,
        COLLECTION_MAX_PAYLOAD. Missing keys keep their defaults.

        Args:
            env_path: Path to the .env file

        Returns:
            ClientConfig with overrides applied

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If a numeric key is not a number
        """
        if not env_path.exists():
            raise FileNotFoundError(f"Config file not found: {env_path}")

        values = _parse_env_file(env_path)
        defaults = cls.from_defaults()

        try:
            return cls(
                host=values.get("COLLECTION_HOST", defaults.host),
                port=int(values.get("COLLECTION_PORT", defaults.port)),
                max_payload_size=int(values.get("COLLECTION_MAX_PAYLOAD", defaults.max_payload_size)),
                connect_timeout=defaults.connect_timeout,
                prompt=defaults.prompt
            )
        except ValueError as e:
            raise ValueError(f"Invalid value in {env_path}: {e}") from e


def _parse_env_file(path: Path) -> dict[str, str]:
    """
    Parse a simple .env file into a dict.

    Handles:
        - KEY=VALUE lines
        - Comments (# ...) and blank lines
        - Quoted values (strips surrounding quotes)
    """
    result: dict[str, str] = {}

    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()

        # Skip comments and blanks
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip()
        value = value.strip()

        # Strip surrounding quotes if present
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]

        result[key] = value

    return result
