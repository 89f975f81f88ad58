"""Runtime configuration for nomics-client."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from nomics_client.exceptions import InvalidArgumentError

DEFAULT_BASE_URL = "https://api.nomics.com/v1"
DEFAULT_USER_AGENT = "Mozilla/5.0"


@dataclass
class NomicsConfig:
    """Settings shared by every Nomics endpoint client.

    Attributes:
        api_key: Private Nomics API key.
        base_url: API root, without trailing slash.
        user_agent: Value sent in the User-Agent header.
        timeout: Request timeout in seconds.
        log_level: Level name passed to logging.basicConfig by main.py.
    """

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 10.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "NomicsConfig":
        """Load config from environment variables (and a .env file if present)."""
        load_dotenv()
        raw_timeout = os.getenv("NOMICS_TIMEOUT", "10")
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise InvalidArgumentError(
                f"NOMICS_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from e

        return cls(
            api_key=os.getenv("NOMICS_API_KEY", ""),
            base_url=os.getenv("NOMICS_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            user_agent=os.getenv("NOMICS_USER_AGENT", DEFAULT_USER_AGENT),
            timeout=timeout,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
