"""TCG Search configuration management.

Loads configuration from environment variables with sensible defaults.
The JustTCG API key is the only required value and is never rendered.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

DEFAULT_BASE_URL = "https://api.justtcg.com/v1"
DEFAULT_TCGPLAYER_PRODUCT_URL = "https://www.tcgplayer.com/product"


@dataclass
class JustTCGConfig:
    """Upstream pricing API connection settings."""

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0

    # Games list revalidation window; search results are never cached
    games_cache_ttl_seconds: int = 86400  # 24 hours


@dataclass
class AppConfig:
    """Root application configuration.

    Loads from environment variables with fail-fast on missing required values.
    """

    justtcg: JustTCGConfig
    log_level: str = "INFO"
    json_logs: bool = False
    tcgplayer_product_url: str = DEFAULT_TCGPLAYER_PRODUCT_URL

    @classmethod
    def from_env(cls) -> AppConfig:
        """Load configuration from environment variables.

        Required environment variables:
        - JUSTTCG_API_KEY: API key sent as the x-api-key header

        Optional (with defaults):
        - JUSTTCG_BASE_URL: Upstream API root (default: https://api.justtcg.com/v1)
        - JUSTTCG_TIMEOUT_SECONDS: Per-request timeout (default: 10)
        - GAMES_CACHE_TTL_SECONDS: Games list revalidation window (default: 86400)
        - TCGPLAYER_PRODUCT_URL: Marketplace product link prefix
        - LOG_LEVEL: Logging verbosity (default: "INFO")
        - JSON_LOGS: Emit JSON logs instead of console output (default: false)

        Raises:
            KeyError: If required environment variables are missing
        """
        api_key = os.environ.get("JUSTTCG_API_KEY")
        if not api_key:
            raise KeyError(
                "JUSTTCG_API_KEY environment variable is required. "
                "Get a key from https://justtcg.com and export it before starting."
            )

        return cls(
            justtcg=JustTCGConfig(
                api_key=api_key,
                base_url=os.getenv("JUSTTCG_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
                timeout_seconds=float(os.getenv("JUSTTCG_TIMEOUT_SECONDS", "10")),
                games_cache_ttl_seconds=int(
                    os.getenv("GAMES_CACHE_TTL_SECONDS", "86400")
                ),
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            json_logs=os.getenv("JSON_LOGS", "false").lower() == "true",
            tcgplayer_product_url=os.getenv(
                "TCGPLAYER_PRODUCT_URL", DEFAULT_TCGPLAYER_PRODUCT_URL
            ).rstrip("/"),
        )


# Singleton instance (lazy-loaded)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or create singleton AppConfig instance from environment.

    Returns:
        AppConfig: Application configuration

    Raises:
        KeyError: If required environment variables are missing
    """
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached singleton so the next get_config() re-reads the environment."""
    global _config
    _config = None
