# =============================================================================
# core/config.py  —  Environment-driven settings
# =============================================================================
#
# All knobs come from environment variables (main.py loads a .env file first
# via python-dotenv).  Settings are read ONCE at bootstrap, with one
# exception: the Replicate API token is looked up on every image-generation
# call, so a missing token only breaks that one tool.
#
# VARIABLES:
#   NWS_API_BASE             Weather provider base URL
#   NWS_USER_AGENT           User-Agent sent to the weather provider
#   REPLICATE_API_BASE       Image provider base URL
#   REPLICATE_MODEL_VERSION  Model version id used for predictions
#   HTTP_TIMEOUT             Seconds; unset means no client-side timeout
#   LOG_LEVEL                Logging level name (default INFO)
#   REPLICATE_API_TOKEN      Bearer token (read at call time)
# =============================================================================

import os
from dataclasses import dataclass
from typing import Optional

from core.exceptions import ConfigError

NWS_API_BASE = "https://api.weather.gov"
USER_AGENT = "weather-app/1.0"
REPLICATE_API_BASE = "https://api.replicate.com"
REPLICATE_MODEL_VERSION = "7762fd07cf82c948538e41f63f77d685e02b063e37e496e96eefd46c929f9bdc"
REPLICATE_TOKEN_ENV = "REPLICATE_API_TOKEN"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, immutable once built."""

    nws_api_base: str = NWS_API_BASE
    user_agent: str = USER_AGENT
    replicate_api_base: str = REPLICATE_API_BASE
    replicate_model_version: str = REPLICATE_MODEL_VERSION
    http_timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ).

        Raises:
            ConfigError: If HTTP_TIMEOUT is not a positive number.
        """
        env = os.environ if environ is None else environ

        timeout_raw = env.get("HTTP_TIMEOUT", "").strip()
        http_timeout = None
        if timeout_raw:
            try:
                http_timeout = float(timeout_raw)
            except ValueError:
                raise ConfigError(f"HTTP_TIMEOUT must be a number, got {timeout_raw!r}")
            if http_timeout <= 0:
                raise ConfigError(f"HTTP_TIMEOUT must be positive, got {timeout_raw!r}")

        return cls(
            nws_api_base=env.get("NWS_API_BASE", NWS_API_BASE).rstrip("/"),
            user_agent=env.get("NWS_USER_AGENT", USER_AGENT),
            replicate_api_base=env.get("REPLICATE_API_BASE", REPLICATE_API_BASE).rstrip("/"),
            replicate_model_version=env.get("REPLICATE_MODEL_VERSION", REPLICATE_MODEL_VERSION),
            http_timeout=http_timeout,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )


def get_replicate_token(environ: Optional[dict] = None) -> Optional[str]:
    """Return the Replicate API token, or None when unset or blank."""
    env = os.environ if environ is None else environ
    token = env.get(REPLICATE_TOKEN_ENV, "").strip()
    return token or None
