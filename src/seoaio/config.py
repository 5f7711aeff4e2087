from dotenv import load_dotenv
from dataclasses import dataclass
import logging
import os

from seoaio.constants import DEFAULT_RECOMMENDATION_LIMIT, DEFAULT_SITE_FIX_LIMIT

load_dotenv()  # Loads variables from .env file

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, value)
        return default
    if parsed < minimum:
        logger.warning("Ignoring %s=%r: below %d", name, value, minimum)
        return default
    return parsed


@dataclass
class Config:
    """Configuration for the page scorer."""
    log_level: str = "INFO"
    recommendation_limit: int = DEFAULT_RECOMMENDATION_LIMIT
    site_fix_limit: int = DEFAULT_SITE_FIX_LIMIT
    max_workers: int = 1  # >1 analyzes site pages in a process pool

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            recommendation_limit=_env_int("RECOMMENDATION_LIMIT", DEFAULT_RECOMMENDATION_LIMIT),
            site_fix_limit=_env_int("SITE_FIX_LIMIT", DEFAULT_SITE_FIX_LIMIT),
            max_workers=_env_int("MAX_WORKERS", 1, minimum=1),
        )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary.

        Returns:
            Dictionary of all configuration values
        """
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }
