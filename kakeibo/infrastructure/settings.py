"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from kakeibo.domain.constants import (
    DEFAULT_BONUS_FREQUENCY,
    DEFAULT_NISA_YIELD_RATE,
)
from kakeibo.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class KakeiboSettings:
    """Settings shared by the adapters.

    Attributes:
        default_yield_rate: NISA yield in percent used when a goal has none.
        default_bonus_frequency: Bonuses per year used when none is given.
        user_id: User the command-line adapters act for.
    """

    default_yield_rate: float = DEFAULT_NISA_YIELD_RATE
    default_bonus_frequency: int = DEFAULT_BONUS_FREQUENCY
    user_id: Optional[str] = None

    @classmethod
    def from_env(cls) -> "KakeiboSettings":
        """Build settings from environment variables.

        Returns:
            KakeiboSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        yield_rate = cls._parse_number(
            "KAKEIBO_DEFAULT_YIELD_RATE",
            float,
            DEFAULT_NISA_YIELD_RATE,
            logger,
        )
        bonus_frequency = cls._parse_number(
            "KAKEIBO_DEFAULT_BONUS_FREQUENCY",
            int,
            DEFAULT_BONUS_FREQUENCY,
            logger,
        )
        user_id = (os.getenv("KAKEIBO_USER_ID") or "").strip() or None
        return cls(
            default_yield_rate=yield_rate,
            default_bonus_frequency=bonus_frequency,
            user_id=user_id,
        )

    @staticmethod
    def _parse_number(name: str, parser, default, logger):
        """Parse a numeric environment variable.

        Args:
            name: Environment variable name.
            parser: Callable converting the raw string.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            return parser(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}='{raw}'; using {default}")
            return default


__all__ = ["KakeiboSettings"]
