"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from finpilot.infrastructure.logging.logger import get_app_logger

DEFAULT_ADVISOR_TIMEOUT = 30.0


@dataclass(frozen=True)
class FinanceSettings:
    """Runtime settings sourced from the environment.

    Attributes:
        user_id: Store user whose data the adapters read and write.
        advisor_url: Endpoint of the hosted AI chat proxy.
        advisor_token: Bearer token sent to the chat proxy.
        advisor_timeout: Chat proxy timeout in seconds.
        currency_code: Currency used when formatting amounts.
    """

    user_id: Optional[str] = None
    advisor_url: Optional[str] = None
    advisor_token: Optional[str] = None
    advisor_timeout: float = DEFAULT_ADVISOR_TIMEOUT
    currency_code: str = "BRL"

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        return cls(
            user_id=os.getenv("FINPILOT_USER_ID") or None,
            advisor_url=os.getenv("FINPILOT_ADVISOR_URL") or None,
            advisor_token=os.getenv("FINPILOT_ADVISOR_TOKEN") or None,
            advisor_timeout=cls._parse_timeout(
                os.getenv("FINPILOT_ADVISOR_TIMEOUT"),
                logger=logger,
            ),
            currency_code=(
                os.getenv("FINPILOT_CURRENCY", "BRL").strip().upper()
            ),
        )

    def require_user_id(self) -> str:
        """Return the configured user id.

        Raises:
            RuntimeError: If FINPILOT_USER_ID is not set.
        """
        if not self.user_id:
            raise RuntimeError("Missing environment variable: FINPILOT_USER_ID")
        return self.user_id

    @staticmethod
    def _parse_timeout(raw_value: Optional[str], logger) -> float:
        """Parse the advisor timeout, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            float: Timeout in seconds.
        """
        if not raw_value:
            return DEFAULT_ADVISOR_TIMEOUT
        try:
            timeout = float(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid FINPILOT_ADVISOR_TIMEOUT={raw_value!r}; "
                f"using {DEFAULT_ADVISOR_TIMEOUT}"
            )
            return DEFAULT_ADVISOR_TIMEOUT
        if timeout <= 0:
            logger.warning(
                f"Non-positive FINPILOT_ADVISOR_TIMEOUT={raw_value!r}; "
                f"using {DEFAULT_ADVISOR_TIMEOUT}"
            )
            return DEFAULT_ADVISOR_TIMEOUT
        return timeout


__all__ = ["FinanceSettings", "DEFAULT_ADVISOR_TIMEOUT"]
