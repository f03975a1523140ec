"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from src.infrastructure.logging.logger import get_app_logger

DEFAULT_API_URL = "http://localhost:5000/api"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class FinanceApiSettings:
    """Settings for reaching the household finance API.

    Attributes:
        base_url: Root URL of the API, without trailing slash.
        timeout: Request timeout in seconds.
    """

    base_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "FinanceApiSettings":
        """Build settings from environment variables.

        Returns:
            FinanceApiSettings: Settings sourced from environment variables.
        """
        base_url = (
            os.getenv("FINANCE_API_URL", DEFAULT_API_URL).strip()
            or DEFAULT_API_URL
        )
        timeout = cls._parse_timeout(
            os.getenv("FINANCE_API_TIMEOUT"),
            logger=get_app_logger(),
        )
        return cls(base_url=base_url.rstrip("/"), timeout=timeout)

    @staticmethod
    def _parse_timeout(raw_timeout: str | None, logger) -> float:
        """Parse the timeout, falling back to the default when invalid.

        Args:
            raw_timeout: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            float: Timeout in seconds.
        """
        if not raw_timeout:
            return DEFAULT_TIMEOUT_SECONDS
        try:
            timeout = float(raw_timeout)
        except ValueError:
            logger.warning(
                f"Invalid FINANCE_API_TIMEOUT '{raw_timeout}'. "
                f"Using {DEFAULT_TIMEOUT_SECONDS} seconds."
            )
            return DEFAULT_TIMEOUT_SECONDS
        if timeout <= 0:
            logger.warning(
                f"FINANCE_API_TIMEOUT must be positive, got {raw_timeout}. "
                f"Using {DEFAULT_TIMEOUT_SECONDS} seconds."
            )
            return DEFAULT_TIMEOUT_SECONDS
        return timeout


__all__ = ["FinanceApiSettings", "DEFAULT_API_URL", "DEFAULT_TIMEOUT_SECONDS"]
