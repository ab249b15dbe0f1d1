"""
Configuration Validator Service

This service provides validation logic for the ledger runtime configuration,
separating validation concerns from business logic.
"""
import logging
from typing import TYPE_CHECKING

from constants import LedgerBackends
from exceptions import ConfigurationError

if TYPE_CHECKING:
    from config.ledger_config import LedgerSettings

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigValidator:
    """Validator for application configurations"""

    @staticmethod
    def validate_ledger_settings(settings: "LedgerSettings") -> None:
        """
        Validate ledger runtime settings.

        Args:
            settings: Settings built from the environment

        Raises:
            ConfigurationError: If a setting is missing or has an unsupported value
        """
        if settings.backend not in LedgerBackends.ALL:
            raise ConfigurationError(
                f"Unsupported ledger backend '{settings.backend}'. "
                f"Expected one of: {', '.join(LedgerBackends.ALL)}"
            )

        if settings.backend == LedgerBackends.SQL and not settings.database_url:
            raise ConfigurationError(
                "Ledger database URL cannot be empty for the sql backend",
                missing_keys=["database_url"]
            )

        if settings.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level '{settings.log_level}'. "
                f"Expected one of: {', '.join(_LOG_LEVELS)}"
            )

        logger.debug(f"Ledger configuration validated ({settings.backend})")
