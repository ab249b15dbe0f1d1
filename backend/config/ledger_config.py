"""
Ledger Runtime Configuration

Determines which ledger backend the service runs against and where the
database and log files live. Controlled by environment variables:

- LEDGER_BACKEND: 'sql' (default) or 'memory'
- LEDGER_DATABASE_URL: SQLAlchemy URL for the sql backend
- LEDGER_LOG_DIR: directory for the rotating log file
- LEDGER_LOG_LEVEL: root log level name
"""
import os
import logging
from dataclasses import dataclass
from pathlib import Path

from constants import EnvKeys, LedgerBackends, LedgerDefaults

logger = logging.getLogger(__name__)


def default_data_dir() -> Path:
    """Directory holding the default sqlite ledger and logs."""
    return Path.home() / LedgerDefaults.DATA_DIR_NAME


@dataclass(frozen=True)
class LedgerSettings:
    """Immutable snapshot of the ledger runtime configuration."""

    backend: str
    database_url: str
    log_dir: Path
    log_level: str

    @property
    def uses_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def log_file(self) -> Path:
        return self.log_dir / LedgerDefaults.LOG_FILE

    @classmethod
    def from_env(cls, environ: dict | None = None) -> "LedgerSettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (used by tests)

        Returns:
            LedgerSettings instance (not yet validated)
        """
        env = os.environ if environ is None else environ
        data_dir = default_data_dir()

        backend = env.get(EnvKeys.BACKEND, LedgerBackends.SQL).strip().lower()
        database_url = env.get(
            EnvKeys.DATABASE_URL,
            f"sqlite:///{data_dir / LedgerDefaults.DATABASE_FILE}"
        ).strip()
        log_dir = Path(env.get(EnvKeys.LOG_DIR, str(data_dir / LedgerDefaults.LOG_DIR_NAME)))
        log_level = env.get(EnvKeys.LOG_LEVEL, LedgerDefaults.LOG_LEVEL).strip().upper()

        return cls(
            backend=backend,
            database_url=database_url,
            log_dir=log_dir,
            log_level=log_level,
        )


def load_settings() -> LedgerSettings:
    """
    Load and validate settings from the process environment.

    Raises:
        ConfigurationError: If any setting is invalid
    """
    from services.config_validator import ConfigValidator

    settings = LedgerSettings.from_env()
    ConfigValidator.validate_ledger_settings(settings)
    logger.info(f"Ledger backend: {settings.backend}")
    return settings


# Global settings resolved once at import
LEDGER_SETTINGS = load_settings()
