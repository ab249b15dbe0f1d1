from pathlib import Path

import pytest

from config.ledger_config import LedgerSettings
from exceptions import ConfigurationError
from services.config_validator import ConfigValidator


def test_defaults_point_into_home_directory():
    settings = LedgerSettings.from_env({})
    assert settings.backend == "sql"
    assert settings.uses_sqlite
    assert settings.database_url.endswith("ledger.db")
    assert settings.log_level == "INFO"
    assert settings.log_file.name == "ledger.log"


def test_reads_environment_values(tmp_path):
    settings = LedgerSettings.from_env({
        "LEDGER_BACKEND": " Memory ",
        "LEDGER_DATABASE_URL": "postgresql://ledger@db/ledger",
        "LEDGER_LOG_DIR": str(tmp_path),
        "LEDGER_LOG_LEVEL": "debug",
    })
    assert settings.backend == "memory"
    assert not settings.uses_sqlite
    assert settings.log_dir == Path(tmp_path)
    assert settings.log_level == "DEBUG"
    ConfigValidator.validate_ledger_settings(settings)


@pytest.mark.parametrize("env,message", [
    ({"LEDGER_BACKEND": "couchdb"}, "Unsupported ledger backend"),
    ({"LEDGER_DATABASE_URL": ""}, "cannot be empty"),
    ({"LEDGER_LOG_LEVEL": "LOUD"}, "Unknown log level"),
])
def test_invalid_settings(env, message):
    with pytest.raises(ConfigurationError, match=message):
        ConfigValidator.validate_ledger_settings(LedgerSettings.from_env(env))
