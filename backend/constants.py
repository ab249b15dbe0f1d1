"""
Application-wide constants and configuration keys.

This module centralizes all magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""


class ServerConfig:
    """Server configuration constants"""

    HOST = "0.0.0.0"
    PORT = 8890

    @classmethod
    def url(cls) -> str:
        """Get the full server URL"""
        return f"http://{cls.HOST}:{cls.PORT}"


class EnvKeys:
    """Environment variables read by the configuration layer"""

    BACKEND = "LEDGER_BACKEND"
    DATABASE_URL = "LEDGER_DATABASE_URL"
    LOG_DIR = "LEDGER_LOG_DIR"
    LOG_LEVEL = "LEDGER_LOG_LEVEL"


class LedgerBackends:
    """Supported ledger storage backends"""

    SQL = "sql"
    MEMORY = "memory"

    ALL = (SQL, MEMORY)


class LedgerDefaults:
    """Default values for ledger configuration"""

    DATA_DIR_NAME = ".loan_ledger"
    DATABASE_FILE = "ledger.db"
    LOG_DIR_NAME = "logs"
    LOG_FILE = "ledger.log"
    LOG_LEVEL = "INFO"
    LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
    LOG_BACKUP_COUNT = 5
    SCAN_BATCH_SIZE = 100


class IdentityHeaders:
    """Transport headers carrying the caller credential"""

    CLIENT_IDENTITY = "X-Client-Identity"


class SeedAssets:
    """Demonstration assets written by initialize_seed_assets"""

    START_DATE = 20210101
    END_DATE = 20220101

    # (asset_id, amount)
    RECORDS = (
        ("asset1", 300),
        ("asset2", 400),
        ("asset3", 500),
        ("asset4", 600),
        ("asset5", 700),
        ("asset6", 800),
    )


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503
