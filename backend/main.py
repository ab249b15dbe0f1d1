from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging
from logging.handlers import RotatingFileHandler
import sys

from api import assets
from config.ledger_config import LEDGER_SETTINGS, LedgerSettings
from constants import LedgerBackends, LedgerDefaults, ServerConfig
from init_db import init_database
from services.schema_validator import SchemaValidator


def configure_logging(settings: LedgerSettings) -> None:
    """Attach rotating file and console handlers to the root logger."""
    settings.log_dir.mkdir(parents=True, exist_ok=True)

    log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # File handler with rotation (10MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        settings.log_file,
        maxBytes=LedgerDefaults.LOG_MAX_BYTES,
        backupCount=LedgerDefaults.LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    file_handler.setFormatter(log_formatter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)


configure_logging(LEDGER_SETTINGS)
logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LEDGER_SETTINGS.log_file}")

SCHEMA_STATUS = {"valid": True, "issues": []}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    global SCHEMA_STATUS

    if LEDGER_SETTINGS.backend == LedgerBackends.SQL:
        init_database()
        SCHEMA_STATUS = SchemaValidator.check()
        if not SCHEMA_STATUS["valid"]:
            logger.error(f"❌ Ledger schema invalid: {SCHEMA_STATUS['issues']}")
    else:
        logger.warning("⚠️  Using in-memory ledger - state is lost on shutdown")

    logger.info("Application startup complete")
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Loan Asset Ledger API",
    description="Lifecycle management for loan assets stored on a key-value ledger",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(assets.router, prefix="/api", tags=["assets"])


@app.get("/api/system/status")
def get_system_status():
    """Get the configured backend and schema status"""
    return {
        "backend": LEDGER_SETTINGS.backend,
        "schema_status": SCHEMA_STATUS
    }


if __name__ == "__main__":
    import uvicorn

    logger.info(f"🚀 Starting Loan Asset Ledger on {ServerConfig.url()}...")
    uvicorn.run(app, host=ServerConfig.HOST, port=ServerConfig.PORT)
