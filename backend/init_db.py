from database import engine, Base
from sqlalchemy import inspect
import logging

import models  # noqa: F401 - register tables on Base.metadata

logger = logging.getLogger(__name__)


def init_database():
    """Create the ledger tables if they don't exist yet"""
    existing = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)

    created = [name for name in Base.metadata.tables if name not in existing]
    if created:
        logger.info(f"✅ Created ledger tables: {', '.join(created)}")
    else:
        logger.debug("Ledger schema is up to date")


if __name__ == "__main__":
    init_database()
    print("✅ Database initialized")
