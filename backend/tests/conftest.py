import os
import sys
import tempfile
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep test runs away from the user's ledger and log directory
os.environ.setdefault("LEDGER_BACKEND", "sql")
os.environ.setdefault("LEDGER_DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("LEDGER_LOG_DIR", str(Path(tempfile.gettempdir()) / "loan_ledger_test_logs"))

# Now import after path and environment are set
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401 - register tables
from database import Base
from repositories.memory_ledger import InMemoryLedger
from services.asset_service import AssetService
from services.identity_resolver import encode_identity


@pytest.fixture
def db_session():
    """Create in-memory database for testing"""
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def ledger():
    """Empty in-memory ledger"""
    return InMemoryLedger()


@pytest.fixture
def lender_token():
    """Transport-encoded credential for identity 'lenderA'"""
    return encode_identity("lenderA")


@pytest.fixture
def service(ledger, lender_token):
    """Asset service acting as 'lenderA' over the in-memory ledger"""
    return AssetService(ledger, client_identity=lender_token)
