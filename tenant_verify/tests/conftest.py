# tests/conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from tenant_verify.config import Settings, load_settings
from tenant_verify.errors import StoreError
from tenant_verify.repository import SqlRecordStore
from tenant_verify.schemas import ApplicantProfile

ENV_KEYS = ["PORT", "DATABASE_URL", "API_KEY", "LOG_LEVEL", "ENVIRONMENT",
            "MAX_CONNECTIONS", "TIMEOUT_SECONDS"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for k in ENV_KEYS:
        monkeypatch.delenv(k, raising=False)


@pytest.fixture
def settings() -> Settings:
    return load_settings(_env_file=None, DATABASE_URL="sqlite://")


@pytest.fixture
def sql_store():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    store = SqlRecordStore(engine)
    store.connect(create_schema=True)
    yield store
    store.close()


class RecordingStore:
    def __init__(self):
        self.saved = []

    def save(self, profile, outcome):
        self.saved.append((profile, outcome))


class FailingStore:
    def __init__(self):
        self.calls = 0

    def save(self, profile, outcome):
        self.calls += 1
        raise StoreError("database unavailable")


@pytest.fixture
def recording_store():
    return RecordingStore()


@pytest.fixture
def failing_store():
    return FailingStore()


def make_profile(**kw) -> ApplicantProfile:
    data = {
        "name": "Carol",
        "email": "carol@example.com",
        "income": 40000,
        "employment_status": "full_time",
        "rental_history_months": 12,
    }
    data.update(kw)
    return ApplicantProfile(**data)


@pytest.fixture
def alice() -> ApplicantProfile:
    return make_profile(name="Alice", email="a@b.com", income=15000,
                        employment_status="unemployed", rental_history_months=2)


@pytest.fixture
def bob() -> ApplicantProfile:
    return make_profile(name="Bob", email="b@c.com", income=60000,
                        employment_status="full_time", rental_history_months=36)
