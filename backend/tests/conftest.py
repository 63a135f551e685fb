import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from jobmatch.config import settings
from jobmatch.database import get_db
from jobmatch.dependencies import get_job_store
from jobmatch.main import app
from jobmatch.schemas.job import JobPosting
from jobmatch.services.job_store import JobStore
from jobmatch.services.text_service import Lexicon


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


@pytest.fixture
def tmp_data(tmp_path):
    data_path = tmp_path / "JobMatchData"
    data_path.mkdir()
    return data_path


@pytest.fixture
def test_db(tmp_data):
    db_path = tmp_data / "jobs.sqlite"
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    from jobmatch.database import init_db
    init_db(db_path)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestSession
    app.dependency_overrides.pop(get_db, None)
    engine.dispose()


@pytest.fixture
def store():
    return JobStore()


@pytest.fixture
def lexicon():
    return Lexicon(
        stop_words=frozenset({"the", "and", "with", "for"}),
        domain_vocabulary=frozenset({"concept", "artist", "design"}),
        domain_boost=4,
    )


@pytest.fixture
def art_job() -> JobPosting:
    return JobPosting(
        id="job-art",
        title="2D Character Artist",
        company="Pixel Forge",
        description="We need a 2D character artist with strong illustration and painting skills",
        url="https://example.com/jobs/art",
        keywords=("concept", "artist", "character", "illustration", "digital", "painting"),
    )


@pytest.fixture
def finance_job() -> JobPosting:
    return JobPosting(
        id="job-tax",
        title="Tax Accountant",
        company="Ledger & Co",
        description="Senior accountant for corporate tax law compliance and audits",
        url="https://example.com/jobs/tax",
        keywords=("accountant", "tax", "law", "compliance", "audits"),
    )


@pytest.fixture
def client(tmp_data, test_db, store):
    original_data_path = settings.data_path
    settings.data_path = tmp_data
    app.dependency_overrides[get_job_store] = lambda: store
    c = TestClient(app)
    yield c
    app.dependency_overrides.pop(get_job_store, None)
    settings.data_path = original_data_path
