import pytest

from statement_runner import CommitMode, StatementRunner
from statement_runner.base.runner import create_sqlite_engine
from statement_runner.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in ("DATABASE_PATH", "COMMIT_MODE", "ECHO", "LOG_LEVEL"):
        monkeypatch.delenv(f"STATEMENT_RUNNER_{name}", raising=False)

    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "employees.db"


@pytest.fixture
def runner(db_path):
    runner = StatementRunner.open(db_path, commit_mode=CommitMode.AUTO)
    runner.create_table()
    yield runner
    runner.close()


@pytest.fixture
def manual_runner(db_path):
    runner = StatementRunner.open(db_path, commit_mode=CommitMode.MANUAL)
    runner.create_table()
    runner.commit()
    yield runner
    runner.close()


@pytest.fixture
def other_connection(db_path):
    """
    A second, independent connection on the same database file.
    """
    engine = create_sqlite_engine(db_path)
    connection = engine.connect()
    yield connection
    connection.close()
    engine.dispose()
