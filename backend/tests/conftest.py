import os

# Must be set before app.main is imported so the module-level app uses memory
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest  # noqa: E402


@pytest.fixture(params=["memory", "sqlite"])
def storage(request):
    """Each store implementation, fresh per test."""
    from app.storage.database import DatabaseStorage  # noqa: WPS433
    from app.storage.memory import MemoryStorage  # noqa: WPS433

    if request.param == "memory":
        return MemoryStorage()
    return DatabaseStorage("sqlite+pysqlite:///:memory:")


@pytest.fixture
def client(storage):
    from app.main import create_app  # noqa: WPS433
    from fastapi.testclient import TestClient  # noqa: WPS433
    return TestClient(create_app(storage))
