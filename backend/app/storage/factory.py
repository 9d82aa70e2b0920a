from app.core.config import Settings
from app.storage.base import Storage
from app.storage.database import DatabaseStorage
from app.storage.memory import MemoryStorage


def build_storage(settings: Settings) -> Storage:
    """Pick the store named by settings.storage_backend."""
    if settings.storage_backend == "memory":
        return MemoryStorage()
    return DatabaseStorage(settings.database_url)
