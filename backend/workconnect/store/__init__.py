import logging

from workconnect.core.config import Settings
from workconnect.store.base import Collection, DuplicateRecord, Store
from workconnect.store.memory import MemoryStore
from workconnect.store.sql import SqlStore

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> Store:
    """Construct the store backend selected by ``STORE_BACKEND``."""
    backend = settings.STORE_BACKEND.strip().lower()
    if backend == "memory":
        logger.info("Using in-memory store")
        return MemoryStore()
    if backend == "sql":
        logger.info("Using SQL store")
        return SqlStore(settings.DATABASE_URL)
    raise ValueError(f"Unknown STORE_BACKEND {settings.STORE_BACKEND!r}; expected 'memory' or 'sql'")


__all__ = ["Collection", "DuplicateRecord", "Store", "MemoryStore", "SqlStore", "build_store"]
