"""Store Factory - one-time logging setup plus a factory for fresh stores.

Invariants:
    - Every create_store() call returns a new, independent, empty store
    - create_store() never touches logging configuration
    - configure_logging() is the only place settings reach the root logger
    - No module-level store instance exists

Design Decisions:
    - Logging configured once at process start, stores built per scope
    - Factory returns the RecordRepository protocol: callers depend on the
      contract, not the in-memory implementation
"""

import logging

from record_store.config import Settings, get_settings
from record_store.core.repository_protocols import RecordRepository
from record_store.infrastructure.memory_store import InMemoryRecordStore
from record_store.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """Apply log level and format from settings. Call once at startup."""
    settings = settings or get_settings()
    handler = setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "Logging configured",
        extra={"store": settings.store_name},
    )
    return handler


def create_store(settings: Settings | None = None) -> RecordRepository:
    """Return an empty record store named from settings."""
    settings = settings or get_settings()
    store = InMemoryRecordStore(name=settings.store_name)
    logger.info(
        f"Record store '{store.name}' created",
        extra={"store": store.name},
    )
    return store
