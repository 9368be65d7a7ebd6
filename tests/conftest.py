"""Root conftest - shared test configuration.

Invariants:
    - Tests never read a developer's .env overrides for logging
    - Handlers installed by setup_logging are removed after each test
"""

import logging
import os

import pytest

from record_store.config import get_settings

os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("LOG_FORMAT", "json")


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo root logger changes made by setup_logging/configure_logging."""
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if handler not in handlers:
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)
    get_settings.cache_clear()


@pytest.fixture
def store():
    from record_store.infrastructure.memory_store import InMemoryRecordStore
    return InMemoryRecordStore(name="test")
