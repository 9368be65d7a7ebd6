"""In-Memory Record Store - assigns identities and holds records for the process lifetime.

Invariants:
    - Every stored record has a non-null, unique identity
    - next_identity is strictly greater than every identity ever assigned
    - insert() returns the exact object it stored, never the candidate
    - Identity assignment and map insertion happen atomically under one lock

Design Decisions:
    - Owned instance state, no module globals: one store per process, request or test
    - dict keeps insertion order, so list_all and find_by_name need no extra index
    - Readers take the lock too: each call sees a consistent snapshot
"""

import logging
import threading

from record_store.core.domain_types import FIRST_RECORD_ID, RecordId
from record_store.core.errors import (
    DuplicateIdentityError, ErrorContext, IdentityAlreadyAssignedError,
)
from record_store.core.record import Record

logger = logging.getLogger(__name__)


class InMemoryRecordStore:
    """RecordRepository backed by an insertion-ordered dict."""

    def __init__(self, name: str = "records"):
        self.name = name
        self._records: dict[RecordId, Record] = {}
        self._next_identity: RecordId = FIRST_RECORD_ID
        self._lock = threading.Lock()

    @property
    def next_identity(self) -> RecordId:
        with self._lock:
            return self._next_identity

    def insert(self, candidate: Record) -> Record:
        """Assign the next identity to `candidate` and store the derived record.

        Returns the stored record. The candidate is immutable and is never
        updated, so callers must keep the return value.

        Raises:
            IdentityAlreadyAssignedError: candidate already carries an identity.
            DuplicateIdentityError: the counter points at a taken key.
        """
        if candidate.has_identity:
            logger.warning(
                f"Rejected pre-identified candidate '{candidate.name}'",
                extra={
                    "store": self.name,
                    "record_id": candidate.identity,
                    "error_code": "IDENTITY_ALREADY_ASSIGNED",
                },
            )
            raise IdentityAlreadyAssignedError(
                candidate.identity,
                ErrorContext(
                    record_id=candidate.identity, record_name=candidate.name,
                ),
            )

        with self._lock:
            identity = self._next_identity
            if identity in self._records:
                logger.error(
                    f"Identity {identity} already present in store",
                    extra={
                        "store": self.name,
                        "record_id": identity,
                        "error_code": "DUPLICATE_IDENTITY",
                    },
                )
                raise DuplicateIdentityError(
                    identity,
                    ErrorContext(
                        record_id=identity,
                        record_name=candidate.name,
                        debug_info={"stored": len(self._records)},
                    ),
                )
            stored = candidate.with_identity(identity)
            self._records[identity] = stored
            self._next_identity = RecordId(identity + 1)

        logger.debug(
            f"Stored record '{stored.name}' as {identity}",
            extra={
                "store": self.name,
                "record_id": identity,
                "record_name": stored.name,
            },
        )
        return stored

    def find_by_identity(self, identity: int) -> Record | None:
        with self._lock:
            return self._records.get(RecordId(identity))

    def find_by_name(self, name: str) -> Record | None:
        """Return the first-inserted record named exactly `name`, or None."""
        with self._lock:
            return next(
                (r for r in self._records.values() if r.name == name), None,
            )

    def list_all(self) -> list[Record]:
        """All records in insertion order, as a fresh list."""
        with self._lock:
            return list(self._records.values())

    def count(self) -> int:
        with self._lock:
            return len(self._records)
