"""Boundary Protocols - contracts between record callers and store implementations.

Invariants:
    - insert() returns the persisted record; callers never rely on the candidate
    - Lookups return None for missing records, never raise

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: implementations are in-memory, nothing to await
"""

from typing import Protocol

from record_store.core.record import Record


class RecordRepository(Protocol):
    """Contract for record persistence - implemented by infrastructure."""
    name: str

    def insert(self, candidate: Record) -> Record: ...
    def find_by_identity(self, identity: int) -> Record | None: ...
    def find_by_name(self, name: str) -> Record | None: ...
    def list_all(self) -> list[Record]: ...
    def count(self) -> int: ...
