"""Error Hierarchy - typed, categorized exceptions for record store failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - "Not found" is never an error: lookups return None
    - Errors are fatal to the failing operation only, never to the process

Design Decisions:
    - Single hierarchy with RecordStoreError base: callers catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from record_store.core.domain_types import ErrorCategory, ErrorSeverity


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    record_id: int | None = None
    record_name: str | None = None
    debug_info: dict[str, Any] | None = None


class RecordStoreError(Exception):
    """Base exception for all record store errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a structured error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "record_id": self.context.record_id,
                    "record_name": self.context.record_name,
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Caller Errors ──────────────────────────────────────────────

class IdentityAlreadyAssignedError(RecordStoreError):
    """Candidate passed to insert already carries an identity."""
    def __init__(self, identity: int, context: ErrorContext | None = None):
        super().__init__(
            f"Candidate already has identity {identity}; "
            "only the store assigns identities",
            "IDENTITY_ALREADY_ASSIGNED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.identity = identity


# ─── Internal Errors ────────────────────────────────────────────

class DuplicateIdentityError(RecordStoreError):
    """Store attempted to assign an identity that is already taken."""
    def __init__(self, identity: int, context: ErrorContext | None = None):
        super().__init__(
            f"Identity {identity} is already assigned",
            "DUPLICATE_IDENTITY", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context,
        )
        self.identity = identity
