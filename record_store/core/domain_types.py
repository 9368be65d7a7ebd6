"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - RecordId wraps int and is always >= 1 once assigned by a store
    - All valid error states encoded as Enums - no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", int)

FIRST_RECORD_ID = RecordId(1)


# ─── Enums ───────────────────────────────────────────────────────

class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"
