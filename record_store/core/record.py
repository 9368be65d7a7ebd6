"""Record - immutable value stored by a RecordRepository.

Invariants:
    - Fields cannot be reassigned after construction (frozen model)
    - identity is None until a store assigns it; once set it is >= 1
    - with_identity() returns a new record of the receiver's type; the receiver never changes

Design Decisions:
    - Frozen Pydantic model over frozen dataclass: field validation on every
      derivation, value equality and hashing for free
    - with_identity() revalidates through model_validate instead of model_copy,
      which would skip the identity bound check
"""

from pydantic import BaseModel, ConfigDict, Field

from record_store.core.domain_types import RecordId


class Record(BaseModel):
    """Immutable named value with an optional store-assigned identity."""

    model_config = ConfigDict(frozen=True)

    identity: RecordId | None = Field(None, ge=1)
    name: str

    @property
    def has_identity(self) -> bool:
        return self.identity is not None

    def with_identity(self, identity: int) -> "Record":
        """Derive a copy of this record carrying `identity`."""
        return type(self).model_validate(
            {**self.model_dump(), "identity": identity},
        )
