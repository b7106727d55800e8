"""
Partial-update ("patch") base model.

A patch carries only the fields the caller supplied. Fields left out keep
their stored value; fields explicitly set to ``None`` clear nullable columns.
"""

from typing import Any, ClassVar, Dict, FrozenSet
from pydantic import BaseModel, model_validator


class RecordPatch(BaseModel):
    """Base for patch values whose fields are all optional."""

    # Columns that may be omitted from a patch but never set to null
    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        nulled = sorted(
            name for name in self.model_fields_set
            if name in self.non_nullable and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly supplied by the caller."""
        return self.model_dump(exclude_unset=True)

    def is_empty(self) -> bool:
        return not self.model_fields_set

    def apply_to(self, record: Any) -> Dict[str, Any]:
        """Copy the supplied fields onto ``record`` and return them."""
        changes = self.changes()
        for name, value in changes.items():
            setattr(record, name, value)
        return changes
