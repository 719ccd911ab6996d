"""
A `name` field must not default to `default`.

An entry whose name defaults to the literal "default" is really a single
sub-entity of some parent, and should be exposed as part of that parent
instead of as a standalone entry.
"""

from __future__ import annotations

from typing import AbstractSet, Optional

from schemalint.models.schema import FieldSchema, ObjectSchema
from schemalint.violations import RedundantDefaultViolation

from .walk import walk_schema

NAME_FIELD = "name"
REDUNDANT_DEFAULT = "default"


def check_redundant_name_default(
    schema: ObjectSchema,
    exceptions: AbstractSet[str] = frozenset(),
) -> Optional[RedundantDefaultViolation]:
    """
    Check that no `name` field has a default value of `default`.

    Both comparisons are case-insensitive. Non-string defaults never fail.

    Args:
        schema: Root schema to check
        exceptions: Lower-cased field names to skip

    Returns:
        The first violation in sorted field order, or None
    """

    def visit(field_name: str, field: FieldSchema) -> Optional[RedundantDefaultViolation]:
        key = field_name.lower()
        if key in exceptions or key != NAME_FIELD:
            return None

        if isinstance(field.default, str) and field.default.lower() == REDUNDANT_DEFAULT:
            return RedundantDefaultViolation(
                field_name=field_name,
                reason=f"field '{field_name}' is a '{NAME_FIELD}' field which contains a default value of '{REDUNDANT_DEFAULT}'",
            )
        return None

    return walk_schema(schema, visit)


__all__ = [
    "NAME_FIELD",
    "REDUNDANT_DEFAULT",
    "check_redundant_name_default",
]
