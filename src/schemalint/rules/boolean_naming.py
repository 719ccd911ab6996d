"""Fields ending in `_enabled` must be booleans."""

from __future__ import annotations

from typing import AbstractSet, Optional

from schemalint.models.enums import FieldType
from schemalint.models.schema import FieldSchema, ObjectSchema
from schemalint.violations import BooleanNamingViolation

from .walk import walk_schema

ENABLED_SUFFIX = "_enabled"


def check_boolean_naming(
    schema: ObjectSchema,
    exceptions: AbstractSet[str] = frozenset(),
) -> Optional[BooleanNamingViolation]:
    """
    Check that every `_enabled` field is defined as a boolean.

    Exceptions are lower-cased bare field names, so one exception covers
    that name at every depth of the schema.

    Args:
        schema: Root schema to check
        exceptions: Lower-cased field names to skip

    Returns:
        The first violation in sorted field order, or None
    """

    def visit(field_name: str, field: FieldSchema) -> Optional[BooleanNamingViolation]:
        key = field_name.lower()
        if not key.endswith(ENABLED_SUFFIX):
            return None

        # grandfathered field, see the entry's exception list
        if key in exceptions:
            return None

        if field.type != FieldType.BOOL:
            return BooleanNamingViolation(
                field_name=field_name,
                reason=(
                    f"field '{field_name}' is an '{ENABLED_SUFFIX}' field so should be defined "
                    f"as a {FieldType.BOOL.label} but got {field.type.label}"
                ),
                actual_type=field.type,
            )
        return None

    return walk_schema(schema, visit)


__all__ = [
    "ENABLED_SUFFIX",
    "check_boolean_naming",
]
