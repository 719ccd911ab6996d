"""Fields named like secrets must be marked as sensitive."""

from __future__ import annotations

from typing import AbstractSet, FrozenSet, Optional

from schemalint.models.enums import FieldType
from schemalint.models.schema import FieldSchema, ObjectSchema
from schemalint.violations import SensitivityViolation

from .walk import walk_schema

SENSITIVE_FIELD_NAMES: FrozenSet[str] = frozenset({
    "api_key",
    "api_secret_key",
    "password",
    "private_key",
    "ssh_private_key",
})

SENSITIVE_STRING_SUFFIX = "_api_key"


def _visit(field_name: str, field: FieldSchema) -> Optional[SensitivityViolation]:
    if field.sensitive:
        return None

    key = field_name.lower()
    if key in SENSITIVE_FIELD_NAMES or (key.endswith(SENSITIVE_STRING_SUFFIX) and field.type == FieldType.STRING):
        return SensitivityViolation(
            field_name=field_name,
            reason=f"field '{field_name}' is a sensitive value and should be marked as Sensitive",
        )
    return None


def check_sensitive_fields(
    schema: ObjectSchema,
    exceptions: AbstractSet[str] = frozenset(),
) -> Optional[SensitivityViolation]:
    """
    Check that secret-looking fields are marked as sensitive.

    A field fails when its lower-cased name is one of SENSITIVE_FIELD_NAMES,
    or when it is a string ending in `_api_key`, and it is not sensitive.

    Args:
        schema: Root schema to check
        exceptions: Ignored; these are always must-fix

    Returns:
        The first violation in sorted field order, or None
    """
    return walk_schema(schema, _visit)


__all__ = [
    "SENSITIVE_FIELD_NAMES",
    "SENSITIVE_STRING_SUFFIX",
    "check_sensitive_fields",
]
