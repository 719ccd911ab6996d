"""
Depth-first schema walk shared by all rules.

Each rule supplies a visitor that inspects one field and returns a
violation or None. The walk handles ordering and recursion into list/set
fields with a nested schema, and annotates violations bubbling up from a
nested schema with the enclosing field.
"""

from __future__ import annotations

from typing import Callable, Optional

from schemalint.models.schema import FieldSchema, ObjectSchema
from schemalint.violations import SchemaViolation

FieldVisitor = Callable[[str, FieldSchema], Optional[SchemaViolation]]


def walk_schema(schema: ObjectSchema, visit: FieldVisitor) -> Optional[SchemaViolation]:
    """
    Visit every field of a schema tree in sorted name order.

    Recursion into a nested schema happens whether or not the visitor
    skipped the field itself.

    Args:
        schema: Root schema to walk
        visit: Called with (field_name, field) for every field

    Returns:
        The first violation found, or None
    """
    for field_name, field in schema.items():
        violation = visit(field_name, field)
        if violation is not None:
            return violation

        nested = field.nested_schema
        if nested is None:
            continue

        violation = walk_schema(nested, visit)
        if violation is not None:
            return violation.nested_under(field_name, field.type.label)

    return None


__all__ = [
    "FieldVisitor",
    "walk_schema",
]
