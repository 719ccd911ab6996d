"""
Violation results returned by the schema rules.

There is exactly one violation type per rule. A violation found deep in
the schema tree is re-wrapped at every level it passes through on the way
up, so the topmost violation carries the full field path:

    v = SensitivityViolation(field_name="api_key", reason="...")
    v = v.nested_under("settings", "List")
    v.path  # "settings → api_key"
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from schemalint.models.enums import FieldType

PATH_SEPARATOR = " → "


@dataclass(frozen=True)
class SchemaViolation:
    """
    Base class for a rule violation.

    Attributes:
        field_name: Name of the offending field
        reason: Human-readable description of the problem
        parents: Ancestor (field name, container label) pairs, outermost first
    """

    rule_name: ClassVar[str] = ""

    field_name: str
    reason: str
    parents: Tuple[Tuple[str, str], ...] = ()

    @property
    def field_path(self) -> Tuple[str, ...]:
        """Field names from the outermost ancestor down to the offending field."""
        return tuple(name for name, _ in self.parents) + (self.field_name,)

    @property
    def path(self) -> str:
        return PATH_SEPARATOR.join(self.field_path)

    def nested_under(self, field_name: str, container: str) -> "SchemaViolation":
        """Return a copy annotated with an enclosing list/set field."""
        return dataclasses.replace(self, parents=((field_name, container),) + self.parents)

    def __str__(self) -> str:
        prefix = "".join(f"the field '{name}' is a {container}: " for name, container in self.parents)
        return prefix + self.reason


@dataclass(frozen=True)
class SensitivityViolation(SchemaViolation):
    """A secret-looking field is not marked as sensitive."""

    rule_name: ClassVar[str] = "sensitive_fields"


@dataclass(frozen=True)
class BooleanNamingViolation(SchemaViolation):
    """An `_enabled` field is not a boolean."""

    rule_name: ClassVar[str] = "boolean_naming"

    actual_type: Optional[FieldType] = None


@dataclass(frozen=True)
class RedundantDefaultViolation(SchemaViolation):
    """A `name` field defaults to the literal `default`."""

    rule_name: ClassVar[str] = "redundant_name_default"


__all__ = [
    "PATH_SEPARATOR",
    "SchemaViolation",
    "SensitivityViolation",
    "BooleanNamingViolation",
    "RedundantDefaultViolation",
]
