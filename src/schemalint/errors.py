"""Errors raised by schema lint runs."""

from __future__ import annotations

from schemalint.models.enums import CatalogPartition
from schemalint.violations import SchemaViolation


class SchemaLintError(Exception):
    """Base class for schemalint errors."""


class CatalogCheckError(SchemaLintError):
    """
    A catalog entry failed one of the schema rules.

    Raised on the first violation found; a failing check fails the whole
    run for that catalog partition.

    Attributes:
        entry_name: Name of the data source or resource
        partition: Catalog partition the entry belongs to
        rule_name: Name of the rule that failed
        violation: The violation returned by the rule
    """

    def __init__(
        self,
        entry_name: str,
        partition: CatalogPartition,
        rule_name: str,
        violation: SchemaViolation,
        summary: str,
    ) -> None:
        self.entry_name = entry_name
        self.partition = partition
        self.rule_name = rule_name
        self.violation = violation
        super().__init__(f"the {partition.label} '{entry_name}' {summary}: {violation}")

    @property
    def field_path(self) -> str:
        return self.violation.path


__all__ = [
    "SchemaLintError",
    "CatalogCheckError",
]
