"""
Catalog walker.

Runs every registered rule against every entry of a catalog partition and
fails on the first violation. The walker gates acceptance of a catalog, so
there is no collect-all mode: the first failing entry/rule raises.

Usage:
    from schemalint import CatalogWalker, load_catalog, load_config

    catalog = load_catalog("catalog.yml")
    config = load_config("schemalint.yml")

    walker = CatalogWalker(exceptions=config.exceptions)
    walker.check_catalog(catalog)  # raises CatalogCheckError on failure
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from schemalint.errors import CatalogCheckError
from schemalint.exceptions_registry import ExceptionRegistry
from schemalint.models.catalog import Catalog, CatalogEntry
from schemalint.models.enums import CatalogPartition
from schemalint.rules.registry import RulesRegistry, get_default_registry

logger = logging.getLogger(__name__)


@dataclass
class CheckReport:
    """Number of entries checked per partition by a successful run."""

    checked: Dict[CatalogPartition, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.checked.values())


class CatalogWalker:
    """
    Applies schema rules to catalog entries in a deterministic order.

    Entries are visited in sorted name order and rules in registration
    order, so the same catalog always reports the same failure.
    """

    def __init__(
        self,
        registry: Optional[RulesRegistry] = None,
        exceptions: Optional[ExceptionRegistry] = None,
    ) -> None:
        """
        Initialize the walker.

        Args:
            registry: Rules to run (uses default if not provided)
            exceptions: Per-entry exceptions (none if not provided)

        Raises:
            KeyError: If exceptions reference an unregistered rule
            ValueError: If exceptions are declared for a rule that doesn't support them
        """
        self._registry = registry or get_default_registry()
        self._exceptions = exceptions or ExceptionRegistry()

        for rule_name in self._exceptions.rule_names():
            rule = self._registry.get(rule_name)
            if not rule.supports_exceptions:
                raise ValueError(f"Rule '{rule_name}' does not support exceptions")

    def check_entry(self, entry: CatalogEntry) -> None:
        """
        Run every rule against one entry.

        Raises:
            CatalogCheckError: On the first violation
        """
        for rule in self._registry.ordered():
            exceptions = self._exceptions.exceptions_for(rule.name, entry.partition).for_entry(entry.name)
            logger.debug(f"Checking {entry.partition.label} '{entry.name}' against {rule.name}")

            violation = rule.check(entry.schema, exceptions)
            if violation is None:
                continue

            error = CatalogCheckError(
                entry_name=entry.name,
                partition=entry.partition,
                rule_name=rule.name,
                violation=violation,
                summary=rule.failure_summary,
            )
            logger.error(f"[{rule.name}] {error}")
            raise error

    def check_partition(self, catalog: Catalog, partition: CatalogPartition) -> int:
        """
        Check every entry of one partition.

        Returns:
            Number of entries checked

        Raises:
            CatalogCheckError: On the first violation
        """
        count = 0
        for entry in catalog.iter_entries(partition):
            self.check_entry(entry)
            count += 1

        logger.info(f"Checked {count} {partition.value} against {len(self._registry.ordered())} rules")
        return count

    def check_catalog(self, catalog: Catalog) -> CheckReport:
        """
        Check data sources, then resources.

        Raises:
            CatalogCheckError: On the first violation
        """
        report = CheckReport()
        for partition in (CatalogPartition.DATA_SOURCES, CatalogPartition.RESOURCES):
            report.checked[partition] = self.check_partition(catalog, partition)
        return report


def check_data_sources(catalog: Catalog, exceptions: Optional[ExceptionRegistry] = None) -> int:
    """Check all data sources with the default rules."""
    return CatalogWalker(exceptions=exceptions).check_partition(catalog, CatalogPartition.DATA_SOURCES)


def check_resources(catalog: Catalog, exceptions: Optional[ExceptionRegistry] = None) -> int:
    """Check all resources with the default rules."""
    return CatalogWalker(exceptions=exceptions).check_partition(catalog, CatalogPartition.RESOURCES)


__all__ = [
    "CatalogWalker",
    "CheckReport",
    "check_data_sources",
    "check_resources",
]
