"""
Per-entry exception lists for schema rules.

Some fields break a rule but cannot be changed until a breaking-change
window. Each rule takes a set of lower-cased field names to skip for the
entry being checked; the sets are configuration supplied by the caller,
never derived from the schemas themselves.

Structure:
    ExceptionRegistry   rule name -> partition -> ExceptionSet
    ExceptionSet        entry name -> set of lower-cased field names
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List

from pydantic import ConfigDict, Field, RootModel, field_validator

from schemalint.models.enums import CatalogPartition

EMPTY: FrozenSet[str] = frozenset()


class ExceptionSet(RootModel[Dict[str, FrozenSet[str]]]):
    """
    Field names exempted from one rule, keyed by entry name.

    Example:
        exceptions = ExceptionSet({"azurerm_netapp_volume": {"Protocols_Enabled"}})
        exceptions.for_entry("azurerm_netapp_volume")  # frozenset({"protocols_enabled"})
        exceptions.for_entry("azurerm_other")          # frozenset()
    """

    model_config = ConfigDict(frozen=True)

    root: Dict[str, FrozenSet[str]] = Field(default_factory=dict)

    @field_validator("root")
    @classmethod
    def lowercase_field_names(cls, v: Dict[str, FrozenSet[str]]) -> Dict[str, FrozenSet[str]]:
        """Rules compare lower-cased names, so store them that way."""
        return {entry: frozenset(name.lower() for name in names) for entry, names in v.items()}

    def for_entry(self, entry_name: str) -> FrozenSet[str]:
        """Exempted field names for an entry; empty if none are declared."""
        return self.root.get(entry_name, EMPTY)

    def entry_names(self) -> List[str]:
        return sorted(self.root.keys())

    def __len__(self) -> int:
        return len(self.root)


class ExceptionRegistry(RootModel[Dict[str, Dict[CatalogPartition, ExceptionSet]]]):
    """
    Exception sets for every rule and catalog partition.

    Example YAML:
        boolean_naming:
          resources:
            azurerm_netapp_volume: [protocols_enabled]
        redundant_name_default:
          resources:
            azurerm_redis_enterprise_database: [name]
    """

    model_config = ConfigDict(frozen=True)

    root: Dict[str, Dict[CatalogPartition, ExceptionSet]] = Field(default_factory=dict)

    def exceptions_for(self, rule_name: str, partition: CatalogPartition) -> ExceptionSet:
        """
        Get the exception set for a rule within a partition.

        Returns an empty ExceptionSet if nothing is declared.
        """
        return self.root.get(rule_name, {}).get(partition, ExceptionSet())

    def rule_names(self) -> List[str]:
        return sorted(self.root.keys())


__all__ = [
    "ExceptionSet",
    "ExceptionRegistry",
]
