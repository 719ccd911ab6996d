"""
Catalog of named schema entries.

A catalog is split into two partitions, data sources and resources, each
mapping an entry name to the root schema of that entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator

from pydantic import BaseModel, ConfigDict, Field

from .enums import CatalogPartition
from .schema import ObjectSchema


@dataclass(frozen=True)
class CatalogEntry:
    """A named data source or resource and its root schema."""

    name: str
    partition: CatalogPartition
    schema: ObjectSchema


class Catalog(BaseModel):
    """
    A provider's catalog of data sources and resources.

    Example:
        catalog = Catalog.model_validate({
            "resources": {
                "example_thing": {
                    "name": {"type": "string"},
                    "backup_enabled": {"type": "bool"},
                },
            },
        })
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    data_sources: Dict[str, ObjectSchema] = Field(default_factory=dict, description="Data source schemas by name")
    resources: Dict[str, ObjectSchema] = Field(default_factory=dict, description="Resource schemas by name")

    def entries(self, partition: CatalogPartition) -> Dict[str, ObjectSchema]:
        """Mapping of entry name to schema for one partition."""
        if partition == CatalogPartition.DATA_SOURCES:
            return self.data_sources
        return self.resources

    def iter_entries(self, partition: CatalogPartition) -> Iterator[CatalogEntry]:
        """Yield the entries of a partition in sorted name order."""
        entries = self.entries(partition)
        for name in sorted(entries):
            yield CatalogEntry(name=name, partition=partition, schema=entries[name])


__all__ = [
    "Catalog",
    "CatalogEntry",
]
