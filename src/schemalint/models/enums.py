"""
Enum definitions for schema tree models.

This module contains the enumeration types shared by the schema model,
the rules and the catalog walker.
"""

from enum import Enum
from typing import Set


class FieldType(str, Enum):
    """Declared type of a schema field."""
    STRING = "string"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    MAP = "map"
    LIST = "list"  # Collection, optionally of nested objects
    SET = "set"  # Collection, optionally of nested objects

    @property
    def label(self) -> str:
        """Display name used in violation messages (e.g. 'List')."""
        return self.value.capitalize()

    @property
    def is_collection(self) -> bool:
        return self in COLLECTION_TYPES


COLLECTION_TYPES: Set[FieldType] = {FieldType.LIST, FieldType.SET}


class CatalogPartition(str, Enum):
    """The two halves of a provider catalog."""
    DATA_SOURCES = "data_sources"
    RESOURCES = "resources"

    @property
    def label(self) -> str:
        """Singular display name, e.g. 'Data Source'."""
        return {
            CatalogPartition.DATA_SOURCES: "Data Source",
            CatalogPartition.RESOURCES: "Resource",
        }[self]


__all__ = [
    "FieldType",
    "CatalogPartition",
    "COLLECTION_TYPES",
]
