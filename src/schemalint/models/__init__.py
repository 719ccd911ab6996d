"""Schema tree and catalog models."""

from .catalog import Catalog, CatalogEntry
from .enums import COLLECTION_TYPES, CatalogPartition, FieldType
from .schema import FieldKind, FieldSchema, ListOfObject, ObjectSchema, PrimitiveKind, SetOfObject

__all__ = [
    # Enums
    "FieldType",
    "CatalogPartition",
    "COLLECTION_TYPES",
    # Schema tree
    "PrimitiveKind",
    "ListOfObject",
    "SetOfObject",
    "FieldKind",
    "FieldSchema",
    "ObjectSchema",
    # Catalog
    "Catalog",
    "CatalogEntry",
]
