"""Test fixtures for schemalint."""

from .schema_factories import (
    make_catalog,
    make_field,
    make_list,
    make_schema,
    make_set,
)

__all__ = [
    "make_field",
    "make_list",
    "make_set",
    "make_schema",
    "make_catalog",
]
