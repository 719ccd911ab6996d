"""
Schema rules.

Built-in Rules:
    - sensitive_fields: Secret-looking fields must be marked as sensitive
    - boolean_naming: Fields ending in `_enabled` must be booleans
    - redundant_name_default: A `name` field must not default to `default`

Every rule has the signature `check(schema, exceptions)` and returns the
first violation found, in sorted field order, or None.
"""

from .boolean_naming import check_boolean_naming
from .redundant_default import check_redundant_name_default
from .registry import (
    RuleCheck,
    RuleDefinition,
    RulesRegistry,
    create_default_registry,
    get_default_registry,
)
from .sensitive import SENSITIVE_FIELD_NAMES, check_sensitive_fields
from .walk import FieldVisitor, walk_schema

__all__ = [
    # Rule checks
    "check_sensitive_fields",
    "check_boolean_naming",
    "check_redundant_name_default",
    "SENSITIVE_FIELD_NAMES",
    # Walk
    "FieldVisitor",
    "walk_schema",
    # Registry
    "RuleCheck",
    "RuleDefinition",
    "RulesRegistry",
    "create_default_registry",
    "get_default_registry",
]
