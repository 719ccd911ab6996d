"""
schemalint - naming convention checks for declarative resource schemas.

Given a catalog of data sources and resources, each described by a tree
of field declarations, schemalint verifies that field names imply the
right type and attributes:

- Secret-looking fields (`password`, `api_key`, `*_api_key`, ...) must be
  marked as sensitive
- Fields ending in `_enabled` must be booleans
- A `name` field must not default to `default`

Quick Start:
    from schemalint import Catalog, CatalogWalker, load_config

    catalog = Catalog.model_validate({
        "resources": {
            "example_thing": {
                "name": {"type": "string"},
                "settings": {
                    "type": "list",
                    "elem": {"api_key": {"type": "string", "sensitive": True}},
                },
            },
        },
    })

    config = load_config("schemalint.yml")
    CatalogWalker(exceptions=config.exceptions).check_catalog(catalog)
"""

__version__ = "0.1.0"

from schemalint.config import CONFIG_ENV_VAR, LintConfig, load_catalog, load_config
from schemalint.errors import CatalogCheckError, SchemaLintError
from schemalint.exceptions_registry import ExceptionRegistry, ExceptionSet
from schemalint.models import (
    Catalog,
    CatalogEntry,
    CatalogPartition,
    FieldSchema,
    FieldType,
    ListOfObject,
    ObjectSchema,
    PrimitiveKind,
    SetOfObject,
)
from schemalint.rules import (
    RuleDefinition,
    RulesRegistry,
    check_boolean_naming,
    check_redundant_name_default,
    check_sensitive_fields,
    create_default_registry,
    get_default_registry,
    walk_schema,
)
from schemalint.violations import (
    BooleanNamingViolation,
    RedundantDefaultViolation,
    SchemaViolation,
    SensitivityViolation,
)
from schemalint.walker import CatalogWalker, CheckReport, check_data_sources, check_resources

__all__ = [
    "__version__",
    # Models
    "FieldType",
    "CatalogPartition",
    "PrimitiveKind",
    "ListOfObject",
    "SetOfObject",
    "FieldSchema",
    "ObjectSchema",
    "Catalog",
    "CatalogEntry",
    # Exceptions registry
    "ExceptionSet",
    "ExceptionRegistry",
    # Rules
    "check_sensitive_fields",
    "check_boolean_naming",
    "check_redundant_name_default",
    "walk_schema",
    "RuleDefinition",
    "RulesRegistry",
    "create_default_registry",
    "get_default_registry",
    # Violations and errors
    "SchemaViolation",
    "SensitivityViolation",
    "BooleanNamingViolation",
    "RedundantDefaultViolation",
    "SchemaLintError",
    "CatalogCheckError",
    # Walker
    "CatalogWalker",
    "CheckReport",
    "check_data_sources",
    "check_resources",
    # Config
    "CONFIG_ENV_VAR",
    "LintConfig",
    "load_config",
    "load_catalog",
]
