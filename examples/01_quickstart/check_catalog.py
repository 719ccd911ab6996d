"""
Catalog Check Example

This example shows how to check a catalog of data sources and resources
against the schema naming rules.

Key concepts:
1. Declare schemas in Python (or load them from YAML)
2. Run the walker over the whole catalog
3. Grandfather known violations with per-entry exceptions

Run with: python check_catalog.py
"""

from schemalint import (
    Catalog,
    CatalogCheckError,
    CatalogWalker,
    ExceptionRegistry,
)


def main():
    # =========================================================================
    # STEP 1: Declare a catalog
    # =========================================================================

    catalog = Catalog.model_validate({
        "resources": {
            "example_account": {
                "name": {"type": "string"},
                "backup_enabled": {"type": "bool"},
                "settings": {
                    "type": "list",
                    "elem": {
                        "api_key": {"type": "string"},  # not marked as sensitive
                    },
                },
            },
            "example_volume": {
                "name": {"type": "string"},
                "protocols_enabled": {"type": "list"},
            },
        },
    })

    # =========================================================================
    # STEP 2: Check it
    # =========================================================================

    print("\n1. Checking catalog...")
    try:
        CatalogWalker().check_catalog(catalog)
    except CatalogCheckError as e:
        print(f"   Failed rule:  {e.rule_name}")
        print(f"   Entry:        {e.entry_name}")
        print(f"   Field path:   {e.field_path}")
        print(f"   Message:      {e}")

    # =========================================================================
    # STEP 3: Grandfather a known violation
    # =========================================================================
    # Secrets are always must-fix, but a misnamed `_enabled` field can be
    # excepted until the next breaking release.

    print("\n2. Checking with an exception for example_volume...")
    exceptions = ExceptionRegistry.model_validate({
        "boolean_naming": {"resources": {"example_volume": ["protocols_enabled"]}},
    })
    fixed = catalog.model_copy(update={"resources": {"example_volume": catalog.resources["example_volume"]}})
    report = CatalogWalker(exceptions=exceptions).check_catalog(fixed)
    print(f"   Checked {report.total} entries, all passing")


if __name__ == "__main__":
    main()
