"""
Unit tests for CatalogWalker.

Tests entry ordering, rule ordering, exception scoping and failure reporting.
"""

from pathlib import Path

import pytest

from schemalint import (
    Catalog,
    CatalogCheckError,
    CatalogPartition,
    CatalogWalker,
    ExceptionRegistry,
    check_data_sources,
    check_resources,
    load_catalog,
)
from schemalint.violations import BooleanNamingViolation, SensitivityViolation
from tests.fixtures import make_catalog, make_field, make_list, make_schema


class TestCatalogWalkerPasses:
    """Tests for catalogs that satisfy every rule."""

    def test_clean_catalog(self, clean_catalog: Catalog) -> None:
        report = CatalogWalker().check_catalog(clean_catalog)
        assert report.checked == {CatalogPartition.DATA_SOURCES: 1, CatalogPartition.RESOURCES: 2}
        assert report.total == 3

    def test_empty_catalog(self) -> None:
        assert CatalogWalker().check_catalog(make_catalog()).total == 0

    def test_helpers(self, clean_catalog: Catalog) -> None:
        assert check_data_sources(clean_catalog) == 1
        assert check_resources(clean_catalog) == 2

    def test_repeatable(self, clean_catalog: Catalog) -> None:
        walker = CatalogWalker()
        assert walker.check_catalog(clean_catalog) == walker.check_catalog(clean_catalog)


class TestCatalogWalkerFailures:
    """Tests for failure reporting."""

    def test_first_entry_in_sorted_order_fails(self) -> None:
        catalog = make_catalog(resources={
            "zz_thing": make_schema(password=make_field("string")),
            "aa_thing": make_schema(backup_enabled=make_field("string")),
        })
        with pytest.raises(CatalogCheckError) as exc_info:
            check_resources(catalog)

        error = exc_info.value
        assert error.entry_name == "aa_thing"
        assert error.partition == CatalogPartition.RESOURCES
        assert error.rule_name == "boolean_naming"
        assert isinstance(error.violation, BooleanNamingViolation)

    def test_rules_run_in_order(self) -> None:
        """An entry breaking several rules reports the sensitive rule first."""
        catalog = make_catalog(resources={
            "thing": make_schema(
                backup_enabled=make_field("string"),
                name=make_field("string", default="default"),
                password=make_field("string"),
            ),
        })
        with pytest.raises(CatalogCheckError) as exc_info:
            check_resources(catalog)
        assert exc_info.value.rule_name == "sensitive_fields"
        assert isinstance(exc_info.value.violation, SensitivityViolation)

    def test_error_message_and_path(self) -> None:
        catalog = make_catalog(data_sources={
            "example_account": make_schema(settings=make_list(api_key=make_field("string"))),
        })
        with pytest.raises(CatalogCheckError) as exc_info:
            check_data_sources(catalog)

        error = exc_info.value
        assert error.field_path == "settings → api_key"
        assert str(error) == (
            "the Data Source 'example_account' contains a sensitive field which isn't marked as sensitive: "
            "the field 'settings' is a List: "
            "field 'api_key' is a sensitive value and should be marked as Sensitive"
        )

    def test_redundant_default_message(self) -> None:
        catalog = make_catalog(resources={
            "example_tag_rule": make_schema(name=make_field("string", default="default")),
        })
        with pytest.raises(CatalogCheckError) as exc_info:
            check_resources(catalog)
        assert str(exc_info.value).startswith(
            "the Resource 'example_tag_rule' contains a 'name' field with a default value of 'default'"
        )

    def test_other_partition_not_checked(self) -> None:
        """check_data_sources() only looks at data sources."""
        catalog = make_catalog(resources={"thing": make_schema(password=make_field("string"))})
        assert check_data_sources(catalog) == 0


class TestCatalogWalkerExceptions:
    """Tests for exception scoping."""

    def test_exception_scoped_to_entry(self) -> None:
        """An exception for entry A does not cover the same field in entry B."""
        catalog = make_catalog(resources={
            "entry_a": make_schema(protocols_enabled=make_list()),
            "entry_b": make_schema(protocols_enabled=make_list()),
        })
        exceptions = ExceptionRegistry.model_validate({
            "boolean_naming": {"resources": {"entry_a": ["protocols_enabled"]}},
        })
        with pytest.raises(CatalogCheckError) as exc_info:
            check_resources(catalog, exceptions)
        assert exc_info.value.entry_name == "entry_b"

    def test_exception_scoped_to_rule(self) -> None:
        """A boolean_naming exception does not cover redundant_name_default."""
        catalog = make_catalog(resources={
            "entry_a": make_schema(name=make_field("string", default="default")),
        })
        exceptions = ExceptionRegistry.model_validate({
            "boolean_naming": {"resources": {"entry_a": ["name"]}},
        })
        with pytest.raises(CatalogCheckError) as exc_info:
            check_resources(catalog, exceptions)
        assert exc_info.value.rule_name == "redundant_name_default"

    def test_exceptions_for_sensitive_rule_rejected(self) -> None:
        exceptions = ExceptionRegistry.model_validate({
            "sensitive_fields": {"resources": {"entry_a": ["password"]}},
        })
        with pytest.raises(ValueError) as exc_info:
            CatalogWalker(exceptions=exceptions)
        assert "does not support exceptions" in str(exc_info.value)

    def test_exceptions_for_unknown_rule_rejected(self) -> None:
        exceptions = ExceptionRegistry.model_validate({
            "no_such_rule": {"resources": {"entry_a": ["name"]}},
        })
        with pytest.raises(KeyError):
            CatalogWalker(exceptions=exceptions)

    def test_fixture_catalog(self, fixtures_dir: Path, grandfathered_exceptions: ExceptionRegistry) -> None:
        """Resources pass with the grandfathered exceptions; data sources have none."""
        catalog = load_catalog(fixtures_dir / "catalog.yml")
        assert check_resources(catalog, grandfathered_exceptions) == 3

        with pytest.raises(CatalogCheckError) as exc_info:
            check_data_sources(catalog, grandfathered_exceptions)
        assert exc_info.value.entry_name == "azurerm_netapp_volume"
        assert exc_info.value.field_path == "protocols_enabled"

    def test_fixture_catalog_without_exceptions(self, fixtures_dir: Path) -> None:
        catalog = load_catalog(fixtures_dir / "catalog.yml")
        with pytest.raises(CatalogCheckError) as exc_info:
            check_resources(catalog)
        assert exc_info.value.entry_name == "azurerm_netapp_volume"
        assert exc_info.value.rule_name == "boolean_naming"
