"""
Shared pytest fixtures for schemalint tests.

Provides config environment management, fixture file paths and a few
ready-made catalogs.
"""

import os
from pathlib import Path
from typing import Generator

import pytest

from schemalint import Catalog, ExceptionRegistry, load_config
from schemalint.config import CONFIG_ENV_VAR
from tests.fixtures import make_catalog, make_field, make_list, make_schema

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding YAML fixture files."""
    return FIXTURES_DIR


@pytest.fixture(autouse=True)
def reset_config_env() -> Generator[None, None, None]:
    """
    Autouse fixture that clears SCHEMALINT_CONFIG for the test duration.

    This prevents a developer's config from leaking into tests.
    """
    original = os.environ.pop(CONFIG_ENV_VAR, None)
    yield
    if original is not None:
        os.environ[CONFIG_ENV_VAR] = original
    elif CONFIG_ENV_VAR in os.environ:
        del os.environ[CONFIG_ENV_VAR]


@pytest.fixture
def grandfathered_exceptions() -> ExceptionRegistry:
    """The exception lists shipped in fixtures/exceptions.yml."""
    return load_config(FIXTURES_DIR / "exceptions.yml").exceptions


@pytest.fixture
def clean_catalog() -> Catalog:
    """A catalog that passes every rule."""
    return make_catalog(
        data_sources={
            "example_account": make_schema(
                name=make_field("string"),
                password=make_field("string", sensitive=True),
                backup_enabled=make_field("bool"),
            ),
        },
        resources={
            "example_account": make_schema(
                name=make_field("string", default="primary"),
                settings=make_list(
                    api_key=make_field("string", sensitive=True),
                    logging_enabled=make_field("bool"),
                ),
            ),
            "example_database": make_schema(
                name=make_field("string"),
                ssh_private_key=make_field("string", sensitive=True),
            ),
        },
    )
