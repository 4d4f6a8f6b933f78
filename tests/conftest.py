"""
Pytest configuration and shared fixtures for publicist tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite. Every test starts from a pristine root
expression, an empty evaluation context and the default configuration.
"""

import pytest
import tempfile
import shutil

from publicist.design import (
    AttributeExpr,
    NamedAttributeExpr,
    Object,
    UserTypeExpr,
    MediaTypeExpr,
    Int,
    String,
    array_of,
    map_of,
    get_root,
)
from publicist.eval import get_context
from publicist.utils.config import set_config


@pytest.fixture(autouse=True)
def clean_design_state(monkeypatch):
    """Reset the process-wide design state around each test."""
    monkeypatch.delenv("PUBLICIST_CONFIG", raising=False)
    monkeypatch.delenv("PUBLICIST_LOG_LEVEL", raising=False)
    get_root().reset()
    get_context().reset()
    set_config(None)
    yield
    get_root().reset()
    get_context().reset()
    set_config(None)


@pytest.fixture
def temp_test_dir():
    """Create temporary directory for test artifacts."""
    temp_dir = tempfile.mkdtemp(prefix="publicist_test_")
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def root():
    """The global root expression."""
    return get_root()


@pytest.fixture
def context():
    """The global DSL evaluation context."""
    return get_context()


# Type fixtures
@pytest.fixture
def bottle_type():
    """
    A user type with required and optional primitive fields.

    ``vintage`` is optional with a default, so the public struct holds
    it by value.
    """
    return UserTypeExpr("bottle", AttributeExpr(
        Object([
            NamedAttributeExpr("id", AttributeExpr(Int)),
            NamedAttributeExpr("name", AttributeExpr(String)),
            NamedAttributeExpr("rating", AttributeExpr(Int)),
            NamedAttributeExpr("vintage", AttributeExpr(Int, default_value=2000)),
        ]),
        required=["id", "name"],
    ))


@pytest.fixture
def account_type():
    """A user type referenced by other types."""
    return UserTypeExpr("account", AttributeExpr(
        Object([
            NamedAttributeExpr("id", AttributeExpr(Int)),
            NamedAttributeExpr("href", AttributeExpr(String)),
        ]),
        required=["id", "href"],
    ))


@pytest.fixture
def cellar_type(account_type, bottle_type):
    """A user type exercising every kind of field."""
    return UserTypeExpr("cellar", AttributeExpr(
        Object([
            NamedAttributeExpr("owner", AttributeExpr(account_type)),
            NamedAttributeExpr("tags", AttributeExpr(array_of(String))),
            NamedAttributeExpr("bottles", AttributeExpr(array_of(bottle_type))),
            NamedAttributeExpr("counts", AttributeExpr(map_of(String, Int))),
            NamedAttributeExpr("location", AttributeExpr(
                Object([NamedAttributeExpr("region", AttributeExpr(String))]),
                required=["region"],
            )),
        ]),
        required=["owner", "tags", "bottles", "counts", "location"],
    ))


@pytest.fixture
def bottle_media(bottle_type):
    """The bottle media type, registered on the root."""
    mt = MediaTypeExpr("bottle", "application/vnd.bottle", bottle_type.attribute)
    return get_root().add_media_type(mt)
