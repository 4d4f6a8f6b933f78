"""
Test package structure and basic imports.

This test module verifies that the package is properly structured
and all modules can be imported without errors.
"""

import pytest
import sys
from pathlib import Path

# Add the project root to the path for testing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def test_main_package_import():
    """Test that the main publicist package can be imported."""
    import publicist

    assert hasattr(publicist, '__version__')
    assert hasattr(publicist, '__author__')
    assert hasattr(publicist, 'run')
    assert hasattr(publicist, 'generate_publicizers')


def test_design_imports():
    """Test that design submodules can be imported."""
    from publicist.design import (
        HTTPResponseExpr,
        ResourceExpr,
        ActionExpr,
        RootExpr,
        AttributeExpr,
        UserTypeExpr,
        MediaTypeExpr,
    )

    assert HTTPResponseExpr is not None
    assert ResourceExpr is not None
    assert ActionExpr is not None
    assert RootExpr is not None
    assert AttributeExpr is not None
    assert UserTypeExpr is not None
    assert MediaTypeExpr is not None


def test_dsl_imports():
    """Test that the DSL functions and status names can be imported."""
    from publicist.dsl import response, status, resource, action, OK, NotFound, STATUS_CODES

    assert callable(response)
    assert callable(status)
    assert callable(resource)
    assert callable(action)
    assert STATUS_CODES[OK] == 200
    assert STATUS_CODES[NotFound] == 404


def test_codegen_imports():
    """Test that codegen submodules can be imported."""
    from publicist.codegen import (
        publicizer,
        recursive_publicizer,
        publicize_method,
        generate_publicizers,
        go_type_ref,
        go_type_def,
    )
    from publicist.codegen.templates import JinjaTemplateRenderer

    assert publicizer is not None
    assert recursive_publicizer is not None
    assert publicize_method is not None
    assert generate_publicizers is not None
    assert go_type_ref is not None
    assert go_type_def is not None
    assert JinjaTemplateRenderer is not None


def test_utils_imports():
    """Test that utility submodules can be imported."""
    from publicist.utils import (
        setup_logging,
        get_logger,
        get_config,
        PublicistError,
        DSLEvaluationError,
        goify,
    )

    assert setup_logging is not None
    assert get_logger is not None
    assert get_config is not None
    assert PublicistError is not None
    assert DSLEvaluationError is not None
    assert goify is not None


def test_package_structure():
    """Test that the package directory structure is correct."""
    publicist_path = project_root / 'publicist'

    assert publicist_path.exists()
    assert (publicist_path / '__init__.py').exists()

    subpackages = ['codegen', 'codegen/templates', 'design', 'dsl', 'eval', 'utils']
    for subpackage in subpackages:
        subpackage_path = publicist_path / subpackage
        assert subpackage_path.exists(), f"Subpackage {subpackage} not found"
        assert (subpackage_path / '__init__.py').exists(), f"Subpackage {subpackage} missing __init__.py"


def test_configuration_files():
    """Test that configuration files are present."""
    for config_file in ['setup.py']:
        file_path = project_root / config_file
        assert file_path.exists(), f"Configuration file {config_file} not found"


if __name__ == '__main__':
    pytest.main([__file__])
