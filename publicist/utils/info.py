"""
Package information utility.

This module provides a command-line utility for displaying
information about the publicist installation and environment.
"""

import sys
import platform
from typing import Dict, Any

import jinja2
import yaml

import publicist


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to publicist.

    Returns:
        Dictionary containing system information
    """
    return {
        'python_version': sys.version,
        'platform': platform.platform(),
        'architecture': platform.architecture(),
        'jinja2_version': jinja2.__version__,
        'yaml_version': yaml.__version__,
    }


def get_publicist_info() -> Dict[str, Any]:
    """
    Get publicist-specific information.

    Returns:
        Dictionary containing publicist information
    """
    from publicist.codegen import get_renderer
    from publicist.utils.config import get_config
    from publicist.utils.exceptions import PublicistError

    config = get_config()
    info = {
        'version': publicist.__version__,
        'author': publicist.__author__,
        'config_file': str(config.config_file),
        'config_file_found': config.config_file.exists(),
        'method_name': config.codegen.method_name,
        'json_tags': config.codegen.json_tags,
    }

    try:
        info['templates'] = get_renderer().list_templates()
    except PublicistError as e:
        info['template_error'] = str(e)

    return info


def print_info() -> None:
    """Print formatted information about publicist and the system."""
    print("Publicist Response DSL and Code Generator")
    print("=" * 40)

    publicist_info = get_publicist_info()
    print(f"\nPublicist Version: {publicist_info['version']}")
    print(f"Author: {publicist_info['author']}")
    found = "" if publicist_info['config_file_found'] else " (not found, using defaults)"
    print(f"Configuration: {publicist_info['config_file']}{found}")
    print(f"Method Name: {publicist_info['method_name']}")
    print(f"JSON Tags: {publicist_info['json_tags']}")

    if 'templates' in publicist_info:
        print(f"Templates: {', '.join(publicist_info['templates'])}")

    if 'template_error' in publicist_info:
        print(f"Template Error: {publicist_info['template_error']}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")
    print(f"Architecture: {system_info['architecture'][0]}")
    print(f"Jinja2 Version: {system_info['jinja2_version']}")
    print(f"PyYAML Version: {system_info['yaml_version']}")


def main() -> None:
    """Main entry point for the publicist-info command."""
    try:
        print_info()
    except Exception as e:
        print(f"Error getting system information: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
