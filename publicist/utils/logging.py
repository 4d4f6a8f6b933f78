"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
publicist package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the publicist package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    # Determine log level
    if level is None:
        level = os.environ.get("PUBLICIST_LOG_LEVEL", "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("publicist")
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance under the ``publicist`` hierarchy
    """
    if name == "publicist" or name.startswith("publicist."):
        return logging.getLogger(name)
    return logging.getLogger(f"publicist.{name}")


class PublicistLogger:
    """
    Specialized logging for the design and generation phases.

    Wraps a module logger with helpers for the events both phases
    report: definitions attached, diagnostics collected, and code
    synthesized.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_definition(self, kind: str, name: str, parent: str) -> None:
        """
        Log a definition attached to its owning scope.

        Args:
            kind: Kind of definition (e.g. "response")
            name: Definition name
            parent: Evaluation name of the owning scope
        """
        self.logger.debug(f"Defined {kind} '{name}' in {parent}")

    def log_diagnostic(self, error: Exception) -> None:
        """
        Log a diagnostic collected during DSL evaluation.

        Args:
            error: Reported error
        """
        self.logger.warning(f"Design error: {error}")

    def log_synthesis_start(self, type_name: str, field_count: int) -> None:
        """
        Log the beginning of publicizer synthesis for a type.

        Args:
            type_name: Name of the type being publicized
            field_count: Number of top-level fields
        """
        self.logger.info(f"Generating publicizer for {type_name} ({field_count} fields)")

    def log_template_render(self, template_id: str, depth: int) -> None:
        """
        Log a template render during synthesis.

        Args:
            template_id: Identifier of the rendered template
            depth: Recursion depth of the synthesis call
        """
        self.logger.debug(f"Rendering {template_id} at depth {depth}")


# Initialize logging on module import
setup_logging()
