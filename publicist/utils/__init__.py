"""
Utils package for publicist.

This module provides the error hierarchy, logging, configuration and
the Go naming helpers shared by the design and generation phases.
"""

# Core utilities
from .exceptions import (
    PublicistError,
    DSLError,
    DuplicateDefinitionError,
    IncompatibleContextError,
    InvalidTemplateArgumentError,
    DesignBlockError,
    UnresolvableReferenceError,
    TemplateRenderError,
    UnsupportedTypeError,
    DSLEvaluationError,
)
from .constants import *
from .naming import *

# Configuration and logging
from .config import (
    PublicistConfig,
    CodegenConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)
from .logging import get_logger, setup_logging, PublicistLogger

__all__ = [
    # Core exceptions
    "PublicistError",
    "DSLError",
    "DuplicateDefinitionError",
    "IncompatibleContextError",
    "InvalidTemplateArgumentError",
    "DesignBlockError",
    "UnresolvableReferenceError",
    "TemplateRenderError",
    "UnsupportedTypeError",
    "DSLEvaluationError",

    # Constants (exported via *)
    # Naming utilities (exported via *)

    # Configuration
    "PublicistConfig",
    "CodegenConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "get_logger",
    "setup_logging",
    "PublicistLogger",
]
