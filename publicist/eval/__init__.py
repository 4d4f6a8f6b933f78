"""
DSL evaluation: active expression tracking and error collection.
"""

from .context import (
    DSLContext,
    get_context,
    current,
    execute,
    report_error,
    incompatible_dsl,
    run,
)

__all__ = [
    "DSLContext",
    "get_context",
    "current",
    "execute",
    "report_error",
    "incompatible_dsl",
    "run",
]
