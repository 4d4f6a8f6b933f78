"""
Custom exception definitions.

This module defines the exception hierarchy for publicist-specific
errors raised or collected while building designs and generating code.
"""

from typing import List, Optional


class PublicistError(Exception):
    """
    Base exception for all publicist-related errors.

    This is the root exception class for all publicist-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize publicist error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class DSLError(PublicistError):
    """
    Raised or reported when a design DSL function is misused.

    DSL errors carry the evaluation name of the expression that was
    active when they were reported so diagnostics point at the offending
    definition.
    """

    def __init__(self, message: str, context: Optional[str] = None, details: Optional[dict] = None):
        details = dict(details or {})
        if context:
            details['context'] = context
        super().__init__(message, details)
        self.context = context


class DuplicateDefinitionError(DSLError):
    """Raised when a response name is reused within the same owning scope."""

    def __init__(self, name: str, context: Optional[str] = None):
        super().__init__(f"response {name} is defined twice", context, {'name': name})
        self.name = name


class IncompatibleContextError(DSLError):
    """
    Raised when a DSL function runs outside the expression it applies to.

    For example calling ``status`` anywhere but inside a response block.
    """

    def __init__(self, operation: str, context: Optional[str] = None):
        super().__init__(f"invalid use of {operation}", context, {'operation': operation})
        self.operation = operation


class InvalidTemplateArgumentError(DSLError):
    """Raised when a response definition is given positional template parameters."""

    def __init__(self, message: str, argument=None, context: Optional[str] = None):
        super().__init__(message, context)
        self.argument = argument


class DesignBlockError(DSLError):
    """
    Reported when a design block fails with an exception of its own.

    The original exception is kept as ``error`` and as the cause.
    """

    def __init__(self, error: Exception, context: Optional[str] = None):
        super().__init__(f"design block failed: {type(error).__name__}: {error}", context)
        self.error = error
        self.__cause__ = error


class UnresolvableReferenceError(PublicistError):
    """
    Raised when a user type cannot be resolved to a structural type.

    This covers both dangling references (a user type with no attribute)
    and reference cycles.
    """

    def __init__(self, type_name: str, reason: str = ""):
        message = f"Cannot resolve type '{type_name}'"
        if reason:
            message += f": {reason}"
        super().__init__(message, {'type_name': type_name})
        self.type_name = type_name
        self.reason = reason


class TemplateRenderError(PublicistError):
    """
    Raised when a code generation template fails to render.

    Wraps errors from the template engine such as syntax errors or
    variables missing from the render context.
    """

    def __init__(self, template_id: str, message: str):
        super().__init__(f"Failed to render template '{template_id}': {message}",
                         {'template_id': template_id})
        self.template_id = template_id


class UnsupportedTypeError(PublicistError):
    """Raised when the publicizer is given a type it cannot classify."""

    def __init__(self, type_name: str):
        super().__init__(f"Unsupported type '{type_name}' for publicization",
                         {'type_name': type_name})
        self.type_name = type_name


class DSLEvaluationError(PublicistError):
    """
    Raised at the end of a design run when any diagnostics were collected.

    Holds every error reported while running the design so they can be
    presented together.
    """

    def __init__(self, errors: List[PublicistError]):
        self.errors = list(errors)
        lines = [str(e) for e in self.errors]
        super().__init__(f"{len(lines)} design error(s):\n" + "\n".join(lines))

    def __str__(self) -> str:
        return self.message
