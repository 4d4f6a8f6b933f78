"""
DSL Evaluation Context.

This module tracks the expression a DSL function applies to and collects
the errors reported while designs run. DSL functions never raise to the
design author: they report to the context and evaluation carries on, so
a single run surfaces every mistake at once.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from ..utils.exceptions import (
    PublicistError,
    DSLError,
    DesignBlockError,
    IncompatibleContextError,
    DSLEvaluationError,
)
from ..utils.logging import PublicistLogger

plog = PublicistLogger(__name__)


def _eval_name(expr: Any) -> Optional[str]:
    if expr is None:
        return None
    eval_name = getattr(expr, "eval_name", None)
    return eval_name() if callable(eval_name) else repr(expr)


class DSLContext:
    """
    Stack of active expressions plus the diagnostics collected so far.

    ``execute`` pushes an expression, runs a DSL block against it and
    pops it again; DSL functions inspect ``current`` to decide what they
    apply to.
    """

    def __init__(self):
        self._stack: List[Any] = []
        self.errors: List[PublicistError] = []

    def reset(self) -> None:
        """Clear the stack and the collected errors."""
        self._stack = []
        self.errors = []

    def current(self) -> Optional[Any]:
        """Expression at the top of the stack, or None outside any block."""
        return self._stack[-1] if self._stack else None

    @property
    def depth(self) -> int:
        return len(self._stack)

    def report_error(self, error: PublicistError) -> None:
        """Record a diagnostic, attaching the current expression as context."""
        if isinstance(error, DSLError) and error.context is None:
            context = _eval_name(self.current())
            if context:
                error.context = context
                error.details['context'] = context
        plog.log_diagnostic(error)
        self.errors.append(error)

    def incompatible_dsl(self, operation: str) -> None:
        """Report a DSL function used where it does not apply."""
        self.report_error(IncompatibleContextError(operation))

    def execute(self, block: Callable[[], None], expr: Any) -> bool:
        """
        Run ``block`` with ``expr`` as the active expression.

        Any exception escaping the block is reported against ``expr``;
        exceptions that are not publicist errors are wrapped in a
        DesignBlockError.

        Returns:
            True when the block completed without reporting any error
        """
        before = len(self.errors)
        self._stack.append(expr)
        try:
            block()
        except PublicistError as e:
            self.report_error(e)
        except Exception as e:
            self.report_error(DesignBlockError(e))
        finally:
            self._stack.pop()
        return len(self.errors) == before

    def raise_errors(self, start: int = 0) -> None:
        """
        Raise the diagnostics collected from index ``start`` on.

        The raised errors are removed from the context so a later run
        only reports its own.
        """
        errors = self.errors[start:]
        del self.errors[start:]
        if errors:
            raise DSLEvaluationError(errors)


# Global evaluation context
_context = DSLContext()


def get_context() -> DSLContext:
    """Get the global DSL evaluation context."""
    return _context


def current() -> Optional[Any]:
    """Expression the DSL function being called applies to."""
    return _context.current()


def execute(block: Callable[[], None], expr: Any) -> bool:
    """Run a DSL block against ``expr`` in the global context."""
    return _context.execute(block, expr)


def report_error(error: PublicistError) -> None:
    """Report a diagnostic to the global context."""
    _context.report_error(error)


def incompatible_dsl(operation: str) -> None:
    """Report ``operation`` as used in the wrong context."""
    _context.incompatible_dsl(operation)


def run(*designs: Callable[[], None]) -> None:
    """
    Run design blocks against the root expression.

    Each block is evaluated independently so an error in one does not
    prevent the others from being defined. Once all blocks ran, the
    diagnostics collected during this run are raised together.

    Raises:
        DSLEvaluationError: if any block reported an error
    """
    from ..design.root import get_root

    root = get_root()
    start = len(_context.errors)
    for design in designs:
        _context.execute(design, root)
    _context.raise_errors(start)
