"""
Naming Utilities for publicist.

This module provides identifier generation for the code emitted by the
publicizer: Go identifiers derived from design names, indentation, and
the depth-scoped variable names used by generated loops.
"""

from __future__ import annotations

import re
from typing import List

from .constants import (
    GO_ACRONYMS,
    GO_KEYWORDS,
    WORD_SEPARATOR_PATTERN,
    DEFAULT_INDENT,
)


# =============================================================================
# Core Naming Utilities
# =============================================================================

def split_words(name: str) -> List[str]:
    """Split a raw design name into words on any non alphanumeric character."""
    return [w for w in re.split(WORD_SEPARATOR_PATTERN, name) if w]


def goify(name: str, first_upper: bool) -> str:
    """
    Turn a design name into a valid Go identifier.

    Words are joined in camel case, known initialisms are upper cased
    (``user_id`` becomes ``UserID``), a leading digit is prefixed with an
    underscore and Go keywords get a trailing underscore.

    Args:
        name: Raw name as written in the design
        first_upper: Whether the identifier is exported

    Returns:
        Go identifier
    """
    words = split_words(name)
    if not words:
        return "val"

    parts = []
    for i, word in enumerate(words):
        upper = word.upper()
        if i == 0 and not first_upper:
            if upper in GO_ACRONYMS:
                parts.append(word.lower())
            else:
                parts.append(word[0].lower() + word[1:])
        elif upper in GO_ACRONYMS:
            parts.append(upper)
        else:
            parts.append(word[0].upper() + word[1:])

    result = "".join(parts)
    if result[0].isdigit():
        result = f"_{result}"
    if result in GO_KEYWORDS:
        result = f"{result}_"
    return result


def exported_name(name: str, exported: bool = True) -> str:
    """Identifier transform used for struct fields and type names."""
    return goify(name, exported)


def tabs(depth: int, indent: str = DEFAULT_INDENT) -> str:
    """Return the indentation for the given nesting depth."""
    return indent * max(depth, 0)


def depth_var(prefix: str, depth: int) -> str:
    """
    Name a generated variable scoped to a recursion depth.

    Nested loops always sit at strictly greater depths, so suffixing the
    depth is enough to keep inner variables from shadowing outer ones.
    """
    return f"{prefix}{depth}"
