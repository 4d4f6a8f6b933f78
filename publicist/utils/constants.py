"""
Constants for publicist.

This module consolidates constant definitions used by identifier
generation and code emission.
"""

from __future__ import annotations


# =============================================================================
# Go Identifier Constants
# =============================================================================

# Initialisms rendered in all caps by the identifier transform.
GO_ACRONYMS = frozenset({
    "API", "ASCII", "CPU", "CSS", "DNS", "EOF", "GUID", "HTML", "HTTP",
    "HTTPS", "ID", "IP", "JMES", "JSON", "JWT", "LHS", "OK", "QPS", "RAM",
    "RHS", "RPC", "SLA", "SMTP", "SQL", "SSH", "TCP", "TLS", "TTL", "UDP",
    "UI", "UID", "UUID", "URI", "URL", "UTF8", "VM", "XML", "XSRF", "XSS",
})

GO_KEYWORDS = frozenset({
    "break", "case", "chan", "const", "continue", "default", "defer",
    "else", "fallthrough", "for", "func", "go", "goto", "if", "import",
    "interface", "map", "package", "range", "return", "select", "struct",
    "switch", "type", "var",
})

WORD_SEPARATOR_PATTERN = r'[^a-zA-Z0-9]+'


# =============================================================================
# Code Emission Constants
# =============================================================================

DEFAULT_INDENT = "\t"
