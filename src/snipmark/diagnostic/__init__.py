# topmark:header:start
#
#   project      : SnipMark
#   file         : __init__.py
#   file_relpath : src/snipmark/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Diagnostic primitives and helpers.

This package provides strongly-typed diagnostic objects used throughout SnipMark
to report informational messages, warnings, and errors in a consistent way.
"""

from __future__ import annotations

from snipmark.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    compute_diagnostic_stats,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticStats",
    "compute_diagnostic_stats",
]
