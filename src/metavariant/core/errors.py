"""
Core exception types raised by metadata context construction and ordering.

Provides typed exceptions for core-domain failures:
- ContextError for a MetadataContext built directly with every selector unset.
- MissingContextError for ordering a context against absence (None).

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Factory functions in metavariant.core.context never raise; they collapse the
      all-unset case to None instead.
    - MetadataContext.compare_to raises MissingContextError when handed None. This
      is a caller contract violation and is never mapped to a default ordering.

Examples:
    Catch an ordering call against absence.

    >>> from metavariant.core.context import for_alt
    >>> from metavariant.core.errors import MissingContextError
    >>> try:
    ...     for_alt("json").compare_to(None)
    ... except MissingContextError as e:
    ...     msg = str(e)
    >>> "absence" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "ContextError",
    "MissingContextError",
]


class ContextError(ValueError):
    """Invalid metadata context construction (e.g., all selectors unset)."""


class MissingContextError(TypeError):
    """A present context was compared against absence (None)."""
