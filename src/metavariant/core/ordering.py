"""
Three-way comparator helpers used to rank metadata contexts.

Every comparator here returns -1, 0 or 1. Unset values (None) sort strictly
before any set value ("null sorts low"); two unset values are equal. This module
is zero-IO and has no knowledge of MetadataContext itself.

Notes:
    - compare_optional is the generic combinator; compare_str and compare_int are
      the value comparators it delegates to.
    - Service-class identities are ordered by an injected ClassOrder oracle.
      compare_class (fully qualified name) is the default; compare_class_name
      ignores the module part.

Examples:
    >>> from metavariant.core.ordering import compare_optional, compare_str
    >>> compare_optional(None, "a", compare_str)
    -1
    >>> compare_optional("b", "a", compare_str)
    1
    >>> compare_optional(None, None, compare_str)
    0
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

__all__ = [
    "ClassOrder",
    "CLASS_ORDERS",
    "compare_optional",
    "compare_str",
    "compare_int",
    "compare_class",
    "compare_class_name",
    "qualified_name",
]

T = TypeVar("T")

# Total-order oracle over service-class identities.
ClassOrder = Callable[[Any, Any], int]


def _sign(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_str(a: str, b: str) -> int:
    """Lexicographic comparison of two set strings."""
    return _sign(a, b)


def compare_int(a: int, b: int) -> int:
    """Numeric comparison of two set integers."""
    return _sign(a, b)


def compare_optional(a: T | None, b: T | None, value_compare: Callable[[T, T], int]) -> int:
    """
    Compare two optional values with unset sorting low.

    Args:
        a (T | None): Left value.
        b (T | None): Right value.
        value_compare (Callable[[T, T], int]): Comparator used when both are set.

    Returns:
        int: -1, 0 or 1.
    """
    if a is b:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return value_compare(a, b)


def qualified_name(service_class: Any) -> str:
    """
    Return the ordering key of a service-class identity.

    Types resolve to ``module.qualname``; strings are used as-is; anything else
    falls back to ``str()``.

    Examples:
        >>> qualified_name("calendar")
        'calendar'
        >>> qualified_name(int)
        'builtins.int'
    """
    if isinstance(service_class, type):
        return f"{service_class.__module__}.{service_class.__qualname__}"
    if isinstance(service_class, str):
        return service_class
    return str(service_class)


def _short_name(service_class: Any) -> str:
    if isinstance(service_class, type):
        return service_class.__qualname__
    return qualified_name(service_class)


def _kind_rank(service_class: Any) -> int:
    if isinstance(service_class, str):
        return 0
    if isinstance(service_class, type):
        return 1
    return 2


def _break_name_tie(a: Any, b: Any) -> int:
    # Distinct identities sharing a name; id() is only stable within a process.
    return (
        compare_int(_kind_rank(a), _kind_rank(b))
        or compare_str(qualified_name(type(a)), qualified_name(type(b)))
        or compare_int(id(a), id(b))
    )


def compare_class(a: Any, b: Any) -> int:
    """
    Default service-class order: identical first, None low, then fully qualified name.

    Distinct identities with the same name (e.g., the string "builtins.int" and the
    type int) never compare equal: strings sort before types.

    Args:
        a (Any): Service-class identity (type or str).
        b (Any): Service-class identity (type or str).

    Returns:
        int: -1, 0 or 1.
    """
    if a is b or a == b:
        return 0

    def _by_qualified_name(x: Any, y: Any) -> int:
        return compare_str(qualified_name(x), qualified_name(y)) or _break_name_tie(x, y)

    return compare_optional(a, b, _by_qualified_name)


def compare_class_name(a: Any, b: Any) -> int:
    """Service-class order by bare class name, then fully qualified name as tie-break."""
    if a is b or a == b:
        return 0

    def _by_name(x: Any, y: Any) -> int:
        return (
            compare_str(_short_name(x), _short_name(y))
            or compare_str(qualified_name(x), qualified_name(y))
            or _break_name_tie(x, y)
        )

    return compare_optional(a, b, _by_name)


# Registry of built-in oracles selectable by configuration.
CLASS_ORDERS: dict[str, ClassOrder] = {
    "qualified_name": compare_class,
    "name": compare_class_name,
}
