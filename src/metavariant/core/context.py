"""
Metadata context: the selector triple that picks a metadata variant for a request.

A MetadataContext captures up to three optional selectors (alt type, projection,
version) and defines:
- matches(): a partial-match predicate; the receiver is the requirement, the
  argument is the request context being tested against it.
- compare_to(): a total order ranking contexts by specificity, with unset values
  sorting low.

Contexts are immutable values. The default, unconstrained context is represented
by absence (None): the factories never return an instance with every selector
unset, and direct construction of such an instance raises ContextError.

Notes:
    - Zero-IO; depends only on metavariant.core.ordering/versioning/errors.
    - matches() is not symmetric. Registry code always calls
      ``entry_context.matches(request_context)``.
    - Version matching delegates to VersionRef.is_compatible and is not equality.

Examples:
    >>> from metavariant.core.context import for_context, for_projection
    >>> card = for_projection("card")
    >>> atom_card = for_context("atom", "card", None)
    >>> card.matches(atom_card)
    True
    >>> atom_card.matches(card)
    False
    >>> card < atom_card
    True
    >>> for_context(None, None, None) is None
    True
    >>> str(atom_card)
    '{MetadataContext(atom,card,null)}'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import ContextError, MissingContextError
from .ordering import ClassOrder, compare_class, compare_int, compare_optional, compare_str
from .versioning import VersionRef

__all__ = [
    "MetadataContext",
    "for_alt",
    "for_projection",
    "for_version",
    "for_context",
    "compare_versions",
]

# Multiplier used when folding selector hashes together.
_HASH_MULTIPLIER = 37


def compare_versions(
    a: VersionRef | None, b: VersionRef | None, class_order: ClassOrder | None = None
) -> int:
    """
    Compare two optional versions: unset low, then service class, major, minor.

    Args:
        a (VersionRef | None): Left version.
        b (VersionRef | None): Right version.
        class_order (ClassOrder | None): Service-class oracle; defaults to
            metavariant.core.ordering.compare_class.

    Returns:
        int: -1, 0 or 1.
    """
    order = class_order or compare_class

    def _compare_set(x: VersionRef, y: VersionRef) -> int:
        return (
            order(x.service_class, y.service_class)
            or compare_int(x.major, y.major)
            or compare_int(x.minor, y.minor)
        )

    return compare_optional(a, b, _compare_set)


@dataclass(frozen=True, slots=True, eq=False)
class MetadataContext:
    """
    Immutable context that metadata applies to.

    Attributes:
        alt_type (str | None): Representation-format selector, or None if unset.
        projection (str | None): Named view selector, or None if unset.
        version (VersionRef | None): Version of the request/metadata, or None if unset.

    Raises:
        ContextError: If every selector is None. Use the module factories, which
            return None for the unconstrained context instead.

    Notes:
        - Equality and hashing are structural over the three selectors.
        - Rich comparisons use compare_to with the default class order.
    """

    alt_type: str | None = None
    projection: str | None = None
    version: VersionRef | None = None

    def __post_init__(self) -> None:
        if self.alt_type is None and self.projection is None and self.version is None:
            raise ContextError(
                "MetadataContext requires at least one selector; "
                "the unconstrained context is represented by None"
            )

    # Factories ---------------------------------------------------------------

    @classmethod
    def for_alt(cls, alt_type: str | None) -> MetadataContext | None:
        return for_context(alt_type, None, None)

    @classmethod
    def for_projection(cls, projection: str | None) -> MetadataContext | None:
        return for_context(None, projection, None)

    @classmethod
    def for_version(cls, version: VersionRef | None) -> MetadataContext | None:
        return for_context(None, None, version)

    @classmethod
    def for_context(
        cls,
        alt_type: str | None,
        projection: str | None,
        version: VersionRef | None,
    ) -> MetadataContext | None:
        return for_context(alt_type, projection, version)

    # Matching ----------------------------------------------------------------

    def matches(self, other: MetadataContext | None) -> bool:
        """
        Return True if this context is satisfied by ``other``.

        Unset selectors on this context are wildcards. Set alt type and projection
        must equal the same selector on ``other``; a set version requires ``other``
        to carry a version that is compatible with it.

        Args:
            other (MetadataContext | None): Request context to test; None never matches.

        Returns:
            bool: Whether ``other`` satisfies every selector set on this context.
        """
        if other is None:
            return False
        if self.alt_type is not None and self.alt_type != other.alt_type:
            return False
        if self.projection is not None and self.projection != other.projection:
            return False
        if self.version is not None:
            return other.version is not None and other.version.is_compatible(self.version)
        return True

    # Ordering ----------------------------------------------------------------

    def compare_to(
        self, other: MetadataContext | None, *, class_order: ClassOrder | None = None
    ) -> int:
        """
        Three-way comparison ranking contexts by specificity.

        Order of precedence: alt type, then projection, then version. Unset values
        sort before set values; strings compare lexicographically; versions compare
        by service class (via ``class_order``), major, then minor.

        Args:
            other (MetadataContext | None): Context to compare against.
            class_order (ClassOrder | None): Service-class oracle for version ties.

        Returns:
            int: -1, 0 or 1.

        Raises:
            MissingContextError: If ``other`` is None.
        """
        if other is None:
            raise MissingContextError("cannot compare a MetadataContext against absence (None)")
        if self is other:
            return 0
        return (
            compare_optional(self.alt_type, other.alt_type, compare_str)
            or compare_optional(self.projection, other.projection, compare_str)
            or compare_versions(self.version, other.version, class_order)
        )

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, MetadataContext):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, MetadataContext):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, MetadataContext):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, MetadataContext):
            return NotImplemented
        return self.compare_to(other) >= 0

    # Value semantics -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, MetadataContext):
            return NotImplemented
        return (
            self.alt_type == other.alt_type
            and self.projection == other.projection
            and self.version == other.version
        )

    def __hash__(self) -> int:
        value = 0
        if self.alt_type is not None:
            value += hash(self.alt_type)
        if self.projection is not None:
            value = value * _HASH_MULTIPLIER + hash(self.projection)
        if self.version is not None:
            value = value * _HASH_MULTIPLIER + hash(self.version)
        return hash(value)

    def __str__(self) -> str:
        parts = [_render(self.alt_type), _render(self.projection), _render(self.version)]
        return "{MetadataContext(" + ",".join(parts) + ")}"


def _render(value: Any) -> str:
    return "null" if value is None else str(value)


def for_alt(alt_type: str | None) -> MetadataContext | None:
    """
    Build a context with only an alt type.

    Returns:
        MetadataContext | None: The context, or None if ``alt_type`` is None.
    """
    return for_context(alt_type, None, None)


def for_projection(projection: str | None) -> MetadataContext | None:
    """
    Build a context with only a projection.

    Returns:
        MetadataContext | None: The context, or None if ``projection`` is None.
    """
    return for_context(None, projection, None)


def for_version(version: VersionRef | None) -> MetadataContext | None:
    """
    Build a context with only a version.

    Returns:
        MetadataContext | None: The context, or None if ``version`` is None.
    """
    return for_context(None, None, version)


def for_context(
    alt_type: str | None,
    projection: str | None,
    version: VersionRef | None,
) -> MetadataContext | None:
    """
    Build a context from all three selectors.

    Args:
        alt_type (str | None): Alt type selector.
        projection (str | None): Projection selector.
        version (VersionRef | None): Version selector.

    Returns:
        MetadataContext | None: A new context holding exactly the given values, or
        None (the default context) if every selector is None.

    Examples:
        >>> for_context("json", None, None) == for_context("json", None, None)
        True
        >>> for_context(None, None, None) is None
        True
    """
    if alt_type is None and projection is None and version is None:
        return None
    return MetadataContext(alt_type, projection, version)
