"""
Service version references consumed by metadata contexts.

Defines the VersionRef protocol that MetadataContext relies on (service class,
major/minor numbers and a compatibility predicate) and ServiceVersion, the
concrete immutable implementation used by the registry and tests. This module is
zero-IO.

Notes:
    - Compatibility is directional: ``candidate.is_compatible(requirement)`` answers
      "does candidate satisfy requirement". MetadataContext.matches calls it as
      ``other.version.is_compatible(self.version)``.
    - ServiceVersion's rule: same service class, same major, and the candidate's
      minor is at least the requirement's minor. A request declaring 2.3 is
      therefore satisfied by metadata declared for 2.0, but not the reverse.
    - Version strings are never parsed here; callers construct versions directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "VersionRef",
    "ServiceVersion",
    "is_compatible",
]


@runtime_checkable
class VersionRef(Protocol):
    """
    Boundary contract for version values carried by a MetadataContext.

    Attributes:
        service_class (Any): Identity of the service the version belongs to; ordered
            by a ClassOrder oracle (see metavariant.core.ordering).
        major (int): Non-negative major number.
        minor (int): Non-negative minor number.
    """

    @property
    def service_class(self) -> Any: ...

    @property
    def major(self) -> int: ...

    @property
    def minor(self) -> int: ...

    def is_compatible(self, requirement: VersionRef) -> bool: ...


@dataclass(frozen=True)
class ServiceVersion:
    """
    Immutable major.minor version of a named service.

    Attributes:
        service_class (type | str): Service identity (a class or a plain name).
        major (int): Non-negative major component signalling breaking changes.
        minor (int): Non-negative minor component for additive, non-breaking changes.

    Raises:
        ValueError: If any component is negative.

    Examples:
        >>> from metavariant.core.versioning import ServiceVersion
        >>> v2_3 = ServiceVersion("calendar", 2, 3)
        >>> v2_3.is_compatible(ServiceVersion("calendar", 2, 0))
        True
        >>> ServiceVersion("calendar", 2, 0).is_compatible(v2_3)
        False
        >>> str(v2_3)
        'calendar:2.3'
    """

    service_class: type | str
    major: int
    minor: int = 0

    def __post_init__(self) -> None:
        if self.major < 0:
            raise ValueError(f"ServiceVersion major must be non-negative, got {self.major}")
        if self.minor < 0:
            raise ValueError(f"ServiceVersion minor must be non-negative, got {self.minor}")

    def is_compatible(self, requirement: VersionRef) -> bool:
        """
        Check whether this version satisfies a required version.

        Args:
            requirement (VersionRef): Version declared by the constraint side.

        Returns:
            bool: True if both share service class and major number and this minor
            is not older than the required minor.
        """
        return (
            self.service_class == requirement.service_class
            and self.major == requirement.major
            and self.minor >= requirement.minor
        )

    def __str__(self) -> str:
        if isinstance(self.service_class, type):
            name = self.service_class.__name__
        else:
            name = self.service_class
        return f"{name}:{self.major}.{self.minor}"


def is_compatible(candidate: VersionRef, requirement: VersionRef) -> bool:
    """
    Function form of ``candidate.is_compatible(requirement)``.

    Examples:
        >>> from metavariant.core.versioning import ServiceVersion, is_compatible
        >>> is_compatible(ServiceVersion("docs", 3, 1), ServiceVersion("docs", 3, 0))
        True
    """
    return candidate.is_compatible(requirement)
