"""
Core package aggregator for metavariant contracts (contexts, versions, ordering, errors).

## Contracts (single source of truth)
- Context — `MetadataContext`, the immutable selector triple (alt type, projection,
  version) with its factories, match predicate and total order.
- Versioning — `VersionRef` protocol and the concrete `ServiceVersion`.
- Ordering — null-low comparator combinators and service-class order oracles.
- Errors — typed exceptions for invalid construction and ordering against absence.

## Notes
- Zero-IO policy: stdlib only; no logging, file or network IO.
- Absence (None) is the one representation of the unconstrained context.
- `matches` is directional: `requirement.matches(request)`.

## Downstream usage
- metavariant.registry — stores entries tagged with an optional context and resolves
  the most specific match for a request context.

## Examples
```python
from metavariant.core import ServiceVersion, for_context, for_version

entry = for_version(ServiceVersion("calendar", 2, 0))
request = for_context("json", None, ServiceVersion("calendar", 2, 3))
entry.matches(request)  # True
```
"""

from __future__ import annotations

from .context import (
    MetadataContext,
    compare_versions,
    for_alt,
    for_context,
    for_projection,
    for_version,
)
from .errors import ContextError, MissingContextError
from .ordering import ClassOrder, compare_class, compare_class_name, compare_optional
from .versioning import ServiceVersion, VersionRef, is_compatible

__all__ = [
    "MetadataContext",
    "for_alt",
    "for_projection",
    "for_version",
    "for_context",
    "compare_versions",
    "ContextError",
    "MissingContextError",
    "ClassOrder",
    "compare_class",
    "compare_class_name",
    "compare_optional",
    "ServiceVersion",
    "VersionRef",
    "is_compatible",
]
