"""
metavariant.registry — Metadata registry consuming metadata contexts.

## Responsibilities
- Store named metadata variants tagged with an optional MetadataContext.
- Resolve the most specific variant applicable to a request context, with
  context-less entries acting as the lowest-precedence fallback.

## Public API
- MetadataRegistry — register/lookup/require/candidates.
- MetadataEntry — immutable pydantic model of a stored variant.
- RegistrySettings — configuration (env > TOML > defaults).
- request_context — build the request-side context (None when unconstrained).

## Import DAG discipline
- Depends only on stdlib, pydantic and metavariant.core.*.

## Examples
```python
from metavariant.core import ServiceVersion, for_version
from metavariant.registry import MetadataRegistry, request_context

reg = MetadataRegistry()
reg.register("entry", "v1-rules", for_version(ServiceVersion("docs", 1, 0)))
reg.register("entry", "base-rules")
reg.lookup("entry", request_context(version=ServiceVersion("docs", 1, 4))).payload  # 'v1-rules'
```
"""

from __future__ import annotations

from .config import RegistrySettings
from .entry import MetadataEntry
from .errors import (
    DuplicateEntryError,
    NoMatchingEntryError,
    RegistryConfigError,
    RegistryError,
)
from .registry import MetadataRegistry, request_context

__all__ = [
    "MetadataRegistry",
    "MetadataEntry",
    "RegistrySettings",
    "request_context",
    "RegistryError",
    "RegistryConfigError",
    "DuplicateEntryError",
    "NoMatchingEntryError",
]
