"""
Registry entry model: a named metadata payload tagged with an optional context.

Notes:
    - Entries with ``context=None`` are the universal fallback for their name.
    - The payload is opaque to the registry (schema objects, validation rules, ...).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from metavariant.core.context import MetadataContext

__all__ = ["MetadataEntry"]


class MetadataEntry(BaseModel):
    """
    Metadata variant stored in a MetadataRegistry.

    Attributes:
        name (str): Non-empty key the metadata is registered under (e.g., an element name).
        context (MetadataContext | None): Context the variant applies to; None means
            it applies to every request with the lowest precedence.
        payload (Any): The metadata itself.

    Raises:
        pydantic.ValidationError: If name is empty or context is not a MetadataContext.

    Examples:
        >>> from metavariant.core import for_alt
        >>> from metavariant.registry.entry import MetadataEntry
        >>> MetadataEntry(name="entry", context=for_alt("json"), payload={}).is_fallback
        False
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1)
    context: Any = None
    payload: Any = None

    @field_validator("context")
    @classmethod
    def _check_context(cls, v: Any) -> MetadataContext | None:
        if v is not None and not isinstance(v, MetadataContext):
            raise ValueError(f"context must be a MetadataContext or None, got {type(v).__name__}")
        return v

    @property
    def is_fallback(self) -> bool:
        return self.context is None

    def applies_to(self, request: MetadataContext | None) -> bool:
        """Return True if this entry is a fallback or its context matches ``request``."""
        return self.context is None or self.context.matches(request)
