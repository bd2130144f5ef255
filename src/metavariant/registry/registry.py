"""
In-memory metadata registry resolving the most specific variant for a request.

Entries are registered under a name with an optional MetadataContext. For a
request context, an entry applies if its context is None (fallback) or
``entry.context.matches(request)``. Applicable entries are ranked most specific
first: present contexts in descending compare_to order, fallbacks last.

Notes:
    - Registration is serialized with a lock; lookups read an immutable snapshot.
    - A request of None (no selectors) matches only fallback entries.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from functools import cmp_to_key
from typing import Any

from metavariant.core.context import MetadataContext, for_context
from metavariant.core.ordering import CLASS_ORDERS, ClassOrder
from metavariant.core.versioning import VersionRef

from .config import RegistrySettings
from .entry import MetadataEntry
from .errors import DuplicateEntryError, NoMatchingEntryError, RegistryConfigError

logger = logging.getLogger(__name__)

__all__ = ["MetadataRegistry", "request_context"]


def request_context(
    alt_type: str | None = None,
    projection: str | None = None,
    version: VersionRef | None = None,
) -> MetadataContext | None:
    """Build the request-side context; None when no selector is given."""
    return for_context(alt_type, projection, version)


class MetadataRegistry:
    """
    Registry of metadata variants keyed by name and tagged by context.

    Args:
        settings (RegistrySettings | None): Lookup/registration behavior; defaults to
            ``RegistrySettings()``.
        class_order (ClassOrder | None): Service-class oracle overriding
            ``settings.class_order``.

    Raises:
        RegistryConfigError: If ``settings.class_order`` names no built-in oracle.

    Examples:
        >>> from metavariant.core import ServiceVersion, for_alt
        >>> from metavariant.registry import MetadataRegistry, request_context
        >>> reg = MetadataRegistry()
        >>> _ = reg.register("feed", "default")
        >>> _ = reg.register("feed", "json", for_alt("json"))
        >>> reg.lookup("feed", request_context(alt_type="json")).payload
        'json'
        >>> reg.lookup("feed", request_context(alt_type="atom")).payload
        'default'
    """

    def __init__(
        self,
        settings: RegistrySettings | None = None,
        *,
        class_order: ClassOrder | None = None,
    ) -> None:
        self.settings = settings or RegistrySettings()
        if class_order is None:
            try:
                class_order = CLASS_ORDERS[self.settings.class_order]
            except KeyError as exc:
                raise RegistryConfigError(
                    f"unknown class_order {self.settings.class_order!r}; "
                    f"expected one of {sorted(CLASS_ORDERS)}"
                ) from exc
        self._class_order: ClassOrder = class_order
        self._lock = threading.Lock()
        self._entries: dict[str, tuple[MetadataEntry, ...]] = {}

    # Registration ------------------------------------------------------------

    def register(
        self, name: str, payload: Any, context: MetadataContext | None = None
    ) -> MetadataEntry:
        """
        Register a metadata variant.

        Args:
            name (str): Key the metadata is registered under.
            payload (Any): The metadata itself.
            context (MetadataContext | None): Context the variant applies to.

        Returns:
            MetadataEntry: The stored entry.

        Raises:
            DuplicateEntryError: If an entry with an equal context exists and
                ``on_duplicate`` is "error".
            pydantic.ValidationError: If name is empty or context has the wrong type.
        """
        entry = MetadataEntry(name=name, context=context, payload=payload)
        with self._lock:
            current = self._entries.get(name, ())
            kept = tuple(e for e in current if e.context != context)
            if len(kept) != len(current):
                if self.settings.on_duplicate == "error":
                    raise DuplicateEntryError(
                        f"metadata {name!r} already registered for context {_describe(context)}"
                    )
                logger.warning(
                    "Replacing metadata %r registered for context %s", name, _describe(context)
                )
            self._entries[name] = (*kept, entry)
        logger.debug("Registered metadata %r for context %s", name, _describe(context))
        return entry

    # Lookup ------------------------------------------------------------------

    def candidates(self, name: str, request: MetadataContext | None = None) -> list[MetadataEntry]:
        """
        Return the entries applicable to ``request``, most specific first.

        Args:
            name (str): Registered metadata name.
            request (MetadataContext | None): Request context.

        Returns:
            list[MetadataEntry]: Matching entries with present contexts in descending
            compare_to order, followed by the fallback entry (if enabled).
        """
        snapshot = self._group(name)
        specific = [e for e in snapshot if e.context is not None and e.applies_to(request)]
        specific.sort(key=cmp_to_key(self._compare_entries), reverse=True)
        if self.settings.fallback_enabled:
            specific.extend(e for e in snapshot if e.context is None)
        return specific

    def lookup(self, name: str, request: MetadataContext | None = None) -> MetadataEntry | None:
        """Return the most specific entry applicable to ``request``, or None."""
        found = self.candidates(name, request)
        if not found:
            logger.debug("No metadata %r for context %s", name, _describe(request))
            return None
        best = found[0]
        logger.debug(
            "Resolved metadata %r for context %s to %s",
            name,
            _describe(request),
            _describe(best.context),
        )
        return best

    def require(self, name: str, request: MetadataContext | None = None) -> MetadataEntry:
        """
        Like lookup, but raise when nothing applies.

        Raises:
            NoMatchingEntryError: If no entry applies to ``request``.
        """
        best = self.lookup(name, request)
        if best is None:
            raise NoMatchingEntryError(
                f"no metadata {name!r} applies to context {_describe(request)}"
            )
        return best

    # Introspection -----------------------------------------------------------

    def entries(self, name: str | None = None) -> list[MetadataEntry]:
        """Return registered entries, for one name or all names, in registration order."""
        if name is not None:
            return list(self._group(name))
        return [e for group in self._snapshot().values() for e in group]

    def names(self) -> list[str]:
        return list(self._snapshot())

    def __len__(self) -> int:
        return sum(len(group) for group in self._snapshot().values())

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._entries

    def __iter__(self) -> Iterator[MetadataEntry]:
        return iter(self.entries())

    def _group(self, name: str) -> tuple[MetadataEntry, ...]:
        with self._lock:
            return self._entries.get(name, ())

    def _snapshot(self) -> dict[str, tuple[MetadataEntry, ...]]:
        with self._lock:
            return dict(self._entries)

    def _compare_entries(self, a: MetadataEntry, b: MetadataEntry) -> int:
        return a.context.compare_to(b.context, class_order=self._class_order)  # type: ignore[union-attr]


def _describe(context: MetadataContext | None) -> str:
    return "default" if context is None else str(context)
