"""
Custom exceptions for the metavariant.registry module.

Purpose
- Provide registry-layer error types that map cleanly to responsibilities in
  metavariant.registry.
- Keep metavariant.core as the source of truth for context/ordering errors (see
  metavariant.core.errors).

Source of truth and boundaries
- metavariant.core.errors.MissingContextError is raised by MetadataContext.compare_to.
- metavariant.registry raises Registry* errors for storage and lookup concerns:
  - RegistryConfigError: invalid or unsupported configuration.
  - DuplicateEntryError: an entry with an equal context already exists.
  - NoMatchingEntryError: require() found no applicable entry.

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations


class RegistryError(Exception):
    """
    Base class for registry-related errors in metavariant.registry.

    Notes:
        Use this as a catch-all for registry failures, distinct from core errors.
    """


class RegistryConfigError(RegistryError):
    """
    Raised when registry configuration is invalid or unsupported.

    Examples:
        - Unknown class order name passed to MetadataRegistry
    """


class DuplicateEntryError(RegistryError):
    """
    Raised when registering an entry whose name and context equal an existing entry.

    Notes:
        Only raised under RegistrySettings.on_duplicate == "error".
    """


class NoMatchingEntryError(RegistryError, LookupError):
    """Raised by MetadataRegistry.require when no entry applies to the request."""
