"""
Configuration for the metavariant.registry module.

Defines RegistrySettings, a frozen dataclass carrying runtime configuration for
metadata lookup behavior.

Precedence
- environment (METAVARIANT_REGISTRY_*) > TOML > defaults.
- TOML search order: ./metavariant.toml ([registry] table or top-level keys), then
  ./pyproject.toml under [tool.metavariant.registry].

Notes
- Invalid values are ignored and the current value is kept.
- class_order names a built-in oracle from metavariant.core.ordering.CLASS_ORDERS.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal

from metavariant.core.ordering import CLASS_ORDERS

OnDuplicate = Literal["error", "replace"]
ClassOrderName = Literal["qualified_name", "name"]

_TRUE = {"1", "true", "t", "yes", "y", "on"}


@dataclass(frozen=True)
class RegistrySettings:
    """
    Runtime settings for metavariant.registry.

    Attributes:
        fallback_enabled (bool): If True, entries registered without a context act as
            the lowest-precedence match for every request.
        on_duplicate (Literal["error","replace"]): Behavior when an entry with an equal
            name and context is registered again.
        class_order (Literal["qualified_name","name"]): Built-in service-class order
            used to rank versions from different services.

    Examples:
        >>> from metavariant.registry import RegistrySettings
        >>> RegistrySettings(on_duplicate="replace")  # doctest: +ELLIPSIS
        RegistrySettings(...)
    """

    fallback_enabled: bool = True
    on_duplicate: OnDuplicate = "error"
    class_order: ClassOrderName = "qualified_name"

    @classmethod
    def _apply_mapping(
        cls, base: RegistrySettings, cfg: dict[str, Any] | None
    ) -> RegistrySettings:
        """Apply a loose config mapping onto RegistrySettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _bool(v: Any) -> bool:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            if isinstance(v, str):
                return v.strip().lower() in _TRUE
            return False

        if "fallback_enabled" in cfg:
            s = replace(s, fallback_enabled=_bool(cfg["fallback_enabled"]))

        if "on_duplicate" in cfg and isinstance(cfg["on_duplicate"], str):
            mode = cfg["on_duplicate"].strip().lower()
            if mode in ("error", "replace"):
                s = replace(s, on_duplicate=mode)  # type: ignore[arg-type]

        if "class_order" in cfg and isinstance(cfg["class_order"], str):
            order = cfg["class_order"].strip().lower()
            if order in CLASS_ORDERS:
                s = replace(s, class_order=order)  # type: ignore[arg-type]

        return s

    @classmethod
    def from_env(
        cls, base: RegistrySettings | None = None, prefix: str = "METAVARIANT_REGISTRY_"
    ) -> RegistrySettings:
        """
        Build RegistrySettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - METAVARIANT_REGISTRY_FALLBACK_ENABLED (1/0/true/false/yes/no/on/off)
            - METAVARIANT_REGISTRY_ON_DUPLICATE ("error" | "replace")
            - METAVARIANT_REGISTRY_CLASS_ORDER ("qualified_name" | "name")
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("fallback_enabled", "on_duplicate", "class_order"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> RegistrySettings:
        """
        Build RegistrySettings from a TOML file.

        Search order when `path` is None:
            1) ./metavariant.toml (with either a [registry] table or direct keys)
            2) ./pyproject.toml under [tool.metavariant.registry]

        Returns defaults if no file is present or it cannot be parsed.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "metavariant.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool")
                section = tool.get("metavariant") if isinstance(tool, dict) else None
                cfg = section.get("registry") if isinstance(section, dict) else None
            elif isinstance(data.get("registry"), dict):
                cfg = data["registry"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> RegistrySettings:
        """
        Load RegistrySettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults
                (metavariant.toml, pyproject.toml).

        Returns:
            RegistrySettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
