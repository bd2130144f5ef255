"""Tests for `metavariant.core.context` factories, value semantics and string form."""

import dataclasses

import pytest

from metavariant.core.context import (
    MetadataContext,
    for_alt,
    for_context,
    for_projection,
    for_version,
)
from metavariant.core.errors import ContextError
from metavariant.core.versioning import ServiceVersion

V2_0 = ServiceVersion("calendar", 2, 0)


@pytest.mark.parametrize(
    "build",
    [
        lambda: for_alt(None),
        lambda: for_projection(None),
        lambda: for_version(None),
        lambda: for_context(None, None, None),
        lambda: MetadataContext.for_alt(None),
        lambda: MetadataContext.for_context(None, None, None),
    ],
)
def test_all_unset_collapses_to_none(build) -> None:
    assert build() is None


def test_single_selector_factories_set_exactly_one_field() -> None:
    alt = for_alt("json")
    proj = for_projection("full")
    ver = for_version(V2_0)

    assert (alt.alt_type, alt.projection, alt.version) == ("json", None, None)
    assert (proj.alt_type, proj.projection, proj.version) == (None, "full", None)
    assert (ver.alt_type, ver.projection, ver.version) == (None, None, V2_0)


def test_for_context_keeps_values_without_normalization() -> None:
    ctx = for_context("", "Full", V2_0)

    assert ctx.alt_type == ""
    assert ctx.projection == "Full"
    assert ctx.version is V2_0


def test_classmethod_factories_match_module_factories() -> None:
    assert MetadataContext.for_alt("json") == for_alt("json")
    assert MetadataContext.for_projection("full") == for_projection("full")
    assert MetadataContext.for_version(V2_0) == for_version(V2_0)


def test_direct_construction_with_no_selectors_is_rejected() -> None:
    with pytest.raises(ContextError, match="at least one selector"):
        MetadataContext()


def test_context_is_immutable() -> None:
    ctx = for_alt("json")

    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.alt_type = "atom"  # type: ignore[misc]


def test_factories_are_idempotent_by_value() -> None:
    a = for_context("json", "full", V2_0)
    b = for_context("json", "full", ServiceVersion("calendar", 2, 0))

    assert a == b
    assert a is not b
    assert hash(a) == hash(b)


def test_equality_is_structural() -> None:
    assert for_alt("x") == for_alt("x")
    assert for_alt("x") != for_alt("y")
    assert for_alt("x") != for_projection("x")
    assert for_context("x", "p", None) != for_context("x", None, None)
    assert for_version(V2_0) != for_version(ServiceVersion("calendar", 2, 1))


def test_equality_against_other_types() -> None:
    ctx = for_alt("json")

    assert ctx != "json"
    assert ctx != None  # noqa: E711
    assert ctx == ctx


@pytest.mark.parametrize(
    "a,b",
    [
        (for_alt("x"), for_alt("x")),
        (for_context("x", "p", None), for_context("x", "p", None)),
        (for_context("x", "p", V2_0), for_context("x", "p", ServiceVersion("calendar", 2, 0))),
        (for_version(V2_0), for_version(ServiceVersion("calendar", 2, 0))),
    ],
)
def test_equal_contexts_hash_equal(a, b) -> None:
    assert a == b
    assert hash(a) == hash(b)


def test_contexts_usable_as_dict_keys() -> None:
    table = {for_alt("json"): 1, for_context("json", "full", None): 2}

    assert table[for_alt("json")] == 1
    assert table[for_context("json", "full", None)] == 2


def test_str_renders_fields_in_order() -> None:
    assert str(for_alt("json")) == "{MetadataContext(json,null,null)}"
    assert str(for_context("atom", "card", V2_0)) == "{MetadataContext(atom,card,calendar:2.0)}"
