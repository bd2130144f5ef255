"""Tests for `MetadataContext.matches`: wildcards, direction and version delegation."""

import pytest

from metavariant.core.context import for_alt, for_context, for_projection, for_version
from metavariant.core.versioning import ServiceVersion


class RecordingVersion:
    """VersionRef double that records compatibility calls."""

    def __init__(self, service_class: str, major: int, minor: int, compatible: bool) -> None:
        self.service_class = service_class
        self.major = major
        self.minor = minor
        self._compatible = compatible
        self.calls: list[object] = []

    def is_compatible(self, requirement: object) -> bool:
        self.calls.append(requirement)
        return self._compatible


@pytest.mark.parametrize(
    "ctx",
    [
        for_alt("json"),
        for_projection("full"),
        for_version(ServiceVersion("calendar", 1, 0)),
        for_context("json", "full", ServiceVersion("calendar", 1, 0)),
    ],
)
def test_matches_none_is_always_false(ctx) -> None:
    assert ctx.matches(None) is False


def test_unset_selectors_are_wildcards() -> None:
    full = for_context("atom", "card", ServiceVersion("calendar", 1, 2))

    assert for_alt("atom").matches(full)
    assert for_projection("card").matches(full)
    assert for_version(ServiceVersion("calendar", 1, 0)).matches(full)


def test_set_selector_requires_equal_value() -> None:
    assert not for_alt("json").matches(for_alt("atom"))
    assert not for_projection("full").matches(for_projection("card"))
    assert not for_alt("json").matches(for_projection("full"))


def test_string_match_is_exact() -> None:
    assert not for_alt("json").matches(for_alt("JSON"))
    assert not for_alt("json").matches(for_alt("json "))


def test_matches_is_not_symmetric() -> None:
    x = for_projection("card")
    y = for_context("atom", "card", None)

    assert x.matches(y) is True
    assert y.matches(x) is False


def test_mismatched_alt_fails_in_both_directions() -> None:
    req = for_alt("atom")
    constraint = for_context("json", None, None)

    assert constraint.matches(req) is False
    assert req.matches(constraint) is False


def test_version_match_delegates_to_compatibility() -> None:
    requirement = ServiceVersion("calendar", 2, 0)
    candidate = ServiceVersion("calendar", 2, 3)
    assert candidate.is_compatible(requirement)

    assert for_version(requirement).matches(for_version(candidate)) is True
    assert for_version(candidate).matches(for_version(requirement)) is False


def test_version_match_calls_candidate_with_requirement() -> None:
    requirement = RecordingVersion("svc", 9, 9, compatible=False)
    candidate = RecordingVersion("svc", 1, 0, compatible=True)

    assert for_version(requirement).matches(for_version(candidate)) is True
    assert candidate.calls == [requirement]
    assert requirement.calls == []


def test_version_requirement_fails_without_candidate_version() -> None:
    assert not for_version(ServiceVersion("calendar", 1, 0)).matches(for_alt("json"))


def test_unset_version_ignores_candidate_version() -> None:
    candidate = RecordingVersion("svc", 1, 0, compatible=False)

    assert for_alt("json").matches(for_context("json", None, candidate))
    assert candidate.calls == []


def test_version_match_is_not_equality() -> None:
    assert not for_version(ServiceVersion("calendar", 2, 0)).matches(
        for_version(ServiceVersion("calendar", 3, 0))
    )
    assert not for_version(ServiceVersion("calendar", 2, 0)).matches(
        for_version(ServiceVersion("contacts", 2, 0))
    )
