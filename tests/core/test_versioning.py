"""Tests for `metavariant.core.versioning` service version helpers."""

import pytest

from metavariant.core.versioning import ServiceVersion, VersionRef, is_compatible


class DocsService:
    pass


@pytest.mark.parametrize("field,value", [("major", -1), ("minor", -1)])
def test_service_version_rejects_negative_components(field: str, value: int) -> None:
    kwargs = {"service_class": "docs", "major": 1, "minor": 0}
    kwargs[field] = value

    with pytest.raises(ValueError, match=f"ServiceVersion {field} must be non-negative"):
        ServiceVersion(**kwargs)


def test_minor_defaults_to_zero() -> None:
    assert ServiceVersion("docs", 3).minor == 0


def test_newer_minor_satisfies_older_requirement() -> None:
    assert ServiceVersion("docs", 2, 3).is_compatible(ServiceVersion("docs", 2, 0)) is True
    assert ServiceVersion("docs", 2, 0).is_compatible(ServiceVersion("docs", 2, 0)) is True


def test_older_minor_does_not_satisfy_newer_requirement() -> None:
    assert ServiceVersion("docs", 2, 0).is_compatible(ServiceVersion("docs", 2, 3)) is False


@pytest.mark.parametrize(
    "candidate,requirement",
    [
        (ServiceVersion("docs", 3, 0), ServiceVersion("docs", 2, 0)),
        (ServiceVersion("docs", 1, 9), ServiceVersion("docs", 2, 0)),
        (ServiceVersion("sheets", 2, 0), ServiceVersion("docs", 2, 0)),
    ],
)
def test_incompatible_major_or_service(candidate: ServiceVersion, requirement: ServiceVersion) -> None:
    assert is_compatible(candidate, requirement) is False


def test_service_version_satisfies_protocol() -> None:
    assert isinstance(ServiceVersion("docs", 1, 0), VersionRef)


def test_str_uses_class_name() -> None:
    assert str(ServiceVersion(DocsService, 1, 2)) == "DocsService:1.2"
    assert str(ServiceVersion("docs", 4, 0)) == "docs:4.0"


def test_versions_are_hashable_values() -> None:
    assert ServiceVersion("docs", 1, 0) == ServiceVersion("docs", 1, 0)
    assert len({ServiceVersion("docs", 1, 0), ServiceVersion("docs", 1, 0)}) == 1
