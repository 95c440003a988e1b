"""Domain error type tests."""

from __future__ import annotations

import pytest

from monthname.domain.errors import ConfigurationError, FetchTimeout, InvalidTableSize, ResourceUnavailable


@pytest.mark.os_agnostic
def test_resource_unavailable_carries_location_and_reason() -> None:
    err = ResourceUnavailable("/srv/months.txt", "No such file or directory")

    assert err.location == "/srv/months.txt"
    assert err.reason == "No such file or directory"
    assert str(err) == "Cannot read /srv/months.txt: No such file or directory"


@pytest.mark.os_agnostic
def test_fetch_timeout_is_a_resource_unavailable() -> None:
    """Callers handling ResourceUnavailable also catch timeouts."""
    err = FetchTimeout("https://example.com/months.txt", 1.5)

    assert isinstance(err, ResourceUnavailable)
    assert err.timeout == 1.5
    assert "timed out after 1.5s" in str(err)


@pytest.mark.os_agnostic
def test_invalid_table_size_is_a_value_error() -> None:
    err = InvalidTableSize(7)

    assert isinstance(err, ValueError)
    assert err.count == 7
    assert str(err) == "Month table must contain 12 entries, got 7"


@pytest.mark.os_agnostic
def test_configuration_error_keeps_message() -> None:
    assert str(ConfigurationError("bad months section")) == "bad months section"
