"""Exit code values and their mapping at the CLI boundary."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from monthname.adapters import cli as cli_mod
from monthname.adapters.cli.exit_codes import ExitCode, exit_code_for
from monthname.adapters.memory import InMemoryByteSource
from monthname.domain.errors import ConfigurationError, FetchTimeout, InvalidTableSize, ResourceUnavailable


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "value"),
    [
        (ExitCode.SUCCESS, 0),
        (ExitCode.GENERAL_ERROR, 1),
        (ExitCode.INVALID_ARGUMENT, 22),
        (ExitCode.DATA_ERROR, 65),
        (ExitCode.RESOURCE_UNAVAILABLE, 69),
        (ExitCode.CONFIG_ERROR, 78),
        (ExitCode.TIMEOUT, 110),
    ],
)
def test_exit_code_values_follow_posix_conventions(member: ExitCode, value: int) -> None:
    assert int(member) == value


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (FetchTimeout("memory://months.txt", 1.0), ExitCode.TIMEOUT),
        (ResourceUnavailable("memory://months.txt", "gone"), ExitCode.RESOURCE_UNAVAILABLE),
        (InvalidTableSize(3), ExitCode.DATA_ERROR),
    ],
)
def test_months_maps_lookup_errors_to_exit_codes(
    cli_runner: CliRunner,
    inject_memory_source: Callable[..., Callable[[], Any]],
    error: Exception,
    expected: ExitCode,
) -> None:
    source = InMemoryByteSource(raise_exception=error)

    result: Result = cli_runner.invoke(cli_mod.cli, ["months"], obj=inject_memory_source(source))

    assert result.exit_code == expected
    assert "Error:" in result.stderr


@pytest.mark.os_agnostic
def test_when_config_section_is_invalid_it_exits_with_code_22(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    clear_config_cache: None,
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--section", "nonexistent_section_that_does_not_exist"], obj=production_factory
    )

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (FetchTimeout("months.txt", 0.5), ExitCode.TIMEOUT),
        (ResourceUnavailable("months.txt", "HTTP 404"), ExitCode.RESOURCE_UNAVAILABLE),
        (InvalidTableSize(13), ExitCode.DATA_ERROR),
        (ConfigurationError("months.timeout must be positive"), ExitCode.CONFIG_ERROR),
        (RuntimeError("unexpected"), ExitCode.GENERAL_ERROR),
    ],
)
def test_exit_code_for_picks_the_most_specific_code(error: Exception, expected: ExitCode) -> None:
    assert exit_code_for(error) is expected


@pytest.mark.os_agnostic
def test_invalid_root_profile_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    clear_config_cache: None,
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["--profile", "../etc", "month", "2022-03-23"], obj=production_factory
    )

    assert result.exit_code == 2
    assert "--profile" in result.stderr


@pytest.mark.os_agnostic
def test_invalid_config_profile_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    clear_config_cache: None,
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--profile", "../etc"], obj=production_factory)

    assert result.exit_code == 2
