"""Shared pytest fixtures for library, CLI, and module-entry tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from monthname.adapters.memory import ENGLISH_MONTHS, InMemoryByteSource

if TYPE_CHECKING:
    from monthname.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

ENGLISH_MONTH_NAMES: tuple[str, ...] = tuple(ENGLISH_MONTHS.decode("utf-8").split())


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for exact output checks; log records go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from monthname.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test."""
    from monthname.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def memory_source() -> InMemoryByteSource:
    """Provide a fresh in-memory byte source serving the English month names."""
    return InMemoryByteSource()


@pytest.fixture
def months_file(tmp_path: Path) -> Path:
    """Write the English month list to a temporary file and return its path."""
    path = tmp_path / "months.txt"
    path.write_bytes(ENGLISH_MONTHS)
    return path


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides production services with an injected Config.

    Only the configuration I/O boundary is replaced; the month lookup still
    reads real files through the production byte sources.

    Example:
        def test_source(cli_runner, config_factory, inject_config, months_file) -> None:
            factory = inject_config(config_factory({"months": {"source": str(months_file)}}))
            result = cli_runner.invoke(cli, ["month", "2022-03-23"], obj=factory)
            assert result.stdout == "March\\n"
    """
    from monthname.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            build_month_lookup=prod.build_month_lookup,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_memory_source(
    clear_config_cache: None,
) -> Callable[..., Callable[[], AppServices]]:
    """Return a factory wiring an InMemoryByteSource behind the CLI.

    Configuration and logging stay on the production adapters so commands
    run exactly as they would for a user; only the byte fetch is replaced.

    Example:
        def test_fetch_once(cli_runner, memory_source, inject_memory_source) -> None:
            factory = inject_memory_source(memory_source)
            cli_runner.invoke(cli, ["months"], obj=factory)
            assert memory_source.fetch_count == 1
    """
    from monthname.composition import AppServices, build_production

    def _inject(source: InMemoryByteSource, config: Config | None = None) -> Callable[[], AppServices]:
        prod = build_production()

        def _get_config(**kwargs: Any) -> Config:
            return config if config is not None else prod.get_config(**kwargs)

        test_services = AppServices(
            get_config=_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            build_month_lookup=source.build_month_lookup,
        )
        return lambda: test_services

    return _inject
