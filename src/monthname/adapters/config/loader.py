"""Layered configuration loading for ``monthname``.

``get_config`` reads defaults, app, host, user, dotenv and environment
layers through lib_layered_config and caches the result per
``(profile, start_dir)`` for the lifetime of the process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from monthname import __init__conf__

_DEFAULT_CONFIG = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are empty, too long, or escape the config tree.

    Raises:
        ValueError: If lib_layered_config refuses the name.

    Examples:
        >>> validate_profile("staging")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValidationError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH if max_length is None else max_length)


def get_default_config_path() -> Path:
    """Path of the ``defaultconfig.toml`` shipped inside the package.

    >>> get_default_config_path().name
    'defaultconfig.toml'
    """
    return _DEFAULT_CONFIG


class _LayeredConfigLoader:
    """Callable returning cached Config objects, with ``cache_clear``."""

    def __init__(self, cache_size: int = 4) -> None:
        self._read = lru_cache(maxsize=cache_size)(self._read_layers)

    @staticmethod
    def _read_layers(profile: str | None, start_dir: str | None) -> Config:
        return read_config(
            vendor=__init__conf__.LAYEREDCONF_VENDOR,
            app=__init__conf__.LAYEREDCONF_APP,
            slug=__init__conf__.LAYEREDCONF_SLUG,
            profile=profile,
            default_file=_DEFAULT_CONFIG,
            start_dir=start_dir,
        )

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        """Return the merged configuration for *profile*.

        A later layer wins, so ``MONTHNAME___MONTHS__SOURCE`` in the
        environment beats every file. A profile inserts ``profile/<name>/``
        into each configuration path; *start_dir* seeds ``.env`` discovery.

        Raises:
            ValueError: If *profile* is not a valid profile name.

        Example:
            >>> get_config().get("months.encoding", default="utf-8")
            'utf-8'
        """
        if profile is not None:
            validate_profile(profile)
        return self._read(profile, start_dir)

    def cache_clear(self) -> None:
        """Drop cached configurations so the next call re-reads every layer."""
        self._read.cache_clear()


get_config = _LayeredConfigLoader()


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
