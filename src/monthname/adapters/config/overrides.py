"""``--set SECTION.KEY=VALUE`` handling.

Values are decoded as JSON where they parse (``3`` becomes an int, ``false``
a bool) and kept as plain strings otherwise, so ``months.source=/srv/m.txt``
needs no quoting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` value addressed by section and key path."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def _malformed(raw: str, problem: str) -> ValueError:
    return ValueError(f"Invalid override {raw!r}: {problem}")


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    Only the first ``=`` separates path from value, so values may contain
    ``=`` themselves.

    Raises:
        ValueError: For a missing ``=``, a path without a dot, or an empty
            path component.

    Examples:
        >>> override = parse_override("months.source=https://example.com/months.txt")
        >>> override.section, override.key_path, override.value
        ('months', ('source',), 'https://example.com/months.txt')
        >>> parse_override("months.timeout=2.5").value
        2.5
    """
    path, equals, value = raw.partition("=")
    if not equals:
        raise _malformed(raw, "must contain '='")
    if "." not in path:
        raise _malformed(raw, "key must contain at least one dot (SECTION.KEY)")

    section, *keys = path.split(".")
    if not section:
        raise _malformed(raw, "section name is empty")
    if "" in keys:
        raise _malformed(raw, "key path contains empty component")

    return ConfigOverride(section, tuple(keys), coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """JSON-decode *raw*, falling back to the string itself.

    >>> coerce_value("10"), coerce_value("false"), coerce_value("utf-8"), coerce_value("")
    (10, False, 'utf-8', '')
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write *override* into the nested mapping *target*.

    Raises:
        TypeError: When a key on the path already holds a scalar.
    """
    *parents, leaf = override.key_path
    node: dict[str, object] = target.setdefault(override.section, {})
    for key in parents:
        child = node.setdefault(key, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {key!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with every ``--set`` value merged in.

    Later overrides for the same key win. With no overrides the same
    object comes back.

    Raises:
        ValueError: If an override is malformed.
        TypeError: If two overrides disagree on whether a key is a table.

    Examples:
        >>> cfg = Config({"months": {"timeout": 10.0}}, {})
        >>> apply_overrides(cfg, ("months.timeout=3",))["months"]["timeout"]
        3
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    merged: dict[str, dict[str, object]] = {}
    for override in map(parse_override, raw_overrides):
        _nest_override(merged, override)
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
