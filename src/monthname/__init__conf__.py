"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml`` so the CLI can report them without reading
installed distribution metadata at runtime.

Contents:
    * Distribution identifiers (``name``, ``version``, ``title``).
    * Layered configuration identifiers (``LAYEREDCONF_*``).
    * :func:`print_info` - Render the metadata block for ``monthname info``.
"""

from __future__ import annotations

name = "monthname"
title = "Month name lookup backed by a lazily loaded word list"
version = "1.0.0"
homepage = "https://pypi.org/project/monthname/"
author = "monthname maintainers"
author_email = ""
shell_command = "monthname"

#: Vendor, application and slug feed lib_layered_config's path discovery.
LAYEREDCONF_VENDOR = "monthname"
LAYEREDCONF_APP = "monthname"
LAYEREDCONF_SLUG = "monthname"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for monthname:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
