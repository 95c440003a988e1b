"""Month table settings model and loader.

Provides the MonthsSettings Pydantic model for the ``[months]`` configuration
section and the loader that bridges lib_layered_config dictionaries to it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from monthname.domain.errors import ConfigurationError

#: Fetch timeout used when the configuration does not set one.
DEFAULT_FETCH_TIMEOUT = 10.0


class MonthsSettings(BaseModel):
    """Validated, immutable ``[months]`` settings.

    Attributes:
        source: Path or URL of the month list. ``None`` selects the bundled file.
        encoding: Text encoding of the resource.
        timeout: Upper bound in seconds for fetching the resource.

    Example:
        >>> settings = MonthsSettings(source="https://example.com/months.txt")
        >>> settings.timeout
        10.0
        >>> MonthsSettings(source="  ").source is None
        True
    """

    model_config = ConfigDict(frozen=True)

    source: str | None = None
    encoding: str = "utf-8"
    timeout: float = Field(default=DEFAULT_FETCH_TIMEOUT, gt=0)

    @field_validator("source", mode="before")
    @classmethod
    def _normalise_source(cls, v: object) -> object:
        """Blank means "not configured"; bare numbers from ``--set`` are paths."""
        if isinstance(v, str) and not v.strip():
            return None
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, v: str) -> str:
        import codecs

        try:
            codecs.lookup(v)
        except LookupError as exc:
            raise ValueError(f"unknown encoding {v!r}") from exc
        return v


def load_months_settings(config_dict: Mapping[str, Any]) -> MonthsSettings:
    """Load MonthsSettings from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have a 'months' section.

    Returns:
        Validated settings with defaults for missing values.

    Raises:
        ConfigurationError: If the section holds invalid values.

    Example:
        >>> load_months_settings({"months": {"timeout": 2}}).timeout
        2.0
        >>> load_months_settings({}).source is None
        True
    """
    months_raw = config_dict.get("months", {})
    try:
        return MonthsSettings.model_validate(months_raw if months_raw else {})
    except ValidationError as exc:
        problems = "; ".join(f"months.{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(f"Invalid [months] configuration: {problems}") from exc


__all__ = [
    "DEFAULT_FETCH_TIMEOUT",
    "MonthsSettings",
    "load_months_settings",
]
