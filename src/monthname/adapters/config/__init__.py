"""Configuration adapter - loading, display, overrides, and ``[months]`` settings.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.months` - ``[months]`` section model and loader
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .months import MonthsSettings, load_months_settings
from .overrides import apply_overrides

__all__ = [
    "MonthsSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_months_settings",
]
