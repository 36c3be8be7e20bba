"""
Configuration management for the memtracker package.

This module loads the optional TOML defaults file and turns layered settings
into a validated ``RunConfig``.
"""

from .builder import BUILTIN_DEFAULTS, CHART_SUFFIXES, build_run_config, merge_settings
from .loader import load_monitor_defaults, load_toml_file

__all__ = [
    "BUILTIN_DEFAULTS",
    "CHART_SUFFIXES",
    "build_run_config",
    "merge_settings",
    "load_monitor_defaults",
    "load_toml_file",
]
