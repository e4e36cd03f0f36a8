"""Flags and project configuration for dab."""

from options.config import CONFIG_FILENAME, DabConfig, load_config
from options.flags import Flag, Invocation, ModuleOptions, help_text, parse_arguments

__all__ = [
    "CONFIG_FILENAME",
    "DabConfig",
    "Flag",
    "Invocation",
    "ModuleOptions",
    "help_text",
    "load_config",
    "parse_arguments",
]
