"""Error taxonomy for dab.

Filesystem failures are not wrapped: they propagate as the builtin ``OSError``
family and the CLI reports them as I/O errors.
"""

from __future__ import annotations


class DabError(Exception):
    """Base class for every error dab reports to the user."""


class EmptyPathError(DabError):
    """Raised when a module path contains an empty segment."""

    def __init__(self) -> None:
        super().__init__("one or more modules have empty names")


class BadModuleNameError(DabError):
    """Raised when a path segment is not a valid module identifier."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"bad module name: `{name}`")


class AmbiguousRootFileError(DabError):
    """Raised when the package type cannot be determined from its root file."""


class MalformedHeaderError(DabError):
    """Raised when a leading block comment is never closed."""


class UnsupportedPathError(DabError):
    """Raised for module paths dab cannot create yet."""


class ManifestError(DabError):
    """Raised when ``Cargo.toml`` cannot be read or parsed."""


class ConfigError(DabError):
    """Raised when config file exists but cannot be parsed."""


class OptionError(DabError):
    """Raised for bad command-line flags or arguments."""
