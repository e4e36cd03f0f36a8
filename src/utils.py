"""Shared utilities for module names and paths."""

from __future__ import annotations

from errors import BadModuleNameError, EmptyPathError

PATH_SEPARATOR = "::"


def _is_ident_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def validate_module_name(name: str) -> None:
    """Check that ``name`` can be used as a Rust module name.

    Args:
        name: A single module path segment (e.g., "protocol")

    Raises:
        BadModuleNameError: If the name is empty, starts with a digit, is a
            lone underscore or contains anything outside ``[A-Za-z0-9_]``.

    Examples:
        >>> validate_module_name("net_io")
        >>> validate_module_name("_private")
        >>> validate_module_name("_")
        Traceback (most recent call last):
        ...
        errors.BadModuleNameError: bad module name: `_`
    """
    if not name:
        raise BadModuleNameError(name)

    first = name[0]
    # A leading underscore must be followed by something.
    valid_start = (first.isascii() and first.isalpha()) or (
        first == "_" and len(name) > 1
    )
    if not valid_start or not all(_is_ident_char(char) for char in name):
        raise BadModuleNameError(name)


def split_module_path(path: str) -> list[str]:
    """Split a ``::`` separated module path into its segments.

    Handles the degenerate inputs "", "::", "::a" and "a::" by rejecting them.

    Raises:
        EmptyPathError: If any segment is empty.
    """
    segments = path.split(PATH_SEPARATOR)
    if any(not segment for segment in segments):
        raise EmptyPathError
    return segments
