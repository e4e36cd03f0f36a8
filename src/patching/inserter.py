"""Placement of module declarations in a crate root file."""

from __future__ import annotations

from dataclasses import dataclass

from errors import MalformedHeaderError

COMMENT_OPEN = "/*"
COMMENT_CLOSE = "*/"


def mod_declaration(name: str, *, public: bool = False) -> str:
    """Return the declaration line for module ``name``.

    Examples:
        >>> mod_declaration("widgets")
        'mod widgets;'
        >>> mod_declaration("widgets", public=True)
        'pub mod widgets;'
    """
    if public:
        return f"pub mod {name};"
    return f"mod {name};"


def _header_end(contents: str) -> int:
    """Return the offset just past the leading block comment.

    The line ending after the closer and any blank lines that follow it stay
    with the header.
    """
    close_idx = contents.find(COMMENT_CLOSE, len(COMMENT_OPEN))
    if close_idx == -1:
        msg = (
            "Your source file possibly has a syntax error: "
            "the leading comment block is never closed"
        )
        raise MalformedHeaderError(msg)

    end = close_idx + len(COMMENT_CLOSE)
    while end < len(contents) and contents[end] in "\r\n":
        end += 1
    return end


def compute_patch(
    contents: str,
    declaration: str,
    skip_leading_comment_insertion: bool = False,
) -> str:
    """Return ``contents`` with ``declaration`` inserted as its own line.

    Without header handling (or when the file does not start with ``/*``) the
    declaration is prepended. With header handling the declaration goes on
    the first line after the leading comment block, e.g. a license header.

    Raises:
        MalformedHeaderError: If the file starts with ``/*`` but has no ``*/``.
    """
    if skip_leading_comment_insertion and contents.startswith(COMMENT_OPEN):
        end = _header_end(contents)
        header = contents[:end]
        if not header.endswith("\n"):
            header += "\n"
        return f"{header}{declaration}\n{contents[end:]}"

    return f"{declaration}\n{contents}"


@dataclass(frozen=True)
class InsertDeclaration:
    """Transform that inserts a single module declaration."""

    declaration: str
    skip_leading_comment_insertion: bool = False

    def produce(self, original: str) -> str:
        return compute_patch(
            original, self.declaration, self.skip_leading_comment_insertion
        )
