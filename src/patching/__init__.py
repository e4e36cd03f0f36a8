"""Copy-on-write patching of crate root files."""

from patching.cowfile import ContentTransform, cowfile, temp_path_for
from patching.inserter import InsertDeclaration, compute_patch, mod_declaration

__all__ = [
    "ContentTransform",
    "InsertDeclaration",
    "compute_patch",
    "cowfile",
    "mod_declaration",
    "temp_path_for",
]
