from __future__ import annotations

from enum import Enum
from pathlib import Path

from errors import AmbiguousRootFileError

SOURCE_ROOT = "src"
MOD_RS = "mod.rs"
RUST_EXT = ".rs"


class RootFileKind(str, Enum):
    """Crate root files, relative to the package directory."""

    LIBRARY = "src/lib.rs"
    BINARY = "src/main.rs"

    def path_in(self, package_dir: Path) -> Path:
        return package_dir / self.value


def locate_root_file(package_dir: Path) -> RootFileKind:
    """Return which crate root file ``package_dir`` uses.

    Raises:
        AmbiguousRootFileError: If both `lib.rs` and `main.rs` exist, or
            neither does.
    """
    is_lib = RootFileKind.LIBRARY.path_in(package_dir).is_file()
    is_bin = RootFileKind.BINARY.path_in(package_dir).is_file()

    if is_lib and is_bin:
        msg = (
            f"Package at {package_dir} contains both `lib.rs` and `main.rs`. "
            "Unable to determine package type"
        )
        raise AmbiguousRootFileError(msg)
    if not (is_lib or is_bin):
        msg = (
            f"Package at {package_dir} contains neither `src/lib.rs` nor "
            "`src/main.rs`. Unable to determine package type"
        )
        raise AmbiguousRootFileError(msg)

    return RootFileKind.LIBRARY if is_lib else RootFileKind.BINARY
