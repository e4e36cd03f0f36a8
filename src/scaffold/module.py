from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from errors import UnsupportedPathError
from patching import InsertDeclaration, cowfile, mod_declaration
from scaffold.roots import MOD_RS, RUST_EXT, SOURCE_ROOT
from utils import validate_module_name

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from options.config import DabConfig
    from options.flags import ModuleOptions

logger = logging.getLogger(__name__)


def create_module(
    package_dir: Path,
    root_file: Path,
    path_segments: Sequence[str],
    options: ModuleOptions,
    config: DabConfig,
) -> Path:
    """Create a module file under ``package_dir`` and declare it in ``root_file``.

    Every segment is validated before anything is written to disk. The
    module file (and directory) is created first; if patching the root file
    then fails, the new file is left in place.

    Args:
        package_dir: Directory containing the package's Cargo.toml.
        root_file: The crate root (`src/lib.rs` or `src/main.rs`) to patch.
        path_segments: Module path split on `::`. Exactly one is supported.
        options: Module options after config defaults are applied.
        config: Project config; supplies the patcher settings.

    Returns:
        Path of the created module file.

    Raises:
        BadModuleNameError: If any segment is not a valid module name.
        UnsupportedPathError: For nested module paths.
        OSError: If the module already exists or the filesystem refuses.
    """
    for segment in path_segments:
        validate_module_name(segment)
    if len(path_segments) != 1:
        # TODO: create nested modules by patching the parent module's file
        msg = (
            "modules other than the root aren't supported yet. "
            "this will be implemented in a future version"
        )
        raise UnsupportedPathError(msg)

    name = path_segments[0]
    source_root = package_dir / SOURCE_ROOT
    if options.no_directory_for_module:
        module_file = source_root / f"{name}{RUST_EXT}"
    else:
        module_dir = source_root / name
        module_dir.mkdir()
        logger.debug("created directory %s", module_dir)
        module_file = module_dir / MOD_RS
    module_file.touch(exist_ok=False)
    logger.debug("created module file %s", module_file)

    transform = InsertDeclaration(
        declaration=mod_declaration(name, public=options.is_public),
        skip_leading_comment_insertion=options.skip_header_insertion_point,
    )
    cowfile(
        root_file,
        transform,
        suffix=config.temp_suffix,
        cleanup_on_failure=config.cleanup_temp_on_failure,
    )
    logger.debug("declared `%s` in %s", transform.declaration, root_file)
    return module_file
