from __future__ import annotations

from typing import TYPE_CHECKING

from scaffold.module import create_module
from scaffold.roots import locate_root_file
from utils import split_module_path

if TYPE_CHECKING:
    from pathlib import Path

    from options.config import DabConfig
    from options.flags import ModuleOptions


def create_module_in_package(
    package_dir: Path,
    module_path: str,
    options: ModuleOptions,
    config: DabConfig,
) -> Path:
    """Create a module in a package (not a workspace)."""
    path_segments = split_module_path(module_path)
    root_file = locate_root_file(package_dir).path_in(package_dir)
    return create_module(package_dir, root_file, path_segments, options, config)
