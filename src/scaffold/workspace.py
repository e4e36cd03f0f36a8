from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from errors import UnsupportedPathError
from scaffold.module import create_module
from scaffold.roots import locate_root_file
from utils import split_module_path

if TYPE_CHECKING:
    from pathlib import Path

    from manifest.models import WorkspaceTable
    from options.config import DabConfig
    from options.flags import ModuleOptions

logger = logging.getLogger(__name__)


def create_module_in_workspace(
    workspace_dir: Path,
    module_path: str,
    options: ModuleOptions,
    workspace: WorkspaceTable,
    config: DabConfig,
) -> Path:
    """Create a module in one member of a workspace.

    The first segment of ``module_path`` names the member, exactly as it is
    listed in the workspace `members`; the rest is the module path inside
    that member (`core::errors`).

    Raises:
        EmptyPathError: If any segment is empty.
        UnsupportedPathError: If no member is named, or the member is not
            listed in the workspace.
    """
    path_segments = split_module_path(module_path)
    if len(path_segments) < 2:
        msg = (
            f"Bad module path `{module_path}`: "
            "expected `<member>::<module>` inside a workspace"
        )
        raise UnsupportedPathError(msg)

    target_member, *module_segments = path_segments
    if target_member not in workspace.members:
        # TODO: offer to create the member package and add it to `members`
        msg = (
            f"package `{target_member}` not present in workspace `Cargo.toml`. "
            "consider adding it there"
        )
        raise UnsupportedPathError(msg)

    member_dir = workspace_dir / target_member
    logger.debug("creating module in workspace member %s", member_dir)
    root_file = locate_root_file(member_dir).path_in(member_dir)
    return create_module(member_dir, root_file, module_segments, options, config)
