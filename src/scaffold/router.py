"""Dispatch between single packages and workspaces."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from errors import ManifestError
from manifest import ProjectKind, load_manifest
from scaffold.package import create_module_in_package
from scaffold.workspace import create_module_in_workspace

if TYPE_CHECKING:
    from pathlib import Path

    from options.config import DabConfig
    from options.flags import ModuleOptions

logger = logging.getLogger(__name__)


def create_module_in_project(
    project_dir: Path,
    module_path: str,
    options: ModuleOptions,
    config: DabConfig,
) -> Path:
    """Create ``module_path`` in the Cargo project rooted at ``project_dir``.

    Reads `Cargo.toml` to decide whether ``project_dir`` is a package or a
    workspace, then hands off to the matching creator. All paths are joined
    onto ``project_dir``; the process working directory is never changed.

    Returns:
        Path of the created module file.
    """
    manifest = load_manifest(project_dir)
    kind = manifest.kind
    logger.debug("%s is a %s", project_dir, kind.value)

    if kind is ProjectKind.PACKAGE:
        return create_module_in_package(project_dir, module_path, options, config)

    if manifest.workspace is None:
        msg = "`Cargo.toml` declares neither a [package] nor a [workspace]"
        raise ManifestError(msg)
    return create_module_in_workspace(
        project_dir, module_path, options, manifest.workspace, config
    )
