"""Module scaffolding for Cargo packages and workspaces."""

from scaffold.module import create_module
from scaffold.package import create_module_in_package
from scaffold.roots import RootFileKind, locate_root_file
from scaffold.router import create_module_in_project
from scaffold.workspace import create_module_in_workspace

__all__ = [
    "RootFileKind",
    "create_module",
    "create_module_in_package",
    "create_module_in_project",
    "create_module_in_workspace",
    "locate_root_file",
]
