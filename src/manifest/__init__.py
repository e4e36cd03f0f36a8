"""Cargo manifest reading."""

from manifest.loader import MANIFEST_FILENAME, load_manifest
from manifest.models import CargoManifest, PackageTable, ProjectKind, WorkspaceTable

__all__ = [
    "MANIFEST_FILENAME",
    "CargoManifest",
    "PackageTable",
    "ProjectKind",
    "WorkspaceTable",
    "load_manifest",
]
