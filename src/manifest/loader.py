"""Reading Cargo.toml."""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING

from pydantic import ValidationError

from errors import ManifestError
from manifest.models import CargoManifest

if TYPE_CHECKING:
    from pathlib import Path

MANIFEST_FILENAME = "Cargo.toml"


def load_manifest(project_dir: Path) -> CargoManifest:
    """Load the Cargo manifest in ``project_dir``.

    Raises:
        ManifestError: If the file is missing, unreadable, not valid TOML, or
            its [package]/[workspace] tables have the wrong shape.
    """
    manifest_path = project_dir / MANIFEST_FILENAME
    try:
        raw = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Couldn't read `{MANIFEST_FILENAME}` in {project_dir}"
        raise ManifestError(msg) from e

    try:
        return CargoManifest.model_validate(tomllib.loads(raw))
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        msg = f"failed to read `{MANIFEST_FILENAME}`: {e}"
        raise ManifestError(msg) from e
