from __future__ import annotations

from pathlib import Path

import pytest

from errors import ManifestError
from manifest import ProjectKind, load_manifest


def _write_manifest(project_dir: Path, toml_content: str) -> None:
    (project_dir / "Cargo.toml").write_text(toml_content, encoding="utf-8")


def test_package_manifest(tmp_path: Path) -> None:
    _write_manifest(
        tmp_path,
        """
[package]
name = "demo"
version = "0.1.0"
edition = "2021"

[dependencies]
serde = { version = "1", features = ["derive"] }
""".strip(),
    )

    manifest = load_manifest(tmp_path)

    assert manifest.kind is ProjectKind.PACKAGE
    assert manifest.package is not None
    assert manifest.package.name == "demo"
    assert manifest.workspace is None


def test_workspace_manifest(tmp_path: Path) -> None:
    _write_manifest(
        tmp_path,
        """
[workspace]
resolver = "2"
members = ["core", "cli"]
""".strip(),
    )

    manifest = load_manifest(tmp_path)

    assert manifest.kind is ProjectKind.WORKSPACE
    assert manifest.workspace is not None
    assert manifest.workspace.members == ["core", "cli"]


def test_workspace_without_members(tmp_path: Path) -> None:
    _write_manifest(tmp_path, "[workspace]\n")

    manifest = load_manifest(tmp_path)

    assert manifest.workspace is not None
    assert manifest.workspace.members == []


def test_package_wins_over_workspace(tmp_path: Path) -> None:
    _write_manifest(
        tmp_path,
        """
[package]
name = "root"

[workspace]
members = ["sub"]
""".strip(),
    )

    assert load_manifest(tmp_path).kind is ProjectKind.PACKAGE


def test_missing_manifest_reported(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="Couldn't read `Cargo.toml`"):
        load_manifest(tmp_path)


def test_invalid_toml_reported(tmp_path: Path) -> None:
    _write_manifest(tmp_path, "[package\nname = ")

    with pytest.raises(ManifestError, match="failed to read `Cargo.toml`"):
        load_manifest(tmp_path)


def test_wrong_member_type_reported(tmp_path: Path) -> None:
    _write_manifest(tmp_path, "[workspace]\nmembers = 3\n")

    with pytest.raises(ManifestError, match="failed to read `Cargo.toml`"):
        load_manifest(tmp_path)


def test_neither_package_nor_workspace(tmp_path: Path) -> None:
    _write_manifest(tmp_path, '[dependencies]\nserde = "1"\n')

    manifest = load_manifest(tmp_path)

    with pytest.raises(ManifestError, match="neither"):
        _ = manifest.kind
