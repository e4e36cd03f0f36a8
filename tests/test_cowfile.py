from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pytest

from errors import MalformedHeaderError
from patching import InsertDeclaration, cowfile, temp_path_for

if TYPE_CHECKING:
    from pathlib import Path

ORIGINAL = "fn main() {}\n"


@dataclass(frozen=True)
class _Replace:
    contents: str

    def produce(self, original: str) -> str:
        return self.contents


class _Explode:
    def produce(self, original: str) -> str:
        msg = "transform failed"
        raise RuntimeError(msg)


def _write_root(tmp_path: Path, contents: str = ORIGINAL) -> Path:
    root_file = tmp_path / "main.rs"
    root_file.write_text(contents, encoding="utf-8")
    return root_file


def test_cowfile_replaces_contents(tmp_path: Path) -> None:
    root_file = _write_root(tmp_path)

    cowfile(root_file, InsertDeclaration("mod net;"))

    assert root_file.read_text(encoding="utf-8") == "mod net;\n" + ORIGINAL
    assert not temp_path_for(root_file).exists()
    assert sorted(p.name for p in tmp_path.iterdir()) == ["main.rs"]


def test_temp_path_is_a_sibling(tmp_path: Path) -> None:
    root_file = tmp_path / "src" / "lib.rs"

    assert temp_path_for(root_file) == tmp_path / "src" / "lib.rs_"
    assert temp_path_for(root_file, ".dab") == tmp_path / "src" / "lib.rs.dab"


def test_failed_transform_leaves_original_and_temp_file(tmp_path: Path) -> None:
    root_file = _write_root(tmp_path)

    with pytest.raises(RuntimeError, match="transform failed"):
        cowfile(root_file, _Explode())

    assert root_file.read_text(encoding="utf-8") == ORIGINAL
    assert temp_path_for(root_file).exists()


def test_failed_transform_cleanup_removes_temp_file(tmp_path: Path) -> None:
    root_file = _write_root(tmp_path)

    with pytest.raises(RuntimeError):
        cowfile(root_file, _Explode(), cleanup_on_failure=True)

    assert root_file.read_text(encoding="utf-8") == ORIGINAL
    assert not temp_path_for(root_file).exists()


def test_malformed_header_leaves_original_untouched(tmp_path: Path) -> None:
    root_file = _write_root(tmp_path, "/* unterminated\nfn main() {}\n")

    with pytest.raises(MalformedHeaderError):
        cowfile(root_file, InsertDeclaration("mod z;", True), cleanup_on_failure=True)

    assert root_file.read_text(encoding="utf-8") == "/* unterminated\nfn main() {}\n"


def test_stale_temp_file_blocks_patch(tmp_path: Path) -> None:
    root_file = _write_root(tmp_path)
    stale = temp_path_for(root_file)
    stale.write_text("half written", encoding="utf-8")

    with pytest.raises(FileExistsError):
        cowfile(root_file, _Replace("new"))

    assert root_file.read_text(encoding="utf-8") == ORIGINAL
    assert stale.read_text(encoding="utf-8") == "half written"


def test_missing_original_raises_before_temp_file(tmp_path: Path) -> None:
    root_file = tmp_path / "lib.rs"

    with pytest.raises(FileNotFoundError):
        cowfile(root_file, _Replace("new"))

    assert not temp_path_for(root_file).exists()


def test_crlf_line_endings_preserved(tmp_path: Path) -> None:
    root_file = tmp_path / "lib.rs"
    root_file.write_bytes(b"pub fn f() {}\r\n")

    cowfile(root_file, InsertDeclaration("mod a;"))

    assert root_file.read_bytes() == b"mod a;\npub fn f() {}\r\n"


def test_invalid_utf8_surfaces_decode_error(tmp_path: Path) -> None:
    root_file = tmp_path / "lib.rs"
    root_file.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(UnicodeDecodeError):
        cowfile(root_file, _Replace("new"))

    assert root_file.read_bytes() == b"\xff\xfe\x00bad"
