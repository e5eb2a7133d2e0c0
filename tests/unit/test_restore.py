from __future__ import annotations

from pathlib import Path

import pytest

from extrestore.cli.restore import restore_extension, restored_name


@pytest.mark.parametrize(
    "name, extension, expected",
    [
        ("photo", "jpg", "photo.jpg"),
        ("photo.dat", "jpg", "photo.jpg"),
        ("archive.tar.bin", "gz", "archive.tar.gz"),
        ("file.", "png", "file.png"),
        (".bashrc", "txt", ".bashrc.txt"),
    ],
)
def test_restored_name(name, extension, expected):
    assert restored_name(name, extension) == expected


def test_restore_extension_renames_in_place(tmp_path: Path):
    source = tmp_path / "image.bin"
    source.write_bytes(b"\x89PNG")
    outcome = restore_extension(source, "png")
    assert outcome.ok and outcome.renamed
    assert outcome.target == tmp_path / "image.png"
    assert not source.exists()
    assert (tmp_path / "image.png").read_bytes() == b"\x89PNG"


def test_restore_extension_already_correct(tmp_path: Path):
    source = tmp_path / "image.png"
    source.write_bytes(b"\x89PNG")
    outcome = restore_extension(source, "png")
    assert outcome.unchanged
    assert not outcome.renamed
    assert source.exists()


def test_restore_extension_refuses_to_overwrite(tmp_path: Path):
    source = tmp_path / "doc"
    source.write_bytes(b"new")
    existing = tmp_path / "doc.pdf"
    existing.write_bytes(b"old")

    outcome = restore_extension(source, "pdf")
    assert not outcome.ok
    assert "exists" in outcome.error
    assert source.exists()
    assert existing.read_bytes() == b"old"


def test_restore_extension_overwrite_allowed(tmp_path: Path):
    source = tmp_path / "doc"
    source.write_bytes(b"new")
    (tmp_path / "doc.pdf").write_bytes(b"old")

    outcome = restore_extension(source, "pdf", overwrite=True)
    assert outcome.renamed
    assert (tmp_path / "doc.pdf").read_bytes() == b"new"


def test_restore_extension_failure_is_reported(tmp_path: Path):
    class FailingFileSystem:
        def rename(self, source, target, *, overwrite=False):
            raise PermissionError("read-only directory")

    source = tmp_path / "doc"
    source.write_bytes(b"x")
    outcome = restore_extension(source, "pdf", file_system=FailingFileSystem())
    assert not outcome.ok
    assert outcome.error == "read-only directory"


@pytest.mark.parametrize("extension", ["tar/gz", "gz\x00"])
def test_restore_extension_invalid_extension_is_reported(tmp_path: Path, extension):
    source = tmp_path / "blob"
    source.write_bytes(b"\x1f\x8b")
    outcome = restore_extension(source, extension)
    assert not outcome.ok
    assert not outcome.renamed
    assert outcome.error
    assert source.read_bytes() == b"\x1f\x8b"
