"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from extrestore.core import SignatureDatabase, SignatureEntry
from extrestore.utils.error_handler import reset_error_stats


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory, monkeypatch) -> Path:
    """Keep config and log files out of the real home directory."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


@pytest.fixture(autouse=True)
def reset_logging_and_stats():
    """Drop handlers bound to streams of earlier tests and clear error counts."""
    yield
    logger = logging.getLogger("extrestore")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    reset_error_stats()


@pytest.fixture
def sample_entries() -> list[SignatureEntry]:
    return [
        SignatureEntry("png", bytes.fromhex("89504E47"), "PNG Image"),
        SignatureEntry("jpg", bytes.fromhex("FFD8FF"), "JPEG Image"),
        SignatureEntry("jpeg", bytes.fromhex("FFD8FF"), "JPEG Image"),
        SignatureEntry("zip", bytes.fromhex("504B0304"), "ZIP Archive"),
        SignatureEntry("docx", bytes.fromhex("504B030414000600"), "Word Document"),
    ]


@pytest.fixture
def sample_database(sample_entries) -> SignatureDatabase:
    return SignatureDatabase.from_entries(sample_entries)


@pytest.fixture
def sample_db_file(tmp_path: Path) -> Path:
    path = tmp_path / "signatures.db"
    path.write_text(
        "# test signatures\n"
        "\n"
        "png;89504E47;PNG Image\n"
        "jpg;FFD8FF;JPEG Image\n"
        "jpeg;ffd8ff;JPEG Image\n"
        "zip;504B0304;ZIP Archive\n"
        "docx;504B030414000600;Word Document\n",
        encoding="utf-8",
    )
    return path
