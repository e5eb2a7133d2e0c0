#!/usr/bin/env python3
"""
extrestore Matcher - Longest-prefix identification of file headers

A signature matches when its whole pattern is a prefix of the file header.
Only the longest matching length wins; every distinct extension at that
length is returned so ambiguity is surfaced rather than resolved here.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..utils.error_handler import log_error
from ..utils.logger import get_logger
from .constants import HEADER_SIZE_BYTES
from .signature_db import SignatureDatabase, SignatureEntry

_logger = get_logger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Extensions tied at the longest matching signature length."""

    extensions: tuple[str, ...] = ()
    length: int = 0
    entries: tuple[SignatureEntry, ...] = field(default=(), compare=False, repr=False)

    @property
    def matched(self) -> bool:
        return bool(self.extensions)

    @property
    def ambiguous(self) -> bool:
        return len(self.extensions) > 1

    def __bool__(self) -> bool:
        return self.matched

    def __len__(self) -> int:
        return len(self.extensions)

    def to_dict(self) -> dict[str, Any]:
        return {"extensions": list(self.extensions), "length": self.length}


EMPTY_RESULT = MatchResult()


def clamp_header_size(size: Any) -> int:
    """Header length to read: at most HEADER_SIZE_BYTES, the default when unusable."""
    try:
        size = int(size)
    except (TypeError, ValueError):
        return HEADER_SIZE_BYTES
    if size <= 0:
        return HEADER_SIZE_BYTES
    return min(size, HEADER_SIZE_BYTES)


def identify(header: bytes, database: Iterable[SignatureEntry]) -> MatchResult:
    """
    Find the extensions whose signature is the longest prefix of ``header``.

    Args:
        header: Leading bytes of the file
        database: SignatureDatabase or any iterable of SignatureEntry

    Returns:
        MatchResult with the distinct winning extensions (empty if none match)
    """
    best_length = 0
    winners: list[SignatureEntry] = []

    for entry in database:
        if not entry.pattern or not entry.matches(header):
            continue
        length = len(entry.pattern)
        if length > best_length:
            best_length = length
            winners = [entry]
        elif length == best_length:
            winners.append(entry)

    if not winners:
        return EMPTY_RESULT

    extensions = tuple(dict.fromkeys(entry.extension for entry in winners))
    return MatchResult(extensions=extensions, length=best_length, entries=tuple(winners))


class FileTypeIdentifier:
    """
    Identify files on disk against a signature database.

    The database is loaded once and shared read-only across calls. Every
    failure mode (missing file, unreadable file, no match) yields an empty
    result plus a diagnostic on the injected logger; nothing is raised.
    """

    def __init__(
        self,
        database: SignatureDatabase | Iterable[SignatureEntry] | None = None,
        *,
        header_size: int = HEADER_SIZE_BYTES,
        file_system: FileSystemAdapter | None = None,
        logger: Any | None = None,
    ):
        self.logger = logger or _logger
        if database is None:
            database = SignatureDatabase.bundled(logger=self.logger)
        elif not isinstance(database, SignatureDatabase):
            database = SignatureDatabase.from_entries(database)
        self.database: SignatureDatabase = database
        self.header_size = clamp_header_size(header_size)
        self.file_system = file_system or default_file_system

    def read_header(self, path: str | Path) -> bytes | None:
        """Read up to ``header_size`` bytes; None when the file cannot be read."""
        try:
            return self.file_system.read_bytes(path, size=self.header_size)
        except (OSError, ValueError) as e:
            log_error(e, f"Error reading file '{path}'", {"component": "identify"}, logger=self.logger)
            return None

    def _exists(self, path: str | Path) -> bool:
        # Path.exists() raises for names the OS rejects outright (too long, NUL)
        try:
            return self.file_system.exists(path)
        except (OSError, ValueError) as e:
            log_error(e, f"Error checking file '{path}'", {"component": "identify"}, logger=self.logger)
            return False

    def identify_result(self, path: str | Path) -> MatchResult:
        """Identify ``path`` and return the full MatchResult."""
        if not self._exists(path):
            self.logger.error(f"File not found: {path}")
            return EMPTY_RESULT

        header = self.read_header(path)
        if header is None:
            return EMPTY_RESULT

        result = identify(header, self.database)
        if not result:
            self.logger.warning(f"No signature matched for file '{path}'")
        else:
            self.logger.info(
                f"Best match ({result.length} bytes) for '{path}': {', '.join(result.extensions)}"
            )
        return result

    def identify(self, path: str | Path) -> list[str]:
        """Return the distinct extensions tied for the best match of ``path``."""
        return list(self.identify_result(path).extensions)


__all__ = ["EMPTY_RESULT", "FileTypeIdentifier", "MatchResult", "clamp_header_size", "identify"]
