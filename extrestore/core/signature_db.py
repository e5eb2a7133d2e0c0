#!/usr/bin/env python3
"""
extrestore Signature Database - Parsing of the magic number database

The database is line oriented UTF-8 text::

    # comment
    png;89504E470D0A1A0A;image/png

Each record is ``extension;hex_pattern;description``. Blank lines and lines
starting with ``#`` are ignored. Malformed records are skipped with a warning
and never abort the load; an unreadable source yields an empty database.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..utils.error_handler import log_error
from ..utils.logger import get_logger
from .constants import (
    BUNDLED_DATABASE_PATH,
    COMMENT_PREFIX,
    DATABASE_ENCODING,
    RECORD_FIELD_COUNT,
    RECORD_SEPARATOR,
)

_logger = get_logger(__name__)

_HEX_RE = re.compile(r"[0-9A-Fa-f]+")

# An extension becomes part of a file name on rename
_FORBIDDEN_EXTENSION_CHARS = ("/", "\\", "\x00")


@dataclass(frozen=True)
class SignatureEntry:
    """One magic number: the bytes expected at offset 0 and what they mean."""

    extension: str
    pattern: bytes
    description: str = ""

    def __post_init__(self) -> None:
        # Accept bytearray/memoryview but always store immutable bytes
        if not isinstance(self.pattern, bytes):
            object.__setattr__(self, "pattern", bytes(self.pattern))

    @property
    def length(self) -> int:
        return len(self.pattern)

    def matches(self, header: bytes) -> bool:
        """True when the whole pattern is a prefix of ``header``."""
        if len(self.pattern) > len(header):
            return False
        return header.startswith(self.pattern)


@dataclass(frozen=True)
class ParsedRecord:
    """Outcome of parsing one database line: either an entry or an error."""

    line_number: int
    entry: SignatureEntry | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.entry is not None


def decode_hex(text: str) -> bytes:
    """
    Decode a compact hex string (two digits per byte, no separators).

    Raises:
        ValueError: if the string is empty, has odd length or non-hex characters
    """
    if not text:
        raise ValueError("empty hex pattern")
    if len(text) % 2:
        raise ValueError(f"odd-length hex pattern '{text}'")
    if not _HEX_RE.fullmatch(text):
        raise ValueError(f"non-hex characters in pattern '{text}'")
    return bytes.fromhex(text)


def parse_record(line: str, line_number: int = 0) -> ParsedRecord | None:
    """
    Parse a single database line.

    Returns:
        None for blank and comment lines, otherwise a ParsedRecord holding
        either the entry or the reason the line was rejected.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    parts = stripped.split(RECORD_SEPARATOR, RECORD_FIELD_COUNT - 1)
    if len(parts) != RECORD_FIELD_COUNT:
        return ParsedRecord(
            line_number,
            error=f"expected {RECORD_FIELD_COUNT} fields, got {len(parts)}",
        )

    extension, hex_pattern, description = (part.strip() for part in parts)
    if not extension:
        return ParsedRecord(line_number, error="empty extension")
    if any(char in extension for char in _FORBIDDEN_EXTENSION_CHARS):
        return ParsedRecord(line_number, error=f"extension {extension!r} is not a valid file name suffix")

    try:
        pattern = decode_hex(hex_pattern)
    except ValueError as e:
        return ParsedRecord(line_number, error=str(e))

    return ParsedRecord(line_number, entry=SignatureEntry(extension, pattern, description))


class SignatureDatabase:
    """
    Ordered, read-only collection of SignatureEntry values.

    Order follows the source and has no effect on matching. Instances are
    never mutated after construction and can be shared between identifications.
    """

    __slots__ = ("_entries", "source")

    def __init__(self, entries: Iterable[SignatureEntry] = (), source: str | None = None):
        self._entries: tuple[SignatureEntry, ...] = tuple(entries)
        self.source = source

    @classmethod
    def from_entries(cls, entries: Iterable[SignatureEntry]) -> SignatureDatabase:
        """Build a database from an explicit list, bypassing any file."""
        return cls(entries, source="<memory>")

    @classmethod
    def load(
        cls,
        stream: Iterable[str],
        *,
        source: str | None = None,
        logger: Any | None = None,
    ) -> SignatureDatabase:
        """
        Parse a text stream of signature records.

        Malformed lines are logged and skipped. If reading the stream itself
        fails the whole load is reported and an empty database is returned.
        """
        log = logger or _logger
        name = source or getattr(stream, "name", "<stream>")
        entries: list[SignatureEntry] = []
        skipped = 0

        try:
            for line_number, line in enumerate(stream, start=1):
                record = parse_record(line, line_number)
                if record is None:
                    continue
                if record.entry is None:
                    skipped += 1
                    log.warning(f"Skipping malformed signature at {name}:{line_number}: {record.error}")
                    continue
                entries.append(record.entry)
        except (OSError, UnicodeDecodeError) as e:
            log_error(e, f"Could not read signature database {name}", {"component": "database"}, logger=log)
            return cls((), source=str(name))

        if skipped:
            log.warning(f"Skipped {skipped} malformed signature line(s) in {name}")
        log.info(f"Loaded {len(entries)} signatures from {name}")
        return cls(entries, source=str(name))

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        *,
        encoding: str = DATABASE_ENCODING,
        file_system: FileSystemAdapter | None = None,
        logger: Any | None = None,
    ) -> SignatureDatabase:
        """Load a database file; a missing or unreadable file gives an empty database."""
        log = logger or _logger
        fs = file_system or default_file_system
        try:
            with fs.open_text(path, encoding=encoding) as handle:
                return cls.load(handle, source=str(path), logger=log)
        except (OSError, LookupError) as e:
            log_error(e, f"Could not open signature database {path}", {"component": "database"}, logger=log)
            return cls((), source=str(path))

    @classmethod
    def bundled(cls, *, logger: Any | None = None) -> SignatureDatabase:
        """Load the signature database shipped with the package."""
        return cls.from_path(BUNDLED_DATABASE_PATH, logger=logger)

    @property
    def entries(self) -> tuple[SignatureEntry, ...]:
        return self._entries

    @property
    def extensions(self) -> list[str]:
        """Distinct extensions, in first-seen order."""
        return list(dict.fromkeys(entry.extension for entry in self._entries))

    def describe(self, extension: str) -> list[str]:
        """Descriptions recorded for ``extension``."""
        return list(
            dict.fromkeys(
                entry.description
                for entry in self._entries
                if entry.extension == extension and entry.description
            )
        )

    def __iter__(self) -> Iterator[SignatureEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"SignatureDatabase(entries={len(self._entries)}, source={self.source!r})"


__all__ = [
    "ParsedRecord",
    "SignatureDatabase",
    "SignatureEntry",
    "decode_hex",
    "parse_record",
]
