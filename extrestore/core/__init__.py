#!/usr/bin/env python3
"""
extrestore Core Package - Signature matching engine

This package provides the core components for file identification:
- SignatureDatabase / SignatureEntry: the magic number database and its parser
- identify: pure longest-prefix matching of a header against signatures
- FileTypeIdentifier: path level identification with graceful degradation
- Constants: header size and database format

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .constants import BUNDLED_DATABASE_PATH, HEADER_SIZE_BYTES
from .matcher import EMPTY_RESULT, FileTypeIdentifier, MatchResult, identify
from .signature_db import (
    ParsedRecord,
    SignatureDatabase,
    SignatureEntry,
    decode_hex,
    parse_record,
)

__all__ = [
    # Matching
    "FileTypeIdentifier",
    "MatchResult",
    "EMPTY_RESULT",
    "identify",
    # Database
    "SignatureDatabase",
    "SignatureEntry",
    "ParsedRecord",
    "decode_hex",
    "parse_record",
    # Constants
    "BUNDLED_DATABASE_PATH",
    "HEADER_SIZE_BYTES",
]
