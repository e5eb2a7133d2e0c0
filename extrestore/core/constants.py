#!/usr/bin/env python3
"""
extrestore Core Constants - Signature database and header reading

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from pathlib import Path

# =============================================================================
# Header Reading
# =============================================================================
HEADER_SIZE_BYTES = 512  # Leading bytes compared against signatures

# =============================================================================
# Signature Database Format
# =============================================================================
# extension;hex_pattern;description
RECORD_SEPARATOR = ";"
RECORD_FIELD_COUNT = 3
COMMENT_PREFIX = "#"
DATABASE_ENCODING = "utf-8"

BUNDLED_DATABASE_PATH = Path(__file__).resolve().parent.parent / "data" / "signatures.db"
