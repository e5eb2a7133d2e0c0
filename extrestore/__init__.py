#!/usr/bin/env python3
"""
extrestore - Identify files by their magic numbers and restore lost extensions

Author: Marc Rivero (@seifreed)
License: GPL-3.0
"""

from .__version__ import __author__, __author_email__, __license__, __url__, __version__

__description__ = "Identify files by their magic numbers and restore lost extensions"

from .core import FileTypeIdentifier, MatchResult, SignatureDatabase, SignatureEntry, identify

__all__ = [
    "FileTypeIdentifier",
    "MatchResult",
    "SignatureDatabase",
    "SignatureEntry",
    "identify",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__url__",
    "__description__",
]
