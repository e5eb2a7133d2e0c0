#!/usr/bin/env python3
"""
extrestore Extension Restore Module

Renames a file so that its extension matches the identified type.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..utils.error_handler import log_error
from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class RestoreOutcome:
    """What happened when restoring an extension."""

    source: Path
    target: Path
    renamed: bool = False
    unchanged: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def restored_name(filename: str, extension: str) -> str:
    """
    Build the new file name for ``extension``.

    The last dot-suffix is replaced; names without one (including dotfiles
    such as ``.bashrc``) get the extension appended.
    """
    stem, dot, _suffix = filename.rpartition(".")
    if not dot or not stem:
        stem = filename
    return f"{stem}.{extension}"


def restore_extension(
    path: str | Path,
    extension: str,
    *,
    overwrite: bool = False,
    file_system: FileSystemAdapter | None = None,
) -> RestoreOutcome:
    """
    Rename ``path`` next to itself with ``extension``.

    Failures are reported in the outcome, never raised.
    """
    fs = file_system or default_file_system
    source = Path(path)
    target = source

    try:
        target = source.with_name(restored_name(source.name, extension))
        if target == source:
            logger.info(f"File already has extension .{extension}: {source}")
            return RestoreOutcome(source, target, unchanged=True)
        renamed_to = fs.rename(source, target, overwrite=overwrite)
    except (OSError, ValueError) as e:
        log_error(e, f"Could not rename {source} to {target}", {"component": "rename"})
        return RestoreOutcome(source, target, error=str(e))

    logger.info(f"Renamed {source} -> {renamed_to}")
    return RestoreOutcome(source, Path(renamed_to), renamed=True)
