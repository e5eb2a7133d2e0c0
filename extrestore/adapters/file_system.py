#!/usr/bin/env python3
"""Filesystem adapter for controlled IO access."""

from __future__ import annotations

from pathlib import Path


class FileSystemAdapter:
    """Provide a minimal filesystem access abstraction."""

    def exists(self, path: str | Path) -> bool:
        return Path(path).exists()

    def read_bytes(self, path: str | Path, size: int | None = None) -> bytes:
        with Path(path).open("rb") as handle:
            return handle.read() if size is None else handle.read(size)

    def open_text(self, path: str | Path, encoding: str = "utf-8"):
        return Path(path).open("r", encoding=encoding)

    def rename(self, source: str | Path, target: str | Path, *, overwrite: bool = False) -> Path:
        """Move ``source`` to ``target``; refuse to clobber unless ``overwrite``."""
        source_path = Path(source)
        target_path = Path(target)
        if not overwrite and target_path.exists():
            raise FileExistsError(f"Target already exists: {target_path}")
        return source_path.replace(target_path) if overwrite else source_path.rename(target_path)


default_file_system = FileSystemAdapter()
