"""IO adapters used by the identification core."""

from .file_system import FileSystemAdapter, default_file_system

__all__ = ["FileSystemAdapter", "default_file_system"]
