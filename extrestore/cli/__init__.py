#!/usr/bin/env python3
"""
extrestore CLI Package

Click front end around the identification core: argument validation,
result display, interactive disambiguation and extension restoring.

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

import importlib
from typing import Any

MODULE_COMMANDS = "extrestore.cli.commands"
MODULE_DISPLAY = "extrestore.cli.display"
MODULE_INTERACTIVE = "extrestore.cli.interactive"
MODULE_RESTORE = "extrestore.cli.restore"
MODULE_VALIDATORS = "extrestore.cli.validators"

__all__ = [
    # Commands
    "Command",
    "CommandContext",
    "IdentifyCommand",
    "ListSignaturesCommand",
    "VersionCommand",
    # Utility modules
    "validators",
    "display",
    "interactive",
    "restore",
    # Exported utilities
    "choose_extension",
    "restore_extension",
    "display_match",
]


_LAZY_ATTRS: dict[str, tuple[str, str | None]] = {
    # Utility modules
    "validators": (MODULE_VALIDATORS, None),
    "display": (MODULE_DISPLAY, None),
    "interactive": (MODULE_INTERACTIVE, None),
    "restore": (MODULE_RESTORE, None),
    # Exported utilities
    "choose_extension": (MODULE_INTERACTIVE, "choose_extension"),
    "restore_extension": (MODULE_RESTORE, "restore_extension"),
    "display_match": (MODULE_DISPLAY, "display_match"),
    # Commands
    "Command": (MODULE_COMMANDS, "Command"),
    "CommandContext": (MODULE_COMMANDS, "CommandContext"),
    "IdentifyCommand": (MODULE_COMMANDS, "IdentifyCommand"),
    "ListSignaturesCommand": (MODULE_COMMANDS, "ListSignaturesCommand"),
    "VersionCommand": (MODULE_COMMANDS, "VersionCommand"),
}


def __getattr__(name: str) -> Any:
    if name not in _LAZY_ATTRS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_name, attr = _LAZY_ATTRS[name]
    module = importlib.import_module(module_name)
    return module if attr is None else getattr(module, attr)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_ATTRS.keys()))


def main() -> None:  # Entry point shim for console_scripts
    """Delegate to the Click-based CLI defined in extrestore.cli_main."""
    from ..cli_main import cli as _cli

    _cli()
