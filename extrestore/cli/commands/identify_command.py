#!/usr/bin/env python3
"""
extrestore CLI Commands - Identify Command

Identifies one file and restores its extension.

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

import json
from pathlib import Path
from typing import Any

from rich.markup import escape

from ...core.matcher import MatchResult
from ...utils.error_handler import get_error_stats, reset_error_stats
from ..display import (
    display_empty_database,
    display_error_statistics,
    display_match,
    display_match_details,
    display_no_match,
)
from ..interactive import choose_extension
from ..restore import restore_extension
from .base import Command


class IdentifyCommand(Command):
    """
    Command for identifying a single file.

    Workflow:
    - Load configuration and the signature database
    - Match the file header against every signature
    - Report the result, asking the user to choose when several tie
    - Rename the file with the chosen extension unless disabled
    """

    def execute(self, args: dict[str, Any]) -> int:
        """
        Execute file identification.

        Args:
            args: Dictionary containing:
                - filename: Path to file to identify
                - config: Optional config file path
                - database: Optional signature database path
                - no_rename: Only report, never rename
                - output_json: JSON output flag

        Returns:
            0 whenever identification ran, even if the type is unknown or the
            rename failed
        """
        filename = args["filename"]
        config = self._get_config(args.get("config"))
        output_json = args.get("output_json", False)

        reset_error_stats()
        database = self._load_database(config, args.get("database"))
        if not database and not output_json:
            display_empty_database(database.source, self.context.console)

        identifier = self._build_identifier(config, database)
        result = identifier.identify_result(filename)

        if output_json:
            self._output_json(filename, result)
            return 0

        if self.context.verbose:
            display_match_details(result, database, self.context.console)

        exit_code = self._handle_result(
            filename,
            result,
            rename=config.is_restore_enabled() and not args.get("no_rename", False),
            overwrite=config.allow_overwrite(),
        )

        if self.context.verbose:
            display_error_statistics(get_error_stats(), self.context.console)
        return exit_code

    def _handle_result(self, filename: str, result: MatchResult, rename: bool, overwrite: bool) -> int:
        """Report the result, resolve ties and restore the extension."""
        extensions = list(result.extensions)

        if not extensions:
            display_no_match(self.context.console)
            return 0

        if len(extensions) == 1:
            chosen = extensions[0]
            display_match(chosen, self.context.console)
        elif not rename:
            self.context.console.print(
                "Possible extensions: " + ", ".join(f".{escape(ext)}" for ext in extensions)
            )
            return 0
        else:
            chosen = choose_extension(extensions, console=self.context.console)
            if chosen is None:
                return 0

        if rename:
            self._restore(filename, chosen, overwrite)
        return 0

    def _restore(self, filename: str, extension: str, overwrite: bool) -> None:
        outcome = restore_extension(filename, extension, overwrite=overwrite)
        console = self.context.console
        if outcome.unchanged:
            console.print(f"File already has extension .{escape(extension)}")
        elif outcome.ok:
            console.print(f"[green]File restored: {escape(str(outcome.target))}[/green]")
        else:
            console.print(f"[red]Error: could not rename file: {escape(str(outcome.error))}[/red]")

    def _output_json(self, filename: str, result: MatchResult) -> None:
        payload = {"file": str(Path(filename)), **result.to_dict()}
        self.context.console.print_json(json.dumps(payload))
