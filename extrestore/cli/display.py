#!/usr/bin/env python3
"""
extrestore CLI Display Module

Rich formatted output for identification results, the signature database
and error statistics.

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

import sys
from typing import IO, Any, cast

import pyfiglet
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.matcher import MatchResult
from ..core.signature_db import SignatureDatabase


class _StdoutProxy:
    def write(self, data: str) -> int:
        return sys.stdout.write(data)

    def flush(self) -> None:
        sys.stdout.flush()

    def isatty(self) -> bool:
        return sys.stdout.isatty()

    @property
    def encoding(self) -> str:
        return getattr(sys.stdout, "encoding", "utf-8")

    @property
    def errors(self) -> str:
        return getattr(sys.stdout, "errors", "strict")


console = Console(file=cast(IO[str], _StdoutProxy()))
# Usage and validation errors, resolved against sys.stderr at print time
error_console = Console(stderr=True)

# Constants
NO_MATCH_MESSAGE = "Could not determine file type"
EMPTY_DATABASE_MESSAGE = "Signature database is empty; no file can be identified"


def _get_console(override: Console | None = None) -> Console:
    return override if override is not None else console


def print_banner(out: Console | None = None) -> None:
    """Print extrestore banner"""
    out = _get_console(out)
    banner = pyfiglet.figlet_format("extrestore", font="slant")
    out.print(f"[bold blue]{escape(banner)}[/bold blue]")
    out.print("[bold]Restore lost file extensions from magic numbers[/bold]\n")


def display_validation_errors(validation_errors: list[str], out: Console | None = None) -> None:
    """Display validation errors on stderr"""
    out = out or error_console
    for error in validation_errors:
        out.print(f"[red]Error: {escape(error)}[/red]")


def display_no_match(out: Console | None = None) -> None:
    _get_console(out).print(f"[yellow]{NO_MATCH_MESSAGE}[/yellow]")


def display_empty_database(source: str | None, out: Console | None = None) -> None:
    _get_console(out).print(
        f"[yellow]Warning: {EMPTY_DATABASE_MESSAGE} ({escape(str(source))})[/yellow]"
    )


def display_match(extension: str, out: Console | None = None) -> None:
    _get_console(out).print(
        f"[green]Detected file extension: [bold].{escape(extension)}[/bold][/green]"
    )


def create_match_table(result: MatchResult, database: SignatureDatabase) -> Table:
    """Table with the winning candidates and their descriptions"""
    table = Table(title=f"Best match ({result.length} bytes)", show_header=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Extension", style="cyan", no_wrap=True)
    table.add_column("Pattern", style="yellow", no_wrap=True)
    table.add_column("Description", style="green", overflow="fold")

    for index, extension in enumerate(result.extensions, start=1):
        patterns = [entry for entry in result.entries if entry.extension == extension]
        pattern_hex = patterns[0].pattern.hex().upper() if patterns else ""
        description = ", ".join(database.describe(extension))
        table.add_row(str(index), f".{extension}", pattern_hex, escape(description))
    return table


def display_match_details(
    result: MatchResult, database: SignatureDatabase, out: Console | None = None
) -> None:
    if result:
        _get_console(out).print(create_match_table(result, database))


def create_signature_table(database: SignatureDatabase) -> Table:
    """Table listing every loaded signature"""
    table = Table(title=f"Signatures ({len(database)}) from {escape(str(database.source))}")
    table.add_column("Extension", style="cyan", no_wrap=True)
    table.add_column("Length", style="magenta", justify="right")
    table.add_column("Pattern", style="yellow", overflow="fold")
    table.add_column("Description", style="green", overflow="fold")

    for entry in database:
        table.add_row(
            escape(entry.extension),
            str(entry.length),
            entry.pattern.hex().upper(),
            escape(entry.description),
        )
    return table


def display_signatures(database: SignatureDatabase, out: Console | None = None) -> None:
    if not database:
        display_empty_database(database.source, out)
        return
    _get_console(out).print(create_signature_table(database))


def display_error_statistics(error_stats: dict[str, Any], out: Console | None = None) -> None:
    """Display error statistics collected during the run"""
    if not error_stats.get("total_errors"):
        return

    table = Table(title="Error Statistics")
    table.add_column("Category", style="cyan")
    table.add_column("Count", style="red", justify="right")
    for category, count in error_stats.get("errors_by_category", {}).items():
        table.add_row(str(category), str(count))
    _get_console(out).print(table)
