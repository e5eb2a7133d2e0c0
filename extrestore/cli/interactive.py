#!/usr/bin/env python3
"""
extrestore CLI Interactive Mode Module

Lets the user pick one extension when several signatures tie.

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

from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from .display import console as default_console

CANCEL_HINT = "Press Ctrl+D to cancel"


def _parse_choice(raw: str, count: int) -> tuple[int | None, str | None]:
    """Return (index, error) for one line of user input."""
    try:
        choice = int(raw.strip())
    except ValueError:
        return None, "Error: not a number"
    if choice < 1 or choice > count:
        return None, "Error: invalid number"
    return choice - 1, None


def choose_extension(
    extensions: list[str],
    console: Console | None = None,
    input_func: Callable[[str], str] | None = None,
) -> str | None:
    """
    Ask the user to pick one of several candidate extensions.

    Re-prompts until a valid 1-based number is entered.

    Args:
        extensions: Candidate extensions (at least two)
        console: Console to print to
        input_func: Line reader, defaults to ``console.input``

    Returns:
        The chosen extension, or None if input was cancelled (EOF or Ctrl+C)
    """
    out = console or default_console
    read = input_func or out.input

    out.print("[bold]Several extensions match:[/bold]")
    for number, extension in enumerate(extensions, start=1):
        out.print(f"  {number}: .{escape(extension)}")

    prompt = f"Number (1-{len(extensions)}): "
    while True:
        try:
            raw = read(prompt)
        except (EOFError, KeyboardInterrupt):
            out.print("\n[yellow]Input cancelled[/yellow]")
            return None

        index, error = _parse_choice(raw, len(extensions))
        if index is not None:
            return extensions[index]

        out.print(f"[red]{error}[/red]")
        out.print(CANCEL_HINT)
