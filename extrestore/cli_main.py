#!/usr/bin/env python3
"""
extrestore CLI - Command Line Interface

Click-based entry point. Execution logic lives in the command classes of
extrestore.cli.commands.

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
from dataclasses import dataclass
from typing import Any

import click

from .cli.commands import (
    Command,
    CommandContext,
    IdentifyCommand,
    ListSignaturesCommand,
    VersionCommand,
)
from .cli.display import console, display_validation_errors, print_banner
from .cli.validators import validate_input_mode, validate_inputs
from .config import Config


@dataclass
class CLIArgs:
    filename: str | None
    database: str | None
    config: str | None
    no_rename: bool
    output_json: bool
    verbose: bool
    quiet: bool
    list_signatures: bool
    version: bool


def main(**kwargs: Any):
    """Build CLIArgs and run the workflow, turning interrupts into exit code 1."""
    args = CLIArgs(**kwargs)
    try:
        run_cli(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(1)


@click.command()
@click.argument("filename", type=click.Path(), required=False)
@click.option("--database", "-d", type=click.Path(), help="Signature database to use instead of the bundled one")
@click.option("--config", help="Custom config file path (JSON)")
@click.option("-n", "--no-rename", is_flag=True, help="Only report the detected type, never rename")
@click.option("-j", "--json", "output_json", is_flag=True, help="Print the result as JSON (implies --no-rename)")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--quiet", is_flag=True, help="Only log errors")
@click.option("--list-signatures", is_flag=True, help="List the loaded signatures and exit")
@click.option("--version", is_flag=True, help="Show version information and exit")
def cli(**kwargs: Any):
    """Identify FILENAME by its magic number and restore its extension."""
    main(**kwargs)


def run_cli(args: CLIArgs) -> None:
    """Primary CLI workflow separated for clarity and testability."""
    if args.version:
        sys.exit(VersionCommand().execute({}))

    validation_errors = validate_inputs(args.filename, args.config, args.database)
    if validation_errors:
        display_validation_errors(validation_errors)
        sys.exit(1)

    context = _build_context(args)

    if args.list_signatures:
        sys.exit(
            ListSignaturesCommand(context).execute(
                {"config": args.config, "database": args.database}
            )
        )

    if not validate_input_mode(args.filename):
        sys.exit(1)

    if not args.output_json and not args.quiet:
        print_banner(context.console)

    _dispatch_command(context, args)


def _build_context(args: CLIArgs) -> CommandContext:
    """Construct a CommandContext honouring --config, --verbose and --quiet."""
    config = Config(args.config) if args.config else None
    return CommandContext.create(config=config, verbose=args.verbose, quiet=args.quiet)


def _dispatch_command(context: CommandContext, args: CLIArgs) -> None:
    command: Command = IdentifyCommand(context)
    exit_code = command.execute(
        {
            "filename": args.filename,
            "database": args.database,
            "no_rename": args.no_rename,
            "output_json": args.output_json,
        }
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
