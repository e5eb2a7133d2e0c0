#!/usr/bin/env python3
"""
extrestore CLI Input Validation Module

Validation of command line arguments before any identification runs.

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

from pathlib import Path

from .display import error_console

USAGE = "Usage: extrestore [OPTIONS] FILENAME"


def validate_inputs(
    filename: str | None,
    config: str | None,
    database: str | None,
) -> list[str]:
    """
    Validate all user inputs.

    Args:
        filename: File to identify
        config: Config file path
        database: Signature database path

    Returns:
        List of validation error messages (empty if all valid)
    """
    errors: list[str] = []

    errors.extend(validate_file_input(filename))
    errors.extend(validate_config_input(config))
    errors.extend(validate_database_input(database))

    return errors


def validate_file_input(filename: str | None) -> list[str]:
    """
    Validate file input parameter.

    A missing file is not rejected here: the identifier reports it as an
    undetermined type. Directories are rejected since they can never be renamed
    to a file type.
    """
    errors: list[str] = []
    if filename:
        if "\x00" in filename:
            errors.append("File path contains a null byte")
        elif _is_dir(filename):
            errors.append(f"Path is a directory, not a file: {filename}")
    return errors


def _is_dir(filename: str) -> bool:
    # Names the OS rejects (e.g. too long) are left for the identifier to report
    try:
        return Path(filename).is_dir()
    except OSError:
        return False


def validate_config_input(config: str | None) -> list[str]:
    """
    Validate config file input.

    Args:
        config: Config file path

    Returns:
        List of validation error messages (empty if valid)
    """
    errors: list[str] = []
    if config:
        config_path = Path(config)
        if not config_path.exists():
            errors.append(f"Config file does not exist: {config}")
        elif not config_path.is_file():
            errors.append(f"Config path is not a file: {config}")
        elif config_path.suffix.lower() != ".json":
            errors.append(f"Config file must be JSON: {config}")
    return errors


def validate_database_input(database: str | None) -> list[str]:
    errors: list[str] = []
    if database:
        database_path = Path(database)
        if not database_path.exists():
            errors.append(f"Signature database does not exist: {database}")
        elif not database_path.is_file():
            errors.append(f"Signature database is not a file: {database}")
    return errors


def validate_input_mode(filename: str | None) -> bool:
    """
    Check that a file to identify was given.

    Prints the error and usage line when it was not.
    """
    if not filename:
        error_console.print("[red]Error: No file path given.[/red]")
        error_console.print(USAGE, markup=False)
        return False
    return True
