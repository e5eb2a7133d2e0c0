#!/usr/bin/env python3
"""
extrestore CLI Commands - List Signatures Command

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

from typing import Any

from ..display import display_signatures
from .base import Command


class ListSignaturesCommand(Command):
    """Print every signature of the active database."""

    def execute(self, args: dict[str, Any]) -> int:
        config = self._get_config(args.get("config"))
        database = self._load_database(config, args.get("database"))
        display_signatures(database, self.context.console)
        return 0
