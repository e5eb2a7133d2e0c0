from __future__ import annotations

import io
import logging
from pathlib import Path

from rich.console import Console

from extrestore.cli.commands import (
    Command,
    CommandContext,
    IdentifyCommand,
    ListSignaturesCommand,
    VersionCommand,
)
from extrestore.config import Config


class _DummyCommand(Command):
    def execute(self, args):
        return args.get("code", 0)


def _context(tmp_path: Path, **config_overrides) -> tuple[CommandContext, io.StringIO]:
    buffer = io.StringIO()
    config = Config(str(tmp_path / "config.json"))
    for section, settings in config_overrides.items():
        for key, value in settings.items():
            config.set(section, key, value)
    context = CommandContext(
        console=Console(file=buffer, width=200),
        logger=logging.getLogger("extrestore.test"),
        config=config,
    )
    return context, buffer


def test_command_context_create_uses_config(tmp_path: Path):
    config = Config(str(tmp_path / "config.json"))
    config.set("general", "verbose", True)
    context = CommandContext.create(config=config)
    assert context.config is config
    assert context.verbose is True
    assert context.quiet is False


def test_command_lazily_creates_context():
    command = _DummyCommand()
    assert isinstance(command.context, CommandContext)
    assert command.execute({"code": 3}) == 3


def test_get_config_prefers_explicit_path(tmp_path: Path):
    context, _ = _context(tmp_path)
    command = _DummyCommand(context)
    assert command._get_config() is context.config
    other = command._get_config(str(tmp_path / "other.json"))
    assert other.config_path == str(tmp_path / "other.json")


def test_load_database_from_config_path(tmp_path: Path, sample_db_file: Path):
    context, _ = _context(tmp_path, database={"path": str(sample_db_file)})
    command = _DummyCommand(context)
    database = command._load_database(context.config)
    assert len(database) == 5


def test_load_database_argument_overrides_config(tmp_path: Path, sample_db_file: Path):
    context, _ = _context(tmp_path, database={"path": str(tmp_path / "missing.db")})
    command = _DummyCommand(context)
    assert len(command._load_database(context.config, str(sample_db_file))) == 5


def test_build_identifier_uses_header_size(tmp_path: Path, sample_database):
    context, _ = _context(tmp_path, matching={"header_size": 16})
    identifier = _DummyCommand(context)._build_identifier(context.config, sample_database)
    assert identifier.header_size == 16
    assert identifier.database is sample_database


def test_identify_command_unique(tmp_path: Path, sample_db_file: Path):
    context, buffer = _context(tmp_path)
    target = tmp_path / "blob"
    target.write_bytes(bytes.fromhex("89504E47"))

    code = IdentifyCommand(context).execute({"filename": str(target), "database": str(sample_db_file)})

    assert code == 0
    assert "Detected file extension: .png" in buffer.getvalue()
    assert (tmp_path / "blob.png").exists()


def test_identify_command_empty_database_warns(tmp_path: Path):
    context, buffer = _context(tmp_path, database={"path": str(tmp_path / "none.db")})
    target = tmp_path / "blob"
    target.write_bytes(bytes.fromhex("89504E47"))

    assert IdentifyCommand(context).execute({"filename": str(target)}) == 0
    output = buffer.getvalue()
    assert "Signature database is empty" in output
    assert "Could not determine file type" in output


def test_identify_command_verbose_reports_errors(tmp_path: Path, sample_db_file: Path):
    context, buffer = _context(tmp_path)
    context.verbose = True
    target = tmp_path / "blob"
    target.write_bytes(bytes.fromhex("89504E47"))
    (tmp_path / "blob.png").write_bytes(b"taken")

    assert IdentifyCommand(context).execute({"filename": str(target), "database": str(sample_db_file)}) == 0
    output = buffer.getvalue()
    assert "Best match (4 bytes)" in output
    assert "could not rename file" in output
    assert "Error Statistics" in output
    assert "rename" in output


def test_list_signatures_command(tmp_path: Path, sample_db_file: Path):
    context, buffer = _context(tmp_path)
    assert ListSignaturesCommand(context).execute({"database": str(sample_db_file)}) == 0
    assert "504B030414000600" in buffer.getvalue()


def test_version_command(tmp_path: Path):
    context, buffer = _context(tmp_path)
    assert VersionCommand(context).execute({}) == 0
    assert "extrestore" in buffer.getvalue()
    assert "GPL-3.0" in buffer.getvalue()
