from __future__ import annotations

import io

from rich.console import Console

from extrestore.cli.interactive import choose_extension


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=120), buffer


def _reader(*answers):
    pending = list(answers)

    def read(_prompt: str) -> str:
        if not pending:
            raise EOFError
        answer = pending.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    return read


def test_choose_extension_valid_choice():
    console, buffer = _console()
    assert choose_extension(["jpg", "jpeg"], console, _reader("2")) == "jpeg"
    output = buffer.getvalue()
    assert "1: .jpg" in output
    assert "2: .jpeg" in output


def test_choose_extension_reprompts_on_bad_input():
    console, buffer = _console()
    assert choose_extension(["jpg", "jpeg"], console, _reader("abc", "7", "0", " 1 ")) == "jpg"
    output = buffer.getvalue()
    assert "not a number" in output
    assert output.count("invalid number") == 2
    assert "Ctrl+D" in output


def test_choose_extension_eof_cancels():
    console, buffer = _console()
    assert choose_extension(["jpg", "jpeg"], console, _reader()) is None
    assert "Input cancelled" in buffer.getvalue()


def test_choose_extension_keyboard_interrupt_cancels():
    console, buffer = _console()
    assert choose_extension(["a", "b"], console, _reader(KeyboardInterrupt())) is None
    assert "Input cancelled" in buffer.getvalue()
