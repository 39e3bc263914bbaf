"""Console input and output of runtime values."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from .conversions import to_str


def print_value(value: Any, stream: Optional[TextIO] = None) -> None:
    """Write a value's text followed by a newline."""
    out = sys.stdout if stream is None else stream
    out.write(to_str(value) + "\n")


def printf_value(value: Any, stream: Optional[TextIO] = None) -> None:
    """Write a value's text without a trailing newline."""
    out = sys.stdout if stream is None else stream
    out.write(to_str(value))


def read_input(
    prompt: str = "",
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> str:
    """Show ``prompt`` on its own line if given, then read one line of input.

    The line is returned without its newline; at end of input the result is
    an empty string.
    """
    source = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    if prompt:
        out.write(prompt + "\n")
        out.flush()
    line = source.readline()
    if line.endswith("\n"):
        line = line[:-1]
    return line