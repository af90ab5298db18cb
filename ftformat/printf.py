"""A small printf: ``%c %s %p %d %i %u %x %X %%``."""

from __future__ import annotations

import sys
from typing import Callable, Iterator, TextIO

from ftformat.conversions import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_str,
    format_unsigned,
)

_CONVERTERS: dict[str, Callable[[object], str]] = {
    "c": format_char,
    "s": format_str,
    "p": format_pointer,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
}


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for '%{spec}'") from None
        yield converter(value)


def render(fmt: str, *args: object) -> str:
    """Return the text produced by formatting ``args`` with ``fmt``.

    Unknown conversions produce nothing and consume no argument; a lone
    trailing ``%`` ends the output. Surplus arguments are ignored.
    """
    if fmt is None:
        raise ValueError("format string is required")
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: object, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)