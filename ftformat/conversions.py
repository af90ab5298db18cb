"""Text for each conversion that the formatter supports.

Integers follow C fixed-width semantics: signed and unsigned conversions
wrap to 32 bits and addresses wrap to 64 bits, so out-of-range values
render the way the corresponding machine value would.
"""

from __future__ import annotations

import operator

_INT_BITS = 32
_ADDRESS_BITS = 64
_UINT_MASK = (1 << _INT_BITS) - 1
_ADDRESS_MASK = (1 << _ADDRESS_BITS) - 1

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"
POINTER_PREFIX = "0x"


def _as_int(value: object) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"expected an integer, got {type(value).__name__}"
        ) from None


def _to_int32(value: object) -> int:
    unsigned = _as_int(value) & _UINT_MASK
    return unsigned - (1 << _INT_BITS) if unsigned >> (_INT_BITS - 1) else unsigned


def format_char(c: str | int) -> str:
    """Render a single character.

    A one-character string is returned unchanged; an integer is truncated
    to one byte, as a C ``char`` would be.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    return chr(_as_int(c) & 0xFF)


def format_str(s: str | None) -> str:
    """Render a string, with ``None`` shown as ``(null)``."""
    if s is None:
        return NULL_STRING
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return s


def format_int(n: int) -> str:
    """Render a signed 32-bit decimal integer."""
    return str(_to_int32(n))


def format_unsigned(n: int) -> str:
    """Render an unsigned 32-bit decimal integer."""
    return str(_as_int(n) & _UINT_MASK)


def format_hex(n: int, uppercase: bool = False) -> str:
    """Render an unsigned 32-bit integer in hexadecimal without a prefix."""
    text = format(_as_int(n) & _UINT_MASK, "x")
    return text.upper() if uppercase else text


def format_pointer(address: int | None) -> str:
    """Render an address as ``0x`` followed by lowercase hex, or ``(nil)``."""
    if address is None:
        return NULL_POINTER
    value = _as_int(address) & _ADDRESS_MASK
    if not value:
        return NULL_POINTER
    return POINTER_PREFIX + format(value, "x")