"""Formatted output with a small printf and the number/text writers behind it.

Every writer takes an optional text ``stream`` (standard output by default)
and returns the number of characters it wrote.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_NULL_TEXT = "(null)"
_NIL_TEXT = "(nil)"
_INT_MIN = -(2**31)
_UINT32 = 2**32
_UINT64 = 2**64


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _write(text: str, stream: Optional[TextIO]) -> int:
    _stream(stream).write(text)
    return len(text)


def _as_int(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"expected an int, got {type(value).__name__}") from None


def _to_int32(value: int) -> int:
    return (value - _INT_MIN) % _UINT32 + _INT_MIN


def _digits(n: int, base: int, upper: bool) -> str:
    """Return the digits of a non-negative ``n`` in ``base`` (2 to 16)."""
    n = _as_int(n)
    base = _as_int(base)
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    if n < 0:
        raise ValueError(f"number must not be negative: {n}")
    table = _UPPER_DIGITS if upper else _LOWER_DIGITS
    out = []
    while True:
        n, remainder = divmod(n, base)
        out.append(table[remainder])
        if n == 0:
            break
    return "".join(reversed(out))


def _char_text(c: Any) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_as_int(c) % 256)


def _address_text(address: Any) -> str:
    """Render an address as ``0x`` and lower-case hex, or ``(nil)`` for none.

    An int is taken as the address itself; any other object stands for its
    identity.
    """
    if address is None:
        return _NIL_TEXT
    if isinstance(address, int) and not isinstance(address, bool):
        value = address % _UINT64
    else:
        value = id(address) % _UINT64
    if value == 0:
        return _NIL_TEXT
    return "0x" + _digits(value, 16, False)


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    value = _next_arg(values, spec)
    if spec == "c":
        return _char_text(value)
    if spec == "s":
        if value is None:
            return _NULL_TEXT
        if not isinstance(value, str):
            raise TypeError(f"%s expects a str, got {type(value).__name__}")
        return value
    if spec == "p":
        return _address_text(value)
    if spec in "di":
        return str(_to_int32(_as_int(value)))
    if spec == "u":
        return str(_as_int(value) % _UINT32)
    return _digits(_as_int(value) % _UINT32, 16, spec == "X")


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the text.

    Supported conversions are ``%c %s %p %d %i %u %x %X %%``. Integers are
    taken as 32-bit values; ``%u``, ``%x`` and ``%X`` show them unsigned. An
    unknown conversion writes nothing and uses no argument, and a lone ``%``
    at the end is dropped. Missing arguments raise TypeError; extra ones are
    ignored.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    values = iter(args)
    chars = iter(fmt)
    parts = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write ``format_printf(fmt, *args)`` to ``stream`` and return its length."""
    return _write(format_printf(fmt, *args), stream)


def put_char(c: Any, stream: Optional[TextIO] = None) -> int:
    """Write one character (a one-character str or a character code)."""
    return _write(_char_text(c), stream)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``text``; ``None`` is written as ``(null)``."""
    return _write(_NULL_TEXT if text is None else text, stream)


def put_endl(text: str, stream: Optional[TextIO] = None) -> int:
    """Write ``text`` followed by a newline."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    return _write(text + "\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write a signed 32-bit integer in decimal."""
    return _write(str(_to_int32(_as_int(n))), stream)


def put_unsigned(n: int, stream: Optional[TextIO] = None) -> int:
    """Write an integer as an unsigned 32-bit value in decimal."""
    return _write(str(_as_int(n) % _UINT32), stream)


def put_nbr_base(
    n: int, base: int, upper: bool = False, stream: Optional[TextIO] = None
) -> int:
    """Write a non-negative integer in ``base`` (2 to 16)."""
    return _write(_digits(n, base, upper), stream)


def write_address(address: Any, stream: Optional[TextIO] = None) -> int:
    """Write an address as ``0x`` and hex digits, or ``(nil)`` for none."""
    return _write(_address_text(address), stream)