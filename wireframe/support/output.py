"""Writing characters, strings and numbers, and a small printf."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_INT_MAX = 2**31 - 1


def _cstr(text: str) -> str:
    """Return the part of ``text`` before its first NUL character."""
    return text.split("\0", 1)[0]


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def put_char(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character."""
    _stream(stream).write(_char(c))


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write a string up to its terminator; None writes nothing."""
    if text is None:
        return
    _stream(stream).write(_cstr(text))


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    _stream(stream).write(_cstr(text) + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _stream(stream).write(str(operator.index(n)))


def _signed32(value: Any) -> int:
    value = operator.index(value) & 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def _unsigned32(value: Any) -> int:
    return operator.index(value) & 0xFFFFFFFF


def _fmt_char(arg: Any) -> str:
    return _char(arg)


def _fmt_str(arg: Any) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s expects a str or None, got {type(arg).__name__}")
    return _cstr(arg)


def _fmt_int(arg: Any) -> str:
    return str(_signed32(arg))


def _fmt_pointer(arg: Any) -> str:
    if arg is None:
        address = 0
    elif isinstance(arg, int):
        address = arg & 0xFFFFFFFFFFFFFFFF
    else:
        address = id(arg)
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _fmt_char,
    "s": _fmt_str,
    "d": _fmt_int,
    "i": _fmt_int,
    "p": _fmt_pointer,
    "u": lambda arg: str(_unsigned32(arg)),
    "x": lambda arg: f"{_unsigned32(arg):x}",
    "X": lambda arg: f"{_unsigned32(arg):X}",
}


def format_printf(fmt: str, *args: Any) -> str:
    """Expand the conversions ``%c %s %d %i %p %u %x %X %%`` in ``fmt``.

    Unknown conversions produce nothing and take no argument; a lone ``%``
    at the end is dropped. Too few arguments raise TypeError.
    """
    pending: Iterator[Any] = iter(args)
    chars = iter(_cstr(fmt))
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            arg = next(pending)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        out.append(convert(arg))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)