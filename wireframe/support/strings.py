"""NUL-terminated string helpers working on Python strings.

A ``"\\0"`` inside a string ends it, as a terminator would, so every
function here only looks at the text before the first NUL.
"""

from __future__ import annotations

from itertools import takewhile

_WHITESPACE = " \t\n\v\f\r"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _cstr(text: str) -> str:
    """Return the part of ``text`` before its first NUL character."""
    return text.split("\0", 1)[0]


def _char(c: int | str) -> str:
    """Normalise a character given as a one-character string or an int code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _wrap32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace; 0 if there is none.

    The result wraps around like a signed 32-bit integer.
    """
    rest = _cstr(text).lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith(("+", "-")):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest))
    value = int(digits) if digits else 0
    return _wrap32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def strlen(text: str | None) -> int:
    """Length of the text up to its terminator; 0 for None."""
    if text is None:
        return 0
    return len(_cstr(text))


def strchr(text: str | None, c: int | str) -> int | None:
    """Index of the first ``c`` in ``text``, or None.

    Searching for ``"\\0"`` finds the terminator, at the text's length.
    """
    if text is None:
        return None
    body = _cstr(text)
    ch = _char(c)
    if ch == "\0":
        return len(body)
    index = body.find(ch)
    return index if index >= 0 else None


def strrchr(text: str | None, c: int | str) -> int | None:
    """Index of the last ``c`` in ``text``, or None.

    Searching for ``"\\0"`` finds the terminator, at the text's length.
    """
    if text is None:
        return None
    body = _cstr(text)
    ch = _char(c)
    if ch == "\0":
        return len(body)
    index = body.rfind(ch)
    return index if index >= 0 else None


def strnstr(haystack: str | None, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle matches at 0; a None haystack matches nothing.
    """
    if haystack is None:
        return None
    _check_size(length)
    wanted = _cstr(needle)
    if not wanted:
        return 0
    index = _cstr(haystack)[:length].find(wanted)
    return index if index >= 0 else None


def strncmp(first: str, second: str, size: int) -> int:
    """Compare at most ``size`` characters.

    Returns the difference of the character codes where the strings first
    differ or end, so the sign tells the order and 0 means equal.
    """
    _check_size(size)
    if size == 0:
        return 0
    a = _cstr(first) + "\0"
    b = _cstr(second) + "\0"
    for index, (ca, cb) in enumerate(zip(a, b)):
        if ca != cb or ca == "\0" or index == size - 1:
            return ord(ca) - ord(cb)
    return 0


def strlcpy(dest: str | None, src: str | None, size: int) -> tuple[str | None, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the new buffer contents and the full length of ``src``; with a
    size of 0 the buffer is left as it was.
    """
    if dest is None or src is None:
        return dest, 0
    _check_size(size)
    source = _cstr(src)
    if size == 0:
        return dest, len(source)
    return source[: size - 1], len(source)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` in a buffer of ``size`` characters.

    Returns the new buffer contents and the length the full result would
    have had. If ``dest`` already fills the buffer it is left untouched and
    the length reported is ``size`` plus the length of ``src``.
    """
    _check_size(size)
    current = _cstr(dest)
    source = _cstr(src)
    dest_len = min(len(current), size)
    if dest_len == size:
        return dest, size + len(source)
    room = size - 1 - dest_len
    return current + source[:room], dest_len + len(source)


def strdup(text: str | None) -> str | None:
    """Return a copy of the text up to its terminator; None stays None."""
    if text is None:
        return None
    return _cstr(text)