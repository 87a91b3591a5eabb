"""Building new strings from existing ones: split, slice, join, trim and map."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _cstr(text: str) -> str:
    """Return the part of ``text`` before its first NUL character."""
    return text.split("\0", 1)[0]


def _separator(sep: int | str) -> str:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single separator character, got {sep!r}")
        return sep
    return chr(sep & 0xFF)


def split(text: str, sep: int | str) -> list[str]:
    """Split ``text`` at every ``sep``, dropping the empty pieces."""
    separator = _separator(sep)
    body = _cstr(text)
    if separator == "\0":
        return [body] if body else []
    return [piece for piece in body.split(separator) if piece]


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    body = _cstr(text)
    if start >= len(body):
        return ""
    return body[start : start + length]


def strjoin(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings.

    A missing first string gives None; a missing second string gives a
    copy of the first.
    """
    if first is None:
        return None
    if second is None:
        return _cstr(first)
    return _cstr(first) + _cstr(second)


def strtrim(text: str | None, charset: str | None) -> str:
    """Strip every character found in ``charset`` from both ends of ``text``.

    A missing text or character set gives an empty string.
    """
    if text is None or charset is None:
        return ""
    return _cstr(text).strip(_cstr(charset))


def strmapi(text: str, func: Callable[[int, str], str] | None) -> str:
    """Build a new string from ``func(index, char)`` for every character.

    A NUL returned by ``func`` ends the result there.
    """
    body = _cstr(text)
    if not body or func is None:
        return ""
    return _cstr("".join(func(index, ch) for index, ch in enumerate(body)))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` on each character up to a NUL, in place.

    Whatever ``func`` returns other than None replaces that character.
    """
    for index, ch in enumerate(chars):
        if ch == "\0":
            break
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement