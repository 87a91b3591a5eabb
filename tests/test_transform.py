import pytest

from wireframe.support.transform import (
    split,
    strjoin,
    striteri,
    strmapi,
    strtrim,
    substr,
)


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_without_separator_returns_whole_text():
    assert split("abc", ",") == ["abc"]


@pytest.mark.parametrize("text", ["", "    ", ",,,"])
def test_split_of_empty_or_separators_only(text):
    assert split(text, text[:1] or " ") == []


@pytest.mark.parametrize("text", ["a,b,,c", ",lead,trail,", "one", ",,x,,y"])
def test_split_pieces_hold_no_separator_and_rejoin(text):
    pieces = split(text, ",")
    assert all(piece and "," not in piece for piece in pieces)
    assert ",".join(pieces) == ",".join(p for p in text.split(",") if p)


def test_split_accepts_integer_separator():
    assert split("a b c", ord(" ")) == ["a", "b", "c"]


def test_split_stops_at_nul():
    assert split("a b\0c d", " ") == ["a", "b"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a, b", ", ")


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_clipped_at_end():
    assert substr("hello", 3, 100) == "lo"


@pytest.mark.parametrize("start", [5, 6, 50])
def test_substr_past_end_is_empty(start):
    assert substr("hello", start, 2) == ""


def test_substr_rejects_negative_values():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(ValueError):
        substr("hello", 0, -2)


@pytest.mark.parametrize("first,second", [("ab", "cd"), ("", "x"), ("x", ""), ("", "")])
def test_strjoin_concatenates(first, second):
    joined = strjoin(first, second)
    assert len(joined) == len(first) + len(second)
    assert joined.startswith(first)
    assert joined.endswith(second)


def test_strjoin_missing_first_is_none():
    assert strjoin(None, "x") is None


def test_strjoin_missing_second_copies_first():
    assert strjoin("ab", None) == "ab"


@pytest.mark.parametrize("text", ["xxhixx", "xyhi there yx", "hi", "yyxhix"])
def test_strtrim_leaves_no_set_chars_at_ends(text):
    result = strtrim(text, "xy")
    assert result in text
    assert result[:1] not in ("x", "y")
    assert result[-1:] not in ("x", "y")
    assert "hi" in result


def test_strtrim_all_set_chars_gives_empty():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_missing_arguments_give_empty():
    assert strtrim(None, "x") == ""
    assert strtrim("abc", None) == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  abc ", "") == "  abc "


def test_strmapi_round_trip():
    text = "wireframe"
    upper = strmapi(text, lambda i, c: c.upper())
    assert upper == text.upper()
    assert strmapi(upper, lambda i, c: c.lower()) == text


def test_strmapi_passes_indices():
    assert strmapi("aaa", lambda i, c: str(i)) == "012"


def test_strmapi_empty_or_missing_function():
    assert strmapi("", lambda i, c: c) == ""
    assert strmapi("abc", None) == ""


def test_strmapi_nul_result_ends_string():
    assert strmapi("abcd", lambda i, c: "\0" if i == 2 else c) == "ab"


def test_striteri_replaces_in_place():
    chars = list("abc")
    striteri(chars, lambda i, c: c.upper())
    assert "".join(chars) == "abc".upper()


def test_striteri_none_keeps_character():
    chars = list("abcd")
    striteri(chars, lambda i, c: c.upper() if i % 2 else None)
    assert chars[0] == "a"
    assert chars[1] == "B"


def test_striteri_stops_at_nul():
    chars = ["a", "\0", "b"]
    seen = []
    striteri(chars, lambda i, c: seen.append(i))
    assert seen == [0]
    assert chars[2] == "b"