import pytest

from wireframe.support.strings import (
    atoi,
    itoa,
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi(" \t\n\v\f\r-42xyz") == -42


def test_atoi_plus_sign():
    assert atoi("+17") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0


def test_atoi_only_one_sign_allowed():
    assert atoi("+-5") == 0


def test_atoi_wraps_like_32_bit():
    assert atoi("2147483648") == -2147483648


def test_atoi_stops_at_nul():
    assert atoi("12\x0034") == atoi("12")


@pytest.mark.parametrize("value", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(value):
    assert atoi(itoa(value)) == value


def test_itoa_min_value():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("value", [2**31, -(2**31) - 1])
def test_itoa_out_of_range(value):
    with pytest.raises(OverflowError):
        itoa(value)


def test_strlen_stops_at_nul_and_handles_none():
    assert strlen("abc\0def") == strlen("abc")
    assert strlen("hello") == len("hello")
    assert strlen(None) == 0


def test_strchr_finds_first():
    text = "hello"
    index = strchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[:index]


def test_strchr_accepts_int_code_and_misses():
    text = "hello"
    assert strchr(text, ord("e")) == text.index("e")
    assert strchr(text, "z") is None
    assert strchr(None, "a") is None


def test_strchr_terminator():
    assert strchr("hello", "\0") == len("hello")


def test_strrchr_finds_last():
    text = "hello"
    index = strrchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[index + 1 :]
    assert strrchr(text, "\0") == len(text)
    assert strrchr(text, "q") is None


def test_strnstr_within_length():
    haystack = "lorem ipsum dolor"
    index = strnstr(haystack, "ipsum", len(haystack))
    assert haystack[index : index + len("ipsum")] == "ipsum"


def test_strnstr_needle_must_fit():
    haystack = "lorem ipsum"
    assert strnstr(haystack, "ipsum", len(haystack) - 1) is None
    assert strnstr(haystack, "ipsum", len(haystack)) == haystack.index("ipsum")


def test_strnstr_empty_needle_and_none():
    assert strnstr("abc", "", 0) == 0
    assert strnstr(None, "abc", 3) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strncmp_equal_and_limits():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_order_and_symmetry():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)


def test_strncmp_prefix():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strlcpy_truncates():
    result, length = strlcpy("xxxx", "hello", 3)
    assert result == "he"
    assert length == len("hello")


def test_strlcpy_full_copy_and_zero_size():
    assert strlcpy("", "hi", 10) == ("hi", len("hi"))
    assert strlcpy("keep", "hello", 0) == ("keep", len("hello"))


def test_strlcat_appends_within_size():
    result, length = strlcat("ab", "cdef", 5)
    assert result == "abcd"
    assert length == len("ab") + len("cdef")


def test_strlcat_full_buffer_untouched():
    result, length = strlcat("abcd", "xy", 3)
    assert result == "abcd"
    assert length == 3 + len("xy")


def test_strlcat_fits_whole():
    assert strlcat("ab", "cd", 10) == ("abcd", len("abcd"))


def test_strdup():
    assert strdup("copy") == "copy"
    assert strdup("ab\0cd") == "ab"
    assert strdup(None) is None