import pytest

from pushswap.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strjoin_tab,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  hello  world ", ["hello", "world"]),
        ("one", ["one"]),
        ("", []),
        ("    ", []),
        ("a b c", ["a", "b", "c"]),
    ],
)
def test_split_drops_empty_fields(text, expected):
    assert split(text, " ") == expected


def test_split_accepts_int_separator():
    assert split("x,y,,z", ord(",")) == ["x", "y", "z"]


def test_split_rejects_multichar_separator():
    with pytest.raises(ValueError):
        split("abc", "ab")


def test_strchr_finds_first():
    text = "banana"
    index = strchr(text, "a")
    assert index == text.index("a")
    assert text[index] == "a"


def test_strchr_missing_and_nul():
    assert strchr("banana", "z") is None
    assert strchr("banana", 0) == len("banana")


def test_strchr_truncates_int_to_byte():
    assert strchr("abc", ord("b") + 256) == 1


def test_strrchr_finds_last():
    text = "banana"
    assert strrchr(text, "a") == len(text) - 1
    assert strrchr(text, "n") == text.rindex("n")
    assert strrchr(text, "q") is None
    assert strrchr(text, "\0") == len(text)


def test_strncmp_equal_and_zero_length():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("abcdef", "abcxyz", 3) == 0


def test_strncmp_sign_and_difference():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")


def test_strncmp_shorter_string_ends_with_zero():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_negative_length():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strdup_copies():
    assert strdup("hello") == "hello"
    assert strdup("") == ""
    with pytest.raises(TypeError):
        strdup(None)


def test_striteri_in_place():
    chars = list("abc")
    striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert chars == ["A", "b", "C"]


def test_striteri_none_is_ignored():
    calls = []
    assert striteri(None, lambda i, ch: calls.append(i)) is None
    assert calls == []


def test_strjoin_variants():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) == "foo"
    assert strjoin(None, None) is None


def test_strjoin_tab_prefixes_separator():
    assert strjoin_tab(["1", "2", "3"], " ") == " 1 2 3"
    assert strjoin_tab(["only"], "-") == "-only"
    assert strjoin_tab([], " ") is None


def test_strjoin_tab_round_trips_through_split():
    parts = ["3", "-1", "42", "7"]
    assert split(strjoin_tab(parts, " "), " ") == parts


def test_strlcat_appends_within_room():
    dest, src = "foo", "bar"
    result, total = strlcat(dest, src, 100)
    assert result == dest + src
    assert total == len(dest) + len(src)


def test_strlcat_truncates():
    result, total = strlcat("foo", "barbaz", 6)
    assert result == "fooba"
    assert len(result) == 5
    assert total == len("foo") + len("barbaz")


def test_strlcat_size_not_larger_than_dest():
    result, total = strlcat("hello", "xy", 3)
    assert result == "hello"
    assert total == len("xy") + 3


def test_strlcpy():
    src = "abcdef"
    assert strlcpy(src, 100) == (src, len(src))
    assert strlcpy(src, 4) == ("abc", len(src))
    assert strlcpy(src, 0) == ("", len(src))
    with pytest.raises(ValueError):
        strlcpy(src, -1)


def test_strlen():
    assert strlen("") == 0
    assert strlen("push_swap") == len("push_swap")


def test_strmapi():
    assert strmapi("abc", lambda i, ch: ch.upper()) == "ABC"
    assert strmapi("aaa", lambda i, ch: str(i)) == "012"
    assert strmapi(None, lambda i, ch: ch) is None


@pytest.mark.parametrize(
    "haystack, needle, length, expected",
    [
        ("lorem ipsum", "", 0, 0),
        ("lorem ipsum", "ipsum", 100, 6),
        ("lorem ipsum", "ipsum", 11, 6),
        ("lorem ipsum", "ipsum", 10, None),
        ("lorem ipsum", "lorem", 0, None),
        ("lorem ipsum", "dolor", 100, None),
        ("ab", "abc", 2, None),
    ],
)
def test_strnstr(haystack, needle, length, expected):
    assert strnstr(haystack, needle, length) == expected


def test_strnstr_result_is_a_match():
    haystack, needle = "aaabaaab", "ab"
    index = strnstr(haystack, needle, len(haystack))
    assert haystack[index : index + len(needle)] == needle


def test_strtrim():
    assert strtrim("xxhelloxx", "x") == "hello"
    assert strtrim("  \t  ", " \t") == ""
    assert strtrim("", "x") == ""
    assert strtrim(" keep ", "") == " keep "
    assert strtrim("abcba", "ab") == "c"


def test_substr():
    text = "hello world"
    assert substr(text, 6, 5) == "world"
    assert substr(text, 6, 100) == "world"
    assert substr(text, 100, 3) == ""
    assert substr(text, 0, 0) == ""
    with pytest.raises(ValueError):
        substr(text, -1, 2)


def test_substr_length_bound():
    text = "abcdefgh"
    for start in range(len(text)):
        piece = substr(text, start, 3)
        assert len(piece) <= 3
        assert text.startswith(piece, start)