import pytest

from cub3d.libft.strings import (
    split,
    strchr,
    strcmp,
    striteri,
    strjoin,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_source_example():
    assert split("abcd e f ghij ", " ") == ["abcd", "e", "f", "ghij"]


@pytest.mark.parametrize("text", ["  a  b c ", "abc", ",,x,,y", "", "   "])
@pytest.mark.parametrize("sep", [" ", ","])
def test_split_pieces_are_nonempty_and_rejoin(text, sep):
    pieces = split(text, sep)
    assert all(piece and sep not in piece for piece in pieces)
    assert "".join(pieces) == text.replace(sep, "")


def test_split_only_separators_gives_nothing():
    assert split(",,,", ",") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


@pytest.mark.parametrize(
    "text, charset",
    [("lorem \n ipsum \t dolor \n sit \t amet", " l"), ("xxhixx", "x"), ("  a b  ", " ")],
)
def test_strtrim_invariants(text, charset):
    result = strtrim(text, charset)
    assert result in text
    assert result == "" or (result[0] not in charset and result[-1] not in charset)


def test_strtrim_everything_in_set():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_text():
    text = " keep "
    assert strtrim(text, "") == text


def test_substr_round_trip():
    text = "abcdefghijk"
    assert strjoin(substr(text, 0, 3), substr(text, 3, len(text))) == text
    assert len(substr(text, 3, 3)) == 3


def test_substr_clips_length():
    text = "abc"
    result = substr(text, 1, 100)
    assert len(result) == 2
    assert text.endswith(result)


def test_substr_start_past_end():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 10, 2) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_source_example():
    joined = strjoin("Hello ", "world")
    assert joined.startswith("Hello ")
    assert joined.endswith("world")
    assert len(joined) == len("Hello ") + len("world")


def test_strnstr_finds_within_limit():
    big = "abcdef"
    index = strnstr(big, "cd", 5)
    assert big[index : index + 2] == "cd"
    assert index + 2 <= 5


def test_strnstr_match_crossing_limit():
    assert strnstr("abcdef", "cd", 3) is None


def test_strnstr_empty_needle():
    assert strnstr("abcdef", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abcdef", "xy", 6) is None


def test_strchr_source_example():
    text = "abcde"
    index = strchr(text, "d")
    assert text[index] == "d"
    assert "d" not in text[:index]


def test_strchr_terminator_and_missing():
    assert strchr("abcde", "\0") == len("abcde")
    assert strchr("abcde", "z") is None


def test_strrchr_source_example():
    text = "abbcd"
    index = strrchr(text, "b")
    assert text[index] == "b"
    assert "b" not in text[index + 1 :]


def test_strrchr_terminator_and_missing():
    assert strrchr("abbcd", "\0") == len("abbcd")
    assert strrchr("abbcd", "z") is None


def test_strchr_rejects_bad_character():
    with pytest.raises(ValueError):
        strchr("abc", "")


def test_strncmp_equal_and_zero_count():
    assert strncmp("abcde", "abcde", 5) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_ordering_and_antisymmetry():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) == -strncmp("abc", "abd", 3)
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_shorter_string_is_smaller():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_rejects_negative():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strcmp():
    assert strcmp("same", "same") == 0
    assert strcmp("a", "b") == ord("a") - ord("b")
    assert strcmp("abc", "ab") > 0


def test_strmapi_passes_indices_in_order():
    calls = []

    def record(index, char):
        calls.append((index, char))
        return char.upper()

    text = "abcdef"
    assert strmapi(text, record) == text.upper()
    assert calls == list(enumerate(text))


def test_striteri_modifies_in_place():
    chars = list("abc")
    seen = []

    def upper(index, char):
        seen.append(index)
        return char.upper()

    result = striteri(chars, upper)
    assert result is chars
    assert "".join(chars) == "abc".upper()
    assert seen == [0, 1, 2]


def test_striteri_none_keeps_character():
    chars = list("xyz")
    striteri(chars, lambda index, char: None)
    assert chars == list("xyz")