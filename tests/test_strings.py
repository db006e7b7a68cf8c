import pytest

from solong import strings


def test_split_example_from_source():
    assert strings.split("  tripouille  42  ", " ") == ["tripouille", "42"]


def test_split_map_lines_drop_empty_pieces():
    content = "11111\n1P0C1\n\n1E001\n11111\n"
    pieces = strings.split(content, "\n")
    assert pieces == ["11111", "1P0C1", "1E001", "11111"]
    assert all(pieces)


def test_split_only_separators_is_empty():
    assert strings.split("\n\n\n", "\n") == []
    assert strings.split("", "\n") == []


def test_split_join_round_trip():
    parts = ["abc", "de", "f"]
    assert strings.split(",".join(parts), ",") == parts


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        strings.split("a,b", ",,")


def test_strchr_finds_first():
    text = "Voici une string"
    assert strings.strchr(text, "i") == text.find("i")
    assert strings.strchr(text, ord("t")) == text.find("t")


def test_strchr_nul_finds_terminator():
    text = "hello"
    assert strings.strchr(text, 0) == len(text)
    assert strings.strchr(text, "\0") == len(text)


def test_strchr_missing_and_high_codes():
    assert strings.strchr("Voici une string", "z") is None
    assert strings.strchr("Voici une string", ord("t") + 128) is None


def test_strrchr_finds_last_and_wraps_codes():
    text = "tripouille"
    assert strings.strrchr(text, "l") == text.rfind("l")
    assert strings.strrchr(text, ord("t") + 256) == text.rfind("t")
    assert strings.strrchr(text, "z") is None
    assert strings.strrchr(text, 0) == len(text)


def test_strrchr_rejects_bad_argument():
    with pytest.raises(ValueError):
        strings.strrchr("abc", "ab")
    with pytest.raises(TypeError):
        strings.strrchr("abc", 1.5)


def test_strdup_copies_equal_text():
    assert strings.strdup("duplicate") == "duplicate"
    with pytest.raises(TypeError):
        strings.strdup(None)


def test_striteri_visits_every_index_in_order():
    seen = []
    result = strings.striteri("Welcome", lambda i, c: seen.append((i, c)))
    assert seen == list(enumerate("Welcome"))
    assert result == "Welcome"


def test_striteri_applies_replacements():
    result = strings.striteri("abcd", lambda i, c: c.upper() if i % 2 == 0 else None)
    assert result == "AbCd"


def test_strmapi_identity_and_length():
    text = "Welcome to 42 school"
    assert strings.strmapi(text, lambda i, c: c) == text
    assert len(strings.strmapi(text, lambda i, c: "x")) == len(text)


def test_strjoin_concatenates():
    joined = strings.strjoin("1ere chaine", "2eme chaine")
    assert joined.startswith("1ere chaine")
    assert joined.endswith("2eme chaine")
    assert len(joined) == len("1ere chaine") + len("2eme chaine")


def test_strlcpy_truncates_to_size_minus_one():
    dest, length = strings.strlcpy("coucou", "abcdef", 4)
    assert dest == "abcdef"[:3]
    assert length == len("abcdef")


def test_strlcpy_size_zero_and_one():
    assert strings.strlcpy("coucou", "p", 0) == ("coucou", 1)
    assert strings.strlcpy("coucou", "p", 1) == ("", 1)


def test_strlcpy_rejects_negative_size():
    with pytest.raises(ValueError):
        strings.strlcpy("", "abc", -1)


def test_strlcat_example_from_source():
    dest, length = strings.strlcat("erfersgerg", "qwPDKQPDKE", 20)
    assert dest == "erfersgerg" + "qwPDKQPDK"
    assert len(dest) == 19
    assert length == len("erfersgerg") + len("qwPDKQPDKE")


def test_strlcat_small_size_appends_nothing():
    dest, length = strings.strlcat("abcdef", "xyz", 3)
    assert dest == "abcdef"
    assert length == 3 + len("xyz")


def test_strlen_counts_characters():
    assert strings.strlen("") == 0
    assert strings.strlen("so_long") == len("so_long")


def test_strncmp_example_from_source():
    assert strings.strncmp("test\x80", "test\0", 6) == 128


def test_strncmp_equal_prefix_and_zero_length():
    assert strings.strncmp("abcdef", "abcxyz", 3) == 0
    assert strings.strncmp("abc", "xyz", 0) == 0
    assert strings.strncmp("same", "same", 10) == 0


def test_strncmp_sign_follows_order():
    assert strings.strncmp("abc", "abd", 3) < 0
    assert strings.strncmp("abd", "abc", 3) > 0
    assert strings.strncmp("ab", "abc", 5) < 0


def test_strncmp_file_extension_check():
    assert strings.strncmp(".ber", ".ber", len(".ber")) == 0
    assert strings.strncmp(".txt", ".ber", len(".txt")) != 0


def test_strnstr_found_within_limit():
    haystack = "lorem ipsum dolor"
    assert strings.strnstr(haystack, "ipsum", len(haystack)) == haystack.find("ipsum")


def test_strnstr_needle_past_limit_is_not_found():
    haystack = "lorem ipsum dolor"
    limit = haystack.find("ipsum") + len("ipsum") - 1
    assert strings.strnstr(haystack, "ipsum", limit) is None
    assert strings.strnstr(haystack, "ipsum", limit + 1) == haystack.find("ipsum")


def test_strnstr_empty_needle():
    assert strings.strnstr("", "", 0) == 0
    assert strings.strnstr("abc", "", 0) == 0


def test_strtrim_example_from_source():
    assert strings.strtrim(" lorem ipsum dolor sit amet", "l ") == "orem ipsum dolor sit amet"


def test_strtrim_everything_trimmed_and_empty_set():
    assert strings.strtrim("  ??  ", " ?") == ""
    assert strings.strtrim("  Que faites vous ?  ", "") == "  Que faites vous ?  "


def test_substr_within_and_beyond():
    text = "Prenons exemple sur lui"
    assert strings.substr(text, 1, 1) == text[1]
    assert strings.substr(text, 8, 100) == text[8:]
    assert strings.substr(text, len(text) + 5, 3) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        strings.substr("abc", -1, 2)
    with pytest.raises(ValueError):
        strings.substr("abc", 0, -2)