import pytest

import cupidconf.matching as cpd_match


@pytest.mark.matching
@pytest.mark.parametrize(
    "pattern,candidate,expected",
    [
        ("foo", "foo", True),
        ("foo", "foobar", False),
        ("foo", "Foo", False),
        ("foo*", "foobar", True),
        ("*bar", "foobar", True),
        ("*", "", True),
        ("*", "any/path/at/all", True),
        ("?", "a", True),
        ("?", "", False),
        ("?", "ab", False),
        ("a?c", "abc", True),
        ("a*b*c", "axxbyyc", True),
        ("", "", True),
        ("", "a", False),
        ("*.txt", "readme.txt", True),
        ("*.txt", "notes.md", False),
        ("build_*", "build_output", True),
        ("[abc]x", "bx", True),
        ("[!abc]x", "bx", False),
        ("[", "[", True),
    ],
)
def test_match_wildcard(pattern: str, candidate: str, expected: bool):
    assert cpd_match.match_wildcard(pattern, candidate) == expected


@pytest.mark.matching
def test_match_wildcard_none():
    assert not cpd_match.match_wildcard(None, "foo")
    assert not cpd_match.match_wildcard("*", None)
    assert not cpd_match.match_wildcard(None, None)


@pytest.mark.matching
@pytest.mark.parametrize(
    "text,expected",
    [
        ("plain_key", False),
        ("", False),
        (None, False),
        ("ignor*", True),
        ("file?", True),
        ("[ab]", True),
    ],
)
def test_has_wildcard(text: str, expected: bool):
    assert cpd_match.has_wildcard(text) == expected
