import pytest

from minihell.textutils import (
    compare,
    count_char,
    invalid_first_char,
    is_valid_identifier,
    squeeze_spaces,
    trim_leading_spaces,
)


def test_trim_leading_spaces_keeps_trailing():
    assert trim_leading_spaces("   ls -l ") == "ls -l "


def test_trim_leading_spaces_without_spaces_is_identity():
    assert trim_leading_spaces("echo") == "echo"


def test_squeeze_spaces_truncates_to_three():
    assert squeeze_spaces("abcdef") == "abc"


@pytest.mark.parametrize("text", ["", "x y z w", "  ab", "abc def"])
def test_squeeze_spaces_result_is_short_and_spaceless(text):
    result = squeeze_spaces(text)
    assert len(result) <= 3
    assert " " not in result


def test_compare_equal():
    assert compare("abc", "abc") == 0


def test_compare_orders():
    assert compare("abd", "abc") == 1
    assert compare("ab", "abc") == -1


@pytest.mark.parametrize("first,second", [("", "x"), ("x", ""), ("", "")])
def test_compare_empty_gives_two(first, second):
    assert compare(first, second) == 2


@pytest.mark.parametrize("first,second", [("pwd", "echo"), ("cd", "cdx"), ("a", "b")])
def test_compare_is_antisymmetric(first, second):
    assert compare(first, second) == -compare(second, first)


def test_count_char():
    assert count_char("a|b|c", "|") == 2
    assert count_char("abc", "|") == 0


@pytest.mark.parametrize("text", ["1abc", "_x", "=a", "-"])
def test_invalid_first_char_true(text):
    assert invalid_first_char(text) is True


@pytest.mark.parametrize("text", ["abc", "Z9", "", None])
def test_invalid_first_char_false(text):
    assert invalid_first_char(text) is False


@pytest.mark.parametrize("text", ["HOME=/x", "PATH", "a1=", "Var9=value with spaces"])
def test_is_valid_identifier_accepts(text):
    assert is_valid_identifier(text) is True


@pytest.mark.parametrize("text", ["1A", "A_B", "=x", "my-var=1", "_X"])
def test_is_valid_identifier_rejects(text):
    assert is_valid_identifier(text) is False