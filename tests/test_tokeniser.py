import pytest

from nmode.tokeniser import tokenise


def test_simple_split():
    assert tokenise("1.2.3", ".") == ["1", "2", "3"]


def test_empty_text_gives_no_tokens():
    assert tokenise("", ",") == []


def test_adjacent_delimiters_give_empty_tokens():
    assert tokenise("a,,b", ",") == ["a", "", "b"]


def test_trailing_and_leading_delimiters():
    assert tokenise(",a,", ",") == ["", "a", ""]


def test_multiple_delimiter_characters():
    assert tokenise("a b,c", " ,") == ["a", "b", "c"]


def test_no_delimiter_found():
    assert tokenise("abc", ",") == ["abc"]


@pytest.mark.parametrize("text", ["x,y,z", "1,,2", "a,b,"])
def test_join_round_trip(text):
    assert ",".join(tokenise(text, ",")) == text