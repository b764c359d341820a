# tests/test_scanner.py
from easyfts.query.scanner import NULL_CHAR, Scanner


def test_peek_and_move():
    s = Scanner("abc")
    assert s.peek() == "a"
    assert s.peek(2) == "c"
    assert s.peek(3) == NULL_CHAR
    s.move_ahead(2)
    assert s.position == 2
    s.move_ahead(10)
    assert s.position == 3
    assert s.end_of_text


def test_none_text():
    s = Scanner(None)
    assert s.end_of_text
    assert s.peek() == NULL_CHAR


def test_reset():
    s = Scanner("abc")
    s.move_ahead()
    s.reset("xyz")
    assert s.position == 0
    assert s.peek() == "x"


def test_extract():
    assert Scanner("abcdef").extract(1, 4) == "bcd"


def test_move_past_whitespace():
    s = Scanner(" \t\n abc")
    s.move_past_whitespace()
    assert s.peek() == "a"


def test_move_past_and_move_to():
    s = Scanner("aabx, y")
    s.move_past("ab")
    assert s.peek() == "x"
    s.move_to(",;")
    assert s.peek() == ","
    s.move_to("!")
    assert s.end_of_text


def test_move_to_whitespace():
    s = Scanner("abc def")
    s.move_to_whitespace()
    assert s.position == 3


def test_extract_quoted():
    s = Scanner('"abc" def')
    assert s.extract_quoted() == "abc"
    assert s.peek() == '"'
    assert s.position == 4


def test_extract_quoted_unterminated():
    s = Scanner('"abc')
    assert s.extract_quoted() == "abc"
    assert s.end_of_text


def test_extract_quoted_with_escapes():
    s = Scanner('"say ""hi"" now" x')
    assert s.extract_quoted(escape=True) == 'say "hi" now'
    assert s.peek() == '"'
    assert s.peek(1) == " "


def test_extract_quoted_without_escapes():
    s = Scanner('"say ""hi"" now"')
    assert s.extract_quoted() == "say "


def test_extract_quoted_other_quote_char():
    s = Scanner("'abc' def")
    assert s.extract_quoted() == "abc"


def test_extract_block_nested():
    s = Scanner("(a (b) c) d")
    assert s.extract_block("(", ")") == "a (b) c"
    assert s.peek() == ")"
    assert s.position == 8


def test_extract_block_skips_quotes():
    s = Scanner('(a ")" b) c')
    assert s.extract_block("(", ")") == 'a ")" b'
    assert s.position == 8


def test_extract_block_unbalanced():
    s = Scanner("(a (b")
    assert s.extract_block("(", ")") == "a (b"
    assert s.end_of_text


def test_extract_block_angle_brackets():
    s = Scanner("<a b> c")
    assert s.extract_block("<", ">") == "a b"
