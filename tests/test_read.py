import pytest

from tinyforth.data import LexicalError, Token, TokenKind as K
from tinyforth.read import tokenize

def test_symbols_digits_text():
  assert tokenize("12 + - * / : ; DUP") == [
    Token(K.DIGIT, "12"), Token(K.PLUS), Token(K.MINUS),
    Token(K.STAR), Token(K.SLASH), Token(K.COLON),
    Token(K.SEMICOLON), Token(K.TEXT, "DUP"),
  ]

def test_signed_ints_and_range():
  assert tokenize("-5 +5 -2147483648") == [
    Token(K.DIGIT, "-5"), Token(K.DIGIT, "+5"),
    Token(K.DIGIT, "-2147483648"),
  ]
  assert tokenize("-2147483649") == [Token(K.TEXT, "-2147483649")]

def test_words_are_verbatim():
  assert tokenize("++ 1+ ;; :X") == [
    Token(K.TEXT, "++"), Token(K.TEXT, "1+"), Token(K.TEXT, ";;"),
    Token(K.TEXT, ":X"),
  ]

def test_quoted_string_spans_words():
  assert tokenize('"HELLO    WORLD" 1') == [
    Token(K.TEXT, "HELLO WORLD"), Token(K.DIGIT, "1"),
  ]
  assert tokenize('"ONE"') == [Token(K.TEXT, "ONE")]
  assert tokenize('"1"') == [Token(K.TEXT, "1")]

def test_lone_closing_quote_is_skipped():
  assert tokenize('1 X" 2') == [Token(K.DIGIT, "1"), Token(K.DIGIT, "2")]

def test_ascii_whitespace_only():
  assert tokenize("1\t2\r\n") == [Token(K.DIGIT, "1"), Token(K.DIGIT, "2")]
  assert tokenize("1\u00a02") == [Token(K.TEXT, "1\u00a02")]

def test_bare_quote_opens_a_string():
  assert tokenize('" A"') == [Token(K.TEXT, " A")]
  assert tokenize('" X Y"') == [Token(K.TEXT, " X Y")]
  assert tokenize('" "') == [Token(K.TEXT, " ")]
  with pytest.raises(LexicalError):
    tokenize('" A')

@pytest.mark.parametrize("line", ['"HELLO', '1 "A B', '"', 'X "Y" "Z'])
def test_unterminated_string(line):
  with pytest.raises(LexicalError) as e:
    tokenize(line)
  assert "unterminated string" in str(e.value)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
