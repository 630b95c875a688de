# --                                                            ; {{{1
#
# File        : tinyforth/read.py
# Maintainer  : Felix C. Stegerman <flx@obfusk.net>
# Date        : 2026-10-19
#
# Copyright   : Copyright (C) 2026  Felix C. Stegerman
# Version     : v0.0.1
# License     : GPLv3+
#
# --                                                            ; }}}1

                                                                # {{{1
r"""
Lexer: one line of input to a list of tokens.

>>> tokenize(': GREET "HELLO WORLD" ; GREET')
[:, "GREET", "HELLO WORLD", ;, "GREET"]
"""                                                             # }}}1

import logging, sys

import pyparsing as P, regex

from . import data as D
from . import misc as M

log = logging.getLogger(__name__)

def _make_parser():                                             # {{{1
  # NB: the order in which matches are tried is important; strings
  # before stray quotes, ints before symbols (-1 vs -), text last.

  r, s        = lambda x: P.Regex(regex.compile(x)), P.Suppress
  op, zm      = P.Optional, P.ZeroOrMore
  n           = lambda x, name: x.set_name(name)

  ws          = s(r(M.RX_SPACE)).leave_whitespace()
  str_        = n(r(M.RX_STRING), "string") \
                .set_parse_action(P.token_map(_parse_str))
  unterm      = n(r(M.RX_OPEN_STRING), "unterminated string") \
                .set_parse_action(_unterminated)
  stray       = n(s(r(M.RX_STRAY_QUOTE)), "stray quote")
  int_        = n(r(M.RX_INT), "int") \
                .set_parse_action(P.token_map(_parse_int))
  sym         = n(r(M.RX_SYMBOL), "symbol") \
                .set_parse_action(P.token_map(_parse_sym))
  text        = n(r(M.RX_TEXT), "text") \
                .set_parse_action(P.token_map(_parse_text))

  term        = str_ | unterm | stray | int_ | sym | text
  return op(zm(term + ws) + term)
                                                                # }}}1

def _parse_str(s):                                              # {{{1
  """
  Rejoin the words of a quoted string w/ single spaces; strip quotes.

  >>> _parse_str('"HELLO   WORLD"')
  "HELLO WORLD"
  >>> _parse_str('""')
  ""
  """
  return D.Token(D.TokenKind.TEXT, " ".join(M.split_words(s))[1:-1])
                                                                # }}}1

def _unterminated(s, loc, t):
  raise D.LexicalError("unterminated string: {}".format(s[loc:]))

def _parse_int(s):
  # out of int32 range: just text
  if M.parse_int32(s) is None: return D.Token(D.TokenKind.TEXT, s)
  return D.Token(D.TokenKind.DIGIT, s)

def _parse_sym(s):
  return D.Token(D.SYMBOLS[s])

def _parse_text(s):
  return D.Token(D.TokenKind.TEXT, s)

_parser = _make_parser()

def tokenize(s):                                                # {{{1
                                                                # {{{2
  r"""
  Split a line into tokens: quoted strings, 32-bit ints, the symbols
  + - * / : ; and text (everything else, verbatim).

  >>> tokenize("1 -2 +3 + - * / : ;")
  [1, -2, +3, +, -, *, /, :, ;]
  >>> tokenize("DUP foo -x 2147483648")
  ["DUP", "foo", "-x", "2147483648"]
  >>> tokenize("")
  []
  >>> tokenize("  \t 1  ")
  [1]

  Quoted strings may span words; the words are rejoined w/ single
  spaces.  A lone closing quote is skipped.  A word that is just `"`
  opens a string and never closes it itself: `"X"` is a one-word
  string, a bare `"` needs a later word ending in `"`.

  >>> tokenize('"HELLO    BIG WORLD" "X" ""')
  ["HELLO BIG WORLD", "X", ""]
  >>> tokenize('1 DONE" 2')
  [1, 2]
  >>> tokenize('" A"')
  [" A"]
  >>> tokenize('" "')
  [" "]
  >>> tokenize('"A"B C"')
  ["A"B C"]

  >>> tokenize('1 "HELLO WORLD')
  Traceback (most recent call last):
    ...
  tinyforth.data.LexicalError: unterminated string: "HELLO WORLD
  >>> tokenize('"')
  Traceback (most recent call last):
    ...
  tinyforth.data.LexicalError: unterminated string: "
  """                                                           # }}}2

  try:
    toks = list(_parser.parse_string(s.strip(M.S_SPACE), parse_all = True))
  except P.ParseException as e:
    raise D.LexicalError("cannot tokenize: {}".format(e)) from e
  log.debug("tokens: %r", toks)
  return toks
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
