# --                                                            ; {{{1
#
# File        : tinyforth/misc.py
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
Lexical constants and small helpers shared by the reader and the
virtual machine.

>>> RX_STRING_C.match('"HELLO  WORLD" DUP').group()
'"HELLO  WORLD"'
>>> RX_STRING_C.match('"HELLO WORLD') is None
True
"""                                                             # }}}1

import regex, sys

                                                                # {{{1
S_SPACE           = " \t\n\r\f\v"   # ASCII whitespace only
S_SYMBOLS         = "+-*/:;"

INT32_MIN         = -2**31
INT32_MAX         =  2**31 - 1

_RX_WS            = regex.escape(S_SPACE)
RX_SPACE          = "[" + _RX_WS + "]+"
RX_CHAR           = "[^" + _RX_WS + "]"
RX_END            = "(?!" + RX_CHAR + ")"
RX_SPACE_C        = regex.compile(RX_SPACE)

# a word opening w/ " up to & including the first word ending in "
RX_STRING         = '"(?:' + RX_CHAR + '*"|' \
                  + RX_CHAR + '*(?:' + RX_SPACE + RX_CHAR + '+)*?' \
                  + RX_SPACE + RX_CHAR + '*")' + RX_END
RX_STRING_C       = regex.compile(RX_STRING)
RX_OPEN_STRING    = '"' + RX_CHAR + '*'
RX_STRAY_QUOTE    = '[^"' + _RX_WS + ']' + RX_CHAR + '*"' + RX_END

RX_INT            = "[+-]?[0-9]+" + RX_END
RX_INT_C          = regex.compile(RX_INT)
RX_SYMBOL         = "[" + regex.escape(S_SYMBOLS) + "]" + RX_END
RX_TEXT           = RX_CHAR + "+"
                                                                # }}}1

def split_words(s):                                             # {{{1
  """
  Split on ASCII whitespace.

  >>> split_words("  1 2\\t+  ")
  ['1', '2', '+']
  >>> split_words("")
  []
  """

  return [ w for w in RX_SPACE_C.split(s) if w ]
                                                                # }}}1

def isint32(x):
  """Is x an int in the signed 32-bit range?"""
  return isinstance(x, int) and not isinstance(x, bool) \
     and INT32_MIN <= x <= INT32_MAX

def parse_int32(s):                                             # {{{1
  """
  Parse a signed 32-bit integer literal; None if it isn't one.

  >>> parse_int32("42"), parse_int32("-7"), parse_int32("+3")
  (42, -7, 3)
  >>> parse_int32("2147483647")
  2147483647
  >>> parse_int32("2147483648") is None
  True
  >>> parse_int32("1_000") is None
  True
  >>> parse_int32("DUP") is None
  True
  """

  if s is None or not RX_INT_C.fullmatch(s): return None
  n = int(s)
  return n if isint32(n) else None
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
