# --                                                            ; {{{1
#
# File        : tinyforth/repl.py
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
Interactive shell.

>>> import io
>>> _ = repl(stdin = io.StringIO("1 2 +\n  \nfoo 3 /\n: sq dup * ;\n3 sq\n"))  # doctest: +NORMALIZE_WHITESPACE
> 3
> > *** Error *** RuntimeTypeError: not an integer: "FOO" (in DIV)
> 3
> 9
>
"""                                                             # }}}1

import logging, sys

from . import eval as E

from .data import TinyforthError

log = logging.getLogger(__name__)

PROMPT = "> "

def prompt(s = PROMPT, stdin = None):
  """Read a line; EOFError at end of input."""
  if stdin is None: return input(s)
  print(s, end = "", flush = True)
  line = stdin.readline()
  if not line: raise EOFError
  return line.rstrip("\n")

def repl(session = None, stdin = None):                         # {{{1
  """
    Read-Eval-Print loop.  Each line is uppercased, then evaluated;
    the code generator takes care of printing (the top of) the stack.
    Errors are reported and the loop continues; EXIT or end of input
    ends it.
  """
  if session is None: session = E.Session()
  if stdin is None and sys.stdin.isatty():
    try:
      import readline
    except ImportError:
      pass
  while not session.exited:
    try:
      line = prompt(stdin = stdin)
    except EOFError:
      print(); break
    if not line.strip(): continue
    try:
      session.eval(line.upper())
    except TinyforthError as e:
      E.report_error(e); session.failures += 1
  log.debug("repl done (exited: %s)", session.exited)
  return session
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
