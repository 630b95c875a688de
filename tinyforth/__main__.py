# --                                                            ; {{{1
#
# File        : tinyforth/__main__.py
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
Command line interface.

>>> main("--eval", "1 2 + print")
[3]
0
>>> main("-e", ": sq dup * ;", "-e", "7 sq", "-e", "0 /")
nil
49
*** Error *** RuntimeArithmeticError: division by zero (in DIV)
0
>>> main("--max-depth", "2", "-e", ": a 1 ; : b a ; : c b ;", "-e", "c")
nil
*** Error *** RuntimeRecursionError: maximum word call depth exceeded: 2 (in PUSH)
0
"""                                                             # }}}1

import argparse, logging, sys

from . import __version__
from . import eval as E
from . import repl as R

_me   = "tinyforth"
_desc = "tinyforth - a tiny forth-like stack language"

def main(*args):                                                # {{{1
  """Main program."""
  p = _argument_parser(); n = p.parse_args(args)
  logging.basicConfig(
    format = "%(levelname)s %(name)s: %(message)s",
    level  = logging.DEBUG if n.debug else logging.WARNING)
  if n.test: return test(verbose = n.verbose)
  s = E.Session(max_depth = n.max_depth)
  if n.script or n.eval:
    try:
      if n.script: E.eval_file(n.script, s)
      else: E.eval_stream(n.eval, s)
    except OSError as e:
      print("*** Error ***", e, file = sys.stderr)
      return 1
  if s.exited: return 0
  if n.interactive or not (n.script or n.eval):
    if not sys.stdin.isatty() and not n.interactive:
      E.eval_stream(sys.stdin, session = s)
    else:
      R.repl(session = s)
  return 0
                                                                # }}}1

def _argument_parser():                                         # {{{1
  p = argparse.ArgumentParser(description = _desc, prog = _me)
  g = p.add_mutually_exclusive_group()
  g.add_argument("script", metavar = "SCRIPT", nargs = "?",
                 help = "script to run")
  g.add_argument("--eval", "-e", metavar = "CODE", action = "append",
                 help = "line of code to run (instead of a script); "
                        "may be repeated")
  p.add_argument("--interactive", "-i", action = "store_true",
                 help = "force interactive mode")
  p.add_argument("--version", action = "version",
                 version = "%(prog)s {}".format(__version__))
  p.add_argument("--test", action = "store_true",
                 help = "run tests (instead of the interpreter)")
  p.add_argument("--verbose", "-v", action = "store_true",
                 help = "run tests verbosely")
  p.add_argument("--max-depth", metavar = "N", type = int,
                 default = E.MAX_DEPTH,
                 help = "maximum nesting of word calls (default: %(default)s)")
  p.add_argument("--debug", "-d", action = "store_true",
                 help = "debug logging (tokens, code, execution)")
  return p
                                                                # }}}1

def test(verbose = False):                                      # {{{1
  """Run doctest on all modules."""
  import doctest, importlib, pkgutil
  tot_f, tot_t = 0, 0
  pkg = importlib.import_module(__package__ or _me)
  mods = [pkg] + [ importlib.import_module("." + x.name, pkg.__name__)
                   for x in pkgutil.iter_modules(pkg.__path__) ]
  for m in mods:
    if verbose: print("Testing module {} ...".format(m.__name__))
    f, t = doctest.testmod(m, verbose = verbose)
    tot_f += f; tot_t += t
    if verbose: print()
  if verbose:
    print("Summary:")
    print("{} passed and {} failed.".format(tot_t - tot_f, tot_f))
    if tot_f == 0: print("Test passed.")
    else: print("***Test Failed*** {} failures.".format(tot_f))
  return 0 if tot_f == 0 else 1
                                                                # }}}1

def main_():
  """Entry point for main program."""
  return main(*sys.argv[1:])

if __name__ == "__main__":
  sys.exit(main_())

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
