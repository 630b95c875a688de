# --                                                            ; {{{1
#
# File        : tinyforth/__init__.py
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
tinyforth - a tiny forth-like stack language

Lines are tokenized (read), compiled to instructions (codegen) and run
by a virtual machine (eval) that keeps an operand stack and a table
of user-defined words.

>>> from tinyforth.eval import eval_str
>>> s = eval_str(": SQUARE DUP * ; 4 SQUARE")
16
"""                                                             # }}}1

__version__ = "0.0.1"

def main_():
  """Entry point for main program."""
  from .__main__ import main_ as m
  return m()

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
