# --                                                            ; {{{1
#
# File        : tinyforth/codegen.py
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
Code generator: tokens to instructions.

A single forward pass w/ two modes: *declaring* (right after ``:``,
until the word name) and *defining* (from the name until ``;``).
While defining, instructions are collected into the body of the word;
at ``;`` the BEGIN_DEFINE instruction carrying them is built once.

>>> from tinyforth.read import tokenize
>>> compile_(tokenize(": SQUARE DUP * ; 4 SQUARE"))
[<BEGIN_DEFINE "SQUARE" <DUP> <MUL>>, <END_DEFINE>, <PUSH 4>, <PUSH "SQUARE">, <PRINT_TOP>]
"""                                                             # }}}1

import logging, sys

from . import data as D
from . import misc as M

from .data import CompileError, Instruction as I, OpCode as O, \
                  TokenKind as K

log = logging.getLogger(__name__)

BUILTINS = {
  "DUP" : O.DUP , "DROP" : O.DROP       , "SWAP": O.SWAP,
  "OVER": O.OVER, "PRINT": O.PRINT_STACK, "POP" : O.POP ,
  "EXIT": O.EXIT,
}

ARITHMETIC = { K.PLUS: O.ADD, K.MINUS: O.SUB, K.STAR: O.MUL,
               K.SLASH: O.DIV }

def _is_name(t):
  return t.kind is K.TEXT and t.text not in BUILTINS

def _digit(t):
  n = M.parse_int32(t.text)
  if n is None: raise CompileError("invalid integer literal", t)
  return n

def _text(t):
  if t.text is None: raise CompileError("text token w/o text", t)
  return t.text

def compile_(tokens):                                           # {{{1
                                                                # {{{2
  """
  Compile tokens into a list of instructions.  Unless the program is
  empty or ends w/ PRINT_STACK, PRINT_TOP is appended.

  >>> from tinyforth.read import tokenize as t
  >>> compile_(t("1 2 + PRINT"))
  [<PUSH 1>, <PUSH 2>, <ADD>, <PRINT_STACK>]
  >>> compile_(t("1 2 SWAP OVER DROP POP DUP - * / EXIT"))[-4:]
  [<MUL>, <DIV>, <EXIT>, <PRINT_TOP>]
  >>> compile_(t('"HELLO WORLD" FOO'))
  [<PUSH "HELLO WORLD">, <PUSH "FOO">, <PRINT_TOP>]
  >>> compile_(t(""))
  []

  >>> compile_(t(': GREET "HELLO WORLD" 42 GREET2 PRINT ;'))
  [<BEGIN_DEFINE "GREET" <PUSH "HELLO WORLD"> <PUSH 42> <PUSH "GREET2"> <PRINT_STACK>>, <END_DEFINE>, <PRINT_TOP>]

  >>> compile_(t("1 ;"))
  Traceback (most recent call last):
    ...
  tinyforth.data.CompileError: ';' w/o open definition (at ;)
  >>> compile_(t(": ;"))
  Traceback (most recent call last):
    ...
  tinyforth.data.CompileError: expected word name after ':' (at ;)
  >>> compile_(t(": DUP 1 ;"))
  Traceback (most recent call last):
    ...
  tinyforth.data.CompileError: cannot redefine built-in word (at "DUP")
  >>> compile_(t(": FOO : BAR ; ;"))
  Traceback (most recent call last):
    ...
  tinyforth.data.CompileError: nested definition (at :)
  >>> compile_(t(": FOO 1 2"))
  Traceback (most recent call last):
    ...
  tinyforth.data.CompileError: unterminated definition of FOO
  >>> compile_([D.Token(K.DIGIT, "99999999999")])
  Traceback (most recent call last):
    ...
  tinyforth.data.CompileError: invalid integer literal (at 99999999999)
  """                                                           # }}}2

  code, declaring, defining, start, body = [], False, False, None, []
  for t in tokens:
    ins = None
    if declaring and not _is_name(t):
      if t.kind is K.TEXT:
        raise CompileError("cannot redefine built-in word", t)
      raise CompileError("expected word name after ':'", t)
    if t.kind in ARITHMETIC:
      ins = I(ARITHMETIC[t.kind])
    elif t.kind is K.COLON:
      if defining: raise CompileError("nested definition", t)
      declaring = True
    elif t.kind is K.SEMICOLON:
      if not defining: raise CompileError("';' w/o open definition", t)
      code[start] = I(O.BEGIN_DEFINE, code[start].operands[0], *body)
      defining, body = False, []; code.append(I(O.END_DEFINE))
    elif t.kind is K.DIGIT:
      ins = I(O.PUSH, _digit(t))
    elif t.kind is K.TEXT:
      x = _text(t)
      if x in BUILTINS:
        ins = I(BUILTINS[x])
      elif declaring:
        start = len(code); code.append(I(O.BEGIN_DEFINE, x))
        declaring, defining = False, True
      else:
        ins = I(O.PUSH, x)
    else:
      raise CompileError("unknown token", t)
    if ins is not None:
      if defining: body.append(ins)
      else: code.append(ins)
  if declaring:
    raise CompileError("expected word name after ':'")
  if defining:
    raise CompileError("unterminated definition of {}"
                       .format(code[start].operands[0]))
  if code and code[-1].op is not O.PRINT_STACK:
    code.append(I(O.PRINT_TOP))
  log.debug("code: %r", code)
  return code
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
