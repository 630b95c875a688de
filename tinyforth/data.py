# --                                                            ; {{{1
#
# File        : tinyforth/data.py
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
Errors, tokens, instructions, words and the operand stack.

Values are plain ints (signed 32-bit), plain strs, and Instructions
(the embedded-instruction variant, used for word bodies).

>>> sq = Instruction(OpCode.BEGIN_DEFINE, "SQUARE",
...                  Instruction(OpCode.DUP), Instruction(OpCode.MUL))
>>> sq
<BEGIN_DEFINE "SQUARE" <DUP> <MUL>>
>>> Word.from_instruction(sq)
Word('SQUARE', <DUP> <MUL>)
"""                                                             # }}}1

import enum, sys

from collections import namedtuple

from . import misc as M

# === Exceptions ===

class TinyforthError(Exception):                                # {{{1
  """Base class for tinyforth errors."""

  kind = "Error"

  def report(self):
    """Message identifying the kind of error."""
    return "{}: {}".format(self.kind, self)
                                                                # }}}1

class LexicalError(TinyforthError):
  """Lexical error (e.g. unterminated string)."""
  kind = "LexicalError"

class CompileError(TinyforthError):                             # {{{1
  """
  Compile error; token is the offending token (if known).

  >>> print(CompileError("unexpected ';'", Token(TokenKind.SEMICOLON)).report())
  CompileError: unexpected ';' (at ;)
  """

  kind = "CompileError"

  def __init__(self, msg, token = None):
    self.token = token
    super().__init__(msg)

  def __str__(self):
    m = super().__str__()
    return m if self.token is None else \
      "{} (at {!r})".format(m, self.token)
                                                                # }}}1

class VMError(TinyforthError):                                  # {{{1
  """
  Runtime error; op is the opcode that failed (if known).

  >>> e = RuntimeArithmeticError("division by zero")
  >>> e.op = OpCode.DIV
  >>> print(e.report())
  RuntimeArithmeticError: division by zero (in DIV)
  """

  kind = "RuntimeError"

  def __init__(self, msg, op = None):
    self.op = op
    super().__init__(msg)

  def __str__(self):
    m = super().__str__()
    return m if self.op is None else "{} (in {})".format(m, self.op.name)
                                                                # }}}1

class StackUnderflowError(VMError):
  """Stack underflow."""
  kind = "RuntimeStackUnderflow"
  def __init__(self, m, n, op = None):
    super().__init__("stack underflow: {} < {}".format(m, n), op)

class RuntimeTypeError(VMError):
  """Operand of the wrong type."""
  kind = "RuntimeTypeError"

class RuntimeArithmeticError(VMError):
  """Division by zero or integer overflow."""
  kind = "RuntimeArithmeticError"

class RecursionDepthError(VMError):
  """Word calls nested too deeply."""
  kind = "RuntimeRecursionError"
  def __init__(self, n, op = None):
    super().__init__("maximum word call depth exceeded: {}".format(n), op)

# === Tokens ===

class TokenKind(enum.Enum):
  PLUS, MINUS, STAR, SLASH, COLON, SEMICOLON, TEXT, DIGIT = range(8)

SYMBOLS = {
  "+": TokenKind.PLUS , "-": TokenKind.MINUS,
  "*": TokenKind.STAR , "/": TokenKind.SLASH,
  ":": TokenKind.COLON, ";": TokenKind.SEMICOLON,
}

_SYMBOL_TEXT = { v: k for k, v in SYMBOLS.items() }

class Token(namedtuple("Token", "kind text".split())):          # {{{1
  """
  Token; text is None for symbol tokens.

  >>> Token(TokenKind.DIGIT, "42"), Token(TokenKind.PLUS)
  (42, +)
  >>> Token(TokenKind.TEXT, "HELLO WORLD")
  "HELLO WORLD"
  """

  def __new__(cls, kind, text = None):
    return super().__new__(cls, kind, text)

  def __repr__(self):
    if self.kind is TokenKind.TEXT: return show(self.text)
    if self.kind is TokenKind.DIGIT: return str(self.text)
    return _SYMBOL_TEXT.get(self.kind, self.kind.name)
                                                                # }}}1

# === Instructions ===

class OpCode(enum.Enum):
  DUP, DROP, SWAP, OVER                             = range( 0,  4)
  ADD, SUB, MUL, DIV                                = range( 4,  8)
  PUSH, POP, PRINT_STACK, PRINT_TOP                 = range( 8, 12)
  BEGIN_DEFINE, END_DEFINE, EXIT                    = range(12, 15)

class Instruction(namedtuple("Instruction", "op operands".split())):
                                                                # {{{1
  """
  Instruction: an opcode and its operands (validated on construction).

  >>> Instruction(OpCode.PUSH, 42)
  <PUSH 42>
  >>> Instruction(OpCode.PUSH)
  Traceback (most recent call last):
    ...
  tinyforth.data.CompileError: PUSH takes exactly 1 operand, got 0
  >>> Instruction(OpCode.PUSH, 2**31)
  Traceback (most recent call last):
    ...
  tinyforth.data.CompileError: PUSH operand must be an int32 or str, got 2147483648
  >>> Instruction(OpCode.BEGIN_DEFINE, "FOO", 1)
  Traceback (most recent call last):
    ...
  tinyforth.data.CompileError: BEGIN_DEFINE body operand is not an instruction: 1
  >>> Instruction(OpCode.BEGIN_DEFINE, "FOO", Instruction(OpCode.DUP))
  <BEGIN_DEFINE "FOO" <DUP>>
  """

  def __new__(cls, op, *operands):
    _check_operands(op, operands)
    return super().__new__(cls, op, operands)

  def __getnewargs__(self):
    return (self.op,) + self.operands

  def __repr__(self):
    return "<" + " ".join([self.op.name] + list(map(show, self.operands))) + ">"
                                                                # }}}1

def _check_operands(op, operands):                              # {{{1
  if not isinstance(op, OpCode):
    raise CompileError("not an opcode: {!r}".format(op))
  if op is OpCode.PUSH:
    if len(operands) != 1:
      raise CompileError("PUSH takes exactly 1 operand, got {}"
                         .format(len(operands)))
    x, = operands
    if not (isinstance(x, str) or M.isint32(x)):
      raise CompileError("PUSH operand must be an int32 or str, got {!r}"
                         .format(x))
  elif op is OpCode.BEGIN_DEFINE:
    if not operands or not isinstance(operands[0], str):
      raise CompileError("BEGIN_DEFINE needs a word name")
    for x in operands[1:]:
      if not isinstance(x, Instruction):
        raise CompileError("BEGIN_DEFINE body operand is not an "
                           "instruction: {!r}".format(x))
  elif operands:
    raise CompileError("{} takes no operands".format(op.name))
                                                                # }}}1

# === Words ===

class Word(namedtuple("Word", "name body".split())):            # {{{1
  """
  User-defined word: a name and its body (a tuple of instructions).

  >>> Word("X", [Instruction(OpCode.PUSH, 1), 2])
  Traceback (most recent call last):
    ...
  tinyforth.data.RuntimeTypeError: word X: body operand is not an instruction: 2 (in BEGIN_DEFINE)
  """

  def __new__(cls, name, body):
    body = tuple(body)
    for x in body:
      if not isinstance(x, Instruction):
        raise RuntimeTypeError("word {}: body operand is not an "
                               "instruction: {!r}".format(name, x),
                               OpCode.BEGIN_DEFINE)
    return super().__new__(cls, name, body)

  def __repr__(self):
    return "Word({!r}, {})".format(
      self.name, " ".join(map(repr, self.body)))

  @classmethod
  def from_instruction(cls, ins):
    """Build a word from a BEGIN_DEFINE instruction."""
    name, *body = ins.operands
    return cls(name, body)
                                                                # }}}1

# === Stack ===

def new_stack(*args):
  return list(args)

def stack_push(st, *args):                                      # {{{1
  """
  >>> stack = new_stack(1, 2, 3)
  >>> stack_push(stack, 4, 5)
  >>> stack
  [1, 2, 3, 4, 5]
  """
  st.extend(args)
                                                                # }}}1

def stack_peek(st, n = 1):                                      # {{{1
  """
  Top n values, bottom-most first; the stack is left alone.

  >>> stack = new_stack(1, 2, 3)
  >>> stack_peek(stack, 2)
  [2, 3]
  >>> try: stack_peek(stack, 4)
  ... except StackUnderflowError as e: print(e)
  stack underflow: 3 < 4
  >>> stack
  [1, 2, 3]
  """
  if len(st) < n: raise StackUnderflowError(len(st), n)
  return st[len(st)-n:]
                                                                # }}}1

def stack_pop(st, n = 1):                                       # {{{1
  """
  >>> stack = new_stack(1, 2, 3)
  >>> stack_pop(stack, 2)
  [2, 3]
  >>> stack
  [1]
  >>> try: stack_pop(stack, 2)
  ... except StackUnderflowError as e: print(e)
  stack underflow: 1 < 2
  >>> stack
  [1]
  """
  data = stack_peek(st, n); st[len(st)-n:] = []
  return data
                                                                # }}}1

def stack_top(st):
  """Top value, or None when empty."""
  return st[-1] if st else None

# === Display ===

def show(x):                                                    # {{{1
  """
  Literal representation of a value.

  >>> print(show(42), show(-1), show("HELLO WORLD"), show(None))
  42 -1 "HELLO WORLD" nil
  >>> show(Instruction(OpCode.PUSH, "X"))
  '<PUSH "X">'
  """
  if x is None: return "nil"
  if isinstance(x, str): return '"' + x + '"'
  return repr(x)
                                                                # }}}1

def show_stack(st):
  """
  >>> print(show_stack([1, 2, "X"]), show_stack([]))
  [1, 2, "X"] nil
  """
  return "[" + ", ".join(map(show, st)) + "]" if st else "nil"

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
