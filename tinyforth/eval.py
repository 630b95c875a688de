# --                                                            ; {{{1
#
# File        : tinyforth/eval.py
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
Virtual machine, word table and interpreter session.

>>> s = eval_str("1 2 +")
3
>>> s = eval_str(": SQUARE DUP * ;\n4 SQUARE\nPRINT", s)
3
16
[3, 16]
>>> s.stack
[3, 16]
"""                                                             # }}}1

import logging, sys

from . import codegen as C
from . import data as D
from . import misc as M
from . import read as R

from .data import OpCode as O

log = logging.getLogger(__name__)

MAX_DEPTH = 10000                       # nested word calls

# === Virtual Machine ===

def _int_operands(st, op):
  a, b = D.stack_peek(st, 2)
  for x in (a, b):
    if not (isinstance(x, int) and not isinstance(x, bool)):
      raise D.RuntimeTypeError("not an integer: {}".format(D.show(x)), op)
  return a, b

def _div(a, b):
  if b == 0: raise D.RuntimeArithmeticError("division by zero")
  q = abs(a) // abs(b)                  # truncates toward zero
  return q if (a < 0) == (b < 0) else -q

_ARITHMETIC = {
  O.ADD: lambda a, b: a + b, O.SUB: lambda a, b: a - b,
  O.MUL: lambda a, b: a * b, O.DIV: _div,
}

class VirtualMachine(object):                                   # {{{1
  """
  Executes instructions against an operand stack and a word table
  (a dict: name -> Word; registering a name again replaces the old
  definition).  Nested word calls share the same stack and table.

  >>> I = D.Instruction
  >>> vm = VirtualMachine()
  >>> vm.run([I(O.PUSH, 7), I(O.PUSH, 2), I(O.SUB), I(O.PRINT_TOP)])
  5
  False
  >>> vm.run([I(O.PUSH, -7), I(O.PUSH, 2), I(O.DIV), I(O.PRINT_STACK)])
  [5, -3]
  False
  >>> vm.run([I(O.EXIT)])
  True
  >>> vm.run([I(O.DROP), I(O.DROP), I(O.DROP)])
  Traceback (most recent call last):
    ...
  tinyforth.data.StackUnderflowError: stack underflow: 0 < 1 (in DROP)
  """

  def __init__(self, stack = None, words = None, out = None,
               max_depth = MAX_DEPTH):
    self.stack      = D.new_stack() if stack is None else stack
    self.words      = {} if words is None else words
    self.max_depth  = max_depth
    self._out       = out

  @property
  def out(self):
    return sys.stdout if self._out is None else self._out

  def run(self, code):
    """
    Run instructions; returns whether EXIT was requested.

    Word calls push a frame (body, instruction pointer) instead of
    recursing; the frames share the stack and the word table.
    """
    frames, exit_ = [[code, 0]], False
    while frames:
      frame = frames[-1]; body, ip = frame
      if ip >= len(body): frames.pop(); continue
      ins = body[ip]; frame[1] = ip + 1
      log.debug("%d/%d: %r (depth %d)", len(frames), ip, ins,
                len(self.stack))
      try:
        w = self.lookup(ins)
        if w is None:
          if self._OPS[ins.op](self, ins): exit_ = True
        elif len(frames) > self.max_depth:
          raise D.RecursionDepthError(self.max_depth)
        else:
          log.debug("calling %s", w.name)
          frames.append([w.body, 0])
      except D.VMError as e:
        if e.op is None: e.op = ins.op
        raise
    return exit_

  def lookup(self, ins):
    """The word a PUSH instruction calls, or None."""
    if ins.op is not O.PUSH: return None
    x, = ins.operands
    return self.words.get(x) if isinstance(x, str) else None

  def define(self, word):
    """Register a word; replaces an earlier one of the same name."""
    if word.name in self.words: log.info("redefining %s", word.name)
    else: log.debug("defining %s", word.name)
    self.words[word.name] = word

  def _arith(self, ins):
    a, b  = _int_operands(self.stack, ins.op)
    x     = _ARITHMETIC[ins.op](a, b)
    if not M.isint32(x):
      raise D.RuntimeArithmeticError("integer overflow: {}".format(x))
    self.stack[-2:] = [x]

  def _dup(self, ins):
    a, = D.stack_peek(self.stack, 1)
    D.stack_push(self.stack, a)

  def _drop(self, ins):
    D.stack_pop(self.stack, 1)

  def _swap(self, ins):
    a, b = D.stack_pop(self.stack, 2)
    D.stack_push(self.stack, b, a)

  def _over(self, ins):
    a, b = D.stack_peek(self.stack, 2)
    D.stack_push(self.stack, a)

  def _push(self, ins):
    D.stack_push(self.stack, *ins.operands)

  def _begin_define(self, ins):
    self.define(D.Word.from_instruction(ins))

  def _end_define(self, ins):
    pass

  def _print_stack(self, ins):
    print(D.show_stack(self.stack), file = self.out)

  def _print_top(self, ins):
    print(D.show(D.stack_top(self.stack)), file = self.out)

  def _exit(self, ins):
    log.debug("exit requested")
    return True

  _OPS = {
    O.ADD: _arith, O.SUB: _arith, O.MUL: _arith, O.DIV: _arith,
    O.DUP: _dup, O.DROP: _drop, O.POP: _drop, O.SWAP: _swap,
    O.OVER: _over, O.PUSH: _push, O.BEGIN_DEFINE: _begin_define,
    O.END_DEFINE: _end_define, O.PRINT_STACK: _print_stack,
    O.PRINT_TOP: _print_top, O.EXIT: _exit,
  }
                                                                # }}}1

# === Session ===

class Session(object):                                          # {{{1
  """
  Interpreter session: owns the stack, the word table and the VM.

  A line that fails leaves the stack and word table as they were
  before the line.

  >>> s = Session()
  >>> s.eval("1 2 3")
  3
  >>> s.eval("4 0 /")
  Traceback (most recent call last):
    ...
  tinyforth.data.RuntimeArithmeticError: division by zero (in DIV)
  >>> s.stack
  [1, 2, 3]
  >>> s.eval("EXIT"); s.exited
  3
  True
  """

  def __init__(self, out = None, max_depth = MAX_DEPTH):
    self.stack, self.words  = D.new_stack(), {}
    self.vm                 = VirtualMachine(self.stack, self.words, out,
                                             max_depth)
    self.exited, self.failures = False, 0

  def compile(self, line):
    return C.compile_(R.tokenize(line))

  def eval(self, line):
    """Tokenize, compile and run one line."""
    stack, words = list(self.stack), dict(self.words)
    try:
      if self.vm.run(self.compile(line)): self.exited = True
    except D.TinyforthError:
      self._restore(stack, words)
      raise

  def _restore(self, stack, words):
    self.stack[:] = stack
    self.words.clear(); self.words.update(words)
                                                                # }}}1

def eval_str(s, session = None):
  """Evaluate string (line by line); errors propagate."""
  if session is None: session = Session()
  for line in s.splitlines():
    session.eval(line)
    if session.exited: break
  return session

def eval_stream(s, session = None):                             # {{{1
  """
  Evaluate stream contents line by line (uppercased); errors are
  reported and evaluation continues w/ the next line.

  >>> s = eval_stream(["1 2 swap", "+ +", "print", "exit", "42"])
  1
  *** Error *** RuntimeStackUnderflow: stack underflow: 1 < 2 (in ADD)
  [2, 1]
  1
  >>> s.failures, s.exited, s.stack
  (1, True, [2, 1])
  """

  if session is None: session = Session()
  for line in s:
    try:
      session.eval(line.upper())
    except D.TinyforthError as e:
      report_error(e); session.failures += 1
    if session.exited: break
  return session
                                                                # }}}1

def eval_file(name, session = None):
  """Evaluate file contents."""
  with open(name) as f:
    return eval_stream(f, session)

def report_error(e, file = None):
  """Print error (kind and message)."""
  log.debug("%s", e.report())
  print("*** Error ***", e.report(), file = file or sys.stdout)

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
