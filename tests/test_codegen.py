import pytest

from tinyforth.codegen import compile_
from tinyforth.data import CompileError, Instruction as I, \
                           OpCode as O, Token, TokenKind as K
from tinyforth.read import tokenize

def c(line):
  return compile_(tokenize(line))

def test_builtins_and_arithmetic():
  assert c("DUP DROP SWAP OVER POP + - * / EXIT") == [
    I(O.DUP), I(O.DROP), I(O.SWAP), I(O.OVER), I(O.POP), I(O.ADD),
    I(O.SUB), I(O.MUL), I(O.DIV), I(O.EXIT), I(O.PRINT_TOP),
  ]

def test_print_stack_suppresses_print_top():
  assert c("1 PRINT") == [I(O.PUSH, 1), I(O.PRINT_STACK)]
  assert c("PRINT 1") == [I(O.PRINT_STACK), I(O.PUSH, 1), I(O.PRINT_TOP)]

def test_empty_line_compiles_to_nothing():
  assert c("   ") == []

def test_text_becomes_string_push():
  assert c('FOO "A B"') == [I(O.PUSH, "FOO"), I(O.PUSH, "A B"),
                            I(O.PRINT_TOP)]

def test_definition_body_is_inline():
  code = c(": SQUARE DUP * ; 4 SQUARE")
  assert code == [
    I(O.BEGIN_DEFINE, "SQUARE", I(O.DUP), I(O.MUL)), I(O.END_DEFINE),
    I(O.PUSH, 4), I(O.PUSH, "SQUARE"), I(O.PRINT_TOP),
  ]

def test_definition_captures_every_kind():
  code = c(': W 1 "HI THERE" OTHER PRINT EXIT - ;')
  assert code[0] == I(O.BEGIN_DEFINE, "W", I(O.PUSH, 1),
                      I(O.PUSH, "HI THERE"), I(O.PUSH, "OTHER"),
                      I(O.PRINT_STACK), I(O.EXIT), I(O.SUB))
  assert code[1:] == [I(O.END_DEFINE), I(O.PRINT_TOP)]

def test_empty_definition():
  assert c(": NOP ;")[0] == I(O.BEGIN_DEFINE, "NOP")

def test_quoted_word_name():
  assert c(': "MY WORD" 1 ;')[0] == \
    I(O.BEGIN_DEFINE, "MY WORD", I(O.PUSH, 1))

@pytest.mark.parametrize("line", [
  ";", "1 ;", ": ;", ": 1 ;", ": + ;", ": :", ": DUP ;", ": EXIT ;",
  ": A : B ; ;", ": A", ": A 1 2", ":",
])
def test_malformed_definitions(line):
  with pytest.raises(CompileError):
    c(line)

def test_bad_digit_token():
  with pytest.raises(CompileError) as e:
    compile_([Token(K.DIGIT, "12x")])
  assert e.value.token == Token(K.DIGIT, "12x")

def test_large_body_compiles_in_one_pass():
  code = c(": BIG " + "DUP " * 20000 + "1 + ;")
  assert len(code) == 3
  name, *body = code[0].operands
  assert name == "BIG" and len(body) == 20002
  assert body[0] == I(O.DUP) and body[-2:] == [I(O.PUSH, 1), I(O.ADD)]

def test_two_definitions_on_one_line():
  code = c(": A 1 ; : B A A ;")
  assert [x.op for x in code] == [
    O.BEGIN_DEFINE, O.END_DEFINE, O.BEGIN_DEFINE, O.END_DEFINE,
    O.PRINT_TOP,
  ]
  assert code[2].operands[1:] == (I(O.PUSH, "A"), I(O.PUSH, "A"))

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
