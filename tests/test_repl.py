import io, subprocess, sys

from pathlib import Path

from tinyforth import repl as R
from tinyforth.__main__ import main, test

ROOT = Path(__file__).resolve().parent.parent

def _repl(text, capsys):
  s = R.repl(stdin = io.StringIO(text))
  return s, capsys.readouterr().out.replace(R.PROMPT, "").splitlines()

def test_repl_uppercases_and_prints_top(capsys):
  s, lines = _repl(": sq dup * ;\n5 sq\n", capsys)
  assert lines == ["nil", "25", ""]
  assert "SQ" in s.words

def test_repl_survives_errors(capsys):
  s, lines = _repl('+\n"oops\n1 0 /\n1 2 + print\n', capsys)
  assert lines[0].startswith("*** Error *** RuntimeStackUnderflow:")
  assert lines[1].startswith("*** Error *** LexicalError:")
  assert lines[2].startswith("*** Error *** RuntimeArithmeticError:")
  assert lines[3] == "[3]"
  assert s.failures == 3 and not s.exited

def test_repl_stops_at_exit(capsys):
  s, lines = _repl("1\nexit\n2\n", capsys)
  assert s.exited and s.stack == [1]
  assert lines == ["1", "1"]

def test_main_eval(capsys):
  assert main("-e", "2 3 *", "-e", "dup +") == 0
  assert capsys.readouterr().out == "6\n12\n"

def test_main_script(tmp_path, capsys):
  p = tmp_path / "prog.fs"
  p.write_text(": double dup + ;\n21 double\n;\nprint\n")
  assert main(str(p)) == 0
  out = capsys.readouterr().out.splitlines()
  assert out[:2] == ["nil", "42"]
  assert out[2].startswith("*** Error *** CompileError:")
  assert out[3] == "[42]"

def test_main_missing_script(tmp_path, capsys):
  assert main(str(tmp_path / "nope.fs")) == 1
  assert "*** Error ***" in capsys.readouterr().err

def test_doctests():
  assert test() == 0

def test_cli_stdin():
  proc = subprocess.run([sys.executable, "-m", "tinyforth"], cwd = ROOT,
                        input = "1 2 +\n+ +\nexit\n4\n", text = True,
                        capture_output = True, check = False)
  assert proc.returncode == 0, proc.stderr
  lines = proc.stdout.splitlines()
  assert lines[0] == "3"
  assert lines[1].startswith("*** Error *** RuntimeStackUnderflow:")
  assert lines[2:] == ["3"]

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
