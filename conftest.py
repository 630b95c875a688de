import io

import pytest

from tinyforth.eval import Session

@pytest.fixture()
def out():
  return io.StringIO()

@pytest.fixture()
def session(out):
  return Session(out = out)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
