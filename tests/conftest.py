"""Minimal host application used by the tests.

Hosts expose ``use(fn)`` which calls ``fn(self)``, an ``options`` mapping
and a ``_name`` used in collision errors.
"""
from io import StringIO

import pytest


class App:

    def __init__(self, options=None):
        self._name = 'base'
        self.options = dict(options or {})

    def use(self, fn):
        fn(self)
        return self


@pytest.fixture
def stream():
    return StringIO()
