"""
This file sets up the "globals" we need for our tests
namely, a parser with the default methods plus a few test-only methods, and the methods themselves
"""

import logging

import pytest

from tagging import Method, ParseError, ParserBuilder
from tagging.library import default_methods

log = logging.getLogger(__name__)


def _echo(env, params):
    return params


def _fails(env):
    raise ParseError("ERR")


def _increment(env):
    env.put("x", env.get("x", 0) + 1)
    return str(env["x"])


TEST_METHODS = [
    Method("echo", simple=lambda env: "", complex=_echo),
    Method("fails", simple=_fails, complex=lambda env, params: _fails(env)),
    Method("increment", simple=_increment),
    Method("long", simple=lambda env: "abcdef"),
]


@pytest.fixture()
def test_methods():
    return list(TEST_METHODS)


@pytest.fixture()
def parser():
    """A parser with every default method and the test methods above."""
    parser = ParserBuilder().add_methods(default_methods()).add_methods(TEST_METHODS).build()
    yield parser
    parser.close()
