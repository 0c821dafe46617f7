import re

import pytest

from tagging import Environment
from tagging.library import default_methods


def test_default_methods_unique():
    names = [m.name for m in default_methods()]
    assert len(names) == len(set(names))


def test_strings(parser):
    assert parser.parse("{upper:abc}") == "ABC"
    assert parser.parse("{lower:ABC}") == "abc"
    assert parser.parse("{length:hello}") == "5"
    assert parser.parse("{length}") == "0"
    assert parser.parse("{trim:  padded  }") == "padded"
    assert parser.parse("{replace:cat|dog|the cat sat}") == "the dog sat"
    assert parser.parse("{replace:a|b}") == "{replace:a|b}"


def test_choose(parser):
    for _ in range(20):
        assert parser.parse("{choose:a|b|c}") in ("a", "b", "c")
    assert parser.parse("{choose:only}") == "only"
    assert parser.parse("{choose:a\\|b}") == "a\\|b"


def test_range(parser):
    for _ in range(20):
        assert 1 <= int(parser.parse("{range:1|6}")) <= 6
        assert 0 <= int(parser.parse("{range:3}")) <= 3
        assert 2 <= int(parser.parse("{range:9|2}")) <= 9
    assert parser.parse("{range:one|two}") == "Invalid range: one|two"


def test_note_and_fail(parser):
    assert parser.parse("a{note:this is ignored}b") == "ab"
    assert parser.parse("a{fail:nope}b") == "nope"


def test_roll(parser):
    for _ in range(20):
        assert 1 <= int(parser.parse("{roll:1d6}")) <= 6
        assert 6 <= int(parser.parse("{roll:1d6+5}")) <= 11
        assert 1 <= int(parser.parse("{roll}")) <= 20
    assert parser.parse("{roll:4}") == "4"


def test_vroll(parser):
    assert parser.parse("{vroll:4}") == "4 = `4`"
    assert re.match(r"1d20 \(\**\d+\**\) = `\d+`", parser.parse("{vroll}"))


def test_invalid_roll(parser):
    assert parser.parse("a{roll:1d}b").startswith("Invalid roll `1d`")
    assert parser.parse("{vroll:nonsense}").startswith("Invalid roll `nonsense`")


def test_variables(parser):
    assert parser.parse("{set:hp|10}HP: {get:hp}") == "HP: 10"
    assert parser.parse("{get:hp}") == "10"
    assert parser.parse("{exists:hp}/{exists:mp}") == "true/false"
    assert parser.parse("{get:mp}") == ""
    assert parser.parse("{set:|x}") == "{set:|x}"


@pytest.mark.parametrize("text, expected", [("a\\|b", "a\\|b"), ("{upper:x}", "X"), ("plain", "plain")])
def test_set_value_is_parsed_first(parser, text, expected):
    env = Environment()
    parser.parse(f"{{set:v|{text}}}", env)
    assert env["v"] == expected
