import random

from tagging.errors import ParseError
from tagging.methods import Method


def _choose(env, choices):
    return random.choice(choices)


def _range(env, bounds):
    try:
        ints = [int(b.strip()) for b in bounds[:2]]
    except ValueError:
        raise ParseError(f"Invalid range: {'|'.join(bounds)}")
    if len(ints) == 1:
        low, high = 0, ints[0]
    else:
        low, high = sorted(ints)
    return str(random.randint(low, high))


def _fail(env, message):
    raise ParseError(message)


METHODS = (
    # {choose:a|b|c}
    Method("choose", simple=lambda env: "", complex=_choose, split=True),
    # {range:high} or {range:low|high}, inclusive
    Method("range", complex=_range, split=True),
    # comments
    Method("note", simple=lambda env: "", complex=lambda env, text: ""),
    Method("fail", complex=_fail),
)
