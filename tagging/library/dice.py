import d20

from tagging.errors import ParseError
from tagging.methods import Method

MAX_ROLLS = 1000


def _roller():
    return d20.Roller(context=d20.RollContext(max_rolls=MAX_ROLLS))


def _do_roll(dice):
    try:
        return _roller().roll(dice.strip())
    except d20.RollError as e:
        raise ParseError(f"Invalid roll `{dice}`: {e}")


def roll(env, dice):
    """``{roll:1d20+5}`` - the roll's total."""
    return str(_do_roll(dice).total)


def vroll(env, dice):
    """``{vroll:1d20+5}`` - the full roll, e.g. ``1d20 (12) + 5 = `17```."""
    return str(_do_roll(dice))


METHODS = (
    Method("roll", simple=lambda env: roll(env, "1d20"), complex=roll),
    Method("vroll", simple=lambda env: vroll(env, "1d20"), complex=vroll),
)
