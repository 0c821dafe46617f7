"""
A small library of everyday methods. None of these are part of the tag language itself; hosts can leave them out
or register their own alongside them.
"""
from . import dice, functional, strings, variables

__all__ = ("default_methods",)


def default_methods():
    """
    Returns every built-in method.

    :rtype: list[tagging.methods.Method]
    """
    return [*strings.METHODS, *functional.METHODS, *dice.METHODS, *variables.METHODS]
