"""
Sentinel substitution for escaped and already-substituted braces.

User escapes (``\\{``, ``\\|``, ``\\}``) are swapped for control characters before scanning so they never
delimit a tag. Handler output goes through :func:`filter_all`, which additionally swaps literal braces for a
second pair of sentinels, so text a method returns is never scanned again. :func:`defilter_all` undoes both.
"""

ESCAPED_OPEN = "\u0012"
ESCAPED_PIPE = "\u0013"
ESCAPED_CLOSE = "\u0014"
FOLDED_OPEN = "\u0015"
FOLDED_CLOSE = "\u0016"

SENTINELS = (ESCAPED_OPEN, ESCAPED_PIPE, ESCAPED_CLOSE, FOLDED_OPEN, FOLDED_CLOSE)


def filter_escapes(string: str) -> str:
    return string.replace("\\{", ESCAPED_OPEN).replace("\\|", ESCAPED_PIPE).replace("\\}", ESCAPED_CLOSE)


def defilter_escapes(string: str) -> str:
    # escapes are normalized back to their backslash form, not unescaped
    return string.replace(ESCAPED_OPEN, "\\{").replace(ESCAPED_PIPE, "\\|").replace(ESCAPED_CLOSE, "\\}")


def filter_all(string: str) -> str:
    """Makes a method's result inert: nothing in it can close or open a tag."""
    return filter_escapes(string).replace("{", FOLDED_OPEN).replace("}", FOLDED_CLOSE)


def defilter_all(string: str) -> str:
    """Restores every sentinel to the text it stands for."""
    return defilter_escapes(string).replace(FOLDED_OPEN, "{").replace(FOLDED_CLOSE, "}")
