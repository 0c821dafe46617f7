import re
from typing import Callable, List, Optional

from tagging.environment import Environment
from tagging.errors import InvalidArgument

__all__ = ("Method", "split_params")

# a pipe not preceded by a backslash-escape
PARAM_SPLIT_RE = re.compile(r"(?<!\\)\|")

SimpleFunc = Callable[[Environment], Optional[str]]
ComplexFunc = Callable[[Environment, str], Optional[str]]


def split_params(params: str, maxsplit: int = 0) -> List[str]:
    """
    Splits a tag's parameter string on unescaped pipes.

    >>> split_params("a|b\\\\|c|d", maxsplit=1)
    ['a', 'b\\\\|c|d']
    """
    return PARAM_SPLIT_RE.split(params, maxsplit=maxsplit)


class Method:
    """
    A named tag. ``{name}`` calls *simple* with the environment; ``{name:params}`` calls *complex* with the
    environment and the parameter string (or, if *split* is set, the list of parameters split on unescaped ``|``).

    Either function may raise :exc:`~tagging.errors.ParseError` to abort the parse, or return ``None`` to leave the
    tag in the output as written. A form that was not given behaves as if it returned ``None``.
    """

    __slots__ = ("_name", "_simple", "_complex", "_split")

    def __init__(
        self,
        name: str,
        simple: Optional[SimpleFunc] = None,
        complex: Optional[Callable] = None,
        split: bool = False,
    ):
        if not name or name != name.strip():
            raise InvalidArgument(f"Invalid method name: {name!r}")
        if simple is None and complex is None:
            raise InvalidArgument(f"Method {name!r} must define a simple or a complex form.")
        self._name = name
        self._simple = simple
        self._complex = complex
        self._split = split

    @property
    def name(self) -> str:
        return self._name

    def parse_simple(self, environment: Environment) -> Optional[str]:
        if self._simple is None:
            return None
        return self._simple(environment)

    def parse_complex(self, environment: Environment, params: str) -> Optional[str]:
        if self._complex is None:
            return None
        if self._split:
            return self._complex(environment, split_params(params))
        return self._complex(environment, params)

    def __repr__(self):
        forms = [f for f, func in (("simple", self._simple), ("complex", self._complex)) if func is not None]
        return f"<Method name={self._name!r} forms={forms}>"
