from typing import Iterable

from tagging import config
from tagging.errors import InvalidArgument
from tagging.methods import Method
from tagging.parser import Parser


class ParserBuilder:
    """
    Collects methods and limits, then builds a :class:`~tagging.parser.Parser`.

    >>> from tagging.library import default_methods
    >>> parser = ParserBuilder().add_methods(default_methods()).set_max_output(2000).build()
    """

    def __init__(self):
        self.methods = []
        self.iterations = config.MAX_ITERATIONS
        self.max_length = config.MAX_LENGTH
        self.max_output = config.MAX_OUTPUT

    def add_method(self, method: Method):
        if not isinstance(method, Method):
            raise InvalidArgument(f"Expected a Method, got {type(method).__name__}.")
        self.methods.append(method)
        return self

    def add_methods(self, methods: Iterable[Method]):
        for method in methods:
            self.add_method(method)
        return self

    def set_iterations(self, iterations: int):
        self.iterations = _positive("iterations", iterations)
        return self

    def set_max_length(self, max_length: int):
        self.max_length = _positive("max_length", max_length)
        return self

    def set_max_output(self, max_output: int):
        self.max_output = _positive("max_output", max_output)
        return self

    def build(self) -> Parser:
        return Parser(self.methods, self.iterations, self.max_length, self.max_output)


def _positive(name, value):
    try:
        value = int(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}.")
    if value <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value}.")
    return value
