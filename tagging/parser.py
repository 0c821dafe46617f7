import asyncio
import logging
import threading
from collections import namedtuple
from concurrent.futures import Future, ThreadPoolExecutor
from types import MappingProxyType
from typing import Callable, Iterable, Optional

from tagging import config
from tagging.environment import Environment
from tagging.errors import InvalidArgument, ParseError
from tagging.filters import defilter_all, filter_all, filter_escapes
from tagging.methods import Method

__all__ = ("Parser", "ParseResult")

log = logging.getLogger(__name__)

ParseResult = namedtuple("ParseResult", "parsed environment")
ParseResult.__doc__ = "The output of a parse, and the environment it ran against (a copy, for async parses)."


class Parser:
    """
    Expands tags in a string, innermost first, until none are left or a limit is hit.

    ``put``, ``clear`` and ``parse(input)`` share one lock. ``parse_async`` runs on a single worker private to this
    parser, one parse at a time in submission order, against a copy of the environment taken when it was submitted.
    """

    def __init__(
        self,
        methods: Iterable[Method],
        iterations: int = config.MAX_ITERATIONS,
        max_length: int = config.MAX_LENGTH,
        max_output: int = config.MAX_OUTPUT,
    ):
        """
        It's usually nicer to use :class:`~tagging.builder.ParserBuilder` than to call this directly.

        :param methods: The methods available to tags. If two share a name, the last one wins.
        :param int iterations: The maximum number of tags evaluated in one parse.
        :param int max_length: The maximum length of the working string.
        :param int max_output: The maximum length of the output.
        """
        for limit_name, limit in (("iterations", iterations), ("max_length", max_length), ("max_output", max_output)):
            if limit <= 0:
                raise InvalidArgument(f"{limit_name} must be positive, got {limit}.")

        registry = {}
        for method in methods:
            if method.name in registry:
                log.warning(f"Method {method.name!r} registered more than once, keeping the last one.")
            registry[method.name] = method
        self._methods = MappingProxyType(registry)

        self._iterations = iterations
        self._max_length = max_length
        self._max_output = max_output

        self._environment = Environment()
        # methods may call back into their own parser
        self._lock = threading.RLock()
        self._worker = ThreadPoolExecutor(max_workers=1, thread_name_prefix=config.WORKER_NAME)

    # ==== properties ====
    @property
    def methods(self):
        """A read-only mapping of method name to method."""
        return self._methods

    @property
    def iterations(self):
        return self._iterations

    @property
    def max_length(self):
        return self._max_length

    @property
    def max_output(self):
        return self._max_output

    # ==== environment ====
    def put(self, key: str, value):
        """Adds an object to the environment used by later parses. Returns the parser."""
        with self._lock:
            self._environment.put(key, value)
        return self

    def clear(self):
        """Removes every object from the environment. Returns the parser."""
        with self._lock:
            self._environment.clear()
        return self

    # ==== parsing ====
    def parse(self, input: str, environment: Optional[Environment] = None) -> str:
        """
        Parses a string.

        Without *environment*, runs against the parser's own environment while holding its lock. With one, runs
        against that environment directly; keeping it safe from other threads is the caller's job.
        """
        if environment is not None:
            return self._expand(input, environment)
        with self._lock:
            return self._expand(input, self._environment)

    def parse_async(
        self, input: str, callback: Optional[Callable[[ParseResult], None]] = None
    ) -> "Future[ParseResult]":
        """
        Parses a string on the parser's worker. The environment is copied now, so later ``put``/``clear`` calls don't
        affect this parse, and this parse's changes don't leak back.

        :param input: The string to parse.
        :param callback: Called on the worker thread with the :class:`ParseResult` once the parse is done.
        :return: A future resolving to the same :class:`ParseResult`.
        """
        with self._lock:
            environment = self._environment.copy()

        def job():
            result = ParseResult(self._expand(input, environment), environment)
            if callback is not None:
                callback(result)
            return result

        return self._worker.submit(job)

    async def parse_coro(self, input: str) -> ParseResult:
        """Async convenience method around :meth:`Parser.parse_async`."""
        return await asyncio.wrap_future(self.parse_async(input))

    def close(self, wait=True):
        """Stops the async worker. Synchronous parsing still works after this."""
        self._worker.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # ==== engine ====
    def _expand(self, input: str, environment: Environment) -> str:
        output = filter_escapes(input)
        count = 0
        last = ""
        while output != last and count < self._iterations and len(output) <= self._max_length:
            last = output
            close = output.find("}")
            start = output.rfind("{", 0, close + 1) if close != -1 else -1
            if start != -1:
                contents = output[start + 1 : close]
                try:
                    result = self._dispatch(contents, environment)
                except ParseError as e:
                    log.debug(f"Parse aborted by {contents!r}: {e}")
                    return str(e)
                if result is None:
                    result = "{" + contents + "}"
                output = output[:start] + filter_all(str(result)) + output[close + 1 :]
            count += 1

        # a pass that changed nothing means expansion finished on its own
        if output != last and count >= self._iterations:
            log.debug(f"Parse stopped after {count} iterations.")
        elif output != last and len(output) > self._max_length:
            log.debug(f"Parse stopped at length {len(output)} (max {self._max_length}).")

        output = defilter_all(output)
        if len(output) > self._max_output:
            log.debug(f"Truncating output of length {len(output)} to {self._max_output}.")
            output = output[: self._max_output]
        return output

    def _dispatch(self, contents: str, environment: Environment):
        name, sep, params = contents.partition(":")
        method = self._methods.get(name.strip())
        if method is None:
            return None
        if not sep:
            return method.parse_simple(environment)
        return method.parse_complex(environment, defilter_all(params))

    def __repr__(self):
        return (
            f"<Parser methods={len(self._methods)} iterations={self._iterations} max_length={self._max_length} "
            f"max_output={self._max_output}>"
        )
