"""
Errors raised while building or running a tag parser. Only :exc:`ParseError` is user-facing: its message
replaces the output of the tag that raised it.
"""

__all__ = ("TagException", "ParseError", "InvalidArgument")


class TagException(Exception):
    """A base exception class."""

    def __init__(self, msg):
        super().__init__(msg)


class ParseError(TagException):
    """Raised by a method to abort the current parse. The message becomes the entire output."""

    def __init__(self, msg=None):
        super().__init__(msg or "An error occurred while parsing the tag.")


class InvalidArgument(TagException):
    """Raised when a parser or method is configured incorrectly."""

    pass
