"""
Primitive parsers.
"""

from typing import Any, Callable, Iterable, TypeVar

from .core import primitive
from .parser import FnParser, Parser, _check_fn

__all__ = (
    "Succeed", "Fail", "succeed", "fail", "literal", "satisfy", "end"
)

S = TypeVar("S")
A_co = TypeVar("A_co", covariant=True)
T = TypeVar("T")


class Succeed(primitive.Succeed[S, A_co], Parser[S, A_co]):
    """
    Parser that always succeeds, consumes no input, and produces a fixed
    list of values.

    >>> from chomp.primitive import Succeed

    >>> Succeed([1, 2])("abc")
    ParseResult(backlog='abc', values=[1, 2])

    :param values: Values to produce
    """


class Fail(primitive.Fail, Parser[Any, Any]):
    """
    Parser that always fails.

    >>> from chomp.primitive import Fail

    >>> Fail()("abc")
    """


def succeed(values: Iterable[A_co]) -> Parser[Any, A_co]:
    """
    Alias for :class:`Succeed`.

    :param values: Values to produce
    """

    return Succeed(values)


def fail() -> Parser[Any, Any]:
    """
    Alias for :class:`Fail`.
    """

    return Fail()


def literal(fragment: S) -> Parser[S, S]:
    """
    Parses ``fragment`` and produces it as the only value. ``fragment`` must
    be of the same kind as the input: a string for strings, a sequence of
    tokens for token sequences. An empty fragment always succeeds without
    consuming input.

    >>> from chomp.primitive import literal

    >>> literal("ab")("abc")
    ParseResult(backlog='c', values=['ab'])
    >>> literal("ab")("ac")
    >>> literal(["if", "("])(["if", "(", "x"])
    ParseResult(backlog=['x'], values=[['if', '(']])

    :param fragment: Input fragment to match
    """

    return FnParser(primitive.literal(fragment))


def satisfy(test: Callable[[T], bool]) -> Parser[Any, T]:
    """
    Consumes one element of the input for which ``test`` returns ``True``
    and produces it.

    >>> from chomp.primitive import satisfy

    >>> satisfy(str.isdigit)("1a")
    ParseResult(backlog='a', values=['1'])
    >>> satisfy(str.isdigit)("a1")

    :param test: Predicate for input elements
    """

    _check_fn(test)
    return FnParser(primitive.satisfy(test))


def end() -> Parser[Any, Any]:
    """
    Succeeds at the end of the input.

    >>> from chomp.primitive import end

    >>> end()("")
    ParseResult(backlog='', values=[])
    >>> end()("a")
    """

    return FnParser(primitive.end())
