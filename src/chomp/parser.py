"""
Parser combinators.
"""

import logging
from typing import (
    Any, Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar
)

from .core import combinators
from .core.parser import ParseFn, ParseObj
from .core.result import ParseResult
from .core.stream import length
from .types import Failure, Outcome

S = TypeVar("S")
A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")

log = logging.getLogger(__name__)


class Parser(ParseObj[S, A_co]):
    def run(self, stream: S) -> Optional[A_co]:
        """
        Parses the whole input and returns the single produced value, or
        ``None`` if the input can't be parsed that way.

        :param stream: Input to parse
        """

        return run(self, stream)

    def parse(self, stream: S) -> Outcome[A_co]:
        """
        Parses the whole input, keeping the reason of a failure.

        >>> from chomp.primitive import literal

        >>> literal("a").parse("a").unwrap()
        'a'
        >>> literal("a").parse("ab").unwrap()
        Traceback (most recent call last):
          ...
        chomp.types.ParseError: at 1: unconsumed input

        :param stream: Input to parse
        """

        return parse(self, stream)

    def fmap(
            self,
            fn: Callable[[List[A_co]], Iterable[B]]) -> "Parser[S, B]":
        """
        Replaces the produced values with the result of ``fn`` applied to the
        whole list of them.
        ``fn`` must return a list (or another non-string iterable) of values;
        a ``str`` or ``bytes`` result raises :exc:`TypeError`, return
        ``[value]`` instead.

        >>> from chomp.primitive import literal

        >>> parser = literal("a") + literal("b")

        >>> parser.fmap(lambda v: ["".join(v)]).run("ab")
        'ab'

        :param fn: Function to produce new values from the produced values
        """

        return fmap(fn, self)

    def bind(
            self,
            fn: Callable[[ParseResult[S, A_co]], Optional[ParseResult[S, B]]]
    ) -> "Parser[S, B]":
        """
        Calls ``fn`` with the result of the parser and returns whatever it
        returns. ``fn`` may return ``None`` to reject the result.

        >>> from chomp.primitive import literal

        >>> parser = literal("a").one_or_more().bind(
        ...     lambda r: r if len(r.values) <= 2 else None
        ... )

        >>> parser("aab")
        ParseResult(backlog='b', values=['a', 'a'])
        >>> parser("aaab")

        :param fn: Function that inspects the result
        """

        return bind(fn, self)

    def discard(self) -> "Parser[S, A_co]":
        """
        Applies the parser and drops the produced values.

        >>> from chomp.primitive import literal

        >>> literal(",").discard()(",a")
        ParseResult(backlog='a', values=[])
        """

        return discard(self)

    def optional(self) -> "Parser[S, A_co]":
        """
        Applies the parser. If it fails, succeeds without consuming input or
        producing values.

        >>> from chomp.primitive import literal

        >>> literal("a").optional()("b")
        ParseResult(backlog='b', values=[])
        """

        return optional(self)

    def one_or_more(self) -> "Parser[S, A_co]":
        """
        Applies the parser as many times as possible, at least once.

        >>> from chomp.primitive import literal

        >>> literal("a").one_or_more()("aab")
        ParseResult(backlog='b', values=['a', 'a'])
        >>> literal("a").one_or_more()("b")
        """

        return one_or_more(self)

    def zero_or_more(self) -> "Parser[S, A_co]":
        """
        Applies the parser as many times as possible.

        >>> from chomp.primitive import literal

        >>> literal("a").zero_or_more()("b")
        ParseResult(backlog='b', values=[])
        """

        return zero_or_more(self)

    def sep_by(self, sep: ParseObj[S, Any]) -> "Parser[S, A_co]":
        """
        Applies the parser zero or more times, with ``sep`` in between.
        Values of ``sep`` are discarded.

        >>> from chomp.primitive import literal

        >>> literal("a").sep_by(literal(","))("a,a,a")
        ParseResult(backlog='', values=['a', 'a', 'a'])

        :param sep: Separators parser
        """

        return sep_by(self, sep)

    def between(
            self, open: ParseObj[S, Any],
            close: ParseObj[S, Any]) -> "Parser[S, A_co]":
        """
        Applies ``open``, then the parser, then ``close``, and keeps only the
        values of the parser.

        >>> from chomp.primitive import literal

        >>> literal("a").between(literal("("), literal(")")).run("(a)")
        'a'

        :param open: 'Opening bracket' parser
        :param close: 'Closing bracket' parser
        """

        return between(open, close, self)

    def __or__(self, other: ParseObj[S, A_co]) -> "Parser[S, A_co]":
        """
        Ordered choice. ``a | b | c`` is the same as ``one_of([a, b, c])``.

        >>> from chomp.primitive import literal

        >>> parser = literal("ab") | literal("a")

        >>> parser("abc")
        ParseResult(backlog='c', values=['ab'])
        >>> parser("ac")
        ParseResult(backlog='c', values=['a'])
        >>> parser("c")

        :param other: Alternative parser
        """

        return one_of([*_alternatives(self), *_alternatives(other)])

    def __add__(self, other: ParseObj[S, A_co]) -> "Parser[S, A_co]":
        """
        Sequencing. ``a + b + c`` is the same as ``sequence_of([a, b, c])``.

        >>> from chomp.primitive import literal

        >>> (literal("a") + literal("b"))("abc")
        ParseResult(backlog='c', values=['a', 'b'])

        :param other: Next parser
        """

        return sequence_of([*_stages(self), *_stages(other)])


class FnParser(Parser[S, A_co]):
    def __init__(self, fn: ParseFn[S, A_co]):
        self._fn = fn

    def to_fn(self) -> ParseFn[S, A_co]:
        return self._fn

    def parse_fn(self, stream: S) -> Optional[ParseResult[S, A_co]]:
        return self._fn(stream)


class _OneOf(FnParser[S, A_co]):
    def __init__(self, parsers: Sequence[ParseObj[S, A_co]]):
        super().__init__(combinators.one_of([p.to_fn() for p in parsers]))
        self.parsers = parsers


class _SequenceOf(FnParser[S, A_co]):
    def __init__(self, parsers: Sequence[ParseObj[S, A_co]]):
        super().__init__(
            combinators.sequence_of([p.to_fn() for p in parsers])
        )
        self.parsers = parsers


def _alternatives(parser: ParseObj[S, A]) -> Sequence[ParseObj[S, A]]:
    if isinstance(parser, _OneOf):
        return parser.parsers
    return (parser,)


def _stages(parser: ParseObj[S, A]) -> Sequence[ParseObj[S, A]]:
    if isinstance(parser, _SequenceOf):
        return parser.parsers
    return (parser,)


class Delay(Parser[S, A_co]):
    """
    A subclass of :class:`Parser` to use as a forward declaration.

    >>> from chomp import Delay
    >>> from chomp.primitive import literal

    >>> parser = Delay()
    >>> parser.define((literal("(") + parser + literal(")")).optional())

    >>> parser("(())")
    ParseResult(backlog='', values=['(', '(', ')', ')'])
    """

    def __init__(self) -> None:
        def _fn(stream: S) -> Optional[ParseResult[S, A_co]]:
            raise RuntimeError("Delayed parser was not defined")

        self._defined = False
        self._fn: ParseFn[S, A_co] = _fn

    def define(self, parser: ParseObj[S, A_co]) -> None:
        """
        Define the parser.

        >>> from chomp import Delay
        >>> from chomp.primitive import literal

        >>> parser = Delay()
        >>> parser("a")
        Traceback (most recent call last):
          ...
        RuntimeError: Delayed parser was not defined

        >>> parser.define(literal("a"))
        >>> parser.run("a")
        'a'

        :param parser: Parser definition
        """

        if self._defined:
            raise RuntimeError("Delayed parser was already defined")
        self._defined = True
        self._fn = parser.to_fn()

    def parse_fn(self, stream: S) -> Optional[ParseResult[S, A_co]]:
        return self._fn(stream)

    def to_fn(self) -> ParseFn[S, A_co]:
        if self._defined:
            return self._fn
        return super().to_fn()


def _check_fn(fn: object) -> None:
    if not callable(fn):
        raise TypeError("Expected callable, got {!r}".format(fn))


def discard(parser: ParseObj[S, A]) -> Parser[S, A]:
    """
    :meth:`Parser.discard` as a function.

    :param parser: Parser
    """

    return FnParser(combinators.discard(parser.to_fn()))


def optional(parser: ParseObj[S, A]) -> Parser[S, A]:
    """
    :meth:`Parser.optional` as a function.

    :param parser: Parser
    """

    return FnParser(combinators.optional(parser.to_fn()))


def either(parser: ParseObj[S, A], second: ParseObj[S, A]) -> Parser[S, A]:
    """
    Applies ``parser`` and returns its result unless it fails. In this case
    ``second`` is applied to the same input.

    >>> from chomp.parser import either
    >>> from chomp.primitive import literal

    >>> parser = either(literal("ab"), literal("ac"))

    >>> parser("ac")
    ParseResult(backlog='', values=['ac'])

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.either(parser.to_fn(), second.to_fn()))


def one_of(parsers: Iterable[ParseObj[S, A]]) -> Parser[S, A]:
    """
    Applies the parsers in order to the same input and returns the result of
    the first one that succeeds. Fails if all of them fail, or if
    ``parsers`` is empty.

    >>> from chomp.parser import one_of
    >>> from chomp.primitive import literal

    >>> one_of([literal("a"), literal("b")])("b")
    ParseResult(backlog='', values=['b'])

    :param parsers: Alternatives
    """

    return _OneOf(tuple(parsers))


def pair_of(parser: ParseObj[S, A], second: ParseObj[S, A]) -> Parser[S, A]:
    """
    Applies ``parser``, then ``second`` to the rest of the input, and
    concatenates their values. Fails if either of them fails.

    >>> from chomp.parser import pair_of
    >>> from chomp.primitive import literal

    >>> pair_of(literal("a"), literal("b"))("abc")
    ParseResult(backlog='c', values=['a', 'b'])
    >>> pair_of(literal("a"), literal("b"))("acb")

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.pair_of(parser.to_fn(), second.to_fn()))


def sequence_of(parsers: Iterable[ParseObj[S, A]]) -> Parser[S, A]:
    """
    Applies the parsers one after another and concatenates their values.
    Succeeds without consuming input if ``parsers`` is empty.

    >>> from chomp.parser import sequence_of
    >>> from chomp.primitive import literal

    >>> sequence_of([literal("a"), literal("b"), literal("c")])("abc")
    ParseResult(backlog='', values=['a', 'b', 'c'])

    :param parsers: Parsers to apply
    """

    return _SequenceOf(tuple(parsers))


def one_or_more(parser: ParseObj[S, A]) -> Parser[S, A]:
    """
    :meth:`Parser.one_or_more` as a function.

    A repetition stops after the first iteration that consumes no input.

    :param parser: Parser
    """

    return FnParser(combinators.one_or_more(parser.to_fn()))


def zero_or_more(parser: ParseObj[S, A]) -> Parser[S, A]:
    """
    :meth:`Parser.zero_or_more` as a function.

    :param parser: Parser
    """

    return FnParser(combinators.zero_or_more(parser.to_fn()))


def fmap(
        fn: Callable[[List[A]], Iterable[B]],
        parser: ParseObj[S, A]) -> Parser[S, B]:
    """
    :meth:`Parser.fmap` as a function.

    :param fn: Function to produce new values from the produced values
    :param parser: Parser
    """

    _check_fn(fn)
    return FnParser(combinators.fmap(fn, parser.to_fn()))


def bind(
        fn: Callable[[ParseResult[S, A]], Optional[ParseResult[S, B]]],
        parser: ParseObj[S, A]) -> Parser[S, B]:
    """
    :meth:`Parser.bind` as a function.

    :param fn: Function that inspects the result
    :param parser: Parser
    """

    _check_fn(fn)
    return FnParser(combinators.bind(fn, parser.to_fn()))


def sep_by(parser: ParseObj[S, A], sep: ParseObj[S, Any]) -> Parser[S, A]:
    """
    :meth:`Parser.sep_by` as a function.

    :param parser: Items parser
    :param sep: Separators parser
    """

    rest = zero_or_more(sequence_of([discard(sep), parser]))
    return optional(sequence_of([parser, rest]))


def between(
        open: ParseObj[S, Any], close: ParseObj[S, Any],
        parser: ParseObj[S, A]) -> Parser[S, A]:
    """
    :meth:`Parser.between` as a function.

    :param open: 'Opening bracket' parser
    :param close: 'Closing bracket' parser
    :param parser: Value parser
    """

    return sequence_of([discard(open), parser, discard(close)])


def _complete(
        parser: ParseObj[S, A], stream: S) -> Tuple[Any, Optional[Failure]]:
    r = parser.parse_fn(stream)
    if r is None:
        failure = Failure("no-match")
    elif length(r.backlog):
        failure = Failure("unconsumed", r.consumed(stream), len(r.values))
    elif len(r.values) != 1:
        failure = Failure("value-count", r.consumed(stream), len(r.values))
    else:
        return r.values[0], None
    log.debug("input rejected: %s", failure.msg)
    return None, failure


def run(parser: ParseObj[S, A], stream: S) -> Optional[A]:
    """
    Applies ``parser`` to ``stream`` and returns the produced value if the
    whole input was consumed and exactly one value was produced. Returns
    ``None`` otherwise. Use :func:`parse` to tell a ``None`` value from a
    failure.

    >>> from chomp.parser import run, sequence_of
    >>> from chomp.primitive import literal

    >>> run(literal("foo"), "foo")
    'foo'
    >>> run(literal("foo"), "foox")
    >>> run(sequence_of([literal("a"), literal("b")]), "ab")

    :param parser: Parser to run
    :param stream: Input to parse
    """

    value, _ = _complete(parser, stream)
    return value


def parse(parser: ParseObj[S, A], stream: S) -> Outcome[A]:
    """
    Like :func:`run`, but returns an :class:`~chomp.types.Outcome` that
    describes the failure.

    >>> from chomp.parser import parse
    >>> from chomp.primitive import literal

    >>> parse(literal("a"), "b").failure
    Failure(kind='no-match', pos=0, count=0)

    :param parser: Parser to run
    :param stream: Input to parse
    """

    value, failure = _complete(parser, stream)
    return Outcome(value, failure)
