from typing import Callable, Iterable, List, Optional, TypeVar

from .parser import ParseFn
from .result import ParseResult
from .stream import length

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")


def discard(parse_fn: ParseFn[S, A]) -> ParseFn[S, A]:
    def discard(stream: S) -> Optional[ParseResult[S, A]]:
        r = parse_fn(stream)
        if r is None:
            return None
        return ParseResult(r.backlog, [])

    return discard


def optional(parse_fn: ParseFn[S, A]) -> ParseFn[S, A]:
    def optional(stream: S) -> Optional[ParseResult[S, A]]:
        r = parse_fn(stream)
        if r is None:
            return ParseResult(stream, [])
        return r

    return optional


def either(parse_fn: ParseFn[S, A], second_fn: ParseFn[S, A]) -> ParseFn[S, A]:
    def either(stream: S) -> Optional[ParseResult[S, A]]:
        r = parse_fn(stream)
        if r is not None:
            return r
        return second_fn(stream)

    return either


def one_of(parse_fns: Iterable[ParseFn[S, A]]) -> ParseFn[S, A]:
    fns = tuple(parse_fns)

    def one_of(stream: S) -> Optional[ParseResult[S, A]]:
        for fn in fns:
            r = fn(stream)
            if r is not None:
                return r
        return None

    return one_of


def pair_of(
        parse_fn: ParseFn[S, A], second_fn: ParseFn[S, A]) -> ParseFn[S, A]:
    def pair_of(stream: S) -> Optional[ParseResult[S, A]]:
        ra = parse_fn(stream)
        if ra is None:
            return None
        rb = second_fn(ra.backlog)
        if rb is None:
            return None
        return ParseResult(rb.backlog, ra.values + rb.values)

    return pair_of


def sequence_of(parse_fns: Iterable[ParseFn[S, A]]) -> ParseFn[S, A]:
    fns = tuple(parse_fns)

    def sequence_of(stream: S) -> Optional[ParseResult[S, A]]:
        values: List[A] = []
        for fn in fns:
            r = fn(stream)
            if r is None:
                return None
            values.extend(r.values)
            stream = r.backlog
        return ParseResult(stream, values)

    return sequence_of


def one_or_more(parse_fn: ParseFn[S, A]) -> ParseFn[S, A]:
    def one_or_more(stream: S) -> Optional[ParseResult[S, A]]:
        r = parse_fn(stream)
        if r is None:
            return None
        values: List[A] = []
        while r is not None:
            values.extend(r.values)
            # zero-width match: repeating it would never terminate
            if length(r.backlog) == length(stream):
                break
            stream = r.backlog
            r = parse_fn(stream)
        return ParseResult(stream, values)

    return one_or_more


def zero_or_more(parse_fn: ParseFn[S, A]) -> ParseFn[S, A]:
    return optional(one_or_more(parse_fn))


def fmap(
        fn: Callable[[List[A]], Iterable[B]],
        parse_fn: ParseFn[S, A]) -> ParseFn[S, B]:
    def fmap(stream: S) -> Optional[ParseResult[S, B]]:
        r = parse_fn(stream)
        if r is None:
            return None
        return r.fmap(fn)

    return fmap


def bind(
        fn: Callable[[ParseResult[S, A]], Optional[ParseResult[S, B]]],
        parse_fn: ParseFn[S, A]) -> ParseFn[S, B]:
    def bind(stream: S) -> Optional[ParseResult[S, B]]:
        r = parse_fn(stream)
        if r is None:
            return None
        return fn(r)

    return bind
