from typing import Any, Callable, Iterable, List, Optional, TypeVar

from .parser import ParseFn, ParseObj
from .result import ParseResult
from .stream import drop, head, length, starts_with

S = TypeVar("S")
A_co = TypeVar("A_co", covariant=True)
T = TypeVar("T")


class Succeed(ParseObj[S, A_co]):
    def __init__(self, values: Iterable[A_co]):
        self._values: List[A_co] = list(values)

    def parse_fn(self, stream: S) -> Optional[ParseResult[S, A_co]]:
        return ParseResult(stream, list(self._values))


class Fail(ParseObj[Any, Any]):
    def parse_fn(self, stream: Any) -> None:
        return None


def literal(fragment: S) -> ParseFn[S, S]:
    ls = length(fragment)

    def literal(stream: S) -> Optional[ParseResult[S, S]]:
        if starts_with(stream, fragment):
            return ParseResult(drop(stream, ls), [fragment])
        return None

    return literal


def satisfy(test: Callable[[T], bool]) -> ParseFn[Any, T]:
    def satisfy(stream: Any) -> Optional[ParseResult[Any, T]]:
        if length(stream):
            t = head(stream)
            if test(t):
                return ParseResult(drop(stream, 1), [t])
        return None

    return satisfy


def end() -> ParseFn[Any, Any]:
    def end(stream: Any) -> Optional[ParseResult[Any, Any]]:
        if length(stream) == 0:
            return ParseResult(stream, [])
        return None

    return end
