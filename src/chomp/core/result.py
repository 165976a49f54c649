from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, List, TypeVar

from .stream import length

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class ParseResult(Generic[S, A]):
    """
    Outcome of a successful parse.

    :param backlog: Unconsumed suffix of the input
    :param values: Values produced so far, in parse order
    """

    backlog: S
    values: List[A] = field(default_factory=list)

    def fmap(
            self,
            fn: Callable[[List[A]], Iterable[B]]) -> "ParseResult[S, B]":
        values = fn(self.values)
        if isinstance(values, (str, bytes)):
            raise TypeError(
                "fmap function must return a list of values, got {!r}; "
                "wrap a single value as [value]".format(values)
            )
        return ParseResult(self.backlog, list(values))

    def consumed(self, stream: S) -> int:
        """
        Number of elements consumed from ``stream`` to reach this result.
        """

        return length(stream) - length(self.backlog)
