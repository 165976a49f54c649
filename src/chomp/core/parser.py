from abc import abstractmethod
from typing import Callable, Generic, Optional, TypeVar

from .result import ParseResult

S = TypeVar("S")
A_co = TypeVar("A_co", covariant=True)


ParseFn = Callable[[S], Optional[ParseResult[S, A_co]]]


class ParseObj(Generic[S, A_co]):
    @abstractmethod
    def parse_fn(self, stream: S) -> Optional[ParseResult[S, A_co]]:
        ...

    def to_fn(self) -> ParseFn[S, A_co]:
        return self.parse_fn

    def __call__(self, stream: S) -> Optional[ParseResult[S, A_co]]:
        return self.parse_fn(stream)
