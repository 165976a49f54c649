"""
Outcome of running a parser to completion.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from typing_extensions import Literal

A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")

FailureKind = Literal["no-match", "unconsumed", "value-count"]


@dataclass(frozen=True)
class Failure:
    """
    Description of why a parser didn't produce a single value.

    :param kind: ``"no-match"`` if the parser failed, ``"unconsumed"`` if it
        left part of the input unparsed, ``"value-count"`` if it produced
        zero or several values
    :param pos: Number of consumed input elements
    :param count: Number of produced values
    """

    kind: FailureKind
    pos: int = 0
    count: int = 0

    @property
    def msg(self) -> str:
        """
        Human-readable description of the failure.
        """

        res = "at {}: ".format(self.pos)
        if self.kind == "no-match":
            return res + "no match"
        if self.kind == "unconsumed":
            return res + "unconsumed input"
        return res + "expected exactly one value, got {}".format(self.count)


class ParseError(Exception):
    """
    Exception that is raised if a parser was unable to parse the input.

    :param failure: Failure description
    """

    def __init__(self, failure: Failure):
        super().__init__(failure)
        self.failure = failure

    def __str__(self) -> str:
        return self.failure.msg


class Outcome(Generic[A_co]):
    """
    Result of running a parser over the whole input.
    """

    __slots__ = "_value", "_failure"

    def __init__(self, value: A_co, failure: Optional[Failure] = None):
        self._value = value
        self._failure = failure

    def __repr__(self) -> str:
        if self._failure is None:
            return "Outcome(value={!r})".format(self._value)
        return "Outcome(failure={!r})".format(self._failure)

    @property
    def failure(self) -> Optional[Failure]:
        """
        Failure description, ``None`` on success.
        """

        return self._failure

    def fmap(self, fn: Callable[[A_co], B]) -> "Outcome[B]":
        """
        Transforms :class:`Outcome`\\[``A_co``] into :class:`Outcome`\\[``B``]
        by applying ``fn`` to the value. Failed outcomes are passed through.

        :param fn: Function to apply to value
        """

        if self._failure is not None:
            return Outcome(None, self._failure)  # type: ignore
        return Outcome(fn(self._value))

    def unwrap(self) -> A_co:
        """
        Returns parsed value if there is one. Otherwise throws
        :exc:`ParseError`.

        :raise: :exc:`ParseError`
        """

        if self._failure is not None:
            raise ParseError(self._failure)
        return self._value
