from typing import Any, Generic, Iterator, Sequence, TypeVar, Union, overload

from typing_extensions import Protocol, final, runtime_checkable

T = TypeVar("T")
S = TypeVar("S")


@runtime_checkable
class Stream(Protocol):
    """
    Capabilities an input type needs to be parsed without adaptation.
    """

    def __len__(self) -> int:
        ...

    def startswith(self, prefix: Any) -> bool:
        ...

    def drop(self, n: int) -> "Stream":
        ...


def _seq_startswith(
        data: Sequence[T], pos: int, prefix: Sequence[T]) -> bool:
    n = len(prefix)
    if n > len(data) - pos:
        return False
    for i in range(n):
        if data[pos + i] != prefix[i]:
            return False
    return True


@final
class View(Generic[T]):
    """
    Suffix of a string or token sequence that drops elements by moving an
    offset instead of copying the remainder.

    >>> from chomp import View

    >>> View("abc").drop(1)
    View('abc', 1)
    >>> View("abc").drop(1) == "bc"
    True

    :param data: Underlying string or sequence
    :param pos: Offset of the first element of the suffix
    """

    __slots__ = "_data", "_pos"

    def __init__(self, data: Sequence[T], pos: int = 0):
        if pos < 0 or pos > len(data):
            raise ValueError("Position out of range: {!r}".format(pos))
        self._data = data
        self._pos = pos

    @property
    def data(self) -> Sequence[T]:
        return self._data

    @property
    def pos(self) -> int:
        return self._pos

    def __len__(self) -> int:
        return len(self._data) - self._pos

    def startswith(self, prefix: Sequence[T]) -> bool:
        data = self._data
        if isinstance(prefix, View):
            prefix = prefix.materialize()
        if isinstance(data, (str, bytes)):
            return data.startswith(prefix, self._pos)  # type: ignore
        return _seq_startswith(data, self._pos, prefix)

    def drop(self, n: int) -> "View[T]":
        if n == 0:
            return self
        return View(self._data, min(self._pos + n, len(self._data)))

    def materialize(self) -> Sequence[T]:
        if self._pos == 0:
            return self._data
        return self._data[self._pos:]

    @overload
    def __getitem__(self, index: int) -> T:
        ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[T]:
        ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            return self.materialize()[index]
        if index < 0:
            index += len(self)
        if index < 0 or index >= len(self):
            raise IndexError("View index out of range")
        return self._data[self._pos + index]

    def __iter__(self) -> Iterator[T]:
        data = self._data
        for i in range(self._pos, len(data)):
            yield data[i]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, View):
            other = other.materialize()
        return self.materialize() == other

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return "View({!r}, {!r})".format(self._data, self._pos)


def length(stream: Any) -> int:
    return len(stream)


def starts_with(stream: Any, prefix: Any) -> bool:
    if isinstance(stream, (str, bytes)):
        if isinstance(prefix, View):
            prefix = prefix.materialize()
        return stream.startswith(prefix)
    if type(stream) is View or isinstance(stream, Stream):
        return stream.startswith(prefix)
    return _seq_startswith(stream, 0, prefix)


def drop(stream: S, n: int) -> S:
    if n == 0:
        return stream
    if type(stream) is View or isinstance(stream, Stream):
        return stream.drop(n)  # type: ignore
    return stream[n:]  # type: ignore


def head(stream: Any) -> Any:
    return stream[0]
