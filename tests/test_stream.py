from typing import Any, List, Sequence

import pytest

from chomp import ParseResult, Stream, View, literal, run, satisfy
from chomp.core.stream import drop, length, starts_with


class Tape:
    """Minimal host input type implementing the stream protocol."""

    def __init__(self, cells: Sequence[int], pos: int = 0):
        self.cells = cells
        self.pos = pos

    def __len__(self) -> int:
        return len(self.cells) - self.pos

    def startswith(self, prefix: Any) -> bool:
        n = len(prefix)
        return list(self.cells[self.pos:self.pos + n]) == list(prefix)

    def drop(self, n: int) -> "Tape":
        return Tape(self.cells, self.pos + n)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Tape) and
            list(self.cells[self.pos:]) == list(other.cells[other.pos:])
        )


DATA_STARTS_WITH = [
    ("abc", "ab", True),
    ("abc", "", True),
    ("abc", "b", False),
    ("", "a", False),
    (b"abc", b"a", True),
    (["a", "b"], ["a"], True),
    (["a", "b"], ("a", "b"), True),
    (("a", "b"), ["b"], False),
    (["a"], ["a", "b"], False),
    (View("xabc", 1), "ab", True),
    (View("xabc", 1), "x", False),
    (View(["x", "a"], 1), ["a"], True),
    (View(["x", "a"], 1), View(["a"]), True),
    ("abc", View("xab", 1), True),
    (b"abc", View(b"xb", 1), False),
    (Tape([1, 2, 3]), [1, 2], True),
    (Tape([1, 2, 3], 1), [1, 2], False),
]


@pytest.mark.parametrize("stream, prefix, expected", DATA_STARTS_WITH)
def test_starts_with(stream: Any, prefix: Any, expected: bool) -> None:
    assert starts_with(stream, prefix) is expected


def test_drop_keeps_representation() -> None:
    assert drop("abc", 2) == "c"
    assert drop(["a", "b"], 1) == ["b"]
    assert drop(("a", "b"), 2) == ()
    assert drop(Tape([1, 2, 3]), 1) == Tape([2, 3])
    assert type(drop(View("abc"), 1)) is View


def test_drop_zero_is_identity() -> None:
    s = ["a"]
    assert drop(s, 0) is s


def test_length() -> None:
    assert length("abc") == 3
    assert length(View("abc", 2)) == 1
    assert length(Tape([1, 2, 3], 3)) == 0


def test_stream_protocol() -> None:
    assert isinstance(View("a"), Stream)
    assert isinstance(Tape([]), Stream)
    assert not isinstance("a", Stream)
    assert not isinstance(["a"], Stream)


def test_view() -> None:
    v = View("abcd").drop(1)
    assert len(v) == 3
    assert v[0] == "b"
    assert v[-1] == "d"
    assert v[1:] == "cd"
    assert list(v) == ["b", "c", "d"]
    assert v.materialize() == "bcd"
    assert v == "bcd"
    assert v == View("xxbcd", 2)
    assert v != "abcd"
    assert v.drop(10) == ""
    assert repr(v) == "View('abcd', 1)"


def test_view_index_error() -> None:
    with pytest.raises(IndexError):
        View("ab", 2)[0]


def test_view_position_out_of_range() -> None:
    with pytest.raises(ValueError):
        View("ab", 3)
    with pytest.raises(ValueError):
        View("ab", -1)


def test_parsers_over_host_type() -> None:
    parser = (literal([1, 2]) + literal([3])).fmap(lambda v: [len(v)])
    assert run(parser, Tape([1, 2, 3])) == 2
    assert run(parser, Tape([1, 3, 3])) is None


def test_satisfy_over_tokens() -> None:
    tokens: List[str] = ["if", "x"]
    r = satisfy(lambda t: t == "if")(tokens)
    assert r is not None
    assert r.backlog == ["x"]
    assert r.values == ["if"]


def test_view_fragment_on_plain_string() -> None:
    assert literal(View("ab"))("abc") == ParseResult("c", [View("ab")])
