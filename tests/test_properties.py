"""
Algebraic properties of the primitives and combinators, checked over
generated inputs.
"""

from typing import List

from hypothesis import assume, given
from hypothesis import strategies as st

from chomp import (
    ParseResult, View, discard, either, fail, fmap, literal, one_of,
    one_or_more, optional, pair_of, run, sequence_of, succeed, zero_or_more
)

texts = st.text(alphabet="abc", max_size=8)
short_lists = st.lists(texts, max_size=5)
counts = st.integers(min_value=0, max_value=20)


@given(texts)
def test_literal_parses_any_matching_prefix(s: str) -> None:
    for n in range(len(s) + 1):
        assert literal(s[:n])(s) == ParseResult(s[n:], [s[:n]])


@given(texts, texts)
def test_literal_refuses_non_matching_input(match: str, s: str) -> None:
    assume(not s.startswith(match))
    assert literal(match)(s) is None


@given(texts)
def test_empty_literal_always_matches(s: str) -> None:
    assert literal("")(s) == ParseResult(s, [""])


@given(texts)
def test_fail_is_absorbing(s: str) -> None:
    assert fail()(s) is None


@given(st.lists(st.integers()), texts)
def test_succeed_preserves_input(vs: List[int], s: str) -> None:
    assert succeed(vs)(s) == ParseResult(s, vs)


@given(texts, texts)
def test_discard_nulls_values(match: str, s: str) -> None:
    r = literal(match)(s)
    if r is None:
        assert discard(literal(match))(s) is None
    else:
        assert discard(literal(match))(s) == ParseResult(r.backlog, [])


@given(texts, texts)
def test_optional_never_fails(match: str, s: str) -> None:
    if s.startswith(match):
        expected = ParseResult(s[len(match):], [match])
    else:
        expected = ParseResult(s, [])
    assert optional(literal(match))(s) == expected


@given(texts, texts, texts)
def test_either_is_left_biased(m1: str, m2: str, s: str) -> None:
    r = literal(m1)(s)
    if r is not None:
        assert either(literal(m1), literal(m2))(s) == r
    else:
        assert either(literal(m1), literal(m2))(s) == literal(m2)(s)


@given(texts, texts, texts)
def test_one_of_and_sequence_of_match_binary_forms(
        m1: str, m2: str, s: str) -> None:
    p1, p2 = literal(m1), literal(m2)
    assert one_of([p1, p2])(s) == either(p1, p2)(s)
    assert sequence_of([p1, p2])(s) == pair_of(p1, p2)(s)


@given(short_lists, texts, texts)
def test_one_of_applies_first_successful_parser(
        others: List[str], match: str, tail: str) -> None:
    s = match + tail
    strings = [o for o in others if not s.startswith(o)] + [match] + others
    parser = one_of([literal(x) for x in strings])
    assert parser(s) == ParseResult(tail, [match])


@given(short_lists)
def test_one_of_fails_without_matching_parser(strings: List[str]) -> None:
    s = "".join(strings)
    clean = [x for x in strings if not s.startswith(x)]
    assert one_of([literal(x) for x in clean])(s) is None


@given(short_lists, texts)
def test_sequence_of_applies_all_parsers(
        strings: List[str], tail: str) -> None:
    parser = sequence_of([literal(x) for x in strings])
    assert parser("".join(strings) + tail) == ParseResult(tail, strings)


@given(short_lists, short_lists, texts)
def test_sequence_of_fails_if_one_parser_fails(
        left: List[str], right: List[str], failing: str) -> None:
    assume(not "".join(right).startswith(failing))
    s = "".join(left + right)
    parsers = [literal(x) for x in left + [failing] + right]
    assert sequence_of(parsers)(s) is None


@given(texts, counts, texts)
def test_one_or_more_is_greedy(match: str, n: int, tail: str) -> None:
    assume(match != "" and not tail.startswith(match))
    r = one_or_more(literal(match))(match * (n + 1) + tail)
    assert r == ParseResult(tail, [match] * (n + 1))


@given(texts, texts)
def test_one_or_more_requires_one_match(match: str, s: str) -> None:
    r = one_or_more(literal(match))(s)
    assert (r is None) == (not s.startswith(match))


@given(texts, counts, texts)
def test_zero_or_more_parses_any_number(
        match: str, n: int, tail: str) -> None:
    assume(match != "" and not tail.startswith(match))
    r = zero_or_more(literal(match))(match * n + tail)
    assert r == ParseResult(tail, [match] * n)


@given(texts, texts)
def test_zero_or_more_never_fails(match: str, s: str) -> None:
    assert zero_or_more(literal(match))(s) is not None


@given(texts, texts)
def test_map_transforms_values_only(match: str, s: str) -> None:
    r = literal(match)(s)
    mapped = fmap(lambda v: [len(x) % 2 for x in v], literal(match))(s)
    if r is None:
        assert mapped is None
    else:
        assert mapped == ParseResult(r.backlog, [len(match) % 2])


@given(texts, texts)
def test_run_requires_full_consumption(s: str, extra: str) -> None:
    assert run(literal(s), s) == s
    assume(extra != "")
    assert run(literal(s), s + extra) is None


@given(texts, texts)
def test_view_agrees_with_plain_input(match: str, s: str) -> None:
    parser = zero_or_more(literal(match)) + optional(literal("c"))
    r = parser(s)
    rv = parser(View(s))
    assert r is not None and rv is not None
    assert rv.backlog == r.backlog
    assert rv.values == r.values
