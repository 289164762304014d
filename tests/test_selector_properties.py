"""Property-based tests for the selector builder using Hypothesis.

These tests verify invariants that should hold for any sequence of parts:
1. Any valid ordering stringifies to the plain concatenation of fragments
2. Any part ranked below the current rank is rejected without mutation
3. combine() output depends only on the operands' stringify()
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ladrillo import (
    Rank,
    SelectorBuilder,
    SelectorDuplicateError,
    SelectorError,
    SelectorOrderError,
    combine,
)

# Opaque values; content is never interpreted
values = st.text(alphabet="abcdefghijklmnopqrstuvwxyz-0123456789", min_size=1, max_size=8)

# (method name, rank, fragment template)
PARTS = {
    "element": (Rank.NONE, "{}"),
    "id": (Rank.ID, "#{}"),
    "class_": (Rank.CLASS, ".{}"),
    "attr": (Rank.ATTRIBUTE, "[{}]"),
    "pseudo_class": (Rank.PSEUDO_CLASS, ":{}"),
    "pseudo_element": (Rank.PSEUDO_ELEMENT, "::{}"),
}


@st.composite
def valid_sequences(draw: st.DrawFn) -> list[tuple[str, str]]:
    """element? id? class* attr* pseudo_class* pseudo_element?"""
    seq: list[tuple[str, str]] = []
    for name in ("element", "id"):
        if draw(st.booleans()):
            seq.append((name, draw(values)))
    for name in ("class_", "attr", "pseudo_class"):
        seq.extend((name, v) for v in draw(st.lists(values, max_size=3)))
    if draw(st.booleans()):
        seq.append(("pseudo_element", draw(values)))
    return seq


def _build(seq: list[tuple[str, str]]) -> SelectorBuilder:
    sb = SelectorBuilder()
    for name, value in seq:
        getattr(sb, name)(value)
    return sb


class TestValidOrderings:
    """Valid sequences always build."""

    @given(seq=valid_sequences())
    @settings(max_examples=200)
    def test_stringify_is_concatenation(self, seq: list[tuple[str, str]]) -> None:
        expected = "".join(PARTS[name][1].format(value) for name, value in seq)
        assert _build(seq).stringify() == expected

    @given(seq=valid_sequences())
    @settings(max_examples=100)
    def test_rank_is_highest_appended(self, seq: list[tuple[str, str]]) -> None:
        expected = max((PARTS[name][0] for name, _ in seq), default=Rank.NONE)
        assert _build(seq).rank == expected


class TestInvalidAppends:
    """Appending after a higher-ranked part always fails cleanly."""

    @given(
        seq=valid_sequences(),
        name=st.sampled_from(list(PARTS)),
        value=values,
    )
    @settings(max_examples=200)
    def test_lower_rank_rejected(self, seq: list[tuple[str, str]], name: str, value: str) -> None:
        sb = _build(seq)
        before = (sb.stringify(), sb.rank, sb.has_element, sb.has_pseudo_element)
        rank = PARTS[name][0]

        if name == "pseudo_element":
            should_fail = sb.has_pseudo_element
        elif name == "element":
            should_fail = sb.rank > Rank.NONE or sb.has_element
        elif name == "id":
            should_fail = sb.rank >= Rank.ID
        else:
            should_fail = sb.rank > rank

        if not should_fail:
            getattr(sb, name)(value)
            return

        with pytest.raises(SelectorError) as info:
            getattr(sb, name)(value)
        if sb.rank > rank:
            assert isinstance(info.value, SelectorOrderError)
        else:
            assert isinstance(info.value, SelectorDuplicateError)
        assert (sb.stringify(), sb.rank, sb.has_element, sb.has_pseudo_element) == before


class TestCombineProperties:
    """combine() is plain string joining."""

    @given(
        left=valid_sequences(),
        right=valid_sequences(),
        combinator=st.sampled_from([" ", "+", "~", ">"]),
    )
    @settings(max_examples=100)
    def test_combine_format(
        self, left: list[tuple[str, str]], right: list[tuple[str, str]], combinator: str
    ) -> None:
        lb, rb = _build(left), _build(right)
        result = combine(lb, combinator, rb).stringify()
        assert result == f"{lb.stringify()} {combinator} {rb.stringify()}"
