"""CSS selector builder.

Builds compound selectors one fragment at a time and joins them with
combinators. Parts must follow the CSS ordering:

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may repeat

Element, id and pseudo-element occur at most once per compound selector.
Violations raise SelectorOrderError or SelectorDuplicateError and leave the
builder unchanged.

Example:
    >>> from ladrillo.selector import by_element, by_id, combine
    >>> by_id("main").class_("container").class_("editable").stringify()
    '#main.container.editable'
    >>> combine(by_element("div").id("main"), "+", by_element("table").id("data")).stringify()
    'div#main + table#data'

Thread Safety:
    A SelectorBuilder is mutated in place by its own chained calls. Do not
    share a builder across threads while it is still being built.

"""

from __future__ import annotations

from enum import IntEnum

from ladrillo.config import get_config
from ladrillo.errors import InvalidCombinatorError, SelectorDuplicateError, SelectorOrderError
from ladrillo.utils.logger import get_logger

logger = get_logger(__name__)

COMBINATORS = frozenset({" ", "+", "~", ">"})


class Rank(IntEnum):
    """Position of a selector part in the fixed CSS ordering.

    Element shares rank NONE: it may only open a compound selector.
    """

    NONE = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5


class SelectorBuilder:
    """Mutable, chainable CSS selector accumulator.

    Every append method validates first, then mutates and returns self.

    Usage:
        >>> sb = SelectorBuilder()
        >>> sb.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        'a[href$=".png"]:focus'

    Attributes:
        rank: Highest Rank appended so far
        has_element: True once an element part was appended
        has_pseudo_element: True once a pseudo-element part was appended

    """

    __slots__ = ("_parts", "has_element", "has_pseudo_element", "rank")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self.has_element = False
        self.has_pseudo_element = False
        self.rank = Rank.NONE

    def _check_order(self, limit: Rank, part: str, value: str) -> None:
        if self.rank > limit:
            raise SelectorOrderError(part, value)

    def element(self, value: str) -> SelectorBuilder:
        """Append a type selector (``div``, ``a``, ``*``)."""
        self._check_order(Rank.NONE, "element", value)
        if self.has_element:
            raise SelectorDuplicateError("element", value)
        self.has_element = True
        self._parts.append(value)
        return self

    def id(self, value: str) -> SelectorBuilder:
        """Append ``#value``."""
        self._check_order(Rank.ID, "id", value)
        # Rank is exactly ID here, so an id is already present
        if self.rank >= Rank.ID:
            raise SelectorDuplicateError("id", value)
        self.rank = Rank.ID
        self._parts.append(f"#{value}")
        return self

    def class_(self, value: str) -> SelectorBuilder:
        """Append ``.value``. Repeatable."""
        self._check_order(Rank.CLASS, "class", value)
        self.rank = Rank.CLASS
        self._parts.append(f".{value}")
        return self

    def attr(self, value: str) -> SelectorBuilder:
        """Append ``[value]``. Repeatable.

        The value is taken verbatim, e.g. ``'href$=".png"'``.
        """
        self._check_order(Rank.ATTRIBUTE, "attribute", value)
        self.rank = Rank.ATTRIBUTE
        self._parts.append(f"[{value}]")
        return self

    def pseudo_class(self, value: str) -> SelectorBuilder:
        """Append ``:value``. Repeatable."""
        self._check_order(Rank.PSEUDO_CLASS, "pseudo-class", value)
        self.rank = Rank.PSEUDO_CLASS
        self._parts.append(f":{value}")
        return self

    def pseudo_element(self, value: str) -> SelectorBuilder:
        """Append ``::value``.

        Nothing ranks above a pseudo-element, so only the duplicate check
        applies. A rejected call leaves rank untouched.
        """
        if self.has_pseudo_element:
            raise SelectorDuplicateError("pseudo-element", value)
        self.has_pseudo_element = True
        self.rank = Rank.PSEUDO_ELEMENT
        self._parts.append(f"::{value}")
        return self

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Replace the accumulated text with ``left combinator right``.

        Ordering state is neither checked nor changed. ``left`` and ``right``
        are only read through stringify().

        Raises:
            InvalidCombinatorError: If strict_combinators is enabled and
                combinator is not one of ' ', '+', '~', '>'.
        """
        if combinator not in COMBINATORS:
            if get_config().strict_combinators:
                raise InvalidCombinatorError(combinator)
            logger.warning("Unknown CSS combinator %r, joining selectors as given", combinator)
        self._parts = [f"{left.stringify()} {combinator} {right.stringify()}"]
        return self

    def stringify(self) -> str:
        """Return the selector built so far. Pure and repeatable."""
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    def __bool__(self) -> bool:
        return any(self._parts)


def by_element(value: str) -> SelectorBuilder:
    """Start a selector with a type selector."""
    return SelectorBuilder().element(value)


def by_id(value: str) -> SelectorBuilder:
    """Start a selector with ``#value``."""
    return SelectorBuilder().id(value)


def by_class(value: str) -> SelectorBuilder:
    """Start a selector with ``.value``."""
    return SelectorBuilder().class_(value)


def by_attribute(value: str) -> SelectorBuilder:
    """Start a selector with ``[value]``."""
    return SelectorBuilder().attr(value)


def by_pseudo_class(value: str) -> SelectorBuilder:
    """Start a selector with ``:value``."""
    return SelectorBuilder().pseudo_class(value)


def by_pseudo_element(value: str) -> SelectorBuilder:
    """Start a selector with ``::value``."""
    return SelectorBuilder().pseudo_element(value)


def combine(left: SelectorBuilder, combinator: str, right: SelectorBuilder) -> SelectorBuilder:
    """Join two selectors with a combinator into a fresh builder.

    Example:
        >>> combine(by_element("ul"), ">", by_element("li")).stringify()
        'ul > li'
    """
    return SelectorBuilder().combine(left, combinator, right)


class _CssSelectorBuilder:
    """Facade namespace using the CSS part names as entry points."""

    __slots__ = ()

    element = staticmethod(by_element)
    id = staticmethod(by_id)
    class_ = staticmethod(by_class)
    attr = staticmethod(by_attribute)
    pseudo_class = staticmethod(by_pseudo_class)
    pseudo_element = staticmethod(by_pseudo_element)
    combine = staticmethod(combine)


css_selector_builder = _CssSelectorBuilder()


__all__ = [
    "COMBINATORS",
    "Rank",
    "SelectorBuilder",
    "by_attribute",
    "by_class",
    "by_element",
    "by_id",
    "by_pseudo_class",
    "by_pseudo_element",
    "combine",
    "css_selector_builder",
]
