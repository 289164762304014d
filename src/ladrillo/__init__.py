"""
Ladrillo — small object building blocks for Python

A chainable CSS selector builder with ordering validation, a rectangle value
type, and JSON helpers for plain objects. Zero runtime dependencies.

Quick Start:
    >>> from ladrillo import by_element, by_id, combine
    >>> by_id("main").class_("container").class_("editable").stringify()
    '#main.container.editable'

    >>> combine(by_element("div").id("main"), "+", by_element("table").id("data")).stringify()
    'div#main + table#data'

    >>> # Or use the facade namespace
    >>> from ladrillo import css_selector_builder as css
    >>> css.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    'a[href$=".png"]:focus'

Objects and JSON:
    >>> from ladrillo import Rectangle, from_json, to_json
    >>> to_json(Rectangle(10, 20))
    '{"width":10,"height":20}'
    >>> from_json(Rectangle, '{"width":3,"height":4}').area()
    12

Installation:
    pip install ladrillo
"""

from ladrillo.config import (
    LadrilloConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from ladrillo.errors import (
    InvalidCombinatorError,
    LadrilloError,
    SelectorDuplicateError,
    SelectorError,
    SelectorOrderError,
    SerializationError,
)
from ladrillo.selector import (
    COMBINATORS,
    Rank,
    SelectorBuilder,
    by_attribute,
    by_class,
    by_element,
    by_id,
    by_pseudo_class,
    by_pseudo_element,
    combine,
    css_selector_builder,
)
from ladrillo.serialization import from_dict, from_json, to_dict, to_json
from ladrillo.shapes import Rectangle

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Selector builder
    "SelectorBuilder",
    "Rank",
    "COMBINATORS",
    "by_element",
    "by_id",
    "by_class",
    "by_attribute",
    "by_pseudo_class",
    "by_pseudo_element",
    "combine",
    "css_selector_builder",
    # Shapes
    "Rectangle",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "LadrilloConfig",
    "get_config",
    "set_config",
    "reset_config",
    "config_context",
    # Errors
    "LadrilloError",
    "SelectorError",
    "SelectorOrderError",
    "SelectorDuplicateError",
    "InvalidCombinatorError",
    "SerializationError",
]
