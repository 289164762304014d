"""Exception classes for Ladrillo.

Provides standardized exceptions for error handling throughout Ladrillo.
"""

from __future__ import annotations

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)


class LadrilloError(Exception):
    """Base exception for all Ladrillo errors.

    Subclass this for specific error categories.
    """

    pass


class SelectorError(LadrilloError):
    """Error while building a CSS selector.

    Raised when a fragment cannot be appended to a SelectorBuilder.
    The builder is left untouched by the failing call.
    """

    def __init__(self, message: str, part: str | None = None, value: str | None = None) -> None:
        """Initialize selector error with the rejected fragment.

        Args:
            message: Error description
            part: Selector part kind (e.g., "id", "pseudo-element")
            value: Value passed for that part
        """
        self.message = message
        self.part = part
        self.value = value

        detail = ""
        if part is not None:
            detail = f" (got {part} {value!r})" if value is not None else f" (got {part})"

        super().__init__(f"{message}{detail}")


class SelectorOrderError(SelectorError):
    """A selector part was appended after a part that must follow it."""

    def __init__(self, part: str | None = None, value: str | None = None) -> None:
        super().__init__(ORDER_MESSAGE, part, value)


class SelectorDuplicateError(SelectorError):
    """Element, id, or pseudo-element was appended a second time."""

    def __init__(self, part: str | None = None, value: str | None = None) -> None:
        super().__init__(DUPLICATE_MESSAGE, part, value)


class InvalidCombinatorError(SelectorError):
    """Combinator is not one of ' ', '+', '~', '>'.

    Only raised when strict_combinators is enabled in LadrilloConfig.
    """

    def __init__(self, combinator: str) -> None:
        self.combinator = combinator
        super().__init__(f"Unknown combinator {combinator!r}; expected one of ' ', '+', '~', '>'")


class SerializationError(LadrilloError):
    """Error converting an object to or from JSON.

    Raised for malformed JSON, payloads that are not JSON objects,
    and values the encoder cannot represent.
    """

    def __init__(self, message: str, target: type | None = None) -> None:
        """Initialize serialization error.

        Args:
            message: Description of the failure
            target: Class being serialized or restored (optional)
        """
        self.target = target
        prefix = f"{target.__name__}: " if target is not None else ""
        super().__init__(f"{prefix}{message}")
