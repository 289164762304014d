"""JSON helpers for plain Python objects.

Converts dataclasses and ordinary attribute-bag objects to JSON text and
restores them as instances of a caller-chosen class. This is deliberately
shallow: nested objects are written out, but restored as plain dicts.

Output is compact (``[1,2,3]``) unless an indent is given, and keys are
written in insertion order unless sort_keys is set. Both follow LadrilloConfig.

Example:
    from ladrillo import Rectangle
    from ladrillo.serialization import to_json, from_json

    text = to_json(Rectangle(10, 20))      # '{"width":10,"height":20}'
    restored = from_json(Rectangle, text)
    assert restored == Rectangle(10, 20)

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

import json
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import fields, is_dataclass
from typing import Any, TypeVar

from ladrillo.config import get_config
from ladrillo.errors import SerializationError
from ladrillo.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def to_dict(obj: Any, _active: set[int] | None = None) -> dict[str, Any]:
    """Convert a dataclass or attribute-bag object to a JSON-compatible dict.

    Dataclasses contribute their fields; other objects contribute the public
    entries of ``__dict__``. Values are converted recursively.

    Raises:
        SerializationError: If obj has neither dataclass fields nor __dict__,
            or refers back to itself.

    """
    if _active is None:
        _active = set()
    if is_dataclass(obj) and not isinstance(obj, type):
        items = ((f.name, getattr(obj, f.name)) for f in fields(obj))
    elif isinstance(obj, Mapping):
        items = ((str(k), v) for k, v in obj.items())
    else:
        attrs = getattr(obj, "__dict__", None)
        if attrs is None:
            msg = "object has no fields to serialize"
            raise SerializationError(msg, type(obj))
        items = ((k, v) for k, v in attrs.items() if not k.startswith("_"))

    with _visiting(obj, _active):
        return {k: _serialize_value(v, _active) for k, v in items}


@contextmanager
def _visiting(obj: Any, active: set[int]) -> Iterator[None]:
    """Mark obj as being converted; a repeat visit is a cycle."""
    key = id(obj)
    if key in active:
        msg = "circular reference"
        raise SerializationError(msg, type(obj))
    active.add(key)
    try:
        yield
    finally:
        active.discard(key)


def _serialize_value(value: Any, _active: set[int]) -> Any:
    """Serialize a single value."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple)):
        with _visiting(value, _active):
            return [_serialize_value(item, _active) for item in value]
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    if isinstance(value, Mapping) or is_dataclass(value) or hasattr(value, "__dict__"):
        return to_dict(value, _active)
    # Left for json.dumps to reject
    return value


def to_json(obj: Any, *, indent: int | None = None) -> str:
    """Serialize obj to a JSON string.

    Args:
        obj: Primitive, list, mapping, dataclass, or attribute-bag object.
        indent: JSON indentation level. Defaults to LadrilloConfig.indent.

    Returns:
        JSON string, e.g. ``[1,2,3]`` for ``[1, 2, 3]``.

    Raises:
        SerializationError: If a value cannot be represented in JSON,
            including NaN, infinities and circular references.

    """
    config = get_config()
    if indent is None:
        indent = config.indent
    separators = (",", ":") if indent is None else None
    try:
        return json.dumps(
            _serialize_value(obj, set()),
            sort_keys=config.sort_keys,
            indent=indent,
            separators=separators,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc), type(obj)) from exc


def from_dict(cls: type[T], data: Mapping[str, Any]) -> T:
    """Build an instance of cls from a mapping.

    Dataclasses are constructed through ``__init__`` with the keys that match
    their fields; other keys are dropped. Any other class is allocated
    without calling ``__init__`` and every key becomes an attribute.

    Raises:
        SerializationError: If data is not a mapping, or cls rejects it.

    """
    if not isinstance(data, Mapping):
        msg = f"expected a JSON object, got {type(data).__name__}"
        raise SerializationError(msg, cls)

    if is_dataclass(cls):
        names = {f.name for f in fields(cls) if f.init}
        kwargs = {k: v for k, v in data.items() if k in names}
        dropped = sorted(set(data) - names)
        if dropped:
            logger.debug("Dropping unknown keys for %s: %s", cls.__name__, ", ".join(dropped))
        try:
            return cls(**kwargs)
        except TypeError as exc:
            raise SerializationError(str(exc), cls) from exc

    try:
        instance = cls.__new__(cls)
        for key, value in data.items():
            setattr(instance, key, value)
    except (TypeError, AttributeError) as exc:
        raise SerializationError(str(exc), cls) from exc
    return instance


def from_json(cls: type[T], data: str) -> T:
    """Deserialize an instance of cls from a JSON string.

    Example:
        >>> class Circle:
        ...     def area(self):
        ...         return 3.14159 * self.radius**2
        >>> from_json(Circle, '{"radius":10}').radius
        10

    Raises:
        SerializationError: If the JSON is malformed or not an object.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"invalid JSON: {exc}", cls) from exc
    return from_dict(cls, raw)


__all__ = [
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
