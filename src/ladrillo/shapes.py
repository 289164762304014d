"""Geometric value types.

Thread Safety:
    Rectangle is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle.

    Examples:
        >>> r = Rectangle(10, 20)
        >>> r.width, r.height
        (10, 20)
        >>> r.area()
        200

    """

    width: float
    height: float

    def area(self) -> float:
        """Return width * height."""
        return self.width * self.height

    get_area = area
