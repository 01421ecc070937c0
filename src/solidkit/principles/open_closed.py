# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

"""Open/Closed Principle with area calculation.

:class:`AreaCalculatorBad` branches on the concrete shape class, so every new
shape means editing it.  :class:`AreaCalculator` dispatches through the
:class:`Shape` capability and never changes when a shape is added.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Protocol

from ..capability import Dispatcher, capability
from ..config import DemoConfig


# ---------------------------------------------------------------------------
# Violation: type-switch dispatch
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Circle:
    radius: float


@dataclass(frozen=True, slots=True)
class Rectangle:
    length: float
    width: float


@dataclass(frozen=True, slots=True)
class Triangle:
    base: float
    height: float


class AreaCalculatorBad:
    """Knows every shape by name; unknown shapes silently get ``0.0``."""

    def calculate_area(self, shape: object) -> float:
        if isinstance(shape, Circle):
            return math.pi * shape.radius * shape.radius
        elif isinstance(shape, Rectangle):
            return shape.length * shape.width
        elif isinstance(shape, Triangle):
            return 0.5 * shape.base * shape.height
        return 0.0


# ---------------------------------------------------------------------------
# Applied: capability dispatch
# ---------------------------------------------------------------------------


@capability(description="Compute an area from the shape's own dimensions.")
class Shape(Protocol):
    def calculate_area(self) -> float: ...


@dataclass(frozen=True, slots=True)
class CircleShape:
    radius: float

    def calculate_area(self) -> float:
        return math.pi * self.radius * self.radius


@dataclass(frozen=True, slots=True)
class RectangleShape:
    length: float
    width: float

    def calculate_area(self) -> float:
        return self.length * self.width


@dataclass(frozen=True, slots=True)
class TriangleShape:
    base: float
    height: float

    def calculate_area(self) -> float:
        return 0.5 * self.base * self.height


class AreaCalculator:
    """Closed for modification: new :class:`Shape` variants need no edits here."""

    def __init__(self) -> None:
        self._area = Dispatcher(Shape, "calculate_area")

    def calculate_area(self, shape: Shape) -> float:
        return self._area(shape)

    def total_area(self, shapes: list[Shape]) -> float:
        return sum(self._area(shape) for shape in shapes)


def demo(config: DemoConfig | None = None) -> None:
    """Print areas from both calculators."""
    print("=== BAD EXAMPLE (Violates OCP) ===")
    bad = AreaCalculatorBad()
    print(f"Circle area: {bad.calculate_area(Circle(5))}")
    print(f"Rectangle area: {bad.calculate_area(Rectangle(4, 6))}")
    print(f"Triangle area: {bad.calculate_area(Triangle(4, 3))}")

    print("\n=== GOOD EXAMPLE (Applies OCP) ===")
    good = AreaCalculator()
    print(f"Circle area: {good.calculate_area(CircleShape(5))}")
    print(f"Rectangle area: {good.calculate_area(RectangleShape(4, 6))}")
    print(f"Triangle area: {good.calculate_area(TriangleShape(4, 3))}")


__all__ = [
    "Circle",
    "Rectangle",
    "Triangle",
    "AreaCalculatorBad",
    "Shape",
    "CircleShape",
    "RectangleShape",
    "TriangleShape",
    "AreaCalculator",
    "demo",
]
