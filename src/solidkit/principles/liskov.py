# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

"""Liskov Substitution Principle.

Three cases:

* Birds: flight is its own capability, so an ostrich is never asked to fly.
  ``OstrichBad`` shows what happens when it is.
* Rectangle/square: ``Square`` inherits ``Rectangle``'s setters and silently
  couples width and height.  ``ProperRectangle`` and ``ProperSquare`` are
  siblings behind :class:`HasArea` instead.
* Collections: ``BoundedList`` rejects additions past its own declared
  capacity.  That is part of its contract, so it stays substitutable.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from ..capability import Dispatcher, capability
from ..config import DemoConfig
from ..errors import CapacityExceededError, UnsupportedOperationError


T = TypeVar("T")


# ---------------------------------------------------------------------------
# Birds
# ---------------------------------------------------------------------------


@capability()
class Bird(Protocol):
    def make_sound(self) -> str: ...


@capability()
class FlyingBird(Protocol):
    def fly(self) -> str: ...


@capability()
class Swimmer(Protocol):
    def swim(self) -> str: ...


class Sparrow:
    def make_sound(self) -> str:
        return "Chirp chirp!"

    def fly(self) -> str:
        return "Sparrow flying"


class Duck:
    def make_sound(self) -> str:
        return "Quack quack!"

    def fly(self) -> str:
        return "Duck flying"

    def swim(self) -> str:
        return "Duck swimming"


class Ostrich:
    """A bird that does not claim to fly."""

    def make_sound(self) -> str:
        return "Boom boom!"


class OstrichBad:
    """Claims flight and then refuses it."""

    def make_sound(self) -> str:
        return "Boom boom!"

    def fly(self) -> str:
        raise UnsupportedOperationError("Ostriches can't fly!")


# ---------------------------------------------------------------------------
# Rectangle / square
# ---------------------------------------------------------------------------


class Rectangle:
    """Mutable rectangle whose width and height vary independently."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_width(self, width: int) -> None:
        self._width = width

    def set_height(self, height: int) -> None:
        self._height = height

    def get_area(self) -> int:
        return self._width * self._height


class Square(Rectangle):
    """Narrows ``Rectangle``: each setter also overwrites the other side."""

    def set_width(self, width: int) -> None:
        super().set_width(width)
        super().set_height(width)

    def set_height(self, height: int) -> None:
        super().set_height(height)
        super().set_width(height)


@capability(description="Report an area; says nothing about how dimensions change.")
class HasArea(Protocol):
    def get_area(self) -> int: ...


@dataclass(frozen=True, slots=True)
class ProperRectangle:
    width: int
    height: int

    def get_area(self) -> int:
        return self.width * self.height


@dataclass(frozen=True, slots=True)
class ProperSquare:
    side: int

    def get_area(self) -> int:
        return self.side * self.side


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------


class CustomList(Generic[T]):
    """Unbounded list; ``add`` always succeeds."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def add(self, item: T) -> None:
        self._items.append(item)

    @property
    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


class BoundedList(CustomList[T]):
    """List with a fixed maximum size."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError(f"max_size must be non-negative, got {max_size}")
        super().__init__()
        self.max_size = max_size

    def add(self, item: T) -> None:
        """Append *item*.

        Raises:
            CapacityExceededError: if the list already holds ``max_size`` items.
        """
        if self.size >= self.max_size:
            raise CapacityExceededError(self.max_size)
        super().add(item)


def demo(config: DemoConfig | None = None) -> None:
    """Print the bird, rectangle and collection cases."""
    config = config or DemoConfig()
    sound = Dispatcher(Bird, "make_sound")
    area = Dispatcher(HasArea, "get_area")

    print("=== GOOD LSP EXAMPLES ===")
    print(sound(Sparrow()))
    duck = Duck()
    print(sound(duck))
    print(Dispatcher(Swimmer, "swim")(duck))

    print("\n=== LSP VIOLATION (Ostrich) ===")
    ostrich = OstrichBad()
    print(sound(ostrich))
    try:
        ostrich.fly()
    except UnsupportedOperationError as exc:
        print(f"LSP Violation: {exc}")

    print("\n=== RECTANGLE-SQUARE PROBLEM ===")
    rect = Rectangle()
    rect.set_width(5)
    rect.set_height(4)
    print(f"Rectangle area: {rect.get_area()}")

    square_as_rect: Rectangle = Square()
    square_as_rect.set_width(5)
    square_as_rect.set_height(4)
    print(f"Square as Rectangle area: {square_as_rect.get_area()} (LSP violation)")

    print("\n=== PROPER LSP SOLUTION ===")
    print(f"Proper Rectangle area: {area(ProperRectangle(5, 4))}")
    print(f"Proper Square area: {area(ProperSquare(5))}")

    print("\n=== COLLECTION EXAMPLE ===")
    items: CustomList[str] = CustomList()
    items.add("Item 1")
    print(f"CustomList size: {items.size}")

    bounded: CustomList[str] = BoundedList(config.bounded_capacity)
    try:
        for n in range(config.bounded_capacity + 1):
            bounded.add(f"Item {chr(ord('A') + n)}")
    except CapacityExceededError as exc:
        print(f"BoundedList enforced capacity: {exc}")


__all__ = [
    "Bird",
    "FlyingBird",
    "Swimmer",
    "Sparrow",
    "Duck",
    "Ostrich",
    "OstrichBad",
    "Rectangle",
    "Square",
    "HasArea",
    "ProperRectangle",
    "ProperSquare",
    "CustomList",
    "BoundedList",
    "demo",
]
