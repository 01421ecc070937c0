# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

from __future__ import annotations

import dataclasses

import pytest

from solidkit import (
    CapacityExceededError,
    DemoConfig,
    Dispatcher,
    PreconditionViolationError,
    UnsupportedCapabilityError,
    UnsupportedOperationError,
    satisfies,
)
from solidkit.principles.liskov import (
    Bird,
    BoundedList,
    CustomList,
    Duck,
    FlyingBird,
    HasArea,
    Ostrich,
    OstrichBad,
    ProperRectangle,
    ProperSquare,
    Rectangle,
    Sparrow,
    Square,
    Swimmer,
    demo,
)


def test_every_bird_makes_its_sound() -> None:
    sound = Dispatcher(Bird, "make_sound")

    assert [sound(b) for b in (Sparrow(), Duck(), Ostrich())] == ["Chirp chirp!", "Quack quack!", "Boom boom!"]


def test_only_flying_birds_declare_flight() -> None:
    assert satisfies(Sparrow(), FlyingBird)
    assert satisfies(Duck(), FlyingBird)
    assert not satisfies(Ostrich(), FlyingBird)
    assert satisfies(Duck(), Swimmer)
    assert not satisfies(Sparrow(), Swimmer)


def test_ostrich_cannot_be_dispatched_to_fly() -> None:
    with pytest.raises(UnsupportedCapabilityError):
        Dispatcher(FlyingBird, "fly")(Ostrich())


def test_bad_ostrich_breaks_its_promise() -> None:
    ostrich = OstrichBad()

    # It claims the capability structurally, then fails at call time.
    assert satisfies(ostrich, FlyingBird)
    with pytest.raises(UnsupportedOperationError, match="can't fly"):
        Dispatcher(FlyingBird, "fly")(ostrich)
    with pytest.raises(NotImplementedError):
        ostrich.fly()


def test_rectangle_dimensions_vary_independently() -> None:
    rect = Rectangle()
    rect.set_width(5)
    rect.set_height(4)

    assert (rect.width, rect.height, rect.get_area()) == (5, 4, 20)


def test_square_as_rectangle_overwrites_width() -> None:
    square: Rectangle = Square()
    square.set_width(5)
    square.set_height(4)

    assert square.width == 4
    assert square.get_area() == 16


def test_proper_shapes_are_siblings() -> None:
    assert not issubclass(ProperSquare, ProperRectangle)
    assert not issubclass(ProperRectangle, ProperSquare)
    assert not hasattr(ProperRectangle(5, 4), "set_width")


@pytest.mark.parametrize(("shape", "expected"), [(ProperRectangle(5, 4), 20), (ProperSquare(5), 25)])
def test_proper_shapes_substitute_behind_has_area(shape: HasArea, expected: int) -> None:
    assert Dispatcher(HasArea, "get_area")(shape) == expected


def test_proper_shapes_are_immutable() -> None:
    rect = ProperRectangle(5, 4)

    with pytest.raises(dataclasses.FrozenInstanceError):
        rect.width = 10  # type: ignore[misc]
    assert rect.height == 4


def test_bounded_list_rejects_beyond_capacity() -> None:
    bounded: BoundedList[str] = BoundedList(2)
    bounded.add("Item A")
    bounded.add("Item B")

    with pytest.raises(CapacityExceededError, match="List is full") as excinfo:
        bounded.add("Item C")

    assert isinstance(excinfo.value, PreconditionViolationError)
    assert excinfo.value.max_size == 2
    assert bounded.size == 2
    assert list(bounded) == ["Item A", "Item B"]


def test_unbounded_list_accepts_same_sequence() -> None:
    items: CustomList[str] = CustomList()
    for item in ("Item A", "Item B", "Item C"):
        items.add(item)

    assert len(items) == 3


def test_zero_capacity_and_negative_capacity() -> None:
    with pytest.raises(CapacityExceededError):
        BoundedList(0).add("x")
    with pytest.raises(ValueError):
        BoundedList(-1)


def test_demo_transcript(capsys: pytest.CaptureFixture[str]) -> None:
    demo(DemoConfig(bounded_capacity=3))

    out = capsys.readouterr().out
    assert "Duck swimming" in out
    assert "LSP Violation: Ostriches can't fly!" in out
    assert "Rectangle area: 20" in out
    assert "Square as Rectangle area: 16 (LSP violation)" in out
    assert "Proper Square area: 25" in out
    assert "CustomList size: 1" in out
    assert "BoundedList enforced capacity: List is full" in out
