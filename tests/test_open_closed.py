# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

from __future__ import annotations

from dataclasses import dataclass
import math

import pytest

from solidkit import UnsupportedCapabilityError
from solidkit.principles.open_closed import (
    AreaCalculator,
    AreaCalculatorBad,
    Circle,
    CircleShape,
    Rectangle,
    RectangleShape,
    Shape,
    Triangle,
    TriangleShape,
    demo,
)


@dataclass(frozen=True)
class Hexagon:
    side: float

    def calculate_area(self) -> float:
        return 3 * math.sqrt(3) / 2 * self.side**2


@pytest.mark.parametrize(
    ("shape", "expected"),
    [
        (CircleShape(5), 78.5398),
        (RectangleShape(4, 6), 24.0),
        (TriangleShape(base=4, height=3), 6.0),
    ],
)
def test_area_calculator(shape: Shape, expected: float) -> None:
    assert AreaCalculator().calculate_area(shape) == pytest.approx(expected, abs=1e-4)


def test_bad_calculator_matches_for_known_shapes() -> None:
    bad = AreaCalculatorBad()

    assert bad.calculate_area(Circle(5)) == pytest.approx(math.pi * 25)
    assert bad.calculate_area(Rectangle(4, 6)) == 24
    assert bad.calculate_area(Triangle(4, 3)) == 6


def test_bad_calculator_silently_ignores_new_shapes() -> None:
    assert AreaCalculatorBad().calculate_area(Hexagon(2)) == 0.0


def test_new_shape_needs_no_calculator_change() -> None:
    calculator = AreaCalculator()

    assert calculator.calculate_area(Hexagon(2)) == pytest.approx(6 * math.sqrt(3))
    assert calculator.total_area([RectangleShape(4, 6), Hexagon(2)]) == pytest.approx(24 + 6 * math.sqrt(3))


def test_shape_without_area_is_rejected() -> None:
    with pytest.raises(UnsupportedCapabilityError):
        AreaCalculator().calculate_area(Circle(5))  # type: ignore[arg-type]


def test_shape_variants_are_runtime_shapes() -> None:
    assert isinstance(CircleShape(1), Shape)
    assert not isinstance(Circle(1), Shape)


def test_demo_transcript(capsys: pytest.CaptureFixture[str]) -> None:
    demo()

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "=== BAD EXAMPLE (Violates OCP) ==="
    assert "=== GOOD EXAMPLE (Applies OCP) ===" in lines
    assert lines.count("Rectangle area: 24") == 2
    assert lines.count("Triangle area: 6.0") == 2
