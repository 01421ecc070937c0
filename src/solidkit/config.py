# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

"""Settings shared by the demonstration runners.

Values resolve in order: explicit keyword argument, environment variable,
built-in default.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import os
from typing import Final, TypeVar


ENV_TAX_RATE: Final[str] = "SOLIDKIT_TAX_RATE"
ENV_SEPARATOR: Final[str] = "SOLIDKIT_SEPARATOR"
ENV_BOUNDED_CAPACITY: Final[str] = "SOLIDKIT_BOUNDED_CAPACITY"

DEFAULT_TAX_RATE: Final[float] = 0.16
DEFAULT_SEPARATOR: Final[str] = "-" * 34
DEFAULT_BOUNDED_CAPACITY: Final[int] = 2

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DemoConfig:
    """Knobs the demonstrations read.

    Attributes:
        tax_rate: Fraction added on top of an invoice amount.
        separator: Line printed after each processed payment.
        bounded_capacity: Maximum size of the bounded list demo.
    """

    tax_rate: float = DEFAULT_TAX_RATE
    separator: str = DEFAULT_SEPARATOR
    bounded_capacity: int = DEFAULT_BOUNDED_CAPACITY

    def __post_init__(self) -> None:
        if not self.tax_rate >= 0:
            raise ValueError(f"tax_rate must be non-negative, got {self.tax_rate}")
        if self.bounded_capacity < 0:
            raise ValueError(f"bounded_capacity must be non-negative, got {self.bounded_capacity}")

    @classmethod
    def from_env(
        cls,
        *,
        tax_rate: float | None = None,
        separator: str | None = None,
        bounded_capacity: int | None = None,
    ) -> DemoConfig:
        """Build a config from the environment, letting keyword overrides win."""
        if tax_rate is None:
            tax_rate = _read_env(ENV_TAX_RATE, float, DEFAULT_TAX_RATE)
        if separator is None:
            separator = os.getenv(ENV_SEPARATOR) or DEFAULT_SEPARATOR
        if bounded_capacity is None:
            bounded_capacity = _read_env(ENV_BOUNDED_CAPACITY, int, DEFAULT_BOUNDED_CAPACITY)
        return cls(tax_rate=tax_rate, separator=separator, bounded_capacity=bounded_capacity)


def _read_env(key: str, parse: Callable[[str], T], default: T) -> T:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return parse(raw.strip())
    except ValueError as exc:
        kind = getattr(parse, "__name__", "value")
        raise ValueError(f"{key} must be a valid {kind}, got {raw!r}") from exc


__all__ = ["DemoConfig"]
