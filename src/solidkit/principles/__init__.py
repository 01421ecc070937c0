# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

"""Runnable demonstrations, one per principle."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..config import DemoConfig
from . import interface_segregation, liskov, open_closed, payments, single_responsibility


DemoFn = Callable[[DemoConfig | None], None]


@dataclass(frozen=True, slots=True)
class DemoSpec:
    """A registered demonstration."""

    key: str
    title: str
    run: DemoFn


DEMOS: dict[str, DemoSpec] = {
    spec.key: spec
    for spec in (
        DemoSpec("srp", "Single Responsibility Principle", single_responsibility.demo),
        DemoSpec("ocp", "Open/Closed Principle: shapes", open_closed.demo),
        DemoSpec("payments", "Open/Closed Principle: payment methods", payments.demo),
        DemoSpec("lsp", "Liskov Substitution Principle", liskov.demo),
        DemoSpec("isp", "Interface Segregation Principle", interface_segregation.demo),
    )
}


def get_demo(key: str) -> DemoSpec:
    """Return the demo registered under *key*."""
    try:
        return DEMOS[key]
    except KeyError:
        raise KeyError(f"Unknown demo '{key}'; choose from: {', '.join(DEMOS)}") from None


def run_demos(keys: Iterable[str] | None = None, config: DemoConfig | None = None) -> list[str]:
    """Run the selected demos (all of them by default) and return their keys in run order."""
    selected = [get_demo(key) for key in (keys or DEMOS)]
    config = config or DemoConfig.from_env()
    for index, spec in enumerate(selected):
        if index:
            print()
        print(f"##### {spec.title} #####")
        spec.run(config)
    return [spec.key for spec in selected]


__all__ = ["DEMOS", "DemoSpec", "get_demo", "run_demos"]
