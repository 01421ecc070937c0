# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

"""Interface Segregation Principle.

``WorkerBad`` forces every worker to eat.  Splitting it into :class:`Workable`
and :class:`Eatable` lets a robot implement only what it can honour, and the
same split keeps a basic printer from pretending to scan or fax.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from ..capability import Dispatcher, capabilities_of, capability
from ..config import DemoConfig
from ..errors import UnsupportedCapabilityError, UnsupportedOperationError


# ---------------------------------------------------------------------------
# Violation: one fat interface
# ---------------------------------------------------------------------------


class WorkerBad(ABC):
    @abstractmethod
    def work(self) -> str: ...

    @abstractmethod
    def eat(self) -> str: ...


class HumanWorkerBad(WorkerBad):
    def work(self) -> str:
        return "Human working..."

    def eat(self) -> str:
        return "Human eating lunch..."


class RobotWorkerBad(WorkerBad):
    def work(self) -> str:
        return "Robot working..."

    def eat(self) -> str:
        raise UnsupportedOperationError("Robots don't eat")


# ---------------------------------------------------------------------------
# Applied: narrow capabilities
# ---------------------------------------------------------------------------


@capability()
class Workable(Protocol):
    def work(self) -> str: ...


@capability()
class Eatable(Protocol):
    def eat(self) -> str: ...


class HumanWorker:
    def work(self) -> str:
        return "Human working..."

    def eat(self) -> str:
        return "Human eating lunch..."


class RobotWorker:
    def work(self) -> str:
        return "Robot working..."


@capability()
class Printer(Protocol):
    def print(self) -> str: ...


@capability()
class Scanner(Protocol):
    def scan(self) -> str: ...


@capability()
class Fax(Protocol):
    def fax(self) -> str: ...


class MultiFunctionPrinter:
    def print(self) -> str:
        return "Printing document..."

    def scan(self) -> str:
        return "Scanning document..."

    def fax(self) -> str:
        return "Faxing document..."


class BasicPrinter:
    def print(self) -> str:
        return "Basic print only"


DEVICE_CAPABILITIES: tuple[type, ...] = (Printer, Scanner, Fax)


def demo(config: DemoConfig | None = None) -> None:
    """Print the worker and device transcripts."""
    work = Dispatcher(Workable, "work")
    eat = Dispatcher(Eatable, "eat")

    print("=== FAT INTERFACE (Violates ISP) ===")
    for worker in (HumanWorkerBad(), RobotWorkerBad()):
        print(worker.work())
        try:
            print(worker.eat())
        except UnsupportedOperationError as exc:
            print(f"ISP Violation: {exc}")

    print("\n=== SEGREGATED INTERFACES (Applies ISP) ===")
    human, robot = HumanWorker(), RobotWorker()
    print(work(human))
    print(work(robot))
    print(eat(human))
    try:
        eat(robot)
    except UnsupportedCapabilityError as exc:
        print(f"Rejected before dispatch: {exc}")

    print("\n=== DEVICES ===")
    for device in (MultiFunctionPrinter(), BasicPrinter()):
        specs = capabilities_of(device, *DEVICE_CAPABILITIES)
        print(f"{type(device).__name__}: {', '.join(spec.name for spec in specs)}")
        for spec in specs:
            print(Dispatcher(spec.protocol, spec.operations[0])(device))


__all__ = [
    "WorkerBad",
    "HumanWorkerBad",
    "RobotWorkerBad",
    "Workable",
    "Eatable",
    "HumanWorker",
    "RobotWorker",
    "Printer",
    "Scanner",
    "Fax",
    "MultiFunctionPrinter",
    "BasicPrinter",
    "DEVICE_CAPABILITIES",
    "demo",
]
