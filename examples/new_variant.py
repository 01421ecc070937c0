# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

"""Add a shape and a payment method without editing the library.

Demonstrates:
- New variants plug into existing dispatchers unchanged
- JSON logging of dispatch events

Usage:
    uv run python examples/new_variant.py
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math

from solidkit.principles.open_closed import AreaCalculator, CircleShape
from solidkit.principles.payments import PaymentProcessor, PaymentReceipt
from solidkit.utils.logger import setup_logger


@dataclass(frozen=True, slots=True)
class Hexagon:
    side: float

    def calculate_area(self) -> float:
        return 3 * math.sqrt(3) / 2 * self.side**2


@dataclass(frozen=True, slots=True)
class BankTransfer:
    iban: str

    def pay(self, amount: float) -> PaymentReceipt:
        detail = f"Transferring ${amount:.2f} from {self.iban}"
        print(detail)
        return PaymentReceipt(method=self.payment_method_name(), amount=amount, detail=detail)

    def payment_method_name(self) -> str:
        return "Bank Transfer"


def main() -> None:
    setup_logger(level=logging.DEBUG, use_json=True, force=True)

    calculator = AreaCalculator()
    print(f"Total area: {calculator.total_area([CircleShape(1), Hexagon(2)]):.4f}")

    receipt = PaymentProcessor().process_payment(BankTransfer("DE89370400440532013000"), 75.0)
    print(receipt.model_dump_json())


if __name__ == "__main__":
    main()
