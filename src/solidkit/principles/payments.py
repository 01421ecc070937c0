# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

"""Open/Closed Principle with payment methods.

:class:`PaymentProcessor` only talks to the :class:`PaymentMethod` capability.
Crypto payments were added after card and PayPal support without touching the
processor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, ConfigDict, PositiveFloat

from ..capability import Dispatcher, capability, require
from ..config import DemoConfig
from ..errors import PreconditionViolationError
from ..utils.logger import get_logger


class PaymentReceipt(BaseModel):
    """Acknowledgment returned by every completed payment."""

    model_config = ConfigDict(frozen=True)

    method: str
    amount: PositiveFloat
    detail: str


@capability(description="Take a payment and report which method handled it.")
class PaymentMethod(Protocol):
    def pay(self, amount: float) -> PaymentReceipt: ...

    def payment_method_name(self) -> str: ...


@dataclass(frozen=True, slots=True)
class CreditCardPayment:
    card_number: str
    card_holder: str

    @property
    def masked_number(self) -> str:
        return f"****{self.card_number[-4:]}"

    def pay(self, amount: float) -> PaymentReceipt:
        detail = f"Processing credit card payment of ${amount:.2f} for {self.card_holder} (Card: {self.masked_number})"
        print(detail)
        return PaymentReceipt(method=self.payment_method_name(), amount=amount, detail=detail)

    def payment_method_name(self) -> str:
        return "Credit Card"


@dataclass(frozen=True, slots=True)
class PayPalPayment:
    email: str

    def pay(self, amount: float) -> PaymentReceipt:
        detail = f"Processing PayPal payment of ${amount:.2f} to {self.email}"
        print(detail)
        return PaymentReceipt(method=self.payment_method_name(), amount=amount, detail=detail)

    def payment_method_name(self) -> str:
        return "PayPal"


@dataclass(frozen=True, slots=True)
class CryptoPayment:
    wallet_address: str
    crypto_type: str

    def pay(self, amount: float) -> PaymentReceipt:
        detail = f"Processing {self.crypto_type} payment of {amount:.4f} to wallet {self.wallet_address}"
        print(detail)
        return PaymentReceipt(method=self.payment_method_name(), amount=amount, detail=detail)

    def payment_method_name(self) -> str:
        return f"{self.crypto_type} Crypto"


class PaymentProcessor:
    """Runs any :class:`PaymentMethod`; never edited when a method is added."""

    def __init__(self, separator: str | None = None) -> None:
        self._separator = separator if separator is not None else DemoConfig().separator
        self._pay = Dispatcher(PaymentMethod, "pay")
        self._logger = get_logger("solidkit.payments")

    def process_payment(self, method: PaymentMethod, amount: float) -> PaymentReceipt:
        """Charge *amount* through *method*.

        Raises:
            PreconditionViolationError: if ``amount`` is not positive.
            UnsupportedCapabilityError: if ``method`` is not a payment method.
        """
        require(method, PaymentMethod)
        if not amount > 0:
            raise PreconditionViolationError(f"Payment amount must be positive, got {amount}")

        print(f"Initiating {method.payment_method_name()} payment...")
        receipt: PaymentReceipt = self._pay(method, amount)
        self._logger.info("payment completed", extra={"context": receipt.model_dump()})
        print("Payment completed successfully!")
        print(self._separator)
        return receipt


def demo(config: DemoConfig | None = None) -> None:
    """Process the existing methods, then the crypto methods added later."""
    config = config or DemoConfig()
    processor = PaymentProcessor(separator=config.separator)

    processor.process_payment(CreditCardPayment("4111111111111111", "John Doe"), 100.00)
    processor.process_payment(PayPalPayment("john.doe@example.com"), 50.50)

    # Added without modifying PaymentProcessor.
    processor.process_payment(CryptoPayment("1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa", "Bitcoin"), 0.005)
    processor.process_payment(CryptoPayment("0x71C7656EC7ab88b098defB751B7401B5f6d8976F", "Ethereum"), 0.1)


__all__ = [
    "PaymentReceipt",
    "PaymentMethod",
    "CreditCardPayment",
    "PayPalPayment",
    "CryptoPayment",
    "PaymentProcessor",
    "demo",
]
