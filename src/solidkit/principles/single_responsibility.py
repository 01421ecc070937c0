# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

"""Single Responsibility Principle: one reason to change per class.

``InvoiceBad`` mixes the business rule (tax), presentation (printing) and
persistence (saving).  The corrected version splits those into
:class:`Invoice`, :class:`InvoicePrinter` and :class:`InvoiceRepository`.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import DEFAULT_TAX_RATE, DemoConfig
from ..utils.logger import get_logger


# ---------------------------------------------------------------------------
# Violation
# ---------------------------------------------------------------------------


class InvoiceBad:
    """Calculates, prints and saves itself."""

    def __init__(self, customer: str, amount: float, tax_rate: float = DEFAULT_TAX_RATE) -> None:
        self.customer = customer
        self.amount = amount
        self.tax_rate = tax_rate

    def calculate_total(self) -> float:
        return self.amount * (1 + self.tax_rate)

    def print_invoice(self) -> None:
        print(f"Invoice for: {self.customer}")
        print(f"Total: ${self.calculate_total():.2f}")

    def save_to_database(self) -> None:
        print(f"Saving invoice to database for customer: {self.customer}")


# ---------------------------------------------------------------------------
# Applied
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Invoice:
    """Invoice data and the tax rule, nothing else."""

    customer: str
    amount: float
    tax_rate: float = DEFAULT_TAX_RATE

    def calculate_total(self) -> float:
        return self.amount * (1 + self.tax_rate)


class InvoicePrinter:
    """Renders an invoice to the console."""

    def print(self, invoice: Invoice) -> None:
        print("=== Invoice ===")
        print(f"Customer: {invoice.customer}")
        print(f"Amount: ${invoice.amount:.2f}")
        print(f"Total (with tax): ${invoice.calculate_total():.2f}")


class InvoiceRepository:
    """Keeps saved invoices in memory."""

    def __init__(self) -> None:
        self.saved: list[Invoice] = []
        self._logger = get_logger("solidkit.invoices")

    def save(self, invoice: Invoice) -> None:
        self.saved.append(invoice)
        total = invoice.calculate_total()
        self._logger.info("invoice saved", extra={"context": {"customer": invoice.customer, "total": total}})
        print(f"Saving invoice for {invoice.customer} with total ${total:.2f}")


def demo(config: DemoConfig | None = None) -> None:
    """Print the violating and the corrected invoice workflows."""
    config = config or DemoConfig()

    print("=== Violating SRP ===")
    bad_invoice = InvoiceBad("John Doe", 100.0, tax_rate=config.tax_rate)
    bad_invoice.print_invoice()
    bad_invoice.save_to_database()

    print("\n=== Applying SRP ===")
    invoice = Invoice("Jane Smith", 200.0, tax_rate=config.tax_rate)
    InvoicePrinter().print(invoice)
    InvoiceRepository().save(invoice)


__all__ = ["InvoiceBad", "Invoice", "InvoicePrinter", "InvoiceRepository", "demo"]
