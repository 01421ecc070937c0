# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

"""Exception hierarchy for solidkit.

Two kinds of failure show up in the demonstrations:

* an *unsupported operation*, raised by a variant that was forced to
  implement something it cannot honour (the "bad" examples), and
* a *precondition violation*, raised by a variant guarding an invariant it
  declared itself (legitimate, substitutable behaviour).

:class:`UnsupportedCapabilityError` is the dispatcher-side counterpart: a value
was handed to a dispatcher for a capability it never promised.
"""

from __future__ import annotations


class SolidKitError(Exception):
    """Base class for all solidkit errors."""


class UnsupportedOperationError(SolidKitError, NotImplementedError):
    """A variant was asked for an operation it cannot perform."""


class UnsupportedCapabilityError(SolidKitError, TypeError):
    """A value does not satisfy the capability it was dispatched through."""

    def __init__(self, capability: str, missing: tuple[str, ...] = ()) -> None:
        self.capability = capability
        self.missing = missing
        detail = f" (missing: {', '.join(missing)})" if missing else ""
        super().__init__(f"Value does not provide capability '{capability}'{detail}")


class PreconditionViolationError(SolidKitError, RuntimeError):
    """A variant rejected a call that breaks its own declared invariant."""


class CapacityExceededError(PreconditionViolationError):
    """A bounded collection is already at its maximum size."""

    def __init__(self, max_size: int, message: str = "List is full") -> None:
        self.max_size = max_size
        super().__init__(message)


__all__ = [
    "SolidKitError",
    "UnsupportedOperationError",
    "UnsupportedCapabilityError",
    "PreconditionViolationError",
    "CapacityExceededError",
]
