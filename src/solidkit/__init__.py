# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

"""solidkit: SOLID principle demonstrations built on capability dispatch."""

from __future__ import annotations

from .capability import (
    CapabilitySpec,
    Dispatcher,
    capabilities_of,
    capability,
    extract_capability_spec,
    require,
    satisfies,
)
from .config import DemoConfig
from .errors import (
    CapacityExceededError,
    PreconditionViolationError,
    SolidKitError,
    UnsupportedCapabilityError,
    UnsupportedOperationError,
)
from .principles import DEMOS, get_demo, run_demos


__all__ = [
    "CapabilitySpec",
    "Dispatcher",
    "capability",
    "capabilities_of",
    "extract_capability_spec",
    "require",
    "satisfies",
    "DemoConfig",
    "SolidKitError",
    "UnsupportedOperationError",
    "UnsupportedCapabilityError",
    "PreconditionViolationError",
    "CapacityExceededError",
    "DEMOS",
    "get_demo",
    "run_demos",
]
