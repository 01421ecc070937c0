# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

from __future__ import annotations

from collections.abc import Iterator
import logging

import pytest

from solidkit.utils.logger import SolidKitHandler


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Drop handlers installed by ``setup_logger`` so each test starts clean."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if isinstance(h, SolidKitHandler)]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)
