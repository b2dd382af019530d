from __future__ import annotations

import time


def sleep(ms: float) -> None:
    """Block the calling thread for ``ms`` milliseconds."""

    if ms < 0:
        raise ValueError("ms must be >= 0")
    time.sleep(ms / 1000.0)


__all__ = ["sleep"]
