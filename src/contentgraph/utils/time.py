from __future__ import annotations

import time


def unix_timestamp() -> int:
    """
    Whole seconds since the epoch.

    Record timestamps use second resolution, so two calls in the
    same second return the same value.
    """
    return int(time.time())
