"""Time source helpers."""

import time


def epoch_seconds() -> int:
    """Return the current wall-clock time as integer epoch seconds."""
    return int(time.time())
