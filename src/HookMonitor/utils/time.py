# ============================================================================
# HookMonitor - Time Utilities
#
# Purpose: Clock readings for hook timing and report timestamps
# Inputs: None
# Outputs: Monotonic readings, epoch seconds, ISO-8601 timestamps
# Dependencies: time, datetime
# Usage: timer = Timer(); start = timer.now()
#
# Changelog:
#   2026-10-02: Initial time utilities; Timer split from get_utc_timestamp
# ============================================================================

import time
from datetime import datetime, timezone


class Timer:
    """
    Clock used by the recorder.

    now() is monotonic and only meaningful as a difference between two
    readings; wall_time() is the epoch time stamped on each log entry.
    Tests substitute any object exposing the same two methods.
    """

    def now(self) -> float:
        """Monotonic reading in seconds with sub-millisecond resolution."""
        return time.perf_counter()

    def wall_time(self) -> float:
        """Current wall-clock time in epoch seconds."""
        return time.time()


def get_utc_timestamp() -> str:
    """
    Get current UTC timestamp in ISO-8601 format.

    Returns:
        ISO-8601 formatted timestamp string (e.g., "2026-10-02T15:22:08Z")
    """
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
