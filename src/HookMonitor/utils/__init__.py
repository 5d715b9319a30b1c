# ============================================================================
# HookMonitor - Utils Package
#
# Purpose: Shared utility functions
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from HookMonitor.utils import Timer, serialize_report_to_json
#
# Changelog:
#   2026-10-02: Initial utils package
# ============================================================================

from HookMonitor.utils.serialization import (
    deserialize_report_from_json,
    entries_to_jsonl,
    serialize_report_to_json,
)
from HookMonitor.utils.time import Timer, get_utc_timestamp

__all__ = [
    "Timer",
    "deserialize_report_from_json",
    "entries_to_jsonl",
    "get_utc_timestamp",
    "serialize_report_to_json",
]
