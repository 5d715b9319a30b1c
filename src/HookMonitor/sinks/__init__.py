# ============================================================================
# HookMonitor - Sinks Package
#
# Purpose: Export backends for hook reports
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from HookMonitor.sinks import Sink, LocalFileSink
#
# Changelog:
#   2026-10-06: Initial sinks package
# ============================================================================

from HookMonitor.sinks.base import Sink
from HookMonitor.sinks.local_file import LocalFileSink

__all__ = [
    "Sink",
    "LocalFileSink",
]
