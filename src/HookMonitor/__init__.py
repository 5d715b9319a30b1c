# ============================================================================
# HookMonitor - Package Initialization
#
# Purpose: Package-level exports and version information
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from HookMonitor import MonitorSession, InMemoryHookRegistry
#
# Changelog:
#   2026-10-02: Initial package setup
# ============================================================================

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from HookMonitor.config import Config
from HookMonitor.monitor import MonitorSession
from HookMonitor.registry.base import HookRegistry
from HookMonitor.registry.memory import InMemoryHookRegistry
from HookMonitor.reporting.report_builder import ReportBuilder, build_report
from HookMonitor.reporting.schema import CallerInfo, HookKind, HookReport, LogEntry
from HookMonitor.sinks.base import Sink
from HookMonitor.sinks.local_file import LocalFileSink

__all__ = [
    "__version__",
    "CallerInfo",
    "Config",
    "HookKind",
    "HookRegistry",
    "HookReport",
    "InMemoryHookRegistry",
    "LocalFileSink",
    "LogEntry",
    "MonitorSession",
    "ReportBuilder",
    "Sink",
    "build_report",
]
