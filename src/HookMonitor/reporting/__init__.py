# ============================================================================
# HookMonitor - Reporting Package
#
# Purpose: Log entry schema, report building, and rendering
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from HookMonitor.reporting import HookReport, ReportBuilder, build_report
#
# Changelog:
#   2026-10-04: Initial reporting package
#   2026-10-07: Exported ReportRenderer and render_table
# ============================================================================

from HookMonitor.reporting.report_builder import ReportBuilder, build_report, display_ms, is_slow
from HookMonitor.reporting.schema import CallerInfo, HookKind, HookReport, LogEntry

__all__ = [
    "CallerInfo",
    "HookKind",
    "HookReport",
    "LogEntry",
    "ReportBuilder",
    "build_report",
    "display_ms",
    "is_slow",
]
