# ============================================================================
# HookMonitor - Report Builder
#
# Purpose: Order logged hook invocations for presentation
# Inputs: LogEntry sequence or a MonitorSession
# Outputs: Sorted entries; HookReport with summary and frequency table
# Dependencies: reporting.schema, config, utils.time
# Usage: ordered = build_report(session.entries())
#        report = ReportBuilder(config).build(session)
#
# Changelog:
#   2026-10-04: Initial build_report (stable descending sort)
#   2026-10-06: ReportBuilder producing HookReport; display_ms / is_slow rules
# ============================================================================

from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

from HookMonitor.config import Config
from HookMonitor.logging_utils import get_logger
from HookMonitor.reporting.schema import HookFrequency, HookReport, LogEntry, ReportSummary
from HookMonitor.utils.time import get_utc_timestamp

if TYPE_CHECKING:
    from HookMonitor.monitor import MonitorSession

logger = get_logger(__name__)

DEFAULT_SLOW_THRESHOLD_SECONDS = 0.1
DEFAULT_PRECISION = 2


def build_report(entries: Iterable[LogEntry]) -> List[LogEntry]:
    """
    Sort entries by duration, slowest first.

    sorted() is stable, so entries with equal durations keep their dispatch
    order. The input is not modified.

    Args:
        entries: Entries in dispatch order

    Returns:
        New list sorted by duration_seconds descending
    """
    return sorted(entries, key=lambda e: e.duration_seconds, reverse=True)


def display_ms(entry: LogEntry, precision: int = DEFAULT_PRECISION) -> float:
    """Duration in milliseconds rounded for display."""
    return round(entry.duration_seconds * 1000, precision)


def is_slow(entry: LogEntry, threshold_seconds: float = DEFAULT_SLOW_THRESHOLD_SECONDS) -> bool:
    """True when the entry took strictly longer than the threshold."""
    return entry.duration_seconds > threshold_seconds


def hook_frequencies(entries: Iterable[LogEntry], limit: Optional[int] = None) -> List[HookFrequency]:
    """
    Count invocations per hook name.

    Ordered by count descending, then total time descending; ties keep
    first-seen order.
    """
    counts: Dict[str, List[float]] = {}
    for entry in entries:
        stats = counts.setdefault(entry.hook_name, [0, 0.0])
        stats[0] += 1
        stats[1] += entry.duration_seconds
    ranked = sorted(counts.items(), key=lambda kv: (kv[1][0], kv[1][1]), reverse=True)
    if limit is not None:
        ranked = ranked[:limit]
    return [HookFrequency(hook=name, count=int(c), total_seconds=total) for name, (c, total) in ranked]


class ReportBuilder:
    """Builds a HookReport from a monitor session."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def build(self, session: "MonitorSession") -> HookReport:
        """
        Build a report for the session's current entries.

        Args:
            session: Active or stopped MonitorSession

        Returns:
            HookReport with entries sorted slowest first
        """
        return self.build_from_entries(session.entries(), session_id=session.session_id)

    def build_from_entries(self, entries: Iterable[LogEntry], session_id: str = "") -> HookReport:
        entries = list(entries)
        threshold = self.config.report.slow_threshold_seconds
        ordered = build_report(entries)
        summary = ReportSummary(
            total_entries=len(entries),
            slow_entries=sum(1 for e in entries if is_slow(e, threshold)),
            total_seconds=sum(e.duration_seconds for e in entries),
            slow_threshold_seconds=threshold,
        )
        logger.debug(f"Built report: {summary.total_entries} entries, {summary.slow_entries} slow")
        return HookReport(
            session_id=session_id,
            created_at_utc=get_utc_timestamp(),
            entries=ordered,
            summary=summary,
            frequent_hooks=hook_frequencies(entries, limit=self.config.report.top_frequent),
        )
