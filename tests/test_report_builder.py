# ============================================================================
# HookMonitor - Report Builder Tests
#
# Purpose: Ordering, display rules, HookReport construction, end-to-end runs
# ============================================================================

import pytest

from HookMonitor.config import Config
from HookMonitor.monitor import MonitorSession
from HookMonitor.reporting.report_builder import (
    ReportBuilder,
    build_report,
    display_ms,
    hook_frequencies,
    is_slow,
)
from HookMonitor.reporting.schema import HookKind, LogEntry


def _entry(name: str, duration: float, ts: float = 0.0, kind: HookKind = HookKind.ACTION) -> LogEntry:
    return LogEntry(hook_name=name, kind=kind, timestamp=ts, duration_seconds=duration)


class TestBuildReport:
    def test_sorts_descending(self):
        entries = [_entry("fast", 0.001), _entry("slow", 0.5), _entry("mid", 0.02)]
        assert [e.hook_name for e in build_report(entries)] == ["slow", "mid", "fast"]

    def test_ties_keep_dispatch_order(self):
        entries = [_entry("x", 0.1, ts=1), _entry("y", 0.3, ts=2), _entry("z", 0.1, ts=3), _entry("w", 0.1, ts=4)]
        assert [e.hook_name for e in build_report(entries)] == ["y", "x", "z", "w"]

    def test_idempotent(self):
        entries = [_entry("a", 0.0), _entry("b", 0.2), _entry("c", 0.0), _entry("d", 0.2)]
        once = build_report(entries)
        assert build_report(once) == once

    def test_does_not_modify_input(self):
        entries = [_entry("a", 0.1), _entry("b", 0.2)]
        build_report(entries)
        assert [e.hook_name for e in entries] == ["a", "b"]

    def test_empty(self):
        assert build_report([]) == []


class TestDisplayRules:
    def test_display_ms_rounds_to_two_places(self):
        assert display_ms(_entry("a", 0.0123456)) == 12.35
        assert display_ms(_entry("a", 0.0)) == 0.0

    def test_display_ms_precision(self):
        assert display_ms(_entry("a", 0.0123456), precision=3) == 12.346

    def test_slow_threshold_is_strict(self):
        assert is_slow(_entry("a", 0.1)) is False
        assert is_slow(_entry("a", 0.1001)) is True
        assert is_slow(_entry("a", 0.05), threshold_seconds=0.01) is True


class TestHookFrequencies:
    def test_counts_and_orders_by_frequency(self):
        entries = [_entry("a", 0.1), _entry("b", 0.01), _entry("b", 0.01), _entry("c", 0.0), _entry("b", 0.01)]
        freq = hook_frequencies(entries)
        assert [(f.hook, f.count) for f in freq] == [("b", 3), ("a", 1), ("c", 1)]
        assert freq[0].total_seconds == pytest.approx(0.03)

    def test_limit(self):
        entries = [_entry(str(i), 0.0) for i in range(5)]
        assert len(hook_frequencies(entries, limit=2)) == 2


class TestReportBuilder:
    def test_summary_counts(self):
        config = Config()
        entries = [_entry("a", 0.2), _entry("b", 0.05), _entry("c", 0.15)]
        report = ReportBuilder(config).build_from_entries(entries, session_id="abc")

        assert report.session_id == "abc"
        assert report.summary.total_entries == 3
        assert report.summary.slow_entries == 2
        assert report.summary.total_seconds == pytest.approx(0.4)
        assert report.summary.slow_threshold_seconds == 0.1
        assert [e.hook_name for e in report.entries] == ["a", "c", "b"]

    def test_custom_threshold(self):
        config = Config()
        config.report.slow_threshold_seconds = 0.01
        report = ReportBuilder(config).build_from_entries([_entry("a", 0.05), _entry("b", 0.001)])
        assert report.summary.slow_entries == 1


class TestEndToEnd:
    def test_save_post_single_callback(self, session, registry):
        registry.add_action("save_post", lambda post_id: None)
        session.start(registry)

        registry.do_action("save_post", 42)

        entries = session.entries()
        assert len(entries) == 1
        wire = entries[0].to_wire()
        assert wire["hook"] == "save_post"
        assert wire["type"] == "action"
        assert wire["executionTimeSeconds"] >= 0

    def test_slower_hook_reported_first(self, session, registry, clock):
        registry.add_action("a", lambda: clock.advance(0.2))
        registry.add_action("b", lambda: clock.advance(0.05))
        session.start(registry)

        registry.do_action("a")
        registry.do_action("b")

        assert [e.hook_name for e in session.entries()] == ["a", "b"]
        assert [e.hook_name for e in build_report(session.entries())] == ["a", "b"]

    def test_faster_first_dispatch_is_reordered(self, session, registry, clock):
        registry.add_action("b", lambda: clock.advance(0.05))
        registry.add_action("a", lambda: clock.advance(0.2))
        session.start(registry)

        registry.do_action("b")
        registry.do_action("a")

        report = ReportBuilder().build(session)
        assert [e.hook_name for e in report.entries] == ["a", "b"]
        assert report.session_id == session.session_id

    def test_real_clock_durations_are_non_negative(self, config, registry):
        session = MonitorSession(config)
        registry.add_action("init", lambda: sum(range(1000)))
        session.start(registry)
        registry.do_action("init")

        assert session.entries()[0].duration_seconds >= 0
