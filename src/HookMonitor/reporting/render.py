# ============================================================================
# HookMonitor - Report Rendering
#
# Purpose: Turn a HookReport into text or HTML for people to read
# Inputs: HookReport, template directory
# Outputs: Rendered string
# Dependencies: string.Template, html, pathlib
# Usage: text = ReportRenderer.from_config(config).render(report)
#
# Changelog:
#   2026-10-07: Initial template renderer (report.txt, report.html) and
#               plain-text table for the CLI
#   2026-10-18: Escape session fields in HTML output
# ============================================================================

import html
from pathlib import Path
from string import Template
from typing import List, Optional

from HookMonitor.config import Config
from HookMonitor.errors import RenderError, TemplateNotFoundError
from HookMonitor.logging_utils import get_logger
from HookMonitor.reporting.report_builder import (
    DEFAULT_PRECISION,
    DEFAULT_SLOW_THRESHOLD_SECONDS,
    display_ms,
    is_slow,
)
from HookMonitor.reporting.schema import HookReport, LogEntry

logger = get_logger(__name__)

PACKAGE_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


class ReportRenderer:
    """
    Renders reports through ``string.Template`` files.

    Templates receive: $session_id, $created_at, $total_entries,
    $slow_entries, $total_ms, $slow_threshold_ms, $rows and $frequent.
    Rows are formatted as HTML table rows for ``.html`` templates and as
    fixed-width text otherwise.
    """

    def __init__(
        self,
        template_dir: Optional[str] = None,
        precision: int = DEFAULT_PRECISION,
        slow_threshold_seconds: float = DEFAULT_SLOW_THRESHOLD_SECONDS,
    ):
        self.template_dir = Path(template_dir) if template_dir else PACKAGE_TEMPLATE_DIR
        self.precision = precision
        self.slow_threshold_seconds = slow_threshold_seconds

    @classmethod
    def from_config(cls, config: Config) -> "ReportRenderer":
        return cls(
            template_dir=config.report.template_dir,
            precision=config.report.precision,
            slow_threshold_seconds=config.report.slow_threshold_seconds,
        )

    def load_template(self, template_name: str) -> Template:
        """
        Read a template file from the template directory.

        Raises:
            TemplateNotFoundError: If the file does not exist
        """
        template_path = self.template_dir / template_name
        if not template_path.is_file():
            logger.error(f"Template file not found: {template_path}")
            raise TemplateNotFoundError(str(template_path))
        return Template(template_path.read_text(encoding="utf-8"))

    def render(self, report: HookReport, template_name: str = "report.txt") -> str:
        """
        Render a report with the named template.

        Raises:
            TemplateNotFoundError: If the template file does not exist
            RenderError: If the template references an unknown placeholder
        """
        template = self.load_template(template_name)
        as_html = template_name.endswith((".html", ".htm"))
        session_id, created_at = report.session_id, report.created_at_utc
        if as_html:
            session_id, created_at = html.escape(session_id), html.escape(created_at)
            rows = "\n".join(self._html_row(e) for e in report.entries)
            frequent = "\n".join(
                f"<li>{html.escape(f.hook)}: {f.count}</li>" for f in report.frequent_hooks
            )
        else:
            rows = "\n".join(self._text_row(e) for e in report.entries)
            frequent = "\n".join(f"  {f.hook}: {f.count}" for f in report.frequent_hooks)
        try:
            return template.substitute(
                session_id=session_id,
                created_at=created_at,
                total_entries=report.summary.total_entries,
                slow_entries=report.summary.slow_entries,
                total_ms=f"{report.summary.total_seconds * 1000:.{self.precision}f}",
                slow_threshold_ms=f"{report.summary.slow_threshold_seconds * 1000:.{self.precision}f}",
                rows=rows,
                frequent=frequent,
            )
        except (KeyError, ValueError) as e:
            raise RenderError(f"Template {template_name} could not be rendered", details=str(e)) from e

    def _format_ms(self, entry: LogEntry) -> str:
        return f"{display_ms(entry, self.precision):.{self.precision}f} ms"

    def _text_row(self, entry: LogEntry) -> str:
        flag = "SLOW" if is_slow(entry, self.slow_threshold_seconds) else ""
        return (
            f"{entry.hook_name[:40]:40s} {entry.kind.value:7s} {self._format_ms(entry):>12s} {flag:4s} "
            f"{entry.caller.describe()}"
        )

    def _html_row(self, entry: LogEntry) -> str:
        css = "slow-hook" if is_slow(entry, self.slow_threshold_seconds) else ""
        cells = [entry.hook_name, entry.kind.value, self._format_ms(entry), entry.caller.describe()]
        tds = "".join(f"<td>{html.escape(c)}</td>" for c in cells)
        return f'<tr class="{css}">{tds}</tr>'


def render_table(report: HookReport, precision: int = DEFAULT_PRECISION, limit: Optional[int] = None) -> str:
    """
    Plain-text table of a report, without a template file.

    Args:
        report: Report to print
        precision: Decimal places for milliseconds
        limit: Show at most this many rows (slowest first)
    """
    renderer = ReportRenderer(precision=precision, slow_threshold_seconds=report.summary.slow_threshold_seconds)
    entries = report.entries if limit is None else report.entries[:limit]
    lines: List[str] = [
        "-" * 100,
        f"{'Hook':40s} {'Type':7s} {'Time':>12s} {'':4s} Caller",
        "-" * 100,
    ]
    lines.extend(renderer._text_row(e) for e in entries)
    lines.append("-" * 100)
    lines.append(
        f"{report.summary.total_entries} invocation(s), {report.summary.slow_entries} slow "
        f"(> {report.summary.slow_threshold_seconds * 1000:.0f} ms)"
    )
    return "\n".join(lines)
