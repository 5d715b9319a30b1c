# ============================================================================
# HookMonitor - Local File Sink
#
# Purpose: Write hook reports to local filesystem as JSON files
# Inputs: HookReport objects
# Outputs: hooks_<session>.json (and optional .jsonl entry log) in a directory
# Dependencies: pathlib, base, utils.serialization
# Usage: sink = LocalFileSink("runs"); sink.write(report)
#
# Changelog:
#   2026-10-06: Initial LocalFileSink
#   2026-10-08: Optional JSON Lines entry log next to the report
# ============================================================================

from pathlib import Path
from typing import Optional

from HookMonitor.errors import SinkError
from HookMonitor.logging_utils import get_logger
from HookMonitor.reporting.schema import HookReport
from HookMonitor.sinks.base import Sink
from HookMonitor.utils.serialization import entries_to_jsonl, serialize_report_to_json

logger = get_logger(__name__)


class LocalFileSink(Sink):
    """
    Sink that writes reports to local JSON files.
    """

    def __init__(self, output_dir: str = "runs", indent: Optional[int] = None, write_jsonl: bool = False):
        """
        Initialize local file sink.

        Args:
            output_dir: Directory path for output files
            indent: JSON indentation (None=compact, 2=pretty)
            write_jsonl: Also write one JSON object per entry to hooks_<session>.jsonl
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.indent = indent
        self.write_jsonl = write_jsonl
        logger.info(f"LocalFileSink initialized: {self.output_dir}")

    def write(self, report: HookReport) -> str:
        """
        Write report to a JSON file.

        Args:
            report: Report to write

        Returns:
            Path to written report file

        Raises:
            SinkError: If write fails
        """
        filepath = None
        try:
            session = (report.session_id or "session")[:8]
            filepath = self.output_dir / f"hooks_{session}.json"
            filepath.write_text(serialize_report_to_json(report, indent=self.indent), encoding="utf-8")

            if self.write_jsonl:
                jsonl_path = self.output_dir / f"hooks_{session}.jsonl"
                jsonl_path.write_text(entries_to_jsonl(report.entries), encoding="utf-8")

            logger.info(f"Report written to {filepath}")
            return str(filepath)

        except OSError as e:
            logger.exception("Failed to write report to file")
            raise SinkError(f"Failed to write report to {filepath if filepath else 'file'}", details=str(e)) from e
