# ============================================================================
# HookMonitor - Serialization Utilities
#
# Purpose: Serialize HookReport objects and log entries to JSON
# Inputs: HookReport objects, LogEntry sequences
# Outputs: JSON strings (entries in the hook/type/executionTimeSeconds shape)
# Dependencies: json, pydantic
# Usage: json_str = serialize_report_to_json(report)
#
# Changelog:
#   2026-10-06: Initial serialization; compact by default, indent on request
#   2026-10-08: entries_to_jsonl for one-object-per-line exports
# ============================================================================

import json
from typing import Any, Dict, Iterable, Optional

from HookMonitor.reporting.schema import HookReport, LogEntry


def report_to_dict(report: HookReport) -> Dict[str, Any]:
    """Report as plain data with entries in wire form."""
    data = report.model_dump(mode="json", exclude={"entries"})
    data["entries"] = [entry.to_wire() for entry in report.entries]
    return data


def serialize_report_to_json(report: HookReport, indent: Optional[int] = None) -> str:
    """
    Serialize a HookReport to a JSON string.

    Args:
        report: Report to serialize
        indent: JSON indentation (None for compact, 2 for pretty-print)

    Returns:
        JSON string
    """
    report_dict = report_to_dict(report)
    if indent is None:
        return json.dumps(report_dict, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(report_dict, indent=indent, ensure_ascii=False)


def deserialize_report_from_json(json_str: str) -> HookReport:
    """
    Deserialize a HookReport from a JSON string.

    Args:
        json_str: JSON string produced by serialize_report_to_json

    Returns:
        HookReport object
    """
    data = json.loads(json_str)
    data["entries"] = [LogEntry.from_wire(e) for e in data.get("entries") or []]
    return HookReport(**data)


def entries_to_jsonl(entries: Iterable[LogEntry]) -> str:
    """One compact JSON object per line, in the given order."""
    return "".join(json.dumps(e.to_wire(), separators=(",", ":"), ensure_ascii=False) + "\n" for e in entries)
