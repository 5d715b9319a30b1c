# ============================================================================
# HookMonitor - Report Schema
#
# Purpose: Pydantic models for log entries and hook reports
# Inputs: None (schema definitions)
# Outputs: Type-safe log entry and report models
# Dependencies: pydantic
# Usage: entry = LogEntry(hook_name="init", kind=HookKind.ACTION, ...)
#
# Changelog:
#   2026-10-02: Initial schema (HookKind, CallerInfo, LogEntry)
#   2026-10-06: Added HookReport, ReportSummary, HookFrequency; wire format
#               helpers on LogEntry (hook/type/executionTimeSeconds/caller)
# ============================================================================

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class HookKind(str, Enum):
    """How a hook is dispatched by the host."""

    ACTION = "action"  # side effects only, return value ignored
    FILTER = "filter"  # transforms and returns its first argument


class CallerInfo(BaseModel):
    """Best-effort attribution of the code that dispatched a hook."""

    model_config = ConfigDict(frozen=True)

    function_name: str = ""
    container_name: Optional[str] = None
    source_file: Optional[str] = None  # basename only
    source_line: Optional[int] = None

    def is_blank(self) -> bool:
        return not self.function_name and self.source_file is None and self.source_line is None

    def describe(self) -> str:
        """Human-readable form: ``Class::function in file.py (line N)``."""
        prefix = f"{self.container_name}::" if self.container_name else ""
        location = f" in {self.source_file}" if self.source_file else ""
        line = self.source_line if self.source_line is not None else 0
        return f"{prefix}{self.function_name}{location} (line {line})"


class LogEntry(BaseModel):
    """One observed hook invocation."""

    model_config = ConfigDict(frozen=True)

    hook_name: str
    kind: HookKind
    timestamp: float  # epoch seconds at completion
    duration_seconds: float = Field(default=0.0, ge=0.0)
    caller: CallerInfo = Field(default_factory=CallerInfo)

    def to_wire(self) -> Dict[str, Any]:
        """
        Serialize to the exported JSON object shape.

        Returns:
            {"hook", "type", "timestamp", "executionTimeSeconds",
             "caller": {"function", "class", "file", "line"}}
        """
        return {
            "hook": self.hook_name,
            "type": self.kind.value,
            "timestamp": self.timestamp,
            "executionTimeSeconds": self.duration_seconds,
            "caller": {
                "function": self.caller.function_name,
                "class": self.caller.container_name,
                "file": self.caller.source_file,
                "line": self.caller.source_line,
            },
        }

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "LogEntry":
        """Inverse of to_wire()."""
        caller = data.get("caller") or {}
        return cls(
            hook_name=data["hook"],
            kind=HookKind(data["type"]),
            timestamp=float(data["timestamp"]),
            duration_seconds=float(data.get("executionTimeSeconds") or 0.0),
            caller=CallerInfo(
                function_name=caller.get("function") or "",
                container_name=caller.get("class") or None,
                source_file=caller.get("file") or None,
                source_line=caller.get("line"),
            ),
        )


class HookFrequency(BaseModel):
    """How often one hook name fired during a session."""

    hook: str
    count: int
    total_seconds: float


class ReportSummary(BaseModel):
    """Totals over all entries of a report."""

    total_entries: int
    slow_entries: int
    total_seconds: float
    slow_threshold_seconds: float


class HookReport(BaseModel):
    """
    Complete report for one monitoring session.

    entries are sorted by duration (slowest first); the original dispatch
    order is recoverable from each entry's timestamp.
    """

    session_id: str
    created_at_utc: str
    entries: List[LogEntry] = Field(default_factory=list)
    summary: ReportSummary
    frequent_hooks: List[HookFrequency] = Field(default_factory=list)
