# ============================================================================
# HookMonitor - Base Sink Interface
#
# Purpose: Abstract base class for report export sinks
# Inputs: HookReport objects
# Outputs: Location identifier string
# Dependencies: abc, reporting.schema
# Usage: class MySink(Sink): ...
#
# Changelog:
#   2026-10-06: Initial Sink interface
# ============================================================================

from abc import ABC, abstractmethod

from HookMonitor.reporting.schema import HookReport


class Sink(ABC):
    """
    Abstract base class for report export sinks.

    Sinks hand a finished HookReport to something outside the process
    (a file, a collector endpoint). They are never read back into a session.
    """

    @abstractmethod
    def write(self, report: HookReport) -> str:
        """
        Write a report to the sink.

        Args:
            report: Report to export

        Returns:
            Location identifier (file path, URL, etc.)

        Raises:
            SinkError: If write operation fails
        """
        pass
