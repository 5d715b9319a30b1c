# ============================================================================
# HookMonitor - Error Classes
#
# Purpose: Exception hierarchy for the recorder and its rendering boundary
# Inputs: Error messages and context
# Outputs: Structured exceptions
# Dependencies: None
# Usage: raise TemplateNotFoundError("Template file not found", details=path)
#
# Changelog:
#   2026-10-02: Initial error classes
# ============================================================================

from typing import Optional


class HookMonitorError(Exception):
    """Base exception for all HookMonitor errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        """
        Initialize error.

        Args:
            message: Error message
            details: Optional detailed error information
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        """String representation."""
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class ConfigurationError(HookMonitorError):
    """Raised when configuration is invalid or missing."""

    pass


class RegistryError(HookMonitorError):
    """Raised when a hook registry rejects a registration."""

    pass


class RenderError(HookMonitorError):
    """Raised when a report cannot be rendered."""

    pass


class TemplateNotFoundError(RenderError):
    """Raised when a report template file does not exist."""

    def __init__(self, template_path: str):
        super().__init__(f"Template file not found: {template_path}")
        self.template_path = template_path


class SinkError(HookMonitorError):
    """Raised when sink write operation fails."""

    pass
