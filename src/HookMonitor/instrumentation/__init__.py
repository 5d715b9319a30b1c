# ============================================================================
# HookMonitor - Instrumentation Package
#
# Purpose: Caller attribution and hook interception
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from HookMonitor.instrumentation import HookInterceptor
#
# Changelog:
#   2026-10-03: Initial instrumentation package
# ============================================================================

from HookMonitor.instrumentation.caller import CallerResolver, FrameCallerResolver
from HookMonitor.instrumentation.interceptor import HookInterceptor

__all__ = [
    "CallerResolver",
    "FrameCallerResolver",
    "HookInterceptor",
]
