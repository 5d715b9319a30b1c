# ============================================================================
# HookMonitor - Registry Package
#
# Purpose: Hook registry interface and the in-memory reference registry
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from HookMonitor.registry import HookRegistry, InMemoryHookRegistry
#
# Changelog:
#   2026-10-03: Initial registry package
# ============================================================================

from HookMonitor.registry.base import HookCallback, HookRegistry
from HookMonitor.registry.memory import InMemoryHookRegistry

__all__ = ["HookCallback", "HookRegistry", "InMemoryHookRegistry"]
