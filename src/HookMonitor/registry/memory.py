# ============================================================================
# HookMonitor - In-memory hook registry
#
# Purpose: Reference HookRegistry implementation with actions and filters
# Inputs: Callback registrations and dispatch calls
# Outputs: Callback invocations in priority order; filtered values
# Dependencies: registry.base
# Usage: registry = InMemoryHookRegistry(); registry.add_action("init", fn)
#        registry.do_action("init")
#
# Changelog:
#   2026-10-03: Initial in-memory registry (used by tests and the CLI demo)
# ============================================================================

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, List, Set, Tuple

from HookMonitor.errors import RegistryError
from HookMonitor.logging_utils import get_logger
from HookMonitor.registry.base import HookCallback, HookRegistry
from HookMonitor.reporting.schema import HookKind

logger = get_logger(__name__)

DEFAULT_PRIORITY = 10


@dataclass
class _Registration:
    priority: int
    sequence: int
    callback: HookCallback


class InMemoryHookRegistry(HookRegistry):
    """
    Dictionary-backed hook table.

    Actions and filters share hook names but are dispatched separately:
    do_action() runs ACTION callbacks, apply_filters() runs FILTER callbacks.
    Callbacks run in ascending priority, registration order within a priority.
    """

    # do_action/apply_filters -> _dispatch -> callback
    dispatch_frames = 2

    def __init__(self):
        self._callbacks: Dict[Tuple[str, HookKind], List[_Registration]] = defaultdict(list)
        self._sequence = 0

    def list_hook_names(self) -> Set[str]:
        return {name for (name, _kind), regs in self._callbacks.items() if regs}

    def register_callback(self, hook_name: str, priority: int, callback: HookCallback, kind: HookKind) -> None:
        if not hook_name:
            raise RegistryError("Hook name must be a non-empty string")
        if not callable(callback):
            raise RegistryError(f"Callback for hook '{hook_name}' is not callable")
        self._sequence += 1
        self._callbacks[(hook_name, HookKind(kind))].append(_Registration(priority, self._sequence, callback))

    def add_action(self, hook_name: str, callback: HookCallback, priority: int = DEFAULT_PRIORITY) -> None:
        self.register_callback(hook_name, priority, callback, HookKind.ACTION)

    def add_filter(self, hook_name: str, callback: HookCallback, priority: int = DEFAULT_PRIORITY) -> None:
        self.register_callback(hook_name, priority, callback, HookKind.FILTER)

    def has_callbacks(self, hook_name: str, kind: HookKind) -> bool:
        return bool(self._callbacks.get((hook_name, kind)))

    def do_action(self, hook_name: str, *args: Any) -> None:
        """Run every action callback of a hook; return values are ignored."""
        self._dispatch(hook_name, HookKind.ACTION, None, args)

    def apply_filters(self, hook_name: str, value: Any, *args: Any) -> Any:
        """
        Pass value through every filter callback of a hook.

        Each callback receives the current value followed by args and its
        return value becomes the next callback's input.

        Returns:
            The filtered value (value unchanged when no filter is registered)
        """
        return self._dispatch(hook_name, HookKind.FILTER, value, args)

    def _dispatch(self, hook_name: str, kind: HookKind, value: Any, args: Tuple[Any, ...]) -> Any:
        regs = self._callbacks.get((hook_name, kind))
        if not regs:
            return value
        # Snapshot so callbacks registered during dispatch run next time only
        ordered = sorted(regs, key=lambda r: (r.priority, r.sequence))
        for reg in ordered:
            if kind is HookKind.FILTER:
                value = reg.callback(value, *args)
            else:
                reg.callback(*args)
        return value
