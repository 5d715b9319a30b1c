# ============================================================================
# HookMonitor - Hook Interceptor
#
# Purpose: Bracket every callback of a hook with entry/exit timing callbacks
# Inputs: Hook name, HookRegistry, owning MonitorSession
# Outputs: Registered wrapper callbacks; LogEntry appended per dispatch
# Dependencies: registry.base, reporting.schema
# Usage: HookInterceptor(session).attach("init", registry)
#
# Changelog:
#   2026-10-03: Initial interceptor (entry at -9999, exit at 9999)
#   2026-10-05: Wrappers go inert when the session is stopped
#   2026-10-18: Entry and exit pair on the frame that invoked them, so a
#               dispatch that raised cannot capture a later exit
# ============================================================================

import sys
from typing import TYPE_CHECKING, Any, Iterable, Tuple

from HookMonitor.logging_utils import get_logger
from HookMonitor.registry.base import HookCallback, HookRegistry
from HookMonitor.reporting.schema import HookKind

if TYPE_CHECKING:
    from HookMonitor.monitor import MonitorSession

logger = get_logger(__name__)

DEFAULT_ENTRY_PRIORITY = -9999
DEFAULT_EXIT_PRIORITY = 9999

# Frames between the registry's callback invocation and session.log_hook()
_INTERCEPTOR_FRAMES = 1


class HookInterceptor:
    """
    Attaches timing wrappers to hooks on behalf of a MonitorSession.

    The entry wrapper runs first among a hook's callbacks and pushes a start
    time; the exit wrapper runs last and asks the session to log the
    invocation. Filter wrappers return their value untouched.
    """

    def __init__(
        self,
        session: "MonitorSession",
        entry_priority: int = DEFAULT_ENTRY_PRIORITY,
        exit_priority: int = DEFAULT_EXIT_PRIORITY,
        kinds: Iterable[HookKind] = (HookKind.ACTION, HookKind.FILTER),
    ):
        self.session = session
        self.entry_priority = entry_priority
        self.exit_priority = exit_priority
        self.kinds: Tuple[HookKind, ...] = tuple(HookKind(k) for k in kinds)

    def attach(self, hook_name: str, registry: HookRegistry) -> None:
        """
        Register entry and exit wrappers for every configured kind.

        Args:
            hook_name: Hook to instrument
            registry: Host registry to register the wrappers with
        """
        skip_frames = _INTERCEPTOR_FRAMES + getattr(registry, "dispatch_frames", 1)
        for kind in self.kinds:
            registry.register_callback(hook_name, self.entry_priority, self._entry_callback(hook_name, kind), kind)
            registry.register_callback(
                hook_name, self.exit_priority, self._exit_callback(hook_name, kind, skip_frames), kind
            )
        logger.debug(f"Attached interceptor to '{hook_name}' ({', '.join(k.value for k in self.kinds)})")

    def _entry_callback(self, hook_name: str, kind: HookKind) -> HookCallback:
        session = self.session

        if kind is HookKind.FILTER:

            def filter_entry(value: Any = None, *args: Any) -> Any:
                if session.is_active():
                    session.mark_start(hook_name, dispatch_frame=sys._getframe(1))
                return value

            return filter_entry

        def action_entry(*args: Any) -> None:
            if session.is_active():
                session.mark_start(hook_name, dispatch_frame=sys._getframe(1))

        return action_entry

    def _exit_callback(self, hook_name: str, kind: HookKind, skip_frames: int) -> HookCallback:
        session = self.session

        if kind is HookKind.FILTER:

            def filter_exit(value: Any = None, *args: Any) -> Any:
                if session.is_active():
                    session.log_hook(hook_name, kind, skip_frames=skip_frames, dispatch_frame=sys._getframe(1))
                return value

            return filter_exit

        def action_exit(*args: Any) -> None:
            if session.is_active():
                session.log_hook(hook_name, kind, skip_frames=skip_frames, dispatch_frame=sys._getframe(1))

        return action_exit
