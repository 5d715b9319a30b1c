# ============================================================================
# HookMonitor - Abstract hook registry
#
# Purpose: The two capabilities the recorder needs from a host's callback
# dispatch system: enumerate hook names and register a callback.
# ============================================================================

from abc import ABC, abstractmethod
from typing import Any, Callable, Set

from HookMonitor.reporting.schema import HookKind

HookCallback = Callable[..., Any]


class HookRegistry(ABC):
    """
    Host-side hook registry consumed by MonitorSession and HookInterceptor.

    Implementations adapt an existing extensible dispatch table (event bus,
    plugin hooks, signal registry). The recorder never reaches into the host
    other than through this interface.
    """

    # Frames the registry puts between the code that dispatches a hook and
    # each callback it invokes. Used to attribute entries to the dispatcher.
    # All callbacks of one dispatch must be invoked from the same frame.
    dispatch_frames: int = 1

    @abstractmethod
    def list_hook_names(self) -> Set[str]:
        """
        Names of all hooks that currently have at least one callback.

        Returns:
            Snapshot set of hook names
        """
        ...

    @abstractmethod
    def register_callback(self, hook_name: str, priority: int, callback: HookCallback, kind: HookKind) -> None:
        """
        Register a callback for a hook.

        Args:
            hook_name: Hook to attach to
            priority: Lower runs earlier among callbacks of the same hook
            callback: Callable invoked with the dispatch arguments
            kind: ACTION callbacks return nothing; FILTER callbacks must
                return the (possibly transformed) first argument

        Raises:
            RegistryError: If the registration is rejected
        """
        ...
