"""
HookMonitor - Monitor Session

Owns one monitoring run: the start/stop lifecycle, the pending start times
pushed by entry wrappers, and the append-only log of hook invocations.

Sessions are constructed by the host and passed to whatever needs them; there
is no global instance. Attachment is a one-time snapshot: hooks that get their
first callback after start() are not instrumented during that run.

Pending starts hold the frame that invoked the entry wrapper. The exit wrapper
of the same dispatch is invoked from that same frame, so a dispatch whose
callback raised (and therefore never reached its exit wrapper) cannot be
mistaken for the one that is finishing.
"""

import sys
import threading
import uuid
from types import FrameType
from typing import Dict, List, NamedTuple, Optional, Set, Tuple

from HookMonitor.config import Config
from HookMonitor.instrumentation.caller import CallerResolver, FrameCallerResolver
from HookMonitor.instrumentation.interceptor import HookInterceptor
from HookMonitor.logging_utils import get_logger
from HookMonitor.registry.base import HookRegistry
from HookMonitor.reporting.schema import HookKind, LogEntry
from HookMonitor.utils.time import Timer

logger = get_logger(__name__)


class PendingStart(NamedTuple):
    dispatch_frame: Optional[FrameType]  # None pairs last-in-first-out
    started: float


def _live_frame_ids() -> Set[int]:
    """id() of every frame currently executing on the calling thread."""
    ids: Set[int] = set()
    frame = sys._getframe(1)
    while frame is not None:
        ids.add(id(frame))
        frame = frame.f_back
    return ids


def _drop_abandoned(stack: List[PendingStart], live: Set[int]) -> List[PendingStart]:
    return [p for p in stack if p.dispatch_frame is None or id(p.dispatch_frame) in live]


class MonitorSession:
    """
    One monitoring run over a hook registry.

    Use start(registry) to instrument every hook the registry knows about,
    let the host dispatch hooks, then read entries() or hand the session to
    a ReportBuilder. stop() ends the run; a later start() begins a fresh one.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        timer: Optional[Timer] = None,
        caller_resolver: Optional[CallerResolver] = None,
    ):
        """
        Args:
            config: Monitor settings (priorities, kinds). Defaults to Config().
            timer: Clock source; anything with now() and wall_time().
            caller_resolver: Attribution source for log entries.
        """
        self.config = config or Config()
        self.timer = timer or Timer()
        self.caller_resolver = caller_resolver or FrameCallerResolver()
        self.session_id: str = uuid.uuid4().hex
        self.interceptor = HookInterceptor(
            self,
            entry_priority=self.config.monitor.entry_priority,
            exit_priority=self.config.monitor.exit_priority,
            kinds=self.config.monitor.kinds,
        )
        self._active = False
        self._entries: List[LogEntry] = []
        # (thread id, hook name) -> stack of pending starts
        self._pending: Dict[Tuple[int, str], List[PendingStart]] = {}
        # id(registry) -> (registry, names with wrappers already registered)
        self._attached: Dict[int, Tuple[HookRegistry, Set[str]]] = {}
        self._lock = threading.Lock()

    def start(self, registry: HookRegistry) -> bool:
        """
        Begin monitoring every hook currently known to the registry.

        Args:
            registry: Host registry to attach interceptors to

        Returns:
            True if a new run started, False if one was already active
            (in which case nothing is reset)
        """
        if self._active:
            logger.debug("start() ignored: session already active")
            return False

        self._active = True
        self.session_id = uuid.uuid4().hex
        with self._lock:
            self._entries = []
            self._pending = {}

        _, attached = self._attached.setdefault(id(registry), (registry, set()))
        new_names = sorted(registry.list_hook_names() - attached)
        for hook_name in new_names:
            self.interceptor.attach(hook_name, registry)
            attached.add(hook_name)

        logger.info(f"Monitoring started: session={self.session_id[:8]}, {len(attached)} hook(s) instrumented")
        return True

    def stop(self) -> None:
        """End the run. Wrappers stay registered but stop recording."""
        if not self._active:
            return
        self._active = False
        with self._lock:
            self._pending = {}
        logger.info(f"Monitoring stopped: session={self.session_id[:8]}, {len(self._entries)} entries logged")

    def is_active(self) -> bool:
        return self._active

    def entries(self) -> Tuple[LogEntry, ...]:
        """Logged entries in dispatch order."""
        with self._lock:
            return tuple(self._entries)

    @property
    def pending_start_times(self) -> Dict[str, List[float]]:
        """
        Start readings of dispatches still in progress on the calling thread,
        by hook name. Starts left behind by dispatches that raised are omitted.
        """
        tid = threading.get_ident()
        live = _live_frame_ids()
        pending: Dict[str, List[float]] = {}
        with self._lock:
            for (owner, name), stack in self._pending.items():
                if owner != tid:
                    continue
                started = [p.started for p in _drop_abandoned(stack, live)]
                if started:
                    pending[name] = started
        return pending

    def mark_start(self, hook_name: str, dispatch_frame: Optional[FrameType] = None) -> None:
        """
        Push a start reading for hook_name (called by entry wrappers).

        Args:
            hook_name: Hook being entered
            dispatch_frame: Frame invoking the wrapper; the exit wrapper
                of the same dispatch passes the same frame to log_hook()
        """
        start = self.timer.now()
        key = (threading.get_ident(), hook_name)
        with self._lock:
            stack = self._pending.setdefault(key, [])
            if stack:
                stack[:] = _drop_abandoned(stack, _live_frame_ids())
            stack.append(PendingStart(dispatch_frame, start))

    def _pop_start(self, key: Tuple[int, str], dispatch_frame: Optional[FrameType]) -> Optional[float]:
        """Pop the pending start for a dispatch, discarding abandoned ones above it."""
        with self._lock:
            stack = self._pending.get(key)
            if not stack:
                return None
            index = len(stack) - 1
            if dispatch_frame is not None:
                while index >= 0 and stack[index].dispatch_frame is not dispatch_frame:
                    index -= 1
                if index < 0:
                    return None
            if index < len(stack) - 1:
                logger.debug(f"Discarding {len(stack) - 1 - index} abandoned start(s) for '{key[1]}'")
            started = stack[index].started
            del stack[index:]
            if not stack:
                del self._pending[key]
            return started

    def log_hook(
        self,
        hook_name: str,
        kind: HookKind,
        skip_frames: int = 0,
        dispatch_frame: Optional[FrameType] = None,
    ) -> Optional[LogEntry]:
        """
        Close the most recent pending invocation of hook_name and log it.

        Nested dispatches of the same hook pair last-in-first-out, so each
        level measures its own span. Without a pending start the duration
        is 0.

        Args:
            hook_name: Hook being exited
            kind: ACTION or FILTER
            skip_frames: Frames above log_hook's caller to skip when
                attributing the entry (0 attributes to the direct caller)
            dispatch_frame: Frame given to mark_start() for this
                dispatch; None pairs with the most recent start

        Returns:
            The appended entry, or None if the session is not active
        """
        if not self._active:
            return None

        end = self.timer.now()
        start = self._pop_start((threading.get_ident(), hook_name), dispatch_frame)

        if start is None:
            logger.debug(f"No pending start for '{hook_name}'; duration recorded as 0")
            duration = 0.0
        else:
            duration = max(end - start, 0.0)

        entry = LogEntry(
            hook_name=hook_name,
            kind=HookKind(kind),
            timestamp=self.timer.wall_time(),
            duration_seconds=duration,
            # +1 skips log_hook itself
            caller=self.caller_resolver.resolve_caller(skip_frames + 1),
        )
        with self._lock:
            self._entries.append(entry)
        return entry
