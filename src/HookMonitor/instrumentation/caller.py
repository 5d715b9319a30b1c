# ============================================================================
# HookMonitor - Caller Resolution
#
# Purpose: Attribute a hook dispatch to the code that triggered it
# Inputs: Number of frames to skip above the resolver
# Outputs: CallerInfo (function, class, file basename, line)
# Dependencies: sys, os
# Usage: info = FrameCallerResolver().resolve_caller(skip_frames=3)
#
# Changelog:
#   2026-10-02: Initial frame-based resolver
#   2026-10-04: CallerResolver ABC so hosts can plug their own stack source
# ============================================================================

import os
import sys
from abc import ABC, abstractmethod
from types import FrameType
from typing import Callable, Optional

from HookMonitor.logging_utils import get_logger
from HookMonitor.reporting.schema import CallerInfo

logger = get_logger(__name__)

BLANK_CALLER = CallerInfo()


class CallerResolver(ABC):
    """
    Capability interface for caller attribution.

    Implementations must return the same CallerInfo shape and must never
    raise: attribution is diagnostic data only.
    """

    @abstractmethod
    def resolve_caller(self, skip_frames: int = 0) -> CallerInfo:
        """
        Resolve the frame ``skip_frames`` levels above the direct caller.

        Args:
            skip_frames: 0 reports the function that called resolve_caller,
                1 reports its caller, and so on.

        Returns:
            CallerInfo, blank when no such frame is available
        """
        ...


class FrameCallerResolver(CallerResolver):
    """Resolver backed by CPython frame objects (``sys._getframe``)."""

    def __init__(self, frame_getter: Optional[Callable[[int], Optional[FrameType]]] = None):
        """
        Args:
            frame_getter: Returns the frame at a given depth, counted from
                resolve_caller itself (0); defaults to sys._getframe.
                Returning None or raising ValueError means the stack is not
                available that deep.
        """
        self._frame_getter = frame_getter

    def resolve_caller(self, skip_frames: int = 0) -> CallerInfo:
        # +1 skips resolve_caller itself
        depth = max(skip_frames, 0) + 1
        try:
            if self._frame_getter is not None:
                frame = self._frame_getter(depth)
            else:
                frame = sys._getframe(depth)
        except (ValueError, AttributeError):
            logger.debug(f"No frame available at depth {depth}")
            return BLANK_CALLER
        if frame is None:
            return BLANK_CALLER
        return _caller_from_frame(frame)


def _container_name(frame: FrameType) -> Optional[str]:
    """Class name for frames running inside a method or classmethod."""
    f_locals = frame.f_locals
    if "self" in f_locals:
        return type(f_locals["self"]).__name__
    cls = f_locals.get("cls")
    if isinstance(cls, type):
        return cls.__name__
    return None


def _caller_from_frame(frame: FrameType) -> CallerInfo:
    code = frame.f_code
    filename = code.co_filename
    return CallerInfo(
        function_name=code.co_name,
        container_name=_container_name(frame),
        # Basename only; full paths stay out of reports
        source_file=os.path.basename(filename) if filename else None,
        source_line=frame.f_lineno,
    )
