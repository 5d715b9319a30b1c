# ============================================================================
# HookMonitor - Request Trigger
#
# Purpose: Start a monitoring session when an inbound request asks for it
# Inputs: Request query parameters, authorizer callable
# Outputs: Whether a session was started
# Dependencies: config, monitor
# Usage: start_if_requested(session, registry, request.args, config,
#                           authorizer=lambda: user.is_admin)
#
# Changelog:
#   2026-10-07: Initial trigger helpers
# ============================================================================

from typing import Callable, Mapping, Optional

from HookMonitor.config import Config
from HookMonitor.logging_utils import get_logger
from HookMonitor.monitor import MonitorSession
from HookMonitor.registry.base import HookRegistry

logger = get_logger(__name__)

Authorizer = Callable[[], bool]


def should_start(
    query_params: Mapping[str, object],
    config: Optional[Config] = None,
    authorizer: Optional[Authorizer] = None,
) -> bool:
    """
    Decide whether a request asks for monitoring and is allowed to.

    The trigger parameter only needs to be present; its value is ignored.
    Authorization belongs to the host: without an authorizer every request
    carrying the parameter qualifies.
    """
    config = config or Config()
    if config.monitor.trigger_param not in query_params:
        return False
    if authorizer is not None and not authorizer():
        logger.warning(f"Monitoring requested via '{config.monitor.trigger_param}' but not authorized")
        return False
    return True


def start_if_requested(
    session: MonitorSession,
    registry: HookRegistry,
    query_params: Mapping[str, object],
    config: Optional[Config] = None,
    authorizer: Optional[Authorizer] = None,
) -> bool:
    """
    Start session on registry when should_start() agrees.

    Returns:
        True if this call started a new run
    """
    if not should_start(query_params, config or session.config, authorizer):
        return False
    return session.start(registry)
