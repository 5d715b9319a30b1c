# ============================================================================
# HookMonitor - Request Trigger Tests
# ============================================================================

from HookMonitor.config import Config
from HookMonitor.trigger import should_start, start_if_requested


def test_requires_trigger_param():
    assert should_start({}) is False
    assert should_start({"hook_monitor": "1"}) is True
    assert should_start({"hook_monitor": ""}) is True


def test_authorizer_is_consulted():
    assert should_start({"hook_monitor": "1"}, authorizer=lambda: False) is False
    assert should_start({"hook_monitor": "1"}, authorizer=lambda: True) is True


def test_authorizer_not_called_without_param():
    calls = []
    should_start({}, authorizer=lambda: calls.append(1) or True)
    assert calls == []


def test_custom_trigger_param():
    config = Config()
    config.monitor.trigger_param = "debug_hooks"
    assert should_start({"hook_monitor": "1"}, config) is False
    assert should_start({"debug_hooks": "1"}, config) is True


def test_start_if_requested_starts_session(session, registry):
    registry.add_action("init", lambda: None)

    assert start_if_requested(session, registry, {"hook_monitor": "1"}) is True
    assert session.is_active() is True
    registry.do_action("init")
    assert len(session.entries()) == 1


def test_start_if_requested_denied(session, registry):
    registry.add_action("init", lambda: None)

    assert start_if_requested(session, registry, {"hook_monitor": "1"}, authorizer=lambda: False) is False
    assert session.is_active() is False


def test_start_if_requested_twice_is_noop(session, registry):
    registry.add_action("init", lambda: None)
    start_if_requested(session, registry, {"hook_monitor": "1"})
    registry.do_action("init")

    assert start_if_requested(session, registry, {"hook_monitor": "1"}) is False
    assert len(session.entries()) == 1
