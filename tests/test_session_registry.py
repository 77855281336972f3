import gc
import weakref

import pytest

from cover_bot.data.constants import SessionStep
from cover_bot.services.session_registry import SessionRegistry
from tests.conftest import ScriptedService


def test_one_controller_per_chat(issue_source):
    built = []

    def factory():
        service = ScriptedService()
        built.append(service)
        return service

    registry = SessionRegistry(factory, "forbes", issue_source=issue_source)
    assert built == []

    first = registry.get(1)
    assert registry.get(1) is first
    second = registry.get(2)

    assert second is not first
    assert len(registry) == 2
    assert len(built) == 1
    assert first.state.selected_template.id == "forbes"
    assert first.step is SessionStep.HERO


def test_sessions_are_isolated(issue_source):
    registry = SessionRegistry(ScriptedService, "vogue", issue_source=issue_source)
    registry.get(1).start()
    assert registry.get(2).step is SessionStep.HERO


def test_drop_forgets_session(issue_source):
    registry = SessionRegistry(ScriptedService, "vogue", issue_source=issue_source)
    controller = registry.get(1)
    registry.drop(1)
    registry.drop(99)
    assert registry.get(1) is not controller


def test_drop_releases_the_controller(issue_source):
    registry = SessionRegistry(ScriptedService, "vogue", issue_source=issue_source)
    controller = registry.get(1)
    ref = weakref.ref(controller)
    del controller

    registry.drop(1)
    gc.collect()

    assert ref() is None
    assert 1 not in registry
    assert len(registry) == 0


def test_least_recently_used_session_is_evicted(issue_source):
    registry = SessionRegistry(ScriptedService, "vogue", issue_source=issue_source, max_sessions=2)
    first = registry.get(1)
    registry.get(2)
    assert registry.get(1) is first

    registry.get(3)

    assert len(registry) == 2
    assert 1 in registry
    assert 2 not in registry
    assert 3 in registry
    assert registry.get(1) is first


def test_max_sessions_must_be_positive(issue_source):
    with pytest.raises(ValueError):
        SessionRegistry(ScriptedService, "vogue", issue_source=issue_source, max_sessions=0)
