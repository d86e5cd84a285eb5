"""Tests for capability definitions and the capability registry."""

from __future__ import annotations

import threading

import pytest

from drab_commander.base.capabilities import (
    Capability,
    CapabilityRegistry,
    get_default_registry,
    set_default_registry,
)
from drab_commander.base.errors import CommanderError, ErrorCode, UnknownCapability
from drab_commander.tests.utils import assert_true


def shout(socket, text):
    return text.upper()


def whisper(socket, text):
    return text.lower()


def test_from_functions_uses_function_names() -> None:
    cap = Capability.from_functions("voice", shout, whisper, template="voice.js")
    assert_true(set(cap.operations) == {"shout", "whisper"}, f"ops: {dict(cap.operations)}")
    assert_true(cap.provides("shout") and not cap.provides("sing"), "provides() mismatch")
    assert_true(cap.template == "voice.js", "template carried")


def test_capability_operations_are_read_only() -> None:
    cap = Capability.from_functions("voice", shout)
    with pytest.raises(TypeError):
        cap.operations["sing"] = whisper  # type: ignore[index]


def test_capability_rejects_bad_definitions() -> None:
    with pytest.raises(ValueError):
        Capability(name="")
    with pytest.raises(TypeError):
        Capability(name="broken", operations={"x": 1})  # type: ignore[dict-item]


def test_registry_basic(registry: CapabilityRegistry) -> None:
    """Built-ins are registered in order; custom capabilities can be added and removed."""
    assert_true(registry.names() == ["core", "query", "modal"], f"names: {registry.names()}")
    registry.register(Capability.from_functions("voice", shout))
    assert_true("voice" in registry, "voice registered")
    assert_true(registry.resolve("voice").name == "voice", "resolve returns capability")
    registry.unregister("voice")
    assert_true(registry.get("voice") is None, "voice removed")


def test_resolve_unknown_raises(registry: CapabilityRegistry) -> None:
    with pytest.raises(UnknownCapability) as info:
        registry.resolve("NoSuchCapability", commander="pkg.PageCommander")
    assert info.value.capability == "NoSuchCapability"
    assert info.value.code is ErrorCode.UNKNOWN_CAPABILITY
    assert info.value.commander == "pkg.PageCommander"


def test_duplicate_registration_conflicts(registry: CapabilityRegistry) -> None:
    with pytest.raises(CommanderError) as info:
        registry.register(Capability.from_functions("query", shout))
    assert info.value.code is ErrorCode.CONFLICT
    assert registry.resolve("query").provides("select")


def test_unregister_errors(registry: CapabilityRegistry) -> None:
    with pytest.raises(CommanderError) as missing:
        registry.unregister("voice")
    assert missing.value.code is ErrorCode.NOT_FOUND
    with pytest.raises(CommanderError) as mandatory:
        registry.unregister("core")
    assert mandatory.value.code is ErrorCode.CONFLICT
    assert "core" in registry


def test_templates_for_preserves_order(registry: CapabilityRegistry) -> None:
    registry.register(Capability.from_functions("voice", shout))
    templates = registry.templates_for(["core", "voice", "modal"])
    assert_true(templates == ["drab.core.js", "drab.modal.js"], f"templates: {templates}")


def test_default_registry_is_lazy_singleton() -> None:
    set_default_registry(None)
    try:
        first = get_default_registry()
        assert_true(first is get_default_registry(), "default registry must be reused")
        assert_true(first.names() == ["core", "query", "modal"], "built-ins populated once")
    finally:
        set_default_registry(None)


def test_concurrent_registration_keeps_every_capability(registry: CapabilityRegistry) -> None:
    names = [f"cap{i}" for i in range(32)]
    threads = [
        threading.Thread(target=registry.register, args=(Capability.from_functions(n, shout),))
        for n in names
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert_true(all(n in registry for n in names), "lost a concurrent registration")
