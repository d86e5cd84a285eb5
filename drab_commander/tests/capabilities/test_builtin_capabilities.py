"""Tests for the built-in core, query and modal capabilities."""

from __future__ import annotations

import pytest

from drab_commander.base.interfaces import Transport
from drab_commander.capabilities import CORE, MODAL, QUERY, builtin_capabilities, core, modal, query
from drab_commander.tests.utils import FakeSocket, assert_true


def test_builtins_order_and_templates() -> None:
    caps = builtin_capabilities()
    assert_true([c.name for c in caps] == ["core", "query", "modal"], "mandatory first")
    assert_true(
        [c.template for c in caps] == ["drab.core.js", "drab.query.js", "drab.modal.js"],
        "templates",
    )
    assert_true(set(CORE.operations) == {"execjs", "broadcastjs", "get_store", "put_store", "get_session"}, "core ops")
    assert_true(set(QUERY.operations) == {"select", "update", "insert", "delete", "execute"}, "query ops")
    assert_true(set(MODAL.operations) == {"alert"}, "modal ops")


def test_fake_socket_satisfies_transport(fake_socket: FakeSocket) -> None:
    assert_true(isinstance(fake_socket, Transport), "FakeSocket should satisfy Transport")


def test_core_js_and_store(fake_socket: FakeSocket) -> None:
    assert_true(core.execjs(fake_socket, "1 + 1") == "ok", "execjs returns the reply")
    core.broadcastjs(fake_socket, "alert(1)")
    assert_true(
        fake_socket.pushed == [("execjs", {"js": "1 + 1"}), ("broadcastjs", {"js": "alert(1)"})],
        f"pushed: {fake_socket.pushed}",
    )
    core.put_store(fake_socket, "counter", 3)
    assert_true(core.get_store(fake_socket, "counter") == 3, "store round trip")
    assert_true(core.get_store(fake_socket, "missing", "d") == "d", "store default")
    assert_true(core.get_session(fake_socket, "user_id") == 7, "session read")
    assert_true(core.get_session(fake_socket, "nope") is None, "session default")


def test_query_builds_quoted_jquery(fake_socket: FakeSocket) -> None:
    query.select(fake_socket, "#name")
    assert_true(fake_socket.last_js == '$("#name").html()', fake_socket.last_js)
    query.select(fake_socket, "a", "attr", "href")
    assert_true(fake_socket.last_js == '$("a").attr("href")', fake_socket.last_js)
    query.update(fake_socket, ".x", "css", "red", argument="color")
    assert_true(fake_socket.last_js == '$(".x").css("color", "red")', fake_socket.last_js)
    query.insert(fake_socket, "ul", "<li>\"q\"</li>", position="prepend")
    assert_true(fake_socket.last_js == '$("ul").prepend("<li>\\"q\\"</li>")', fake_socket.last_js)
    query.delete(fake_socket, "#gone")
    assert_true(fake_socket.last_js == '$("#gone").remove()', fake_socket.last_js)
    query.execute(fake_socket, "#b", "toggleClass", "on", True)
    assert_true(fake_socket.last_js == '$("#b").toggleClass("on", true)', fake_socket.last_js)


def test_query_insert_rejects_unknown_position(fake_socket: FakeSocket) -> None:
    with pytest.raises(ValueError):
        query.insert(fake_socket, "ul", "<li/>", position="inside")
    assert_true(fake_socket.pushed == [], "nothing sent on error")


def test_modal_alert(fake_socket: FakeSocket) -> None:
    assert_true(modal.alert(fake_socket, "Title", "Body") == "ok", "reply returned")
    event, payload = fake_socket.pushed[-1]
    assert_true(event == "modal", "modal event")
    assert_true(payload == {"title": "Title", "body": "Body", "buttons": {"ok": "OK"}}, f"payload: {payload}")
    modal.alert(fake_socket, "T", "B", buttons={"yes": "Yes", "no": "No"})
    assert_true(fake_socket.pushed[-1][1]["buttons"] == {"yes": "Yes", "no": "No"}, "custom buttons")
    assert_true(modal.DEFAULT_BUTTONS == {"ok": "OK"}, "defaults not mutated")
