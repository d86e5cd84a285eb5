"""Pytest configuration for the drab_commander test suite.

Provides an isolated capability registry per test so registrations made by
one test never leak into the process-wide default registry.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from drab_commander.base.capabilities import CapabilityRegistry, set_default_registry
from drab_commander.capabilities import builtin_capabilities
from drab_commander.tests.utils import FakeSocket


@pytest.fixture()
def registry() -> CapabilityRegistry:
    """Fresh registry holding only the built-in capabilities."""

    return CapabilityRegistry(builtin_capabilities())


@pytest.fixture()
def default_registry(registry: CapabilityRegistry) -> Iterator[CapabilityRegistry]:
    """Install ``registry`` as the process-wide default for the test."""

    set_default_registry(registry)
    yield registry
    set_default_registry(None)


@pytest.fixture()
def fake_socket() -> FakeSocket:
    return FakeSocket(reply="ok", session={"user_id": 7, "csrf": "x"})
