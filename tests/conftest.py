# textscaler test configuration and shared fixtures
from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from fake_scheduler import FakeScheduler
from textscaler.config import ScalerConfig
from textscaler.controller import SyncController
from textscaler.settings import MemorySettingsStore

if TYPE_CHECKING:
    from collections.abc import Generator


# ─────────────────────────────────────────────────────────────────────────────
# Async fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def event_loop() -> Generator[asyncio.AbstractEventLoop, None, None]:
    """Create an event loop for async tests."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


# ─────────────────────────────────────────────────────────────────────────────
# Timer fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def fake_scheduler() -> FakeScheduler:
    """Scheduler advanced by hand."""
    return FakeScheduler()


# ─────────────────────────────────────────────────────────────────────────────
# Configuration fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def text_config() -> ScalerConfig:
    """Text scaling preset: 0.50 - 3.00, default 1.00, two decimals."""
    return ScalerConfig.text_scaling()


@pytest.fixture
def brightness_config() -> ScalerConfig:
    """Brightness preset: 0 - 100, integer steps, writes on every change."""
    return ScalerConfig.brightness()


# ─────────────────────────────────────────────────────────────────────────────
# Collaborator fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def memory_store() -> MemorySettingsStore:
    """Settings store holding a text scaling factor of 1.25."""
    return MemorySettingsStore({"text-scaling-factor": 1.25})


@pytest.fixture
def mock_view():
    """Records everything the controller renders."""
    view = MagicMock()
    view.set_position = MagicMock()
    view.set_text = MagicMock()
    view.set_label = MagicMock()
    view.set_reset_sensitive = MagicMock()
    return view


@pytest.fixture
def mock_notifier():
    notifier = MagicMock()
    notifier.notify = MagicMock()
    return notifier


@pytest.fixture
def mock_enumerator():
    """Device backend with two monitors; every push succeeds."""
    enumerator = MagicMock()
    enumerator.discover = MagicMock(return_value=("dev:/dev/i2c-3", "dev:/dev/i2c-4"))
    enumerator.push_all = MagicMock(return_value=())
    return enumerator


@pytest.fixture
def make_controller(text_config, memory_store, mock_view, mock_notifier,
                    mock_enumerator, fake_scheduler):
    """
    Factory for controllers wired to the mock collaborators.
    Keyword arguments override any collaborator.
    """
    created = []

    def _make(**kwargs) -> SyncController:
        args = dict(config=text_config, store=memory_store, view=mock_view,
                    notifier=mock_notifier, enumerator=mock_enumerator,
                    scheduler=fake_scheduler)
        args.update(kwargs)
        controller = SyncController(**args)
        created.append(controller)
        return controller

    yield _make

    for controller in created:
        controller.teardown()


# ─────────────────────────────────────────────────────────────────────────────
# Pytest configuration
# ─────────────────────────────────────────────────────────────────────────────


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "gi: marks tests requiring PyGObject")
