"""Testing fixtures – pytest fixtures for the fake collaborators.

Enable in ``conftest.py``::

    pytest_plugins = ["datasource_picker.testing.fixtures"]
"""
from __future__ import annotations

import pytest

from datasource_picker.application.files import InMemoryFileDelivery
from datasource_picker.application.session import PopupSession
from datasource_picker.config.settings import PickerSettings
from datasource_picker.testing.fakes import (
    FakeDialogChannel,
    InMemoryDashboardHost,
    InMemorySettingsStore,
)


@pytest.fixture
def picker_settings() -> PickerSettings:
    return PickerSettings()


@pytest.fixture
def fake_host() -> InMemoryDashboardHost:
    return InMemoryDashboardHost()


@pytest.fixture
def fake_settings_store() -> InMemorySettingsStore:
    return InMemorySettingsStore()


@pytest.fixture
def fake_dialog() -> FakeDialogChannel:
    return FakeDialogChannel(open_payload="5")


@pytest.fixture
def fake_delivery() -> InMemoryFileDelivery:
    return InMemoryFileDelivery()


@pytest.fixture
def popup_session(
    fake_host: InMemoryDashboardHost,
    fake_settings_store: InMemorySettingsStore,
    fake_dialog: FakeDialogChannel,
    fake_delivery: InMemoryFileDelivery,
    picker_settings: PickerSettings,
) -> PopupSession:
    return PopupSession(fake_host, fake_settings_store, fake_dialog, fake_delivery, picker_settings)


__all__ = [
    "fake_delivery",
    "fake_dialog",
    "fake_host",
    "fake_settings_store",
    "picker_settings",
    "popup_session",
]
