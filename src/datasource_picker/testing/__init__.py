"""Testing support – fakes, fixtures and generators.

Import in your ``conftest.py``::

    pytest_plugins = ["datasource_picker.testing.fixtures"]
"""

from datasource_picker.testing.fakes import (
    FailingFileDelivery,
    FakeDialogChannel,
    InMemoryDashboardHost,
    InMemoryFileDelivery,
    InMemorySettingsStore,
)

__all__ = [
    "FailingFileDelivery",
    "FakeDialogChannel",
    "InMemoryDashboardHost",
    "InMemoryFileDelivery",
    "InMemorySettingsStore",
]
