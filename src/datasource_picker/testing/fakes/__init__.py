"""Testing fakes – in-memory doubles for the collaborator ports."""
from datasource_picker.application.files import InMemoryFileDelivery
from datasource_picker.testing.fakes.host import (
    FailingFileDelivery,
    FakeDialogChannel,
    InMemoryDashboardHost,
    InMemorySettingsStore,
)

__all__ = [
    "FailingFileDelivery",
    "FakeDialogChannel",
    "InMemoryDashboardHost",
    "InMemoryFileDelivery",
    "InMemorySettingsStore",
]
