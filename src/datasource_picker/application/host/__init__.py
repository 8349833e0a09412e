"""Application host – collaborator ports."""
from datasource_picker.application.host.ports import DashboardHost, DialogChannel, SettingsStore

__all__ = ["DashboardHost", "DialogChannel", "SettingsStore"]
