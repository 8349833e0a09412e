"""Shared pytest configuration."""

pytest_plugins = ["datasource_picker.testing.fixtures"]
