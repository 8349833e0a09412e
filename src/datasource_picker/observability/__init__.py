"""Observability – logging."""

from datasource_picker.observability.logging import JsonLoggerFactory, Logger, get_logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
