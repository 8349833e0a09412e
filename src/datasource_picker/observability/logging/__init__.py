"""Observability – structured logging helpers."""
from datasource_picker.observability.logging.factory import JsonLoggerFactory
from datasource_picker.observability.logging.processors import get_logger
from datasource_picker.observability.logging.protocol import Logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
