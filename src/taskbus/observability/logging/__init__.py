"""Observability – structlog configuration and logger helper."""
from taskbus.observability.logging.factory import JsonLoggerFactory
from taskbus.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
