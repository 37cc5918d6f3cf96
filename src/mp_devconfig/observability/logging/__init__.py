"""Observability – structured logging ports and helpers."""
from mp_devconfig.observability.logging.factory import JsonLoggerFactory
from mp_devconfig.observability.logging.processors import get_logger
from mp_devconfig.observability.logging.protocol import Logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
