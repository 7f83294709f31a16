"""Observability – structured logging port and helpers."""
from cachepool.observability.logging.protocol import Logger
from cachepool.observability.logging.factory import JsonLoggerFactory
from cachepool.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
