"""Logging helpers for denotag (stdlib `logging`, namespaced under 'denotag')."""
from .factory import DefaultLoggerFactory
from .helpers import JsonLogFormatter, get_logger, setup_base_logger, trace_io

__all__ = ["DefaultLoggerFactory", "JsonLogFormatter", "get_logger", "setup_base_logger", "trace_io"]
