"""Observability – structured logging helpers."""
from course_library.observability.logging.factory import JsonLoggerFactory
from course_library.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = ["CorrelationProcessor", "JsonLoggerFactory", "get_logger"]
