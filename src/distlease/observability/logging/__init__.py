"""Observability – structlog configuration and logger helper."""
from distlease.observability.logging.factory import JsonLoggerFactory
from distlease.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
