"""Observability – structured logging for lease operations."""
from distlease.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
