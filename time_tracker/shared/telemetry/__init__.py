"""Telemetry: logging configuration."""

from time_tracker.shared.telemetry.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
