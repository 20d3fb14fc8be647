"""Logging setup for seqforge."""

from seqforge.logger.logger import get_logger, logger, setup_logger

__all__ = ["get_logger", "logger", "setup_logger"]
