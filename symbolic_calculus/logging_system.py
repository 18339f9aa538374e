"""
Logging System for Symbolic Calculus

This module provides a centralized logger with verbosity levels so the
library stays quiet by default while the command line and debugging
sessions can ask for tree dumps and per-step details.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for symbolic calculus"""
    SILENT = 0      # No output at all
    MINIMAL = 1     # Errors and final results
    MODERATE = 2    # Warnings and key milestones
    DETAILED = 3    # Per-operation summaries
    VERBOSE = 4     # Debug details including tree dumps


class CalculusLogger:
    """
    Centralized logger for symbolic calculus with level-aware filtering
    """

    def __init__(self, log_level: LogLevel = LogLevel.SILENT,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger('symbolic_calculus')
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"symbolic_calculus_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def is_enabled(self, required_level: LogLevel) -> bool:
        return self._should_log(required_level)

    def critical(self, message: str):
        """Errors that stop an operation - shown unless silent"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        if self._should_log(LogLevel.MODERATE):
            self.logger.warning(message)

    def step(self, message: str):
        """Per-operation summaries (parse, simplify, expansion terms)"""
        if self._should_log(LogLevel.DETAILED):
            self.logger.info(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def tree(self, name: str, dump: str):
        """Multi-line tree dump framed by begin/end markers"""
        if not self._should_log(LogLevel.VERBOSE):
            return
        self.logger.debug(f"Dumping tree {name}:")
        for line in dump.splitlines():
            self.logger.debug(f"   {line}")
        self.logger.debug(f"Dumping of {name} ended")


# Global logger instance
_global_logger: Optional[CalculusLogger] = None


def get_logger() -> CalculusLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = CalculusLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None or (_global_logger.log_level == LogLevel.SILENT) != (level == LogLevel.SILENT):
        # handlers depend on whether output is enabled at all
        _global_logger = CalculusLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> CalculusLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = CalculusLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    get_logger().info(message, level)


def log_step(message: str):
    get_logger().step(message)


def log_warning(message: str):
    get_logger().warning(message)


def log_debug(message: str):
    get_logger().debug(message)


def log_critical(message: str):
    get_logger().critical(message)
