# utils/logger.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Logging utility for the expression engine with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for the expression engine."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class VeritasLogger:
    """Centralized logger for the expression engine with structured output."""

    def __init__(self, name: str = "veritas", level: LogLevel = LogLevel.INFO):
        """Initialize the engine logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(VeritasFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for pipeline events
    def expression_received(self, operation: str, expression: str, **options):
        """Log an incoming engine call and its options."""
        options_str = ", ".join(f"{k}={v}" for k, v in options.items())
        self.info(f"{operation} call: exp={expression!r}, {options_str}")

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.debug(f"✅ {message or 'Validation successful'}")
        else:
            # The engine reports rejected input once, at WARNING
            self.debug(f"❌ {message or 'Validation failed'}")

    def rule_applied(self, rule: str, before: str, after: str):
        """Log a single simplification step."""
        self.debug(f"    🔧 {rule}: {before} → {after}")

    def table_built(self, rows: int, columns: int):
        """Log truth table dimensions."""
        self.debug(f"    📋 Truth table built: {rows} rows x {columns} columns")

    def final_result(self, expression: str, elapsed_ms: float):
        """Log the final simplified expression."""
        self.info(f"Expression simplified to {expression} in {elapsed_ms:.1f}ms")


class VeritasFormatter(logging.Formatter):
    """Custom formatter for engine logging with clean output."""

    def format(self, record):
        # INFO shows the bare message
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[VeritasLogger] = None


def get_logger(name: str = "veritas") -> VeritasLogger:
    """Get or create the global engine logger instance.

    Args:
        name: Logger name (default: "veritas")

    Returns:
        VeritasLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = VeritasLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
