"""
Logging System for Four Fours

Centralized logging with verbosity levels. The levels follow the game's
traditional verbose setting: 0 prints only the results, 1 adds tree-level
information, 2 adds expression-level information, 3 adds operand and
operator-level processing.
"""

import logging
import sys
from typing import Optional, Dict, Any
from enum import Enum
import time
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the game"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Only final results and timings
    MODERATE = 2    # Tree-level information
    DETAILED = 3    # Expression-level information
    VERBOSE = 4     # Operand caching and debug details

    @classmethod
    def from_verbosity(cls, verbose: int) -> 'LogLevel':
        """Map the classic 0-3 verbose setting onto a log level"""
        if verbose < 0:
            return cls.SILENT
        return cls(min(verbose + 1, cls.VERBOSE.value))


class FourFoursLogger:
    """
    Centralized logger for game runs with level-aware formatting
    """

    def __init__(self, log_level: LogLevel = LogLevel.MODERATE,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.start_time = time.time()

        # Create logger
        self.logger = logging.getLogger('four_fours')
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        # Create formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # Console handler
        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler (optional)
        if log_to_file:
            if log_file_path is None:
                log_file_path = f"four_fours_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Always logged - critical errors and failures"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self.should_log(required_level):
            self.logger.info(message)

    def tree_step(self, bits: str, combinations: int, whole: int):
        """Log one finished tree shape"""
        if not self.should_log(LogLevel.MODERATE):
            return

        elapsed = time.time() - self.start_time
        self.logger.info(f"Tree {bits}: {combinations} combinations, "
                         f"{whole} whole-number results ({elapsed:.1f}s)")

    def milestone(self, message: str):
        """Important milestones - always shown except in silent mode"""
        if self.log_level != LogLevel.SILENT:
            self.logger.info(f"MILESTONE: {message}")

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self.should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self.should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def result_summary(self, results: Dict[str, Any]):
        """Log final results summary"""
        if self.log_level == LogLevel.SILENT:
            return

        self.logger.info("=" * 60)
        self.logger.info("GAME RESULTS:")
        self.logger.info("=" * 60)

        for key, value in results.items():
            if isinstance(value, float):
                self.logger.info(f"{key:.<30} {value:.6f}")
            else:
                self.logger.info(f"{key:.<30} {value}")


# Global logger instance
_global_logger: Optional[FourFoursLogger] = None


def get_logger() -> FourFoursLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = FourFoursLogger()
    return _global_logger


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> FourFoursLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = FourFoursLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_milestone(message: str):
    """Log milestone message"""
    get_logger().milestone(message)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_tree_step(bits: str, combinations: int, whole: int):
    """Log a finished tree shape"""
    get_logger().tree_step(bits, combinations, whole)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
