"""
Logging configuration for Screenly REST CLI
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime

from .config import (
    LOG_LEVEL,
    LOG_FILE,
    LOG_FORMAT,
    LOG_ROTATION_SIZE,
    LOG_BACKUP_COUNT,
)


class OperationLogger:
    """Logger for tracking operations and API calls with structured context"""

    def __init__(self, name: str = "screenly_cli"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # Setup handlers if not already configured
        if not self.logger.handlers:
            self._setup_handlers()

    def _setup_handlers(self):
        """Setup console handler and, when configured, a rotating file handler"""

        # stdout carries command output and the MCP stdio transport
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.WARNING))
        console_formatter = logging.Formatter("%(levelname)s - %(message)s")
        console_handler.setFormatter(console_formatter)
        self.logger.addHandler(console_handler)

        if LOG_FILE:
            log_file_path = Path(LOG_FILE)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file_path, maxBytes=LOG_ROTATION_SIZE, backupCount=LOG_BACKUP_COUNT
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, extra={"structured": kwargs})

    def log_operation_start(self, operation: str, **kwargs):
        """Log the start of an operation with context"""
        context = {
            "operation": operation,
            "timestamp": datetime.now().isoformat(),
            "context": kwargs,
        }
        self.logger.info(f"Starting {operation}", extra={"structured": context})

    def log_operation_end(self, operation: str, success: bool, **kwargs):
        """Log the end of an operation with results"""
        context = {
            "operation": operation,
            "success": success,
            "timestamp": datetime.now().isoformat(),
            "results": kwargs,
        }
        level = logging.INFO if success else logging.ERROR
        self.logger.log(
            level,
            f"Completed {operation} - {'SUCCESS' if success else 'FAILED'}",
            extra={"structured": context},
        )

    def log_api_call(
        self,
        method: str,
        url: str,
        status_code: Optional[int] = None,
        response_time: Optional[float] = None,
        **kwargs,
    ):
        """Log API calls with timing and status"""
        context = {
            "api_call": {
                "method": method,
                "url": url,
                "status_code": status_code,
                "response_time_ms": response_time * 1000 if response_time else None,
                "timestamp": datetime.now().isoformat(),
            },
            **kwargs,
        }

        if status_code:
            level = logging.WARNING if status_code >= 500 else logging.DEBUG
            self.logger.log(
                level,
                f"API {method} {url} - {status_code}",
                extra={"structured": context},
            )
        else:
            self.logger.debug(f"API {method} {url}", extra={"structured": context})

    def log_error(self, error: Exception, context: Optional[dict] = None):
        """Log errors with full context"""
        error_context = {
            "error": {
                "type": type(error).__name__,
                "message": str(error),
                "timestamp": datetime.now().isoformat(),
            },
            "context": context or {},
        }
        self.logger.error(
            f"Error: {type(error).__name__}: {error}",
            extra={"structured": error_context},
        )


def get_logger(name: str = "screenly_cli") -> OperationLogger:
    """Get a configured logger instance"""
    return OperationLogger(name)


# Global logger instance
logger = get_logger()
