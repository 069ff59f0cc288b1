#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Centralized logging for contentlab builds, the article store and the CLI.

Each component gets its own rotating log file plus a shared errors.log,
and warnings are echoed to the console. Components take an optional
ContentLogger and wrap it with safe_logger() so that library use without
logging configured stays silent.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


class ContentLogger:
    """
    Structured logger with file rotation for one component.

    Attributes:
        log_dir: Directory for log files
        component_name: Component identifier ('build', 'store', 'api', ...)
        main_logger: Logger receiving every message for the component
        error_logger: Logger writing errors to errors.log
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "contentlab",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        """
        Initialize the logger and its handlers.

        Args:
            log_dir: Directory for log files (created if missing)
            component_name: Name used for the log file and logger names
            max_bytes: Size at which a log file rotates
            backup_count: Rotated files kept per log
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = logging.getLogger(f"contentlab.{self.component_name}")
        self.main_logger.setLevel(logging.DEBUG)
        # Only this logger's handlers, never the root logger
        self.main_logger.handlers = []
        self.main_logger.propagate = False

        self.error_logger = logging.getLogger(
            f"contentlab.{self.component_name}.errors"
        )
        self.error_logger.setLevel(logging.ERROR)
        self.error_logger.handlers = []
        self.error_logger.propagate = False

        self._add_file_handler(
            self.main_logger,
            self.log_dir / f"{self.component_name}.log",
            logging.DEBUG,
        )
        self._add_file_handler(
            self.error_logger,
            self.log_dir / "errors.log",
            logging.ERROR,
        )

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        self.main_logger.addHandler(console)

    def _add_file_handler(
        self, logger: logging.Logger, file_path: Path, level: int
    ) -> None:
        """Attach a rotating UTF-8 file handler to ``logger``."""
        handler = RotatingFileHandler(
            file_path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - "
                "[%(funcName)s:%(lineno)d] - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    @staticmethod
    def _format(label: str, message: str, details: Optional[Dict[str, Any]]) -> str:
        if details:
            return f"{label} - {message}: {json.dumps(details, default=str)}"
        return f"{label} - {message}"

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log a named operation with its details as JSON.

        Args:
            operation: Operation identifier (e.g. 'collection_built')
            details: Optional details dictionary
        """
        self.main_logger.info(
            f"OPERATION - {operation}: {json.dumps(details or {}, default=str)}"
        )

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log an error with its context and the current traceback.

        Args:
            error: Exception that occurred
            context: Optional context information dictionary
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {context_str}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(self._format("DEBUG", message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(self._format("INFO", message, details))

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        self.main_logger.warning(self._format("WARNING", message, details))

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log full error details to file and return a short CLI message.

        Args:
            error: Exception to report
            context: Where the error happened
            show_traceback: Append the traceback to the returned message

        Returns:
            Message suitable for stderr

        Examples:
            >>> logger.log_cli_error(ConfigError("No loader for 'a.txt'"))
            '❌ ConfigError: No loader for 'a.txt''
        """
        self.log_error(error, context or {"source": "cli"})
        message = f"❌ {type(error).__name__}: {error}"
        if show_traceback:
            return f"{message}\n\n{traceback.format_exc()}"
        return message


def handle_cli_error(
    ctx: click.Context,
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed CLI command and exit.

    Retrieves the logger and verbosity from the click context, logs the
    error with its context, prints a clean message to stderr and exits.

    Args:
        ctx: Click context whose obj holds 'logger' and 'verbose'
        error: Exception that occurred
        operation: Failed operation name (e.g. 'build', 'articles_save')
        additional_context: Extra context (root dir, slug, ...)
        exit_code: Process exit code

    Note:
        Never returns.
    """
    obj = ctx.obj or {}
    logger: Optional[ContentLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context: Dict[str, Any] = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    message = safe_logger(logger).log_cli_error(error, context, show_traceback=verbose)
    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """
    ContentLogger stand-in that discards everything.

    Lets components call logger methods unconditionally.
    """

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return f"❌ {type(error).__name__}: {error}"


_null_logger = NullLogger()


def safe_logger(logger: Optional[ContentLogger]) -> ContentLogger:
    """
    Return ``logger``, or the shared NullLogger when it is None.

    Usage:
        safe_logger(self.logger).log_info("Loaded 12 posts")
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
