#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers for contentlab commands.

Functions:
    setup_logger: Initialize a ContentLogger for a CLI component

Usage:
    from contentlab.core.cli import setup_logger

    logger = setup_logger(log_dir, "build")
    logger.log_info("Starting build...")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# --- Local imports ---
from contentlab.core.logging_manager import ContentLogger


def setup_logger(log_dir: Path, component_name: str) -> ContentLogger:
    """
    Setup logging for CLI operations.

    Logs go to ``<log_dir>/operations/<component_name>.log``.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier (e.g. 'build', 'articles')

    Returns:
        Configured ContentLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return ContentLogger(operations_log_dir, component_name=component_name)
