#!/usr/bin/env python3
"""
lifecycle.py
------------
Explicit lifecycle for a build owned by the orchestrating process.

States:
    NOT_STARTED -> IN_PROGRESS -> COMPLETE (result) | FAILED (error)

``ensure_built()`` builds at most once per lifecycle and hands back the
cached result afterwards, which is what a server or dev process wants
when several triggers ask for content. An interrupted build (Ctrl-C, or
any error that is not a content error) discards its partial result and
returns to NOT_STARTED, so nothing half-built is ever published.

Usage:
    lifecycle = BuildLifecycle(lambda: build(root, DEFAULT_COLLECTIONS))
    result = lifecycle.ensure_built()
    lifecycle.state   # BuildState.COMPLETE
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import Any, Callable, Dict, Optional

# --- Local imports ---
from contentlab.core.exceptions import BuildError, ContentError
from contentlab.core.logging_manager import ContentLogger, safe_logger


class BuildState(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"
    FAILED = "failed"


class BuildLifecycle:
    """
    Tracks one build's state, result and failure.

    Attributes:
        state: Current BuildState
        result: Build result once COMPLETE, else None
        error: Build error once FAILED, else None
    """

    def __init__(
        self,
        build_fn: Callable[[], Dict[str, Any]],
        logger: Optional[ContentLogger] = None,
    ) -> None:
        self._build_fn = build_fn
        self.logger = logger
        self.state = BuildState.NOT_STARTED
        self.result: Optional[Dict[str, Any]] = None
        self.error: Optional[ContentError] = None

    def run(self) -> Dict[str, Any]:
        """
        Run a build now, whatever the previous outcome.

        Returns:
            The build result

        Raises:
            BuildError: If a build is already in progress
            ContentError: The build's own failure (state becomes FAILED)
        """
        if self.state is BuildState.IN_PROGRESS:
            raise BuildError("A build is already in progress")

        self.state = BuildState.IN_PROGRESS
        self.result = None
        self.error = None
        safe_logger(self.logger).log_debug("Build started")

        try:
            result = self._build_fn()
        except ContentError as e:
            self.state = BuildState.FAILED
            self.error = e
            safe_logger(self.logger).log_error(e, {"state": self.state.value})
            raise
        except BaseException:
            # Interrupted: drop whatever was built
            self.state = BuildState.NOT_STARTED
            safe_logger(self.logger).log_warning("Build interrupted, result discarded")
            raise

        self.result = result
        self.state = BuildState.COMPLETE
        safe_logger(self.logger).log_debug("Build complete")
        return result

    def ensure_built(self) -> Dict[str, Any]:
        """
        Return the build result, building only if nothing was built yet.

        Raises:
            ContentError: The stored failure of a FAILED lifecycle
            BuildError: If a build is already in progress
        """
        if self.state is BuildState.COMPLETE and self.result is not None:
            return self.result
        if self.state is BuildState.FAILED and self.error is not None:
            raise self.error
        return self.run()

    def reset(self) -> None:
        """Forget the last outcome so the next ensure_built() rebuilds."""
        if self.state is BuildState.IN_PROGRESS:
            raise BuildError("Cannot reset while a build is in progress")
        self.state = BuildState.NOT_STARTED
        self.result = None
        self.error = None
