#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Debug utilities for TagTerm."""

import os
import time
from collections import deque
from typing import Dict, Any, Optional

from .. import DEBUG_HISTORY_SIZE

_TRUTHY = {"1", "true", "yes", "on"}


def _as_bool(value: Any) -> bool:
    """Return True when ``value`` represents an enabled flag."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def debug_requested_by_env() -> bool:
    """True when ``TAGTERM_DEBUG`` asks for debug output."""
    return _as_bool(os.getenv("TAGTERM_DEBUG", ""))


class DebugManager:
    """Collects structured debug events and state changes of the control core.

    Each ``LogBuffer`` owns one; lines are emitted into that buffer at DEBUG
    level, so components reach it through the ``logs`` handle they are given.
    """

    def __init__(self, sink, history: int = DEBUG_HISTORY_SIZE):
        self.enabled = False
        self.start_time = time.time()
        self.state_changes = deque(maxlen=history)
        self.current_state = {}
        self.sink = sink

    def enable(self):
        """Enable debug mode."""
        self.enabled = True
        self.debug_log("DEBUG_MODE_ENABLED", "Debug mode activated")

    def disable(self):
        """Disable debug mode."""
        if self.enabled:
            self.debug_log("DEBUG_MODE_DISABLED", "Debug mode deactivated")
        self.enabled = False

    def debug_log(self, event_type: str, message: str, data: Optional[Dict[str, Any]] = None):
        """Log debug information with a structured event type."""
        if not self.enabled:
            return

        timestamp = time.time()
        runtime = timestamp - self.start_time

        debug_entry = {
            "timestamp": timestamp,
            "runtime_seconds": round(runtime, 3),
            "event_type": event_type,
            "message": message
        }

        if data:
            debug_entry["data"] = data

        self.state_changes.append(debug_entry)

        self.sink.debug(f"[DEBUG:{runtime:7.3f}s] {event_type}: {message}")
        if data:
            for key, value in data.items():
                self.sink.debug(f"[DEBUG:{runtime:7.3f}s]   {key}: {value}")

    def update_state(self, component: str, key: str, value: Any, description: str = ""):
        """Update tracked state and log the change."""
        if not self.enabled:
            return

        if component not in self.current_state:
            self.current_state[component] = {}

        old_value = self.current_state[component].get(key, None)
        self.current_state[component][key] = value

        change_desc = f"{description} " if description else ""
        self.debug_log(
            "STATE_CHANGE",
            f"{change_desc}{component}.{key}: {old_value} -> {value}",
            {
                "component": component,
                "key": key,
                "old_value": old_value,
                "new_value": value
            }
        )

    def log_operation(self, operation: str, component: str, details: Dict[str, Any] = None):
        """Log an operation with optional details."""
        if not self.enabled:
            return

        self.debug_log(
            "OPERATION",
            f"{component}: {operation}",
            details or {}
        )

    def log_error(self, error_type: str, component: str, error_msg: str, details: Dict[str, Any] = None):
        """Log an error with context."""
        if not self.enabled:
            return

        error_data = {
            "component": component,
            "error_message": error_msg
        }
        if details:
            error_data.update(details)

        self.debug_log(
            "ERROR",
            f"{component}: {error_type} - {error_msg}",
            error_data
        )

    def get_current_state(self) -> Dict[str, Any]:
        """Get current state snapshot."""
        return {
            "runtime_seconds": round(time.time() - self.start_time, 3),
            "debug_enabled": self.enabled,
            "state": self.current_state.copy(),
            "recent_events": len(self.state_changes)
        }
