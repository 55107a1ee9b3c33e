#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Bounded, thread-safe log buffer shared by the core and the renderer."""

import threading
import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .. import LOG_BUFFER_SIZE
from ..utils.debug import DebugManager


class Level(Enum):
    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"


@dataclass(frozen=True)
class LogRecord:
    level: Level
    message: str
    timestamp: float = field(default_factory=time.time)

    def format(self) -> str:
        clock = time.strftime("%H:%M:%S", time.localtime(self.timestamp))
        return f"{clock} {self.level.value:<5} {self.message}"


class LogBuffer:
    """Append-only record store with a read cursor for the log panel.

    Created once at startup and handed to every component that logs.
    Producers on other threads (file watcher, input reader) may append;
    reads take the same lock so the renderer always sees a consistent slice.
    Structured debug tracing goes through ``debugger``, which writes back
    into this buffer while debug mode is on.
    """

    def __init__(self, maxlen: int = LOG_BUFFER_SIZE, echo: bool = False, debug: bool = False):
        self._records = deque(maxlen=maxlen)
        self._lock = threading.Lock()
        self._index = 0
        self.echo = echo
        self.log_file_handle = None
        self.log_file_path = None
        self.debugger = DebugManager(self)
        if debug:
            self.set_debug(True)

    @property
    def debug_enabled(self) -> bool:
        return self.debugger.enabled

    def set_debug(self, enabled: bool) -> None:
        if enabled:
            self.debugger.enable()
        else:
            self.debugger.disable()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def log(self, level: Level, message: str) -> LogRecord:
        record = LogRecord(level, message)
        with self._lock:
            at_end = self._index >= len(self._records) - 1
            full = len(self._records) == self._records.maxlen
            self._records.append(record)
            if at_end:
                self._index = len(self._records) - 1
            elif full and self._index > 0:
                # the oldest record fell off; keep pointing at the same one
                self._index -= 1
            handle = self.log_file_handle

        if handle:
            try:
                handle.write(record.format() + "\n")
                handle.flush()
            except OSError:
                pass
        if self.echo:
            print(record.format())
        return record

    def error(self, message: str) -> LogRecord:
        return self.log(Level.ERROR, message)

    def warn(self, message: str) -> LogRecord:
        return self.log(Level.WARN, message)

    def info(self, message: str) -> LogRecord:
        return self.log(Level.INFO, message)

    def debug(self, message: str) -> LogRecord:
        return self.log(Level.DEBUG, message)

    # ------------------------------------------------------------------
    # Read cursor
    # ------------------------------------------------------------------
    @property
    def index(self) -> int:
        with self._lock:
            return self._index

    def prev(self) -> None:
        with self._lock:
            if self._index > 0:
                self._index -= 1

    def next(self) -> None:
        with self._lock:
            if self._index < len(self._records) - 1:
                self._index += 1

    def records(self) -> List[LogRecord]:
        with self._lock:
            return list(self._records)

    def visible(self, count: int) -> List[LogRecord]:
        """Return up to ``count`` records ending at the cursor."""
        with self._lock:
            if not self._records or count <= 0:
                return []
            end = self._index + 1
            start = max(0, end - count)
            return [self._records[i] for i in range(start, end)]

    # ------------------------------------------------------------------
    # Session log file
    # ------------------------------------------------------------------
    def start_file_logging(self, log_path) -> Optional[str]:
        """Mirror every record into ``log_path``; returns an error message on failure."""
        if self.log_file_handle:
            self.stop_file_logging()
        try:
            handle = open(log_path, "w", encoding="utf-8")
        except OSError as exc:
            return str(exc)
        with self._lock:
            self.log_file_handle = handle
            self.log_file_path = log_path
        return None

    def stop_file_logging(self) -> None:
        with self._lock:
            handle = self.log_file_handle
            self.log_file_handle = None
            self.log_file_path = None
        if handle:
            try:
                handle.flush()
                handle.close()
            except OSError:
                pass
