#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Terminal input and tick producers feeding the event queue."""

import os
import queue
import select
import sys
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .. import TICK_INTERVAL

CTRL_C = "Ctrl+C"

_ESCAPE_SEQUENCES = {
    "[A": "Up",
    "[B": "Down",
    "[C": "Right",
    "[D": "Left",
    "[H": "Home",
    "[F": "End",
    "OA": "Up",
    "OB": "Down",
    "OC": "Right",
    "OD": "Left",
    "OH": "Home",
    "OF": "End",
    "[Z": "BackTab",
    "[1~": "Home",
    "[2~": "Insert",
    "[3~": "Delete",
    "[4~": "End",
    "[5~": "PageUp",
    "[6~": "PageDown",
    "[7~": "Home",
    "[8~": "End",
}

_CONTROL_KEYS = {
    "\r": "Enter",
    "\n": "Enter",
    "\t": "Tab",
    "\x7f": "Backspace",
    "\x08": "Backspace",
    "\x03": CTRL_C,
}


# ----------------------------------------------------------------------
# Events posted to the main loop
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class KeyInput:
    key: str


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class ConfigReload:
    path: Path


@dataclass(frozen=True)
class ForceQuit:
    pass


def decode_keys(data: str) -> List[str]:
    """Split a chunk of raw terminal input into key names.

    Printable characters map to themselves, control bytes and escape
    sequences to names such as ``Enter`` or ``PageUp``. A lone escape is
    ``Esc``; unknown escape sequences are dropped.
    """
    keys: List[str] = []
    i = 0
    while i < len(data):
        char = data[i]
        if char == "\x1b":
            rest = data[i + 1:]
            if not rest or rest[0] not in "[O":
                keys.append("Esc")
                i += 1
                continue
            # CSI/SS3: intro byte, optional parameters, final byte
            j = 1
            while j < len(rest) and (rest[j].isdigit() or rest[j] == ";"):
                j += 1
            sequence = rest[: j + 1]
            name = _ESCAPE_SEQUENCES.get(sequence)
            if name is not None:
                keys.append(name)
            i += 1 + len(sequence)
            continue
        if char in _CONTROL_KEYS:
            keys.append(_CONTROL_KEYS[char])
        elif char.isprintable():
            keys.append(char)
        i += 1
    return keys


class InputReader(threading.Thread):
    """Reads stdin in cbreak mode and posts ``KeyInput`` events.

    ``select`` with a short timeout lets the thread notice the stop event
    without blocking forever on a read.
    """

    def __init__(self, events: "queue.Queue", stop_event: threading.Event, logs=None, stream=None, poll_interval: float = 0.1):
        super().__init__(name="tagterm-input", daemon=True)
        self.events = events
        self.stop_event = stop_event
        self.stream = stream if stream is not None else sys.stdin
        self.poll_interval = poll_interval
        self.original_settings = None
        self.debugger = logs.debugger if logs is not None else None

    def setup_terminal(self) -> bool:
        """Switch the terminal to cbreak mode; False when stdin is not a tty."""
        try:
            import termios
            import tty

            fd = self.stream.fileno()
            self.original_settings = termios.tcgetattr(fd)
            tty.setcbreak(fd)
            return True
        except Exception as e:
            self._trace_error("INPUT_SETUP", "InputReader", str(e))
            self.original_settings = None
            return False

    def restore_terminal(self) -> None:
        if self.original_settings is None:
            return
        try:
            import termios

            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self.original_settings)
        except Exception as e:
            self._trace_error("INPUT_RESTORE", "InputReader", str(e))
        self.original_settings = None

    def _trace_error(self, error_type: str, component: str, message: str) -> None:
        if self.debugger is not None:
            self.debugger.log_error(error_type, component, message)

    def _read_available(self) -> Optional[str]:
        ready, _, _ = select.select([self.stream], [], [], self.poll_interval)
        if not ready:
            return None
        data = os.read(self.stream.fileno(), 1024)
        if not data:
            return None
        return data.decode("utf-8", errors="ignore")

    def post(self, data: str) -> None:
        for key in decode_keys(data):
            if key == CTRL_C:
                self.events.put(ForceQuit())
            else:
                self.events.put(KeyInput(key))

    def run(self) -> None:
        while not self.stop_event.is_set():
            try:
                data = self._read_available()
            except (OSError, ValueError) as e:
                self._trace_error("INPUT_READ", "InputReader", str(e))
                self.events.put(ForceQuit())
                break
            if data:
                if self.debugger is not None:
                    self.debugger.debug_log("INPUT", repr(data))
                self.post(data)


class Ticker(threading.Thread):
    """Posts a ``Tick`` every ``interval`` seconds until stopped."""

    def __init__(self, events: "queue.Queue", stop_event: threading.Event, interval: float = TICK_INTERVAL):
        super().__init__(name="tagterm-ticker", daemon=True)
        self.events = events
        self.stop_event = stop_event
        self.interval = interval

    def run(self) -> None:
        while not self.stop_event.wait(self.interval):
            self.events.put(Tick())
