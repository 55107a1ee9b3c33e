#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Screen multiplexer: routes key presses and applies cross-screen events."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from ..config import Config, load_config
from ..config.actions import Action, Scope
from .editor import MainState
from .errors import ConfigError, TagWriteError
from .events import AddFiles, AddFrame, AppEvent, Quit, Screen, SwitchScreen
from .files import FilesState
from .frames import FramesState
from .resolver import ActionResolver
from .screen import ScreenState

LOG_ACTIONS = (Action.TOGGLE_LOGS, Action.LOGS_PREV, Action.LOGS_NEXT)


class App:
    """Holds the three screens and which one is active.

    Switching screens never resets the screen left behind. The renderer reads
    state from here; all mutation happens through :meth:`handle_key`,
    :meth:`reload_config` and :meth:`force_quit`, on one thread.
    """

    def __init__(self, config: Config, logs, start_dir: Path):
        self.config = config
        self.logs = logs
        self.resolver = ActionResolver(config.keymap, logs)
        self.main = MainState(logs, config.keymap)
        self.files = FilesState(logs, config.keymap, start_dir)
        self.frames = FramesState(logs, config.keymap)
        self.screen = Screen.MAIN
        self.show_logs = False
        self.running = True

    @property
    def screens(self) -> Dict[Screen, ScreenState]:
        return {Screen.MAIN: self.main, Screen.FILES: self.files, Screen.FRAMES: self.frames}

    @property
    def active(self) -> ScreenState:
        return self.screens[self.screen]

    def scope(self) -> Scope:
        if self.active.popup_stack:
            return Scope.POPUP
        return self.active.scope

    def handle_key(self, key: str) -> bool:
        """Process one key press; returns False once the app should stop."""
        action = self.resolver.resolve(key, self.scope())
        self.logs.debugger.debug_log("KEY", f"{key!r} -> {action.value}", {"screen": self.screen.value})

        if not self.active.popup_stack and action in LOG_ACTIONS:
            self._handle_log_action(action)
            return self.running

        try:
            event = self.active.handle_input(key, action)
        except TagWriteError as e:
            self.logs.error(str(e))
            self.show_logs = True
            self.logs.debugger.log_operation("WRITE_FAILED", "App", {"path": str(e.path), "written": e.written})
            return self.running

        if event is not None:
            self.dispatch(event)
        return self.running

    def _handle_log_action(self, action: Action) -> None:
        if action is Action.TOGGLE_LOGS:
            self.show_logs = not self.show_logs
        elif action is Action.LOGS_PREV:
            self.logs.prev()
        elif action is Action.LOGS_NEXT:
            self.logs.next()

    def dispatch(self, event: AppEvent) -> None:
        if isinstance(event, SwitchScreen):
            self.screen = event.screen
            self.logs.debugger.update_state("App", "screen", event.screen.value)
        elif isinstance(event, AddFiles):
            self.main.merge(event.entries)
        elif isinstance(event, AddFrame):
            self.main.add_frame(event.frame_id)
        elif isinstance(event, Quit):
            self.running = False

    def force_quit(self) -> None:
        self.running = False

    def apply_config(self, config: Config) -> None:
        self.config = config
        self.resolver.keymap = config.keymap
        for state in self.screens.values():
            state.keymap = config.keymap

    def reload_config(self, path: Optional[Path] = None) -> bool:
        """Reload bindings from disk; the old ones stay active if the new file is invalid."""
        path = path or self.config.path
        try:
            config = load_config(path, self.logs)
        except ConfigError as e:
            self.logs.error(f"Config reload failed, keeping previous bindings: {e}")
            return False
        self.apply_config(config)
        self.logs.info(f"Reloaded config from {path}")
        return True
