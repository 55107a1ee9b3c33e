#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Key binding and theme configuration with conflict validation and live reload."""

from __future__ import annotations

import copy
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from watchdog.events import FileSystemEvent

from ..core.errors import ConfigError
from .actions import Action, GENERAL_ACTIONS, SCOPE_ACTIONS, is_valid_key
from .defaults import DEFAULT_CONFIG

CONFIG_DIR_NAME = "tagterm"
CONFIG_FILE_NAME = "config.json"


def default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class KeyMap:
    """Bidirectional view of the ``actions`` section."""

    def __init__(self, bindings: Dict[Action, str]):
        self.bindings = dict(bindings)
        self._by_key: Dict[str, List[Action]] = {}
        for action in Action:
            key = self.bindings.get(action)
            if key is not None:
                self._by_key.setdefault(key, []).append(action)

    @classmethod
    def from_names(cls, names: Dict[str, str]) -> "KeyMap":
        bindings: Dict[Action, str] = {}
        for name, key in names.items():
            try:
                action = Action.from_name(name)
            except KeyError:
                raise ConfigError(f"Invalid action `{name}`") from None
            if not isinstance(key, str) or not is_valid_key(key):
                raise ConfigError(f"Invalid key `{key}` for action `{name}`")
            bindings[action] = key
        keymap = cls(bindings)
        keymap.validate()
        return keymap

    def actions_for(self, key: str) -> List[Action]:
        """Candidate actions the configuration binds to ``key``."""
        return list(self._by_key.get(key, ()))

    def key_for(self, action: Action) -> Optional[str]:
        return self.bindings.get(action)

    def validate(self) -> None:
        """Reject keys bound to two actions that can fire in the same scope."""
        for scope, specific in SCOPE_ACTIONS.items():
            seen: Dict[str, Action] = {}
            for action in specific + GENERAL_ACTIONS:
                key = self.bindings.get(action)
                if key is None:
                    continue
                if key in seen:
                    raise ConfigError(
                        f"Key `{key}` is bound to both `{seen[key].value}` and "
                        f"`{action.value}` in the {scope.value} scope"
                    )
                seen[key] = action


@dataclass
class Config:
    keymap: KeyMap
    theme: Dict[str, str] = field(default_factory=dict)
    path: Optional[Path] = None

    def style(self, role: str) -> str:
        return self.theme.get(role, "")


def _merge(base: Dict, override: Dict, source: Path) -> Dict:
    merged = copy.deepcopy(base)
    for section, values in override.items():
        if section not in merged:
            raise ConfigError(f"Unknown config section `{section}` in {source}")
        if not isinstance(values, dict):
            raise ConfigError(f"Config section `{section}` must be an object: {source}")
        merged[section].update(values)
    return merged


def build_config(data: Dict, path: Optional[Path] = None) -> Config:
    theme = data.get("theme", {})
    for role, style in theme.items():
        if not isinstance(style, str):
            raise ConfigError(f"Theme value for `{role}` must be a string")
    return Config(keymap=KeyMap.from_names(data.get("actions", {})), theme=dict(theme), path=path)


def load_config(path: Optional[Path] = None, logs=None) -> Config:
    """Load ``path`` layered over the defaults.

    A missing file is not an error; anything unreadable, malformed or
    conflicting raises ``ConfigError``.
    """
    path = Path(path) if path is not None else default_config_path()
    if not path.exists():
        if logs is not None:
            logs.warn(f"No config file found at {path}. Using default config.")
        return build_config(copy.deepcopy(DEFAULT_CONFIG), path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            user_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Unable to read config file {path}: {e}") from e

    if not isinstance(user_data, dict):
        raise ConfigError(f"Config file must contain a JSON object, not {type(user_data).__name__}: {path}")

    config = build_config(_merge(DEFAULT_CONFIG, user_data, path), path)
    if logs is not None:
        logs.debugger.debug_log("CONFIG_LOADED", f"Loaded config from {path}", {"bindings": len(config.keymap.bindings)})
    return config


class ConfigFileHandler(FileSystemEventHandler):
    """Forward modifications of the config file to ``on_change``."""

    def __init__(self, config_path: Path, on_change: Callable[[Path], None]) -> None:
        super().__init__()
        self.config_path = Path(config_path)
        self.on_change = on_change

    def _matches(self, event: "FileSystemEvent") -> bool:
        if event.is_directory:
            return False
        return Path(event.src_path) == self.config_path

    def on_modified(self, event: "FileSystemEvent") -> None:
        if self._matches(event):
            self.on_change(self.config_path)

    def on_created(self, event: "FileSystemEvent") -> None:
        if self._matches(event):
            self.on_change(self.config_path)

    def on_moved(self, event: "FileSystemEvent") -> None:
        if not event.is_directory and Path(event.dest_path) == self.config_path:
            self.on_change(self.config_path)


class ConfigWatcher:
    """Runs a watchdog observer on the config file's directory."""

    def __init__(self, config_path: Path, on_change: Callable[[Path], None]) -> None:
        self.config_path = Path(config_path)
        self.on_change = on_change
        self.file_observer: Optional[Observer] = None

    def start(self) -> bool:
        if self.file_observer is not None:
            return True
        directory = self.config_path.parent
        if not directory.is_dir():
            return False
        observer = Observer()
        observer.schedule(ConfigFileHandler(self.config_path, self.on_change), str(directory), recursive=False)
        observer.daemon = True
        observer.start()
        self.file_observer = observer
        return True

    def stop(self) -> None:
        if not self.file_observer:
            return
        self.file_observer.stop()
        self.file_observer.join()
        self.file_observer = None
