#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Key bindings, theme and config file watching."""

from .actions import Action, Scope, GENERAL_ACTIONS, SCOPE_ACTIONS, scope_priority
from .keymap import (
    Config,
    ConfigFileHandler,
    ConfigWatcher,
    KeyMap,
    build_config,
    default_config_path,
    load_config,
)

__all__ = [
    "Action",
    "Scope",
    "GENERAL_ACTIONS",
    "SCOPE_ACTIONS",
    "scope_priority",
    "Config",
    "ConfigFileHandler",
    "ConfigWatcher",
    "KeyMap",
    "build_config",
    "default_config_path",
    "load_config",
]
