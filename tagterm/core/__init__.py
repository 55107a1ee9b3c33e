#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Application control core for TagTerm."""

import importlib
from typing import Any

_EXPORTS = {
    "App": "tagterm.core.app",
    "MainState": "tagterm.core.editor",
    "Focus": "tagterm.core.editor",
    "FilesState": "tagterm.core.files",
    "FramesState": "tagterm.core.frames",
    "LogBuffer": "tagterm.core.logs",
    "Screen": "tagterm.core.events",
}

__all__ = list(_EXPORTS)


def __getattr__(name: str) -> Any:
    if name in _EXPORTS:
        module = importlib.import_module(_EXPORTS[name])
        value = getattr(module, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'tagterm.core' has no attribute {name!r}")
