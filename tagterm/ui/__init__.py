#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#

import importlib
from typing import Any

_EXPORTS = {
    "TUIRenderer": "tagterm.ui.tui",
    "InputReader": "tagterm.ui.input",
    "Ticker": "tagterm.ui.input",
    "decode_keys": "tagterm.ui.input",
}

__all__ = list(_EXPORTS)


def __getattr__(name: str) -> Any:
    if name in _EXPORTS:
        module = importlib.import_module(_EXPORTS[name])
        value = getattr(module, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'tagterm.ui' has no attribute {name!r}")
