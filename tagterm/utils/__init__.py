#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Utility helpers shared across TagTerm."""

import re
from typing import Optional

__all__ = ("next_index", "prev_index", "clamp_index", "sanitize_filename", "display_key")

_INVALID_FILENAME_CHARS = re.compile(r'[\\/*?:"<>|\x00]')

_KEY_LABELS = {
    "Up": "↑",
    "Down": "↓",
    "Left": "←",
    "Right": "→",
    "Enter": "Enter",
    "Esc": "Esc",
    "Tab": "Tab",
    "BackTab": "Shift+Tab",
    "PageUp": "PgUp",
    "PageDown": "PgDn",
    " ": "Space",
}


def next_index(current: Optional[int], length: int) -> Optional[int]:
    """Index after ``current`` in a list of ``length`` items, wrapping to 0."""
    if length <= 0:
        return None
    if current is None or current >= length - 1:
        return 0
    return current + 1


def prev_index(current: Optional[int], length: int) -> Optional[int]:
    """Index before ``current`` in a list of ``length`` items, wrapping to the end."""
    if length <= 0:
        return None
    if current is None:
        return 0
    if current <= 0 or current > length - 1:
        return length - 1
    return current - 1


def clamp_index(current: Optional[int], length: int) -> Optional[int]:
    """Keep a cursor valid after its list changed size; out of range falls back to 0."""
    if length <= 0:
        return None
    if current is None or current >= length or current < 0:
        return 0
    return current


def sanitize_filename(name: str) -> str:
    """Strip characters that are invalid in file names."""
    return _INVALID_FILENAME_CHARS.sub("", name).strip()


def display_key(key: Optional[str]) -> str:
    if key is None:
        return "unbound"
    return _KEY_LABELS.get(key, key)
