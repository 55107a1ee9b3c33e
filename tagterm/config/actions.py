#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Semantic actions, key names and the scopes they belong to."""

from enum import Enum
from typing import Dict, Tuple


class Action(Enum):
    # General
    PREV = "up"
    NEXT = "down"
    QUIT = "quit"
    BACK = "back"
    SWITCH_FOCUS = "switch_focus"
    TOGGLE_LOGS = "toggle_logs"
    LOGS_PREV = "logs_prev"
    LOGS_NEXT = "logs_next"
    SCREEN_ONE = "screen_one"
    SCREEN_TWO = "screen_two"
    SCREEN_THREE = "screen_three"
    HELP = "help"

    # Main screen
    REMOVE_FILES = "remove_files"
    WRITE_TAGS = "write_tags"
    SELECT_CURRENT = "select_current"
    SELECT_ALL = "select_all"
    REMOVE = "remove"
    SPAWN_POPUP = "spawn_popup"
    UPDATE_NAMES = "update_names"
    TEMPLATE_POPUP = "template_popup"

    # Files screen
    ADD_FILE = "add_file"
    ADD_ALL_FILES = "add_all_files"
    PARENT_DIR = "parent_directory"
    ENTER_DIR = "enter_directory"
    HIDDEN_DIR = "show_hidden"

    # Frames screen
    ADD_FRAME = "add_frame"

    # Popups
    SELECT_FIELD = "select_field"
    SAVE_CHANGES = "save_changes"

    # Resolved when a key means nothing in the current scope
    NONE = "none"

    @classmethod
    def from_name(cls, name: str) -> "Action":
        action = _BY_NAME.get(name)
        if action is None or action is cls.NONE:
            raise KeyError(name)
        return action


_BY_NAME: Dict[str, Action] = {action.value: action for action in Action}


class Scope(Enum):
    MAIN = "main"
    FILES = "files"
    FRAMES = "frames"
    POPUP = "popup"


GENERAL_ACTIONS: Tuple[Action, ...] = (
    Action.PREV,
    Action.NEXT,
    Action.QUIT,
    Action.BACK,
    Action.SWITCH_FOCUS,
    Action.TOGGLE_LOGS,
    Action.LOGS_PREV,
    Action.LOGS_NEXT,
    Action.SCREEN_ONE,
    Action.SCREEN_TWO,
    Action.SCREEN_THREE,
    Action.HELP,
)

# Scope-specific actions in resolution priority order; they win over general ones.
SCOPE_ACTIONS: Dict[Scope, Tuple[Action, ...]] = {
    Scope.MAIN: (
        Action.REMOVE_FILES,
        Action.WRITE_TAGS,
        Action.SELECT_CURRENT,
        Action.SELECT_ALL,
        Action.REMOVE,
        Action.SPAWN_POPUP,
        Action.UPDATE_NAMES,
        Action.TEMPLATE_POPUP,
    ),
    Scope.FILES: (
        Action.ADD_ALL_FILES,
        Action.ADD_FILE,
        Action.PARENT_DIR,
        Action.ENTER_DIR,
        Action.HIDDEN_DIR,
    ),
    Scope.FRAMES: (Action.ADD_FRAME,),
    Scope.POPUP: (
        Action.SELECT_FIELD,
        Action.SAVE_CHANGES,
    ),
}


def scope_priority(scope: Scope) -> Tuple[Action, ...]:
    """Every action meaningful in ``scope``, most specific first."""
    return SCOPE_ACTIONS[scope] + GENERAL_ACTIONS


SPECIAL_KEYS = frozenset(
    {
        "Up",
        "Down",
        "Left",
        "Right",
        "Esc",
        "Tab",
        "BackTab",
        "Backspace",
        "Enter",
        "Home",
        "End",
        "PageUp",
        "PageDown",
        "Delete",
        "Insert",
    }
)


def is_valid_key(key: str) -> bool:
    return len(key) == 1 or key in SPECIAL_KEYS


def is_text_key(key: str) -> bool:
    """True for keys that insert a character when typing into a field."""
    return len(key) == 1 and key.isprintable()
