#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Key binding overview for the active screen."""

from typing import Iterable, List, Tuple

from ..config.actions import Action
from ..utils import display_key
from .base import CLOSE, Popup, PopupOutcome, PopupView


def help_lines(keymap, rows: Iterable[Tuple[Action, str]]) -> List[str]:
    """Format ``(action, label)`` rows with the keys currently bound to them."""
    return [f"`{display_key(keymap.key_for(action))}` - {label}" for action, label in rows]


class HelpPopup(Popup):
    kind = "help"

    def __init__(self, title: str, lines: List[str]):
        super().__init__(title)
        self.lines = list(lines)

    def handle_input(self, key: str, action: Action) -> PopupOutcome:
        # Any key dismisses help
        return CLOSE

    def view(self) -> PopupView:
        return PopupView(kind=self.kind, title=self.title, lines=list(self.lines))
