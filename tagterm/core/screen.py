#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Shared behaviour of the three screens: popup stack and general actions."""

from typing import List, Optional, Tuple

from ..config.actions import Action, Scope
from ..popups import Close, CloseWithData, HelpPopup, Popup, PopupData, SwitchScreenRequest, help_lines
from .events import AppEvent, Quit, SwitchScreen, screen_for


class ScreenState:
    """Base class for a screen owning a stack of modal popups.

    Only the top popup sees input while the stack is non-empty. Without a
    popup the general actions (quit, screen switching, help, cursor
    movement) are handled here and everything else goes to
    :meth:`handle_action`.
    """

    scope = Scope.MAIN
    help_title = "Help"

    def __init__(self, logs, keymap):
        self.logs = logs
        self.keymap = keymap
        self.popup_stack: List[Popup] = []

    @property
    def popup(self) -> Optional[Popup]:
        return self.popup_stack[-1] if self.popup_stack else None

    def push_popup(self, popup: Popup) -> None:
        self.popup_stack.append(popup)
        self.logs.debugger.debug_log("POPUP_OPEN", f"{self.help_title}: {popup.title}", {"depth": len(self.popup_stack)})

    def handle_input(self, key: str, action: Action) -> Optional[AppEvent]:
        if self.popup_stack:
            return self._handle_popup_input(key, action)

        if action is Action.QUIT:
            return Quit()
        screen = screen_for(action)
        if screen is not None:
            return SwitchScreen(screen)
        if action is Action.HELP:
            self.spawn_help_popup()
            return None
        if action is Action.PREV:
            self.prev()
            return None
        if action is Action.NEXT:
            self.next()
            return None
        return self.handle_action(action)

    def _handle_popup_input(self, key: str, action: Action) -> Optional[AppEvent]:
        popup = self.popup_stack[-1]
        outcome = popup.handle_input(key, action)
        if isinstance(outcome, Close):
            self.popup_stack.pop()
            self.on_popup_closed(popup)
        elif isinstance(outcome, CloseWithData):
            self.popup_stack.pop()
            self.on_popup_data(popup, outcome.data)
        elif isinstance(outcome, SwitchScreenRequest):
            screen = screen_for(outcome.action)
            if screen is not None:
                return SwitchScreen(screen)
        return None

    # Hooks for subclasses
    def handle_action(self, action: Action) -> Optional[AppEvent]:
        return None

    def on_popup_data(self, popup: Popup, data: PopupData) -> None:
        pass

    def on_popup_closed(self, popup: Popup) -> None:
        pass

    def prev(self) -> None:
        pass

    def next(self) -> None:
        pass

    def help_rows(self) -> List[Tuple[Action, str]]:
        return [
            (Action.QUIT, "Quit"),
            (Action.HELP, "Show this help"),
            (Action.SCREEN_ONE, "Main screen"),
            (Action.SCREEN_TWO, "File browser"),
            (Action.SCREEN_THREE, "Frame catalog"),
            (Action.TOGGLE_LOGS, "Toggle log panel"),
        ]

    def spawn_help_popup(self) -> None:
        self.push_popup(HelpPopup(self.help_title, help_lines(self.keymap, self.help_rows())))
