#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Popups made of named fields with a navigation mode and a text-entry mode."""

from typing import List

from ..config.actions import Action
from ..utils import next_index, prev_index
from .base import (
    CLOSE,
    CONTINUE,
    SCREEN_ACTIONS,
    CloseWithData,
    DoubleInputData,
    Popup,
    PopupData,
    PopupOutcome,
    PopupView,
    SingleInputData,
    SwitchScreenRequest,
)
from .text_field import TextField


class FieldsPopup(Popup):
    """Navigate between fields, open one for editing, save all of them.

    Navigation mode works on resolved actions. Text-entry mode works on raw
    keys: Enter commits the field, Esc throws the edit away, both return to
    navigation mode.
    """

    kind = "fields"

    def __init__(self, title: str, labels: List[str], values: List[str]):
        super().__init__(title)
        self.labels = list(labels)
        self.values = list(values)
        self.highlighted = 0
        self.field = TextField()
        self._editing = False

    @property
    def editing(self) -> bool:
        return self._editing

    def payload(self) -> PopupData:
        raise NotImplementedError

    def handle_input(self, key: str, action: Action) -> PopupOutcome:
        if self._editing:
            return self._handle_text_entry(key)
        return self._handle_navigation(action)

    def _handle_navigation(self, action: Action) -> PopupOutcome:
        if action is Action.BACK:
            return CLOSE
        if action is Action.PREV:
            self.highlighted = prev_index(self.highlighted, len(self.labels))
        elif action is Action.NEXT:
            self.highlighted = next_index(self.highlighted, len(self.labels))
        elif action is Action.SELECT_FIELD:
            self.field.reset(self.values[self.highlighted])
            self._editing = True
        elif action is Action.SAVE_CHANGES:
            return CloseWithData(self.payload())
        elif action in SCREEN_ACTIONS:
            return SwitchScreenRequest(action)
        return CONTINUE

    def _handle_text_entry(self, key: str) -> PopupOutcome:
        if key == "Esc":
            self.field.reset()
            self._editing = False
        elif key == "Enter":
            self.values[self.highlighted] = self.field.text
            self.field.reset()
            self._editing = False
        else:
            self.field.handle_key(key)
        return CONTINUE

    def view(self) -> PopupView:
        return PopupView(
            kind=self.kind,
            title=self.title,
            fields=list(zip(self.labels, self.values)),
            highlighted=self.highlighted,
            input=self.field.text if self._editing else None,
            cursor=self.field.cursor,
        )


class SingleInput(FieldsPopup):
    kind = "single_input"

    def __init__(self, title: str, label: str, value: str):
        super().__init__(title, [label], [value])

    def payload(self) -> PopupData:
        return SingleInputData(self.values[0])


class DoubleInput(FieldsPopup):
    kind = "double_input"

    def __init__(self, title: str, description: str, value: str):
        super().__init__(title, ["Description", "Value"], [description, value])

    def payload(self) -> PopupData:
        return DoubleInputData(self.values[0], self.values[1])
