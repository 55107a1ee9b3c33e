#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Rename template entry."""

from ..config.actions import Action
from .base import CLOSE, CONTINUE, CloseWithData, Popup, PopupOutcome, PopupView, TemplateInputData
from .text_field import TextField

TEMPLATE_HINT = "Fields: {Title} {Artist} {Album} {Track} ... or a frame id such as {TIT2}"


class TemplateInput(Popup):
    """Typing goes straight into the template; Enter returns it, Esc discards it."""

    kind = "template"

    def __init__(self, template: str, title: str = "Template"):
        super().__init__(title)
        self.original = template
        self.field = TextField(template)

    @property
    def editing(self) -> bool:
        return True

    def handle_input(self, key: str, action: Action) -> PopupOutcome:
        if key == "Esc":
            return CLOSE
        if key == "Enter":
            return CloseWithData(TemplateInputData(self.field.text))
        self.field.handle_key(key)
        return CONTINUE

    def view(self) -> PopupView:
        return PopupView(
            kind=self.kind,
            title=self.title,
            fields=[("Current", self.original)],
            input=self.field.text,
            cursor=self.field.cursor,
            lines=[TEMPLATE_HINT],
        )
