#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Single-line text buffer with a cursor."""

from ..config.actions import is_text_key


class TextField:
    def __init__(self, text: str = ""):
        self.text = text
        self.cursor = len(text)

    def reset(self, text: str = "") -> None:
        self.text = text
        self.cursor = len(text)

    def insert(self, char: str) -> None:
        self.text = self.text[: self.cursor] + char + self.text[self.cursor:]
        self.cursor += len(char)

    def backspace(self) -> None:
        if self.cursor > 0:
            self.text = self.text[: self.cursor - 1] + self.text[self.cursor:]
            self.cursor -= 1

    def delete(self) -> None:
        if self.cursor < len(self.text):
            self.text = self.text[: self.cursor] + self.text[self.cursor + 1:]

    def left(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def right(self) -> None:
        if self.cursor < len(self.text):
            self.cursor += 1

    def handle_key(self, key: str) -> bool:
        """Apply an editing key; returns False for keys the field ignores."""
        if key == "Backspace":
            self.backspace()
        elif key == "Delete":
            self.delete()
        elif key == "Left":
            self.left()
        elif key == "Right":
            self.right()
        elif key == "Home":
            self.cursor = 0
        elif key == "End":
            self.cursor = len(self.text)
        elif is_text_key(key):
            self.insert(key)
        else:
            return False
        return True
