#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Popup protocol: typed results, input outcomes and the view handed to the renderer."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from ..config.actions import Action

# ----------------------------------------------------------------------
# Typed payloads a popup returns to its owning screen
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class SingleInputData:
    text: str


@dataclass(frozen=True)
class DoubleInputData:
    description: str
    value: str


@dataclass(frozen=True)
class TemplateInputData:
    text: str


PopupData = Union[SingleInputData, DoubleInputData, TemplateInputData]

# ----------------------------------------------------------------------
# Outcomes of one key press
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class Continue:
    """Keep the popup open."""


@dataclass(frozen=True)
class Close:
    """Pop the popup and discard its contents."""


@dataclass(frozen=True)
class CloseWithData:
    data: PopupData


@dataclass(frozen=True)
class SwitchScreenRequest:
    action: Action


PopupOutcome = Union[Continue, Close, CloseWithData, SwitchScreenRequest]

CONTINUE = Continue()
CLOSE = Close()

SCREEN_ACTIONS = (Action.SCREEN_ONE, Action.SCREEN_TWO, Action.SCREEN_THREE)


@dataclass
class PopupView:
    kind: str
    title: str
    fields: List[Tuple[str, str]] = field(default_factory=list)
    highlighted: Optional[int] = None
    input: Optional[str] = None
    cursor: int = 0
    lines: List[str] = field(default_factory=list)


class Popup:
    """A modal dialog; only the top of a screen's stack receives input."""

    kind = "popup"

    def __init__(self, title: str):
        self.title = title

    def handle_input(self, key: str, action: Action) -> PopupOutcome:
        raise NotImplementedError

    def view(self) -> PopupView:
        raise NotImplementedError

    @property
    def editing(self) -> bool:
        """True while a text field owns the keyboard."""
        return False
