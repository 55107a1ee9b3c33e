#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Modal dialogs shown on top of a screen."""

from .base import (
    CLOSE,
    CONTINUE,
    Close,
    CloseWithData,
    Continue,
    DoubleInputData,
    Popup,
    PopupData,
    PopupOutcome,
    PopupView,
    SingleInputData,
    SwitchScreenRequest,
    TemplateInputData,
)
from .fields import DoubleInput, SingleInput
from .help import HelpPopup, help_lines
from .template import TemplateInput

__all__ = [
    "CLOSE",
    "CONTINUE",
    "Close",
    "CloseWithData",
    "Continue",
    "DoubleInputData",
    "Popup",
    "PopupData",
    "PopupOutcome",
    "PopupView",
    "SingleInputData",
    "SwitchScreenRequest",
    "TemplateInputData",
    "DoubleInput",
    "SingleInput",
    "HelpPopup",
    "help_lines",
    "TemplateInput",
]
