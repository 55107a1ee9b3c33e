#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Frame catalog screen."""

from typing import List, Optional, Tuple

from ..config.actions import Action, Scope
from ..utils import next_index, prev_index
from .events import AddFrame, AppEvent
from .frame_data import SUPPORTED_FRAMES, FrameData
from .screen import ScreenState


class FramesState(ScreenState):
    scope = Scope.FRAMES
    help_title = "Frames Help"

    def __init__(self, logs, keymap):
        super().__init__(logs, keymap)
        self.frames: Tuple[FrameData, ...] = tuple(SUPPORTED_FRAMES)
        self.index: Optional[int] = 0

    @property
    def highlighted(self) -> Optional[FrameData]:
        if self.index is None:
            return None
        return self.frames[self.index]

    def next(self) -> None:
        self.index = next_index(self.index, len(self.frames))

    def prev(self) -> None:
        self.index = prev_index(self.index, len(self.frames))

    def handle_action(self, action: Action) -> Optional[AppEvent]:
        if action is Action.ADD_FRAME and self.highlighted is not None:
            return AddFrame(self.highlighted.id)
        return None

    def help_rows(self) -> List[Tuple[Action, str]]:
        return super().help_rows() + [(Action.ADD_FRAME, "Add highlighted frame to the selection")]
