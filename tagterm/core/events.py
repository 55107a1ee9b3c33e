#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Cross-screen events returned by screen handlers to the application."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from .. import SCREEN_FILES, SCREEN_FRAMES, SCREEN_MAIN
from ..config.actions import Action
from .tags import Entry


class Screen(Enum):
    MAIN = SCREEN_MAIN
    FILES = SCREEN_FILES
    FRAMES = SCREEN_FRAMES


SCREEN_FOR_ACTION: Dict[Action, Screen] = {
    Action.SCREEN_ONE: Screen.MAIN,
    Action.SCREEN_TWO: Screen.FILES,
    Action.SCREEN_THREE: Screen.FRAMES,
}


@dataclass(frozen=True)
class SwitchScreen:
    screen: Screen


@dataclass
class AddFiles:
    """Freshly loaded entries; ownership moves to the main screen."""

    entries: List[Entry] = field(default_factory=list)


@dataclass(frozen=True)
class AddFrame:
    frame_id: str


@dataclass(frozen=True)
class Quit:
    pass


AppEvent = Union[SwitchScreen, AddFiles, AddFrame, Quit]


def screen_for(action: Action) -> Optional[Screen]:
    return SCREEN_FOR_ACTION.get(action)
