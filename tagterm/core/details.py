#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Derived per-entry detail rows shown next to the file list."""

from dataclasses import dataclass, field
from typing import List, Union

from .frame_data import EXTENDED_TEXT_ID, FILE_NAME_LABEL, frame_name
from .tags import Entry, editable_frames, frame_text


@dataclass(frozen=True)
class FileNameDetail:
    filename: str

    @property
    def name(self) -> str:
        return FILE_NAME_LABEL

    @property
    def content(self) -> str:
        return self.filename


@dataclass(frozen=True)
class TextDetail:
    frame_id: str
    text: str
    # the frame held several values, joined into `text` for editing
    multiple: bool = field(default=False, compare=False)

    @property
    def key(self) -> str:
        return self.frame_id

    @property
    def name(self) -> str:
        return frame_name(self.frame_id)

    @property
    def content(self) -> str:
        return self.text


@dataclass(frozen=True)
class ExtendedTextDetail:
    description: str
    value: str
    frame_id: str = EXTENDED_TEXT_ID

    @property
    def key(self) -> str:
        return f"{EXTENDED_TEXT_ID}:{self.description}"

    @property
    def name(self) -> str:
        return frame_name(EXTENDED_TEXT_ID)

    @property
    def content(self) -> str:
        return f"{self.description}: {self.value}"


DetailItem = Union[FileNameDetail, TextDetail, ExtendedTextDetail]


def build_details(entry: Entry) -> List[DetailItem]:
    """File name row followed by the entry's text frames sorted by name."""
    frames: List[DetailItem] = []
    for frame in editable_frames(entry.tag):
        if frame.FrameID == EXTENDED_TEXT_ID:
            frames.append(ExtendedTextDetail(frame.desc, frame_text(frame)))
        else:
            frames.append(TextDetail(frame.FrameID, frame_text(frame), len(frame.text) > 1))
    frames.sort(key=lambda item: (item.name.lower(), getattr(item, "description", "")))
    return [FileNameDetail(entry.filename)] + frames
