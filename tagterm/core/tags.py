#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""ID3 tag access for loaded files, backed by mutagen."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from mutagen import MutagenError
from mutagen.id3 import ID3, ID3NoHeaderError, Encoding, Frames, TextFrame, TimeStampTextFrame, TXXX

from .errors import FrameValueError, TagReadError
from .frame_data import EXTENDED_TEXT_ID, TEXT_FRAME_PREFIX

TEXT_SEPARATOR = "/"

__all__ = [
    "Entry",
    "ID3NoHeaderError",
    "read_tag",
    "empty_tag",
    "write_tag",
    "editable_frames",
    "TEXT_SEPARATOR",
    "frame_text",
    "split_text",
    "text_frame",
    "get_text",
    "set_text",
    "set_extended_text",
    "remove_frame",
    "new_frame",
]


@dataclass
class Entry:
    """One loaded audio file: where it lives, what it will be called, its tag."""

    path: Path
    filename: str
    tag: ID3
    selected: bool = False

    @classmethod
    def from_path(cls, path: Path, tag: ID3) -> "Entry":
        path = Path(path)
        return cls(path=path, filename=path.name, tag=tag)

    @property
    def renamed(self) -> bool:
        return self.filename != self.path.name


def read_tag(path: Path) -> ID3:
    """Parse the ID3 tag of ``path``.

    Raises ``ID3NoHeaderError`` when the file carries no tag at all and
    ``TagReadError`` for anything else that prevents reading.
    """
    try:
        return ID3(str(path))
    except ID3NoHeaderError:
        raise
    except (MutagenError, OSError) as e:
        raise TagReadError(Path(path), str(e)) from e


def empty_tag() -> ID3:
    return ID3()


def write_tag(tag: ID3, path: Path) -> None:
    """Serialize ``tag`` into ``path``; non-text frames are written back untouched."""
    tag.save(str(path))


def editable_frames(tag: ID3) -> List[TextFrame]:
    return [
        frame
        for frame in tag.values()
        if frame.FrameID.startswith(TEXT_FRAME_PREFIX) and isinstance(frame, TextFrame)
    ]


def frame_text(frame: TextFrame) -> str:
    return TEXT_SEPARATOR.join(str(value) for value in frame.text)


def split_text(value: str, multiple: bool = False) -> List[str]:
    """Inverse of :func:`frame_text` for frames that held several values."""
    if multiple:
        return value.split(TEXT_SEPARATOR)
    return [value]


def get_text(tag: ID3, frame_id: str) -> Optional[str]:
    """Plain text content of ``frame_id``, or None when absent or not plain text."""
    if frame_id == EXTENDED_TEXT_ID:
        return None
    frames = tag.getall(frame_id)
    if not frames or not isinstance(frames[0], TextFrame):
        return None
    return frame_text(frames[0])


def text_frame(frame_id: str, values: Sequence[str]) -> TextFrame:
    """Build a ``frame_id`` frame holding ``values``.

    Timestamp frames (TDRC, TDOR...) silently drop text they cannot parse,
    so a value that does not survive construction unchanged raises
    ``FrameValueError``.
    """
    values = list(values)
    frame = Frames[frame_id](encoding=Encoding.UTF8, text=values)
    if isinstance(frame, TimeStampTextFrame):
        parsed = [str(stamp) for stamp in frame.text]
        if parsed != values:
            raise FrameValueError(frame_id, TEXT_SEPARATOR.join(values), "not a valid timestamp (yyyy-MM-ddTHH:mm:ss)")
    return frame


def set_text(tag: ID3, frame_id: str, value: str, multiple: bool = False) -> None:
    """Replace ``frame_id`` with ``value``; ``multiple`` splits it back into values."""
    tag.setall(frame_id, [text_frame(frame_id, split_text(value, multiple))])


def set_extended_text(tag: ID3, description: str, value: str) -> None:
    tag.add(TXXX(encoding=Encoding.UTF8, desc=description, text=[value]))


def remove_frame(tag: ID3, key: str) -> bool:
    """Drop the frame stored under ``key`` (``TIT2``, ``TXXX:desc``...)."""
    if key in tag:
        del tag[key]
        return True
    return False


def new_frame(frame_id: str, description: str = ""):
    if frame_id == EXTENDED_TEXT_ID:
        return TXXX(encoding=Encoding.UTF8, desc=description, text=[""])
    return Frames[frame_id](encoding=Encoding.UTF8, text=[""])
