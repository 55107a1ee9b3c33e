#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Catalog of the ID3 frames TagTerm can add and edit."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

TEXT_FRAME_PREFIX = "T"
EXTENDED_TEXT_ID = "TXXX"
FILE_NAME_LABEL = "File name"


@dataclass(frozen=True)
class FrameData:
    name: str
    id: str
    description: str


SUPPORTED_FRAMES: Tuple[FrameData, ...] = (
    FrameData("Title", "TIT2", "Title/songname/content description"),
    FrameData("Artist", "TPE1", "Lead performer(s)/Soloist(s)"),
    FrameData("Album", "TALB", "Album/Movie/Show title"),
    FrameData("Album artist", "TPE2", "Band/orchestra/accompaniment"),
    FrameData("Track", "TRCK", "Track number/Position in set"),
    FrameData("Disc", "TPOS", "Part of a set"),
    FrameData("Date", "TDRC", "Recording time"),
    FrameData("Genre", "TCON", "Content type"),
    FrameData("Composer", "TCOM", "Composer"),
    FrameData("Lyricist", "TEXT", "Lyricist/Text writer"),
    FrameData("Conductor", "TPE3", "Conductor/performer refinement"),
    FrameData("Remixer", "TPE4", "Interpreted, remixed, or otherwise modified by"),
    FrameData("Grouping", "TIT1", "Content group description"),
    FrameData("Subtitle", "TIT3", "Subtitle/Description refinement"),
    FrameData("Set subtitle", "TSST", "Set subtitle"),
    FrameData("BPM", "TBPM", "Beats per minute"),
    FrameData("Initial key", "TKEY", "Initial key"),
    FrameData("Mood", "TMOO", "Mood"),
    FrameData("Language", "TLAN", "Language(s)"),
    FrameData("Length", "TLEN", "Length in milliseconds"),
    FrameData("Media type", "TMED", "Media type"),
    FrameData("Publisher", "TPUB", "Publisher"),
    FrameData("Copyright", "TCOP", "Copyright message"),
    FrameData("Produced notice", "TPRO", "Produced notice"),
    FrameData("ISRC", "TSRC", "International standard recording code"),
    FrameData("Encoded by", "TENC", "Encoded by"),
    FrameData("Encoder settings", "TSSE", "Software/Hardware and settings used for encoding"),
    FrameData("Encoding time", "TDEN", "Encoding time"),
    FrameData("Original release time", "TDOR", "Original release time"),
    FrameData("Release time", "TDRL", "Release time"),
    FrameData("Tagging time", "TDTG", "Tagging time"),
    FrameData("Playlist delay", "TDLY", "Playlist delay"),
    FrameData("File type", "TFLT", "File type"),
    FrameData("File owner", "TOWN", "File owner/licensee"),
    FrameData("Original album", "TOAL", "Original album/movie/show title"),
    FrameData("Original artist", "TOPE", "Original artist(s)/performer(s)"),
    FrameData("Original lyricist", "TOLY", "Original lyricist(s)/text writer(s)"),
    FrameData("Original filename", "TOFN", "Original filename"),
    FrameData("Radio station", "TRSN", "Internet radio station name"),
    FrameData("Radio station owner", "TRSO", "Internet radio station owner"),
    FrameData("Album sort order", "TSOA", "Album sort order"),
    FrameData("Performer sort order", "TSOP", "Performer sort order"),
    FrameData("Title sort order", "TSOT", "Title sort order"),
    FrameData("User defined text", EXTENDED_TEXT_ID, "User defined text information"),
)

_BY_ID: Dict[str, FrameData] = {frame.id: frame for frame in SUPPORTED_FRAMES}
_BY_NAME: Dict[str, FrameData] = {frame.name.lower(): frame for frame in SUPPORTED_FRAMES}


def frame_by_id(frame_id: str) -> Optional[FrameData]:
    return _BY_ID.get(frame_id)


def frame_name(frame_id: str) -> str:
    """Human name of ``frame_id``; unknown ids name themselves."""
    frame = _BY_ID.get(frame_id)
    return frame.name if frame else frame_id


def lookup_frame_id(field_name: str) -> Optional[str]:
    """Translate a template field (human name or 4-character id) to a frame id."""
    key = field_name.strip()
    frame = _BY_NAME.get(key.lower())
    if frame is not None:
        return frame.id
    upper = key.upper()
    if len(upper) == 4 and upper.isalnum():
        return upper
    return None
