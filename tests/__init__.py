#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Test helpers for TagTerm."""

import copy
from pathlib import Path

from mutagen.id3 import ID3, TXXX, Encoding, Frames

from tagterm.config import build_config
from tagterm.config.defaults import DEFAULT_CONFIG

# Not a valid MPEG stream, but enough for an ID3 tag to be prepended to.
AUDIO_BYTES = b"\x00" * 128


def default_config():
    return build_config(copy.deepcopy(DEFAULT_CONFIG))


def default_keymap():
    return default_config().keymap


def make_audio_file(path, frames=None, extended=None):
    """Create ``path`` with an ID3 tag holding ``frames`` ({id: text}) and
    ``extended`` ({description: value}) user defined text frames.

    With neither given the file carries no tag at all.
    """
    path = Path(path)
    path.write_bytes(AUDIO_BYTES)
    if frames is None and extended is None:
        return path

    make_tag(frames, extended).save(str(path))
    return path


def make_tag(frames=None, extended=None):
    tag = ID3()
    for frame_id, text in (frames or {}).items():
        tag.add(Frames[frame_id](encoding=Encoding.UTF8, text=[text]))
    for description, value in (extended or {}).items():
        tag.add(TXXX(encoding=Encoding.UTF8, desc=description, text=[value]))
    return tag
