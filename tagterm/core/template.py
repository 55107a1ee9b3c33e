#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""File name templates with ``{field}`` placeholders."""

from typing import List, Tuple, Union

from mutagen.id3 import ID3

from ..utils import sanitize_filename
from .errors import TemplateError
from .frame_data import lookup_frame_id
from .tags import get_text

DEFAULT_TEMPLATE = "{Track} - {Title}"

# A parsed template is literal text interleaved with field names.
Segment = Union[str, Tuple[str]]


def parse_template(template: str) -> List[Segment]:
    """Split ``template`` into literals and ``(field,)`` placeholders.

    ``{{`` and ``}}`` stand for literal braces.
    """
    segments: List[Segment] = []
    literal: List[str] = []
    i = 0
    while i < len(template):
        char = template[i]
        if char == "{":
            if template.startswith("{{", i):
                literal.append("{")
                i += 2
                continue
            end = template.find("}", i + 1)
            if end == -1:
                raise TemplateError(f"Unclosed placeholder in template `{template}`")
            field = template[i + 1:end]
            if not field.strip():
                raise TemplateError(f"Empty placeholder in template `{template}`")
            if literal:
                segments.append("".join(literal))
                literal = []
            segments.append((field,))
            i = end + 1
        elif char == "}":
            if template.startswith("}}", i):
                literal.append("}")
                i += 2
                continue
            raise TemplateError(f"Unmatched `}}` in template `{template}`")
        else:
            literal.append(char)
            i += 1
    if literal:
        segments.append("".join(literal))
    return segments


def render_template(segments: List[Segment], tag: ID3, extension: str = "") -> str:
    """Resolve every placeholder against ``tag`` and build a file name.

    Raises ``TemplateError`` when a field is unknown, missing from the tag or
    is not plain text.
    """
    parts: List[str] = []
    for segment in segments:
        if isinstance(segment, str):
            parts.append(segment)
            continue
        field = segment[0]
        frame_id = lookup_frame_id(field)
        if frame_id is None:
            raise TemplateError(f"Unknown field `{field}`", field)
        value = get_text(tag, frame_id)
        if value is None:
            raise TemplateError(f"Field `{field}` has no plain text frame", field)
        parts.append(value.replace("/", "-"))

    name = sanitize_filename("".join(parts))
    if not name:
        raise TemplateError("Template produced an empty file name")
    if extension and not name.lower().endswith(extension.lower()):
        name += extension
    return name
