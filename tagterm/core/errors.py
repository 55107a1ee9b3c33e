#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Exception types raised by the TagTerm core."""

from pathlib import Path
from typing import Optional


class TagTermError(Exception):
    """Base class for every error TagTerm raises on purpose."""


class ConfigError(TagTermError):
    """Configuration file could not be read, parsed or validated."""


class DirectoryError(TagTermError):
    """A directory listing could not be read; the navigation is not applied."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not read directory {path}: {reason}")
        self.path = path
        self.reason = reason


class TagReadError(TagTermError):
    """A tag container exists but could not be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not read tag from {path}: {reason}")
        self.path = path
        self.reason = reason


class TagWriteError(TagTermError):
    """Write-back stopped at ``path`` after ``written`` entries were persisted."""

    def __init__(self, path: Path, reason: str, written: int = 0, target: Optional[Path] = None) -> None:
        message = f"Could not write {path}: {reason}"
        if target is not None:
            message = f"Could not rename {path} to {target.name}: {reason}"
        super().__init__(f"{message} ({written} file(s) written before the failure)")
        self.path = path
        self.reason = reason
        self.written = written
        self.target = target


class TemplateError(TagTermError):
    """A rename template is malformed or cannot be resolved for one entry."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class FrameValueError(TagTermError):
    """Text that a frame cannot hold as entered, such as an unparseable date."""

    def __init__(self, frame_id: str, value: str, reason: str) -> None:
        super().__init__(f"{frame_id} cannot hold `{value}`: {reason}")
        self.frame_id = frame_id
        self.value = value
        self.reason = reason
