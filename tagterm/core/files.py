#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""File browser screen: directory listing, traversal and tag loading."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .. import UI_PARENT_ROW
from ..config.actions import Action, Scope
from ..utils import next_index, prev_index
from .errors import DirectoryError, TagReadError
from .events import AddFiles, AppEvent
from .screen import ScreenState
from .tags import Entry, ID3NoHeaderError, empty_tag, read_tag

AUDIO_EXTENSION = ".mp3"


@dataclass(frozen=True)
class ParentItem:
    """Synthetic ``../`` row, always shown first."""

    is_dir = True

    @property
    def name(self) -> str:
        return UI_PARENT_ROW


@dataclass(frozen=True)
class FileItem:
    path: Path
    is_dir: bool

    @property
    def name(self) -> str:
        return self.path.name


FilesStateItem = Union[ParentItem, FileItem]

PARENT = ParentItem()


def _sort_key(item: FileItem) -> Tuple[bool, str]:
    return (not item.is_dir, item.path.name.lower())


def sort_items(items: Iterable[FilesStateItem]) -> List[FilesStateItem]:
    """Directories before files, case-insensitive by name, parent row first."""
    parents = [item for item in items if isinstance(item, ParentItem)]
    others = sorted((item for item in items if isinstance(item, FileItem)), key=_sort_key)
    return parents + others


def list_directory(path: Path, show_hidden: bool = False) -> List[FilesStateItem]:
    """Read ``path`` keeping subdirectories and ``.mp3`` files only.

    The extension is matched case-insensitively, so ``SONG.MP3`` is listed
    too. Dot-prefixed directories are dropped unless ``show_hidden`` is set;
    dot-prefixed files are kept. Any error while reading raises
    ``DirectoryError`` and nothing is returned.
    """
    items: List[FilesStateItem] = [PARENT]
    try:
        with os.scandir(path) as it:
            for dir_entry in it:
                if dir_entry.is_dir():
                    if dir_entry.name.startswith(".") and not show_hidden:
                        continue
                    items.append(FileItem(Path(dir_entry.path), True))
                elif os.path.splitext(dir_entry.name)[1].lower() == AUDIO_EXTENSION:
                    items.append(FileItem(Path(dir_entry.path), False))
    except OSError as e:
        raise DirectoryError(Path(path), e.strerror or str(e)) from e
    return sort_items(items)


def load_entries(items: Iterable[FilesStateItem], logs) -> List[Entry]:
    """Read tags for every file item; directories and the parent row are skipped.

    Files without a tag get an empty one. Files whose tag cannot be read are
    logged and left out, so the result may be shorter than the input.
    """
    entries: List[Entry] = []
    for item in items:
        if not isinstance(item, FileItem) or item.is_dir:
            continue
        try:
            tag = read_tag(item.path)
        except ID3NoHeaderError:
            logs.warn(f"{item.name} has no ID3 tag, adding empty tag")
            tag = empty_tag()
        except TagReadError as e:
            logs.error(f"Failed to add file - {e}")
            logs.debugger.log_operation("TAG_READ_FAILED", "FilesState", {"path": str(item.path)})
            continue
        entries.append(Entry.from_path(item.path, tag))
    return entries


class FilesState(ScreenState):
    scope = Scope.FILES
    help_title = "Files Help"

    def __init__(self, logs, keymap, directory: Path):
        super().__init__(logs, keymap)
        self.show_hidden_dirs = False
        self.current_dir = Path(directory).resolve()
        self.items: List[FilesStateItem] = list_directory(self.current_dir, self.show_hidden_dirs)
        self.index: Optional[int] = 0

    @property
    def highlighted(self) -> Optional[FilesStateItem]:
        if self.index is None or self.index >= len(self.items):
            return None
        return self.items[self.index]

    def handle_action(self, action: Action) -> Optional[AppEvent]:
        try:
            if action is Action.ADD_FILE:
                return self.add_file()
            if action is Action.ADD_ALL_FILES:
                return self.add_all_files()
            if action is Action.PARENT_DIR:
                self.parent_dir()
            elif action is Action.ENTER_DIR:
                self.enter_highlighted()
            elif action is Action.HIDDEN_DIR:
                self.toggle_hidden()
        except DirectoryError as e:
            self.logs.warn(str(e))
        return None

    def next(self) -> None:
        self.index = next_index(self.index, len(self.items))

    def prev(self) -> None:
        self.index = prev_index(self.index, len(self.items))

    def _show(self, directory: Path) -> None:
        items = list_directory(directory, self.show_hidden_dirs)
        self.current_dir = directory
        self.items = items
        self.index = 0
        self.logs.debugger.update_state("FilesState", "current_dir", str(directory))

    def enter_dir(self, item: FilesStateItem) -> None:
        if isinstance(item, ParentItem):
            self.parent_dir()
        elif item.is_dir:
            self._show(item.path)
        else:
            self.logs.warn(f"{item.name} is not a directory")

    def enter_highlighted(self) -> None:
        item = self.highlighted
        if item is not None:
            self.enter_dir(item)

    def parent_dir(self) -> None:
        parent = self.current_dir.parent
        if parent == self.current_dir:
            # filesystem root
            return
        self._show(parent)

    def refresh_dir(self) -> None:
        self._show(self.current_dir)

    def toggle_hidden(self) -> None:
        self.show_hidden_dirs = not self.show_hidden_dirs
        try:
            self.refresh_dir()
        except DirectoryError:
            self.show_hidden_dirs = not self.show_hidden_dirs
            raise

    def add_file(self) -> Optional[AppEvent]:
        item = self.highlighted
        if item is None or isinstance(item, ParentItem) or item.is_dir:
            return None
        return self._hand_off([item])

    def add_all_files(self) -> Optional[AppEvent]:
        return self._hand_off(self.items)

    def _hand_off(self, items: List[FilesStateItem]) -> Optional[AppEvent]:
        entries = load_entries(items, self.logs)
        self.logs.debugger.debug_log("FILES_LOADED", f"Loaded {len(entries)} file(s) from {self.current_dir}")
        if not entries:
            return None
        return AddFiles(entries)

    def help_rows(self) -> List[Tuple[Action, str]]:
        return super().help_rows() + [
            (Action.PARENT_DIR, "Change to parent directory"),
            (Action.ENTER_DIR, "Enter highlighted directory"),
            (Action.ADD_FILE, "Add highlighted file"),
            (Action.ADD_ALL_FILES, "Add all files"),
            (Action.HIDDEN_DIR, "Show or hide hidden directories"),
        ]
