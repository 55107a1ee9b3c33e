#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Main screen: the working set of loaded files and batch tag editing."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from mutagen import MutagenError

from ..config.actions import Action, Scope
from ..popups import (
    DoubleInput,
    DoubleInputData,
    Popup,
    PopupData,
    SingleInput,
    SingleInputData,
    TemplateInput,
    TemplateInputData,
)
from ..utils import clamp_index, next_index, prev_index, sanitize_filename
from .details import DetailItem, ExtendedTextDetail, FileNameDetail, TextDetail, build_details
from .errors import FrameValueError, TagWriteError, TemplateError
from .events import AppEvent
from .frame_data import EXTENDED_TEXT_ID, frame_name
from .screen import ScreenState
from .tags import Entry, new_frame, remove_frame, set_extended_text, set_text, split_text, text_frame, write_tag
from .template import DEFAULT_TEMPLATE, parse_template, render_template

NEW_DESCRIPTION = "NEW"
RESERVED_NAMES = (".", "..")


class Focus(Enum):
    FILES = "files"
    DETAILS = "details"


class MainState(ScreenState):
    """Owns every loaded :class:`Entry` and applies edits to them.

    Edits made through a popup fan out: they land on the highlighted entry
    and on every selected entry. File name edits are the exception and only
    touch the highlighted entry.
    """

    scope = Scope.MAIN
    help_title = "Main Help"

    def __init__(self, logs, keymap, template: str = DEFAULT_TEMPLATE):
        super().__init__(logs, keymap)
        self.entries: List[Entry] = []
        self.files_index: Optional[int] = None
        self.details: List[DetailItem] = []
        self.details_index: Optional[int] = None
        self.focus = Focus.FILES
        self.template = template
        self._editing: Optional[DetailItem] = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def highlighted(self) -> Optional[Entry]:
        if self.files_index is None or self.files_index >= len(self.entries):
            return None
        return self.entries[self.files_index]

    @property
    def highlighted_detail(self) -> Optional[DetailItem]:
        if self.details_index is None or self.details_index >= len(self.details):
            return None
        return self.details[self.details_index]

    def targets(self) -> List[Entry]:
        """The highlighted entry plus every selected one, in list order."""
        highlighted = self.highlighted
        return [entry for entry in self.entries if entry.selected or entry is highlighted]

    def selected_entries(self) -> List[Entry]:
        return [entry for entry in self.entries if entry.selected]

    # ------------------------------------------------------------------
    # Working set
    # ------------------------------------------------------------------
    def merge(self, entries: List[Entry]) -> int:
        """Append entries whose path is not loaded yet; returns how many were added."""
        known = {entry.path for entry in self.entries}
        added = 0
        for entry in entries:
            if entry.path in known:
                self.logs.warn(f"{entry.filename} is already loaded, skipping")
                continue
            known.add(entry.path)
            self.entries.append(entry)
            added += 1
        if added:
            if self.files_index is None:
                self.files_index = 0
            self.refresh_details()
            self.logs.info(f"Added {added} file(s)")
        self.logs.debugger.update_state("MainState", "entries", len(self.entries))
        return added

    def refresh_details(self) -> None:
        entry = self.highlighted
        self.details = build_details(entry) if entry is not None else []
        if self.details_index is not None:
            self.details_index = clamp_index(self.details_index, len(self.details))

    def _after_removal(self) -> None:
        self.files_index = clamp_index(self.files_index, len(self.entries))
        if self.files_index is None:
            self.details = []
            self.details_index = None
            self.focus = Focus.FILES
        else:
            self.refresh_details()
        self.logs.debugger.update_state("MainState", "entries", len(self.entries))

    def remove_files(self) -> None:
        """Drop every selected entry and the highlighted one."""
        doomed = {id(entry) for entry in self.targets()}
        if not doomed:
            return
        before = len(self.entries)
        self.entries = [entry for entry in self.entries if id(entry) not in doomed]
        self.logs.info(f"Removed {before - len(self.entries)} file(s)")
        self._after_removal()

    def remove_all(self) -> None:
        count = len(self.entries)
        self.entries = []
        self.files_index = None
        self.details = []
        self.details_index = None
        self.focus = Focus.FILES
        if count:
            self.logs.info(f"Removed all {count} file(s)")
        self.logs.debugger.update_state("MainState", "entries", 0)

    # ------------------------------------------------------------------
    # Cursor and selection
    # ------------------------------------------------------------------
    def next(self) -> None:
        if self.focus is Focus.FILES:
            self.files_index = next_index(self.files_index, len(self.entries))
            self.refresh_details()
        else:
            self.details_index = next_index(self.details_index, len(self.details))

    def prev(self) -> None:
        if self.focus is Focus.FILES:
            self.files_index = prev_index(self.files_index, len(self.entries))
            self.refresh_details()
        else:
            self.details_index = prev_index(self.details_index, len(self.details))

    def switch_focus(self) -> None:
        if self.focus is Focus.FILES:
            if not self.details:
                return
            if self.details_index is None:
                self.details_index = 0
            self.focus = Focus.DETAILS
        else:
            self.focus = Focus.FILES

    def select_current(self) -> None:
        entry = self.highlighted
        if entry is not None:
            entry.selected = not entry.selected

    def select_all(self) -> None:
        """Select everything, or deselect everything when all are selected already."""
        state = not all(entry.selected for entry in self.entries)
        for entry in self.entries:
            entry.selected = state

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def handle_action(self, action: Action) -> Optional[AppEvent]:
        if action is Action.SWITCH_FOCUS or (action is Action.BACK and self.focus is Focus.DETAILS):
            self.switch_focus()
        elif action is Action.SELECT_CURRENT:
            self.select_current()
        elif action is Action.SELECT_ALL:
            self.select_all()
        elif action is Action.REMOVE:
            self.remove()
        elif action is Action.REMOVE_FILES:
            self.remove_all()
        elif action is Action.SPAWN_POPUP:
            self.spawn_popup()
        elif action is Action.TEMPLATE_POPUP:
            self.push_popup(TemplateInput(self.template))
        elif action is Action.UPDATE_NAMES:
            self.update_names()
        elif action is Action.WRITE_TAGS:
            self.write_tags()
        return None

    def remove(self) -> None:
        if self.focus is Focus.FILES:
            self.remove_files()
        else:
            self.remove_detail()

    def spawn_popup(self) -> None:
        """Open an editor for the highlighted detail row."""
        if self.focus is Focus.FILES:
            self.switch_focus()
            return
        detail = self.highlighted_detail
        if detail is None:
            return
        if isinstance(detail, FileNameDetail):
            popup: Popup = SingleInput("Edit file name", detail.name, detail.filename)
        elif isinstance(detail, ExtendedTextDetail):
            popup = DoubleInput(f"Edit {detail.name}", detail.description, detail.value)
        else:
            popup = SingleInput(f"Edit {detail.name}", detail.name, detail.text)
        self._editing = detail
        self.push_popup(popup)

    def on_popup_closed(self, popup: Popup) -> None:
        self._editing = None

    def on_popup_data(self, popup: Popup, data: PopupData) -> None:
        detail, self._editing = self._editing, None
        if isinstance(data, TemplateInputData):
            self.set_template(data.text)
        elif isinstance(data, SingleInputData) and isinstance(detail, FileNameDetail):
            # Not fanned out to the selection: every selected file would get
            # the same name and collide on write. Batch renames use the template.
            self.rename_highlighted(data.text)
        elif isinstance(data, SingleInputData) and isinstance(detail, TextDetail):
            self.edit_text(detail, data.text)
        elif isinstance(data, DoubleInputData) and isinstance(detail, ExtendedTextDetail):
            self.edit_extended_text(detail, data.description, data.value)
        else:
            self.logs.debugger.log_error("POPUP_DATA_MISMATCH", "MainState", f"{type(data).__name__} for {detail!r}")

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------
    def rename_highlighted(self, filename: str) -> None:
        entry = self.highlighted
        if entry is None:
            return
        name = sanitize_filename(filename)
        if not name:
            self.logs.warn("File name cannot be empty")
            return
        if name in RESERVED_NAMES:
            self.logs.warn(f"`{name}` is not a valid file name")
            return
        if name != filename:
            self.logs.info(f"Removed invalid characters from file name: {name}")
        entry.filename = name
        self.refresh_details()

    def edit_text(self, detail: TextDetail, text: str) -> None:
        try:
            text_frame(detail.frame_id, split_text(text, detail.multiple))
        except FrameValueError as e:
            self.logs.warn(f"{e}, changes discarded")
            return
        targets = self.targets()
        for entry in targets:
            set_text(entry.tag, detail.frame_id, text, detail.multiple)
        self.logs.debugger.log_operation("EDIT_TEXT", "MainState", {"frame": detail.frame_id, "entries": len(targets)})
        self.logs.info(f"Set {detail.name} on {len(targets)} file(s)")
        self.refresh_details()

    def edit_extended_text(self, detail: ExtendedTextDetail, description: str, value: str) -> None:
        if not description or not value:
            self.logs.warn("Description and value must not be empty, changes discarded")
            return
        targets = self.targets()
        for entry in targets:
            if description != detail.description:
                remove_frame(entry.tag, detail.key)
            set_extended_text(entry.tag, description, value)
        self.logs.debugger.log_operation("EDIT_TXXX", "MainState", {"description": description, "entries": len(targets)})
        self.logs.info(f"Set {detail.name} `{description}` on {len(targets)} file(s)")
        self.refresh_details()

    def add_frame(self, frame_id: str) -> None:
        """Add an empty ``frame_id`` frame to the highlighted and selected entries.

        Existing text frames are never overwritten; user defined text frames
        always get a fresh instance with a unique description.
        """
        targets = self.targets()
        if not targets:
            self.logs.warn("No files to add the frame to")
            return
        added = 0
        for entry in targets:
            if frame_id == EXTENDED_TEXT_ID:
                entry.tag.add(new_frame(frame_id, _unique_description(entry)))
            elif entry.tag.getall(frame_id):
                self.logs.info(f"{entry.filename} already has a {frame_name(frame_id)} frame")
                continue
            else:
                entry.tag.add(new_frame(frame_id))
            added += 1
        if added:
            self.logs.info(f"Added {frame_name(frame_id)} to {added} file(s)")
        self.refresh_details()

    def remove_detail(self) -> None:
        detail = self.highlighted_detail
        if detail is None:
            return
        if isinstance(detail, FileNameDetail):
            self.logs.warn("The file name cannot be removed")
            return
        removed = sum(1 for entry in self.targets() if remove_frame(entry.tag, detail.key))
        self.logs.info(f"Removed {detail.name} from {removed} file(s)")
        self.refresh_details()

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------
    def set_template(self, template: str) -> None:
        try:
            parse_template(template)
        except TemplateError as e:
            self.logs.warn(f"{e}; keeping `{self.template}`")
            return
        self.template = template
        self.logs.info(f"Template set to `{template}`")

    def update_names(self) -> None:
        """Rename every selected entry from the template.

        An entry whose placeholders cannot all be resolved keeps its name and
        the rest of the batch carries on.
        """
        try:
            segments = parse_template(self.template)
        except TemplateError as e:
            self.logs.error(str(e))
            return
        selected = self.selected_entries()
        if not selected:
            self.logs.warn("No files selected for renaming")
            return
        renamed = 0
        for entry in selected:
            extension = Path(entry.filename).suffix or entry.path.suffix
            try:
                entry.filename = render_template(segments, entry.tag, extension)
            except TemplateError as e:
                self.logs.warn(f"Skipping {entry.filename}: {e}")
                continue
            renamed += 1
        self.logs.info(f"Renamed {renamed} of {len(selected)} file(s)")
        self.refresh_details()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def write_tags(self) -> int:
        """Write every tag to disk and apply pending renames.

        Entries are processed in order; the first failure raises
        ``TagWriteError`` and leaves the remaining entries untouched. Paths of
        entries already renamed are updated as they go.
        """
        written = 0
        for entry in self.entries:
            try:
                write_tag(entry.tag, entry.path)
            except (MutagenError, OSError) as e:
                raise TagWriteError(entry.path, str(e), written) from e

            if entry.renamed:
                try:
                    target = entry.path.with_name(entry.filename)
                except ValueError as e:
                    raise TagWriteError(entry.path, str(e), written) from e
                if target.exists() and not _same_file(target, entry.path):
                    raise TagWriteError(entry.path, "target already exists", written, target)
                try:
                    os.rename(entry.path, target)
                except OSError as e:
                    raise TagWriteError(entry.path, e.strerror or str(e), written, target) from e
                self.logs.debugger.debug_log("RENAMED", f"{entry.path} -> {target}")
                entry.path = target
            written += 1

        self.logs.info(f"Wrote {written} file(s)")
        self.refresh_details()
        return written

    def help_rows(self) -> List[Tuple[Action, str]]:
        return super().help_rows() + [
            (Action.SWITCH_FOCUS, "Switch between files and details"),
            (Action.SELECT_CURRENT, "Select highlighted file"),
            (Action.SELECT_ALL, "Select or deselect all files"),
            (Action.SPAWN_POPUP, "Edit highlighted detail"),
            (Action.REMOVE, "Remove highlighted file or frame"),
            (Action.REMOVE_FILES, "Remove all files"),
            (Action.TEMPLATE_POPUP, "Edit rename template"),
            (Action.UPDATE_NAMES, "Rename selected files from template"),
            (Action.WRITE_TAGS, "Write tags and names to disk"),
        ]


def _unique_description(entry: Entry) -> str:
    taken = {frame.desc for frame in entry.tag.getall(EXTENDED_TEXT_ID)}
    description = NEW_DESCRIPTION
    n = 2
    while description in taken:
        description = f"{NEW_DESCRIPTION} {n}"
        n += 1
    return description


def _same_file(a: Path, b: Path) -> bool:
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False
