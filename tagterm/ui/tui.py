#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Rich renderer for the application state."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .. import (
    LOG_PANEL_HEIGHT,
    UI_APP_NAME,
    UI_NO_DETAILS,
    UI_NO_ENTRIES,
    UI_PANEL_BROWSER,
    UI_PANEL_DETAILS,
    UI_PANEL_ENTRIES,
    UI_PANEL_FRAMES,
    UI_PANEL_LOGS,
    VERSION,
)
from ..core.editor import Focus
from ..core.events import Screen
from ..core.files import ParentItem
from ..config.actions import Action
from ..popups import PopupView
from ..utils import display_key

HEADER_HEIGHT = 3
FOOTER_HEIGHT = 1
# Borders of a panel take one row above and one below the content
PANEL_CHROME = 2

TABS = ((Screen.MAIN, "1 Main"), (Screen.FILES, "2 Files"), (Screen.FRAMES, "3 Frames"))


@dataclass
class LayoutContext:
    terminal_width: int
    terminal_height: int
    show_logs: bool

    @property
    def body_height(self) -> int:
        height = self.terminal_height - HEADER_HEIGHT
        if self.show_logs:
            height -= LOG_PANEL_HEIGHT
        return max(PANEL_CHROME + 1, height)

    @property
    def list_rows(self) -> int:
        return max(1, self.body_height - PANEL_CHROME)


def visible_window(length: int, index: Optional[int], rows: int) -> Tuple[int, int]:
    """Slice bounds of a scrolled list that keep ``index`` on screen."""
    if length <= rows:
        return 0, length
    index = index or 0
    start = min(max(0, index - rows // 2), length - rows)
    return start, start + rows


def cursor_text(text: str, cursor: int, style: str = "") -> Text:
    """Render an input line with a reversed block at the cursor position."""
    rendered = Text(text[:cursor], style=style)
    under = text[cursor:cursor + 1] or " "
    rendered.append(under, style="reverse")
    rendered.append(text[cursor + 1:], style=style)
    return rendered


class TUIRenderer:
    """Builds a fresh layout from the app on every refresh; never mutates it."""

    def __init__(self, app, logs, console: Optional[Console] = None):
        self.app = app
        self.logs = logs
        self.console = console or Console()
        self.live_display: Optional[Live] = None

    def style(self, role: str) -> str:
        return self.app.config.style(role)

    def _get_terminal_size(self) -> Tuple[int, int]:
        try:
            size = self.console.size
            return max(size.width, 40), max(size.height, 12)
        except Exception:
            return 80, 24

    # ------------------------------------------------------------------
    # Live display
    # ------------------------------------------------------------------
    def start_live_display(self) -> None:
        self.live_display = Live(
            self.create_layout(),
            console=self.console,
            auto_refresh=False,
            screen=True,
        )
        self.live_display.start()

    def update_display(self) -> None:
        if self.live_display:
            self.live_display.update(self.create_layout(), refresh=True)

    def stop_live_display(self) -> None:
        if self.live_display:
            try:
                self.live_display.stop()
            finally:
                self.live_display = None

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def create_layout(self) -> Layout:
        width, height = self._get_terminal_size()
        context = LayoutContext(width, height, self.app.show_logs)

        popup = self.app.active.popup
        if popup is not None:
            return self._build_popup_overlay(popup.view(), context)

        layout = Layout()
        parts = [Layout(name="header", size=HEADER_HEIGHT), Layout(name="body")]
        if context.show_logs:
            parts.append(Layout(name="logs", size=LOG_PANEL_HEIGHT))
        layout.split_column(*parts)

        self._populate_header(layout)
        if self.app.screen is Screen.MAIN:
            self._populate_main(layout["body"], context)
        elif self.app.screen is Screen.FILES:
            self._populate_files(layout["body"], context)
        else:
            self._populate_frames(layout["body"], context)
        if context.show_logs:
            self._populate_logs(layout["logs"])
        return layout

    def _populate_header(self, layout: Layout) -> None:
        app_text = Text(f"{UI_APP_NAME} {VERSION}", style=self.style("window_title"))

        tabs = Text()
        for screen, label in TABS:
            role = "tab_active" if screen is self.app.screen else "tab_inactive"
            tabs.append(f" {label} ", style=self.style(role))
            tabs.append(" ")

        help_key = display_key(self.app.config.keymap.key_for(Action.HELP))
        help_text = Text(f"Press {help_key} for help", style=self.style("basic"))

        header = Table.grid(expand=True)
        header.add_column(justify="left")
        header.add_column(justify="center")
        header.add_column(justify="right")
        header.add_row(app_text, tabs, help_text)
        layout["header"].update(Panel(header, border_style=self.style("window_border"), padding=(0, 2)))

    def _panel(self, content, title: str, active: bool = False) -> Panel:
        return Panel(
            content,
            title=Text(title, style=self.style("window_title")),
            title_align="left",
            border_style=self.style("active_border" if active else "window_border"),
            expand=True,
        )

    def _row_style(self, highlighted: bool, focused: bool) -> str:
        if not highlighted:
            return self.style("basic")
        return self.style("list_highlighted" if focused else "list_active")

    # Main screen
    def _populate_main(self, body: Layout, context: LayoutContext) -> None:
        state = self.app.main
        body.split_column(Layout(name="lists"), Layout(name="footer", size=FOOTER_HEIGHT))
        body["lists"].split_row(Layout(name="entries"), Layout(name="details"))
        rows = max(1, context.list_rows - FOOTER_HEIGHT)

        files_focused = state.focus is Focus.FILES
        if state.entries:
            entries = Text()
            start, end = visible_window(len(state.entries), state.files_index, rows)
            for i in range(start, end):
                entry = state.entries[i]
                marker = "[x] " if entry.selected else "[ ] "
                entries.append(marker, style=self.style("list_selected") if entry.selected else self.style("basic"))
                entries.append(entry.filename, style=self._row_style(i == state.files_index, files_focused))
                if i < end - 1:
                    entries.append("\n")
        else:
            entries = Text(UI_NO_ENTRIES, style=self.style("basic"))
        title = f"{UI_PANEL_ENTRIES} ({len(state.entries)})"
        body["entries"].update(self._panel(entries, title, active=files_focused))

        if state.details:
            details = Table.grid(expand=True, padding=(0, 1))
            details.add_column(ratio=1, no_wrap=True)
            details.add_column(ratio=2)
            start, end = visible_window(len(state.details), state.details_index, rows)
            for i in range(start, end):
                item = state.details[i]
                style = self._row_style(i == state.details_index and not files_focused, not files_focused)
                details.add_row(Text(item.name, style=style), Text(item.content, style=style))
        else:
            details = Text(UI_NO_DETAILS, style=self.style("basic"))
        body["details"].update(self._panel(details, UI_PANEL_DETAILS, active=not files_focused))

        footer = Text(f" Template: {state.template}", style=self.style("basic"))
        body["footer"].update(footer)

    # Files screen
    def _populate_files(self, body: Layout, context: LayoutContext) -> None:
        state = self.app.files
        listing = Text()
        start, end = visible_window(len(state.items), state.index, context.list_rows)
        for i in range(start, end):
            item = state.items[i]
            if isinstance(item, ParentItem):
                style = self.style("list_parent")
                label = item.name
            elif item.is_dir:
                style = self.style("list_directory")
                label = f"{item.name}/"
            else:
                style = self.style("basic")
                label = item.name
            if i == state.index:
                style = self.style("list_highlighted")
            listing.append(label, style=style)
            if i < end - 1:
                listing.append("\n")

        title = f"{UI_PANEL_BROWSER}: {state.current_dir}"
        if state.show_hidden_dirs:
            title += " [hidden shown]"
        body.update(self._panel(listing, title, active=True))

    # Frames screen
    def _populate_frames(self, body: Layout, context: LayoutContext) -> None:
        state = self.app.frames
        table = Table.grid(expand=True, padding=(0, 1))
        table.add_column(no_wrap=True)
        table.add_column(no_wrap=True)
        table.add_column(ratio=1)
        start, end = visible_window(len(state.frames), state.index, context.list_rows)
        for i in range(start, end):
            frame = state.frames[i]
            style = self._row_style(i == state.index, True)
            table.add_row(Text(frame.id, style=style), Text(frame.name, style=style), Text(frame.description, style=style))
        body.update(self._panel(table, UI_PANEL_FRAMES, active=True))

    # Logs
    def _populate_logs(self, region: Layout) -> None:
        records = self.logs.visible(LOG_PANEL_HEIGHT - PANEL_CHROME)
        lines = Text()
        for i, record in enumerate(records):
            lines.append(record.format(), style=self.style(f"log_{record.level.value.lower()}"))
            if i < len(records) - 1:
                lines.append("\n")
        region.update(self._panel(lines, UI_PANEL_LOGS))

    # ------------------------------------------------------------------
    # Popups
    # ------------------------------------------------------------------
    def _popup_content(self, view: PopupView) -> Group:
        parts: List = []
        if view.kind == "help":
            parts.extend(Text(line, style=self.style("basic")) for line in view.lines)
            parts.append(Text(""))
            parts.append(Text("Press any key to close", style="dim"))
            return Group(*parts)

        for i, (label, value) in enumerate(view.fields):
            highlighted = view.highlighted is not None and i == view.highlighted
            parts.append(Text(label, style=self.style("popup_field") if highlighted else "bold"))
            if highlighted and view.input is not None:
                parts.append(cursor_text(view.input, view.cursor, self.style("basic")))
            else:
                parts.append(Text(value, style=self.style("basic")))

        if view.kind == "template":
            parts.append(Text("New", style=self.style("popup_field")))
            parts.append(cursor_text(view.input or "", view.cursor, self.style("basic")))

        for line in view.lines:
            parts.append(Text(line, style="dim"))
        return Group(*parts)

    def _popup_height(self, view: PopupView) -> int:
        content = len(view.lines) + 2 * len(view.fields)
        if view.kind == "help":
            content += 2
        elif view.kind == "template":
            content += 2
        return content + PANEL_CHROME + 2

    def _build_popup_overlay(self, view: PopupView, context: LayoutContext) -> Layout:
        dialog_height = min(self._popup_height(view), context.terminal_height - 4)
        dialog_width = min(80, context.terminal_width - 8)

        top_space = max(1, (context.terminal_height - dialog_height) // 2)
        bottom_space = max(1, context.terminal_height - dialog_height - top_space)
        side_margin = max(2, (context.terminal_width - dialog_width) // 2)

        overlay = Layout()
        overlay.split_column(
            Layout(name="overlay_top", size=top_space),
            Layout(name="overlay_center", size=dialog_height),
            Layout(name="overlay_bottom", size=bottom_space),
        )
        overlay["overlay_center"].split_row(
            Layout(name="overlay_left", size=side_margin),
            Layout(name="overlay_dialog", size=dialog_width),
            Layout(name="overlay_right", size=side_margin),
        )
        overlay["overlay_dialog"].update(
            Panel(
                Align.left(self._popup_content(view)),
                title=view.title,
                border_style=self.style("popup_border"),
                padding=(1, 2),
            )
        )
        for name in ("overlay_top", "overlay_bottom", "overlay_left", "overlay_right"):
            overlay[name].update("")
        return overlay
