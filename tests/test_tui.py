#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
import io
import tempfile
import unittest
from pathlib import Path

from rich.console import Console

from tagterm.config import load_config
from tagterm.core.app import App
from tagterm.core.logs import LogBuffer
from tagterm.ui.tui import TUIRenderer, cursor_text, visible_window

from . import make_audio_file


class VisibleWindowTests(unittest.TestCase):
    def test_short_list_is_shown_whole(self):
        self.assertEqual(visible_window(3, 2, 10), (0, 3))

    def test_cursor_stays_visible(self):
        start, end = visible_window(100, 90, 10)
        self.assertEqual(end - start, 10)
        self.assertTrue(start <= 90 < end)
        self.assertEqual(visible_window(100, 99, 10), (90, 100))
        self.assertEqual(visible_window(100, None, 10), (0, 10))


class CursorTextTests(unittest.TestCase):
    def test_cursor_block_at_end(self):
        self.assertEqual(cursor_text("abc", 3).plain, "abc ")
        self.assertEqual(cursor_text("abc", 1).plain, "abc")


class RendererTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        root = Path(self.tmp.name).resolve()
        make_audio_file(root / "track.mp3", {"TIT2": "Song Title"})
        (root / "subdir").mkdir()
        self.logs = LogBuffer()
        self.app = App(load_config(root / "config.json", self.logs), self.logs, root)
        self.output = io.StringIO()
        console = Console(file=self.output, width=120, height=30, color_system=None, legacy_windows=False)
        self.renderer = TUIRenderer(self.app, self.logs, console=console)

    def render(self):
        self.renderer.console.print(self.renderer.create_layout())
        return self.output.getvalue()

    def test_empty_main_screen(self):
        text = self.render()
        self.assertIn("TagTerm", text)
        self.assertIn("1 Main", text)
        self.assertIn("No files loaded", text)
        self.assertIn("Template: {Track} - {Title}", text)

    def test_main_screen_with_entries_and_logs(self):
        for key in ("2", "a", "1", "l"):
            self.app.handle_key(key)
        text = self.render()
        self.assertIn("[ ] track.mp3", text)
        self.assertIn("Song Title", text)
        self.assertIn("Added 1 file(s)", text)

    def test_files_screen(self):
        self.app.handle_key("2")
        text = self.render()
        self.assertIn("../", text)
        self.assertIn("subdir/", text)
        self.assertIn("track.mp3", text)

    def test_frames_screen(self):
        self.app.handle_key("3")
        text = self.render()
        self.assertIn("TIT2", text)
        self.assertIn("Title", text)

    def test_help_overlay(self):
        self.app.handle_key("h")
        text = self.render()
        self.assertIn("Main Help", text)
        self.assertIn("Quit", text)

    def test_edit_popup_overlay(self):
        for key in ("2", "a", "1", "Tab", "Down", "Enter"):
            self.app.handle_key(key)
        text = self.render()
        self.assertIn("Edit Title", text)
        self.assertIn("Song Title", text)


if __name__ == "__main__":
    unittest.main()
