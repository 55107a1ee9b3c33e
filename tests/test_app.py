#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tagterm.config import load_config
from tagterm.config.actions import Scope
from tagterm.core.app import App
from tagterm.core.errors import TagWriteError
from tagterm.core.events import Screen
from tagterm.core.logs import Level, LogBuffer
from tagterm.popups import HelpPopup, SingleInput

from . import make_audio_file


class AppTestCase(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.root = Path(self.tmp.name).resolve()
        self.music = self.root / "music"
        self.music.mkdir()
        make_audio_file(self.music / "a.mp3", {"TIT2": "A"})
        make_audio_file(self.music / "b.mp3")
        self.config_path = self.root / "config.json"
        self.logs = LogBuffer()
        self.app = App(load_config(self.config_path, self.logs), self.logs, self.music)

    def keys(self, *keys):
        for key in keys:
            self.app.handle_key(key)


class ScreenSwitchTests(AppTestCase):
    def test_starts_on_main_screen(self):
        self.assertIs(self.app.screen, Screen.MAIN)
        self.assertIs(self.app.scope(), Scope.MAIN)

    def test_switching_keeps_screen_state(self):
        self.keys("2", "Down", "Down")
        self.assertIs(self.app.screen, Screen.FILES)
        self.assertEqual(self.app.files.index, 2)

        self.keys("3", "Down", "2")
        self.assertEqual(self.app.files.index, 2)
        self.keys("3")
        self.assertEqual(self.app.frames.index, 1)

    def test_quit(self):
        self.assertFalse(self.app.handle_key("q"))
        self.assertFalse(self.app.running)

    def test_force_quit(self):
        self.app.force_quit()
        self.assertFalse(self.app.running)


class CrossScreenTests(AppTestCase):
    def test_add_all_files_hands_entries_to_main(self):
        self.keys("2", "a", "1")
        self.assertEqual([e.filename for e in self.app.main.entries], ["a.mp3", "b.mp3"])
        self.assertEqual(self.app.main.files_index, 0)

        # adding again changes nothing
        self.keys("2", "a")
        self.assertEqual(len(self.app.main.entries), 2)

    def test_add_frame_from_catalog(self):
        self.keys("2", "Down", "Down", "s", "3", "a")
        entry = self.app.main.entries[0]
        self.assertEqual(entry.filename, "b.mp3")
        self.assertIn("TIT2", entry.tag)


class PopupRoutingTests(AppTestCase):
    def test_popup_changes_scope_and_swallows_keys(self):
        self.keys("h")
        self.assertIsInstance(self.app.main.popup, HelpPopup)
        self.assertIs(self.app.scope(), Scope.POPUP)

        self.keys("l")
        self.assertFalse(self.app.show_logs)
        self.assertIsNone(self.app.main.popup)

    def test_popup_bubbles_screen_switch_and_survives_it(self):
        self.keys("2", "a", "1", "Tab", "Enter")
        popup = self.app.main.popup
        self.assertIsInstance(popup, SingleInput)

        self.keys("2")
        self.assertIs(self.app.screen, Screen.FILES)
        self.assertIsNone(self.app.files.popup)

        self.keys("1")
        self.assertIs(self.app.main.popup, popup)

    def test_help_closes_on_screen_key(self):
        self.keys("2", "h", "1")
        self.assertIs(self.app.screen, Screen.FILES)
        self.assertIsNone(self.app.files.popup)

    def test_quit_key_is_text_inside_template_popup(self):
        self.keys("t", "q")
        self.assertTrue(self.app.running)
        self.assertTrue(self.app.main.popup.field.text.endswith("q"))


class LogActionTests(AppTestCase):
    def test_toggle_and_scroll_logs(self):
        self.keys("l")
        self.assertTrue(self.app.show_logs)
        self.logs.info("one")
        self.logs.info("two")
        end = self.logs.index
        self.keys("PageUp")
        self.assertEqual(self.logs.index, end - 1)
        self.keys("PageDown")
        self.assertEqual(self.logs.index, end)
        self.keys("l")
        self.assertFalse(self.app.show_logs)

    def test_dot_file_name_edit_then_write_keeps_running(self):
        self.keys("2", "Down", "s", "1", "Tab", "Enter", "Enter")
        self.keys(*["Backspace"] * 10)
        self.keys(".", "Enter", "w")
        entry = self.app.main.entries[0]
        self.assertEqual(entry.filename, "a.mp3")
        self.assertIs(self.logs.records()[-1].level, Level.WARN)

        self.assertTrue(self.app.handle_key("w"))
        self.assertTrue(self.app.running)
        self.assertEqual(entry.path, self.music / "a.mp3")
        self.assertTrue(entry.path.exists())

    def test_write_failure_is_shown(self):
        error = TagWriteError(self.music / "a.mp3", "disk full", written=0)
        with mock.patch.object(self.app.main, "write_tags", side_effect=error):
            self.assertTrue(self.app.handle_key("w"))
        self.assertTrue(self.app.show_logs)
        record = self.logs.records()[-1]
        self.assertIs(record.level, Level.ERROR)
        self.assertIn("disk full", record.message)


class ReloadConfigTests(AppTestCase):
    def test_reload_applies_new_bindings(self):
        self.config_path.write_text(json.dumps({"actions": {"quit": "x"}}), encoding="utf-8")
        self.assertTrue(self.app.reload_config())
        self.keys("q")
        self.assertTrue(self.app.running)
        self.keys("x")
        self.assertFalse(self.app.running)

    def test_invalid_reload_keeps_previous_bindings(self):
        keymap = self.app.config.keymap
        self.config_path.write_text(json.dumps({"actions": {"help": "q"}}), encoding="utf-8")
        self.assertFalse(self.app.reload_config(self.config_path))
        self.assertIs(self.app.config.keymap, keymap)
        self.assertIs(self.logs.records()[-1].level, Level.ERROR)
        self.keys("q")
        self.assertFalse(self.app.running)


if __name__ == "__main__":
    unittest.main()
