#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
import io
import queue
import tempfile
import unittest
from contextlib import redirect_stderr
from pathlib import Path
from unittest import mock

from tagterm.cli import build_parser, main, run_event_loop, validate_start_dir
from tagterm.config import load_config
from tagterm.core.app import App
from tagterm.core.errors import DirectoryError
from tagterm.core.logs import LogBuffer
from tagterm.ui.input import ConfigReload, ForceQuit, KeyInput, Tick


class ParserTests(unittest.TestCase):
    def test_defaults(self):
        args = build_parser().parse_args([])
        self.assertIsNone(args.path)
        self.assertIsNone(args.config)
        self.assertFalse(args.debug)

    def test_options(self):
        args = build_parser().parse_args(["music", "--config", "c.json", "--debug", "--log-file", "x.log"])
        self.assertEqual(args.path, "music")
        self.assertEqual(args.config, "c.json")
        self.assertTrue(args.debug)
        self.assertEqual(args.log_file, "x.log")


class StartupTests(unittest.TestCase):
    def test_start_dir_defaults_to_cwd(self):
        self.assertEqual(validate_start_dir(None), Path.cwd().resolve())

    def test_missing_start_dir(self):
        with self.assertRaises(DirectoryError):
            validate_start_dir("/nonexistent/music")

    def test_main_fails_on_missing_directory(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            self.assertEqual(main(["/nonexistent/music"]), 1)
        self.assertIn("startup cancelled", stderr.getvalue())

    def test_main_fails_on_broken_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            config = Path(tmp) / "config.json"
            config.write_text('{"actions": {"quit": "Ctrl+Q"}}', encoding="utf-8")
            stderr = io.StringIO()
            with redirect_stderr(stderr):
                self.assertEqual(main([tmp, "--config", str(config)]), 1)
        self.assertIn("Ctrl+Q", stderr.getvalue())


class EventLoopTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        root = Path(self.tmp.name)
        self.logs = LogBuffer()
        self.app = App(load_config(root / "config.json", self.logs), self.logs, root)
        self.renderer = mock.Mock()
        self.events = queue.Queue()

    def test_loop_runs_until_quit(self):
        for event in (Tick(), KeyInput("3"), KeyInput("q"), KeyInput("1")):
            self.events.put(event)
        run_event_loop(self.app, self.renderer, self.events)
        self.assertFalse(self.app.running)
        self.assertEqual(self.renderer.update_display.call_count, 3)
        self.assertEqual(self.events.qsize(), 1)

    def test_force_quit(self):
        self.events.put(ForceQuit())
        run_event_loop(self.app, self.renderer, self.events)
        self.assertFalse(self.app.running)

    def test_config_reload_event(self):
        with mock.patch.object(self.app, "reload_config") as reload_config:
            self.events.put(ConfigReload(Path("/tmp/config.json")))
            self.events.put(ForceQuit())
            run_event_loop(self.app, self.renderer, self.events)
        reload_config.assert_called_once_with(Path("/tmp/config.json"))


if __name__ == "__main__":
    unittest.main()
