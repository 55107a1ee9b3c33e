#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
import unittest
from unittest import mock

from tagterm.core.logs import Level, LogBuffer
from tagterm.core.resolver import ActionResolver
from tagterm.config.actions import Scope
from tagterm.utils import debug
from tagterm.utils.debug import DebugManager

from . import default_keymap


class DebugManagerTests(unittest.TestCase):
    def test_disabled_debug_is_silent(self):
        logs = LogBuffer()
        logs.debugger.debug_log("EVENT", "hidden")
        logs.debugger.update_state("App", "screen", "Files")
        self.assertEqual(logs.records(), [])
        self.assertFalse(logs.debug_enabled)

    def test_enabled_debug_routes_into_its_own_buffer(self):
        logs = LogBuffer(debug=True)
        logs.debugger.update_state("App", "screen", "Files")
        messages = [r.message for r in logs.records()]
        self.assertTrue(all(r.level is Level.DEBUG for r in logs.records()))
        self.assertTrue(any("App.screen: None -> Files" in m for m in messages))
        self.assertEqual(logs.debugger.get_current_state()["state"]["App"]["screen"], "Files")

    def test_buffers_do_not_share_debug_state(self):
        traced = LogBuffer(debug=True)
        quiet = LogBuffer()
        traced.debugger.debug_log("EVENT", "only here")
        self.assertTrue(any("only here" in r.message for r in traced.records()))
        self.assertEqual(quiet.records(), [])

    def test_event_history_is_bounded(self):
        sink = mock.Mock()
        manager = DebugManager(sink, history=5)
        manager.enable()
        for i in range(50):
            manager.debug_log("INPUT", str(i))
        self.assertEqual(len(manager.state_changes), 5)
        self.assertEqual(manager.state_changes[-1]["message"], "49")

    def test_set_debug_toggles_tracing(self):
        logs = LogBuffer()
        logs.set_debug(True)
        self.assertTrue(logs.debug_enabled)
        logs.set_debug(False)
        before = len(logs)
        logs.debugger.debug_log("EVENT", "after disable")
        self.assertEqual(len(logs), before)

    def test_resolver_traces_through_the_given_buffer(self):
        logs = LogBuffer(debug=True)
        resolver = ActionResolver(default_keymap(), logs)
        # `s` is both select_current and add_file
        resolver.resolve("s", Scope.FILES)
        self.assertTrue(any("ACTION_RESOLVED" in r.message for r in logs.records()))

    def test_env_flag_parsing(self):
        self.assertTrue(debug._as_bool("yes"))
        self.assertTrue(debug._as_bool(" 1 "))
        self.assertFalse(debug._as_bool("off"))
        self.assertFalse(debug._as_bool(""))
        with mock.patch.dict("os.environ", {"TAGTERM_DEBUG": "on"}):
            self.assertTrue(debug.debug_requested_by_env())


if __name__ == "__main__":
    unittest.main()
