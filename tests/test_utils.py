#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
import unittest

from tagterm.utils import clamp_index, display_key, next_index, prev_index, sanitize_filename


class NavigationTests(unittest.TestCase):
    def test_next_wraps_around_after_length_steps(self):
        for length in (1, 2, 5):
            for start in range(length):
                index = start
                for _ in range(length):
                    index = next_index(index, length)
                self.assertEqual(index, start)

    def test_prev_wraps_around_after_length_steps(self):
        for length in (1, 3, 7):
            for start in range(length):
                index = start
                for _ in range(length):
                    index = prev_index(index, length)
                self.assertEqual(index, start)

    def test_unset_cursor_moves_to_first_item(self):
        self.assertEqual(next_index(None, 4), 0)
        self.assertEqual(prev_index(None, 4), 0)

    def test_empty_list_has_no_cursor(self):
        self.assertIsNone(next_index(0, 0))
        self.assertIsNone(prev_index(None, 0))
        self.assertIsNone(clamp_index(3, 0))

    def test_edges_wrap(self):
        self.assertEqual(next_index(2, 3), 0)
        self.assertEqual(prev_index(0, 3), 2)

    def test_clamp_resets_out_of_range_cursor(self):
        self.assertEqual(clamp_index(5, 3), 0)
        self.assertEqual(clamp_index(2, 3), 2)
        self.assertEqual(clamp_index(None, 3), 0)


class FilenameTests(unittest.TestCase):
    def test_invalid_characters_are_removed(self):
        self.assertEqual(sanitize_filename('AC/DC: "Back" <in> Black?.mp3'), "ACDC Back in Black.mp3")

    def test_surrounding_whitespace_is_trimmed(self):
        self.assertEqual(sanitize_filename("  name.mp3 "), "name.mp3")


class DisplayKeyTests(unittest.TestCase):
    def test_special_keys_have_labels(self):
        self.assertEqual(display_key("Up"), "↑")
        self.assertEqual(display_key(" "), "Space")
        self.assertEqual(display_key("q"), "q")
        self.assertEqual(display_key(None), "unbound")


if __name__ == "__main__":
    unittest.main()
