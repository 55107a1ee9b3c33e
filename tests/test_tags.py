#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
import tempfile
import unittest
from pathlib import Path

from mutagen.id3 import APIC, COMM, ID3, TPE1

from tagterm.core.details import ExtendedTextDetail, FileNameDetail, TextDetail, build_details
from tagterm.core.errors import FrameValueError
from tagterm.core.frame_data import SUPPORTED_FRAMES, frame_name, lookup_frame_id
from tagterm.core.tags import (
    Entry,
    ID3NoHeaderError,
    editable_frames,
    get_text,
    read_tag,
    remove_frame,
    set_text,
    write_tag,
)

from . import make_audio_file, make_tag


class FrameCatalogTests(unittest.TestCase):
    def test_ids_are_unique_text_frames(self):
        ids = [frame.id for frame in SUPPORTED_FRAMES]
        self.assertEqual(len(ids), len(set(ids)))
        self.assertTrue(all(len(i) == 4 and i.startswith("T") for i in ids))

    def test_names_and_lookup(self):
        self.assertEqual(frame_name("TIT2"), "Title")
        self.assertEqual(frame_name("TZZZ"), "TZZZ")
        self.assertEqual(lookup_frame_id("album artist"), "TPE2")
        self.assertEqual(lookup_frame_id("tcon"), "TCON")
        self.assertIsNone(lookup_frame_id("nope"))


class TagAccessTests(unittest.TestCase):
    def test_read_untagged_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = make_audio_file(Path(tmp) / "x.mp3")
            with self.assertRaises(ID3NoHeaderError):
                read_tag(path)

    def test_non_text_frames_survive_write_back(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = make_audio_file(Path(tmp) / "x.mp3", {"TIT2": "Old"})
            tag = read_tag(path)
            tag.add(APIC(encoding=3, mime="image/png", type=3, desc="cover", data=b"png"))
            tag.save(str(path))

            tag = read_tag(path)
            set_text(tag, "TIT2", "New")
            write_tag(tag, path)

            saved = ID3(str(path))
        self.assertEqual(str(saved["TIT2"]), "New")
        self.assertEqual(saved.getall("APIC")[0].data, b"png")

    def test_only_text_frames_are_editable(self):
        tag = make_tag({"TIT2": "t"}, {"d": "v"})
        tag.add(COMM(encoding=3, lang="eng", desc="", text=["comment"]))
        self.assertEqual(sorted(f.FrameID for f in editable_frames(tag)), ["TIT2", "TXXX"])
        self.assertEqual(get_text(tag, "TIT2"), "t")
        self.assertIsNone(get_text(tag, "TXXX"))
        self.assertIsNone(get_text(tag, "TALB"))

    def test_remove_frame(self):
        tag = make_tag({"TIT2": "t"}, {"a": "1", "b": "2"})
        self.assertTrue(remove_frame(tag, "TXXX:a"))
        self.assertFalse(remove_frame(tag, "TXXX:a"))
        self.assertEqual([f.desc for f in tag.getall("TXXX")], ["b"])


class TextValueTests(unittest.TestCase):
    def test_unparseable_date_is_refused(self):
        tag = make_tag({"TDRC": "2020"})
        with self.assertRaises(FrameValueError):
            set_text(tag, "TDRC", "Spring 2020")
        self.assertEqual(get_text(tag, "TDRC"), "2020")

    def test_valid_date_is_stored(self):
        tag = make_tag({"TDRC": "2020"})
        set_text(tag, "TDRC", "2021-05-04")
        self.assertEqual(get_text(tag, "TDRC"), "2021-05-04")

    def test_multiple_values_are_split_back(self):
        tag = ID3()
        tag.add(TPE1(encoding=3, text=["A", "B"]))
        detail = build_details(Entry.from_path(Path("/music/x.mp3"), tag))[1]
        self.assertEqual(detail, TextDetail("TPE1", "A/B"))
        self.assertTrue(detail.multiple)

        set_text(tag, "TPE1", "A/C", detail.multiple)
        self.assertEqual(list(tag["TPE1"].text), ["A", "C"])

    def test_single_value_keeps_its_slash(self):
        tag = make_tag({"TPE1": "AC/DC"})
        set_text(tag, "TPE1", "AC/DC live")
        self.assertEqual(list(tag["TPE1"].text), ["AC/DC live"])


class DetailsTests(unittest.TestCase):
    def test_file_name_first_then_sorted_by_name_and_description(self):
        tag = make_tag({"TIT2": "t", "TALB": "al"}, {"zeta": "1", "alpha": "2"})
        entry = Entry.from_path(Path("/music/song.mp3"), tag)
        self.assertEqual(
            build_details(entry),
            [
                FileNameDetail("song.mp3"),
                TextDetail("TALB", "al"),
                TextDetail("TIT2", "t"),
                ExtendedTextDetail("alpha", "2"),
                ExtendedTextDetail("zeta", "1"),
            ],
        )

    def test_detail_keys_and_content(self):
        detail = ExtendedTextDetail("mood", "calm")
        self.assertEqual(detail.key, "TXXX:mood")
        self.assertEqual(detail.content, "mood: calm")
        self.assertEqual(detail.name, "User defined text")


if __name__ == "__main__":
    unittest.main()
