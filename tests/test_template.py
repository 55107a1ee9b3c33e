#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
import unittest

from tagterm.core.errors import TemplateError
from tagterm.core.template import DEFAULT_TEMPLATE, parse_template, render_template

from . import make_tag


class ParseTemplateTests(unittest.TestCase):
    def test_literals_and_fields(self):
        self.assertEqual(parse_template("{Track} - {Title}"), [("Track",), " - ", ("Title",)])

    def test_double_braces_are_literal(self):
        self.assertEqual(parse_template("{{x}} {TIT2}"), ["{x} ", ("TIT2",)])

    def test_malformed_templates(self):
        for template in ("{Title", "{}", "Title}", "{ }"):
            with self.subTest(template=template):
                with self.assertRaises(TemplateError):
                    parse_template(template)


class RenderTemplateTests(unittest.TestCase):
    def setUp(self):
        self.tag = make_tag({"TIT2": "Song", "TRCK": "3/12", "TPE1": "AC/DC"})

    def test_default_template(self):
        name = render_template(parse_template(DEFAULT_TEMPLATE), self.tag, ".mp3")
        self.assertEqual(name, "3-12 - Song.mp3")

    def test_fields_by_id_and_case_insensitive_name(self):
        name = render_template(parse_template("{tpe1} {artist}"), self.tag, ".mp3")
        self.assertEqual(name, "AC-DC AC-DC.mp3")

    def test_extension_not_duplicated(self):
        name = render_template(parse_template("{Title}.mp3"), self.tag, ".mp3")
        self.assertEqual(name, "Song.mp3")

    def test_missing_frame(self):
        with self.assertRaises(TemplateError) as ctx:
            render_template(parse_template("{Album}"), self.tag, ".mp3")
        self.assertEqual(ctx.exception.field, "Album")

    def test_unknown_field(self):
        with self.assertRaises(TemplateError):
            render_template(parse_template("{Not a frame}"), self.tag)

    def test_extended_text_is_not_plain_text(self):
        tag = make_tag(extended={"mood": "calm"})
        with self.assertRaises(TemplateError):
            render_template(parse_template("{TXXX}"), tag)

    def test_empty_result(self):
        with self.assertRaises(TemplateError):
            render_template(parse_template('{Title}'), make_tag({"TIT2": "???"}), ".mp3")


if __name__ == "__main__":
    unittest.main()
