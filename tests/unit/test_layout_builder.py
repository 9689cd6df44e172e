# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import unittest
from unittest import mock

from paperage.core.errors import CapacityExceededError, ResourceLoadError
from paperage.render.builder import (
    DIVIDER_DASH,
    FOOTER_TEXT,
    QR_IMAGE_ID,
    DocumentBuilder,
    build_document,
    ciphertext_tier,
)
from paperage.render.document import DocumentConfig
from paperage.render.geometry import estimated_text_width, font_height, pt_to_mm
from paperage.render.ops import (
    BLACK,
    LIGHT_GRAY,
    WHITE,
    AddLineBreak,
    BeginText,
    DrawLine,
    EndText,
    FillRect,
    FontId,
    PlaceImage,
    SetFillColor,
    SetFont,
    SetLineDashPattern,
    SetLineHeight,
    SetOutlineColor,
    SetOutlineThickness,
    SetTextCursor,
    WriteText,
)
from paperage.render.page import PageSize, Point
from tests.test_support import (
    bundled_fonts,
    fake_barcode_renderer,
    instruction_kinds,
    is_subsequence,
    make_armored,
)

TEXT_SECTION = ["begin_text", "set_fill_color", "set_font", "set_text_cursor", "write_text", "end_text"]
LINE = ["set_outline_color", "set_line_dash_pattern", "set_outline_thickness", "draw_line"]
LINE_OPS = (SetOutlineColor, SetLineDashPattern, SetOutlineThickness, DrawLine)


def _builder(**config) -> DocumentBuilder:
    return DocumentBuilder(
        DocumentConfig(**config),
        fonts=bundled_fonts(),
        barcode_renderer=fake_barcode_renderer(),
    )


def _cursor(instructions) -> Point:
    cursors = [op for op in instructions if isinstance(op, SetTextCursor)]
    return cursors[0].position


class TestCiphertextTier(unittest.TestCase):
    def test_boundaries(self) -> None:
        cases = (
            (1, 13.0, 15.0),
            (22, 13.0, 15.0),
            (23, 10.0, 12.0),
            (27, 10.0, 12.0),
            (28, 8.0, 9.0),
            (39, 8.0, 9.0),
            (40, 7.0, 8.0),
            (42, 7.0, 8.0),
            (43, 6.5, 7.0),
            (200, 6.5, 7.0),
        )
        for lines, size, height in cases:
            with self.subTest(lines=lines):
                tier = ciphertext_tier(lines)
                self.assertEqual(tier.font_size, size)
                self.assertEqual(tier.line_height, height)


class TestBuilderSections(unittest.TestCase):
    def test_background(self) -> None:
        builder = _builder()
        self.assertEqual(
            builder.background(),
            [SetFillColor(WHITE), FillRect(0.0, 0.0, 210.0, 297.0), SetFillColor(BLACK)],
        )

    def test_background_fill_can_be_disabled(self) -> None:
        self.assertEqual(_builder(background=False).background(), [SetFillColor(BLACK)])

    def test_short_title_aligns_with_qr_code(self) -> None:
        for page_size, left in ((PageSize.A4, 50.0), (PageSize.LETTER, 56.95)):
            with self.subTest(page_size=page_size):
                content = _builder(title="T" * 37, page_size=page_size).insert_title_text()
                self.assertEqual(instruction_kinds(content), TEXT_SECTION)
                cursor = _cursor(content)
                self.assertAlmostEqual(cursor.x, left)
                dims = page_size.dimensions()
                self.assertAlmostEqual(cursor.y, dims.height - dims.margin - font_height(14.0))

    def test_long_title_starts_at_margin(self) -> None:
        content = _builder(title="T" * 38).insert_title_text()
        self.assertAlmostEqual(_cursor(content).x, 10.0)
        self.assertIn(SetFont(FontId.TITLE, 14.0), content)
        self.assertIn(WriteText("T" * 38, FontId.TITLE), content)

    def test_qr_code_placement(self) -> None:
        builder = _builder()
        qrcode = fake_barcode_renderer()()
        content = builder.insert_qr_code(QR_IMAGE_ID, qrcode)
        self.assertEqual(len(content), 1)
        placed = content[0]
        self.assertIsInstance(placed, PlaceImage)
        self.assertEqual(placed.image_id, QR_IMAGE_ID)
        self.assertAlmostEqual(placed.x, 50.0)
        self.assertAlmostEqual(placed.y, 167.0)
        self.assertAlmostEqual(placed.scale_x, 110.0 / 25.4)
        self.assertEqual(placed.scale_x, placed.scale_y)
        self.assertEqual(placed.dpi, 300.0)

    def test_notes_line_threshold(self) -> None:
        cases = (
            ("N" * 32, False, True),
            ("N" * 33, False, False),
            ("N" * 32, True, False),
            ("Passphrase:", False, True),
            ("", False, True),
        )
        for label, skip, has_line in cases:
            with self.subTest(label_len=len(label), skip=skip):
                content = _builder(notes_label=label, skip_notes_line=skip).insert_notes_field()
                expected = TEXT_SECTION + (LINE if has_line else [])
                self.assertEqual(instruction_kinds(content), expected)

    def test_notes_label_position_and_line(self) -> None:
        content = _builder().insert_notes_field()
        cursor = _cursor(content)
        self.assertAlmostEqual(cursor.x, 50.0)
        self.assertAlmostEqual(cursor.y, 158.5)
        self.assertIn(SetFont(FontId.TITLE, 13.0), content)
        self.assertIn(WriteText("Passphrase:", FontId.TITLE), content)

        line = content[-1]
        self.assertIsInstance(line, DrawLine)
        start, end = line.points
        self.assertAlmostEqual(start.x, 50.0 + estimated_text_width("Passphrase:", 13.0))
        self.assertAlmostEqual(end.x, 160.0)
        self.assertAlmostEqual(start.y, 157.5)
        self.assertAlmostEqual(end.y, 157.5)
        self.assertIn(SetOutlineThickness(1.0), content)
        self.assertIn(SetLineDashPattern(None), content)

    def test_divider(self) -> None:
        content = _builder(page_size=PageSize.LETTER).insert_divider()
        self.assertEqual(instruction_kinds(content), LINE)
        self.assertEqual(content[0], SetOutlineColor(LIGHT_GRAY))
        self.assertEqual(content[1], SetLineDashPattern(DIVIDER_DASH))
        self.assertFalse(content[1].solid)
        self.assertEqual(content[2], SetOutlineThickness(1.0))
        start, end = content[3].points
        self.assertAlmostEqual(start.x, 10.0)
        self.assertAlmostEqual(end.x, 205.9)
        self.assertAlmostEqual(start.y, 139.7)
        self.assertAlmostEqual(end.y, 139.7)

    def test_pem_text(self) -> None:
        armored = make_armored(10)
        content = _builder().insert_pem_text(armored)
        self.assertEqual(
            instruction_kinds(content[:5]),
            ["begin_text", "set_fill_color", "set_line_height", "set_font", "set_text_cursor"],
        )
        self.assertEqual(content[2], SetLineHeight(15.0))
        self.assertEqual(content[3], SetFont(FontId.CODE, 13.0))
        cursor = _cursor(content)
        self.assertAlmostEqual(cursor.x, 10.0)
        self.assertAlmostEqual(cursor.y, 148.5 - pt_to_mm(13.0) - 10.0)

        body = content[5:-1]
        self.assertEqual(len(body), 20)
        lines = armored.splitlines()
        for index, line in enumerate(lines):
            self.assertEqual(body[2 * index], WriteText(line, FontId.CODE))
            self.assertEqual(body[2 * index + 1], AddLineBreak())
        self.assertEqual(content[-1], EndText())

    def test_pem_text_uses_tier_for_line_count(self) -> None:
        content = _builder().insert_pem_text(make_armored(43))
        self.assertIn(SetLineHeight(7.0), content)
        self.assertIn(SetFont(FontId.CODE, 6.5), content)

    def test_footer(self) -> None:
        content = _builder().insert_footer()
        self.assertEqual(instruction_kinds(content), TEXT_SECTION)
        self.assertEqual(_cursor(content), Point(10.0, 10.0))
        self.assertIn(WriteText(FOOTER_TEXT, FontId.TITLE), content)
        self.assertIn(SetFont(FontId.TITLE, 13.0), content)

    def test_grid(self) -> None:
        content = _builder().draw_grid()
        lines = [op for op in content if isinstance(op, DrawLine)]
        # 42 verticals (x = 5..210) then 59 horizontals (y = 292..2)
        self.assertEqual(len(lines), 101)
        self.assertEqual(len(content), 101 * 4)
        self.assertEqual(lines[0].points, (Point(5.0, 297.0), Point(5.0, 0.0)))
        self.assertEqual(lines[41].points, (Point(210.0, 297.0), Point(210.0, 0.0)))
        self.assertEqual(lines[42].points, (Point(210.0, 292.0), Point(0.0, 292.0)))
        self.assertEqual(lines[-1].points, (Point(210.0, 2.0), Point(0.0, 2.0)))
        self.assertIn(SetOutlineThickness(0.0), content)


class TestBuild(unittest.TestCase):
    def test_default_document_order(self) -> None:
        armored = make_armored(12)
        document = _builder().build(armored)
        kinds = instruction_kinds(document.instructions)

        expected = (
            ["set_fill_color", "fill_rect", "set_fill_color"]
            + TEXT_SECTION
            + ["place_image"]
            + TEXT_SECTION
            + LINE
            + LINE
            + ["begin_text", "set_fill_color", "set_line_height", "set_font", "set_text_cursor"]
            + ["write_text", "add_line_break"] * 12
            + ["end_text"]
            + TEXT_SECTION
        )
        self.assertEqual(kinds, expected)
        self.assertEqual(list(document.images), [QR_IMAGE_ID])
        self.assertFalse(document.finalized)

    def test_section_subsequence(self) -> None:
        document = _builder(grid=True).build(make_armored(30))
        kinds = instruction_kinds(document.instructions)
        self.assertTrue(
            is_subsequence(
                ["fill_rect", "draw_line", "write_text", "place_image", "write_text", "draw_line"],
                kinds,
            )
        )
        first_text = kinds.index("begin_text")
        self.assertEqual(kinds[3:first_text].count("draw_line"), 101)

    def test_optional_sections(self) -> None:
        without_footer = _builder(footer=False).build(make_armored(5))
        writes = [op for op in without_footer.instructions if isinstance(op, WriteText)]
        self.assertNotIn(FOOTER_TEXT, [op.text for op in writes])

        without_grid = _builder().build(make_armored(5)).instructions
        with_grid = _builder(grid=True).build(make_armored(5)).instructions
        self.assertTrue(is_subsequence(without_grid, with_grid))

        extras = []
        matched = 0
        for op in with_grid:
            if matched < len(without_grid) and op == without_grid[matched]:
                matched += 1
            else:
                extras.append(op)
        self.assertEqual(matched, len(without_grid))
        self.assertEqual(len(extras), 101 * 4)
        self.assertTrue(all(isinstance(op, LINE_OPS) for op in extras))
        self.assertEqual(sum(isinstance(op, DrawLine) for op in extras), 101)

    def test_build_is_deterministic(self) -> None:
        armored = make_armored(25)
        first = _builder(title="Seed", page_size=PageSize.LETTER).build(armored)
        second = _builder(title="Seed", page_size=PageSize.LETTER).build(armored)
        self.assertEqual(first.instructions, second.instructions)

    def test_barcode_renderer_receives_armored_text(self) -> None:
        renderer = fake_barcode_renderer()
        armored = make_armored(4)
        builder = DocumentBuilder(DocumentConfig(), fonts=bundled_fonts(), barcode_renderer=renderer)
        builder.build(armored)
        renderer.assert_called_once_with(armored)

    def test_capacity_error_leaves_no_document(self) -> None:
        renderer = mock.Mock(side_effect=CapacityExceededError("too big"))
        builder = DocumentBuilder(DocumentConfig(), fonts=bundled_fonts(), barcode_renderer=renderer)
        with mock.patch("paperage.render.builder.Document") as document_cls:
            with self.assertRaises(CapacityExceededError):
                builder.build(make_armored(4))
        document_cls.assert_not_called()

    def test_font_failure_happens_before_qr_encoding(self) -> None:
        renderer = fake_barcode_renderer()
        fonts = mock.Mock(side_effect=ResourceLoadError("broken font"))
        builder = DocumentBuilder(DocumentConfig(), fonts=fonts, barcode_renderer=renderer)
        with self.assertRaises(ResourceLoadError):
            builder.build(make_armored(4))
        renderer.assert_not_called()

    def test_build_document_loads_bundled_fonts(self) -> None:
        document = build_document(
            DocumentConfig(),
            make_armored(4),
            barcode_renderer=fake_barcode_renderer(),
        )
        self.assertIn("Source Code Pro", document.fonts.title.family)
        self.assertIn("Source Code Pro", document.fonts.code.family)


if __name__ == "__main__":
    unittest.main()
