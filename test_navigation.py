import logging
import unittest

from dsn.layout.measure import FixedMetrics
from dsn.layout.structure import Rect
from dsn.navigation.construct import (
    FULL_LAYOUT,
    VIEWPORT_ONLY,
    line_fragment_frame_for_end_of_document,
    move_to_end_of_document,
)

from textview import TextView

LONG_PARAGRAPH = "aaaa bbbb cccc dddd eeee ffff gggg hhhh\n"  # 4 lines at a width of 10 characters


def text_view_for(text, width, height, metrics):
    text_view = TextView(metrics)
    text_view.load_text(text)
    text_view.resize(width, height)
    return text_view


class FullLayoutTestCase(unittest.TestCase):

    def test_three_lines(self):
        text_view = text_view_for("first line\nsecond line\nlast line", 400, 200, FixedMetrics(8, 16))

        # The last line starts after two lines of 16; "last line" is 9 characters of 8 wide.
        self.assertEqual(text_view.move_to_end_of_document(FULL_LAYOUT), Rect(0, 32, 72, 16))
        self.assertEqual(text_view.visible_rect.min_y, 0)

    def test_wrapped_last_paragraph(self):
        text_view = text_view_for("the quick brown fox", 100, 200, FixedMetrics(10, 16))

        # "the quick " | "brown fox"
        self.assertEqual(text_view.move_to_end_of_document(FULL_LAYOUT), Rect(0, 16, 90, 16))

    def test_trailing_newline(self):
        text_view = text_view_for("one\ntwo\n", 100, 200, FixedMetrics(10, 10))
        self.assertEqual(text_view.move_to_end_of_document(FULL_LAYOUT), Rect(0, 10, 30, 10))

    def test_scrolls_the_last_line_into_view(self):
        text_view = text_view_for(LONG_PARAGRAPH * 40 + "the end", 100, 30, FixedMetrics(10, 10))

        frame = text_view.move_to_end_of_document(FULL_LAYOUT)

        self.assertEqual(frame, Rect(0, 1600, 70, 10))
        self.assertEqual(text_view.visible_rect, Rect(0, 1580, 100, 30))
        self.assertEqual(text_view.content_size, (100, 1610))

    def test_logs_timing(self):
        text_view = text_view_for("some text", 100, 30, FixedMetrics(10, 10))

        with self.assertLogs('dsn.navigation.construct', level=logging.INFO) as captured:
            text_view.move_to_end_of_document(FULL_LAYOUT)

        self.assertTrue(any("ensure_layout took" in line for line in captured.output))


class ViewportOnlyTestCase(unittest.TestCase):

    def test_frame_is_wrong_below_unmeasured_content(self):
        text = LONG_PARAGRAPH * 40 + "short\n" * 9 + "the end"
        metrics = FixedMetrics(10, 10)

        correct = text_view_for(text, 100, 30, metrics).move_to_end_of_document(FULL_LAYOUT)
        estimated = text_view_for(text, 100, 30, metrics).move_to_end_of_document(VIEWPORT_ONLY)

        self.assertEqual(correct, Rect(0, 1690, 70, 10))
        self.assertIsNotNone(estimated)

        # Only the first paragraph and the last few have been measured; the other 39 long paragraphs count as one line.
        self.assertEqual(estimated, Rect(0, 520, 70, 10))
        self.assertGreater(abs(correct.min_y - estimated.min_y), 1)

    def test_no_fragment_for_the_end(self):
        # The window at the estimated end of the document fills up with long paragraphs before reaching the last one.
        text_view = text_view_for(LONG_PARAGRAPH * 50 + "the end", 100, 30, FixedMetrics(10, 10))

        self.assertIsNone(text_view.move_to_end_of_document(VIEWPORT_ONLY))
        self.assertIsNone(line_fragment_frame_for_end_of_document(text_view.text_layout_manager))

    def test_unknown_strategy(self):
        text_view = text_view_for("text", 100, 30, FixedMetrics(10, 10))
        self.assertRaises(Exception, move_to_end_of_document, text_view, 42)


class AfterInteractionTestCase(unittest.TestCase):
    """Jumping or resizing after the user has scrolled must only materialize what is near the new visible rect."""

    def test_jump_after_scrolling_discards_prepared_content(self):
        text_view = text_view_for("line\n" * 1000, 100, 100, FixedMetrics(10, 10))
        text_view.scroll_to(0)
        self.assertEqual(text_view.viewport_ds.prepared_rect, Rect(0, -50, 100, 200))

        text_view.move_to_end_of_document(FULL_LAYOUT)

        self.assertEqual(text_view.visible_rect, Rect(0, 9900, 100, 100))
        self.assertEqual(text_view.text_viewport_layout_controller.viewport_bounds, Rect(0, 9900, 100, 100))
        self.assertEqual(
            [s.paragraph_index for s in text_view.rendering_surfaces], list(range(990, 1000)))

    def test_width_change_when_scrolled_to_the_end(self):
        text_view = text_view_for(LONG_PARAGRAPH * 100, 100, 30, FixedMetrics(10, 10))
        text_view.move_to_end_of_document(FULL_LAYOUT)
        self.assertEqual(text_view.visible_rect, Rect(0, 3970, 100, 30))

        controller = text_view.text_viewport_layout_controller
        layout_count = controller.layout_count

        # At this width every paragraph is a single line again, and the document shrinks to 100 lines.
        text_view.resize(400, 30)

        self.assertEqual(controller.layout_count, layout_count + 1)
        self.assertEqual(text_view.content_size, (400, 1000))
        self.assertEqual(text_view.visible_rect, Rect(0, 970, 400, 30))
        self.assertEqual(controller.viewport_bounds, Rect(0, 970, 400, 30))
        self.assertEqual([s.paragraph_index for s in text_view.rendering_surfaces], [97, 98, 99])


class EmptyDocumentTestCase(unittest.TestCase):

    def setUp(self):
        self.text_view = text_view_for("", 100, 30, FixedMetrics(10, 10))

    def test_end_location_is_start_location(self):
        document_range = self.text_view.text_layout_manager.document_range
        self.assertEqual(document_range.location, document_range.end_location)

    def test_aborts_silently(self):
        self.assertIsNone(self.text_view.move_to_end_of_document(FULL_LAYOUT))
        self.assertIsNone(self.text_view.move_to_end_of_document(VIEWPORT_ONLY))
        self.assertEqual(self.text_view.visible_rect.min_y, 0)


class BeginningOfDocumentTestCase(unittest.TestCase):

    def test_back_to_the_top(self):
        text_view = text_view_for(LONG_PARAGRAPH * 40, 100, 30, FixedMetrics(10, 10))
        text_view.move_to_end_of_document(FULL_LAYOUT)
        self.assertNotEqual(text_view.visible_rect.min_y, 0)

        self.assertEqual(text_view.move_to_beginning_of_document(), Rect(0, 0, 100, 30))
        self.assertEqual(
            [s.paragraph_index for s in text_view.rendering_surfaces], [0])


if __name__ == '__main__':
    unittest.main()
