"""
Moving to the end of a (large) document.

To scroll to the last line we need its frame, and a frame is only as good as the layout manager's knowledge of
everything above it. There are two ways to get it:

FULL_LAYOUT: lay out the whole document first. The result is correct, but the cost is linear in the size of the
document, and all of it is paid on the UI thread before anything moves.

VIEWPORT_ONLY: scroll to where the end of the document is estimated to be, and lay out only that window. This is cheap,
but everything above the window is still estimated, so the frame we get is off by however wrong the estimates were (or
there is no fragment at all, if the window didn't reach the last paragraph).

How to get the correct frame without paying for a full layout is an open question; neither of the above answers it.
"""
import logging
from time import perf_counter

from dsn.layout.structure import Rect

logger = logging.getLogger(__name__)

FULL_LAYOUT = 0
VIEWPORT_ONLY = 1


def line_fragment_frame_for_location(text_layout_manager, target_location):
    """The frame (document coordinates) of the line that `target_location` sits on, resolved with upstream affinity.
    Returns None if there's nothing laid out there."""
    before_target_location = text_layout_manager.location(target_location, -1)
    if before_target_location is None:
        return None

    text_layout_fragment = text_layout_manager.text_layout_fragment_for(before_target_location)
    if text_layout_fragment is None:
        return None

    text_line_fragment = text_layout_fragment.text_line_fragment_for(target_location, upstream_affinity=True)
    if text_line_fragment is None:
        return None

    frame = text_layout_fragment.layout_fragment_frame
    return text_line_fragment.typographic_bounds.offset_by(0, frame.min_y)


def line_fragment_frame_for_end_of_document(text_layout_manager):
    return line_fragment_frame_for_location(text_layout_manager, text_layout_manager.document_range.end_location)


def ensure_layout_of_document(text_layout_manager):
    measure_start = perf_counter()
    text_layout_manager.ensure_layout(text_layout_manager.document_range)
    logger.info("ensure_layout took %.6fs", perf_counter() - measure_start)


def move_to_end_of_document(text_view, strategy=FULL_LAYOUT):
    """Scrolls `text_view` such that the last line of its document is visible. Returns the frame of that line, or None
    if it could not be determined (in which case nothing is scrolled)."""
    text_layout_manager = text_view.text_layout_manager

    if strategy == FULL_LAYOUT:
        ensure_layout_of_document(text_layout_manager)
        text_view.layout_viewport()

    elif strategy == VIEWPORT_ONLY:
        usage_bounds = text_layout_manager.usage_bounds_for_text_container()
        text_view.scroll_to(usage_bounds.max_y - text_view.visible_rect.height)

    else:
        raise Exception("Unknown strategy (programming error): %s" % strategy)

    line_fragment_frame = line_fragment_frame_for_end_of_document(text_layout_manager)
    if line_fragment_frame is None:
        logger.debug("No line fragment for the end of the document; not scrolling")
        return None

    text_view.scroll_rect_to_visible(line_fragment_frame)
    logger.info("Last line fragment of the document is at %s", line_fragment_frame)
    return line_fragment_frame


def move_to_beginning_of_document(text_view):
    """The beginning of the document is always at 0; no layout is required to know that."""
    text_view.scroll_rect_to_visible(Rect(0, 0, text_view.visible_rect.width, 0))
    return text_view.visible_rect
