import logging

from utils import pmts

from dsn.document.structure import DocumentRange
from dsn.layout.construct import TextLayoutManager
from dsn.layout.structure import Rect

logger = logging.getLogger(__name__)


class TextViewportLayoutControllerDelegate(object):
    """Implemented by whatever owns the scrolling surface."""

    def compute_viewport_bounds(self):
        """The rectangle (document coordinates) for which fragments should be materialized."""
        raise NotImplementedError()

    def on_before_layout(self):
        """Tear down the rendering surfaces of the previous layout pass."""
        raise NotImplementedError()

    def on_fragment_ready(self, text_layout_fragment):
        raise NotImplementedError()

    def on_after_layout(self):
        """Report the size of the document (as far as known) back to the surface."""
        raise NotImplementedError()


class TextViewportLayoutController(object):

    def __init__(self, text_layout_manager, delegate):
        pmts(text_layout_manager, TextLayoutManager)
        pmts(delegate, TextViewportLayoutControllerDelegate)

        self.text_layout_manager = text_layout_manager
        self.delegate = delegate

        self.viewport_bounds = Rect.zero()
        self.viewport_range = None
        self.layout_count = 0

    def layout_viewport(self):
        viewport_bounds = self.delegate.compute_viewport_bounds()

        self.delegate.on_before_layout()

        fragments = self.text_layout_manager.layout_rect(viewport_bounds)
        for fragment in fragments:
            self.delegate.on_fragment_ready(fragment)

        self.viewport_bounds = viewport_bounds
        if fragments:
            self.viewport_range = DocumentRange(
                fragments[0].range_in_element.location, fragments[-1].range_in_element.end_location)
        else:
            self.viewport_range = None
        self.layout_count += 1

        logger.debug("Laid out viewport %s: %s fragments", viewport_bounds, len(fragments))

        self.delegate.on_after_layout()
        return fragments
