from dsn.layout.structure import Rect
from dsn.viewports.utils import union_rect


class ViewportContext(object):
    def __init__(self, document_size, viewport_size):
        """Both sizes are (width, height) tuples. `document_size` is the size of the document as far as it's known to
        the layout manager, i.e. it may include estimates."""
        self.document_size = document_size
        self.viewport_size = viewport_size

    def __repr__(self):
        return "Context(%s, %s)" % (self.document_size, self.viewport_size)


class ViewportStructure(object):
    def __init__(self, context, scroll_position, prepared_rect):
        """In the ViewportStructure we distinguish between the external context on the one hand, and the state which is
        built up through scrolling on the other.

        The context is what's announced to the viewport (the surface's size, the document's size); the scroll position
        and the prepared rectangle are the result of interaction.
        """
        self.context = context
        self.scroll_position = scroll_position
        self.prepared_rect = prepared_rect

    def __repr__(self):
        return "Viewport(%s, %s, %s)" % (self.context, self.scroll_position, self.prepared_rect)

    @classmethod
    def empty(cls):
        return cls(ViewportContext((0, 0), (0, 0)), 0, None)

    def get_visible_rect(self):
        width, height = self.context.viewport_size
        return Rect(0, self.scroll_position, width, height)

    def get_viewport_bounds(self):
        return union_rect(self.get_visible_rect(), self.prepared_rect)
