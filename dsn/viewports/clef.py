from utils import pmts

from dsn.layout.structure import Rect


class ViewportNote(object):
    pass


class ResizeSurface(ViewportNote):
    def __init__(self, width, height):
        """The surface (and hence the visible rectangle) has a new size. Prepared content is discarded: it was prepared
        for a rectangle of the old size."""
        self.width = width
        self.height = height


class ScrollSurface(ViewportNote):
    def __init__(self, y):
        """Interactive scrolling to `y` (the top of the visible rectangle, in document coordinates). Content is
        prepared beyond the visible rectangle in anticipation of further scrolling."""
        self.y = y


class ScrollRectToVisible(ViewportNote):
    def __init__(self, rect):
        """Scroll (as little as possible) such that `rect` is visible."""
        pmts(rect, Rect)
        self.rect = rect


class ContentSizeChange(ViewportNote):
    def __init__(self, width, height):
        self.width = width
        self.height = height
