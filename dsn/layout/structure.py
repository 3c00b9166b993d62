"""
Layout geometry lives in a flipped coordinate system: the origin is the top-left of the document and y grows downwards.
Widgets that draw in a y-up system (Kivy) do the mirroring themselves.
"""
from utils import pmts

from dsn.document.structure import DocumentRange, Location, Paragraph


class Rect(object):
    """
    >>> r = Rect(0, 10, 100, 20)
    >>> r.min_y, r.max_y
    (10, 30)
    >>> r.offset_by(0, 5)
    Rect(0, 15, 100, 20)
    >>> r.intersects(Rect(0, 30, 100, 10))
    False
    >>> r.intersects(Rect(0, 29, 100, 10))
    True
    """

    __slots__ = ('x', 'y', 'width', 'height')

    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @classmethod
    def zero(cls):
        return cls(0, 0, 0, 0)

    @property
    def min_x(self):
        return self.x

    @property
    def max_x(self):
        return self.x + self.width

    @property
    def min_y(self):
        return self.y

    @property
    def max_y(self):
        return self.y + self.height

    @property
    def is_empty(self):
        return self.width <= 0 or self.height <= 0

    def offset_by(self, dx, dy):
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def intersects(self, other):
        # Vertical only: the text container spans the full width of the view.
        return self.min_y < other.max_y and other.min_y < self.max_y

    def __eq__(self, other):
        return isinstance(other, Rect) and (self.x, self.y, self.width, self.height) == (
            other.x, other.y, other.width, other.height)

    def __hash__(self):
        return hash((self.x, self.y, self.width, self.height))

    def __repr__(self):
        return "Rect(%s, %s, %s, %s)" % (self.x, self.y, self.width, self.height)


class TextContainer(object):
    """Width tracks the view; height is unbounded."""

    def __init__(self, width=0, line_fragment_padding=0):
        self.width = width
        self.line_fragment_padding = line_fragment_padding

    @property
    def usable_width(self):
        return max(0, self.width - 2 * self.line_fragment_padding)


class TextLineFragment(object):
    """A single laid out line. `typographic_bounds` is relative to the enclosing TextLayoutFragment."""

    def __init__(self, text, character_range, typographic_bounds):
        pmts(character_range, DocumentRange)
        pmts(typographic_bounds, Rect)

        self.text = text
        self.character_range = character_range
        self.typographic_bounds = typographic_bounds

    def __repr__(self):
        return "TextLineFragment(%r, %s, %s)" % (self.text, self.character_range, self.typographic_bounds)


class TextLayoutFragment(object):
    """The laid out geometry of a single paragraph.

    `layout_fragment_frame` is in document coordinates; it is only as accurate as the layout manager's knowledge of
    everything above it at the moment the fragment was positioned.
    """

    def __init__(self, paragraph, paragraph_index, text_line_fragments, layout_fragment_frame):
        pmts(paragraph, Paragraph)
        pmts(layout_fragment_frame, Rect)

        self.paragraph = paragraph
        self.paragraph_index = paragraph_index
        self.text_line_fragments = text_line_fragments
        self.layout_fragment_frame = layout_fragment_frame

    @property
    def range_in_element(self):
        return self.paragraph.element_range

    def text_line_fragment_for(self, location, upstream_affinity):
        """Returns the line that contains `location`, or None if the location is not in this fragment.

        A location that sits exactly on the boundary between two lines belongs to the following line, unless
        `upstream_affinity` is set, in which case it's resolved to the preceding line. The end of the paragraph is
        only reachable with upstream affinity.
        """
        pmts(location, Location)

        for line in self.text_line_fragments:
            line_range = line.character_range
            if upstream_affinity and location == line_range.end_location and location > line_range.location:
                return line

            if line_range.contains(location):
                return line

        return None

    def __repr__(self):
        return "TextLayoutFragment(%s, %s, %s lines)" % (
            self.paragraph_index, self.layout_fragment_frame, len(self.text_line_fragments))
