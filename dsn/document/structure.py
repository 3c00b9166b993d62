"""
Documents are immutable sequences of paragraphs. Positions in a document are expressed as Locations; a pair of
Locations is a DocumentRange.

A paragraph contains its own terminating newline (if any), i.e. the concatenation of all paragraphs is the full text.

>>> document = Document.from_text("one\\ntwo\\nthree")
>>> [p.text for p in document.paragraphs]
['one\\n', 'two\\n', 'three']
>>> document.document_range
DocumentRange(0, 13)

The end location is "one past the last character"; it is the only location that is not inside any paragraph:

>>> document.paragraph_index_for_location(Location(12))
2
>>> document.paragraph_index_for_location(document.document_range.end_location) is None
True

An empty document has an end location equal to its start location:

>>> empty = Document.from_text("")
>>> empty.document_range.location == empty.document_range.end_location
True
>>> empty.paragraphs
()
"""
from bisect import bisect_right
from functools import total_ordering

from utils import pmts


@total_ordering
class Location(object):
    """An opaque, totally ordered position in a Document. Internally: a character offset."""

    __slots__ = ('offset',)

    def __init__(self, offset):
        pmts(offset, int)
        self.offset = offset

    def __eq__(self, other):
        return isinstance(other, Location) and self.offset == other.offset

    def __lt__(self, other):
        pmts(other, Location)
        return self.offset < other.offset

    def __hash__(self):
        return hash(self.offset)

    def __repr__(self):
        return "Location(%s)" % self.offset


class DocumentRange(object):
    """Half-open range [location, end_location)"""

    def __init__(self, location, end_location):
        pmts(location, Location)
        pmts(end_location, Location)
        if end_location < location:
            raise Exception("Range ends before it starts (programming error): %s, %s" % (location, end_location))

        self.location = location
        self.end_location = end_location

    @property
    def length(self):
        return self.end_location.offset - self.location.offset

    @property
    def is_empty(self):
        return self.location == self.end_location

    def contains(self, location):
        """
        >>> r = DocumentRange(Location(2), Location(5))
        >>> r.contains(Location(2)), r.contains(Location(4)), r.contains(Location(5))
        (True, True, False)
        """
        return self.location <= location < self.end_location

    def intersects(self, other):
        """
        >>> DocumentRange(Location(0), Location(3)).intersects(DocumentRange(Location(3), Location(4)))
        False
        >>> DocumentRange(Location(0), Location(3)).intersects(DocumentRange(Location(2), Location(4)))
        True
        """
        return self.location < other.end_location and other.location < self.end_location

    def __eq__(self, other):
        return (isinstance(other, DocumentRange) and
                self.location == other.location and self.end_location == other.end_location)

    def __hash__(self):
        return hash((self.location, self.end_location))

    def __repr__(self):
        return "DocumentRange(%s, %s)" % (self.location.offset, self.end_location.offset)


class Paragraph(object):

    def __init__(self, text, element_range):
        pmts(text, str)
        pmts(element_range, DocumentRange)
        assert len(text) == element_range.length, "Paragraph text does not match its range"

        self.text = text
        self.element_range = element_range

    def __repr__(self):
        return "Paragraph(%r, %s)" % (self.text, self.element_range)


def split_paragraphs(text):
    """
    >>> split_paragraphs("a\\nb\\n")
    ['a\\n', 'b\\n']
    >>> split_paragraphs("a\\n\\nb")
    ['a\\n', '\\n', 'b']
    >>> split_paragraphs("")
    []
    """
    return text.splitlines(keepends=True)


class Document(object):

    def __init__(self, paragraph_texts):
        paragraphs = []
        offset = 0
        for text in paragraph_texts:
            paragraphs.append(Paragraph(text, DocumentRange(Location(offset), Location(offset + len(text)))))
            offset += len(text)

        self.paragraphs = tuple(paragraphs)
        self.document_range = DocumentRange(Location(0), Location(offset))

        # start offsets, for bisecting
        self._starts = [p.element_range.location.offset for p in self.paragraphs]

    @classmethod
    def from_text(cls, text):
        pmts(text, str)
        return cls(split_paragraphs(text))

    @property
    def text(self):
        return "".join(p.text for p in self.paragraphs)

    def __len__(self):
        return len(self.paragraphs)

    def location(self, location, offset_by):
        """Returns the location `offset_by` characters away from `location`, or None if that's outside the document.

        >>> d = Document.from_text("abc")
        >>> d.location(d.document_range.end_location, -1)
        Location(2)
        >>> d.location(Location(0), -1) is None
        True
        """
        offset = location.offset + offset_by
        if offset < self.document_range.location.offset or offset > self.document_range.end_location.offset:
            return None
        return Location(offset)

    def offset(self, from_location, to_location):
        return to_location.offset - from_location.offset

    def paragraph_index_for_location(self, location):
        if not self.document_range.contains(location):
            return None

        return bisect_right(self._starts, location.offset) - 1

    def paragraph_indexes_for_range(self, document_range):
        """The indexes of all paragraphs that intersect with the given range; empty ranges select nothing.

        >>> d = Document.from_text("a\\nb\\nc\\n")
        >>> list(d.paragraph_indexes_for_range(d.document_range))
        [0, 1, 2]
        >>> list(d.paragraph_indexes_for_range(DocumentRange(Location(2), Location(3))))
        [1]
        """
        if document_range.is_empty or not self.paragraphs:
            return range(0)

        first = max(0, bisect_right(self._starts, document_range.location.offset) - 1)
        last = bisect_right(self._starts, document_range.end_location.offset - 1) - 1
        return range(first, last + 1)

    def __repr__(self):
        return "Document(%s paragraphs, %s)" % (len(self.paragraphs), self.document_range)
