"""
A deliberately small incremental layout manager.

Layout happens per paragraph, and lazily: a paragraph is only measured (broken into lines) when it's part of a
range or rectangle that we're asked to lay out. Paragraphs that have never been measured are assumed to be a single
line tall. This estimate is what makes it possible to answer questions about the size of the document without
measuring all of it, but it's also what makes positions below unmeasured content unreliable.

A fragment's frame is fixed at the moment it's positioned, i.e. it's only as good as the estimates for everything above
it at that moment. `ensure_layout` for the full document first measures everything, and then positions everything; its
frames are therefore exact. `layout_rect` does not have that luxury.
"""
from utils import pmts, pixel_aligned

from dsn.document.structure import Document, DocumentRange, Location
from dsn.layout.measure import line_width, wrap_lines
from dsn.layout.structure import Rect, TextContainer, TextLayoutFragment, TextLineFragment
from dsn.layout.utils import HeightIndex


class TextLayoutManager(object):

    def __init__(self, text_container, measurer, scale=1):
        """`scale` is the display's backing scale factor (device pixels per point); all geometry is aligned to it."""
        pmts(text_container, TextContainer)

        self.text_container = text_container
        self.measurer = measurer
        self.scale = scale
        self.text_content_storage = None

        self._container_width = text_container.width
        self.replace_document(Document([]))

    # ## Section for invalidation
    def replace_document(self, document):
        pmts(document, Document)
        self.document = document
        self.invalidate_layout()

    def invalidate_layout(self):
        n = len(self.document)
        self._line_offsets = [None] * n  # None: not measured yet
        self._heights = HeightIndex([self.estimated_paragraph_height] * n)
        self._fragments = {}

    def _sync_container_width(self):
        if self.text_container.width != self._container_width:
            self._container_width = self.text_container.width
            self.invalidate_layout()

    # ## Section for geometry
    @property
    def line_height(self):
        return pixel_aligned(self.measurer.line_height, self.scale)

    @property
    def estimated_paragraph_height(self):
        return self.line_height

    @property
    def document_range(self):
        return self.document.document_range

    def location(self, location, offset_by):
        return self.document.location(location, offset_by)

    def is_measured(self, paragraph_index):
        return self._line_offsets[paragraph_index] is not None

    def usage_bounds_for_text_container(self):
        """The size of the document as far as we know it: real heights for measured paragraphs, estimates elsewhere."""
        self._sync_container_width()
        return Rect(0, 0, self.text_container.width, self._heights.total())

    def _measure(self, paragraph_index):
        if self._line_offsets[paragraph_index] is not None:
            return

        text = self.document.paragraphs[paragraph_index].text
        lines = wrap_lines(text, self.text_container.usable_width, self.measurer)

        self._line_offsets[paragraph_index] = lines
        self._heights.set_height(paragraph_index, self.line_height * len(lines))

    def _position(self, paragraph_index):
        paragraph = self.document.paragraphs[paragraph_index]
        start = paragraph.element_range.location.offset
        padding = self.text_container.line_fragment_padding
        line_height = self.line_height

        line_fragments = []
        for i, (line_start, line_end) in enumerate(self._line_offsets[paragraph_index]):
            text = paragraph.text[line_start:line_end]
            line_fragments.append(TextLineFragment(
                text,
                DocumentRange(Location(start + line_start), Location(start + line_end)),
                Rect(padding, i * line_height, pixel_aligned(line_width(text, self.measurer), self.scale), line_height),
            ))

        frame = Rect(
            0,
            self._heights.offset(paragraph_index),
            self.text_container.width,
            self._heights.height(paragraph_index))

        fragment = TextLayoutFragment(paragraph, paragraph_index, line_fragments, frame)
        self._fragments[paragraph_index] = fragment
        return fragment

    # ## Section for layout
    def ensure_layout(self, document_range):
        """Lays out all paragraphs in `document_range`; returns their fragments in document order."""
        pmts(document_range, DocumentRange)
        self._sync_container_width()

        indexes = self.document.paragraph_indexes_for_range(document_range)
        for i in indexes:
            self._measure(i)

        return [self._position(i) for i in indexes]

    def layout_rect(self, rect):
        """Lays out the paragraphs that (as far as we know) intersect `rect`; returns those that do after layout."""
        pmts(rect, Rect)
        self._sync_container_width()

        if not self.document.paragraphs or rect.is_empty:
            return []

        result = []
        i = self._heights.index_for_offset(max(0, rect.min_y))
        while i < len(self.document.paragraphs):
            if self._heights.offset(i) >= rect.max_y:
                break

            self._measure(i)
            fragment = self._position(i)
            if fragment.layout_fragment_frame.intersects(rect):
                result.append(fragment)
            i += 1

        return result

    def text_layout_fragment_for(self, location):
        """The fragment for the paragraph containing `location`, if that paragraph has been laid out; None otherwise."""
        self._sync_container_width()

        paragraph_index = self.document.paragraph_index_for_location(location)
        if paragraph_index is None:
            return None
        return self._fragments.get(paragraph_index)

    def laid_out_fragments(self):
        return [self._fragments[i] for i in sorted(self._fragments)]
