import logging

from dsn.document.construct import TextContentStorage
from dsn.document.structure import split_paragraphs
from dsn.layout.construct import TextLayoutManager
from dsn.layout.structure import TextContainer
from dsn.navigation.construct import (
    FULL_LAYOUT,
    move_to_beginning_of_document,
    move_to_end_of_document,
)
from dsn.viewports.clef import (
    ContentSizeChange,
    ResizeSurface,
    ScrollRectToVisible,
    ScrollSurface,
)
from dsn.viewports.construct import play_viewport_note
from dsn.viewports.controller import TextViewportLayoutController, TextViewportLayoutControllerDelegate
from dsn.viewports.structure import ViewportStructure

logger = logging.getLogger(__name__)


class TextView(TextViewportLayoutControllerDelegate):
    """Displays a text, laying out only what's in (or near) view. Does not implement editing interactions.

    Drawing is left to a `renderer`, which is asked for one rendering surface per laid out fragment:
    `add_rendering_surface(fragment)` returns an opaque surface, `remove_rendering_surface(surface)` tears it down. If
    no renderer is given, the fragments themselves are kept as their surfaces.
    """

    def __init__(self, measurer, scale=1, renderer=None, line_fragment_padding=0):
        self.scale = scale
        self.renderer = renderer

        self.text_container = TextContainer(width=0, line_fragment_padding=line_fragment_padding)
        self.text_layout_manager = TextLayoutManager(self.text_container, measurer, scale)
        self.text_content_storage = TextContentStorage()
        self.text_content_storage.add_layout_manager(self.text_layout_manager)
        self.text_viewport_layout_controller = TextViewportLayoutController(self.text_layout_manager, self)

        self.viewport_ds = ViewportStructure.empty()
        self.rendering_surfaces = []

    @property
    def visible_rect(self):
        return self.viewport_ds.get_visible_rect()

    @property
    def content_size(self):
        return self.viewport_ds.context.document_size

    def _play(self, note):
        self.viewport_ds = play_viewport_note(note, self.viewport_ds, self.scale)

    def layout_viewport(self):
        return self.text_viewport_layout_controller.layout_viewport()

    # ## Section for content
    def load_text(self, text):
        with self.text_content_storage.perform_editing_transaction():
            self.text_content_storage.replace_contents(
                self.text_content_storage.document_range, split_paragraphs(text))

        logger.debug("Loaded %s paragraphs", len(self.text_layout_manager.document))
        self.layout_viewport()

    # ## Section for the scrolling surface
    def resize(self, width, height):
        # A new width invalidates all measurements; the surface must be bounded by the resulting (estimated) size
        # before we decide what to lay out.
        self.text_container.width = width
        usage_bounds = self.text_layout_manager.usage_bounds_for_text_container()
        self._play(ContentSizeChange(usage_bounds.width, usage_bounds.height))
        self._play(ResizeSurface(width, height))
        self.layout_viewport()

    def scroll_to(self, y):
        self._play(ScrollSurface(y))
        self.layout_viewport()

    def scroll_by(self, dy):
        self.scroll_to(self.viewport_ds.scroll_position + dy)

    def scroll_rect_to_visible(self, rect):
        previous_position = self.viewport_ds.scroll_position
        self._play(ScrollRectToVisible(rect))
        if self.viewport_ds.scroll_position != previous_position:
            self.layout_viewport()

    # ## Section for commands
    def move_to_end_of_document(self, strategy=FULL_LAYOUT):
        return move_to_end_of_document(self, strategy)

    def move_to_beginning_of_document(self):
        return move_to_beginning_of_document(self)

    # ## Section for TextViewportLayoutControllerDelegate
    def compute_viewport_bounds(self):
        return self.viewport_ds.get_viewport_bounds()

    def on_before_layout(self):
        if self.renderer is not None:
            for surface in self.rendering_surfaces:
                self.renderer.remove_rendering_surface(surface)
        self.rendering_surfaces = []

    def on_fragment_ready(self, text_layout_fragment):
        if self.renderer is not None:
            surface = self.renderer.add_rendering_surface(text_layout_fragment)
        else:
            surface = text_layout_fragment
        self.rendering_surfaces.append(surface)

    def on_after_layout(self):
        usage_bounds = self.text_layout_manager.usage_bounds_for_text_container()
        self._play(ContentSizeChange(usage_bounds.width, usage_bounds.height))
