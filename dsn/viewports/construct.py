from utils import pixel_aligned

from dsn.viewports.clef import (
    ContentSizeChange,
    ResizeSurface,
    ScrollRectToVisible,
    ScrollSurface,
)

from dsn.viewports.structure import ViewportContext, ViewportStructure
from dsn.viewports.utils import (
    bounded_viewport,
    expanded_rect,
    scroll_position_to_reveal,
)


def get_bounded_position(context, scroll_position, scale=1):
    return pixel_aligned(
        bounded_viewport(context.document_size[1], context.viewport_size[1], scroll_position),
        scale)


def play_viewport_note(note, structure, scale=1):
    if isinstance(note, ResizeSurface):
        context = ViewportContext(structure.context.document_size, (note.width, note.height))
        return ViewportStructure(
            context=context,
            scroll_position=get_bounded_position(context, structure.scroll_position, scale),
            prepared_rect=None)

    elif isinstance(note, ContentSizeChange):
        # The document changed size "elsewhere", e.g. because more of it got laid out; we keep the scroll position, but
        # respect the (new) bounds. Prepared content stays prepared.
        context = ViewportContext((note.width, note.height), structure.context.viewport_size)
        return ViewportStructure(
            context=context,
            scroll_position=get_bounded_position(context, structure.scroll_position, scale),
            prepared_rect=structure.prepared_rect)

    elif isinstance(note, ScrollSurface):
        scroll_position = get_bounded_position(structure.context, note.y, scale)
        scrolled = ViewportStructure(structure.context, scroll_position, None)

        return ViewportStructure(
            context=structure.context,
            scroll_position=scroll_position,
            prepared_rect=expanded_rect(scrolled.get_visible_rect()))

    elif isinstance(note, ScrollRectToVisible):
        unbounded = scroll_position_to_reveal(
            structure.scroll_position,
            structure.context.viewport_size[1],
            note.rect.min_y,
            note.rect.max_y)

        scroll_position = get_bounded_position(structure.context, unbounded, scale)

        # Content prepared around the old position is of no use at a new one.
        return ViewportStructure(
            context=structure.context,
            scroll_position=scroll_position,
            prepared_rect=structure.prepared_rect if scroll_position == structure.scroll_position else None)

    else:
        raise Exception("Illegal note (programming error): %s" % note)
