"""
Positions and sizes along the scrolling axis are scalars; positions grow downwards from the top of the document.

Viewport positions are always aligned to device pixels by the caller; the functions below do not round.

## Fractions

Viewport positions may be expressed fractionally in the document (this is what a scrollbar shows). Fractions are
floats in the domain [0, 1], or None (meaning: scrolling is impossible, because the viewport is larger than the
document).
"""
from dsn.layout.structure import Rect


def bounded_viewport(document_size, viewport_size, viewport_pos):
    """
    Returns a viewport pos inside the document, given a viewport that's potentially outside it.

    In-bounds, no effect is achieved by bounding:
    >>> bounded_viewport(500, 200, 250)
    250

    Any kind of scrolling is impossible if the viewport is larger than the document; we just show it at the top:
    >>> bounded_viewport(15, 1000, 45)
    0

    Above the top of the document there is nothing to be seen:
    >>> bounded_viewport(500, 200, -100)
    0

    Below the bottom of the document there is nothing to be seen either:
    >>> bounded_viewport(500, 200, 400)
    300
    """

    if document_size < viewport_size:
        return 0

    if viewport_pos < 0:
        return 0

    return min(document_size - viewport_size, viewport_pos)


def document_fraction_for_viewport_position(document_size, viewport_size, viewport_position):
    """
    We take the top of the viewport, and calculate its relative position with respect to the posible positions it can
    be in (it cannot be lower than a viewport_size from the bottom).

    >>> document_fraction_for_viewport_position(1000, 200, 400)
    0.5
    >>> document_fraction_for_viewport_position(100, 200, 0) is None
    True
    """

    if document_size <= viewport_size:
        return None

    return viewport_position / (document_size - viewport_size)


def viewport_position_for_document_fraction(document_size, viewport_size, document_fraction):
    """
    >>> viewport_position_for_document_fraction(1000, 200, 0.5)
    400.0
    """
    if document_fraction is None:
        # If scrolling is impossible, we put the viewport at the top.
        return 0

    return (document_size - viewport_size) * document_fraction


def scroll_position_to_reveal(viewport_pos, viewport_size, target_min, target_max):
    """The viewport position closest to `viewport_pos` at which [target_min, target_max] is visible. Targets larger
    than the viewport are aligned with their top.

    >>> scroll_position_to_reveal(0, 100, 20, 40)
    0
    >>> scroll_position_to_reveal(0, 100, 480, 500)
    400
    >>> scroll_position_to_reveal(300, 100, 20, 40)
    20
    >>> scroll_position_to_reveal(0, 100, 500, 700)
    500
    """
    if target_min < viewport_pos:
        return target_min

    if target_max > viewport_pos + viewport_size:
        return min(target_min, target_max - viewport_size)

    return viewport_pos


def expanded_rect(rect):
    """Grows a rectangle by half its own height, both above and below it.

    >>> expanded_rect(Rect(0, 100, 50, 40))
    Rect(0, 80.0, 50, 80)
    """
    expansion = rect.height
    return Rect(rect.x, rect.y - expansion / 2, rect.width, rect.height + expansion)


def union_rect(rect, other):
    """
    >>> union_rect(Rect(0, 10, 50, 10), Rect(5, 0, 50, 5))
    Rect(0, 0, 55, 20)
    """
    if other is None:
        return rect

    min_x = min(rect.min_x, other.min_x)
    min_y = min(rect.min_y, other.min_y)
    max_x = max(rect.max_x, other.max_x)
    max_y = max(rect.max_y, other.max_y)
    return Rect(min_x, min_y, max_x - min_x, max_y - min_y)
