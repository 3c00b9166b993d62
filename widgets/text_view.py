from kivy.clock import Clock
from kivy.core.text import Label
from kivy.graphics import Color, InstructionGroup, Rectangle
from kivy.metrics import pt
from kivy.uix.behaviors.focus import FocusBehavior
from kivy.uix.stencilview import StencilView

from colorscheme import BLACK, OLD_LACE, SCROLLBAR_GREY
from textview import TextView

from dsn.navigation.construct import FULL_LAYOUT, VIEWPORT_ONLY
from dsn.viewports.utils import (
    document_fraction_for_viewport_position,
    viewport_position_for_document_fraction,
)

from widgets.layout_constants import (
    get_font_size,
    PADDING,
    SCROLLBAR_WIDTH,
    WHEEL_LINES,
)
from widgets.utils import apply_offset, X, Y


def _label_kwargs():
    return {
        'font_size': pt(get_font_size()),
        'bold': False,
        'anchor_x': 'left',
        'anchor_y': 'top',
        'padding_x': 0,
        'padding_y': 0,
        'padding': (0, 0)}


class KivyTextMeasurer(object):
    """Measures text with Kivy's core text provider. Kivy measures in pixels; layout happens in points."""

    def __init__(self, scale):
        self.scale = scale
        self._label = Label(**_label_kwargs())
        self.line_height = self._label.get_extents("Ag")[Y] / scale

    def width_of(self, text):
        if not text:
            return 0
        return self._label.get_extents(text)[X] / self.scale


class TextLayoutFragmentLayer(InstructionGroup):
    """The rendering surface for a single TextLayoutFragment: one textured rectangle per line.

    Coordinates are in pixels, relative to the top-left of the fragment, with y going up (i.e. lines are drawn at
    negative y)."""

    def __init__(self, text_layout_fragment, texture_for_text, scale):
        super(TextLayoutFragmentLayer, self).__init__()
        self.text_layout_fragment = text_layout_fragment

        self.add(Color(*BLACK))
        for line in text_layout_fragment.text_line_fragments:
            text = line.text.rstrip()
            if not text:
                continue

            texture = texture_for_text(text)
            bounds = line.typographic_bounds
            self.add(Rectangle(
                texture=texture,
                pos=(int(bounds.x * scale), int(-(bounds.y + bounds.height) * scale)),
                size=texture.size))


class TextViewWidget(FocusBehavior, StencilView):

    def __init__(self, **kwargs):
        self._invalidated = False

        self.m = kwargs.pop('m')
        self.scale = kwargs.pop('scale', 1)

        super(TextViewWidget, self).__init__(**kwargs)

        self.text_view = TextView(
            KivyTextMeasurer(self.scale),
            scale=self.scale,
            renderer=self,
            line_fragment_padding=PADDING)

        self.bind(pos=self.invalidate)
        self.bind(size=self.size_change)

    # ## Section for the renderer interface of TextView
    def add_rendering_surface(self, text_layout_fragment):
        self.invalidate()
        return TextLayoutFragmentLayer(text_layout_fragment, self._texture_for_text, self.scale)

    def remove_rendering_surface(self, surface):
        # Teardown happens in refresh: canvas.clear() drops every layer, and only the text view's current surfaces
        # are added back.
        self.invalidate()

    # ## Section for drawing
    def invalidate(self, *args):
        if not self._invalidated:
            Clock.schedule_once(self.refresh, -1)
            self._invalidated = True

    def size_change(self, *args):
        self.text_view.resize(self.width / self.scale, self.height / self.scale)
        self.invalidate()

    def load_text(self, text):
        self.text_view.load_text(text)
        self.invalidate()

    def refresh(self, *args):
        """refresh means: redraw"""
        self.canvas.clear()

        with self.canvas:
            Color(*OLD_LACE)
            Rectangle(pos=self.pos, size=self.size)

        visible_rect = self.text_view.visible_rect
        for layer in self.text_view.rendering_surfaces:
            frame = layer.text_layout_fragment.layout_fragment_frame
            offset = (self.x, self.top - (frame.min_y - visible_rect.min_y) * self.scale)
            with apply_offset(self.canvas, offset):
                self.canvas.add(layer)

        self._draw_scrollbar()
        self._invalidated = False

    def _draw_scrollbar(self):
        document_height = self.text_view.content_size[Y]
        visible_rect = self.text_view.visible_rect

        fraction = document_fraction_for_viewport_position(document_height, visible_rect.height, visible_rect.min_y)
        if fraction is None:
            return

        thumb_height = max(20, self.height * visible_rect.height / document_height)
        thumb_y = self.top - thumb_height - fraction * (self.height - thumb_height)

        with self.canvas:
            Color(*SCROLLBAR_GREY)
            Rectangle(pos=(self.right - SCROLLBAR_WIDTH - 2, thumb_y), size=(SCROLLBAR_WIDTH, thumb_height))

    def _texture_for_text(self, text):
        if text in self.m.texture_for_text:
            return self.m.texture_for_text[text]

        label = Label(text=text, **_label_kwargs())
        label.refresh()

        self.m.texture_for_text[text] = label.texture
        return label.texture

    # ## Section for input
    def keyboard_on_key_down(self, window, keycode, text, modifiers):
        FocusBehavior.keyboard_on_key_down(self, window, keycode, text, modifiers)

        code, textual_code = keycode
        visible_height = self.text_view.visible_rect.height
        line_height = self.text_view.text_layout_manager.line_height
        to_document_edge = 'ctrl' in modifiers or 'meta' in modifiers

        if (to_document_edge and textual_code == 'end') or ('meta' in modifiers and textual_code == 'down'):
            # alt picks the cheap (but unreliable) variant, for comparison
            self.text_view.move_to_end_of_document(VIEWPORT_ONLY if 'alt' in modifiers else FULL_LAYOUT)

        elif (to_document_edge and textual_code == 'home') or ('meta' in modifiers and textual_code == 'up'):
            self.text_view.move_to_beginning_of_document()

        elif textual_code == 'pagedown':
            self.text_view.scroll_by(visible_height)

        elif textual_code == 'pageup':
            self.text_view.scroll_by(-visible_height)

        elif textual_code == 'down':
            self.text_view.scroll_by(line_height)

        elif textual_code == 'up':
            self.text_view.scroll_by(-line_height)

        else:
            return True

        self.invalidate()
        return True

    def keyboard_on_key_up(self, window, keycode):
        """FocusBehavior automatically defocusses on 'escape'. This is undesirable, so we override without providing any
        behavior ourselves."""
        return True

    def on_touch_down(self, touch):
        ret = super(TextViewWidget, self).on_touch_down(touch)

        if not self.collide_point(*touch.pos):
            return ret

        if touch.is_mouse_scrolling:
            step = WHEEL_LINES * self.text_view.text_layout_manager.line_height
            if touch.button == 'scrolldown':
                self.text_view.scroll_by(-step)
            elif touch.button == 'scrollup':
                self.text_view.scroll_by(step)
            self.invalidate()
            return True

        if touch.x >= self.right - 3 * SCROLLBAR_WIDTH:
            touch.grab(self)
            self._scroll_to_touch(touch)
            return True

        return ret

    def on_touch_move(self, touch):
        if touch.grab_current is self:
            self._scroll_to_touch(touch)
            return True
        return super(TextViewWidget, self).on_touch_move(touch)

    def on_touch_up(self, touch):
        if touch.grab_current is self:
            touch.ungrab(self)
            return True
        return super(TextViewWidget, self).on_touch_up(touch)

    def _scroll_to_touch(self, touch):
        fraction = min(1, max(0, (self.top - touch.y) / self.height))
        self.text_view.scroll_to(viewport_position_for_document_fraction(
            self.text_view.content_size[Y], self.text_view.visible_rect.height, fraction))
        self.invalidate()
