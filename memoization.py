"""
Caches for the Kivy side of things.

Rendering a line of text means creating a texture for it, which is expensive compared to everything else we do per
line. Lines are re-rendered every time the viewport is laid out (the rendering surfaces are torn down and rebuilt), so
we keep the textures around.

There is no cache replacement policy: we use up as much space as we need, bounded by the number of distinct lines in
the document.
"""


class Memoization(object):
    """Single point of access for all memoized results"""

    def __init__(self):
        self.texture_for_text = {}
