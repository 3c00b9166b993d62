from contextlib import contextmanager

from kivy.graphics.context_instructions import PushMatrix, PopMatrix, Translate


X = 0
Y = 1


@contextmanager
def apply_offset(canvas, offset):
    canvas.add(PushMatrix())
    canvas.add(Translate(int(offset[X]), int(offset[Y])))
    yield
    canvas.add(PopMatrix())
