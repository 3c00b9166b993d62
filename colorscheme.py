from kivy.utils import get_color_from_hex


def rgba(s, *args):
    '''Return a Kivy color (4 value from 0-1 range) from either a hex string or
    a list of 0-255 values.
    '''
    if isinstance(s, str):
        return get_color_from_hex(s)
    elif isinstance(s, (list, tuple)):
        return [x / 255. for x in s]
    elif isinstance(s, (int, float)):
        return [x / 255. for x in [s] + list(args)]
    raise Exception('Invalid value (not a string / list / tuple)')


BLACK = rgba(0, 0, 0, 255)
OLD_LACE = rgba(253, 246, 229, 255)
SCROLLBAR_GREY = rgba(0, 0, 0, 90)
