PADDING = 5
SCROLLBAR_WIDTH = 6

# Lines scrolled per mouse wheel step
WHEEL_LINES = 3

font_size = 12


def get_font_size():
    return font_size
