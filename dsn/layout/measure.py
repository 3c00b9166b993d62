"""
Text measurement and line breaking.

A measurer is any object with a `line_height` attribute and a `width_of(text)` method. FixedMetrics gives every
character the same advance, which makes layout results computable by hand:

>>> metrics = FixedMetrics(advance=10, line_height=20)
>>> wrap_lines("the quick brown fox", 100, metrics)
[(0, 10), (10, 19)]

Trailing whitespace (including the paragraph's newline) hangs off the end of the line and is not measured:

>>> wrap_lines("the quick brown\\n", 150, metrics)
[(0, 16)]

Words that are too long for a line are broken at the character level:

>>> wrap_lines("abcdefghijkl mn", 50, metrics)
[(0, 5), (5, 10), (10, 15)]
"""
import re

# A run of non-whitespace with its trailing whitespace, or leading whitespace on its own.
TOKEN = re.compile(r'\S+\s*|\s+')


class FixedMetrics(object):

    def __init__(self, advance, line_height):
        self.advance = advance
        self.line_height = line_height

    def width_of(self, text):
        return self.advance * len(text)


def _break_characters(text, line_start, word_end, width, measurer, lines):
    """Emits lines for as long as text[line_start:word_end] does not fit; returns where the remainder starts."""
    while measurer.width_of(text[line_start:word_end]) > width:
        cut = line_start + 1
        while cut < word_end and measurer.width_of(text[line_start:cut + 1]) <= width:
            cut += 1

        lines.append((line_start, cut))
        line_start = cut

    return line_start


def wrap_lines(text, width, measurer):
    """Greedy line breaking. Returns (start, end) character offsets into `text`; together the lines cover all of
    `text`. There is always at least one line. A width of 0 or less means: don't wrap at all."""
    if width <= 0 or not text:
        return [(0, len(text))]

    lines = []
    line_start = 0

    for match in TOKEN.finditer(text):
        token_start = match.start()
        word_end = token_start + len(match.group().rstrip())

        if measurer.width_of(text[line_start:word_end]) <= width:
            continue

        if line_start < token_start:
            lines.append((line_start, token_start))
            line_start = token_start

        line_start = _break_characters(text, line_start, word_end, width, measurer, lines)

    lines.append((line_start, len(text)))
    return lines


def line_width(text, measurer):
    return measurer.width_of(text.rstrip())
