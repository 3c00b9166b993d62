"""
Vertical offsets of paragraphs are prefix sums over their heights. Heights change one paragraph at a time (whenever a
paragraph is measured for the first time, its estimated height is replaced by the real one), and we need to go from a
y-position to a paragraph quickly for any rectangle that we're asked to lay out. Both are O(log n) with a Fenwick tree.

>>> index = HeightIndex([10, 10, 10, 10])
>>> index.offset(2), index.total()
(20, 40)
>>> index.set_height(1, 30)
>>> index.offset(2), index.total()
(40, 60)
>>> index.index_for_offset(0), index.index_for_offset(39), index.index_for_offset(40), index.index_for_offset(1000)
(0, 1, 2, 3)
"""


class HeightIndex(object):

    def __init__(self, heights):
        self._heights = list(heights)
        n = len(self._heights)
        self._tree = [0] * (n + 1)

        for i, height in enumerate(self._heights, 1):
            self._tree[i] += height
            parent = i + (i & -i)
            if parent <= n:
                self._tree[parent] += self._tree[i]

    def __len__(self):
        return len(self._heights)

    def height(self, index):
        return self._heights[index]

    def set_height(self, index, height):
        delta = height - self._heights[index]
        if delta == 0:
            return

        self._heights[index] = height
        i = index + 1
        while i < len(self._tree):
            self._tree[i] += delta
            i += i & -i

    def offset(self, index):
        """The sum of the heights of all items before `index`"""
        result = 0
        i = index
        while i > 0:
            result += self._tree[i]
            i -= i & -i
        return result

    def total(self):
        return self.offset(len(self._heights))

    def index_for_offset(self, y):
        """The index of the item that contains `y`; positions outside the total extent are clamped to the first or
        last item. Must not be called on an empty index."""
        n = len(self._heights)
        assert n > 0, "index_for_offset on an empty HeightIndex"

        position = 0
        remaining = y
        step = 1 << (n.bit_length() - 1)
        while step:
            candidate = position + step
            if candidate <= n and self._tree[candidate] <= remaining:
                position = candidate
                remaining -= self._tree[candidate]
            step >>= 1

        return min(position, n - 1)
