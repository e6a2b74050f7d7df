"""
bmfont.basetypes - base data types and converters

(c) 2019--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from collections import namedtuple


def to_int(int_str):
    """Convert decimal string to int; anything unparsable gives 0."""
    if isinstance(int_str, int):
        return int_str
    try:
        return int(int_str)
    except (TypeError, ValueError):
        return 0

def to_bool(int_str):
    """Any nonzero integer is true."""
    return to_int(int_str) != 0

def to_int_list(list_str, length):
    """Convert comma-separated integers to a list of given length, zero-padded."""
    values = [0] * length
    if not list_str:
        return values
    for index, item in enumerate(list_str.split(',')[:length]):
        values[index] = to_int(item.strip())
    return values


class _VectorMixin:
    """Vector operations on tuple."""

    def __add__(self, other):
        return type(self)(*(_l + _r for _l, _r in zip(self, other)))

    def __sub__(self, other):
        return type(self)(*(_l - _r for _l, _r in zip(self, other)))


class Coord(_VectorMixin, namedtuple('Coord', 'x y')):
    """Coordinate tuple."""

    def __str__(self):
        return ','.join(str(_x) for _x in self)

    @classmethod
    def create(cls, coord=0):
        """Create from int, tuple or string like `2,3` or `2x3`."""
        if isinstance(coord, str):
            values = coord.strip().replace('x', ',').split(',')
            coord = tuple(int(_v) for _v in values if _v.strip())
        if isinstance(coord, int):
            coord = (coord,)
        if not coord:
            coord = (0,)
        if len(coord) == 1:
            coord = coord * 2
        return cls(*coord)


class Rect(namedtuple('Rect', 'left top right bottom')):
    """
    Rectangle in image coordinates, y increasing downwards.
    Contains the points with left <= x < right and top <= y < bottom.
    """

    def __str__(self):
        return ' '.join(f'{_e}' for _e in self)

    @classmethod
    def from_size(cls, origin, size):
        """Create rectangle from top-left corner and size."""
        x, y = origin
        width, height = size
        return cls(x, y, x + width, y + height)

    @property
    def width(self):
        return self.right - self.left

    @property
    def height(self):
        return self.bottom - self.top

    @property
    def origin(self):
        return Coord(self.left, self.top)

    @property
    def size(self):
        return Coord(self.width, self.height)

    def is_empty(self):
        """Rectangle contains no points."""
        return self.left >= self.right or self.top >= self.bottom

    def union(self, other):
        """Smallest rectangle containing both; empty rectangles are ignored."""
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        return type(self)(
            min(self.left, other.left), min(self.top, other.top),
            max(self.right, other.right), max(self.bottom, other.bottom),
        )

    def intersect(self, other):
        """Largest rectangle contained in both; empty if they don't overlap."""
        rect = type(self)(
            max(self.left, other.left), max(self.top, other.top),
            min(self.right, other.right), min(self.bottom, other.bottom),
        )
        if rect.is_empty():
            return type(self)(0, 0, 0, 0)
        return rect

    def translate(self, offset):
        """Move rectangle by offset."""
        dx, dy = offset
        return type(self)(
            self.left + dx, self.top + dy, self.right + dx, self.bottom + dy
        )
