"""Axis aligned rectangles used as element footprints.

An AABB is the closed rectangle [xmin, xmax] x [ymin, ymax]. Every
interpolation element carries one, and the element quadtree halves them
to decide how deep a footprint can be stored.
"""

from gridsample.config import quadtree_split_border_ratio


class AABB(object):
    """Closed axis aligned rectangle.

    Borders belong to the rectangle, so elements sharing an edge both
    contain the points on it.
    """

    def __init__(self, xmin, xmax, ymin, ymax):
        self.xmin = xmin
        self.xmax = xmax
        self.ymin = ymin
        self.ymax = ymax

    @classmethod
    def from_center(cls, x, y, width, height):
        """Rectangle of the given size centred on (x, y)."""
        half_width = width/2.0
        half_height = height/2.0
        return cls(x - half_width, x + half_width,
                   y - half_height, y + half_height)

    def __repr__(self):
        return 'AABB(%s, %s, %s, %s)' % self.get_extent()

    def __eq__(self, other):
        if not isinstance(other, AABB):
            return NotImplemented
        return self.get_extent() == other.get_extent()

    def get_extent(self):
        """return (xmin, xmax, ymin, ymax)"""
        return self.xmin, self.xmax, self.ymin, self.ymax

    def size(self):
        """return (width, height)"""
        return self.xmax - self.xmin, self.ymax - self.ymin

    def grow(self, amount):
        """Push every border outwards by amount times the width or height.
        """
        width, height = self.size()
        self.xmin -= width*amount
        self.xmax += width*amount
        self.ymin -= height*amount
        self.ymax += height*amount

    def split(self, border=quadtree_split_border_ratio):
        """Return the two halves of the rectangle across its longer side.

        border is the fraction of that side each half covers. With
        border > 0.5 the halves overlap, so a footprint lying across the
        middle line can still fit into one of them.
        """

        width, height = self.size()

        if width > height:
            return (AABB(self.xmin, self.xmin + width*border,
                         self.ymin, self.ymax),
                    AABB(self.xmax - width*border, self.xmax,
                         self.ymin, self.ymax))

        return (AABB(self.xmin, self.xmax,
                     self.ymin, self.ymin + height*border),
                AABB(self.xmin, self.xmax,
                     self.ymax - height*border, self.ymax))

    def is_trivial_in(self, other):
        """True if rectangle other lies entirely inside this one."""
        return (self.xmin <= other.xmin and other.xmax <= self.xmax and
                self.ymin <= other.ymin and other.ymax <= self.ymax)

    def contains(self, x, y):
        """True if (x, y) is inside or on the border. NaN is never inside."""
        return self.xmin <= x <= self.xmax and self.ymin <= y <= self.ymax
