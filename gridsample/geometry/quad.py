"""quad.py - quadtree of element footprints.

Each element footprint (an AABB) is stored at the deepest node whose
rectangle holds it entirely. A point query only descends into nodes whose
rectangle contains the point, and returns the ids of the stored footprints
that contain it. Choosing between several hits is left to the caller.
"""


class Cell(object):
    """One node of the element quadtree.

    A node starts as a leaf and splits into two children, across its
    longer side, the first time a footprint fits into one of the halves.
    """

    def __init__(self, extents, name='root'):
        self.extents = extents
        self.name = name

        # (AABB, element id) pairs stored at this node
        self.leaves = []
        self.children = None

    def __repr__(self):
        ret_str = '%s: leaves: %d' % (self.name, len(self.leaves))
        if self.children:
            ret_str += ', children: %d' % len(self.children)
        return ret_str

    def insert(self, extents, element_id):
        """Store element_id with footprint extents."""

        node = self
        while True:
            if node.children is None:
                halves = node.extents.split()
                if not any(half.is_trivial_in(extents) for half in halves):
                    break
                node.children = [Cell(halves[0], node.name + '0'),
                                 Cell(halves[1], node.name + '1')]

            for child in node.children:
                if child.extents.is_trivial_in(extents):
                    node = child
                    break
            else:
                break

        node.leaves.append((extents, element_id))

    def search(self, x, y):
        """Return the ids of all footprints containing (x, y)."""

        found = [element_id for extents, element_id in self.leaves
                 if extents.contains(x, y)]

        if self.children:
            for child in self.children:
                if child.extents.contains(x, y):
                    found.extend(child.search(x, y))

        return found

    def count(self):
        """Number of footprints stored in this node and below."""

        total = len(self.leaves)
        if self.children:
            for child in self.children:
                total += child.count()
        return total
