"""Module where global gridsample parameters and default values are set
"""

from gridsample.utilities.numerical_tools import NAN


################################################################################
# Numerical constants
################################################################################

NODATA_value = NAN                  # Returned for points with no element


################################################################################
# Grid defaults
################################################################################

default_cell_width = 1.0            # Spacing between samples in x
default_cell_height = 1.0           # Spacing between samples in y
default_grid_base_value = 0.0       # Value of pixels in a uniform pixel grid


################################################################################
# Element search
################################################################################

# What find_element_id does with a point that is not near any element.
# 'first_element' reports element 0, which cannot be told apart from a point
#                 that really lies in element 0.
# 'not_found'     reports None and find_value_at returns NODATA_value.
off_mesh_policies = ('first_element', 'not_found')
default_off_mesh_policy = 'first_element'

# One of 'nearest', 'contains', 'quadtree', 'kdtree'
default_search_method = 'nearest'

# Allow quadtree children to be slightly bigger than half their parents
# so that leaves on a split line can still be pushed down
quadtree_split_border_ratio = 0.55
