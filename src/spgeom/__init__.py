# Copyright (C) 2018 DataStorm
#
# This file is part of SpatialGeom.
#
# SpatialGeom is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# SpatialGeom is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# A copy of the GNU General Public License is available in the LICENSE
# file or at <http://www.gnu.org/licenses/>.
"""
Geometric primitives of R-tree spatial indexes.

Points and axis-aligned bounding rectangles of a fixed dimension, the two
distance bounds pruning nearest neighbour searches (``min_dist`` and
``min_max_dist``), and the rectangle algebra used to maintain the tree
(containment, intersection, bounding box union, size and margin).

The tree itself is left to the caller. For example, a best-first nearest
neighbour search orders candidate nodes by ``point.min_dist(node_rect)`` and
prunes those beyond the best ``point.min_max_dist(node_rect)``.
"""
from .errors import GeometryError, DegenerateRectError  # noqa: F401
from .geometry import space, Space, Point, Rect  # noqa: F401
from .distance import dist, min_dist, min_max_dist  # noqa: F401
from .algebra import (  # noqa: F401
    size, margin, contains_point, contains_rect, intersect, enlarge,
    bounding_box, bounding_box_n,
)
from .batch import RectVect  # noqa: F401

__version__ = "0.1.0"
