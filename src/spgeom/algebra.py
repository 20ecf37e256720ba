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
'''
Rectangle algebra and measures.

Everything here is pure except :func:`enlarge`, which grows its first
argument in place. Inputs are assumed to satisfy the rectangle invariant
``low <= high`` and to share a dimension; neither is checked again.
'''
import numpy
import toolz


def size(r):
    """Hyper-volume of `r`: the product of its side lengths."""
    return float(numpy.prod(r.maxs - r.mins))


def margin(r):
    """
    Sum of the edge lengths of `r`.

    A D-dimensional box has D * 2^(D-1) edges, 2^(D-1) of them parallel to
    each axis, so the margin is 2^(D-1) times the sum of the side lengths.
    """
    sides = r.maxs - r.mins
    return float(2**(len(sides) - 1) * sides.sum())


def contains_point(r, p):
    """True if `p` is inside or on the boundary of `r`."""
    x = p.coords
    return bool(numpy.all((r.mins <= x) & (x <= r.maxs)))


def contains_rect(r1, r2):
    """True if `r2` is inside `r1`, shared faces included."""
    return bool(numpy.all((r1.mins <= r2.mins) & (r2.maxs <= r1.maxs)))


def intersect(r1, r2):
    """
    True if `r1` and `r2` overlap in every dimension.

    The only non-overlapping cases on an axis are complete separations,
    ``r2.high <= r1.low`` or ``r1.high <= r2.low``. Rectangles that merely
    share a face therefore do not intersect.
    """
    return bool(numpy.all((r2.maxs > r1.mins) & (r1.maxs > r2.mins)))


def enlarge(r1, r2):
    """Grows `r1` in place into the bounding box of `r1` and `r2`."""
    r1.enlarge(r2)


def bounding_box(r1, r2):
    """Returns a new rectangle, the smallest one containing `r1` and `r2`."""
    return type(r1).from_bounds(numpy.minimum(r1.mins, r2.mins),
                                numpy.maximum(r1.maxs, r2.maxs))


def bounding_box_n(*rects):
    """
    Smallest rectangle containing all of `rects`.

    Note:
        Given a single rectangle, that same object is returned, not a copy.
        Copy it before calling :meth:`enlarge` on the result.
    """
    if not rects:
        raise ValueError("bounding_box_n needs at least one rectangle")
    return toolz.reduce(bounding_box, rects)
