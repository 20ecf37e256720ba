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
Distance metrics between points and rectangles.

The two bounds below drive the best-first nearest neighbour search of an
R-tree: candidate subtrees are ordered by :func:`min_dist` and pruned when
their :func:`min_dist` exceeds the best :func:`min_max_dist` found so far.
Both are returned squared, since callers only compare them; take the square
root if an absolute distance is needed.

References:
    N. Roussopoulos, S. Kelley and F. Vincent, "Nearest Neighbor Queries",
    ACM SIGMOD, pages 71-79, 1995. Definitions 2 and 4.
'''
import numpy


def dist(p, q):
    """Euclidean distance between the points `p` and `q`."""
    d = p.coords - q.coords
    return float(numpy.sqrt((d * d).sum()))


def min_dist(p, r):
    """
    Squared distance from point `p` to the nearest point of rectangle `r`.

    Zero if and only if `p` lies inside or on the boundary of `r`. It is a
    lower bound on the distance from `p` to any object enclosed by `r`.
    """
    x = p.coords
    # Per axis: distance to the nearest face if outside, zero otherwise.
    d = numpy.where(x < r.mins, x - r.mins,
                    numpy.where(x > r.maxs, x - r.maxs, 0.))
    return float((d * d).sum())


def min_max_dist(p, r):
    """
    Squared minimum over the faces of `r` of the maximum distance from `p`.

    If `r` is the bounding box of some objects, then at least one of them lies
    within ``sqrt(min_max_dist(p, r))`` of `p`.

    By definition,

        min_max_dist(p, r) = min_k (|p_k - rm_k|^2
                                    + sum_{i != k} |p_i - rM_i|^2)

    where rM_i is the corner coordinate farther from p_i and rm_k the one on
    p_k's side of the midpoint. Precomputing S = sum_i |p_i - rM_i|^2 makes
    each candidate S - |p_k - rM_k|^2 + |p_k - rm_k|^2, so the whole is linear
    in the dimension.
    """
    x = p.coords
    mins, maxs = r.mins, r.maxs
    mid = 0.5 * (mins + maxs)
    far = numpy.where(x >= mid, mins, maxs)
    near = numpy.where(x <= mid, mins, maxs)
    far_sq = (x - far)**2
    candidates = far_sq.sum() - far_sq + (x - near)**2
    return float(candidates.min())
