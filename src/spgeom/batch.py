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
Vectorized metrics over many rectangles at once.

A tree node compares one query against all of its children's rectangles.
:class:`RectVect` stacks those rectangles into a single (N, D, 2) array so
that the distance bounds and predicates of :mod:`spgeom.distance` and
:mod:`spgeom.algebra` are evaluated for all children in one numpy pass. The
results agree element-wise with the scalar functions, boundary policies
included.
'''
import numpy


def _coords(point):
    return getattr(point, "coords", point)


class RectVect():
    """
    Array of N axis-aligned rectangles of dimension D.

    Args:
        coords (array-like): (N, D, 2) array where ``coords[n, i]`` is the
            pair (low, high) of rectangle n on axis i.

    Attributes:
        coords (array): the (N, D, 2) float array.
        mins (array): (N, D) low corners.
        maxs (array): (N, D) high corners.
    """
    def __init__(self, coords):
        coords = numpy.array(coords, dtype=float)
        if coords.ndim != 3 or coords.shape[2] != 2:
            raise ValueError(
                "Coords must be of shape (N, D, 2), got {}"
                .format(coords.shape)
            )
        self.coords = coords
        self.ndims = coords.shape[1]
        self.mins = coords[:, :, 0]
        self.maxs = coords[:, :, 1]

    @classmethod
    def from_rects(cls, rects):
        """Stacks a non-empty sequence of rectangles."""
        rects = list(rects)
        if not rects:
            raise ValueError("RectVect.from_rects needs at least one rectangle")
        return cls(numpy.stack([
            numpy.array([r.mins for r in rects]),
            numpy.array([r.maxs for r in rects]),
        ], axis=2))

    def __len__(self):
        return self.coords.shape[0]

    def __getitem__(self, idx):
        coords = self.coords[idx]
        if coords.ndim == 2:  # single rectangle
            coords = coords[numpy.newaxis]
        return self.__class__(coords)

    def min_dists(self, point):
        """Squared :func:`~spgeom.distance.min_dist` to every rectangle."""
        x = _coords(point)
        d = numpy.maximum(0., numpy.maximum(self.mins - x, x - self.maxs))
        return (d * d).sum(axis=1)

    def min_max_dists(self, point):
        """Squared :func:`~spgeom.distance.min_max_dist` to every rectangle."""
        x = _coords(point)
        mid = 0.5 * (self.mins + self.maxs)
        far_sq = (x - numpy.where(x >= mid, self.mins, self.maxs))**2
        near_sq = (x - numpy.where(x <= mid, self.mins, self.maxs))**2
        total = far_sq.sum(axis=1, keepdims=True)
        return (total - far_sq + near_sq).min(axis=1)

    def contains_point(self, point):
        x = _coords(point)
        return ((self.mins <= x) & (x <= self.maxs)).all(axis=1)

    def intersects(self, rect):
        # Strict comparisons: rectangles sharing a face do not intersect.
        return ((rect.maxs > self.mins) & (self.maxs > rect.mins)).all(axis=1)

    def bounding_box(self, rect_class):
        """Bounding box of all rectangles, as an instance of `rect_class`."""
        return rect_class.from_bounds(self.mins.min(axis=0),
                                      self.maxs.max(axis=0))
