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
Points and axis-aligned rectangles of a fixed-dimensional space.

Every point and rectangle of a space shares the dimension D of that space.
Classes bound to a dimension are built by :func:`space` and cached, so that
``space(2).Rect is space(2).Rect``. The package level ``Point`` and ``Rect``
belong to the space of dimension :data:`spgeom.config.DIM`.

Points are immutable. Rectangles are immutable too, except through
:meth:`BaseRect.enlarge`, the single operation growing a rectangle in place.
Both hold their coordinates in numpy float arrays.
'''
import collections
import functools
import logging
import operator

import numpy

from . import algebra
from . import config
from . import distance
from .errors import DegenerateRectError


logger = logging.getLogger(__name__)


def _as_floats(obj):
    # Fresh float array, never aliasing the caller's buffer.
    if isinstance(obj, BasePoint):
        obj = obj.coords
    return numpy.array(obj, dtype=float)


class BasePoint():
    """
    Point of a D-dimensional euclidean space.

    Subclasses bound to a dimension are created by :func:`space`.
    Accepts either the coordinates themselves, ``Point(1, 2, 3)``, or a
    single sequence of them, ``Point([1, 2, 3])``.

    Attributes:
        coords (array): read-only float array of shape (D,).
    """
    __slots__ = ('coords',)
    ndims = None
    rect_class = None

    def __init__(self, *coords):
        if self.ndims is None:
            raise TypeError("Points must be created through space(dim)")
        if len(coords) == 1 and not numpy.isscalar(coords[0]):
            coords = coords[0]
        arr = _as_floats(coords)
        if arr.shape != (self.ndims,):
            raise ValueError(
                "{} expects {} coordinates, got shape {}"
                .format(type(self).__name__, self.ndims, arr.shape)
            )
        arr.flags.writeable = False
        self.coords = arr

    def __len__(self):
        return self.ndims

    def __getitem__(self, idx):
        return self.coords.tolist()[idx]

    def __iter__(self):
        return iter(self.coords.tolist())

    def __eq__(self, other):
        if not isinstance(other, BasePoint):
            return NotImplemented
        return numpy.array_equal(self.coords, other.coords)

    def __hash__(self):
        return hash(tuple(self.coords.tolist()))

    def __repr__(self):
        return "{}({})".format(
            type(self).__name__, ", ".join(map(repr, self.coords.tolist())))

    def dist(self, other):
        """Euclidean distance to the point `other`."""
        return distance.dist(self, other)

    def min_dist(self, rect):
        """Squared lower bound on the distance to the content of `rect`."""
        return distance.min_dist(self, rect)

    def min_max_dist(self, rect):
        """Squared upper bound on the distance to the content of `rect`."""
        return distance.min_max_dist(self, rect)

    def to_rect(self, tol):
        """
        Square box of half side `tol` centered on the point.

        `tol` must be positive. This is not checked: a non-positive tolerance
        yields a rectangle breaking the ``low <= high`` invariant.
        """
        return self.rect_class.from_bounds(self.coords - tol,
                                           self.coords + tol)


class BaseRect():
    """
    Axis-aligned rectangle [low_0, high_0] x ... x [low_D-1, high_D-1].

    Subclasses bound to a dimension are created by :func:`space`.

    Args:
        low: most negative corner, a point or a sequence of D floats.
        lengths: sequence of D side lengths, all strictly positive.

    Raises:
        DegenerateRectError: if a side length is not positive. The error
            carries the offending length.
    """
    __slots__ = ('_mins', '_maxs')
    ndims = None
    point_class = None

    @classmethod
    def _check_shape(cls, arr, what):
        if cls.ndims is None:
            raise TypeError("Rects must be created through space(dim)")
        if arr.shape != (cls.ndims,):
            raise ValueError(
                "{} expects {} with {} coordinates, got shape {}"
                .format(cls.__name__, what, cls.ndims, arr.shape)
            )
        return arr

    def __init__(self, low, lengths):
        mins = self._check_shape(_as_floats(low), "a corner")
        lengths = self._check_shape(_as_floats(lengths), "lengths")
        for length in lengths.tolist():
            if length <= 0:
                logger.debug("Rejected rectangle at %s with side length %r",
                             mins.tolist(), length)
                raise DegenerateRectError(length)
        self._mins = mins
        self._maxs = mins + lengths

    @classmethod
    def from_bounds(cls, low, high):
        """
        Rectangle with corners `low` and `high`, without checking them.

        The caller guarantees ``low[i] <= high[i]`` in every dimension.
        """
        rect = cls.__new__(cls)
        rect._mins = cls._check_shape(_as_floats(low), "a low corner")
        rect._maxs = cls._check_shape(_as_floats(high), "a high corner")
        return rect

    # Read-only views: they follow later enlargements of the rectangle.
    @property
    def mins(self):
        view = self._mins.view()
        view.flags.writeable = False
        return view

    @property
    def maxs(self):
        view = self._maxs.view()
        view.flags.writeable = False
        return view

    @property
    def low(self):
        return self.point_class(self._mins)

    @property
    def high(self):
        return self.point_class(self._maxs)

    @property
    def lengths(self):
        return self._maxs - self._mins

    @property
    def center(self):
        return self.point_class(0.5 * (self._mins + self._maxs))

    def point_coord(self, idx):
        """Coordinate `idx` of the low corner."""
        return float(self._mins[idx])

    def lengths_coord(self, idx):
        """Side length along axis `idx`."""
        return float(self._maxs[idx] - self._mins[idx])

    def copy(self):
        return type(self).from_bounds(self._mins, self._maxs)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def equal(self, other):
        """Exact equality of both corners, without tolerance."""
        return (numpy.array_equal(self._mins, other.mins)
                and numpy.array_equal(self._maxs, other.maxs))

    def __eq__(self, other):
        if not isinstance(other, BaseRect):
            return NotImplemented
        return self.equal(other)

    # Mutable through enlarge, hence unhashable.
    __hash__ = None

    def __str__(self):
        return "x".join("[{:.2f}, {:.2f}]".format(a, b)
                        for a, b in zip(self._mins.tolist(),
                                        self._maxs.tolist()))

    def __repr__(self):
        return "{}(low={}, high={})".format(
            type(self).__name__,
            tuple(self._mins.tolist()), tuple(self._maxs.tolist()))

    def size(self):
        return algebra.size(self)

    def margin(self):
        return algebra.margin(self)

    def contains_point(self, point):
        return algebra.contains_point(self, point)

    def contains_rect(self, other):
        return algebra.contains_rect(self, other)

    def intersects(self, other):
        return algebra.intersect(self, other)

    def bounding_box(self, other):
        return algebra.bounding_box(self, other)

    def enlarge(self, other):
        """
        Grows the rectangle in place to also contain `other`.

        This is the only operation mutating a rectangle. Concurrent
        enlargements of the same rectangle must be serialized by the caller.
        """
        numpy.minimum(self._mins, other.mins, out=self._mins)
        numpy.maximum(self._maxs, other.maxs, out=self._maxs)


Space = collections.namedtuple("Space", "dim Point Rect")


@functools.lru_cache(maxsize=None)
def space(dim):
    """
    Point and rectangle classes of the `dim`-dimensional space.

    Args:
        dim (int): positive number of dimensions.

    Returns:
        Space: named tuple (dim, Point, Rect). Repeated calls with the same
            `dim` return the same classes.
    """
    dim = operator.index(dim)
    if dim < 1:
        raise ValueError("Dimension must be positive, got {}".format(dim))
    point_cls = type("Point", (BasePoint,), {"__slots__": (), "ndims": dim})
    rect_cls = type("Rect", (BaseRect,), {
        "__slots__": (),
        "ndims": dim,
        "point_class": point_cls,
    })
    point_cls.rect_class = rect_cls
    logger.debug("Created the %d-dimensional space", dim)
    return Space(dim, point_cls, rect_cls)


_default = space(config.DIM)
Point = _default.Point
Rect = _default.Rect
