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
Errors raised by spgeom.

Only the rectangle constructor signals an error: a requested side length
that is not strictly positive. Every other operation trusts its inputs.
'''


class GeometryError(Exception):
    """Base class of spgeom errors."""
    pass


class DegenerateRectError(GeometryError, ValueError):
    """
    A rectangle was requested with a non-positive side length.

    Attributes:
        length (float): the offending side length.
    """
    def __init__(self, length):
        super().__init__(
            "degenerate rectangle: side length {!r} is not positive"
            .format(length)
        )
        self.length = length
