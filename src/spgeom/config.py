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
Package configuration.

The dimension of the default space is fixed once, when the package is
imported. It is read from the environment variable ``SPGEOM_DIM`` and
defaults to 3. Points and rectangles of other dimensions are obtained
explicitly through :func:`spgeom.geometry.space`.
'''
import os


DEFAULT_DIM = 3
DIM_VARIABLE = "SPGEOM_DIM"


def read_dim(environ=os.environ):
    """Returns the configured dimension found in the mapping `environ`."""
    raw = environ.get(DIM_VARIABLE)
    if raw is None or raw.strip() == "":
        return DEFAULT_DIM
    try:
        dim = int(raw)
    except ValueError:
        raise ValueError(
            "{} must be a positive integer, got {!r}"
            .format(DIM_VARIABLE, raw)
        ) from None
    if dim < 1:
        raise ValueError(
            "{} must be a positive integer, got {}".format(DIM_VARIABLE, dim)
        )
    return dim


DIM = read_dim()
