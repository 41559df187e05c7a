# Copyright 2019-2024 The isrmap developers
#
# This file is part of isrmap.
#
# isrmap is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# isrmap is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with isrmap. If not, see <http://www.gnu.org/licenses/>.

"""Arrange the points of a :class:`~orix.crystal_map.CrystalMap` on a
rectangular grid of orientations and quality values.
"""

import logging

import numpy as np
from orix.crystal_map import CrystalMap
from orix.quaternion import Orientation
from orix.quaternion.symmetry import C1, Symmetry

from isrmap._util.exceptions import MissingQualityPropertyError

_logger = logging.getLogger(__name__)


def crystal_map_to_grid(
    xmap: CrystalMap, quality_prop: str | None = None
) -> tuple[Orientation, np.ndarray | None]:
    """Return the orientations and, optionally, a quality property of a
    crystal map as 2D grids of the map shape.

    Parameters
    ----------
    xmap
        Crystal map with one phase among the indexed points. If the map
        has more than one rotation per point, only the first (best) is
        used.
    quality_prop
        Name of a property in the map's properties to return as a grid.
        If not given (default), no quality grid is returned.

    Returns
    -------
    orientations
        Orientations of shape (n rows, n columns) with the point group
        of the indexed phase as symmetry. Points not indexed or not in
        the data have a NaN quaternion.
    quality
        Quality values of shape (n rows, n columns), NaN in points not
        in the data, or None if ``quality_prop`` is not given.

    Raises
    ------
    ValueError
        If the indexed points belong to more than one phase, or the map
        is neither 1D nor 2D.
    MissingQualityPropertyError
        If the map has no property ``quality_prop``.

    Notes
    -----
    A 1D map is returned as a grid with one row.
    """
    in_data = _in_data_grid(xmap)
    map_shape = in_data.shape
    map_size = in_data.size
    in_data1d = in_data.ravel()

    rotations = xmap.rotations
    if xmap.rotations_per_point > 1:
        rotations = rotations[:, 0]

    is_indexed = np.zeros(map_size, dtype=bool)
    is_indexed[in_data1d] = xmap.is_indexed

    qu = np.full((map_size, 4), np.nan)
    qu[in_data1d] = rotations.data
    qu[~is_indexed] = np.nan

    orientations = Orientation(qu.reshape(map_shape + (4,)), symmetry=_symmetry(xmap))

    _logger.debug(
        f"Gridded {in_data1d.sum()} points in data, {is_indexed.sum()} indexed, "
        f"to map shape {map_shape}"
    )

    if quality_prop is None:
        return orientations, None

    if quality_prop not in xmap.prop:
        raise MissingQualityPropertyError(quality_prop, xmap.prop.keys())

    values = np.asarray(xmap.prop[quality_prop], dtype=float)
    if values.ndim > 1:
        values = values[:, 0]
    quality = np.full(map_size, np.nan)
    quality[in_data1d] = values

    return orientations, quality.reshape(map_shape)


def _in_data_grid(xmap: CrystalMap) -> np.ndarray:
    # Same approach as when merging maps: restrict the full map to the
    # bounding box of points in the data
    if xmap.ndim not in (1, 2):
        raise ValueError(f"Crystal map must be 1D or 2D, but has shape {xmap.shape}")
    slices = xmap._data_slices_from_coordinates()
    in_data = xmap.is_in_data.reshape(xmap._original_shape)[slices]
    if in_data.ndim == 1:
        in_data = in_data[np.newaxis]
    return in_data


def _symmetry(xmap: CrystalMap) -> Symmetry:
    phase_id = np.unique(xmap.phase_id[xmap.is_indexed])
    if phase_id.size > 1:
        raise ValueError(
            "Indexed points in crystal map must have only one phase, but had the "
            f"phase IDs {list(phase_id)}"
        )
    elif phase_id.size == 0:
        return C1

    point_group = xmap.phases[int(phase_id[0])].point_group
    if point_group is None:
        return C1
    return point_group
