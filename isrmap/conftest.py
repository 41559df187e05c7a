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

import numpy as np
from orix.crystal_map import CrystalMap, Phase, PhaseList, create_coordinate_arrays
from orix.quaternion import Rotation
import pytest


def rotation_about_z(angle: float) -> np.ndarray:
    """Quaternion of a rotation of ``angle`` degrees about the z axis."""
    half = np.deg2rad(angle) / 2
    return np.array([np.cos(half), 0, 0, np.sin(half)])


@pytest.fixture
def rotations_about_z():
    """Return a function creating a grid of rotations about the z axis
    from a grid of angles in degrees.
    """

    def _rotations_about_z(angles):
        angles = np.asarray(angles, dtype=float)
        qu = np.stack([rotation_about_z(a) for a in angles.ravel()])
        return Rotation(qu.reshape(angles.shape + (4,)))

    return _rotations_about_z


@pytest.fixture
def nickel_phase():
    return Phase("ni", point_group="m-3m")


@pytest.fixture
def grain_rotations():
    """Two grains from dictionary indexing of a small nickel data set,
    arranged in a 3 x 3 map.
    """
    # fmt: off
    grain1 = (0.9542, -0.0183, -0.2806,  0.1018)
    grain2 = (0.9542,  0.0608, -0.2295, -0.1818)
    rot = Rotation((
        grain1, grain2, grain2,
        grain1, grain2, grain2,
        grain1, grain2, grain2
    ))
    # fmt: on
    return rot.reshape(3, 3)


@pytest.fixture
def get_xmap():
    """Return a function creating a crystal map from a grid of
    rotations, with map properties given as grids as well.
    """

    def _get_xmap(
        rotations,
        map_shape=None,
        prop=None,
        phase_id=None,
        phase_list=None,
    ):
        if map_shape is None:
            map_shape = rotations.shape
        d, map_size = create_coordinate_arrays(
            shape=map_shape, step_sizes=(1.5, 1.5)[-len(map_shape) :]
        )
        d["rotations"] = rotations.reshape(map_size, *rotations.shape[len(map_shape) :])
        if prop is not None:
            d["prop"] = {k: np.asarray(v, dtype=float).ravel() for k, v in prop.items()}
        if phase_id is not None:
            d["phase_id"] = np.asarray(phase_id).ravel()
        if phase_list is not None:
            d["phase_list"] = phase_list
        return CrystalMap(**d)

    return _get_xmap


@pytest.fixture
def nickel_xmap(get_xmap, grain_rotations, nickel_phase):
    """Nickel crystal map of shape (3, 3) with confidence indices."""
    ci = np.array([[0.9, 0.8, 0.7], [0.6, 0.5, 0.4], [0.3, 0.2, 0.1]])
    return get_xmap(
        grain_rotations,
        prop={"ci": ci, "mae": ci * 2},
        phase_list=PhaseList(nickel_phase),
    )
