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

"""Selection of which per-point quality value decides whether a
comparison point is considered not indexed, per acquisition modality.
"""

from typing import Callable

import numpy as np

from isrmap._util.exceptions import UnknownModalityError
from isrmap.constants import QUALITY_PROPERTIES


def quality_property(modality: str) -> str:
    """Return the name of the crystal map property holding the quality
    value inspected for the given acquisition modality.

    Parameters
    ----------
    modality
        One of ``"ang"``, ``"emsoft"``, ``"astro"`` or ``"osc"``.

    Returns
    -------
    name
        Property name in :attr:`~orix.crystal_map.CrystalMap.prop`.

    Examples
    --------
    >>> from isrmap.indexing import quality_property
    >>> quality_property("astro")
    'mae'
    """
    _check_modality(modality)
    return QUALITY_PROPERTIES[modality]


def quality_missing_predicate(
    modality: str,
) -> Callable[[np.ndarray], np.ndarray]:
    """Return a function reporting which quality values are missing,
    meaning the point should be skipped.

    All modalities currently mark a missing value with NaN.

    Parameters
    ----------
    modality
        One of ``"ang"``, ``"emsoft"``, ``"astro"`` or ``"osc"``.

    Returns
    -------
    is_missing
        Vectorized function taking an array of quality values and
        returning a boolean array of the same shape.
    """
    _check_modality(modality)
    return _is_nan


def _check_modality(modality: str):
    if modality not in QUALITY_PROPERTIES:
        raise UnknownModalityError(modality)


def _is_nan(quality: np.ndarray) -> np.ndarray:
    return np.isnan(np.asarray(quality, dtype=float))
