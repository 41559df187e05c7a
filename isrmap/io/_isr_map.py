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

"""Reader and writer of the boolean ISR map as a comma separated text
file with one line per map row and 0 or 1 per point, without a header.
"""

import logging
from pathlib import Path

import numpy as np

from isrmap.constants import DEFAULT_OUT_FILE

_logger = logging.getLogger(__name__)


def save_isr_map(
    isr_map: np.ndarray,
    out_path: str | Path,
    out_file: str = DEFAULT_OUT_FILE,
) -> Path:
    """Write a boolean ISR map to ``<out_path>/<out_file>.txt``.

    Parameters
    ----------
    isr_map
        2D boolean map.
    out_path
        Existing directory to write the file to.
    out_file
        File name without the ``".txt"`` extension. Default is
        ``"isr_map"``.

    Returns
    -------
    fname
        Path to the written file.

    Raises
    ------
    OSError
        If the file cannot be written, e.g. if the directory does not
        exist.
    """
    isr_map = np.asarray(isr_map)
    if isr_map.ndim != 2:
        raise ValueError(f"ISR map must be 2D, but has shape {isr_map.shape}")

    fname = Path(out_path) / f"{out_file}.txt"
    np.savetxt(fname, isr_map.astype(np.uint8), fmt="%d", delimiter=",")
    _logger.debug(f"Wrote ISR map of shape {isr_map.shape} to {fname}")

    return fname


def load_isr_map(fname: str | Path) -> np.ndarray:
    """Return a boolean ISR map read from a text file written by
    :func:`save_isr_map`.

    A map with a single row or column is returned as a 2D array.
    """
    data = np.loadtxt(fname, delimiter=",", dtype=np.uint8, ndmin=2)
    return data.astype(bool)
