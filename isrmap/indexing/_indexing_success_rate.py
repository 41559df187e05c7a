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

"""Compute an indexing success rate (ISR), where the orientation in
each point of a comparison map is compared to the orientations in the
kernel of neighbouring points in a reference map.
"""

import logging
from pathlib import Path
from typing import Callable

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from orix.crystal_map import CrystalMap
from orix.quaternion import Orientation, Rotation
from orix.quaternion.symmetry import C1, Symmetry
from tqdm import tqdm

from isrmap._util.exceptions import InvalidDeviationError, InvalidInputShapeError
from isrmap.constants import DEFAULT_DEVIATION, DEFAULT_MODALITY, DEFAULT_OUT_FILE
from isrmap.indexing._quality import quality_missing_predicate, quality_property
from isrmap.io._crystal_map import crystal_map_to_grid
from isrmap.io._isr_map import save_isr_map

_logger = logging.getLogger(__name__)


def indexing_success_rate(
    xmap_comparison: CrystalMap,
    xmap_reference: CrystalMap,
    out_path: str | Path | None = None,
    deviation: float = DEFAULT_DEVIATION,
    modality: str = DEFAULT_MODALITY,
    out_file: str = DEFAULT_OUT_FILE,
    show_progressbar: bool = True,
) -> tuple[float, np.ndarray]:
    """Return the indexing success rate (ISR) of a comparison crystal
    map with respect to a reference crystal map, following Wright et
    al., Ultramicroscopy 159 (2015), where it is named ISR_RK.

    An orientation in the comparison map is a match if it is within
    ``deviation`` of any of the orientations in the 3 x 3 kernel of
    neighbouring points in the reference map. The kernel is cropped at
    the map edges.

    Parameters
    ----------
    xmap_comparison
        Comparison map. Must contain the quality property of the
        acquisition ``modality`` among its properties.
    xmap_reference
        Reference map of the same shape as the comparison map.
    out_path
        Directory to write the boolean ISR map to as a comma separated
        text file. If not given (default), no file is written.
    deviation
        Maximum misorientation angle in degrees for two orientations to
        be considered a match. Default is 5 degrees.
    modality
        Acquisition modality, deciding which property of the comparison
        map is checked for missing values (not indexed points). Options
        are ``"ang"`` (default), ``"emsoft"``, ``"astro"`` and
        ``"osc"``.
    out_file
        File name of the ISR map text file, without the ``".txt"``
        extension. Default is ``"isr_map"``.
    show_progressbar
        Whether to show a progressbar while comparing map columns.
        Default is True.

    Returns
    -------
    isr
        Indexing success rate, the fraction of points in the comparison
        map with a match in the reference map.
    isr_map
        Boolean map with points within ``deviation`` of the reference
        kernel set to True.

    Raises
    ------
    InvalidConfigurationError
        If ``deviation`` is not positive, ``modality`` is unknown or the
        comparison map lacks the modality's quality property.
    InvalidInputShapeError
        If the map shapes differ.

    See Also
    --------
    compute_isr
    """
    _check_deviation(deviation)
    quality_prop = quality_property(modality)
    is_missing = quality_missing_predicate(modality)

    comparison, quality = crystal_map_to_grid(xmap_comparison, quality_prop)
    reference, _ = crystal_map_to_grid(xmap_reference)

    _logger.info(
        f"Comparing maps of shape {comparison.shape} using quality property "
        f"{quality_prop!r} of modality {modality!r}"
    )

    isr, isr_map = compute_isr(
        comparison,
        quality,
        reference,
        deviation=deviation,
        is_missing=is_missing,
        show_progressbar=show_progressbar,
    )

    print(f"ISR_RK = {isr:.4f}")

    if out_path is not None:
        save_isr_map(isr_map, out_path, out_file)

    return isr, isr_map


def compute_isr(
    comparison: Rotation,
    comparison_quality: np.ndarray,
    reference: Rotation,
    deviation: float = DEFAULT_DEVIATION,
    is_missing: Callable[[np.ndarray], np.ndarray] | None = None,
    show_progressbar: bool = True,
) -> tuple[float, np.ndarray]:
    r"""Return the indexing success rate (ISR) and the boolean ISR map
    of a grid of comparison orientations with respect to a grid of
    reference orientations.

    Parameters
    ----------
    comparison
        Comparison orientations of shape (n rows, n columns). If
        :class:`~orix.quaternion.Orientation`, misorientation angles
        are reduced by the crystal symmetry. Points without an
        orientation must have a NaN quaternion.
    comparison_quality
        Per point quality values of the comparison map, of the same
        shape as ``comparison``.
    reference
        Reference orientations of the same shape as ``comparison``.
        Points with a NaN quaternion never match.
    deviation
        Maximum misorientation angle in degrees for two orientations to
        be considered a match. Default is 5 degrees.
    is_missing
        Function taking the array of quality values and returning a
        boolean array marking the points to skip. Skipped points are
        never a match but count towards the number of points. If not
        given, points with a NaN quality value are skipped.
    show_progressbar
        Whether to show a progressbar while comparing map columns.
        Default is True.

    Returns
    -------
    isr
        Indexing success rate in the range [0, 1].
    isr_map
        Boolean array of the same shape as ``comparison``.

    Raises
    ------
    InvalidInputShapeError
        If the three grids are not 2D and of equal shape.
    InvalidDeviationError
        If ``deviation`` is not a positive, finite angle.

    Notes
    -----
    A comparison orientation :math:`g_{r,c}` is a match if

    .. math::

        \min_{|i| \leq 1, |j| \leq 1} \omega(g_{r,c}, h_{r+i,c+j})
            < \delta,

    where :math:`h` are reference orientations inside the map,
    :math:`\omega` the misorientation angle and :math:`\delta` the
    ``deviation``. A point exactly ``deviation`` away is not a match.

    Examples
    --------
    >>> import numpy as np
    >>> from orix.quaternion import Rotation
    >>> from isrmap.indexing import compute_isr
    >>> rot = Rotation.random((3, 4))
    >>> isr, isr_map = compute_isr(rot, np.ones((3, 4)), rot)
    >>> isr
    1.0
    """
    comparison = _as_rotation(comparison)
    reference = _as_rotation(reference)
    comparison_quality = np.asarray(comparison_quality)
    _check_shapes(comparison, comparison_quality, reference)
    _check_deviation(deviation)

    if is_missing is None:
        is_missing = quality_missing_predicate(DEFAULT_MODALITY)
    skip = np.asarray(is_missing(comparison_quality), dtype=bool)
    if skip.shape != comparison_quality.shape:
        raise ValueError(
            f"Quality check must return an array of shape "
            f"{comparison_quality.shape}, but returned one of shape {skip.shape}"
        )

    map_shape = comparison.shape
    n_rows, n_cols = map_shape

    qu_comparison, symmetry_comparison = _quaternions_and_symmetry(comparison)
    qu_reference, symmetry_reference = _quaternions_and_symmetry(reference)

    # Only points with both a quality value and an orientation are
    # compared, and only to reference points with an orientation
    is_candidate = ~skip.ravel() & np.isfinite(qu_comparison).all(axis=-1)
    reference_is_valid = np.isfinite(qu_reference).all(axis=-1)

    _logger.debug(
        f"Comparing {is_candidate.sum()} of {is_candidate.size} points within "
        f"{deviation} degrees of {reference_is_valid.sum()} reference points"
    )

    # Flat indices of the map, padded with -1 outside the map, so that
    # the kernel of edge points only holds indices of points inside it
    flat_index_map = np.arange(n_rows * n_cols).reshape(map_shape)
    padded_index_map = np.pad(flat_index_map, 1, mode="constant", constant_values=-1)

    max_angle = np.deg2rad(deviation)
    isr_map = np.zeros(map_shape, dtype=bool)

    iterable = range(n_cols)
    if show_progressbar:
        iterable = tqdm(iterable, total=n_cols, desc="Comparing to reference kernel")

    for j in iterable:
        kernel_indices = sliding_window_view(padded_index_map[:, j : j + 3], (3, 3))
        isr_map[:, j] = _match_to_kernel(
            indices=flat_index_map[:, j],
            kernel_indices=kernel_indices.reshape(n_rows, 9),
            qu_comparison=qu_comparison,
            qu_reference=qu_reference,
            symmetry_comparison=symmetry_comparison,
            symmetry_reference=symmetry_reference,
            is_candidate=is_candidate,
            reference_is_valid=reference_is_valid,
            max_angle=max_angle,
        )

    isr = float(np.count_nonzero(isr_map) / isr_map.size)

    return isr, isr_map


def _match_to_kernel(
    indices: np.ndarray,
    kernel_indices: np.ndarray,
    qu_comparison: np.ndarray,
    qu_reference: np.ndarray,
    symmetry_comparison: Symmetry,
    symmetry_reference: Symmetry,
    is_candidate: np.ndarray,
    reference_is_valid: np.ndarray,
    max_angle: float,
) -> np.ndarray:
    # indices are flat indices of n points, kernel_indices the (n, 9)
    # flat indices of their reference kernels, -1 outside of the map
    in_map = kernel_indices != -1
    is_pair = in_map & is_candidate[indices][:, np.newaxis]
    is_pair[in_map] &= reference_is_valid[kernel_indices[in_map]]

    is_match = np.zeros(kernel_indices.shape, dtype=bool)
    if is_pair.any():
        pair_indices = np.broadcast_to(indices[:, np.newaxis], kernel_indices.shape)
        ori1 = Orientation(
            qu_comparison[pair_indices[is_pair]], symmetry=symmetry_comparison
        )
        ori2 = Orientation(
            qu_reference[kernel_indices[is_pair]], symmetry=symmetry_reference
        )
        is_match[is_pair] = ori1.angle_with(ori2) < max_angle

    return is_match.any(axis=1)


def _as_rotation(rotations) -> Rotation:
    if isinstance(rotations, Rotation):
        return rotations
    return Rotation(np.asarray(rotations))


def _quaternions_and_symmetry(rotations: Rotation) -> tuple[np.ndarray, Symmetry]:
    if isinstance(rotations, Orientation):
        symmetry = rotations.symmetry
    else:
        symmetry = C1
    return rotations.data.reshape(-1, 4), symmetry


def _check_shapes(
    comparison: Rotation, comparison_quality: np.ndarray, reference: Rotation
):
    shapes = {
        "comparison": comparison.shape,
        "comparison quality": comparison_quality.shape,
        "reference": reference.shape,
    }
    map_shape = comparison.shape
    if len(set(shapes.values())) != 1 or len(map_shape) != 2 or 0 in map_shape:
        raise InvalidInputShapeError(shapes)


def _check_deviation(deviation: float):
    try:
        is_valid = bool(np.isfinite(deviation) and deviation > 0)
    except TypeError:
        is_valid = False
    if not is_valid:
        raise InvalidDeviationError(deviation)
