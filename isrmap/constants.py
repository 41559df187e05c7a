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

"""Default option values and such useful across modules."""

# Maximum misorientation angle in degrees for a comparison point to be
# considered a match to a reference point
DEFAULT_DEVIATION = 5.0

DEFAULT_MODALITY = "ang"

# File name of the ISR map, without the ".txt" extension
DEFAULT_OUT_FILE = "isr_map"

# Crystal map property holding the per-point quality value checked for
# missing values, per acquisition modality. The names follow what orix'
# readers put in CrystalMap.prop for these formats.
QUALITY_PROPERTIES = {
    "ang": "ci",
    "emsoft": "ci",
    "astro": "mae",
    "osc": "confidenceindex",
}
