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

"""Gridding of crystal maps into orientation and quality grids, and
reading and writing of the boolean ISR map text file.
"""

from isrmap.io._crystal_map import crystal_map_to_grid
from isrmap.io._isr_map import load_isr_map, save_isr_map

__all__ = [
    "crystal_map_to_grid",
    "load_isr_map",
    "save_isr_map",
]
