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

from isrmap.release import version as __version__
from isrmap.logging import set_log_level
from isrmap import indexing, io
from isrmap.indexing import compute_isr, indexing_success_rate


__all__ = [
    "__version__",
    "compute_isr",
    "indexing",
    "indexing_success_rate",
    "io",
    "release",
    "set_log_level",
]
