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

from datetime import datetime


author = "isrmap developers"
copyright = f"Copyright 2019-{datetime.now().year}, isrmap"
# Initial commiter first, then sorted by line contributions
credits = [
    "Håkon Wiik Ånes",
]
license = "GPLv3+"
maintainer = "Håkon Wiik Ånes"
maintainer_email = "hakon.w.anes@ntnu.no"
name = "isrmap"
platforms = ["Linux", "MacOS X", "Windows"]
status = "Development"
version = "0.1.0"
