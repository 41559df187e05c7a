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

from typing import Any, Iterable

from isrmap.constants import QUALITY_PROPERTIES


class InvalidInputShapeError(ValueError):
    def __init__(self, shapes: dict | None = None, *args: object) -> None:
        msg = (
            "Comparison orientations, comparison quality and reference "
            "orientations must have the same 2D shape"
        )
        if shapes is not None:
            given = ", ".join(f"{name} {shape}" for name, shape in shapes.items())
            msg += f", but got {given}"
        super().__init__(msg, *args)


class InvalidConfigurationError(ValueError):
    """Raised when an option controlling the ISR computation is invalid."""


class InvalidDeviationError(InvalidConfigurationError):
    def __init__(self, given: Any = None, *args: object) -> None:
        msg = "Invalid deviation"
        if given is not None:
            msg += f" {given!r}"
        msg += ", must be a positive, finite angle in degrees"
        super().__init__(msg, *args)


class UnknownModalityError(InvalidConfigurationError):
    def __init__(self, given: Any = None, *args: object) -> None:
        msg = "Unknown modality"
        if given is not None:
            msg += f" {given!r}"
        options = ", ".join(repr(m) for m in QUALITY_PROPERTIES)
        msg += f", options are {options}"
        super().__init__(msg, *args)


class MissingQualityPropertyError(InvalidConfigurationError):
    def __init__(
        self, given: str, available: Iterable[str] | None = None, *args: object
    ) -> None:
        msg = f"Crystal map has no quality property {given!r}"
        if available is not None:
            msg += f", available properties are {sorted(available)}"
        super().__init__(msg, *args)
