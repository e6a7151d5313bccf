"""Category classification: grade to age band."""

# Sports Meet
# Copyright (C) 2025  Sports Meet developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Any, Optional

from sportsmeet.constants import CATEGORY_UNKNOWN, DEFAULT_CATEGORY_BANDS
from sportsmeet.type_hints import CategoryBands


def classify(grade: Any, bands: Optional[CategoryBands] = None) -> str:
    """Map a grade to its category.

    Bands are checked in order and both bounds are inclusive. A grade that
    falls in no band, or is not a whole number, is ``"Unknown"``.

    >>> classify(6)
    'Middle (6-7)'
    >>> classify(11)
    'Unknown'
    """
    if bands is None:
        bands = DEFAULT_CATEGORY_BANDS

    if isinstance(grade, bool):
        return CATEGORY_UNKNOWN
    try:
        value = int(grade)
    except (TypeError, ValueError):
        return CATEGORY_UNKNOWN

    for name, low, high in bands:
        if low <= value <= high:
            return name
    return CATEGORY_UNKNOWN
