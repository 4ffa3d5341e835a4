# contribwall — Contributor avatar wall generator
# Copyright (C) 2026 contribwall Project Contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""Grid geometry for the avatar wall.

The wall is a fixed number of columns wide. Each cell is a square avatar
followed by a gap; the trailing gap on the last column and last row is
not part of the canvas.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from contribwall.models.contributor import Contributor

CELL_SIZE = 48
GAP = 8
COLUMNS = 12
# Avatars are requested at twice the cell size for high-DPI screens.
AVATAR_SCALE = 2
CORNER_RADIUS = 8


class GridSpec(BaseModel):
    """Fixed layout constants for one wall."""

    model_config = ConfigDict(frozen=True)

    cell_size: int = Field(default=CELL_SIZE, gt=0)
    gap: int = Field(default=GAP, ge=0)
    columns: int = Field(default=COLUMNS, gt=0)
    avatar_scale: int = Field(default=AVATAR_SCALE, gt=0)
    corner_radius: int = Field(default=CORNER_RADIUS, ge=0)

    @property
    def pitch(self) -> int:
        """Distance between the origins of two adjacent cells."""
        return self.cell_size + self.gap

    @property
    def avatar_size(self) -> int:
        return self.cell_size * self.avatar_scale


class GridLayout(BaseModel):
    """Derived canvas dimensions for a given contributor count."""

    model_config = ConfigDict(frozen=True)

    count: int
    columns: int
    rows: int
    cell_size: int
    gap: int
    width: int
    height: int

    @classmethod
    def compute(cls, count: int, spec: GridSpec | None = None) -> "GridLayout":
        """Compute the layout for ``count`` contributors.

        An empty wall has zero rows and a 0x0 canvas.
        """
        spec = spec or GridSpec()
        rows = math.ceil(count / spec.columns)
        if count == 0:
            width = height = 0
        else:
            width = max(spec.columns * spec.pitch - spec.gap, 0)
            height = max(rows * spec.pitch - spec.gap, 0)
        return cls(
            count=count,
            columns=spec.columns,
            rows=rows,
            cell_size=spec.cell_size,
            gap=spec.gap,
            width=width,
            height=height,
        )


class GridCell(BaseModel):
    """One contributor placed on the canvas."""

    model_config = ConfigDict(frozen=True)

    index: int
    login: str
    x: int
    y: int
    href: str
    image_url: str


def avatar_image_url(avatar_url: str, size: int) -> str:
    """Append the ``s`` resolution parameter to an avatar URL."""
    separator = "&" if "?" in avatar_url else "?"
    return f"{avatar_url}{separator}s={size}"


def place_cell(index: int, contributor: Contributor, spec: GridSpec | None = None) -> GridCell:
    """Position contributor ``index`` at column ``i mod columns``, row ``i div columns``."""
    spec = spec or GridSpec()
    column = index % spec.columns
    row = index // spec.columns
    return GridCell(
        index=index,
        login=contributor.login,
        x=column * spec.pitch,
        y=row * spec.pitch,
        href=contributor.profile_url,
        image_url=avatar_image_url(contributor.avatar_url, spec.avatar_size),
    )


def layout_cells(contributors: list[Contributor], spec: GridSpec | None = None) -> list[GridCell]:
    spec = spec or GridSpec()
    return [place_cell(i, c, spec) for i, c in enumerate(contributors)]
