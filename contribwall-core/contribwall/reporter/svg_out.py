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

"""SVG output for the contributor wall.

Produces a deterministic document:
- XML declaration, then one <svg> root sized to the grid
- a single rounded-rect clip path shared by every avatar
- one <a><image/></a> per contributor, in collection order
- LF line endings and a trailing newline
"""

from __future__ import annotations

import logging
from pathlib import Path
from xml.sax.saxutils import escape

from contribwall.errors import OutputWriteError
from contribwall.models.contributor import ContributorCollection
from contribwall.models.grid import GridCell, GridLayout, GridSpec, layout_cells

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
CLIP_ID = "r"


def _attr(value: object) -> str:
    return escape(str(value), {'"': "&quot;"})


def _render_cell(cell: GridCell, spec: GridSpec) -> str:
    return (
        f'    <a xlink:href="{_attr(cell.href)}" target="_blank">\n'
        f'      <image x="{cell.x}" y="{cell.y}" width="{spec.cell_size}" height="{spec.cell_size}"'
        f' href="{_attr(cell.image_url)}" clip-path="url(#{CLIP_ID})"/>\n'
        f"    </a>"
    )


def render_grid(collection: ContributorCollection, spec: GridSpec | None = None) -> str:
    """Render the collection as a self-contained SVG document.

    An empty collection yields a 0x0 canvas that still carries the
    clip-path definition and no avatars.
    """
    spec = spec or GridSpec()
    layout = GridLayout.compute(len(collection), spec)
    cells = layout_cells(collection.contributors, spec)
    # Bounding-box units: the clip follows each image it is applied to
    radius = f"{spec.corner_radius / spec.cell_size:.6g}"

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        (
            f'<svg width="{layout.width}" height="{layout.height}"'
            f' viewBox="0 0 {layout.width} {layout.height}"'
            f' xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}">'
        ),
        (
            f'  <defs><clipPath id="{CLIP_ID}" clipPathUnits="objectBoundingBox">'
            f'<rect rx="{radius}" ry="{radius}" x="0" y="0" width="1" height="1"/></clipPath></defs>'
        ),
    ]
    lines.extend(_render_cell(cell, spec) for cell in cells)
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def write_output(document: str, output_path: Path) -> None:
    """Write the document to ``output_path``, replacing any existing file."""
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(document)
    except OSError as e:
        raise OutputWriteError(output_path, e.strerror or str(e)) from e
    logger.debug("Wrote %d bytes to %s", len(document.encode("utf-8")), output_path)
