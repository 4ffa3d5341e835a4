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

"""ContributorFeedBuilder — fetch, lay out, render and write the wall.

Idle -> Fetching -> Rendering -> Writing -> Done. Any error aborts the
run; nothing is written unless the whole collection was fetched.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx
from pydantic import BaseModel

from contribwall.config import Settings
from contribwall.github.client import fetch_all_contributors
from contribwall.models.contributor import ContributorCollection
from contribwall.models.grid import GridLayout, GridSpec
from contribwall.reporter.svg_out import render_grid, write_output

logger = logging.getLogger(__name__)


class BuildResult(BaseModel):
    """Summary of one completed run."""

    owner: str
    repo: str
    contributor_count: int
    rows: int
    width: int
    height: int
    output: str


class ContributorFeedBuilder:
    """One run of the contributor wall pipeline for ``owner/repo``."""

    def __init__(
        self,
        owner: str,
        repo: str,
        settings: Settings,
        *,
        spec: Optional[GridSpec] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        self.settings = settings
        self.spec = spec or GridSpec()
        self._transport = transport

    def fetch_all_contributors(self) -> ContributorCollection:
        return fetch_all_contributors(
            self.owner,
            self.repo,
            self.settings.token,
            api_url=self.settings.api_url,
            user_agent=self.settings.user_agent,
            timeout=self.settings.timeout,
            transport=self._transport,
        )

    def render_grid(self, collection: ContributorCollection) -> str:
        return render_grid(collection, self.spec)

    def write_output(self, document: str, path: Optional[Path] = None) -> Path:
        target = path or self.settings.output
        write_output(document, target)
        return target

    def run(self) -> BuildResult:
        """Fetch every contributor, render the grid and write the document."""
        collection = self.fetch_all_contributors()
        if not len(collection):
            logger.warning("%s/%s has no contributors; writing an empty wall", self.owner, self.repo)

        document = self.render_grid(collection)
        target = self.write_output(document)
        logger.info("Wrote %s with %d avatars", target, len(collection))

        layout = GridLayout.compute(len(collection), self.spec)
        return BuildResult(
            owner=self.owner,
            repo=self.repo,
            contributor_count=len(collection),
            rows=layout.rows,
            width=layout.width,
            height=layout.height,
            output=str(target),
        )
