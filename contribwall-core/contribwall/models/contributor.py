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

"""Pydantic models for contributors as returned by the GitHub listing endpoint."""

from __future__ import annotations

from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

GITHUB_PROFILE_URL = "https://github.com"


class Contributor(BaseModel):
    """A single repository contributor.

    Only ``login`` and ``avatar_url`` are required; the upstream listing
    carries many more fields, which are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    login: str
    avatar_url: str
    html_url: Optional[str] = None
    contributions: Optional[int] = None

    @property
    def profile_url(self) -> str:
        """Return the contributor's GitHub profile link."""
        return f"{GITHUB_PROFILE_URL}/{self.login}"


class ContributorCollection(BaseModel):
    """Insertion-ordered contributors, concatenated page by page.

    No de-duplication is performed: the listing is already unique per
    repository.
    """

    contributors: list[Contributor] = Field(default_factory=list)

    def extend(self, page: Iterable[Contributor]) -> None:
        """Append one page of contributors, keeping upstream order."""
        self.contributors.extend(page)

    @property
    def logins(self) -> list[str]:
        return [c.login for c in self.contributors]

    def __len__(self) -> int:
        return len(self.contributors)
