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

"""Error taxonomy for contribwall.

Every failure is fatal for the run. Library code raises these; only the
CLI turns them into a console message and a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ContribWallError(Exception):
    """Base exception for this project."""


class ConfigurationError(ContribWallError):
    """Raised when a required setting is missing or the config file is invalid."""

    def __init__(self, message: str, *, source: Optional[str] = None) -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source


class UpstreamRequestError(ContribWallError):
    """Raised when the GitHub API answers with a non-success status.

    ``status_code`` is None when the request never produced a response
    (DNS failure, connection reset, timeout).
    """

    def __init__(self, status_code: Optional[int], body: str = "", *, url: str = "") -> None:
        if status_code is None:
            message = f"GitHub API request failed: {body}"
        else:
            message = f"GitHub API error: {status_code} {body}".rstrip()
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.url = url


class OutputWriteError(ContribWallError):
    """Raised when the output document cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not write {path}: {reason}")
        self.path = path
        self.reason = reason
