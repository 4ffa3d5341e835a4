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

"""JSON output for ``--json`` flags: build summaries and resolved settings.

Keys are sorted, indentation is two spaces, and the text ends with a
single newline.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

from contribwall import __version__


def to_json(payload: BaseModel | dict[str, Any]) -> str:
    """Serialize a model or plain mapping as sorted, indented JSON."""
    data = payload.model_dump(mode="json") if isinstance(payload, BaseModel) else payload
    return json.dumps(data, sort_keys=True, indent=2, ensure_ascii=False, default=str) + "\n"


def summary_json(result: BaseModel) -> str:
    """JSON for one finished build, stamped with the contribwall version."""
    data = result.model_dump(mode="json")
    data["contribwall_version"] = __version__
    return to_json(data)
