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

"""GitHub contributors listing: a lazy paginator over httpx.

Pages are requested one at a time, starting at page 1, until the API
returns an empty page. Any non-success response aborts the whole fetch.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

import httpx
from pydantic import ValidationError

from contribwall.config import DEFAULT_API_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from contribwall.errors import ConfigurationError, UpstreamRequestError
from contribwall.models.contributor import Contributor, ContributorCollection

logger = logging.getLogger(__name__)

PAGE_SIZE = 100


def _headers(token: str, user_agent: str = DEFAULT_USER_AGENT) -> dict[str, str]:
    return {
        "Accept": "application/vnd.github+json",
        "Authorization": f"Bearer {token}",
        "User-Agent": user_agent,
    }


class GitHubClient:
    """Thin synchronous client for the repository contributors endpoint.

    Use as a context manager so the underlying connection pool is
    always closed.
    """

    def __init__(
        self,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if not token:
            raise ConfigurationError("GH_TOKEN env var is required")
        self.api_url = api_url.rstrip("/")
        self._client = httpx.Client(
            headers=_headers(token, user_agent),
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def contributors_url(self, owner: str, repo: str) -> str:
        return f"{self.api_url}/repos/{owner}/{repo}/contributors"

    def get_contributors_page(self, owner: str, repo: str, page: int) -> list[dict[str, Any]]:
        """Fetch one raw page of the contributors listing."""
        url = self.contributors_url(owner, repo)
        try:
            response = self._client.get(url, params={"per_page": PAGE_SIZE, "page": page})
        except httpx.HTTPError as e:
            raise UpstreamRequestError(None, str(e), url=url) from e

        if not response.is_success:
            raise UpstreamRequestError(response.status_code, response.text, url=url)

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamRequestError(
                response.status_code, f"invalid JSON in page {page}: {e}", url=url
            ) from e
        if not isinstance(data, list):
            raise UpstreamRequestError(
                response.status_code, f"expected a JSON list in page {page}", url=url
            )
        return data

    def iter_contributor_pages(self, owner: str, repo: str) -> Iterator[list[Contributor]]:
        """Yield contributor pages in API order until an empty page is returned.

        The generator is finite and not restartable: iterating it again
        after exhaustion yields nothing.
        """
        _require_name(owner, "owner")
        _require_name(repo, "repo")

        page = 1
        while True:
            raw = self.get_contributors_page(owner, repo, page)
            if not raw:
                logger.debug("Page %d of %s/%s is empty, stopping", page, owner, repo)
                return
            logger.debug("Fetched page %d of %s/%s (%d contributors)", page, owner, repo, len(raw))
            try:
                contributors = [Contributor.model_validate(item) for item in raw]
            except ValidationError as e:
                raise UpstreamRequestError(
                    None, f"malformed contributor entry in page {page}: {e}",
                    url=self.contributors_url(owner, repo),
                ) from e
            yield contributors
            page += 1


def _require_name(value: str, field: str) -> None:
    if not value or not value.strip():
        raise ConfigurationError(f"{field} must be a non-empty string")


def fetch_all_contributors(
    owner: str,
    repo: str,
    token: str,
    *,
    api_url: str = DEFAULT_API_URL,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: float = DEFAULT_TIMEOUT,
    transport: Optional[httpx.BaseTransport] = None,
) -> ContributorCollection:
    """Fetch every contributor of ``owner/repo`` across all pages.

    Raises:
        ConfigurationError: token, owner or repo is missing. Raised before
            any request is made.
        UpstreamRequestError: any page failed. No partial result is returned.
    """
    if not token:
        raise ConfigurationError("GH_TOKEN env var is required")
    _require_name(owner, "owner")
    _require_name(repo, "repo")

    collection = ContributorCollection()
    with GitHubClient(
        token,
        api_url=api_url,
        user_agent=user_agent,
        timeout=timeout,
        transport=transport,
    ) as client:
        for page in client.iter_contributor_pages(owner, repo):
            collection.extend(page)

    logger.info("Fetched %d contributors for %s/%s", len(collection), owner, repo)
    return collection
