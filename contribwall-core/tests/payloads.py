"""Canned GitHub contributors listing payloads."""

API = "https://api.github.com"
OWNER = "atakanbayil"
REPO = "changelogR"
CONTRIBUTORS_URL = f"{API}/repos/{OWNER}/{REPO}/contributors"


def make_page(start: int, count: int) -> list[dict]:
    """Build one page of contributor entries shaped like the GitHub listing."""
    return [
        {
            "login": f"user{i}",
            "id": i,
            "avatar_url": f"https://avatars.githubusercontent.com/u/{i}?v=4",
            "html_url": f"https://github.com/user{i}",
            "type": "User",
            "contributions": 1000 - i,
        }
        for i in range(start, start + count)
    ]
