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

"""Settings resolution: CLI arguments, environment, then ~/.contribwall/config.yaml.

The GitHub token is looked up in this order:
1. --token (explicit CLI value)
2. GH_TOKEN (env var)
3. GITHUB_TOKEN (env var)
4. github.token in ~/.contribwall/config.yaml ("env:VAR_NAME" is resolved)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from contribwall.errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".contribwall"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

TOKEN_ENV_VARS = ("GH_TOKEN", "GITHUB_TOKEN")
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "contributors-script"
DEFAULT_TIMEOUT = 30.0
DEFAULT_OUTPUT = "contributors.svg"


class Settings(BaseModel):
    """Resolved settings for one run."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(repr=False)
    api_url: str = DEFAULT_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    output: Path = Path(DEFAULT_OUTPUT)

    def redacted(self) -> dict[str, Any]:
        """Settings as a plain dict with the token masked."""
        data = self.model_dump(mode="json")
        data["token"] = "***" if self.token else "(missing)"
        return data


def load_config(path: Optional[Path] = None) -> dict:
    """Load contribwall config from ~/.contribwall/config.yaml.

    Returns an empty dict if no config file exists.
    """
    config_path = path or CONFIG_FILE
    if not config_path.exists():
        return {}
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid YAML: {e}", source=str(config_path)) from e
    except OSError as e:
        raise ConfigurationError(f"cannot read config: {e}", source=str(config_path)) from e

    if not isinstance(data, dict):
        raise ConfigurationError("top level must be a mapping", source=str(config_path))
    logger.debug("Loaded config from %s", config_path)
    return data


def _resolve_env_ref(value: Optional[str]) -> Optional[str]:
    """Resolve an "env:VAR_NAME" reference; plain values pass through."""
    if value and value.startswith("env:"):
        return os.environ.get(value[4:], "").strip() or None
    return value


def resolve_token(explicit: Optional[str], config: dict) -> str:
    """Return the GitHub token or raise ConfigurationError."""
    candidate = (explicit or "").strip()
    if candidate:
        return candidate

    for name in TOKEN_ENV_VARS:
        candidate = os.environ.get(name, "").strip()
        if candidate:
            logger.debug("Using GitHub token from %s", name)
            return candidate

    github_cfg = config.get("github", {})
    if isinstance(github_cfg, dict):
        candidate = _resolve_env_ref(str(github_cfg.get("token") or "").strip() or None) or ""
        if candidate:
            logger.debug("Using GitHub token from config file")
            return candidate

    raise ConfigurationError("GH_TOKEN env var is required")


def _config_str(section: dict, key: str, source: str) -> Optional[str]:
    """Return an optional string value from a config section."""
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError("must be a string", source=source)
    return value.strip() or None


def resolve_settings(
    *,
    token: Optional[str] = None,
    output: Optional[Path] = None,
    timeout: Optional[float] = None,
    api_url: Optional[str] = None,
    config_path: Optional[Path] = None,
    require_token: bool = True,
) -> Settings:
    """Merge CLI arguments, environment and config file into Settings.

    Raises ConfigurationError before any network activity when the token
    cannot be found, unless ``require_token`` is False (the token is then
    left empty).
    """
    config = load_config(config_path)
    github_cfg = config.get("github", {})
    if github_cfg is None:
        github_cfg = {}
    if not isinstance(github_cfg, dict):
        raise ConfigurationError("must be a mapping", source="github")

    try:
        resolved_token = resolve_token(token, config)
    except ConfigurationError:
        if require_token:
            raise
        resolved_token = ""

    try:
        resolved_timeout = float(
            timeout if timeout is not None else github_cfg.get("timeout", DEFAULT_TIMEOUT)
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError("must be a number", source="github.timeout") from e

    return Settings(
        token=resolved_token,
        api_url=(api_url or _config_str(github_cfg, "api_url", "github.api_url") or DEFAULT_API_URL).rstrip("/"),
        user_agent=_config_str(github_cfg, "user_agent", "github.user_agent") or DEFAULT_USER_AGENT,
        timeout=resolved_timeout,
        output=Path(output or _config_str(config, "output", "output") or DEFAULT_OUTPUT),
    )
