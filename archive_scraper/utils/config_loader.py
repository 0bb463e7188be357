from __future__ import annotations

from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import yaml

from ..models import Selectors, SiteConfig


class ConfigError(Exception):
    """Raised when the configuration file is invalid or missing required fields."""


REQUIRED_FIELDS = {"root_url"}

_STRING_FIELDS = ("archive_path", "page_param", "user_agent", "default_author")
_SELECTOR_FIELDS = set(Selectors.__dataclass_fields__)


def _validate_site_dict(entry: dict) -> None:
    """Validate the ``site`` mapping from YAML.

    Required fields: root_url (http/https).
    Optional fields:
      - archive_path, page_param, user_agent, default_author: str
      - page_delay: number >= 0
      - timeout: number > 0
      - selectors: mapping[str, str] with keys from :class:`Selectors`
    """
    missing = REQUIRED_FIELDS - set(entry)
    if missing:
        raise ConfigError(f"Missing required fields: {sorted(missing)} in {entry}")

    # root_url
    url_str = str(entry["root_url"]).strip()
    parsed = urlparse(url_str)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Invalid root_url '{url_str}'. Must be absolute http(s) URL.")

    for name in _STRING_FIELDS:
        if entry.get(name) is not None and not isinstance(entry[name], str):
            raise ConfigError(f"'{name}' must be a string if provided")

    if entry.get("page_param") is not None and not entry["page_param"].strip():
        raise ConfigError("'page_param' must not be empty")

    # page_delay / timeout
    if entry.get("page_delay") is not None:
        delay = entry["page_delay"]
        if isinstance(delay, bool) or not isinstance(delay, (int, float)) or delay < 0:
            raise ConfigError("'page_delay' must be a number >= 0")
    if entry.get("timeout") is not None:
        timeout = entry["timeout"]
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError("'timeout' must be a number > 0")

    # selectors
    if entry.get("selectors") is not None:
        selectors = entry["selectors"]
        if not isinstance(selectors, dict) or not all(
            isinstance(k, str) and isinstance(v, str) and v.strip() for k, v in selectors.items()
        ):
            raise ConfigError("'selectors' must be a mapping of string keys to non-empty strings if provided")
        unknown = set(selectors) - _SELECTOR_FIELDS
        if unknown:
            raise ConfigError(
                "Unknown selectors: " + ", ".join(sorted(unknown)) + f". Allowed: {sorted(_SELECTOR_FIELDS)}"
            )


def _coerce_site(entry: dict) -> SiteConfig:
    root_url = str(entry["root_url"]).strip()
    if not root_url.endswith("/"):
        root_url += "/"
    kwargs = {name: str(entry[name]).strip() for name in _STRING_FIELDS if entry.get(name) is not None}
    archive_path = kwargs.get("archive_path")
    if archive_path is not None:
        kwargs["archive_path"] = archive_path.strip("/") + "/"
    if entry.get("page_delay") is not None:
        kwargs["page_delay"] = float(entry["page_delay"])
    if entry.get("timeout") is not None:
        kwargs["timeout"] = float(entry["timeout"])
    selectors = entry.get("selectors") or {}
    return SiteConfig(
        root_url=root_url,
        selectors=Selectors(**{k: v.strip() for k, v in selectors.items()}),
        **kwargs,
    )


def load_site_config(path: Optional[Path | str] = None) -> SiteConfig:
    """Load ``site.yaml`` into a typed :class:`SiteConfig`.

    YAML structure:
      - Top-level mapping
      - Key ``site``: mapping with fields
          - root_url: http/https URL (required)
          - archive_path: string (optional, default ``archive/``)
          - page_param: string (optional, default ``page``)
          - user_agent: string (optional)
          - default_author: string (optional)
          - page_delay: seconds between page fetches (optional, default 1.0)
          - timeout: request timeout in seconds (optional, default 30)
          - selectors: mapping of selector overrides (optional)

    Without a path the built-in defaults are returned. Unknown top-level keys
    are ignored for forward compatibility.
    """
    if path is None:
        return SiteConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Top-level YAML value must be a mapping")
    site_raw = data.get("site")
    if not isinstance(site_raw, dict):
        raise ConfigError("'site' must be a mapping in the YAML configuration")

    _validate_site_dict(site_raw)
    return _coerce_site(site_raw)
