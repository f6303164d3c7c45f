"""Resolve Bootstrap versions to tag metadata from the GitHub REST API."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lessport._http import HttpClient
from lessport.config import LessPortConfig
from lessport.errors import ResolutionError


@dataclass(frozen=True)
class TagData:
    """A single repository tag."""

    name: str
    zipball_url: str = ""
    tarball_url: str = ""
    commit_sha: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> TagData:
        return cls(
            name=data["name"],
            zipball_url=data.get("zipball_url", ""),
            tarball_url=data.get("tarball_url", ""),
            commit_sha=(data.get("commit") or {}).get("sha", ""),
        )


def _matches(tag_name: str, version: str) -> bool:
    wanted = version[1:] if version.startswith("v") else version
    return tag_name in (wanted, f"v{wanted}")


def fetch_tag_data(
    version: str | None = None,
    *,
    client: HttpClient,
    config: LessPortConfig | None = None,
) -> TagData:
    """Return the tag for *version*, or the newest tag when *version* is empty."""
    cfg = config or LessPortConfig()
    url = f"{cfg.api_base.rstrip('/')}/repos/{cfg.repo}/tags"
    tags = client.get_json(url, params={"per_page": 100})
    if not isinstance(tags, list) or not tags:
        raise ResolutionError(f"No tags found for {cfg.repo}")

    if not version:
        return TagData.from_api(tags[0])

    for tag in tags:
        if _matches(tag.get("name", ""), version):
            return TagData.from_api(tag)
    raise ResolutionError(f"No tag named {version!r} in {cfg.repo}")
