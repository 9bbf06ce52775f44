"""Release lookup and asset download against the GitHub releases API."""

from __future__ import annotations

import json
import os
import threading
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

API_PREFIX = "http://api.github.com/repos/"
_GITHUB_MARKER = "github.com/"
_CHUNK_SIZE = 64 * 1024

REQUEST_HEADERS = {
    "Accept": "application/vnd.github.v3+json",
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/605.1.15 "
        "(KHTML, like Gecko) Chrome/136.0.7103.114 Safari/605.1.15"
    ),
    "Accept-Charset": "utf-8",
    "Content-Type": "application/json; charset=utf-8",
}

Opener = Callable[..., Any]
ProgressCallback = Callable[[int, int], None]


@dataclass
class Asset:
    """A downloadable file attached to a release."""

    name: str = ""
    size: int = 0
    updated_at: str = ""
    browser_download_url: str = ""


@dataclass
class Release:
    """A published release with its notes and assets."""

    tag_name: str = ""
    assets: list[Asset] = field(default_factory=list)
    body: str = ""


def url_convert(url: str) -> str:
    """Turn a repository page URL into its releases API URL, or "" if it is not GitHub."""
    pos = url.find(_GITHUB_MARKER)
    if pos == -1:
        return ""
    repo_path = url[pos + len(_GITHUB_MARKER):]
    if repo_path.endswith("/"):
        repo_path = repo_path[:-1]
    return f"{API_PREFIX}{repo_path}/releases"


def _field(obj: dict[str, Any], key: str, default: Any) -> Any:
    if key not in obj:
        return default
    value = obj[key]
    if isinstance(default, str):
        if not isinstance(value, str):
            raise ValueError(f"field {key!r} is not a string")
        return value
    if isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"field {key!r} is not a number")
        return int(value)
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} is not an array")
    return value


def _require_object(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{what} is not an object")
    return value


def parse_releases(text: str | bytes) -> list[Release]:
    """Parse a releases API response; malformed JSON or a non-array yields []."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return []
    if not isinstance(data, list):
        return []

    releases = []
    for entry in data:
        rel = _require_object(entry, "release")
        assets = []
        for raw_asset in _field(rel, "assets", []):
            item = _require_object(raw_asset, "asset")
            assets.append(
                Asset(
                    name=_field(item, "name", ""),
                    size=_field(item, "size", 0),
                    updated_at=_field(item, "updated_at", ""),
                    browser_download_url=_field(item, "browser_download_url", ""),
                )
            )
        releases.append(
            Release(
                tag_name=_field(rel, "tag_name", ""),
                assets=assets,
                body=_field(rel, "body", ""),
            )
        )
    return releases


def _status_of(response: Any) -> int | None:
    status = getattr(response, "status", None)
    if status is None and hasattr(response, "getcode"):
        status = response.getcode()
    return status


class ClientRequest:
    """Client for fetching releases and downloading their assets."""

    def __init__(self, opener: Opener | None = None, timeout: float = 30.0) -> None:
        self._opener = opener or urllib.request.urlopen
        self._timeout = timeout
        self._cancel = threading.Event()
        self._download_lock = threading.Lock()

    def _fetch_body(self, api_url: str) -> bytes | None:
        try:
            request = urllib.request.Request(api_url, headers=REQUEST_HEADERS, method="GET")
            with self._opener(request, timeout=self._timeout) as response:
                if _status_of(response) != 200:
                    return None
                return response.read()
        except (OSError, ValueError):
            return None

    def get_latest_release(self, url: str) -> Release:
        """Return the newest release of the repository at *url*, or an empty Release."""
        body = self._fetch_body(url_convert(url) + "?per_page=1")
        if not body:
            return Release()
        releases = parse_releases(body)
        return releases[0] if releases else Release()

    def get_releases(self, url: str) -> list[Release]:
        """Return every release listed for the repository at *url*; [] on failure."""
        body = self._fetch_body(url_convert(url))
        if not body:
            return []
        return parse_releases(body)

    def download_asset(
        self,
        asset: Asset,
        destination: str | os.PathLike[str],
        progress_cb: ProgressCallback | None = None,
    ) -> bool:
        """Download *asset* to *destination*, reporting progress.

        Returns True when finished and False when cancelled; a cancelled
        download leaves no partial file behind.
        """
        target = Path(destination)
        with self._download_lock:
            self._cancel.clear()
            request = urllib.request.Request(
                asset.browser_download_url,
                headers={"User-Agent": REQUEST_HEADERS["User-Agent"]},
            )
            with self._opener(request, timeout=self._timeout) as response:
                status = _status_of(response)
                if status != 200:
                    raise ConnectionError(f"download failed with status {status}")
                length = response.headers.get("Content-Length") if response.headers else None
                total = int(length) if length else asset.size
                downloaded = 0
                with target.open("wb") as out:
                    while chunk := response.read(_CHUNK_SIZE):
                        out.write(chunk)
                        downloaded += len(chunk)
                        if progress_cb is not None:
                            progress_cb(downloaded, total)
                        if self._cancel.is_set():
                            break
            if self._cancel.is_set():
                target.unlink(missing_ok=True)
                return False
            return True

    def cancel_download(self) -> None:
        """Ask a running download to stop."""
        self._cancel.set()