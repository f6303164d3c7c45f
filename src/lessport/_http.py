"""HTTP client wrapper around httpx."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import httpx

from lessport.config import LessPortConfig
from lessport.errors import NetworkError, TransportError

log = logging.getLogger(__name__)


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps errors into lessport exceptions.

    Redirects are not followed automatically; :meth:`download` follows them
    itself, up to ``config.max_redirects`` times.
    """

    def __init__(
        self,
        config: LessPortConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or LessPortConfig()
        t = self._config.timeout
        self._client = httpx.Client(
            headers={
                "User-Agent": self._config.user_agent,
                "Accept-Encoding": "gzip,deflate",
            },
            timeout=httpx.Timeout(connect=t.connect, read=t.read, write=t.read, pool=t.connect),
            follow_redirects=False,
            transport=transport,
        )

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """Send a GET request and return the decoded JSON body.

        Raises :class:`TransportError` on a status of 300 or above or a non-JSON body.
        """
        try:
            resp = self._client.get(
                url, params=params, headers={"Accept": "application/vnd.github+json"}
            )
        except httpx.HTTPError as exc:
            raise NetworkError(str(exc), cause=exc) from exc

        if resp.status_code >= 300:
            raise TransportError(
                resp.text or f"Server returned {resp.status_code}",
                status_code=resp.status_code,
                body=resp.text,
                headers=dict(resp.headers),
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise TransportError(
                f"Expected a JSON body from {url}",
                status_code=resp.status_code,
                body=resp.text,
                headers=dict(resp.headers),
                cause=exc,
            ) from exc

    def download(self, url: str, download_path: str, download_name: str) -> Path:
        """Stream the archive at *url* to ``<download_path><download_name>.zip``.

        Each redirect response is followed by exactly one new request to its
        ``Location``. Returns the resolved absolute path of the archive.
        """
        if not url:
            raise ValueError(f"Invalid URL: {url}")
        if not os.path.exists(download_path):
            raise FileNotFoundError(f"File path does not exist: {download_path}")

        log.info("Downloading %s to %s%s...", url, download_path, download_name)
        archive = Path(f"{download_path}{download_name}.zip")

        for _ in range(self._config.max_redirects + 1):
            try:
                with self._client.stream("GET", url) as resp:
                    if resp.is_redirect:
                        url = str(resp.url.join(resp.headers["location"]))
                        log.info("Redirecting to %s...", url)
                        continue

                    if not resp.is_success:
                        body = resp.read().decode("utf-8", errors="replace")
                        log.warning("Server returned %d", resp.status_code)
                        log.debug("Response headers: %s", dict(resp.headers))
                        raise TransportError(
                            body,
                            status_code=resp.status_code,
                            body=body,
                            headers=dict(resp.headers),
                        )

                    with archive.open("wb") as fh:
                        for chunk in resp.iter_bytes():
                            fh.write(chunk)
            except httpx.HTTPError as exc:
                raise NetworkError(str(exc), cause=exc) from exc

            resolved = archive.resolve()
            log.info("Downloaded to %s", os.path.relpath(resolved))
            return resolved

        raise TransportError(
            f"Too many redirects (more than {self._config.max_redirects})"
        )

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()
