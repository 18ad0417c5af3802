"""HTTP client for the ComicWalker detail, viewer and image endpoints."""

from __future__ import annotations

import threading
from typing import Any

import requests
from requests_toolbelt.sessions import BaseUrlSession

from cwget.errors import DownloadCancelledError, RetrievalError

BASE_URL = "https://comic-walker.com/"

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/123.0.0.0 Safari/537.36 Edg/123.0.0.0"
)

DEFAULT_HEADERS = {
    "Accept": "*/*",
    "Accept-Language": "en-US,en;q=0.9",
    "Sec-Ch-Ua": '"Microsoft Edge";v="123", "Not:A-Brand";v="8", "Chromium";v="123"',
    "Sec-Ch-Ua-Mobile": "?0",
    "Sec-Ch-Ua-Platform": '"Windows"',
    "User-Agent": USER_AGENT,
}


class ComicWalkerClient:
    """Thin wrapper around a requests session that maps failures to RetrievalError."""

    def __init__(
        self,
        build_id: str,
        timeout: float = 30.0,
        session: requests.Session | None = None,
        stop_event: threading.Event | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            build_id: Next.js build id used in the series detail endpoint
            timeout: Timeout for every request, in seconds
            session: Session to send requests with; a BaseUrlSession is created if None
            stop_event: When set, every following request raises DownloadCancelledError
        """
        self.build_id = build_id
        self.timeout = timeout
        self.stop_event = stop_event
        self.session = session or BaseUrlSession(base_url=BASE_URL)
        self.session.headers.update(DEFAULT_HEADERS)

    def _make_request(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """Send a GET request and require a success status.

        Args:
            url: Endpoint path relative to the site root, or an absolute URL
            params: Query parameters
            headers: Additional headers

        Returns:
            Response object

        Raises:
            DownloadCancelledError: If the stop event is set
            RetrievalError: If the request fails or returns a non-2xx status
        """
        if self.stop_event is not None and self.stop_event.is_set():
            raise DownloadCancelledError("Download cancelled")

        try:
            response = self.session.get(url, params=params, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            return response
        except requests.exceptions.RequestException as e:
            raise RetrievalError(f"Request to {url} failed: {e}") from e

    def _get_json(self, url: str, params: dict[str, str], headers: dict[str, str] | None = None) -> Any:
        response = self._make_request(url, params=params, headers=headers)
        try:
            return response.json()
        except ValueError as e:
            raise RetrievalError(f"Response from {url} is not valid JSON") from e

    def detail_url(self, cid: str, episode: str) -> str:
        return f"/_next/data/{self.build_id}/detail/{cid}/episodes/{episode}.json"

    def get_series_detail(self, cid: str, episode: str) -> Any:
        """Fetch the series detail document.

        Args:
            cid: Series id (work code)
            episode: Episode id the detail page is opened on

        Returns:
            The parsed JSON document

        Raises:
            RetrievalError: If the document cannot be fetched or parsed
        """
        url = self.detail_url(cid, episode)
        params = {"workCode": cid, "episodeCode": episode, "episodeType": "first"}
        headers = {"Referer": BASE_URL + url.lstrip("/"), "X-Nextjs-Data": "1"}
        return self._get_json(url, params, headers)

    def get_page_manifest(self, episode_id: str) -> Any:
        """Fetch the viewer manifest listing a chapter's pages.

        Raises:
            RetrievalError: If the document cannot be fetched or parsed
        """
        params = {"episodeId": episode_id, "imageSizeType": "width:1284"}
        return self._get_json("/api/contents/viewer", params, {"Cache-Control": "no-cache"})

    def get_image(self, url: str) -> bytes:
        """Download the full body of a page image.

        Raises:
            RetrievalError: If the image cannot be fetched
        """
        return self._make_request(url).content
