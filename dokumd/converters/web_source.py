"""
Remote DokuWiki Page Source

Fetches the raw wiki source of a page from a running DokuWiki instance,
using its ``do=export_raw`` action, so it can be converted like a file.
"""

from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

import requests


class WikiFetchError(Exception):
    """Raised when a remote wiki page cannot be fetched."""
    pass


class WikiPageSource:
    """Fetches DokuWiki pages over HTTP."""

    DEFAULT_TIMEOUT = 30
    EXPORT_PARAM = ("do", "export_raw")
    HEADERS = {
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        )
    }

    @staticmethod
    def can_handle(source: str) -> bool:
        """Check if the source looks like a URL."""
        try:
            parsed = urlparse(source)
            return parsed.scheme in ("http", "https") and bool(parsed.netloc)
        except ValueError:
            return False

    @classmethod
    def raw_export_url(cls, url: str) -> str:
        """Add ``do=export_raw`` to a page URL unless it is already there."""
        parsed = urlparse(url)
        query = parse_qsl(parsed.query, keep_blank_values=True)
        if cls.EXPORT_PARAM in query:
            return url
        query = [(k, v) for k, v in query if k != "do"]
        query.append(cls.EXPORT_PARAM)
        return urlunparse(parsed._replace(query=urlencode(query)))

    @classmethod
    def fetch(cls, url: str, timeout: int = DEFAULT_TIMEOUT) -> str:
        """
        Fetch the raw DokuWiki source of a page.

        Args:
            url: Page URL, e.g. ``https://wiki.example.com/doku.php?id=start``.
            timeout: Request timeout in seconds.

        Returns:
            The page's wiki text.

        Raises:
            WikiFetchError: If the request fails or returns an error status.
        """
        export_url = cls.raw_export_url(url)
        try:
            response = requests.get(export_url, headers=cls.HEADERS, timeout=timeout, allow_redirects=True)
            response.raise_for_status()
        except requests.RequestException as e:
            raise WikiFetchError(f"Could not fetch {export_url}: {e}") from e
        return response.text

    @staticmethod
    def page_name(url: str) -> str:
        """Generate a .md filename from a page URL."""
        parsed = urlparse(url)
        page_id = dict(parse_qsl(parsed.query)).get("id")
        if not page_id:
            page_id = parsed.path.rstrip("/").rsplit("/", 1)[-1] or "start"
            if page_id == "doku.php":
                page_id = "start"
        page_id = page_id.replace(":", "_")
        safe = "".join(c if c.isalnum() or c in "-_" else "_" for c in page_id)
        return f"{safe}.md"
