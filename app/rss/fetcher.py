"""Upstream podcast feed fetching."""

import logging

import httpx

from app.errors import FetchError

logger = logging.getLogger(__name__)


class FeedFetcher:
    """Fetches the raw XML of a single podcast feed.

    No retries are attempted; a failed fetch fails the request.
    """

    def __init__(self, url: str, timeout: float = 15):
        """Initialize the fetcher.

        Args:
            url: Absolute URL of the podcast RSS feed
            timeout: Transport timeout in seconds
        """
        self.url = url
        self.timeout = timeout

    async def fetch(self) -> bytes:
        """
        Download the feed document.

        Returns:
            The complete response body, undecoded. The XML declaration, not
            the HTTP charset, decides how it is decoded.

        Raises:
            FetchError: On transport failure or a non-success status
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                body = response.content
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Feed fetch returned {e.response.status_code}",
                extra={"feed_url": self.url, "status_code": e.response.status_code},
            )
            raise FetchError(f"status {e.response.status_code}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(
                f"Feed fetch failed: {e!r}", extra={"feed_url": self.url}
            )
            raise FetchError(str(e) or type(e).__name__) from e

        logger.info(
            "Fetched feed", extra={"feed_url": self.url, "body_bytes": len(body)}
        )
        return body
