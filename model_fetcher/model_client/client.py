"""
HTTP client for league models.
Downloads Base64 encoded model files and keeps the decoded bytes in memory.
"""
import base64
import binascii
import httpx
from typing import Optional

from model_fetcher.core.config import settings
from model_fetcher.core.logging import get_logger
from model_fetcher.model_client.cache import ModelCache
from model_fetcher.model_client.errors import DecodeFailure, FetchFailure

logger = get_logger("model_client")

# ASCII whitespace allowed inside a payload (line wraps, trailing newline)
_PAYLOAD_WHITESPACE = str.maketrans("", "", "\t\n\f\r ")

# Marks an argument the caller did not pass
_UNSET = object()

# Singleton instance
_fetcher: Optional["ModelFetcher"] = None


def decode_model_payload(league_code: str, payload: str) -> bytes:
    """
    Decode a Base64 model payload (standard alphabet, padded).

    Tab, newline, form feed, carriage return and space are ignored; any
    other character outside the alphabet raises DecodeFailure.
    """
    try:
        return base64.b64decode(payload.translate(_PAYLOAD_WHITESPACE), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeFailure(league_code, str(e)) from e


class ModelFetcher:
    """
    Fetches league models and caches them per league code.

    Usage:
        async with ModelFetcher() as fetcher:
            model_bytes = await fetcher.get_model_data("E0")

    Concurrent misses for the same league code are not merged: each one
    downloads and the last write wins.
    """

    def __init__(
        self,
        cache: ModelCache = None,
        url_template: str = None,
        timeout=_UNSET,
        client: httpx.AsyncClient = None,
    ):
        """
        Initialize the fetcher.

        Args:
            cache: Cache to read and populate (default: a fresh empty cache)
            url_template: URL with a {league_code} placeholder (default from settings)
            timeout: Request timeout in seconds, None for no timeout (default from settings)
            client: Pre-built HTTP client; it is not closed by close()
        """
        self.cache = cache if cache is not None else ModelCache()
        self.url_template = url_template or settings.model_url_template
        self.timeout: Optional[float] = (
            settings.model_request_timeout if timeout is _UNSET else timeout
        )
        self._client: Optional[httpx.AsyncClient] = client
        self._owns_client = client is None
        logger.debug(f"ModelFetcher initialized with url_template={self.url_template}")

    async def __aenter__(self) -> "ModelFetcher":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
            )
            self._owns_client = True
        return self._client

    async def close(self):
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def model_url(self, league_code: str) -> str:
        """Build the download URL for a league code."""
        return self.url_template.format(league_code=league_code)

    async def get_model_data(self, league_code: str) -> bytes:
        """
        Return the decoded model for a league code.

        The first call downloads and decodes the model; later calls are
        served from the cache without touching the network. Failed calls
        leave the cache untouched.

        Raises:
            FetchFailure: non-success HTTP status (after redirects), unusable URL
                or unreachable host
            DecodeFailure: response body is not valid Base64
        """
        cached = self.cache.get(league_code)
        if cached is not None:
            logger.debug(f"Returning cached model for {league_code}")
            return cached

        url = self.model_url(league_code)
        client = await self._get_client()

        try:
            try:
                response = await client.get(url, follow_redirects=True)
            except (httpx.RequestError, httpx.InvalidURL) as e:
                raise FetchFailure(league_code, url) from e

            if not response.is_success:
                raise FetchFailure(league_code, url, status_code=response.status_code)

            model_bytes = decode_model_payload(league_code, response.text)
        except (FetchFailure, DecodeFailure) as e:
            logger.error(f"Error fetching or decoding model for {league_code}: {e}")
            raise

        self.cache.set(league_code, model_bytes)
        logger.info(f"Fetched model for {league_code} ({len(model_bytes)} bytes)")

        return self.cache.get(league_code)


def get_model_fetcher() -> ModelFetcher:
    """Get singleton model fetcher instance."""
    global _fetcher
    if _fetcher is None:
        _fetcher = ModelFetcher()
    return _fetcher


async def get_model_data(league_code: str) -> bytes:
    """Fetch a league model through the shared process-wide fetcher."""
    return await get_model_fetcher().get_model_data(league_code)
