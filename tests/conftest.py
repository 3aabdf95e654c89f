"""
Pytest configuration and shared fixtures.

The network is never touched: every fetcher is built on an httpx.MockTransport
that serves payloads from an in-memory route table.
"""
import asyncio

import httpx
import pytest

from model_fetcher.model_client import ModelCache, ModelFetcher

TEST_URL_TEMPLATE = "https://models.test/raw/model_{league_code}.txt"


class FakeModelHost:
    """
    Stand-in for the static model host.

    routes maps league code -> (status, body); unknown codes get a 404.
    Every request is recorded in `requests`.
    """

    def __init__(self):
        self.routes: dict[str, tuple[int, str]] = {}
        self.requests: list[httpx.Request] = []
        self.unreachable = False
        self.redirects: dict[str, tuple[int, str]] = {}

    def serve(self, league_code: str, body: str, status: int = 200) -> None:
        self.routes[league_code] = (status, body)

    def redirect(self, path: str, location: str, status: int = 302) -> None:
        """Answer requests for `path` with a redirect to `location`."""
        self.redirects[path] = (status, location)

    def requests_for(self, league_code: str) -> int:
        suffix = f"/model_{league_code}.txt"
        return sum(1 for r in self.requests if r.url.path.endswith(suffix))

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        # yield once so concurrent fetches interleave like real network I/O
        await asyncio.sleep(0)
        if self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)

        if request.url.path in self.redirects:
            status, location = self.redirects[request.url.path]
            return httpx.Response(status, headers={"Location": location})

        name = request.url.path.rsplit("/", 1)[-1]
        league_code = name[len("model_"):-len(".txt")]
        status, body = self.routes.get(league_code, (404, "Not Found"))
        return httpx.Response(status, text=body)


@pytest.fixture
def model_host():
    return FakeModelHost()


@pytest.fixture
def cache():
    return ModelCache()


@pytest.fixture
def make_fetcher(model_host, cache):
    """Factory for fetchers wired to the fake host."""

    def _make(shared_cache: ModelCache = None) -> ModelFetcher:
        client = httpx.AsyncClient(transport=httpx.MockTransport(model_host.handler))
        return ModelFetcher(
            cache=shared_cache if shared_cache is not None else cache,
            url_template=TEST_URL_TEMPLATE,
            client=client,
        )

    return _make


@pytest.fixture
def fetcher(make_fetcher):
    return make_fetcher()
