"""HTTP implementations of the Discord Bot List API client."""

from typing import Any

import httpx

from .base_client import BaseClient, Route
from .decorators import translate_http_errors


class ApiClient(BaseClient):
    """
    A blocking client; every operation returns its result directly.

    Example:
        client = ApiClient(httpx.Client())
        bot = client.get_bot(270198738570444801)
    """

    def __init__(self, client: httpx.Client):
        """Initializes the client with a shared httpx.Client."""
        super().__init__(client)

    def _call(self, route: Route) -> Any:
        """Sends the request and decodes the response."""
        request = self._build_request(route)
        with translate_http_errors(route.url):
            response = self.client.send(request)
        return self._process_response(route, response)


class AsyncApiClient(BaseClient):
    """
    A non-blocking client; every operation returns an awaitable.

    Example:
        client = AsyncApiClient(httpx.AsyncClient())
        bot = await client.get_bot(270198738570444801)
    """

    def __init__(self, client: httpx.AsyncClient):
        """Initializes the client with a shared httpx.AsyncClient."""
        super().__init__(client)

    async def _call(self, route: Route) -> Any:
        """Sends the request and decodes the response."""
        request = self._build_request(route)
        with translate_http_errors(route.url):
            response = await self.client.send(request)
        return self._process_response(route, response)
