"""
Dependency Injection container for the discord_bots_org clients.

This container uses the `dependency-injector` library to wire the shared
httpx clients and the API clients together, based on the package settings.
"""

from dependency_injector import containers, providers
import httpx

from ..settings import settings

from .api_client import ApiClient, AsyncApiClient


class Container(containers.DeclarativeContainer):
    """DI container for wiring the API clients."""

    config = providers.Object(settings)

    http_headers = providers.Dict(
        {"User-Agent": config.provided.http.user_agent},
    )

    http_client = providers.Singleton(
        httpx.Client,
        timeout=config.provided.http.timeout,
        headers=http_headers,
    )

    async_http_client = providers.Singleton(
        httpx.AsyncClient,
        timeout=config.provided.http.timeout,
        headers=http_headers,
    )

    api_client: providers.Factory[ApiClient] = providers.Factory(
        ApiClient,
        client=http_client,
    )

    async_api_client: providers.Factory[AsyncApiClient] = providers.Factory(
        AsyncApiClient,
        client=async_http_client,
    )
