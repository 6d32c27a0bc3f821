"""
Base class for the Discord Bot List API clients.

Every API operation is written once here. An operation only describes its
request as a `Route`; the concrete client decides how the request is sent
by implementing `_call`, synchronously for ApiClient and as a coroutine for
AsyncApiClient. Building, status checking and decoding are shared.
"""

import dataclasses
import logging
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

import httpx
from pydantic import ValidationError

from ..application import endpoints
from ..application.exceptions import (
    BadResponseError,
    InvalidHeaderValueError,
    InvalidResponseError,
    JsonDecodeError,
    UnauthorizedError,
)
from .api_models import (
    Bot,
    BotStats,
    ResponseUserVoted,
    SearchResponse,
    ShardStats,
    User,
    decode_bot_votes,
)
from .decorators import translate_http_errors

Params = Sequence[Tuple[str, str]]
HttpClient = Union[httpx.Client, httpx.AsyncClient]


@dataclasses.dataclass(frozen=True)
class Route:
    """A fully described API request and how to decode its answer."""

    method: str
    url: str
    decoder: Optional[Callable[[Any], Any]]
    params: Optional[Params] = None
    authenticated: bool = False
    token: Optional[str] = None
    body: Optional[Dict[str, Any]] = None


def _decode_vote_check(data: Any) -> bool:
    return ResponseUserVoted.model_validate(data).voted == 1


class BaseClient:
    """A base client that holds the injected httpx client."""

    def __init__(self, client: HttpClient):
        """
        Initializes the base client.

        Args:
            client: An httpx client. It may be shared with the rest of the
                    application and is never closed by this library.
        """
        self.client = client
        self.logger = logging.getLogger(self.__class__.__name__)

    # --- Operations ---

    def get_bot(self, bot_id: int):
        """Retrieves information about a bot. Returns a Bot."""
        return self._call(Route("GET", endpoints.bot(bot_id), Bot.model_validate))

    def get_bots(self, params: Optional[Params] = None):
        """
        Retrieves a page of bots matching a search.

        Args:
            params: The result of `BotSearch.build()`, if any filter is set.

        Returns:
            A SearchResponse of Bot.
        """
        return self._call(
            Route(
                "GET",
                endpoints.bots(),
                SearchResponse[Bot].model_validate,
                params=params,
            )
        )

    def get_bot_stats(self, bot_id: int):
        """Retrieves the server and shard counts of a bot. Returns BotStats."""
        return self._call(
            Route("GET", endpoints.bot_stats(bot_id), BotStats.model_validate)
        )

    def get_bot_vote_check(self, auth: str, bot_id: int, user_id: int):
        """
        Retrieves whether a user voted for a bot in the last 24 hours.

        Usable for bots with over 1000 votes. Returns a bool.
        """
        return self._call(
            Route(
                "GET",
                endpoints.bot_vote_check(bot_id, user_id),
                _decode_vote_check,
                authenticated=True,
                token=auth,
            )
        )

    def get_bot_votes(self, auth: str, bot_id: int):
        """
        Retrieves who has voted for a bot. Returns BotVotes.

        Note: Bots with over 1000 votes per month cannot use this; webhooks
        must be used instead.
        """
        return self._call(
            Route(
                "GET",
                endpoints.bot_votes(bot_id),
                decode_bot_votes,
                authenticated=True,
                token=auth,
            )
        )

    def get_user(self, user_id: int):
        """Retrieves information about a user. Returns a User."""
        return self._call(Route("GET", endpoints.user(user_id), User.model_validate))

    def post_stats(self, auth: str, bot_id: int, stats: ShardStats):
        """Posts a bot's guild counts. Returns None."""
        return self._call(
            Route(
                "POST",
                endpoints.bot_stats(bot_id),
                None,
                authenticated=True,
                token=auth,
                body=stats.to_payload(),
            )
        )

    # --- Shared plumbing ---

    def _call(self, route: Route):
        raise NotImplementedError

    def _auth_headers(self, token: Optional[str]) -> Dict[str, str]:
        """
        Validates the token before it goes into the Authorization header.

        Raises:
            InvalidHeaderValueError: If the token is empty, not ASCII, or
                                     contains control characters.
        """
        if not token or not token.strip():
            raise InvalidHeaderValueError("Authorization token is empty.")
        if not token.isascii() or any(ord(c) < 32 or ord(c) == 127 for c in token):
            raise InvalidHeaderValueError(
                "Authorization token contains characters not allowed in a header."
            )
        return {"Authorization": token}

    def _build_request(self, route: Route) -> httpx.Request:
        """Builds the httpx request described by a route."""
        headers = self._auth_headers(route.token) if route.authenticated else None
        self.logger.debug(f"{route.method} {route.url} params={route.params}")
        with translate_http_errors(route.url):
            return self.client.build_request(
                route.method,
                route.url,
                params=route.params,
                headers=headers,
                json=route.body,
            )

    def _raise_for_status(self, response: httpx.Response):
        """Maps unsuccessful status codes to response errors."""
        if response.is_success:
            return

        status = response.status_code
        message = f"{response.request.method} {response.request.url} returned {status}"
        self.logger.warning(message)

        if status == 400:
            raise BadResponseError(message, response)
        if status in (401, 403):
            raise UnauthorizedError(message, response)
        raise InvalidResponseError(message, response)

    def _process_response(self, route: Route, response: httpx.Response) -> Any:
        """Checks the status and decodes the body with the route's decoder."""
        self._raise_for_status(response)

        if route.decoder is None:
            return None

        try:
            data = response.json()
        except ValueError as e:
            raise JsonDecodeError(
                f"Response from {route.url} is not valid JSON: {e}", response
            ) from e

        try:
            return route.decoder(data)
        except ValidationError as e:
            raise JsonDecodeError(
                f"Response from {route.url} does not match the expected model: {e}",
                response,
            ) from e
