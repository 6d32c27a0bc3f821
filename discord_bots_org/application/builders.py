"""
Builders for the optional parts of requests and for widget URLs.

Every builder is single use: `build()` consumes it, and touching it again
afterwards raises BuilderConsumedError instead of silently producing a
second, possibly stale, result.
"""

import logging
from typing import Dict, List, Tuple

import httpx

from . import endpoints
from .exceptions import BuilderConsumedError, InvalidUrlError

logger = logging.getLogger(__name__)

MAX_LIMIT = 500


def _ensure_non_negative(name: str, value: int):
    if value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value}.")


class _Builder:
    """Holds the accumulated parameters and the consumed flag."""

    def __init__(self):
        self._params: Dict[str, str] = {}
        self._consumed = False

    def _ensure_usable(self):
        if self._consumed:
            raise BuilderConsumedError(
                f"{self.__class__.__name__} was already built and cannot be reused."
            )

    def _set(self, key: str, value: str):
        self._ensure_usable()
        self._params[key] = value
        return self

    def _consume(self) -> List[Tuple[str, str]]:
        self._ensure_usable()
        self._consumed = True
        return list(self._params.items())

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "open"
        return f"<{self.__class__.__name__} {state} {self._params!r}>"


class BotSearch(_Builder):
    """
    Builder to filter the bots returned by a search.

    Example:
        params = BotSearch().offset(10).limit(20).build()
    """

    def limit(self, limit: int) -> "BotSearch":
        """The amount of bots to return. Values above 500 are clamped."""
        _ensure_non_negative("limit", limit)
        if limit > MAX_LIMIT:
            logger.debug(f"Clamping search limit {limit} to {MAX_LIMIT}.")
            limit = MAX_LIMIT
        return self._set("limit", str(limit))

    def offset(self, offset: int) -> "BotSearch":
        """The amount of bots to skip."""
        _ensure_non_negative("offset", offset)
        return self._set("offset", str(offset))

    def search(self, query: str) -> "BotSearch":
        return self._set("search", str(query))

    def sort(self, field: str, ascending: bool = True) -> "BotSearch":
        """The field to sort by; descending order prefixes it with '-'."""
        prefix = "" if ascending else "-"
        return self._set("sort", f"{prefix}{field}")

    def build(self) -> List[Tuple[str, str]]:
        """Consumes the builder into URL query parameters."""
        return self._consume()


class _Widget(_Builder):

    def __init__(self, bot_id: int):
        super().__init__()
        self.bot_id = bot_id

    def build(self) -> str:
        """
        Consumes the builder into the widget URL.

        Raises:
            InvalidUrlError: If the options cannot be encoded into a URL.
        """
        params = self._consume()
        uri = endpoints.widget(self.bot_id)
        try:
            url = httpx.URL(uri, params=params)
        except httpx.InvalidURL as e:
            raise InvalidUrlError(f"Cannot build widget URL for {uri}: {e}") from e
        return str(url)


class LargeWidget(_Widget):
    """Builder for the URL of a large bot widget."""

    def top_color(self, value: str) -> "LargeWidget":
        return self._set("topcolor", value)

    def middle_color(self, value: str) -> "LargeWidget":
        return self._set("middlecolor", value)

    def username_color(self, value: str) -> "LargeWidget":
        return self._set("usernamecolor", value)

    def certified_color(self, value: str) -> "LargeWidget":
        return self._set("certifiedcolor", value)

    def data_color(self, value: str) -> "LargeWidget":
        return self._set("datacolor", value)

    def label_color(self, value: str) -> "LargeWidget":
        return self._set("labelcolor", value)


class SmallWidget(_Widget):
    """Builder for the URL of a small bot widget."""

    def avatar_background(self, value: str) -> "SmallWidget":
        return self._set("avatarbg", value)

    def left_color(self, value: str) -> "SmallWidget":
        return self._set("leftcolor", value)

    def left_text_color(self, value: str) -> "SmallWidget":
        return self._set("lefttextcolor", value)

    def right_color(self, value: str) -> "SmallWidget":
        return self._set("rightcolor", value)

    def right_text_color(self, value: str) -> "SmallWidget":
        return self._set("righttextcolor", value)
