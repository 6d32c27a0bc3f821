"""
Infrastructure-specific helpers providing cross-cutting concerns like
translating transport failures into the library's exceptions.
"""

import contextlib
import logging
from typing import Iterator

import httpx

from ..application.exceptions import InvalidUrlError, TransportFailureError

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def translate_http_errors(url: str) -> Iterator[None]:
    """
    Re-raises httpx failures around a request as library errors.

    Usable in both sync and async code, since the wrapped block is plain
    `with` scope.

    Raises:
        InvalidUrlError: If httpx rejects the URL or its parameters.
        TransportFailureError: If the request did not produce a response.
    """
    try:
        yield
    except httpx.InvalidURL as e:
        logger.warning(f"Invalid URL {url}: {e}")
        raise InvalidUrlError(f"Invalid URL {url}: {e}") from e
    except httpx.HTTPError as e:
        logger.warning(
            f"Request to {url} failed with {type(e).__name__}: {e}"
        )
        raise TransportFailureError(
            f"Request to {url} failed: {type(e).__name__}: {e}"
        ) from e
