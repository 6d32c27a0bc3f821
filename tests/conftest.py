"""Shared fixtures: canned API payloads and mock httpx transports."""

from __future__ import annotations

from typing import Callable, List

import httpx
import pytest


@pytest.fixture
def bot_id() -> int:
    """The id of the bot used across the tests."""

    return 270198738570444801


@pytest.fixture
def user_id() -> int:
    return 114941315417899012


@pytest.fixture
def bot_payload() -> dict:
    """A bot listing as the service returns it."""

    return {
        "defAvatar": "6debd47ed13483642cf09e832ed0bc1b",
        "invite": "https://discordapp.com/oauth2/authorize?client_id=270198738570444801",
        "website": "https://dabbot.org",
        "support": "kEvKkrR",
        "github": "https://github.com/dabbotorg",
        "longdesc": "<h1>dabBot</h1>",
        "shortdesc": "A music bot.",
        "prefix": ">>",
        "lib": "JDA",
        "clientid": "270198738570444801",
        "avatar": "ac31f0f6ff1ae7ed4b9f39b9c5a6de1f",
        "id": "270198738570444801",
        "discriminator": "7186",
        "username": "dabBot",
        "date": "2017-04-26T18:08:17.125Z",
        "server_count": 12000,
        "guilds": [],
        "shards": [],
        "monthlyPoints": 100,
        "points": 4200,
        "certifiedBot": True,
        "owners": ["114941315417899012", "190551803669118976"],
        "tags": ["Music", "Fun"],
        "legacy": False,
    }


@pytest.fixture
def user_payload() -> dict:
    """A user profile as the service returns it."""

    return {
        "discriminator": "0001",
        "avatar": "a_1241439d430def25c100dd28add2d42f",
        "id": "114941315417899012",
        "username": "Zeyla",
        "defAvatar": "322c936a8c8be1b803cd94861bdfa868",
        "bio": "Writes Rust.",
        "banner": None,
        "social": {"github": "zeyla", "twitter": "zeylahellyer"},
        "color": "FF00FF",
        "supporter": False,
        "certifiedDev": True,
        "mod": False,
        "webMod": False,
        "admin": False,
    }


@pytest.fixture
def discord_user_payload() -> dict:
    return {
        "username": "Zeyla",
        "discriminator": "0001",
        "id": "114941315417899012",
        "avatar": None,
    }


class Recorder:
    """Collects the requests a mock transport received."""

    def __init__(self):
        self.requests: List[httpx.Request] = []

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def mock_transport(recorder: Recorder) -> Callable[..., httpx.MockTransport]:
    """Builds a transport answering every request with the given response,
    or raising the given exception."""

    def factory(
        status_code: int = 200,
        json=None,
        content: bytes = None,
        exc: type = None,
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorder.requests.append(request)
            if exc is not None:
                raise exc("simulated failure", request=request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json)

        return httpx.MockTransport(handler)

    return factory
