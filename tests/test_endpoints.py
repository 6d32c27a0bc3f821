"""Unit tests for discord_bots_org.application.endpoints."""

from __future__ import annotations

from discord_bots_org.application import endpoints


def test_bot_endpoints() -> None:
    """Bot resources are formatted under the fixed API base."""

    assert endpoints.bot(1) == "https://discordbots.org/api/bots/1"
    assert endpoints.bot_stats(1) == "https://discordbots.org/api/bots/1/stats"
    assert endpoints.bot_votes(1) == "https://discordbots.org/api/bots/1/votes"
    assert endpoints.bots() == "https://discordbots.org/api/bots"


def test_bot_vote_check_embeds_user_id_query() -> None:
    assert (
        endpoints.bot_vote_check(1, 2)
        == "https://discordbots.org/api/bots/1/check?userId=2"
    )


def test_user_and_widget_endpoints() -> None:
    assert endpoints.user(5) == "https://discordbots.org/api/users/5"
    assert endpoints.widget(5) == "https://discordbots.org/api/widget/5.svg"


def test_endpoints_accept_full_64_bit_ids() -> None:
    """No range validation: the largest unsigned 64-bit id is formatted as is."""

    big = 2**64 - 1
    assert endpoints.bot(big) == f"https://discordbots.org/api/bots/{big}"


def test_endpoints_are_pure() -> None:
    assert endpoints.bot(1) == endpoints.bot(1)
