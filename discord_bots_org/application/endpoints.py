"""URLs of the Discord Bot List API resources."""

BASE = "https://discordbots.org/api"


def bot(bot_id: int) -> str:
    return f"{BASE}/bots/{bot_id}"


def bot_stats(bot_id: int) -> str:
    return f"{BASE}/bots/{bot_id}/stats"


def bot_vote_check(bot_id: int, user_id: int) -> str:
    return f"{BASE}/bots/{bot_id}/check?userId={user_id}"


def bot_votes(bot_id: int) -> str:
    return f"{BASE}/bots/{bot_id}/votes"


def bots() -> str:
    return f"{BASE}/bots"


def user(user_id: int) -> str:
    return f"{BASE}/users/{user_id}"


def widget(bot_id: int) -> str:
    """The embeddable SVG widget of a bot. Only built, never fetched."""
    return f"{BASE}/widget/{bot_id}.svg"
