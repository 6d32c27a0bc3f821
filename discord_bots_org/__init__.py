"""
An unofficial client for the Discord Bot List API, with blocking and
non-blocking clients over httpx.

Example:
    import httpx
    from discord_bots_org import ApiClient

    client = ApiClient(httpx.Client())
    bot = client.get_bot(270198738570444801)
    print(bot.username)
"""

from .application.builders import BotSearch, LargeWidget, SmallWidget
from .application.exceptions import (
    BadResponseError,
    BuilderConsumedError,
    DiscordBotsOrgError,
    ErrorKind,
    InfrastructureError,
    InvalidHeaderValueError,
    InvalidResponseError,
    InvalidUrlError,
    JsonDecodeError,
    ResponseError,
    TransportFailureError,
    UnauthorizedError,
)
from .infrastructure.api_client import ApiClient, AsyncApiClient
from .infrastructure.api_models import (
    Bot,
    BotStats,
    BotVotes,
    CumulativeStats,
    DiscordUser,
    SearchResponse,
    ShardStat,
    ShardStats,
    ShardsStats,
    Social,
    User,
    VoteIds,
    VoteUsers,
)

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "AsyncApiClient",
    "BadResponseError",
    "Bot",
    "BotSearch",
    "BotStats",
    "BotVotes",
    "BuilderConsumedError",
    "CumulativeStats",
    "DiscordBotsOrgError",
    "DiscordUser",
    "ErrorKind",
    "InfrastructureError",
    "InvalidHeaderValueError",
    "InvalidResponseError",
    "InvalidUrlError",
    "JsonDecodeError",
    "LargeWidget",
    "ResponseError",
    "SearchResponse",
    "ShardStat",
    "ShardStats",
    "ShardsStats",
    "SmallWidget",
    "Social",
    "TransportFailureError",
    "UnauthorizedError",
    "User",
    "VoteIds",
    "VoteUsers",
]
