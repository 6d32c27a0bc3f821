"""
Pydantic models for the structure of the Discord Bot List API payloads.

These models serve as a strict contract for the JSON exchanged with the
service. Responses are validated here, at the infrastructure layer, so any
deviation surfaces as a decode error instead of leaking half-parsed data to
the caller. All models are frozen once built.
"""

from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class _ApiModel(BaseModel):
    """Response models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Bot(_ApiModel):
    """A bot listing."""

    avatar: Optional[str] = None
    certified_bot: bool = False
    date: Optional[datetime] = None
    def_avatar: Optional[str] = None
    # May contain HTML and/or Markdown.
    description_long: Optional[str] = Field(default=None, alias="longdesc")
    description_short: Optional[str] = Field(default=None, alias="shortdesc")
    discriminator: str
    github: Optional[str] = None
    id: str
    invite: Optional[str] = None
    lib: Optional[str] = None
    owners: List[str] = Field(default_factory=list)
    points: Optional[int] = None
    prefix: Optional[str] = None
    support: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    username: str
    vanity: Optional[str] = None
    website: Optional[str] = None

    @property
    def main_owner(self) -> Optional[str]:
        """The primary owner, listed first by the service."""
        return self.owners[0] if self.owners else None


class BotStats(_ApiModel):
    """Server and shard counts of a bot. `shards` may be empty."""

    server_count: Optional[int] = None
    shards: List[int] = Field(default_factory=list)
    shard_count: Optional[int] = None


class DiscordUser(_ApiModel):
    """The minimal identity of a Discord user."""

    avatar: Optional[str] = None
    discriminator: int
    id: str
    username: str


class VoteIds(RootModel[List[int]]):
    """The ids of the users who voted for a bot."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)


class VoteUsers(RootModel[List[DiscordUser]]):
    """The users who voted for a bot."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)


BotVotes = Union[VoteIds, VoteUsers]


def decode_bot_votes(data: Any) -> BotVotes:
    """
    Decodes a votes payload, which the service sends untagged.

    An array of numbers is read as ids, otherwise as user objects. An empty
    array is read as ids.

    Raises:
        ValidationError: If the payload is neither shape.
    """
    try:
        return VoteIds.model_validate(data, strict=True)
    except ValidationError:
        return VoteUsers.model_validate(data)


class SearchResponse(_ApiModel, Generic[T]):
    """A page of search results."""

    count: int
    limit: int
    offset: int
    results: List[T]
    total: int


class Social(_ApiModel):
    """Social handles of a user; unset handles are empty strings."""

    github: str = ""
    instagram: str = ""
    reddit: str = ""
    twitter: str = ""
    youtube: str = ""


class User(_ApiModel):
    """A user profile on the service."""

    admin: bool = False
    avatar: Optional[str] = None
    banner: Optional[str] = None
    bio: Optional[str] = None
    certified_dev: bool = False
    colour: Optional[str] = Field(default=None, alias="color")
    def_avatar: Optional[str] = None
    discriminator: str
    id: str
    mod: bool = False
    social: Social = Field(default_factory=Social)
    supporter: bool = False
    username: str
    web_mod: bool = False

    @field_validator("social", mode="before")
    @classmethod
    def _default_social(cls, value: Any) -> Any:
        return Social() if value is None else value


class ResponseUserVoted(_ApiModel):
    """Body of the vote check endpoint; `voted` is 1 for a vote in 24h."""

    voted: int


# --- Request payloads ---

class _PayloadModel(BaseModel):

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> Dict[str, Any]:
        """The JSON body posted to the stats endpoint."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CumulativeStats(_PayloadModel):
    """The guild count of the whole bot."""

    total: int = Field(ge=0, serialization_alias="server_count")
    shard_count: Optional[int] = Field(default=None, ge=0)


class ShardStat(_PayloadModel):
    """The guild count of a single shard."""

    guild_count: int = Field(ge=0, serialization_alias="server_count")
    shard_count: int = Field(ge=0)
    shard_id: int = Field(ge=0)


class ShardsStats(_PayloadModel):
    """The guild count of every shard; the list index is the shard id."""

    shards: List[int]


ShardStats = Union[CumulativeStats, ShardStat, ShardsStats]
