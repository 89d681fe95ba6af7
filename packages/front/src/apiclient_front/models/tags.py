"""Tag models."""

import enum

from apiclient_shared import ApiModel
from pydantic import Field

from apiclient_front.models.common import FrontPage, Links


class Highlight(str, enum.Enum):
    """Tag highlight colour."""

    GREY = "grey"
    PINK = "pink"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    LIGHT_BLUE = "light-blue"
    BLUE = "blue"
    PURPLE = "purple"


class TagResponse(ApiModel):
    api_links: Links | None = Field(default=None, alias="_links")
    id: str
    name: str | None = None
    description: str | None = None
    highlight: Highlight | None = None
    is_private: bool | None = None
    is_visible_in_conversation_lists: bool | None = None
    created_at: float | None = None
    updated_at: float | None = None


class CreateTag(ApiModel):
    name: str
    description: str | None = None
    highlight: Highlight | None = None
    is_visible_in_conversation_lists: bool | None = None


class UpdateTag(ApiModel):
    name: str | None = None
    description: str | None = None
    highlight: Highlight | None = None
    parent_tag_id: str | None = None
    is_visible_in_conversation_lists: bool | None = None


class ListTagsResponse(FrontPage):
    results: list[TagResponse] = Field(default_factory=list, alias="_results")
