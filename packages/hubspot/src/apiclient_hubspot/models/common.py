"""Base model and paging envelope shared by HubSpot APIs.

HubSpot's wire format is camelCase. Models declare snake_case attributes and
derive the camelCase aliases, so both spellings validate and request bodies
always serialize camelCase.
"""

from apiclient_shared import ApiModel, CursorPage
from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel


class HubSpotModel(ApiModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class NextPage(HubSpotModel):
    after: str
    link: str | None = None


class PreviousPage(HubSpotModel):
    before: str
    link: str | None = None


class Paging(HubSpotModel):
    next: NextPage | None = None
    prev: PreviousPage | None = None


class ForwardPage(HubSpotModel, CursorPage):
    """A `results` list with forward-only paging on `paging.next.after`."""

    paging: Paging | None = None

    def items(self) -> list:
        return list(getattr(self, "results", []))

    def next_cursor(self) -> str | None:
        if self.paging is None or self.paging.next is None:
            return None
        return self.paging.next.after


class ErrorDetail(HubSpotModel):
    message: str
    code: str | None = None
    sub_category: str | None = None
    in_: str | None = Field(default=None, alias="in")
    context: dict[str, list[str]] | None = None


class StandardError(HubSpotModel):
    """One failed item of a batch call."""

    status: str
    category: str
    message: str
    id: str | None = None
    sub_category: str | None = None
    context: dict[str, list[str]] = {}
    links: dict[str, str] = {}
    errors: list[ErrorDetail] = []
