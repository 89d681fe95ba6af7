"""Pydantic base model for every request and response payload.

The upstream schemas mix naming styles (HubSpot is camelCase, Front prefixes
metadata with an underscore, Ramp is snake_case), so wire names are declared
as field aliases and Python code uses snake_case attributes. Either name is
accepted on input.

Fields the upstream API adds later are kept (extra="allow") rather than
rejected, so a schema addition never breaks deserialization.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """Base class for all DTOs."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict using wire names, with unset optional fields dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def __str__(self) -> str:
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True)
