"""Phone numbers normalized for JSON serialization.

Upstream payloads carry phone numbers in whatever shape a human typed them:
"555-555-5555", "(510) 864-1234", "+1 555-555-5555". PhoneNumber parses all
of them into a libphonenumber value and always displays the international
format, so "555-555-5555" and "+1-555-555-5555" compare equal and both render
as "+1 555-555-5555".

Numbers without an explicit country code are assumed North American (+1).
An empty or whitespace-only string is an absent number that renders as "".
"""

from __future__ import annotations

from typing import Any

import phonenumbers
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

DEFAULT_COUNTRY_PREFIX = "+1"
_STRIP = str.maketrans("", "", "-() ")


class PhoneNumber:
    """An optional, normalized phone number."""

    __slots__ = ("number",)

    def __init__(self, number: phonenumbers.PhoneNumber | None = None) -> None:
        self.number = number

    @classmethod
    def parse(cls, text: str) -> PhoneNumber:
        """Parse a loosely formatted phone number.

        Raises:
            ValueError: The text is not empty and is not a phone number.
        """
        if not text.strip():
            return cls(None)
        if not text.strip().startswith("+"):
            text = f"{DEFAULT_COUNTRY_PREFIX}{text}"
        text = text.translate(_STRIP)
        try:
            return cls(phonenumbers.parse(text, None))
        except phonenumbers.NumberParseException as e:
            raise ValueError(f"invalid phone number `{text}`: {e}") from e

    def is_empty(self) -> bool:
        return self.number is None

    def __bool__(self) -> bool:
        return self.number is not None

    def __str__(self) -> str:
        if self.number is None:
            return ""
        return phonenumbers.format_number(
            self.number, phonenumbers.PhoneNumberFormat.INTERNATIONAL
        )

    def __repr__(self) -> str:
        return f"PhoneNumber({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PhoneNumber):
            return self.number == other.number
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    @classmethod
    def _validate(cls, value: Any) -> PhoneNumber:
        if isinstance(value, PhoneNumber):
            return value
        if value is None:
            return cls(None)
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError("a phone number string")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "phone"}
