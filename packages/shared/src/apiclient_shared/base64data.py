"""Base64 data that encodes URL-safe but decodes from many base64 dialects.

Different clients and libraries hand us base64 in different shapes: padded
or not, standard or URL-safe alphabet, MIME-wrapped with line breaks. Decoding
tries each dialect in a fixed order and takes the first strict match. Strict
means the input must be the canonical encoding of the decoded bytes in that
dialect: correct padding, only alphabet characters, and zero trailing bits.
Without the trailing-bits check, arbitrary strings such as "abcdefghij" would
decode to garbage instead of being rejected.

Encoding always produces URL-safe base64 without padding.
"""

from __future__ import annotations

import base64
import binascii
import re
from collections.abc import Callable
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

_STANDARD = b"+/"
_URLSAFE = b"-_"
_MIME_WHITESPACE = re.compile(r"[\r\n\t ]")


def _strict_decode(text: str, altchars: bytes, padded: bool) -> bytes:
    """Decode one dialect, raising ValueError unless the input is canonical."""
    raw = text.encode("ascii")
    if padded:
        if len(raw) % 4:
            raise ValueError("padded base64 length must be a multiple of 4")
        data = base64.b64decode(raw, altchars=altchars, validate=True)
    else:
        if b"=" in raw:
            raise ValueError("unpadded base64 must not contain '='")
        data = base64.b64decode(raw + b"=" * (-len(raw) % 4), altchars=altchars, validate=True)

    canonical = base64.b64encode(data, altchars=altchars)
    if not padded:
        canonical = canonical.rstrip(b"=")
    if canonical != raw:
        raise ValueError("non-canonical base64 (alphabet or trailing bits)")
    return data


def _mime_decode(text: str) -> bytes:
    return _strict_decode(_MIME_WHITESPACE.sub("", text), _STANDARD, padded=True)


# Order matters: the first dialect that accepts the input wins.
ALLOWED_DECODING_FORMATS: list[tuple[str, Callable[[str], bytes]]] = [
    ("base64", lambda s: _strict_decode(s, _STANDARD, padded=True)),
    ("base64url", lambda s: _strict_decode(s, _URLSAFE, padded=True)),
    ("base64url-nopad", lambda s: _strict_decode(s, _URLSAFE, padded=False)),
    ("base64-mime", _mime_decode),
    ("base64-nopad", lambda s: _strict_decode(s, _STANDARD, padded=False)),
]


def decode(text: str) -> bytes:
    """Decode base64 in any supported dialect."""
    for _name, decoder in ALLOWED_DECODING_FORMATS:
        try:
            return decoder(text)
        except (ValueError, binascii.Error, UnicodeEncodeError):
            continue
    raise ValueError(f"Could not decode base64 data: {text}")


def encode(data: bytes) -> str:
    """Encode as URL-safe base64 without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


class Base64Data:
    """Binary payload that serializes to base64.

    Usable directly as a Pydantic field type: validates from str (any dialect),
    bytes, or Base64Data, and serializes to URL-safe unpadded base64.
    """

    __slots__ = ("data",)

    def __init__(self, data: bytes = b"") -> None:
        self.data = bytes(data)

    @classmethod
    def from_str(cls, text: str) -> Base64Data:
        return cls(decode(text))

    def is_empty(self) -> bool:
        return not self.data

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        return encode(self.data)

    def __repr__(self) -> str:
        return f"Base64Data({self.data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Base64Data):
            return self.data == other.data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.data)

    @classmethod
    def _validate(cls, value: Any) -> Base64Data:
        if isinstance(value, Base64Data):
            return value
        if isinstance(value, (bytes, bytearray)):
            return cls(bytes(value))
        if isinstance(value, str):
            return cls.from_str(value)
        raise ValueError("a base64 encoded string")

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
        return {"type": "string", "format": "byte"}
