"""Base64Data decoding across dialects and Pydantic integration."""

import random

import pytest
from apiclient_shared import ApiModel, Base64Data
from apiclient_shared.base64data import decode, encode
from pydantic import ValidationError


class Attachment(ApiModel):
    content: Base64Data


class TestDecode:
    @pytest.mark.parametrize(
        "text",
        ["aGkh+/+/", "aGkh-_-_", "aGkh\r\n+/+/"],
    )
    def test_accepts_dialects(self, text):
        assert decode(text) == b"hi!\xfb\xff\xbf"

    def test_nopad_standard_alphabet(self):
        assert decode("aGk/") == b"hi?"
        assert decode("aGk") == b"hi"

    def test_urlsafe_nopad(self):
        assert decode("_w") == b"\xff"

    def test_urlsafe_padded(self):
        assert decode("_w==") == b"\xff"
        assert decode("__4=") == b"\xff\xfe"

    def test_rejects_nonzero_trailing_bits(self):
        with pytest.raises(ValueError, match="Could not decode base64 data"):
            decode("abcdefghij")

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            decode("not base64!")

    def test_empty_string_is_empty_data(self):
        assert decode("") == b""


class TestEncode:
    def test_encodes_urlsafe_without_padding(self):
        assert encode(b"\xff\xfe") == "__4"

    def test_str_uses_encoding(self):
        assert str(Base64Data(b"hi")) == "aGk"


class TestBase64Data:
    def test_equality_compares_bytes(self):
        assert Base64Data.from_str("aGk=") == Base64Data(b"hi")
        assert hash(Base64Data(b"hi")) == hash(Base64Data.from_str("aGk"))

    def test_is_empty(self):
        assert Base64Data().is_empty()
        assert not Base64Data(b"x").is_empty()
        assert len(Base64Data(b"abc")) == 3

    def test_model_field_validates_and_serializes(self):
        attachment = Attachment.model_validate({"content": "aGVsbG8="})
        assert bytes(attachment.content) == b"hello"
        assert attachment.to_payload() == {"content": "aGVsbG8"}

    def test_model_field_accepts_bytes(self):
        attachment = Attachment(content=b"hello")
        assert attachment.content == Base64Data(b"hello")

    def test_model_field_rejects_invalid(self):
        with pytest.raises(ValidationError):
            Attachment.model_validate({"content": "abcdefghij"})

    def test_json_schema_format(self):
        content = Attachment.model_json_schema()["properties"]["content"]
        assert content["type"] == "string"
        assert content["format"] == "byte"


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------

ALL_BYTES = bytes(range(256))
_rng = random.Random(20240601)
RANDOM_SAMPLES = [bytes(_rng.getrandbits(8) for _ in range(n)) for n in range(64) for _ in range(4)]


class TestRoundTrip:
    @pytest.mark.parametrize("length", range(0, 40))
    def test_every_byte_value_at_each_length(self, length):
        for offset in range(0, 256, 7):
            data = (ALL_BYTES[offset:] + ALL_BYTES[:offset])[:length]
            assert decode(encode(data)) == data

    @pytest.mark.parametrize("data", RANDOM_SAMPLES)
    def test_random_bytes(self, data):
        assert decode(encode(data)) == data

    def test_all_byte_values(self):
        assert decode(encode(ALL_BYTES)) == ALL_BYTES

    @pytest.mark.parametrize("data", [b"", b"\x00", b"\xff\xfe", ALL_BYTES, *RANDOM_SAMPLES[::16]])
    def test_model_payload_round_trip(self, data):
        payload = Attachment(content=data).to_payload()
        assert payload == {"content": encode(data)}
        assert Attachment.model_validate(payload).content == Base64Data(data)
