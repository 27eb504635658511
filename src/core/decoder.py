"""Content decoding.

The content endpoint wraps file bytes in a JSON envelope with a base64
`content` field. GitHub wraps that base64 at 60 columns, so line breaks are
dropped before the strict decode.
"""

from __future__ import annotations

import base64
import binascii
import logging

import pydantic

from core.domain.errors import DecodeError
from core.domain.models import ContentEnvelope

logger = logging.getLogger(__name__)


def decode_envelope(raw_body: bytes | str) -> str:
    """Return the encoded `content` field of a content-endpoint response."""

    if not raw_body:
        raise DecodeError("empty response")

    try:
        envelope = ContentEnvelope.model_validate_json(raw_body)
    except pydantic.ValidationError as exc:
        raise DecodeError("malformed JSON") from exc

    return envelope.content


def decode_content_field(encoded: str) -> bytes:
    """Decode the base64 `content` field into the template bytes."""

    compact = "".join(encoded.split())
    if compact == "":
        raise DecodeError("language not found")

    try:
        payload = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError("invalid base64") from exc

    logger.debug("Decoded %d template bytes", len(payload))
    return payload


def decode_response(raw_body: bytes | str) -> bytes:
    """Full decode pipeline: envelope, then content field."""

    return decode_content_field(decode_envelope(raw_body))
