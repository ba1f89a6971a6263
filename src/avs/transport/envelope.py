"""
Envelope wire codec — bytes <-> Message.

Parsing only checks the top-level shape ({"header": {...}, "payload": ...}).
The payload is kept as raw JSON bytes and decoded later, leniently, by
`typed()`.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import from_json, to_json

from avs.errors import DecodeError, EncodeError
from avs.models.message import Message
from avs.models.variants import Variant


class WireEnvelope(BaseModel):
    model_config = ConfigDict(strict=True)

    header: Optional[dict[str, str]] = None
    payload: Any = None


def _to_message(wire: WireEnvelope) -> Message:
    payload = None if wire.payload is None else to_json(wire.payload)
    return Message(header=wire.header or {}, payload=payload)


def _decode_error(e: ValidationError) -> DecodeError:
    return DecodeError(
        f"Invalid message envelope: {e.error_count()} error(s), first: {e.errors()[0]['msg']}",
        details={"errors": e.errors(include_url=False, include_context=False)},
    )


def parse_message(data: Union[bytes, str]) -> Message:
    """Parse wire bytes into a Message. Raises DecodeError on malformed structure.

    The payload is kept as compact JSON re-encoded from the parsed value:
    whitespace is dropped, strings are written as UTF-8 and numbers in their
    canonical form (`1e3` becomes `1000.0`). Key order and values are kept.
    """
    try:
        return _to_message(WireEnvelope.model_validate_json(data))
    except ValidationError as e:
        raise _decode_error(e) from e


def parse_message_dict(raw: Mapping[str, Any]) -> Message:
    """Parse an already decoded envelope (e.g. delivered as a dict by a transport)."""
    try:
        return _to_message(WireEnvelope.model_validate(raw))
    except ValidationError as e:
        raise _decode_error(e) from e


def message_to_dict(message: Union[Message, Variant]) -> dict[str, Any]:
    """Build the wire dict. Variants re-encode their typed payload."""
    out: dict[str, Any] = {"header": dict(message.message.header)}
    if isinstance(message, Variant):
        out["payload"] = message.payload.to_wire()
    elif message.payload is not None:
        try:
            out["payload"] = from_json(message.payload)
        except ValueError as e:
            raise EncodeError(f"Payload of {message} is not valid JSON: {e}") from e
    return out


def serialize_message(message: Union[Message, Variant]) -> bytes:
    return to_json(message_to_dict(message))
