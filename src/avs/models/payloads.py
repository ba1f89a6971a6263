"""
Payload shapes for the known message kinds.

Payloads are decoded leniently: a field whose wire value has the wrong type
keeps its zero value while the remaining fields still decode, and a payload
that is not a JSON object at all decodes to an all-zero model. Decoding
never raises.
"""

import logging
import math
from datetime import timedelta
from enum import Enum
from typing import Annotated, Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, Strict, ValidationError, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

CONTENT_ID_PREFIX = "cid:"

# Finite JSON numbers only, "5000" is not a timeout.
Milliseconds = Annotated[float, Strict(), Field(allow_inf_nan=False)]

LENIENT = "lenient"


class ClearBehavior(str, Enum):
    CLEAR_ENQUEUED = "CLEAR_ENQUEUED"
    CLEAR_ALL = "CLEAR_ALL"


class PlayBehavior(str, Enum):
    REPLACE_ALL = "REPLACE_ALL"
    ENQUEUE = "ENQUEUE"
    REPLACE_ENQUEUED = "REPLACE_ENQUEUED"


class PlayerActivity(str, Enum):
    IDLE = "IDLE"
    PLAYING = "PLAYING"
    PAUSED = "PAUSED"
    BUFFER_UNDERRUN = "BUFFER_UNDERRUN"
    FINISHED = "FINISHED"
    STOPPED = "STOPPED"


def milliseconds_to_timedelta(milliseconds: float) -> timedelta:
    """Convert float milliseconds to a timedelta, clamped to the timedelta range."""
    if math.isnan(milliseconds):
        return timedelta(0)
    try:
        return timedelta(milliseconds=milliseconds)
    except OverflowError:
        return timedelta.max if milliseconds > 0 else timedelta.min


def content_id(url: str) -> str:
    """Return the content id of a "cid:" url, or "" for any other url."""
    if not url.startswith(CONTENT_ID_PREFIX):
        return ""
    return url[len(CONTENT_ID_PREFIX):]


class WirePayload(BaseModel):
    """Base for payload models: camelCase on the wire, zero value on mismatch when decoded."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def _zero_on_mismatch(cls, value: Any, handler: Any, info: ValidationInfo) -> Any:
        # Only payloads decoded from the wire are lenient.
        if not (info.context or {}).get(LENIENT):
            return handler(value)
        try:
            return handler(value)
        except ValidationError as e:
            logger.debug("%s.%s: keeping zero value (%s)", cls.__name__, info.field_name, e.errors()[0]["msg"])
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


P = TypeVar("P", bound=WirePayload)


def decode_payload(model: type[P], raw: Optional[bytes]) -> P:
    """Decode raw payload bytes into `model`, falling back to zero values."""
    if not raw:
        return model()
    try:
        return model.model_validate_json(raw, context={LENIENT: True})
    except ValidationError as e:
        logger.debug("Could not decode %s: %s", model.__name__, e)
        return model()


# AudioPlayer

class ProgressReport(WirePayload):
    progress_report_delay_in_milliseconds: Milliseconds = 0.0
    progress_report_interval_in_milliseconds: Milliseconds = 0.0


class Stream(WirePayload):
    url: str = ""
    stream_format: str = ""
    offset_in_milliseconds: Milliseconds = 0.0
    expiry_time: str = ""
    progress_report: ProgressReport = Field(default_factory=ProgressReport)
    token: str = ""
    expected_previous_token: str = ""

    def content_id(self) -> str:
        return content_id(self.url)

    def offset(self) -> timedelta:
        return milliseconds_to_timedelta(self.offset_in_milliseconds)


class AudioItem(WirePayload):
    audio_item_id: str = ""
    stream: Stream = Field(default_factory=Stream)


class ClearQueuePayload(WirePayload):
    clear_behavior: Optional[ClearBehavior] = None


class PlayPayload(WirePayload):
    audio_item: AudioItem = Field(default_factory=AudioItem)
    play_behavior: Optional[PlayBehavior] = None


class PlaybackStatePayload(WirePayload):
    token: str = ""
    offset_in_milliseconds: Milliseconds = 0.0
    player_activity: Optional[PlayerActivity] = None


# SpeechRecognizer

class ExpectSpeechPayload(WirePayload):
    timeout_in_milliseconds: Milliseconds = 0.0


class RecognizePayload(WirePayload):
    profile: str = ""
    format: str = ""


# SpeechSynthesizer

class SpeakPayload(WirePayload):
    format: str = ""
    url: str = ""


# System

class ExceptionPayload(WirePayload):
    code: str = ""
    description: str = ""


class EmptyPayload(WirePayload):
    """Payload of ExpectSpeechTimedOut, Stop and SynchronizeState."""
