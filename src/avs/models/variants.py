"""
Typed variants of the generic Message.

Each variant owns the Message it was built from (`variant.message`) together
with a decoded, strongly typed payload. The raw header and payload bytes stay
available on the underlying Message whatever the outcome of decoding.
"""

from datetime import timedelta
from typing import ClassVar, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from avs.models.message import Message, new_context, new_event, new_message_id
from avs.models.namespaces import HeaderKey, Name, Namespace
from avs.models.payloads import (
    ClearQueuePayload,
    EmptyPayload,
    ExceptionPayload,
    ExpectSpeechPayload,
    PlaybackStatePayload,
    PlayerActivity,
    PlayPayload,
    RecognizePayload,
    SpeakPayload,
    WirePayload,
    content_id,
    decode_payload,
    milliseconds_to_timedelta,
)

DEFAULT_RECOGNIZE_FORMAT = "AUDIO_L16_RATE_16000_CHANNELS_1"
DEFAULT_RECOGNIZE_PROFILE = "CLOSE_TALK"


class Variant(BaseModel):
    NAMESPACE: ClassVar[str]
    NAME: ClassVar[str]
    PAYLOAD: ClassVar[type[WirePayload]]

    model_config = ConfigDict(frozen=True)

    message: Message
    payload: WirePayload

    @classmethod
    def discriminator_key(cls) -> str:
        return f"{cls.NAMESPACE}.{cls.NAME}"

    @classmethod
    def from_message(cls, message: Message) -> "Variant":
        """Wrap `message`, decoding its payload as best as possible."""
        return cls(message=message, payload=decode_payload(cls.PAYLOAD, message.payload))

    @property
    def header(self) -> dict[str, str]:
        return self.message.header

    def discriminator(self) -> str:
        return self.message.discriminator()

    def typed(self) -> "Variant":
        return self

    def __str__(self) -> str:
        return self.discriminator()


# AudioPlayer

class ClearQueue(Variant):
    """The ClearQueue directive."""

    NAMESPACE = Namespace.AUDIO_PLAYER
    NAME = Name.CLEAR_QUEUE
    PAYLOAD = ClearQueuePayload

    payload: ClearQueuePayload = Field(default_factory=ClearQueuePayload)


class Play(Variant):
    """The Play directive."""

    NAMESPACE = Namespace.AUDIO_PLAYER
    NAME = Name.PLAY
    PAYLOAD = PlayPayload

    payload: PlayPayload = Field(default_factory=PlayPayload)

    def dialog_request_id(self) -> str:
        return self.message.header.get(HeaderKey.DIALOG_REQUEST_ID, "")

    def message_id(self) -> str:
        return self.message.header.get(HeaderKey.MESSAGE_ID, "")


class PlaybackState(Variant):
    """The PlaybackState context."""

    NAMESPACE = Namespace.AUDIO_PLAYER
    NAME = Name.PLAYBACK_STATE
    PAYLOAD = PlaybackStatePayload

    payload: PlaybackStatePayload = Field(default_factory=PlaybackStatePayload)

    def offset(self) -> timedelta:
        return milliseconds_to_timedelta(self.payload.offset_in_milliseconds)


class Stop(Variant):
    """The Stop directive."""

    NAMESPACE = Namespace.AUDIO_PLAYER
    NAME = Name.STOP
    PAYLOAD = EmptyPayload

    payload: EmptyPayload = Field(default_factory=EmptyPayload)


# SpeechRecognizer

class ExpectSpeech(Variant):
    """The ExpectSpeech directive."""

    NAMESPACE = Namespace.SPEECH_RECOGNIZER
    NAME = Name.EXPECT_SPEECH
    PAYLOAD = ExpectSpeechPayload

    payload: ExpectSpeechPayload = Field(default_factory=ExpectSpeechPayload)

    def timeout(self) -> timedelta:
        return milliseconds_to_timedelta(self.payload.timeout_in_milliseconds)


class ExpectSpeechTimedOut(Variant):
    """The ExpectSpeechTimedOut event."""

    NAMESPACE = Namespace.SPEECH_RECOGNIZER
    NAME = Name.EXPECT_SPEECH_TIMED_OUT
    PAYLOAD = EmptyPayload

    payload: EmptyPayload = Field(default_factory=EmptyPayload)


class Recognize(Variant):
    """The Recognize event."""

    NAMESPACE = Namespace.SPEECH_RECOGNIZER
    NAME = Name.RECOGNIZE
    PAYLOAD = RecognizePayload

    payload: RecognizePayload = Field(default_factory=RecognizePayload)


# SpeechSynthesizer

class Speak(Variant):
    """The Speak directive. The url usually points at an attached audio part ("cid:...")."""

    NAMESPACE = Namespace.SPEECH_SYNTHESIZER
    NAME = Name.SPEAK
    PAYLOAD = SpeakPayload

    payload: SpeakPayload = Field(default_factory=SpeakPayload)

    def content_id(self) -> str:
        return content_id(self.payload.url)


# System

class SystemException(Variant):
    """The System.Exception message."""

    NAMESPACE = Namespace.SYSTEM
    NAME = Name.EXCEPTION
    PAYLOAD = ExceptionPayload

    payload: ExceptionPayload = Field(default_factory=ExceptionPayload)


class SynchronizeState(Variant):
    """The SynchronizeState event."""

    NAMESPACE = Namespace.SYSTEM
    NAME = Name.SYNCHRONIZE_STATE
    PAYLOAD = EmptyPayload

    payload: EmptyPayload = Field(default_factory=EmptyPayload)


# Constructors for the messages the device sends itself.

def new_expect_speech_timed_out(message_id: Optional[str] = None) -> ExpectSpeechTimedOut:
    message = new_event(ExpectSpeechTimedOut.NAMESPACE, ExpectSpeechTimedOut.NAME, message_id or new_message_id())
    return ExpectSpeechTimedOut(message=message)


def new_playback_state(
    token: str, offset: timedelta, activity: Union[PlayerActivity, str],
) -> PlaybackState:
    """Build a PlaybackState context. The offset is stored as float milliseconds."""
    return PlaybackState(
        message=new_context(PlaybackState.NAMESPACE, PlaybackState.NAME),
        payload=PlaybackStatePayload(
            token=token,
            offset_in_milliseconds=offset.total_seconds() * 1000,
            player_activity=PlayerActivity(activity),
        ),
    )


def new_recognize(message_id: str, dialog_request_id: str) -> Recognize:
    return Recognize(
        message=new_event(Recognize.NAMESPACE, Recognize.NAME, message_id, dialog_request_id),
        payload=RecognizePayload(format=DEFAULT_RECOGNIZE_FORMAT, profile=DEFAULT_RECOGNIZE_PROFILE),
    )


def new_synchronize_state(message_id: Optional[str] = None) -> SynchronizeState:
    message = new_event(SynchronizeState.NAMESPACE, SynchronizeState.NAME, message_id or new_message_id())
    return SynchronizeState(message=message)
