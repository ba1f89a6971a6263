"""
Typed conversion — turn a generic Message into the most specific known variant.

Usually the result is matched on its type:

    msg = typed(message)
    if isinstance(msg, Speak):
        print(f"We got a spoken response in format {msg.payload.format}.")

Unknown message kinds come back as the original Message, so newer protocol
messages keep flowing through without a variant of their own.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Protocol, Union, runtime_checkable

from avs.models.message import Message
from avs.models.variants import (
    ClearQueue,
    ExpectSpeech,
    ExpectSpeechTimedOut,
    Play,
    PlaybackState,
    Recognize,
    Speak,
    Stop,
    SynchronizeState,
    SystemException,
    Variant,
)

logger = logging.getLogger(__name__)

TypedMessage = Union[
    Message,
    ClearQueue,
    ExpectSpeech,
    ExpectSpeechTimedOut,
    Play,
    PlaybackState,
    Recognize,
    Speak,
    Stop,
    SynchronizeState,
    SystemException,
]


@runtime_checkable
class MessageLike(Protocol):
    """Anything that exposes an underlying Message and can be typed."""

    @property
    def message(self) -> Message: ...

    def typed(self) -> TypedMessage: ...


REGISTRY: Mapping[str, type[Variant]] = MappingProxyType({
    "AudioPlayer.ClearQueue": ClearQueue,
    "AudioPlayer.Play": Play,
    "AudioPlayer.PlaybackState": PlaybackState,
    "AudioPlayer.Stop": Stop,
    "SpeechRecognizer.ExpectSpeech": ExpectSpeech,
    "SpeechRecognizer.ExpectSpeechTimedOut": ExpectSpeechTimedOut,
    "SpeechRecognizer.Recognize": Recognize,
    "SpeechSynthesizer.Speak": Speak,
    "System.Exception": SystemException,
    "System.SynchronizeState": SynchronizeState,
})


def typed(message: MessageLike) -> TypedMessage:
    """Return a more specific type for this context, event or directive. Never raises."""
    raw = message.message
    variant = REGISTRY.get(raw.discriminator())
    if variant is None:
        logger.debug("No variant for %s, keeping generic message", raw)
        return raw
    return variant.from_message(raw)  # type: ignore[return-value]
