"""
avs-messages — typed message envelopes for the Alexa Voice Service device protocol.

Generic header + payload messages (contexts, events, directives) and their
strongly typed variants.
"""

from avs.errors import AVSError, DecodeError, EncodeError
from avs.models.message import Message, new_context, new_event, new_message_id
from avs.models.namespaces import HeaderKey, Name, Namespace
from avs.models.payloads import AudioItem, ClearBehavior, PlayBehavior, PlayerActivity, Stream
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
    new_expect_speech_timed_out,
    new_playback_state,
    new_recognize,
    new_synchronize_state,
)
from avs.typed import REGISTRY, MessageLike, TypedMessage, typed
from avs.transport.envelope import message_to_dict, parse_message, parse_message_dict, serialize_message

__version__ = "0.1.0"
__all__ = [
    "AVSError",
    "DecodeError",
    "EncodeError",
    "Message",
    "new_context",
    "new_event",
    "new_message_id",
    "HeaderKey",
    "Name",
    "Namespace",
    "AudioItem",
    "ClearBehavior",
    "PlayBehavior",
    "PlayerActivity",
    "Stream",
    "Variant",
    "ClearQueue",
    "ExpectSpeech",
    "ExpectSpeechTimedOut",
    "Play",
    "PlaybackState",
    "Recognize",
    "Speak",
    "Stop",
    "SynchronizeState",
    "SystemException",
    "new_expect_speech_timed_out",
    "new_playback_state",
    "new_recognize",
    "new_synchronize_state",
    "REGISTRY",
    "MessageLike",
    "TypedMessage",
    "typed",
    "message_to_dict",
    "parse_message",
    "parse_message_dict",
    "serialize_message",
]
