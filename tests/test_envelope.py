"""Envelope wire codec."""

import json

import pytest

from avs import (
    DecodeError,
    EncodeError,
    Message,
    PlayerActivity,
    Speak,
    new_context,
    new_playback_state,
    new_synchronize_state,
    message_to_dict,
    parse_message,
    parse_message_dict,
    serialize_message,
    typed,
)
from datetime import timedelta

SPEAK = (
    b'{"header": {"namespace": "SpeechSynthesizer", "name": "Speak", "messageId": "m1",'
    b' "dialogRequestId": "d1"}, "payload": {"format": "AUDIO_MPEG", "url": "cid:abc"}}'
)


class TestParse:
    def test_parse_directive(self):
        m = parse_message(SPEAK)
        assert m.discriminator() == "SpeechSynthesizer.Speak"
        assert m.dialog_request_id == "d1"
        assert json.loads(m.payload) == {"format": "AUDIO_MPEG", "url": "cid:abc"}

    def test_parse_then_typed(self):
        v = typed(parse_message(SPEAK))
        assert isinstance(v, Speak)
        assert v.content_id() == "abc"

    def test_parse_str(self):
        assert parse_message(SPEAK.decode()).name == "Speak"

    def test_missing_payload(self):
        m = parse_message(b'{"header": {"namespace": "System", "name": "SynchronizeState"}}')
        assert m.payload is None

    def test_null_payload(self):
        assert parse_message(b'{"header": {}, "payload": null}').payload is None

    def test_missing_header(self):
        m = parse_message(b'{"payload": {}}')
        assert m.header == {}
        assert m.discriminator() == "."
        assert typed(m) is m

    def test_parse_dict(self):
        m = parse_message_dict({"header": {"namespace": "AudioPlayer", "name": "Stop"}, "payload": {}})
        assert m.discriminator() == "AudioPlayer.Stop"
        assert m.payload == b"{}"

    @pytest.mark.parametrize("data", [
        b"",
        b"not json",
        b'{"header": ',
        b"[]",
        b'"header"',
        b'{"header": {"namespace": 1, "name": "Speak"}}',
        b'{"header": ["namespace"]}',
    ])
    def test_malformed_structure(self, data):
        with pytest.raises(DecodeError) as exc_info:
            parse_message(data)
        assert exc_info.value.code == "decode_error"
        assert exc_info.value.details["errors"]

    def test_parse_dict_rejects_non_mapping(self):
        with pytest.raises(DecodeError):
            parse_message_dict(["header"])  # type: ignore[arg-type]


class TestSerialize:
    def test_context_without_payload(self):
        assert json.loads(serialize_message(new_context("AudioPlayer", "PlaybackState"))) == {
            "header": {"namespace": "AudioPlayer", "name": "PlaybackState"},
        }

    def test_event_with_empty_payload(self):
        assert message_to_dict(new_synchronize_state("m1")) == {
            "header": {"namespace": "System", "name": "SynchronizeState", "messageId": "m1"},
            "payload": {},
        }

    def test_variant_payload_is_re_encoded(self):
        v = new_playback_state("tok", timedelta(milliseconds=1500), PlayerActivity.PLAYING)
        assert json.loads(serialize_message(v)) == {
            "header": {"namespace": "AudioPlayer", "name": "PlaybackState"},
            "payload": {"token": "tok", "offsetInMilliseconds": 1500.0, "playerActivity": "PLAYING"},
        }

    def test_generic_message_keeps_raw_payload(self):
        m = Message(header={"namespace": "Alerts", "name": "SetAlert"}, payload=b'{"token": "t", "n": [1, 2]}')
        assert message_to_dict(m)["payload"] == {"token": "t", "n": [1, 2]}

    def test_round_trip_through_wire(self):
        v = new_playback_state("tok", timedelta(seconds=3), PlayerActivity.PAUSED)
        back = typed(parse_message(serialize_message(v)))
        assert back.payload == v.payload
        assert back.message.header == v.message.header

    def test_invalid_raw_payload(self):
        m = Message(header={"namespace": "Alerts", "name": "SetAlert"}, payload=b"{oops")
        with pytest.raises(EncodeError):
            serialize_message(m)


class TestPayloadBytes:
    def test_payload_is_compact_json(self):
        m = parse_message(b'{"header": {}, "payload": {"x": 1e3,  "s": "\\u00e9", "n": [1, 2]}}')
        assert m.payload == '{"x":1000.0,"s":"é","n":[1,2]}'.encode()
        assert json.loads(m.payload) == {"x": 1000.0, "s": "é", "n": [1, 2]}

    def test_huge_offset_from_wire(self):
        m = parse_message(
            b'{"header": {"namespace": "AudioPlayer", "name": "PlaybackState"},'
            b' "payload": {"offsetInMilliseconds": 1e20}}'
        )
        assert typed(m).offset() == timedelta.max
