"""CLI: avs new synchronize-state|expect-speech-timed-out|recognize|playback-state"""

from datetime import timedelta
from typing import Optional

import click

from avs.models.message import new_message_id
from avs.models.payloads import PlayerActivity
from avs.models.variants import (
    new_expect_speech_timed_out,
    new_playback_state,
    new_recognize,
    new_synchronize_state,
)
from avs.transport.envelope import serialize_message


def _echo(message) -> None:
    click.echo(serialize_message(message).decode())


@click.group()
def new():
    """Build an outbound message and print it as wire JSON."""


@new.command("synchronize-state")
@click.option("--message-id", default=None, help="Defaults to a random UUID.")
def synchronize_state(message_id: Optional[str]):
    """System.SynchronizeState event."""
    _echo(new_synchronize_state(message_id))


@new.command("expect-speech-timed-out")
@click.option("--message-id", default=None, help="Defaults to a random UUID.")
def expect_speech_timed_out(message_id: Optional[str]):
    """SpeechRecognizer.ExpectSpeechTimedOut event."""
    _echo(new_expect_speech_timed_out(message_id))


@new.command("recognize")
@click.option("--message-id", default=None, help="Defaults to a random UUID.")
@click.option("--dialog-request-id", default="")
def recognize(message_id: Optional[str], dialog_request_id: str):
    """SpeechRecognizer.Recognize event."""
    _echo(new_recognize(message_id or new_message_id(), dialog_request_id))


@new.command("playback-state")
@click.option("--token", default="")
@click.option("--offset-ms", type=float, default=0.0, show_default=True)
@click.option(
    "--activity",
    type=click.Choice([a.value for a in PlayerActivity]),
    default=PlayerActivity.IDLE.value,
    show_default=True,
)
def playback_state(token: str, offset_ms: float, activity: str):
    """AudioPlayer.PlaybackState context."""
    _echo(new_playback_state(token, timedelta(milliseconds=offset_ms), activity))
