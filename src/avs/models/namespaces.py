"""
Protocol namespaces and message names.
"""


class Namespace:
    AUDIO_PLAYER = "AudioPlayer"
    SPEECH_RECOGNIZER = "SpeechRecognizer"
    SPEECH_SYNTHESIZER = "SpeechSynthesizer"
    SYSTEM = "System"


class Name:
    # AudioPlayer
    CLEAR_QUEUE = "ClearQueue"
    PLAY = "Play"
    PLAYBACK_STATE = "PlaybackState"
    STOP = "Stop"
    # SpeechRecognizer
    EXPECT_SPEECH = "ExpectSpeech"
    EXPECT_SPEECH_TIMED_OUT = "ExpectSpeechTimedOut"
    RECOGNIZE = "Recognize"
    # SpeechSynthesizer
    SPEAK = "Speak"
    # System
    EXCEPTION = "Exception"
    SYNCHRONIZE_STATE = "SynchronizeState"


class HeaderKey:
    NAMESPACE = "namespace"
    NAME = "name"
    MESSAGE_ID = "messageId"
    DIALOG_REQUEST_ID = "dialogRequestId"
