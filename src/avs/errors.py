"""
AVS message error types.

Only structural wire problems surface as errors. Payload mismatches and
unknown message kinds are handled leniently and never raise.
"""

from typing import Any, Optional


class AVSError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class DecodeError(AVSError):
    """Raised when wire bytes cannot be read as a header + payload envelope."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("decode_error", message, details)


class EncodeError(AVSError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("encode_error", message, details)
