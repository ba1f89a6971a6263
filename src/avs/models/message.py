"""
Generic message envelope — the header + payload shape shared by contexts,
events and directives.

A Message is always valid: it holds the header and the raw payload bytes
exactly as received or constructed. Use `typed()` to get a more specific
variant for known message kinds.
"""

import uuid
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from avs.models.namespaces import HeaderKey

if TYPE_CHECKING:
    from avs.typed import TypedMessage


class Message(BaseModel):
    """A general structure for contexts, events and directives."""

    model_config = ConfigDict(frozen=True)

    header: dict[str, str] = Field(default_factory=dict)
    payload: Optional[bytes] = None  # raw JSON, not yet decoded

    @field_validator("header")
    @classmethod
    def _copy_header(cls, value: dict[str, str]) -> dict[str, str]:
        # Never share a header dict with the caller or another message.
        return dict(value)

    @property
    def message(self) -> "Message":
        return self

    @property
    def namespace(self) -> str:
        return self.header.get(HeaderKey.NAMESPACE, "")

    @property
    def name(self) -> str:
        return self.header.get(HeaderKey.NAME, "")

    @property
    def message_id(self) -> str:
        return self.header.get(HeaderKey.MESSAGE_ID, "")

    @property
    def dialog_request_id(self) -> str:
        return self.header.get(HeaderKey.DIALOG_REQUEST_ID, "")

    def discriminator(self) -> str:
        """Return the namespace and name as a single string, e.g. "System.Exception"."""
        return f"{self.namespace}.{self.name}"

    def typed(self) -> "TypedMessage":
        from avs.typed import typed
        return typed(self)

    def __str__(self) -> str:
        return self.discriminator()


def new_message_id() -> str:
    return str(uuid.uuid4())


def new_context(namespace: str, name: str) -> Message:
    """Create a Message suited for being used as a context value."""
    return Message(header={HeaderKey.NAMESPACE: namespace, HeaderKey.NAME: name})


def new_event(namespace: str, name: str, message_id: str, dialog_request_id: str = "") -> Message:
    """Create a Message suited for being used as an event value.

    dialogRequestId is only added to the header when a non-empty value is given.
    """
    header = {
        HeaderKey.NAMESPACE: namespace,
        HeaderKey.NAME: name,
        HeaderKey.MESSAGE_ID: message_id,
    }
    if dialog_request_id:
        header[HeaderKey.DIALOG_REQUEST_ID] = dialog_request_id
    return Message(header=header)
