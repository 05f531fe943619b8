"""NCCO action models.

Each action dumps to the JSON object the Voice API expects. A few caller
fields carry strings rather than their wire types (``loop`` on Talk and
Stream, ``start_on_enter`` on Conversation) so that "not set" can be told
apart from a zero value; ``prepare`` turns them into wire values.
"""

import logging
import re
from typing import Any, ClassVar, Literal

from pydantic import Field

from vonage_kit.ncco.base import WireModel
from vonage_kit.ncco.endpoints import Endpoint

logger = logging.getLogger(__name__)

DEFAULT_LOOP = 1

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_loop(loop: str) -> int:
    """Wire loop count for a caller-supplied string, defaulting to 1."""
    if not loop:
        return DEFAULT_LOOP
    value = int(loop) if _INTEGER.fullmatch(loop) else None
    if value is None or not _INT64_MIN <= value <= _INT64_MAX:
        logger.warning("Loop value %r is not an integer, using %d", loop, DEFAULT_LOOP)
        return DEFAULT_LOOP
    return value


def parse_start_on_enter(value: str) -> bool:
    """Only an explicit, case-insensitive ``"false"`` disables startOnEnter."""
    return value.lower() != "false"


class TalkAction(WireModel):
    """Text-to-speech played into the call."""

    wire_required: ClassVar[frozenset[str]] = frozenset({"action", "text", "barge_in"})

    action: Literal["talk"] = "talk"
    text: str
    loop: str = Field("", exclude=True)
    barge_in: bool = False
    level: int = 0
    voice_name: str = ""
    style: int = 0
    language: str = ""

    def prepare(self) -> dict[str, Any]:
        wire = super().prepare()
        wire["loop"] = parse_loop(self.loop)
        return wire


class NotifyAction(WireModel):
    """Send a request to an event URL without altering the call."""

    action: Literal["notify"] = "notify"
    payload: dict[str, Any] = Field(default_factory=dict)
    event_url: list[str] = Field(default_factory=list)
    event_method: str = ""


class RecordAction(WireModel):
    """Start recording the call from this point."""

    action: Literal["record"] = "record"
    format: str = ""
    split: str = ""
    channels: int = 0
    end_on_silence: int = 0
    end_on_key: str = ""
    time_out: int = 0
    beep_start: bool = False
    event_url: list[str] = Field(default_factory=list)
    event_method: str = ""


class ConversationAction(WireModel):
    """Join the call into a named conference."""

    action: Literal["conversation"] = "conversation"
    name: str = ""
    music_on_hold_url: list[str] = Field(default_factory=list)
    start_on_enter: str = Field("", exclude=True)
    end_on_exit: bool = False
    record: bool = False
    can_speak: list[str] = Field(default_factory=list)
    can_hear: list[str] = Field(default_factory=list)

    def prepare(self) -> dict[str, Any]:
        wire = super().prepare()
        wire["startOnEnter"] = parse_start_on_enter(self.start_on_enter)
        return wire


class StreamAction(WireModel):
    """Play an audio file from a URL into the call."""

    wire_required: ClassVar[frozenset[str]] = frozenset({"action", "barge_in"})

    action: Literal["stream"] = "stream"
    stream_url: list[str] = Field(default_factory=list)
    level: int = 0
    loop: str = Field("", exclude=True)
    barge_in: bool = False

    def prepare(self) -> dict[str, Any]:
        wire = super().prepare()
        wire["loop"] = parse_loop(self.loop)
        return wire


class DtmfInput(WireModel):
    """Keypad digit collection settings for an Input action."""

    time_out: int = 0
    max_digits: int = 0
    submit_on_hash: bool = False


class InputAction(WireModel):
    """Collect input from the caller."""

    action: Literal["input"] = "input"
    dtmf: DtmfInput | None = None
    event_url: list[str] = Field(default_factory=list)
    event_method: str = ""


class ConnectAction(WireModel):
    """Connect the call to another endpoint."""

    wire_required: ClassVar[frozenset[str]] = frozenset({"action", "endpoint"})

    action: Literal["connect"] = "connect"
    endpoint: list[Endpoint] = Field(min_length=1)
    from_: str = Field("", alias="from")
    timeout: int = 0
    limit: int = 0
    machine_detection: str = ""
    event_type: str = ""
    event_url: list[str] = Field(default_factory=list)
    event_method: str = ""
    ringback_tone: str = ""

    def prepare(self) -> dict[str, Any]:
        wire = super().prepare()
        wire["endpoint"][0] = self.endpoint[0].prepare()
        return wire


Action = (
    TalkAction
    | NotifyAction
    | RecordAction
    | ConversationAction
    | StreamAction
    | InputAction
    | ConnectAction
)
