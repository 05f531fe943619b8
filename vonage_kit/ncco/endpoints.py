"""Endpoints a Connect action can join into the current call."""

from typing import ClassVar, Literal

from vonage_kit.ncco.base import WireModel


class PhoneEndpoint(WireModel):
    """A PSTN number to dial."""

    wire_required: ClassVar[frozenset[str]] = frozenset({"type", "number"})

    type: Literal["phone"] = "phone"
    number: str
    dtmf_answer: str = ""
    on_answer: str = ""


Endpoint = PhoneEndpoint
