"""Parameter records exchanged by transports, senders and receivers."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from .states import RTPTransceiverDirection, SDPType, UnknownTypeError


@dataclass
class RTCPFeedback:
    """Request for an additional RTCP packet type.

    ``type`` is one of ack, ccm, nack, goog-remb or transport-cc; the
    meaning of ``parameter`` depends on it (nack with pli asks for
    Picture Loss Indicator packets).
    """

    type: str = ""
    parameter: str = ""


@dataclass
class RTPCodingParameters:
    """Settings shared by encoding and decoding."""

    ssrc: int = 0
    payload_type: int = 0


@dataclass
class RTPDecodingParameters(RTPCodingParameters):
    """Settings used when decoding."""


@dataclass
class RTPEncodingParameters(RTPCodingParameters):
    """Settings used when encoding."""


@dataclass
class RTPReceiveParameters:
    """RTP stack settings used by receivers."""

    encodings: RTPDecodingParameters = field(default_factory=RTPDecodingParameters)


@dataclass
class RTPSendParameters:
    """RTP stack settings used by senders."""

    encodings: RTPEncodingParameters = field(default_factory=RTPEncodingParameters)


@dataclass
class RTPTransceiverInit:
    """Options for a new transceiver."""

    direction: RTPTransceiverDirection = RTPTransceiverDirection.UNKNOWN
    send_encodings: List[RTPEncodingParameters] = field(default_factory=list)


@dataclass
class SCTPCapabilities:
    """Capabilities of the SCTP transport."""

    max_message_size: int = 0

    def to_dict(self) -> Dict[str, int]:
        """Return the JSON-ready mapping of the capabilities."""
        return {"maxMessageSize": self.max_message_size}


_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class SessionDescription:
    """A local or remote session description."""

    type: SDPType = SDPType.UNKNOWN
    sdp: str = ""

    def to_json(self) -> str:
        """Encode as a compact JSON object with ``type`` and ``sdp``."""
        text = json.dumps(
            {"type": str(self.type), "sdp": self.sdp},
            separators=(",", ":"),
            ensure_ascii=False,
        )
        for char, escape in _JSON_ESCAPES.items():
            text = text.replace(char, escape)
        return text

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "SessionDescription":
        """Decode a JSON object.

        Missing fields keep their defaults. Raises UnknownTypeError when the
        ``type`` field names no concrete description type.
        """
        obj: Any = json.loads(data)
        if not isinstance(obj, dict):
            raise ValueError("session description must be a JSON object")

        desc = cls()
        if "type" in obj:
            raw_type = obj["type"]
            if raw_type is None:
                raise UnknownTypeError()
            desc.type = SDPType.from_json_value(raw_type)
        if "sdp" in obj and obj["sdp"] is not None:
            sdp = obj["sdp"]
            if not isinstance(sdp, str):
                raise TypeError(f"sdp must be a string, not {type(sdp).__name__}")
            desc.sdp = sdp
        return desc