"""Enumerations used across the peer connection API."""

from __future__ import annotations

from enum import IntEnum

UNKNOWN_LABEL = "unknown"


class UnknownTypeError(ValueError):
    """Raised when a value does not name a known enumeration member."""

    def __init__(self, message: str = UNKNOWN_LABEL) -> None:
        super().__init__(message)


class _LabeledEnum(IntEnum):
    """Integer enumeration whose members render as a fixed label."""

    def __new__(cls, value: int, label: str):
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.label = label
        return obj

    def __str__(self) -> str:
        return self.label

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    @classmethod
    def _parse(cls, raw: str):
        for member in cls:
            if member.label == raw:
                return member
        return cls(0)


class PeerConnectionState(_LabeledEnum):
    """State of the peer connection."""

    UNKNOWN = 0, UNKNOWN_LABEL
    NEW = 1, "new"
    CONNECTING = 2, "connecting"
    CONNECTED = 3, "connected"
    DISCONNECTED = 4, "disconnected"
    FAILED = 5, "failed"
    CLOSED = 6, "closed"

    @classmethod
    def from_string(cls, raw: str) -> "PeerConnectionState":
        """Parse a state name; unrecognised names give UNKNOWN."""
        return cls._parse(raw)


class PriorityType(_LabeledEnum):
    """Priority of a data channel."""

    UNKNOWN = 0, UNKNOWN_LABEL
    VERY_LOW = 1, "very-low"
    LOW = 2, "low"
    MEDIUM = 3, "medium"
    HIGH = 4, "high"

    @classmethod
    def from_string(cls, raw: str) -> "PriorityType":
        """Parse a priority name; unrecognised names give UNKNOWN."""
        return cls._parse(raw)

    @classmethod
    def from_uint16(cls, raw: int) -> "PriorityType":
        """Map a 16-bit wire priority onto a priority type."""
        if not 0 <= raw <= 0xFFFF:
            raise ValueError(f"priority {raw} is not a 16-bit value")
        if raw <= 128:
            return cls.VERY_LOW
        if raw <= 256:
            return cls.LOW
        if raw <= 512:
            return cls.MEDIUM
        return cls.HIGH


class QUICRole(_LabeledEnum):
    """Role of the QUIC transport."""

    UNKNOWN = 0, UNKNOWN_LABEL
    AUTO = 1, "auto"
    CLIENT = 2, "client"
    SERVER = 3, "server"


class RTCPMuxPolicy(_LabeledEnum):
    """Which ICE candidates are gathered for non-multiplexed RTCP."""

    UNKNOWN = 0, UNKNOWN_LABEL
    NEGOTIATE = 1, "negotiate"
    REQUIRE = 2, "require"

    @classmethod
    def from_string(cls, raw: str) -> "RTCPMuxPolicy":
        """Parse a policy name; unrecognised names give UNKNOWN."""
        return cls._parse(raw)


class RTPTransceiverDirection(_LabeledEnum):
    """Direction of an RTP transceiver."""

    UNKNOWN = 0, UNKNOWN_LABEL
    SENDRECV = 1, "sendrecv"
    SENDONLY = 2, "sendonly"
    RECVONLY = 3, "recvonly"
    INACTIVE = 4, "inactive"

    @classmethod
    def from_string(cls, raw: str) -> "RTPTransceiverDirection":
        """Parse a direction name; unrecognised names give UNKNOWN."""
        return cls._parse(raw)


class SCTPTransportState(_LabeledEnum):
    """State of the SCTP transport."""

    UNKNOWN = 0, UNKNOWN_LABEL
    CONNECTING = 1, "connecting"
    CONNECTED = 2, "connected"
    CLOSED = 3, "closed"

    @classmethod
    def from_string(cls, raw: str) -> "SCTPTransportState":
        """Parse a state name; unrecognised names give UNKNOWN."""
        return cls._parse(raw)


class SDPSemantics(_LabeledEnum):
    """Style of SDP offers and answers."""

    UNIFIED_PLAN = 0, "unified-plan"
    PLAN_B = 1, "plan-b"
    UNIFIED_PLAN_WITH_FALLBACK = 2, "unified-plan-with-fallback"


class SDPType(_LabeledEnum):
    """Type of a session description."""

    UNKNOWN = 0, UNKNOWN_LABEL
    OFFER = 1, "offer"
    PRANSWER = 2, "pranswer"
    ANSWER = 3, "answer"
    ROLLBACK = 4, "rollback"

    @classmethod
    def from_string(cls, raw: str) -> "SDPType":
        """Parse a type name; unrecognised names give UNKNOWN."""
        return cls._parse(raw)

    @classmethod
    def from_json_value(cls, raw: str) -> "SDPType":
        """Parse a decoded JSON value, case-insensitively.

        Raises UnknownTypeError when the value names no concrete type.
        """
        if not isinstance(raw, str):
            raise TypeError(f"SDP type must be a string, not {type(raw).__name__}")
        member = cls._parse(raw.lower())
        if member is cls.UNKNOWN:
            raise UnknownTypeError()
        return member