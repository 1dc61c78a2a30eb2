"""Media samples, RTP packets and the interfaces media code builds on."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

_RTP_HEADER_LEN = 12


@dataclass
class Sample:
    """A chunk of media and the number of samples it spans."""

    data: bytes = b""
    samples: int = 0


@dataclass
class RTPPacket:
    """An RTP packet: the fixed header, its extension and the payload."""

    version: int = 0
    padding: bool = False
    extension: bool = False
    marker: bool = False
    payload_offset: int = 0
    payload_type: int = 0
    sequence_number: int = 0
    timestamp: int = 0
    ssrc: int = 0
    csrc: List[int] = field(default_factory=list)
    extension_profile: int = 0
    extension_payload: bytes = b""
    payload: bytes = b""
    raw: bytes = b""

    @classmethod
    def unmarshal(cls, data: bytes) -> "RTPPacket":
        """Parse a packet from its wire form.

        Raises ValueError when the data is too short for its header.
        """
        data = bytes(data)
        if len(data) < _RTP_HEADER_LEN:
            raise ValueError("RTP header size insufficient")

        first, second = data[0], data[1]
        csrc_count = first & 0x0F
        sequence_number, timestamp, ssrc = struct.unpack_from(">HII", data, 2)

        offset = _RTP_HEADER_LEN + 4 * csrc_count
        if len(data) < offset:
            raise ValueError("RTP header size insufficient for CSRC list")
        csrc = list(struct.unpack_from(f">{csrc_count}I", data, _RTP_HEADER_LEN))

        extension = bool((first >> 4) & 1)
        extension_profile = 0
        extension_payload = b""
        if extension:
            if len(data) < offset + 4:
                raise ValueError("RTP header size insufficient for extension")
            extension_profile, words = struct.unpack_from(">HH", data, offset)
            offset += 4
            end = offset + 4 * words
            if len(data) < end:
                raise ValueError("RTP header size insufficient for extension")
            extension_payload = data[offset:end]
            offset = end

        return cls(
            version=first >> 6,
            padding=bool((first >> 5) & 1),
            extension=extension,
            marker=bool(second >> 7),
            payload_offset=offset,
            payload_type=second & 0x7F,
            sequence_number=sequence_number,
            timestamp=timestamp,
            ssrc=ssrc,
            csrc=csrc,
            extension_profile=extension_profile,
            extension_payload=extension_payload,
            payload=data[offset:],
            raw=data,
        )


class Depacketizer(ABC):
    """Turns RTP payloads back into codec data."""

    @abstractmethod
    def unmarshal(self, payload: bytes) -> bytes:
        """Return the codec data carried by an RTP payload."""


class Writer(ABC):
    """Sink that turns RTP packets into a media file."""

    @abstractmethod
    def write_rtp(self, packet: RTPPacket) -> None:
        """Add the content of an RTP packet to the media."""

    @abstractmethod
    def close(self) -> None:
        """Close the media; calling it again must do nothing."""