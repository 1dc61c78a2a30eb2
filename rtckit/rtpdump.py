"""Reading and writing the RTPDump file format."""

from __future__ import annotations

import re
import struct
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import BinaryIO, Iterator, NamedTuple, Optional, Union

_PKT_HEADER_LEN = 8
_HEADER_LEN = 16
_PREAMBLE_LEN = 36
_U32 = 0xFFFFFFFF
_U16 = 0xFFFF

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_PREAMBLE_RE = re.compile(
    rb"#\!rtpplay1\.0 \d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\/\d{1,5}\n"
)

Address = Union[IPv4Address, IPv6Address]


class MalformedError(ValueError):
    """Raised when the data is not valid RTPDump."""

    def __init__(self, message: str = "malformed rtpdump") -> None:
        super().__init__(message)


def _to4(source: Optional[Address]) -> Optional[IPv4Address]:
    if isinstance(source, IPv4Address):
        return source
    if isinstance(source, IPv6Address):
        return source.ipv4_mapped
    return None


@dataclass
class Header:
    """File header: recording start time, network source and UDP port."""

    start: datetime = _EPOCH
    source: Optional[Address] = None
    port: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.source, (str, bytes, int)):
            self.source = ip_address(self.source)

    def marshal(self) -> bytes:
        """Encode the header as its 16-byte binary form."""
        start = self.start
        if start.tzinfo is None:
            start = start.replace(tzinfo=timezone.utc)
        micros = (start - _EPOCH) // timedelta(microseconds=1)
        sign = -1 if micros < 0 else 1
        sec, usec = divmod(abs(micros), 1_000_000)
        source = _to4(self.source)
        packed_source = source.packed if source is not None else b"\x00" * 4
        return struct.pack(
            ">II4sHxx",
            (sign * sec) & _U32,
            (sign * usec) & _U32,
            packed_source,
            self.port & _U16,
        )

    @classmethod
    def unmarshal(cls, data: bytes) -> "Header":
        """Decode a header; raises MalformedError when data is too short."""
        if len(data) < _HEADER_LEN:
            raise MalformedError()
        sec, usec, packed_source, port = struct.unpack_from(">II4sH", data)
        start = _EPOCH + timedelta(seconds=sec, microseconds=usec)
        return cls(start=start, source=IPv4Address(packed_source), port=port)


class _PacketHeader(NamedTuple):
    length: int
    packet_length: int
    offset_ms: int

    def marshal(self) -> bytes:
        return struct.pack(">HHI", self.length, self.packet_length, self.offset_ms)

    @classmethod
    def unmarshal(cls, data: bytes) -> "_PacketHeader":
        if len(data) < _PKT_HEADER_LEN:
            raise MalformedError()
        return cls(*struct.unpack_from(">HHI", data))

    @property
    def offset(self) -> timedelta:
        return timedelta(milliseconds=self.offset_ms)


@dataclass
class Packet:
    """A logged RTP or RTCP packet and its offset from the recording start.

    The payload may be truncated, as when only headers were logged.
    """

    offset: timedelta = field(default_factory=timedelta)
    is_rtcp: bool = False
    payload: bytes = b""

    def marshal(self) -> bytes:
        """Encode the packet with its 8-byte record header."""
        length = (len(self.payload) + _PKT_HEADER_LEN) & _U16
        header = _PacketHeader(
            length=length,
            packet_length=0 if self.is_rtcp else length,
            offset_ms=(self.offset // timedelta(milliseconds=1)) & _U32,
        )
        return header.marshal() + bytes(self.payload)

    @classmethod
    def unmarshal(cls, data: bytes) -> "Packet":
        """Decode a packet record; raises MalformedError on bad lengths."""
        header = _PacketHeader.unmarshal(data)
        if header.length < _PKT_HEADER_LEN or len(data) < header.length:
            raise MalformedError()
        return cls(
            offset=header.offset,
            is_rtcp=header.length != 0 and header.packet_length == 0,
            payload=bytes(data[_PKT_HEADER_LEN:header.length]),
        )


class Reader:
    """Reads packets from an RTPDump stream.

    The preamble and file header are read on construction; the header is
    available as ``header``.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._pending = b""
        self._lock = threading.Lock()

        peek = self._read(_PREAMBLE_LEN)
        if len(peek) < _PREAMBLE_LEN or not _PREAMBLE_RE.search(peek):
            raise MalformedError()
        self._pending = peek[peek.index(b"\n") + 1:]

        raw = self._read(_HEADER_LEN)
        if len(raw) < _HEADER_LEN:
            raise MalformedError()
        self.header = Header.unmarshal(raw)

    def _read(self, size: int) -> bytes:
        """Read up to ``size`` bytes, fewer only at end of stream."""
        chunks = [self._pending[:size]]
        self._pending = self._pending[size:]
        got = len(chunks[0])
        while got < size:
            chunk = self._stream.read(size - got)
            if not chunk:
                break
            chunks.append(chunk)
            got += len(chunk)
        return b"".join(chunks)

    def next(self) -> Packet:
        """Return the next packet.

        Raises EOFError at the end of the stream and MalformedError when a
        record is cut short or has a zero length.
        """
        with self._lock:
            raw = self._read(_PKT_HEADER_LEN)
            if not raw:
                raise EOFError("end of rtpdump stream")
            if len(raw) < _PKT_HEADER_LEN:
                raise MalformedError()
            header = _PacketHeader.unmarshal(raw)
            if header.length == 0:
                raise MalformedError()

            size = (header.length - _PKT_HEADER_LEN) & _U16
            payload = self._read(size)
            if size and not payload:
                raise EOFError("end of rtpdump stream")
            if len(payload) < size:
                raise MalformedError()
            return Packet(
                offset=header.offset,
                is_rtcp=header.packet_length == 0,
                payload=payload,
            )

    def __iter__(self) -> Iterator[Packet]:
        while True:
            try:
                packet = self.next()
            except EOFError:
                return
            yield packet


class Writer:
    """Writes packets in the RTPDump format.

    The preamble and file header are written on construction.
    """

    def __init__(self, stream: BinaryIO, header: Header) -> None:
        source = _to4(header.source)
        preamble = f"#!rtpplay1.0 {source if source is not None else '<nil>'}/{header.port}\n"
        stream.write(preamble.encode("ascii"))
        stream.write(header.marshal())
        self._stream = stream
        self._lock = threading.Lock()

    def write_packet(self, packet: Packet) -> None:
        """Write one packet record."""
        data = packet.marshal()
        with self._lock:
            self._stream.write(data)