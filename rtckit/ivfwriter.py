"""Writing VP8 RTP streams into IVF files."""

from __future__ import annotations

import struct
from typing import BinaryIO, Optional

from .media import RTPPacket, Writer

_FILE_HEADER_LEN = 32
_FRAME_COUNT_OFFSET = 24
_DEFAULT_FRAME_COUNT = 900
_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF


def unmarshal_vp8(payload: Optional[bytes]) -> bytes:
    """Strip the VP8 payload descriptor and return the VP8 data.

    Raises ValueError for a missing or empty payload and for one too
    short to hold its descriptor and any data.
    """
    if not payload:
        raise ValueError("invalid nil packet")
    payload = bytes(payload)
    if len(payload) < 4:
        raise ValueError("packet is not large enough")

    first = payload[0]
    extended = bool(first & 0x80)
    index = 1
    has_picture_id = has_tl0 = has_tid = has_keyidx = False
    if extended:
        flags = payload[index]
        has_picture_id = bool(flags & 0x80)
        has_tl0 = bool(flags & 0x40)
        has_tid = bool(flags & 0x20)
        has_keyidx = bool(flags & 0x10)
        index += 1
    if has_picture_id:
        # A set M bit marks a 16-bit picture id.
        index += 2 if payload[index] & 0x80 else 1
    if has_tl0:
        index += 1
    if has_tid or has_keyidx:
        index += 1
    if index >= len(payload):
        raise ValueError("packet is not large enough")
    return payload[index:]


class IVFWriter(Writer):
    """Writes VP8 RTP packets as frames of an IVF file."""

    def __init__(self, stream: Optional[BinaryIO]) -> None:
        if stream is None:
            raise ValueError("file not opened")
        self._stream: Optional[BinaryIO] = stream
        self._fd: Optional[BinaryIO] = None
        self._count = 0
        self._current_frame = bytearray()
        self._write_header()

    @classmethod
    def open(cls, file_name: str) -> "IVFWriter":
        """Create (or truncate) a file and write IVF into it.

        Closing such a writer records the real frame count in the header.
        """
        fd = open(file_name, "w+b")
        try:
            writer = cls(fd)
        except BaseException:
            fd.close()
            raise
        writer._fd = fd
        return writer

    def _write_header(self) -> None:
        header = struct.pack(
            "<4sHH4sHHIII4x",
            b"DKIF",
            0,  # version
            _FILE_HEADER_LEN,
            b"VP80",
            640,  # width
            480,  # height
            30,  # frame rate numerator
            1,  # frame rate denominator
            _DEFAULT_FRAME_COUNT,  # replaced on close when writing a file
        )
        self._stream.write(header)

    def write_rtp(self, packet: Optional[RTPPacket]) -> None:
        """Add a packet's VP8 data; a marked packet completes a frame.

        Raises ValueError when the writer is closed or the payload is bad.
        """
        if self._stream is None:
            raise ValueError("file not opened")
        if packet is None:
            raise ValueError("invalid nil packet")

        self._current_frame += unmarshal_vp8(packet.payload)
        if not packet.marker or not self._current_frame:
            return

        frame_header = struct.pack(
            "<IQ", len(self._current_frame) & _U32, self._count & _U64
        )
        self._count += 1
        self._stream.write(frame_header)
        self._stream.write(bytes(self._current_frame))
        self._current_frame = bytearray()

    def close(self) -> None:
        """Stop recording; calling it again does nothing."""
        fd = self._fd
        self._fd = None
        self._stream = None
        if fd is None:
            return
        try:
            fd.seek(_FRAME_COUNT_OFFSET)
            fd.write(struct.pack("<I", self._count & _U32))
        finally:
            fd.close()

    def __enter__(self) -> "IVFWriter":
        return self

    def __exit__(self, *args) -> None:
        self.close()