"""Writing Opus RTP streams into Ogg files."""

from __future__ import annotations

import random
import struct
from typing import BinaryIO, List, Optional

from .media import RTPPacket, Writer

_PAGE_HEADER_LEN = 27
_CRC_POLY = 0x04C11DB7
_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF
_VENDOR = b"rtckit"

_HEADER_TYPE_CONTINUATION = 0
_HEADER_TYPE_BEGIN = 2
_HEADER_TYPE_END = 4


def _make_crc_table(poly: int) -> List[int]:
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            crc = (crc >> 1) ^ poly if crc & 1 else crc >> 1
        table.append(crc)
    return table


_CRC_TABLE = _make_crc_table(_CRC_POLY)


def ogg_crc32(data: bytes) -> int:
    """Checksum used for the pages (LSB-first, table from 0x04c11db7)."""
    crc = _U32
    for byte in data:
        crc = _CRC_TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ _U32


def unmarshal_opus(payload: Optional[bytes]) -> bytes:
    """Return the Opus data of an RTP payload.

    Raises ValueError for a missing or empty payload.
    """
    if not payload:
        raise ValueError("invalid nil packet")
    return bytes(payload)


class OpusWriter(Writer):
    """Writes Opus RTP packets as pages of an Ogg Opus stream."""

    def __init__(
        self, stream: Optional[BinaryIO], sample_rate: int, channel_count: int
    ) -> None:
        if stream is None:
            raise ValueError("file not opened")
        self._stream: Optional[BinaryIO] = stream
        self._fd: Optional[BinaryIO] = None
        self.sample_rate = sample_rate
        self.channel_count = channel_count
        self.serial = random.getrandbits(32)
        self._page_index = 0
        self._previous_granule_position = 0
        self._previous_timestamp = 0
        self._write_headers()

    @classmethod
    def open(
        cls, file_name: str, sample_rate: int, channel_count: int
    ) -> "OpusWriter":
        """Create (or truncate) a file and write Ogg Opus into it."""
        fd = open(file_name, "w+b")
        try:
            writer = cls(fd, sample_rate, channel_count)
        except BaseException:
            fd.close()
            raise
        writer._fd = fd
        return writer

    def _write_headers(self) -> None:
        id_header = struct.pack(
            "<8sBBHIHB",
            b"OpusHead",
            1,  # version
            self.channel_count & 0xFF,
            0,  # pre-skip
            self.sample_rate & _U32,
            0,  # output gain
            0,  # channel map: one stream, mono or stereo
        )
        # The identification header sits alone on a beginning-of-stream page.
        self._stream.write(self._create_page(id_header, _HEADER_TYPE_BEGIN, 0))

        comment_header = (
            b"OpusTags"
            + struct.pack("<I", len(_VENDOR))
            + _VENDOR
            + struct.pack("<I", 0)  # user comment list length
        )
        self._stream.write(
            self._create_page(comment_header, _HEADER_TYPE_CONTINUATION, 0)
        )

    def _create_page(self, payload: bytes, header_type: int, granule_pos: int) -> bytes:
        header = struct.pack(
            "<4sBBQIIIBB",
            b"OggS",
            0,  # version
            header_type,
            granule_pos & _U64,
            self.serial,
            self._page_index & _U32,
            ogg_crc32(payload),
            1,  # one segment per page
            len(payload) & 0xFF,
        )
        self._page_index += 1
        return header + bytes(payload)

    def write_rtp(self, packet: Optional[RTPPacket]) -> None:
        """Write a packet's Opus data as a page.

        Raises ValueError when the writer is closed or the payload is empty.
        """
        if self._stream is None:
            raise ValueError("file not opened")
        if packet is None:
            raise ValueError("invalid nil packet")

        payload = unmarshal_opus(packet.payload)

        if self._previous_timestamp != 0:
            increment = (packet.timestamp - self._previous_timestamp) & _U32
            self._previous_granule_position = (
                self._previous_granule_position + increment
            ) & _U64
        self._previous_timestamp = packet.timestamp & _U32

        self._stream.write(
            self._create_page(
                payload, _HEADER_TYPE_CONTINUATION, self._previous_granule_position
            )
        )

    def close(self) -> None:
        """Write the end-of-stream page and stop; calling again does nothing."""
        stream, fd = self._stream, self._fd
        self._stream = None
        self._fd = None
        if stream is None:
            return

        page = self._create_page(b"", _HEADER_TYPE_END, _U64)
        try:
            stream.write(page)
        except Exception as err:
            if fd is not None:
                try:
                    fd.close()
                except Exception as close_err:
                    raise OSError(
                        f"error writing file ({err}); error deleting file ({close_err})"
                    ) from err
            raise

        if fd is not None:
            fd.close()

    def __enter__(self) -> "OpusWriter":
        return self

    def __exit__(self, *args) -> None:
        self.close()