"""Reassembly of media samples from RTP packets."""

from __future__ import annotations

from typing import List, Optional

from .media import Depacketizer, RTPPacket, Sample

_SEQ_MASK = 0xFFFF
_TS_MASK = 0xFFFFFFFF


def seqnum_distance(x: int, y: int) -> int:
    """Distance between two sequence numbers."""
    return x - y if x > y else y - x


class SampleBuilder:
    """Buffers RTP packets and emits complete samples.

    ``max_late`` sets how many packets to wait for a missing one: the
    larger it is, the less loss is seen, at the cost of latency.
    """

    def __init__(self, max_late: int, depacketizer: Depacketizer) -> None:
        self.max_late = max_late & _SEQ_MASK
        self.depacketizer = depacketizer
        self._buffer: List[Optional[RTPPacket]] = [None] * (_SEQ_MASK + 1)
        self._last_push = 0
        self._is_contiguous = False
        self._last_pop_seq = 0
        self._last_pop_timestamp = 0

    def push(self, packet: RTPPacket) -> None:
        """Add an RTP packet to the builder."""
        seq = packet.sequence_number & _SEQ_MASK
        self._buffer[seq] = packet
        self._last_push = seq
        self._buffer[(seq - self.max_late) & _SEQ_MASK] = None

    def _build_sample(self, first: int) -> Optional[Sample]:
        buf = self._buffer
        data = bytearray()
        first_timestamp = buf[first].timestamp
        i = first
        while buf[i] is not None:
            if buf[i].timestamp != first_timestamp:
                prev = (i - 1) & _SEQ_MASK
                before_first = buf[(first - 1) & _SEQ_MASK]
                last_timestamp = self._last_pop_timestamp
                if not self._is_contiguous and before_first is not None:
                    last_timestamp = before_first.timestamp

                samples = (buf[prev].timestamp - last_timestamp) & _TS_MASK
                self._last_pop_seq = prev
                self._is_contiguous = True
                self._last_pop_timestamp = buf[prev].timestamp
                j = first
                while j != i:
                    buf[j] = None
                    j = (j + 1) & _SEQ_MASK
                return Sample(data=bytes(data), samples=samples)

            try:
                chunk = self.depacketizer.unmarshal(buf[i].payload)
            except Exception:  # an undecodable payload yields no sample
                return None
            data += chunk
            i = (i + 1) & _SEQ_MASK
        return None

    def pop(self) -> Optional[Sample]:
        """Return the next complete sample, or None when none is ready."""
        buf = self._buffer
        if not self._is_contiguous:
            i = (self._last_push - self.max_late) & _SEQ_MASK
        elif seqnum_distance(self._last_pop_seq, self._last_push) > self.max_late:
            i = (self._last_push - self.max_late) & _SEQ_MASK
            self._is_contiguous = False
        else:
            i = (self._last_pop_seq + 1) & _SEQ_MASK

        while i != self._last_push:
            curr = buf[i]
            prev = buf[(i - 1) & _SEQ_MASK]
            if curr is None:
                if prev is not None:
                    break  # a gap: nothing can be built past it
                i = (i + 1) & _SEQ_MASK
                continue

            if not self._is_contiguous and (
                prev is None or prev.timestamp == curr.timestamp
            ):
                i = (i + 1) & _SEQ_MASK
                continue

            return self._build_sample(i)
        return None