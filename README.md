# rtckit

Building blocks for WebRTC applications in pure Python. It needs nothing
beyond the standard library.

## What is in it

- `rtckit.states` holds the state and policy enums: `PeerConnectionState`,
  `PriorityType`, `QUICRole`, `RTCPMuxPolicy`, `RTPTransceiverDirection`,
  `SCTPTransportState`, `SDPSemantics` and `SDPType`. Every member renders
  as its WebRTC string (`str(SDPType.OFFER) == "offer"`). Most enums have
  `from_string`, which returns `UNKNOWN` for a name it does not know.
  `PriorityType.from_uint16` maps a 16-bit wire priority to a priority type.
  `SDPType.from_json_value` ignores case and raises `UnknownTypeError` for
  a name it does not know.
- `rtckit.signaling` defines `SignalingState` and `StateChangeOp`.
  `check_next_signaling_state(cur, next_state, op, sdp_type)` returns the
  next state when the offer/answer transition is allowed. Otherwise it
  raises `InvalidModificationError`.
- `rtckit.parameters` holds the parameter records: `RTCPFeedback`,
  `RTPCodingParameters`, `RTPEncodingParameters`, `RTPDecodingParameters`,
  `RTPSendParameters`, `RTPReceiveParameters`, `RTPTransceiverInit`,
  `SCTPCapabilities` and `SessionDescription`. `SessionDescription` has
  `to_json` and `from_json`, in the browser's
  `{"type": ..., "sdp": ...}` shape.
- `rtckit.null.Nullable` is a value paired with a validity flag. Use it
  where a zero value is different from "not set": `Nullable.of(0)`,
  `Nullable.null()`, `.get(default)`.
- `rtckit.settings.SettingEngine` records ICE timeouts, the ephemeral UDP
  port range, the trickle option, the network types and the data-channel
  detach option. `set_ephemeral_udp_port_range` raises `PortRangeError`
  when the range is empty or a port is not a 16-bit value.
- `rtckit.media` holds `Sample`, `RTPPacket` and two abstract bases.
  `RTPPacket.unmarshal` parses the fixed header, the CSRC list and the
  header extension. The bases are `Depacketizer` and `Writer`.
- `rtckit.samplebuilder.SampleBuilder(max_late, depacketizer)` buffers
  pushed RTP packets. `pop()` returns the next complete `Sample`, or
  `None` when no sample is ready yet.
- `rtckit.rtpdump` reads and writes the rtpdump capture format. It has
  `Header`, `Packet`, `Reader`, `Writer` and `MalformedError`.
- `rtckit.ivfwriter.IVFWriter` writes VP8 RTP payloads as IVF frames.
  - The file header is fixed: 640x480, 30 fps.
  - A packet with the marker bit set completes a frame.
  - A writer made with `IVFWriter.open(path)` writes the real frame count
    into the header when it is closed.
- `rtckit.opuswriter.OpusWriter` writes Opus RTP payloads as an Ogg Opus
  stream, one page per packet. It writes an end-of-stream page on close.
  `ogg_crc32` is the page checksum.
- `rtckit.errors` holds the specification's error types. All of them
  derive from `RTCError`:
  - `UnknownError`
  - `InvalidStateError`
  - `InvalidAccessError`
  - `NotSupportedError`
  - `InvalidModificationError`
  - `SyntaxError_`
  - `TypeError_`
  - `OperationError`
  - `NotReadableError`
  - `RangeError`

## Install

```
pip install rtckit
```

## Examples

Validate a signaling transition:

```python
from rtckit.signaling import SignalingState, StateChangeOp, check_next_signaling_state
from rtckit.states import SDPType

state = check_next_signaling_state(
    SignalingState.STABLE,
    SignalingState.HAVE_LOCAL_OFFER,
    StateChangeOp.SET_LOCAL,
    SDPType.OFFER,
)
```

Read an rtpdump capture:

```python
from rtckit import rtpdump

with open("capture.rtpdump", "rb") as fh:
    reader = rtpdump.Reader(fh)
    print(reader.header)
    for packet in reader:
        print(packet.offset, packet.is_rtcp, len(packet.payload))
```

Record VP8 RTP packets to an IVF file:

```python
from rtckit.ivfwriter import IVFWriter
from rtckit.media import RTPPacket

with IVFWriter.open("out.ivf") as writer:
    for raw in incoming_datagrams:
        writer.write_rtp(RTPPacket.unmarshal(raw))
```

Assemble samples from RTP packets:

```python
from rtckit.media import Depacketizer
from rtckit.samplebuilder import SampleBuilder

class PassThrough(Depacketizer):
    def unmarshal(self, payload):
        return payload

builder = SampleBuilder(50, PassThrough())
for packet in packets:
    builder.push(packet)
    while (sample := builder.pop()) is not None:
        handle(sample.data, sample.samples)
```

## What it does not do

rtckit has no peer connection, no networking and no codecs. It does not
gather ICE candidates, run DTLS, SRTP or SCTP, open data channels, or send
and receive media. `SettingEngine` only records settings; nothing in the
package acts on them. The writers store RTP payloads as they arrive and
never decode or re-encode the media. The package has no command-line tool.

## Tests

```
pip install -e .[test]
pytest
```