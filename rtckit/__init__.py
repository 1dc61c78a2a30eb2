"""WebRTC state types, RTP sample assembly and media file writers."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "states",
    "null",
    "signaling",
    "parameters",
    "settings",
    "media",
    "samplebuilder",
    "rtpdump",
    "ivfwriter",
    "opuswriter",
]