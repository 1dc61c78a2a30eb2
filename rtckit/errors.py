"""Error types defined by the WebRTC 1.0 specification."""

from __future__ import annotations


class RTCError(Exception):
    """Base class for the specification's error wrappers.

    Each wrapper carries the underlying error (or message) in ``err`` and
    renders as ``"<Kind>: <err>"``.
    """

    kind = "RTCError"

    def __init__(self, err: object) -> None:
        super().__init__(err)
        self.err = err
        if isinstance(err, BaseException):
            self.__cause__ = err

    def __str__(self) -> str:
        return f"{self.kind}: {self.err}"


class UnknownError(RTCError):
    """The operation failed for an unknown transient reason."""

    kind = "UnknownError"


class InvalidStateError(RTCError):
    """The object is in an invalid state."""

    kind = "InvalidStateError"


class InvalidAccessError(RTCError):
    """The object does not support the operation or argument."""

    kind = "InvalidAccessError"


class NotSupportedError(RTCError):
    """The operation is not supported."""

    kind = "NotSupportedError"


class InvalidModificationError(RTCError):
    """The object cannot be modified in this way."""

    kind = "InvalidModificationError"


class SyntaxError_(RTCError):  # noqa: N801 - avoids shadowing the builtin
    """The string did not match the expected pattern."""

    kind = "SyntaxError"


class TypeError_(RTCError):  # noqa: N801 - avoids shadowing the builtin
    """A value is not of the expected type."""

    kind = "TypeError"


class OperationError(RTCError):
    """The operation failed for an operation-specific reason."""

    kind = "OperationError"


class NotReadableError(RTCError):
    """The input/output read operation failed."""

    kind = "NotReadableError"


class RangeError(RTCError):
    """A value is not in the set or range of allowed values."""

    kind = "RangeError"