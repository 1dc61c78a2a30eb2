"""Signaling state of the offer/answer process and its transitions."""

from __future__ import annotations

from .errors import InvalidModificationError
from .states import UNKNOWN_LABEL, SDPType, _LabeledEnum


class StateChangeOp(_LabeledEnum):
    """Operation that changes the signaling state."""

    SET_LOCAL = 1, "SetLocal"
    SET_REMOTE = 2, "SetRemote"


class SignalingState(_LabeledEnum):
    """Signaling state of the offer/answer process."""

    UNKNOWN = 0, UNKNOWN_LABEL
    STABLE = 1, "stable"
    HAVE_LOCAL_OFFER = 2, "have-local-offer"
    HAVE_REMOTE_OFFER = 3, "have-remote-offer"
    HAVE_LOCAL_PRANSWER = 4, "have-local-pranswer"
    HAVE_REMOTE_PRANSWER = 5, "have-remote-pranswer"
    CLOSED = 6, "closed"

    @classmethod
    def from_string(cls, raw: str) -> "SignalingState":
        """Parse a state name; unrecognised names give UNKNOWN."""
        return cls._parse(raw)


_S = SignalingState
_OP = StateChangeOp

# (current state, operation, description type) -> the only permitted next state
_TRANSITIONS = {
    (_S.STABLE, _OP.SET_LOCAL, SDPType.OFFER): _S.HAVE_LOCAL_OFFER,
    (_S.STABLE, _OP.SET_REMOTE, SDPType.OFFER): _S.HAVE_REMOTE_OFFER,
    (_S.HAVE_LOCAL_OFFER, _OP.SET_REMOTE, SDPType.ANSWER): _S.STABLE,
    (_S.HAVE_LOCAL_OFFER, _OP.SET_REMOTE, SDPType.PRANSWER): _S.HAVE_REMOTE_PRANSWER,
    (_S.HAVE_REMOTE_PRANSWER, _OP.SET_REMOTE, SDPType.ANSWER): _S.STABLE,
    (_S.HAVE_REMOTE_OFFER, _OP.SET_LOCAL, SDPType.ANSWER): _S.STABLE,
    (_S.HAVE_REMOTE_OFFER, _OP.SET_LOCAL, SDPType.PRANSWER): _S.HAVE_LOCAL_PRANSWER,
    (_S.HAVE_LOCAL_PRANSWER, _OP.SET_LOCAL, SDPType.ANSWER): _S.STABLE,
}


def check_next_signaling_state(
    cur: SignalingState,
    next_state: SignalingState,
    op: StateChangeOp,
    sdp_type: SDPType,
) -> SignalingState:
    """Validate a proposed signaling state transition.

    Returns ``next_state`` when the transition is permitted and raises
    InvalidModificationError otherwise.
    """
    if sdp_type is SDPType.ROLLBACK and cur is SignalingState.STABLE:
        raise InvalidModificationError("can't rollback from stable state")

    if _TRANSITIONS.get((cur, op, sdp_type)) is next_state:
        return next_state

    raise InvalidModificationError(
        f"invalid proposed signaling state transition "
        f"{cur}->{op}({sdp_type})->{next_state}"
    )