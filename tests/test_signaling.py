import pytest

from rtckit.errors import InvalidModificationError
from rtckit.signaling import (
    SignalingState,
    StateChangeOp,
    check_next_signaling_state,
)
from rtckit.states import SDPType


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("unknown", SignalingState.UNKNOWN),
        ("stable", SignalingState.STABLE),
        ("have-local-offer", SignalingState.HAVE_LOCAL_OFFER),
        ("have-remote-offer", SignalingState.HAVE_REMOTE_OFFER),
        ("have-local-pranswer", SignalingState.HAVE_LOCAL_PRANSWER),
        ("have-remote-pranswer", SignalingState.HAVE_REMOTE_PRANSWER),
        ("closed", SignalingState.CLOSED),
    ],
)
def test_from_string(raw, expected):
    assert SignalingState.from_string(raw) is expected


@pytest.mark.parametrize(
    "state, expected",
    [
        (SignalingState.UNKNOWN, "unknown"),
        (SignalingState.STABLE, "stable"),
        (SignalingState.HAVE_LOCAL_OFFER, "have-local-offer"),
        (SignalingState.HAVE_REMOTE_OFFER, "have-remote-offer"),
        (SignalingState.HAVE_LOCAL_PRANSWER, "have-local-pranswer"),
        (SignalingState.HAVE_REMOTE_PRANSWER, "have-remote-pranswer"),
        (SignalingState.CLOSED, "closed"),
    ],
)
def test_str(state, expected):
    assert str(state) == expected


def test_state_change_op_str():
    with pytest.raises(InvalidModificationError) as info:
        check_next_signaling_state(
            SignalingState.STABLE,
            SignalingState.STABLE,
            StateChangeOp.SET_LOCAL,
            SDPType.OFFER,
        )
    assert "stable->SetLocal(offer)->stable" in str(info.value)

    with pytest.raises(InvalidModificationError) as info:
        check_next_signaling_state(
            SignalingState.STABLE,
            SignalingState.STABLE,
            StateChangeOp.SET_REMOTE,
            SDPType.OFFER,
        )
    assert "stable->SetRemote(offer)->stable" in str(info.value)


VALID = [
    (SignalingState.STABLE, SignalingState.HAVE_LOCAL_OFFER, StateChangeOp.SET_LOCAL, SDPType.OFFER),
    (SignalingState.STABLE, SignalingState.HAVE_REMOTE_OFFER, StateChangeOp.SET_REMOTE, SDPType.OFFER),
    (SignalingState.HAVE_LOCAL_OFFER, SignalingState.STABLE, StateChangeOp.SET_REMOTE, SDPType.ANSWER),
    (
        SignalingState.HAVE_LOCAL_OFFER,
        SignalingState.HAVE_REMOTE_PRANSWER,
        StateChangeOp.SET_REMOTE,
        SDPType.PRANSWER,
    ),
    (SignalingState.HAVE_REMOTE_PRANSWER, SignalingState.STABLE, StateChangeOp.SET_REMOTE, SDPType.ANSWER),
    (SignalingState.HAVE_REMOTE_OFFER, SignalingState.STABLE, StateChangeOp.SET_LOCAL, SDPType.ANSWER),
    (
        SignalingState.HAVE_REMOTE_OFFER,
        SignalingState.HAVE_LOCAL_PRANSWER,
        StateChangeOp.SET_LOCAL,
        SDPType.PRANSWER,
    ),
    (SignalingState.HAVE_LOCAL_PRANSWER, SignalingState.STABLE, StateChangeOp.SET_LOCAL, SDPType.ANSWER),
]


@pytest.mark.parametrize("cur, nxt, op, sdp_type", VALID)
def test_valid_transitions(cur, nxt, op, sdp_type):
    assert check_next_signaling_state(cur, nxt, op, sdp_type) is nxt


@pytest.mark.parametrize(
    "cur, nxt, op, sdp_type",
    [
        (
            SignalingState.STABLE,
            SignalingState.HAVE_REMOTE_PRANSWER,
            StateChangeOp.SET_REMOTE,
            SDPType.PRANSWER,
        ),
        (
            SignalingState.STABLE,
            SignalingState.HAVE_LOCAL_OFFER,
            StateChangeOp.SET_REMOTE,
            SDPType.ROLLBACK,
        ),
        (
            SignalingState.HAVE_LOCAL_OFFER,
            SignalingState.STABLE,
            StateChangeOp.SET_LOCAL,
            SDPType.ANSWER,
        ),
        (
            SignalingState.CLOSED,
            SignalingState.STABLE,
            StateChangeOp.SET_LOCAL,
            SDPType.ANSWER,
        ),
    ],
)
def test_invalid_transitions(cur, nxt, op, sdp_type):
    with pytest.raises(InvalidModificationError):
        check_next_signaling_state(cur, nxt, op, sdp_type)


def test_invalid_transition_message():
    with pytest.raises(InvalidModificationError) as info:
        check_next_signaling_state(
            SignalingState.STABLE,
            SignalingState.HAVE_REMOTE_PRANSWER,
            StateChangeOp.SET_REMOTE,
            SDPType.PRANSWER,
        )
    assert str(info.value) == (
        "InvalidModificationError: invalid proposed signaling state transition "
        "stable->SetRemote(pranswer)->have-remote-pranswer"
    )


def test_rollback_from_stable_message():
    with pytest.raises(InvalidModificationError) as info:
        check_next_signaling_state(
            SignalingState.STABLE,
            SignalingState.STABLE,
            StateChangeOp.SET_LOCAL,
            SDPType.ROLLBACK,
        )
    assert str(info.value) == "InvalidModificationError: can't rollback from stable state"