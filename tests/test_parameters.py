import pytest

from rtckit.parameters import (
    RTCPFeedback,
    RTPCodingParameters,
    RTPDecodingParameters,
    RTPEncodingParameters,
    RTPReceiveParameters,
    RTPSendParameters,
    RTPTransceiverInit,
    SCTPCapabilities,
    SessionDescription,
)
from rtckit.states import RTPTransceiverDirection, SDPType, UnknownTypeError


@pytest.mark.parametrize(
    "desc, expected",
    [
        (SessionDescription(SDPType.OFFER, "sdp"), '{"type":"offer","sdp":"sdp"}'),
        (SessionDescription(SDPType.PRANSWER, "sdp"), '{"type":"pranswer","sdp":"sdp"}'),
        (SessionDescription(SDPType.ANSWER, "sdp"), '{"type":"answer","sdp":"sdp"}'),
        (SessionDescription(SDPType.ROLLBACK, "sdp"), '{"type":"rollback","sdp":"sdp"}'),
    ],
)
def test_session_description_json_round_trip(desc, expected):
    encoded = desc.to_json()
    assert encoded == expected
    assert SessionDescription.from_json(encoded) == desc


def test_session_description_unknown_type():
    desc = SessionDescription(SDPType.UNKNOWN, "sdp")
    encoded = desc.to_json()
    assert encoded == '{"type":"unknown","sdp":"sdp"}'
    with pytest.raises(UnknownTypeError):
        SessionDescription.from_json(encoded)


def test_from_json_case_insensitive_type():
    desc = SessionDescription.from_json('{"type":"OFFER","sdp":"x"}')
    assert desc == SessionDescription(SDPType.OFFER, "x")


def test_from_json_missing_fields_keep_defaults():
    desc = SessionDescription.from_json("{}")
    assert desc.type is SDPType.UNKNOWN
    assert desc.sdp == ""


def test_from_json_null_type_rejected():
    with pytest.raises(UnknownTypeError):
        SessionDescription.from_json('{"type":null,"sdp":"x"}')


def test_from_json_requires_object():
    with pytest.raises(ValueError):
        SessionDescription.from_json("[]")


def test_to_json_escapes_html_characters():
    desc = SessionDescription(SDPType.OFFER, "<a&b>")
    encoded = desc.to_json()
    assert encoded == '{"type":"offer","sdp":"\\u003ca\\u0026b\\u003e"}'
    assert SessionDescription.from_json(encoded) == desc


def test_sctp_capabilities_to_dict():
    assert SCTPCapabilities(max_message_size=65536).to_dict() == {"maxMessageSize": 65536}
    assert SCTPCapabilities().to_dict() == {"maxMessageSize": 0}


def test_coding_parameters_shared_fields():
    decoding = RTPDecodingParameters(ssrc=5, payload_type=96)
    encoding = RTPEncodingParameters(ssrc=5, payload_type=96)
    assert (decoding.ssrc, decoding.payload_type) == (5, 96)
    assert (encoding.ssrc, encoding.payload_type) == (5, 96)
    assert isinstance(decoding, RTPCodingParameters)
    assert RTPCodingParameters().ssrc == 0


def test_receive_and_send_parameters_defaults():
    assert RTPReceiveParameters().encodings == RTPDecodingParameters(0, 0)
    assert RTPSendParameters().encodings == RTPEncodingParameters(0, 0)
    params = RTPReceiveParameters(RTPDecodingParameters(ssrc=1234))
    assert params.encodings.ssrc == 1234


def test_transceiver_init_lists_are_independent():
    first = RTPTransceiverInit(direction=RTPTransceiverDirection.SENDRECV)
    second = RTPTransceiverInit()
    first.send_encodings.append(RTPEncodingParameters(ssrc=1))
    assert len(second.send_encodings) == 0
    assert first.direction is RTPTransceiverDirection.SENDRECV
    assert second.direction is RTPTransceiverDirection.UNKNOWN


def test_rtcp_feedback_fields():
    feedback = RTCPFeedback(type="nack", parameter="pli")
    assert feedback == RTCPFeedback("nack", "pli")
    assert feedback.type == "nack"
    assert feedback.parameter == "pli"