import httpx
import pytest

from state2circuit.errors import SynthesisError
from state2circuit.grammar import LiteralCoefficient, NumericCoefficient
from state2circuit.synthesis import SynthesisClient


def test_request_body(service, make_client):
    client = make_client(service)
    vector = [NumericCoefficient(0.6), NumericCoefficient(0j), NumericCoefficient(0j), NumericCoefficient(0.8j)]
    client.prepare_state(2, vector)

    (body,) = service.requests
    assert body == {
        "num_qubits": 2,
        "amplitudes": [0.6, 0.0, 0.0, {"re": 0.0, "im": 0.8}],
        "initial_basis": "00",
        "optimized": True,
    }


def test_literal_coefficients_are_sent_as_text(service, make_client):
    client = make_client(service)
    req = client.build_request(1, [LiteralCoefficient("abc"), NumericCoefficient(1)])
    assert req.amplitudes == ["abc", 1.0]
    assert req.initial_basis == "0"


def test_posts_to_prepare_state(service, make_client):
    seen = []

    def handler(request):
        seen.append((request.method, request.url.path))
        return service(request)

    make_client(handler).prepare_state(1, [NumericCoefficient(1), NumericCoefficient(0)])
    assert seen == [("POST", "/prepare_state")]


def test_decodes_response(service, make_client):
    resp = make_client(service).prepare_state(2, [NumericCoefficient(1)] + [NumericCoefficient(0)] * 3)
    assert resp.num_qubits == 2
    assert [g.gate for g in resp.gate_sequence] == ["H", "CNOT"]
    assert resp.counts == {"00": 512, "11": 512}


def test_missing_lists_default_to_empty(fake_service, make_client):
    resp = make_client(fake_service({"num_qubits": 1})).prepare_state(1, [NumericCoefficient(1), NumericCoefficient(0)])
    assert resp.gate_sequence == []
    assert resp.counts == {}


def test_http_error_status(fake_service, make_client):
    client = make_client(fake_service({"detail": "boom"}, status_code=500))
    with pytest.raises(SynthesisError, match="service answered 500"):
        client.prepare_state(1, [NumericCoefficient(1), NumericCoefficient(0)])


def test_invalid_json(fake_service, make_client):
    client = make_client(fake_service("<html>waking up</html>"))
    with pytest.raises(SynthesisError, match="invalid JSON"):
        client.prepare_state(1, [NumericCoefficient(1), NumericCoefficient(0)])


def test_unexpected_shape(fake_service, make_client):
    client = make_client(fake_service({"gates": []}))
    with pytest.raises(SynthesisError, match="unexpected response shape"):
        client.prepare_state(1, [NumericCoefficient(1), NumericCoefficient(0)])


def test_connection_failure(make_client):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SynthesisError, match="connection refused"):
        make_client(handler).prepare_state(1, [NumericCoefficient(1), NumericCoefficient(0)])


def test_base_url_trailing_slash_is_dropped(service):
    with SynthesisClient("http://synthesis.test/", transport=httpx.MockTransport(service)) as client:
        assert client.base_url == "http://synthesis.test"

