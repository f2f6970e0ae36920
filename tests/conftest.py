"""Pytest configuration and fixtures for state2circuit tests."""

import json

import httpx
import pytest

from state2circuit.pipeline import Converter
from state2circuit.synthesis import SynthesisClient

SERVICE_URL = "http://synthesis.test"

BELL_RESPONSE = {
    "num_qubits": 2,
    "gate_sequence": [
        {"step": 1, "gate": "H", "qubits": [0]},
        {"step": 2, "gate": "CNOT", "control": 0, "target": 1},
    ],
    "counts": {"00": 512, "11": 512},
}


class FakeService:
    """Records requests and answers with a canned body or status."""

    def __init__(self, body=None, status_code=200):
        self.body = BELL_RESPONSE if body is None else body
        self.status_code = status_code
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def service():
    return FakeService()


@pytest.fixture
def fake_service():
    return FakeService


@pytest.fixture
def make_client():
    def _make(handler):
        return SynthesisClient(SERVICE_URL, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def converter(service, make_client):
    return Converter(make_client(service))
