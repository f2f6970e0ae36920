# state2circuit/synthesis.py
import logging
from typing import Optional, Sequence

import httpx
from pydantic import ValidationError

from .errors import SynthesisError
from .grammar import Coefficient
from .models import PrepareStateRequest, PrepareStateResponse
from .vector import to_wire

logger = logging.getLogger(__name__)


class SynthesisClient:
    """
    Client for the remote state-preparation service.

    The service takes a state vector and answers with the gate sequence that
    prepares it from |0...0>, plus simulated measurement counts.
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = 60.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def build_request(self, num_qubits: int, vector: Sequence[Coefficient]) -> PrepareStateRequest:
        return PrepareStateRequest(
            num_qubits=num_qubits,
            amplitudes=to_wire(vector),
            initial_basis="0" * num_qubits,
            optimized=True,
        )

    def prepare_state(self, num_qubits: int, vector: Sequence[Coefficient]) -> PrepareStateResponse:
        payload = self.build_request(num_qubits, vector).model_dump(mode="json")
        logger.info("requesting gate synthesis for %d qubit(s)", num_qubits)

        try:
            resp = self._http.post("/prepare_state", json=payload)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            raise SynthesisError(f"service answered {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise SynthesisError(str(e) or type(e).__name__) from e
        except ValueError as e:
            raise SynthesisError(f"invalid JSON from service: {e}") from e

        try:
            result = PrepareStateResponse.model_validate(data)
        except ValidationError as e:
            raise SynthesisError(f"unexpected response shape: {e.error_count()} error(s)") from e

        logger.info(
            "service returned %d gate(s) for %d qubit(s)",
            len(result.gate_sequence), result.num_qubits,
        )
        return result
