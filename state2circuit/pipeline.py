# state2circuit/pipeline.py
import logging
import threading
from typing import Hashable, Set

from .circuit import layout_circuit
from .errors import ConversionInProgressError, SynthesisError
from .gates import decode_gate_sequence, describe_gate_sequence
from .grammar import parse_wavefunction
from .models import ConversionResponse
from .qsphere import embed_state
from .synthesis import SynthesisClient
from .vector import (
    VectorResult,
    as_complex_vector,
    build_state_vector,
    to_response,
    validate_num_qubits,
)

logger = logging.getLogger(__name__)


def text_to_vector(num_qubits: int, text: str) -> VectorResult:
    n = validate_num_qubits(num_qubits)
    return build_state_vector(parse_wavefunction(text, n))


class Converter:
    """
    Runs one wavefunction conversion end to end: parse, build, ask the
    synthesis service for a circuit, then lay out the circuit and Q-sphere.

    Each session may have only one conversion in flight; a second call for
    the same session made while the first is waiting on the service raises
    ConversionInProgressError instead of racing it. Different sessions
    convert concurrently.
    """

    def __init__(self, client: SynthesisClient):
        self.client = client
        self._guard = threading.Lock()
        self._in_flight: Set[Hashable] = set()

    @property
    def busy(self) -> bool:
        with self._guard:
            return bool(self._in_flight)

    def is_busy(self, session: Hashable = None) -> bool:
        with self._guard:
            return session in self._in_flight

    def _claim(self, session: Hashable) -> None:
        with self._guard:
            if session in self._in_flight:
                raise ConversionInProgressError()
            self._in_flight.add(session)

    def _release(self, session: Hashable) -> None:
        with self._guard:
            self._in_flight.discard(session)

    def convert(self, num_qubits: int, text: str, session: Hashable = None) -> ConversionResponse:
        n = validate_num_qubits(num_qubits)
        self._claim(session)
        try:
            state = text_to_vector(n, text)
            out = ConversionResponse(state=to_response(state))

            try:
                resp = self.client.prepare_state(n, state.vector)
            except SynthesisError as e:
                logger.error("gate synthesis failed: %s", e)
                out.service_error = f"Backend error: {e}"
                return out

            gates = decode_gate_sequence(resp.gate_sequence)
            out.circuit = layout_circuit(resp.num_qubits, gates)
            out.summary = describe_gate_sequence(resp.gate_sequence)
            out.qsphere = embed_state(as_complex_vector(state.vector))
            out.counts = resp.counts
            return out
        finally:
            self._release(session)
