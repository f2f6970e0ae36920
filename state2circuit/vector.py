# state2circuit/vector.py
import logging
import math
from dataclasses import dataclass, field
from typing import List, Sequence

from .errors import InvalidQubitCountError
from .grammar import (
    ZERO,
    Coefficient,
    LiteralCoefficient,
    NumericCoefficient,
    ParseResult,
    basis_bits,
)
from .models import ComplexNumber, VectorResponse, WireCoefficient

logger = logging.getLogger(__name__)

MIN_QUBITS = 1
MAX_QUBITS = 5

NORM_MIN = 0.99
NORM_MAX = 1.01


@dataclass
class VectorResult:
    num_qubits: int
    vector: List[Coefficient]
    norm_sum: float
    normalized: bool
    invalid_terms: List[str] = field(default_factory=list)
    no_terms: bool = False
    diagnostics: List[str] = field(default_factory=list)


def validate_num_qubits(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidQubitCountError(value)
    if value < MIN_QUBITS or value > MAX_QUBITS:
        raise InvalidQubitCountError(value)
    return value


def zero_vector(num_qubits: int) -> List[Coefficient]:
    return [ZERO] * (1 << num_qubits)


def normalization_sum(vector: Sequence[Coefficient]) -> float:
    # literal coefficients carry no mass
    return sum(
        c.magnitude_squared for c in vector if isinstance(c, NumericCoefficient)
    )


def example_for(num_qubits: int) -> str:
    zeros = "0" * num_qubits
    ones = "1" * num_qubits
    return f"(0.7)|{zeros}> + (0.7)|{ones}>"


def build_state_vector(parsed: ParseResult) -> VectorResult:
    """
    Write each parsed coefficient at its basis index (later terms win) and
    validate normalization. A vector whose sum of squared magnitudes falls
    outside [NORM_MIN, NORM_MAX] is replaced by zeros as a whole.
    """
    n = parsed.num_qubits
    vector = zero_vector(n)
    for term in parsed.terms:
        vector[term.index] = term.coefficient

    diagnostics: List[str] = []
    if not parsed.matched:
        diagnostics.append(
            f"No valid terms found. Example for {n} qubit(s): {example_for(n)}"
        )
    if parsed.invalid_terms:
        diagnostics.append(
            f"Invalid basis states: {', '.join(parsed.invalid_terms)} "
            f"(expected {n}-qubit states)"
        )

    norm_sum = normalization_sum(vector)
    normalized = NORM_MIN <= norm_sum <= NORM_MAX
    if not normalized:
        logger.warning("normalization failed for %d qubit(s): sum=%.4f", n, norm_sum)
        diagnostics.append(
            f"Invalid normalization. Sum of squares = {norm_sum:.4f}. Should be ≈1."
        )
        vector = zero_vector(n)

    logger.debug("built %d-dim vector, sum=%.6f", len(vector), norm_sum)
    return VectorResult(
        num_qubits=n,
        vector=vector,
        norm_sum=norm_sum,
        normalized=normalized,
        invalid_terms=list(parsed.invalid_terms),
        no_terms=not parsed.matched,
        diagnostics=diagnostics,
    )


def format_number(x: float) -> str:
    if math.isfinite(x) and x == int(x):
        return str(int(x))
    return repr(x)


def format_coefficient(c: Coefficient) -> str:
    if isinstance(c, LiteralCoefficient):
        return c.text
    if c.is_real:
        return format_number(c.value.real)
    im = c.value.imag
    sign = "-" if im < 0 else "+"
    return f"{format_number(c.value.real)}{sign}{format_number(abs(im))}i"


def format_vector(vector: Sequence[Coefficient]) -> str:
    return "[" + ", ".join(format_coefficient(c) for c in vector) + "]"


def to_wavefunction(vector: Sequence[Coefficient]) -> str:
    """Render a vector back into text that parse_wavefunction accepts."""
    n = (len(vector) - 1).bit_length()
    return " + ".join(
        f"({format_coefficient(c)})|{basis_bits(i, n)}>" for i, c in enumerate(vector)
    )


def as_complex_vector(vector: Sequence[Coefficient]) -> List[complex]:
    return [c.value if isinstance(c, NumericCoefficient) else 0j for c in vector]


def to_wire(vector: Sequence[Coefficient]) -> List[WireCoefficient]:
    out: List[WireCoefficient] = []
    for c in vector:
        if isinstance(c, LiteralCoefficient):
            out.append(c.text)
        elif c.is_real:
            out.append(float(c.value.real))
        else:
            out.append(ComplexNumber(re=c.value.real, im=c.value.imag))
    return out


def to_response(result: VectorResult) -> VectorResponse:
    return VectorResponse(
        num_qubits=result.num_qubits,
        vector=to_wire(result.vector),
        column_vector=format_vector(result.vector),
        norm_sum=round(result.norm_sum, 4),
        normalized=result.normalized,
        invalid_terms=result.invalid_terms,
        diagnostics=result.diagnostics,
    )
