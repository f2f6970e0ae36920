# state2circuit/grammar.py
"""
Tolerant recognizer for wavefunction text such as

    (0.707)|00> + (0.707)|11>
    0.6|0> - 0.8i|1>
    |01> + -|10>

Malformed input never raises: unparseable coefficients are kept as
``LiteralCoefficient`` and over-wide basis states are reported back to the
caller in ``ParseResult.invalid_terms``.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

TERM_RE = re.compile(
    r"""
    (?P<sign>[+-])?\s*
    (?P<amp>
        \((?:[^()]|\([^()]*\))*\)
      | [0-9.]+(?:[eE][+-]?\d+)?[ij]?
    )?
    \s*\|\s*(?P<bits>[01]+)\s*[>⟩]
    """,
    re.VERBOSE,
)

_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPECIAL_RE = re.compile(r"nan|inf", re.IGNORECASE)


@dataclass(frozen=True)
class NumericCoefficient:
    value: complex

    @property
    def is_real(self) -> bool:
        return self.value.imag == 0

    @property
    def magnitude_squared(self) -> float:
        real, imag = self.value.real, self.value.imag
        # overflows to inf instead of raising
        return real * real + imag * imag


@dataclass(frozen=True)
class LiteralCoefficient:
    text: str


Coefficient = Union[NumericCoefficient, LiteralCoefficient]

ZERO = NumericCoefficient(0j)


@dataclass(frozen=True)
class Term:
    raw: str          # coefficient text as typed, sign included
    bits: str         # padded to the register width
    index: int
    coefficient: Coefficient


@dataclass
class ParseResult:
    num_qubits: int
    terms: List[Term] = field(default_factory=list)
    invalid_terms: List[str] = field(default_factory=list)
    matched: bool = False   # False when nothing resembling a term was found


def basis_bits(index: int, num_qubits: int) -> str:
    return format(index, f"0{num_qubits}b")


def _to_number(text: str) -> Optional[complex]:
    # complex() also reads spelled-out "nan" and "inf"
    if _SPECIAL_RE.search(text):
        return None
    if _FLOAT_RE.fullmatch(text):
        return complex(float(text), 0.0)
    if text.endswith(("i", "j")):
        try:
            return complex(text[:-1] + "j")
        except ValueError:
            return None
    return None


def parse_coefficient(sign: Optional[str], amp: Optional[str]) -> Coefficient:
    """
    sign: "+", "-" or None
    amp: the coefficient body, optionally parenthesized, or None
    """
    body = re.sub(r"[()\s]", "", amp or "")
    if not body:
        return NumericCoefficient(complex(-1.0 if sign == "-" else 1.0, 0.0))

    value = _to_number(body)
    if value is None:
        text = (sign or "") + body
        return LiteralCoefficient(text.lstrip("+"))

    if sign == "-":
        value = -value
    return NumericCoefficient(value)


def parse_wavefunction(text: str, num_qubits: int) -> ParseResult:
    result = ParseResult(num_qubits=num_qubits)

    for m in TERM_RE.finditer(text or ""):
        result.matched = True
        bits = m.group("bits")
        if len(bits) > num_qubits:
            result.invalid_terms.append(f"|{bits}>")
            continue

        padded = bits.rjust(num_qubits, "0")
        sign, amp = m.group("sign"), m.group("amp")
        raw = ((sign or "") + (amp or "")).strip()
        result.terms.append(
            Term(
                raw=raw,
                bits=padded,
                index=int(padded, 2),
                coefficient=parse_coefficient(sign, amp),
            )
        )

    logger.debug(
        "parsed %d term(s), %d invalid, for %d qubit(s)",
        len(result.terms), len(result.invalid_terms), num_qubits,
    )
    return result
