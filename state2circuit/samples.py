# state2circuit/samples.py
import math
import random
from typing import List, Optional

from .grammar import basis_bits
from .models import Sample


def _amp(count: int) -> str:
    return f"{1 / math.sqrt(count):.3f}"


def _superposition(states: List[str]) -> str:
    amp = _amp(len(states))
    return " + ".join(f"({amp})|{bits}>" for bits in states)


def samples(n: int) -> List[Sample]:
    """Canned example wavefunctions for an n-qubit register."""
    dim = 1 << n
    zeros, ones = "0" * n, "1" * n
    out: List[Sample] = []

    if n >= 2:
        out.append(Sample(name="Bell State (|00⟩ + |11⟩)", wavefunction=_superposition([zeros, ones])))

    excited = "0" * (n - 1) + "1"
    out.append(Sample(name=f"Single Excited |{excited}⟩", wavefunction=f"(1.0)|{excited}>"))

    if n >= 2:
        even = [basis_bits(i, n) for i in range(0, dim, 2)]
        out.append(Sample(name="Even States Only", wavefunction=_superposition(even)))

    if n >= 3:
        single = [basis_bits(1 << k, n) for k in range(n)]
        out.append(Sample(name="Single Excitation States", wavefunction=_superposition(single)))

    if n >= 2:
        amp = _amp(2)
        out.append(
            Sample(
                name="Custom Pattern with Zeros",
                wavefunction=f"({amp})|{zeros}> + (0.0)|{excited}> + ({amp})|{ones[:-1]}0>",
            )
        )

    return out


def random_sample(n: int, rng: Optional[random.Random] = None) -> Sample:
    """A random normalized real state, freshly drawn on every call."""
    rng = rng or random.Random()
    amps = [rng.random() for _ in range(1 << n)]
    norm = math.sqrt(sum(a * a for a in amps))
    if norm == 0:
        amps, norm = [1.0] + [0.0] * (len(amps) - 1), 1.0
    terms = [f"({a / norm:.3f})|{basis_bits(i, n)}>" for i, a in enumerate(amps)]
    return Sample(name="Random Normalized State", wavefunction=" + ".join(terms))
