"""
Local benchmark for the state2circuit core (no HTTP, no synthesis service).

Example:
    python benchmark.py --runs 50 --qubits 5 --gates 40
"""

import time
import statistics as stats
from typing import List

from state2circuit.circuit import layout_circuit
from state2circuit.grammar import parse_wavefunction
from state2circuit.models import GateOp
from state2circuit.qsphere import embed_state
from state2circuit.samples import random_sample
from state2circuit.vector import as_complex_vector, build_state_vector


def make_gates(n: int, count: int) -> List[GateOp]:
    """Alternate RY rotations and CNOT ladders across the register."""
    gates = []
    for i in range(count):
        q = i % n
        if i % 2 == 0 or n == 1:
            gates.append(GateOp(kind="rotation", name="RY", wires=[q], angle=0.1 * i))
        else:
            gates.append(GateOp(kind="controlled", name="CNOT", wires=[q, (q + 1) % n]))
    return gates


def time_call(fn, *args, **kwargs) -> float:
    """Time a single call to fn(*args, **kwargs) and return duration in seconds."""
    t0 = time.perf_counter()
    fn(*args, **kwargs)
    t1 = time.perf_counter()
    return t1 - t0


def report(label: str, times: List[float]) -> None:
    print(f"[{label}] runs={len(times)}")
    print(f"  min   = {min(times) * 1e3:.3f} ms")
    print(f"  max   = {max(times) * 1e3:.3f} ms")
    print(f"  mean  = {stats.mean(times) * 1e3:.3f} ms")
    if len(times) >= 2:
        print(f"  stdev = {stats.stdev(times) * 1e3:.3f} ms")


def benchmark_parse(runs: int, n: int) -> None:
    text = random_sample(n).wavefunction
    times = [
        time_call(lambda: build_state_vector(parse_wavefunction(text, n)))
        for _ in range(runs)
    ]
    report(f"parse+build n={n}", times)


def benchmark_qsphere(runs: int, n: int) -> None:
    text = random_sample(n).wavefunction
    amps = as_complex_vector(build_state_vector(parse_wavefunction(text, n)).vector)

    # warm-up run (jax dispatch)
    embed_state(amps)

    report(f"qsphere n={n}", [time_call(embed_state, amps) for _ in range(runs)])


def benchmark_layout(runs: int, n: int, count: int) -> None:
    gates = make_gates(n, count)
    report(f"layout n={n}, gates={count}", [time_call(layout_circuit, n, gates) for _ in range(runs)])


def main() -> None:
    import argparse

    parser = argparse.ArgumentParser(description="Local core benchmark (no HTTP).")
    parser.add_argument("--runs", type=int, default=50, help="Number of runs per benchmark.")
    parser.add_argument("--qubits", type=int, default=5, help="Register width (1-5).")
    parser.add_argument("--gates", type=int, default=40, help="Gate count for the layout benchmark.")

    args = parser.parse_args()

    print("=== Benchmark parse + build ===")
    benchmark_parse(args.runs, args.qubits)
    print()
    print("=== Benchmark qsphere ===")
    benchmark_qsphere(args.runs, args.qubits)
    print()
    print("=== Benchmark layout ===")
    benchmark_layout(args.runs, args.qubits, args.gates)


if __name__ == "__main__":
    main()
