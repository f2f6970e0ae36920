# state2circuit/gates.py
import logging
from typing import List, Optional, Sequence

from .models import BackendGate, GateOp

logger = logging.getLogger(__name__)

SINGLE_QUBIT = {"X", "Y", "Z", "H", "S", "T", "SDG", "TDG"}
ROTATION = {"RX", "RY", "RZ", "PHASE"}
CONTROLLED = {"CNOT", "CZ"}


def _wires(*values: Optional[int]) -> Optional[List[int]]:
    if any(v is None for v in values):
        return None
    return list(values)


def _unknown(name: str) -> GateOp:
    return GateOp(kind="unknown", name=name)


def decode_gate(entry: BackendGate) -> GateOp:
    """Translate one gate entry returned by the synthesis service."""
    name = entry.gate.upper()

    if name in SINGLE_QUBIT or name in ROTATION:
        if not entry.qubits:
            return _unknown(name)
        if name in ROTATION:
            return GateOp(kind="rotation", name=name, wires=entry.qubits[:1], angle=entry.angle)
        return GateOp(kind="single", name=name, wires=entry.qubits[:1])

    if name in CONTROLLED:
        wires = _wires(entry.control, entry.target)
    elif name == "CCNOT":
        wires = _wires(entry.control1, entry.control2, entry.target)
    elif name == "SWAP":
        wires = _wires(entry.q1, entry.q2)
    elif name == "MEASURE":
        wires = _wires(entry.qubit)
    else:
        logger.info("unrecognized gate %r left out of the diagram", entry.gate)
        return _unknown(name)

    if wires is None:
        logger.warning("gate %s is missing wire indices: %s", name, entry.model_dump())
        return _unknown(name)

    if name in CONTROLLED:
        return GateOp(kind="controlled", name=name, wires=wires)
    if name == "CCNOT":
        return GateOp(kind="doubly_controlled", name=name, wires=wires)
    if name == "SWAP":
        return GateOp(kind="swap", name=name, wires=wires)
    return GateOp(kind="measure", name=name, wires=wires, clbit=entry.clbit)


def decode_gate_sequence(entries: Sequence[BackendGate]) -> List[GateOp]:
    return [decode_gate(e) for e in entries]


def _entry_wires(entry: BackendGate) -> List[int]:
    if entry.qubits:
        return entry.qubits
    op = decode_gate(entry)
    return op.wires


def describe_gate_sequence(entries: Sequence[BackendGate]) -> str:
    if not entries:
        return "No gates returned by backend."

    lines = []
    for pos, entry in enumerate(entries, start=1):
        step = entry.step if entry.step is not None else pos
        name = entry.gate.upper()
        if name == "CNOT":
            lines.append(
                f"{step}. Apply CNOT (control q{entry.control} → target q{entry.target})"
            )
            continue

        qubits = ", ".join(str(q) for q in _entry_wires(entry))
        if name in ROTATION and entry.angle is not None:
            lines.append(f"{step}. Apply {entry.gate}({entry.angle:.6f}) on qubits {qubits}")
        else:
            lines.append(f"{step}. Apply {entry.gate} on qubits {qubits}")
    return "\n".join(lines)
