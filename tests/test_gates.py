import logging

import pytest

from state2circuit.gates import decode_gate, decode_gate_sequence, describe_gate_sequence
from state2circuit.models import BackendGate


def gate(**kwargs):
    return BackendGate(**kwargs)


@pytest.mark.parametrize("name", ["h", "X", "sdg", "T"])
def test_single_qubit_gates(name):
    op = decode_gate(gate(gate=name, qubits=[2]))
    assert op.kind == "single"
    assert op.name == name.upper()
    assert op.wires == [2]


def test_rotation_keeps_angle():
    op = decode_gate(gate(gate="ry", qubits=[1], angle=1.5))
    assert op.kind == "rotation"
    assert op.name == "RY"
    assert op.angle == 1.5


def test_controlled_wires_are_control_then_target():
    op = decode_gate(gate(gate="CNOT", control=1, target=0))
    assert op.kind == "controlled"
    assert op.wires == [1, 0]
    assert decode_gate(gate(gate="cz", control=0, target=2)).name == "CZ"


def test_toffoli_swap_and_measure():
    ccx = decode_gate(gate(gate="CCNOT", control1=0, control2=2, target=1))
    assert (ccx.kind, ccx.wires) == ("doubly_controlled", [0, 2, 1])

    sw = decode_gate(gate(gate="SWAP", q1=0, q2=1))
    assert (sw.kind, sw.wires) == ("swap", [0, 1])

    m = decode_gate(gate(gate="MEASURE", qubit=1, clbit=1))
    assert (m.kind, m.wires, m.clbit) == ("measure", [1], 1)


def test_unknown_gate_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="state2circuit.gates"):
        op = decode_gate(gate(gate="ISWAP", q1=0, q2=1))
    assert op.kind == "unknown"
    assert op.wires == []
    assert "ISWAP" in caplog.text


@pytest.mark.parametrize(
    "entry",
    [
        {"gate": "H"},
        {"gate": "RX", "qubits": []},
        {"gate": "CNOT", "control": 0},
        {"gate": "CCNOT", "control1": 0, "target": 2},
    ],
)
def test_missing_wires_decode_as_unknown(entry):
    assert decode_gate(BackendGate(**entry)).kind == "unknown"


def test_extra_fields_are_tolerated():
    entry = BackendGate(gate="H", qubits=[0], label="hadamard")
    assert decode_gate(entry).kind == "single"


def test_sequence_keeps_order():
    ops = decode_gate_sequence([gate(gate="H", qubits=[0]), gate(gate="CNOT", control=0, target=1)])
    assert [o.name for o in ops] == ["H", "CNOT"]


def test_summary_lines():
    entries = [
        gate(step=1, gate="H", qubits=[0]),
        gate(step=2, gate="CNOT", control=0, target=1),
        gate(step=3, gate="RY", qubits=[1], angle=0.5),
    ]
    assert describe_gate_sequence(entries).splitlines() == [
        "1. Apply H on qubits 0",
        "2. Apply CNOT (control q0 → target q1)",
        "3. Apply RY(0.500000) on qubits 1",
    ]


def test_summary_numbers_steps_by_position_when_missing():
    entries = [gate(gate="SWAP", q1=0, q2=2), gate(gate="MEASURE", qubit=1, clbit=1)]
    assert describe_gate_sequence(entries).splitlines() == [
        "1. Apply SWAP on qubits 0, 2",
        "2. Apply MEASURE on qubits 1",
    ]


def test_summary_of_empty_sequence():
    assert describe_gate_sequence([]) == "No gates returned by backend."
