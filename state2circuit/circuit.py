# state2circuit/circuit.py
"""
Column layout for circuit diagrams.

Every gate gets its own column at x = 100 + 120 * index, whether or not it
shares wires with its neighbours. Quantum wires are 60 px apart, followed by
one classical register wire per qubit at 40 px pitch.
"""
import math
from typing import Dict, List, Sequence
from xml.sax.saxutils import escape

from .models import (
    CircuitColumn,
    CircuitDiagram,
    CirclePrimitive,
    ColorScheme,
    GateOp,
    LinePrimitive,
    Primitive,
    RectPrimitive,
    TextPrimitive,
)

COLUMN_WIDTH = 120
FIRST_COLUMN_X = 100
QUBIT_PITCH = 60
CLBIT_PITCH = 40
WIRE_MARGIN = 20

GATE_BOX = 50
IDENTITY_BOX = 30
CONTROL_RADIUS = 6
TARGET_RADIUS = 12
CROSS_HALF = 10

REQUIRED_WIRES = {
    "single": 1,
    "rotation": 1,
    "controlled": 2,
    "swap": 2,
    "doubly_controlled": 3,
    "measure": 1,
}


def canvas_size(num_qubits: int, num_gates: int):
    width = COLUMN_WIDTH * (num_gates + 1)
    height = num_qubits * QUBIT_PITCH + num_qubits * CLBIT_PITCH + 60
    return width, height


def qubit_y(q: int) -> float:
    return 30 + q * QUBIT_PITCH


def clbit_y(num_qubits: int, c: int) -> float:
    return num_qubits * QUBIT_PITCH + 50 + c * CLBIT_PITCH


def column_x(index: int) -> float:
    return FIRST_COLUMN_X + index * COLUMN_WIDTH


def _wires(num_qubits: int, width: float) -> List[Primitive]:
    out: List[Primitive] = []
    for q in range(num_qubits):
        y = qubit_y(q)
        out.append(LinePrimitive(role="qubit-wire", x1=WIRE_MARGIN, y1=y, x2=width - WIRE_MARGIN, y2=y))
        out.append(TextPrimitive(role="wire-label", x=0, y=y + 5, text=f"q{q}"))
    for c in range(num_qubits):
        y = clbit_y(num_qubits, c)
        out.append(LinePrimitive(role="clbit-wire", x1=WIRE_MARGIN, y1=y, x2=width - WIRE_MARGIN, y2=y))
        out.append(TextPrimitive(role="wire-label", x=0, y=y + 5, text=f"cr[{c}]"))
    return out


def _connector(x: float, y1: float, y2: float) -> LinePrimitive:
    return LinePrimitive(role="connector", x1=x, y1=y1, x2=x, y2=y2)


def _control(x: float, y: float, tooltip: str) -> CirclePrimitive:
    return CirclePrimitive(role="control", cx=x, cy=y, r=CONTROL_RADIUS, filled=True, tooltip=tooltip)


def _target(x: float, y: float, tooltip: str) -> List[Primitive]:
    # ring with a plus inside
    return [
        CirclePrimitive(role="target", cx=x, cy=y, r=TARGET_RADIUS, filled=False, tooltip=tooltip),
        LinePrimitive(role="target-cross", x1=x - CROSS_HALF, y1=y, x2=x + CROSS_HALF, y2=y),
        LinePrimitive(role="target-cross", x1=x, y1=y - CROSS_HALF, x2=x, y2=y + CROSS_HALF),
    ]


def _box(x: float, y: float, size: float, label: str, role: str, tooltip=None, font_size=14):
    half = size / 2
    return [
        RectPrimitive(role=role, x=x - half, y=y - half, width=size, height=size, tooltip=tooltip),
        TextPrimitive(role=role + "-label", x=x, y=y, text=label, anchor="middle", font_size=font_size),
    ]


def gate_label(op: GateOp) -> str:
    if op.kind == "rotation" and op.angle is not None:
        return f"{op.name}({math.degrees(op.angle):.1f}°)"
    return op.name


def is_drawable(op: GateOp) -> bool:
    # unknown kinds, and gates missing wires, are skipped
    return len(op.wires) >= REQUIRED_WIRES.get(op.kind, math.inf)


def gate_primitives(op: GateOp, x: float, num_qubits: int) -> List[Primitive]:
    """Primitives for one gate, not including identity filler."""
    if not is_drawable(op):
        return []

    if op.kind in ("single", "rotation"):
        return _box(x, qubit_y(op.wires[0]), GATE_BOX, gate_label(op), "gate", tooltip=op.name)

    if op.kind == "controlled":
        yc, yt = qubit_y(op.wires[0]), qubit_y(op.wires[1])
        if op.name == "CZ":
            return [
                _control(x, yc, "CZ control"),
                _control(x, yt, "CZ target"),
                _connector(x, yc, yt),
            ]
        return [
            _control(x, yc, f"{op.name} control"),
            _connector(x, yc, yt),
            *_target(x, yt, f"{op.name} gate"),
        ]

    if op.kind == "swap":
        out: List[Primitive] = []
        for y in (qubit_y(op.wires[0]), qubit_y(op.wires[1])):
            out.append(LinePrimitive(role="swap-cross", x1=x - CROSS_HALF, y1=y - CROSS_HALF, x2=x + CROSS_HALF, y2=y + CROSS_HALF))
            out.append(LinePrimitive(role="swap-cross", x1=x - CROSS_HALF, y1=y + CROSS_HALF, x2=x + CROSS_HALF, y2=y - CROSS_HALF))
        out.append(_connector(x, qubit_y(op.wires[0]), qubit_y(op.wires[1])))
        return out

    if op.kind == "doubly_controlled":
        ys = [qubit_y(w) for w in op.wires]
        return [
            _control(x, ys[0], f"{op.name} control"),
            _control(x, ys[1], f"{op.name} control"),
            _connector(x, min(ys[0], ys[1]), ys[2]),
            *_target(x, ys[2], f"{op.name} gate"),
        ]

    if op.kind == "measure":
        y = qubit_y(op.wires[0])
        out = _box(x, y, GATE_BOX, "M", "measure", tooltip=op.name)
        if op.clbit is not None and 0 <= op.clbit < num_qubits:
            out.append(LinePrimitive(role="measure-link", x1=x, y1=y + GATE_BOX / 2, x2=x, y2=clbit_y(num_qubits, op.clbit)))
        return out

    # unknown kinds draw nothing
    return []


def idle_wires(op: GateOp, num_qubits: int) -> List[int]:
    if op.kind == "measure" or not is_drawable(op):
        return []
    involved = set(op.wires)
    return [q for q in range(num_qubits) if q not in involved]


def layout_circuit(num_qubits: int, gates: Sequence[GateOp]) -> CircuitDiagram:
    width, height = canvas_size(num_qubits, len(gates))
    columns = []
    for i, op in enumerate(gates):
        x = column_x(i)
        primitives = gate_primitives(op, x, num_qubits)
        idle = idle_wires(op, num_qubits)
        for q in idle:
            primitives.extend(_box(x, qubit_y(q), IDENTITY_BOX, "I", "identity", font_size=12))
        columns.append(CircuitColumn(index=i, x=x, gate=op, idle_wires=idle, primitives=primitives))

    return CircuitDiagram(
        num_qubits=num_qubits,
        width=width,
        height=height,
        wires=_wires(num_qubits, width),
        columns=columns,
    )


# ---- SVG output ----

PALETTES: Dict[str, Dict[str, str]] = {
    "light": {
        "stroke": "#000000",
        "text": "#000000",
        "gate": "#3c745bff",
        "clbit": "blue",
        "ring": "white",
        "identity": "#f0f0f0",
    },
    "dark": {
        "stroke": "#24496dff",
        "text": "#234363ff",
        "gate": "#d0d9e9ff",
        "clbit": "blue",
        "ring": "#1e293b",
        "identity": "#374151",
    },
}


def _svg_element(p: Primitive, colors: Dict[str, str]) -> str:
    if isinstance(p, LinePrimitive):
        stroke = colors["clbit"] if p.role == "clbit-wire" else colors["stroke"]
        return (
            f'<line x1="{p.x1:g}" y1="{p.y1:g}" x2="{p.x2:g}" y2="{p.y2:g}" '
            f'stroke="{stroke}" stroke-width="2"/>'
        )

    if isinstance(p, TextPrimitive):
        attrs = f'x="{p.x:g}" y="{p.y:g}" fill="{colors["text"]}"'
        if p.anchor == "middle":
            attrs += ' text-anchor="middle" dominant-baseline="middle"'
        if p.font_size:
            attrs += f' font-size="{p.font_size}"'
        return f"<text {attrs}>{escape(p.text)}</text>"

    title = f"<title>{escape(p.tooltip)}</title>" if p.tooltip else ""
    if isinstance(p, RectPrimitive):
        fill = colors["identity"] if p.role == "identity" else colors["gate"]
        open_tag = (
            f'<rect x="{p.x:g}" y="{p.y:g}" width="{p.width:g}" height="{p.height:g}" '
            f'fill="{fill}" stroke="{colors["stroke"]}"'
        )
        return f"{open_tag}>{title}</rect>" if title else f"{open_tag}/>"

    fill = colors["stroke"] if p.filled else colors["ring"]
    open_tag = (
        f'<circle cx="{p.cx:g}" cy="{p.cy:g}" r="{p.r:g}" fill="{fill}" '
        f'stroke="{colors["stroke"]}"'
    )
    return f"{open_tag}>{title}</circle>" if title else f"{open_tag}/>"


def render_svg(diagram: CircuitDiagram, scheme: ColorScheme = "light") -> str:
    colors = PALETTES[scheme]
    body = [_svg_element(p, colors) for p in diagram.wires]
    for column in diagram.columns:
        body.extend(_svg_element(p, colors) for p in column.primitives)
    header = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{diagram.width:g}" '
        f'height="{diagram.height:g}">'
    )
    return "\n".join([header, *body, "</svg>"])
