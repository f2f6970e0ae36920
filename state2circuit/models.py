from pydantic import BaseModel, ConfigDict
from typing import Dict, Literal, List, Optional, Union

GateKind = Literal[
    "single",
    "rotation",
    "controlled",
    "swap",
    "doubly_controlled",
    "measure",
    "unknown",
]

ColorScheme = Literal["light", "dark"]

class ComplexNumber(BaseModel):
    re: float
    im: float

# what the vector looks like on the wire: reals, {re, im} pairs, or
# the literal text of a coefficient that did not parse as a number
WireCoefficient = Union[float, ComplexNumber, str]


# ---- gate synthesis service contract ----

class BackendGate(BaseModel):
    model_config = ConfigDict(extra="allow")

    gate: str
    step: Optional[int] = None
    qubits: Optional[List[int]] = None
    angle: Optional[float] = None
    control: Optional[int] = None
    target: Optional[int] = None
    control1: Optional[int] = None
    control2: Optional[int] = None
    q1: Optional[int] = None
    q2: Optional[int] = None
    qubit: Optional[int] = None
    clbit: Optional[int] = None

class PrepareStateRequest(BaseModel):
    num_qubits: int
    amplitudes: List[WireCoefficient]
    initial_basis: str
    optimized: bool = True

class PrepareStateResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    num_qubits: int
    gate_sequence: List[BackendGate] = []
    counts: Dict[str, int] = {}


# ---- circuit diagram ----

class GateOp(BaseModel):
    kind: GateKind
    name: str
    wires: List[int] = []       # role ordered: controls before target
    angle: Optional[float] = None  # radians
    clbit: Optional[int] = None    # only for measurements

class LinePrimitive(BaseModel):
    shape: Literal["line"] = "line"
    role: str
    x1: float
    y1: float
    x2: float
    y2: float

class RectPrimitive(BaseModel):
    shape: Literal["rect"] = "rect"
    role: str
    x: float
    y: float
    width: float
    height: float
    tooltip: Optional[str] = None

class CirclePrimitive(BaseModel):
    shape: Literal["circle"] = "circle"
    role: str
    cx: float
    cy: float
    r: float
    filled: bool
    tooltip: Optional[str] = None

class TextPrimitive(BaseModel):
    shape: Literal["text"] = "text"
    role: str
    x: float
    y: float
    text: str
    anchor: Literal["start", "middle"] = "start"
    font_size: Optional[int] = None

Primitive = Union[LinePrimitive, RectPrimitive, CirclePrimitive, TextPrimitive]

class CircuitColumn(BaseModel):
    index: int
    x: float
    gate: GateOp
    idle_wires: List[int]
    primitives: List[Primitive]

class CircuitDiagram(BaseModel):
    num_qubits: int
    width: float
    height: float
    wires: List[Primitive]      # wire lines and their left-margin labels
    columns: List[CircuitColumn]


# ---- Q-sphere ----

class SpherePoint(BaseModel):
    index: int
    bits: str
    theta: float
    phi: float
    x: float
    y: float
    z: float
    probability: float
    phase: float
    hue: float

class Spike(BaseModel):
    x: List[float]   # [0, point.x]
    y: List[float]
    z: List[float]
    color: str
    width: float
    opacity: float = 0.8

class Tip(BaseModel):
    x: float
    y: float
    z: float
    size: float
    color: str
    text: str

class LatitudeRing(BaseModel):
    weight: int      # Hamming weight band
    theta: float
    x: List[float]
    y: List[float]
    z: List[float]
    color: str = "gray"
    opacity: float = 0.2

class SphereMesh(BaseModel):
    x: List[List[float]]
    y: List[List[float]]
    z: List[List[float]]
    opacity: float = 0.2

class SphereLabels(BaseModel):
    x: List[float]
    y: List[float]
    z: List[float]
    text: List[str]

class QSphere(BaseModel):
    num_qubits: int
    points: List[SpherePoint]
    spikes: List[Spike]
    tips: List[Tip]
    rings: List[LatitudeRing]
    mesh: SphereMesh
    labels: SphereLabels


# ---- HTTP requests / responses ----

class WavefunctionRequest(BaseModel):
    num_qubits: int
    wavefunction: str = ""
    # /convert allows one conversion in flight per session
    session_id: Optional[str] = None

class VectorResponse(BaseModel):
    num_qubits: int
    vector: List[WireCoefficient]
    column_vector: str
    norm_sum: float
    normalized: bool
    invalid_terms: List[str]
    diagnostics: List[str]

class QSphereRequest(BaseModel):
    amplitudes: List[Union[ComplexNumber, float]]

class CircuitRequest(BaseModel):
    num_qubits: int
    gate_sequence: List[BackendGate]

class Sample(BaseModel):
    name: str
    wavefunction: str

class ConversionResponse(BaseModel):
    state: VectorResponse
    service_error: Optional[str] = None
    summary: Optional[str] = None
    circuit: Optional[CircuitDiagram] = None
    qsphere: Optional[QSphere] = None
    counts: Optional[Dict[str, int]] = None
