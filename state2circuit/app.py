# state2circuit/app.py
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from .circuit import layout_circuit, render_svg
from .config import Settings, configure_logging
from .errors import ConversionInProgressError, InvalidQubitCountError
from .gates import decode_gate_sequence
from .models import (
    CircuitDiagram,
    CircuitRequest,
    ColorScheme,
    ComplexNumber,
    ConversionResponse,
    QSphere,
    QSphereRequest,
    Sample,
    VectorResponse,
    WavefunctionRequest,
)
from .pipeline import Converter, text_to_vector
from .qsphere import embed_state
from .samples import random_sample, samples
from .synthesis import SynthesisClient
from .vector import to_response, validate_num_qubits

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, converter: Optional[Converter] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    # a converter passed in is owned, and closed, by the caller
    owned_client = None
    if converter is None:
        owned_client = SynthesisClient(settings.synthesis_url, timeout=settings.synthesis_timeout)
        converter = Converter(owned_client)
        logger.info("gate synthesis service: %s", settings.synthesis_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if owned_client is not None:
            owned_client.close()
            logger.info("closed gate synthesis client")

    app = FastAPI(title="Wavefunction to Circuit", lifespan=lifespan)
    app.state.settings = settings
    app.state.converter = converter

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def check_qubits(n: int) -> int:
        try:
            return validate_num_qubits(n)
        except InvalidQubitCountError as e:
            raise HTTPException(status_code=400, detail=str(e))

    def build_diagram(req: CircuitRequest) -> CircuitDiagram:
        n = check_qubits(req.num_qubits)
        return layout_circuit(n, decode_gate_sequence(req.gate_sequence))

    @app.get("/samples/{num_qubits}", response_model=List[Sample])
    def get_samples(num_qubits: int):
        n = check_qubits(num_qubits)
        return samples(n) + [random_sample(n)]

    @app.post("/parse", response_model=VectorResponse)
    def parse(req: WavefunctionRequest):
        check_qubits(req.num_qubits)
        return to_response(text_to_vector(req.num_qubits, req.wavefunction))

    @app.post("/qsphere", response_model=QSphere)
    def qsphere(req: QSphereRequest):
        dim = len(req.amplitudes)
        if dim < 2 or dim & (dim - 1):
            raise HTTPException(status_code=400, detail="amplitudes must have length 2**n with n >= 1.")
        check_qubits(dim.bit_length() - 1)

        amps = [
            complex(a.re, a.im) if isinstance(a, ComplexNumber) else complex(a, 0.0)
            for a in req.amplitudes
        ]
        return embed_state(amps)

    @app.post("/circuit", response_model=CircuitDiagram)
    def circuit(req: CircuitRequest):
        return build_diagram(req)

    @app.post("/circuit/svg")
    def circuit_svg(req: CircuitRequest, scheme: ColorScheme = "light"):
        svg = render_svg(build_diagram(req), scheme)
        return Response(content=svg, media_type="image/svg+xml")

    @app.post("/convert", response_model=ConversionResponse)
    def convert(req: WavefunctionRequest):
        check_qubits(req.num_qubits)
        # requests without a session id never collide
        session = req.session_id if req.session_id is not None else object()
        try:
            return app.state.converter.convert(req.num_qubits, req.wavefunction, session=session)
        except ConversionInProgressError as e:
            raise HTTPException(status_code=409, detail=str(e))

    return app


app = create_app()
