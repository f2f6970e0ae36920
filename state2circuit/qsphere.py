# state2circuit/qsphere.py
import jax
import jax.numpy as jnp

from .grammar import basis_bits
from .models import (
    LatitudeRing,
    QSphere,
    SphereLabels,
    SphereMesh,
    SpherePoint,
    Spike,
    Tip,
)

jax.config.update("jax_enable_x64", True)

RING_SEGMENTS = 60
MESH_RESOLUTION = 30


def hue_from_phase(phase):
    """Map a phase in (-pi, pi] to a hue in [0, 360)."""
    return (phase * 180 / jnp.pi + 360) % 360


def spherical_to_cartesian(theta, phi):
    x = jnp.sin(theta) * jnp.cos(phi)
    y = jnp.sin(theta) * jnp.sin(phi)
    z = jnp.cos(theta)
    return x, y, z


def sphere_coordinates(dim: int):
    """
    theta_i = (hamming(i) / n) * pi, phi_i = 2 pi i / dim
    returns (theta, phi), each shape (dim,)
    """
    n = dim.bit_length() - 1
    idx = jnp.arange(dim)
    weights = jnp.array([bin(i).count("1") for i in range(dim)], dtype=jnp.float64)
    theta = weights / n * jnp.pi
    phi = 2 * jnp.pi * idx / dim
    return theta, phi


def latitude_rings(num_qubits: int, segments: int = RING_SEGMENTS):
    phi = jnp.linspace(0.0, 2 * jnp.pi, segments + 1)
    rings = []
    for k in range(num_qubits + 1):
        theta = k / num_qubits * jnp.pi
        x, y, z = spherical_to_cartesian(theta, phi)
        rings.append(
            LatitudeRing(
                weight=k,
                theta=float(theta),
                x=x.tolist(),
                y=y.tolist(),
                z=jnp.broadcast_to(z, phi.shape).tolist(),
            )
        )
    return rings


def sphere_mesh(resolution: int = MESH_RESOLUTION) -> SphereMesh:
    theta = jnp.linspace(0.0, jnp.pi, resolution + 1)
    phi = jnp.linspace(0.0, 2 * jnp.pi, resolution + 1)
    x = jnp.outer(jnp.sin(theta), jnp.cos(phi))
    y = jnp.outer(jnp.sin(theta), jnp.sin(phi))
    z = jnp.outer(jnp.cos(theta), jnp.ones_like(phi))
    return SphereMesh(x=x.tolist(), y=y.tolist(), z=z.tolist())


def embed_state(amplitudes) -> QSphere:
    """
    amplitudes: sequence of complex numbers, length 2**n
    Places basis state i at polar angle hamming(i)/n * pi and azimuth
    2 pi i / 2**n on the unit sphere; probability drives spike width and
    tip size, phase drives hue.
    """
    amps = jnp.asarray(amplitudes, dtype=jnp.complex128)
    dim = int(amps.shape[0])
    n = dim.bit_length() - 1

    theta, phi = sphere_coordinates(dim)
    x, y, z = spherical_to_cartesian(theta, phi)

    re, im = jnp.real(amps), jnp.imag(amps)
    prob = re * re + im * im
    phase = jnp.arctan2(im, re)
    hue = hue_from_phase(phase)

    cols = [a.tolist() for a in (theta, phi, x, y, z, re, im, prob, phase, hue)]
    points, spikes, tips = [], [], []
    for i, (t, f, px, py, pz, a_re, a_im, p, ph, h) in enumerate(zip(*cols)):
        bits = basis_bits(i, n)
        point = SpherePoint(
            index=i,
            bits=bits,
            theta=t,
            phi=f,
            x=px,
            y=py,
            z=pz,
            probability=p,
            phase=ph,
            hue=h,
        )
        points.append(point)

        spikes.append(
            Spike(
                x=[0.0, point.x],
                y=[0.0, point.y],
                z=[0.0, point.z],
                color=f"hsl({h:g}, 80%, 50%)",
                width=1 + 8 * p,
            )
        )
        tips.append(
            Tip(
                x=point.x,
                y=point.y,
                z=point.z,
                size=5 + 20 * p,
                color=f"hsl({h:g}, 80%, 40%)",
                text=(
                    f"|{bits}⟩<br>amp={a_re:.2f} + {a_im:.2f}i"
                    f"<br>P={p:.2f}<br>phase={point.phase:.2f}"
                ),
            )
        )

    labels = SphereLabels(
        x=[pt.x for pt in points],
        y=[pt.y for pt in points],
        z=[pt.z for pt in points],
        text=[f"|{pt.bits}⟩" for pt in points],
    )

    return QSphere(
        num_qubits=n,
        points=points,
        spikes=spikes,
        tips=tips,
        rings=latitude_rings(n),
        mesh=sphere_mesh(),
        labels=labels,
    )
