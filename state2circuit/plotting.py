# state2circuit/plotting.py
from dataclasses import dataclass
from typing import Dict, Optional

import plotly.graph_objects as go

from .models import ColorScheme, QSphere

HISTOGRAM_COLORS = {
    "light": {
        "bar": "rgba(54, 162, 235, 0.7)",
        "border": "rgba(54, 162, 235, 1)",
        "text": "#1e293b",
        "grid": "rgba(0, 0, 0, 0.1)",
    },
    "dark": {
        "bar": "rgba(59, 130, 246, 0.7)",
        "border": "rgba(59, 130, 246, 1)",
        "text": "#f1f5f9",
        "grid": "rgba(255, 255, 255, 0.1)",
    },
}

SPHERE_TEXT = {"light": ("#1e293b", "#333333"), "dark": ("#e2e8f0", "#e2e8f0")}

_HIDDEN_AXIS = dict(range=[-1.3, 1.3], showgrid=False, zeroline=False, showticklabels=False, visible=False)


def sphere_figure(qsphere: QSphere, scheme: ColorScheme = "light") -> go.Figure:
    title_color, label_color = SPHERE_TEXT[scheme]

    traces = [
        go.Surface(
            x=qsphere.mesh.x,
            y=qsphere.mesh.y,
            z=qsphere.mesh.z,
            opacity=qsphere.mesh.opacity,
            colorscale=[[0, "rgba(200, 230, 250, 0.5)"], [1, "rgba(180, 200, 240, 0.3)"]],
            showscale=False,
            contours=dict(
                x=dict(show=True, color="rgba(90, 86, 86, 0.54)"),
                y=dict(show=True, color="rgba(90, 86, 86, 0.5)"),
                z=dict(show=True, color="rgba(90, 86, 86, 0.52)"),
            ),
            hoverinfo="skip",
            showlegend=False,
        )
    ]
    for ring in qsphere.rings:
        traces.append(go.Scatter3d(
            x=ring.x, y=ring.y, z=ring.z, mode="lines",
            line=dict(color=ring.color, width=1),
            opacity=ring.opacity, hoverinfo="skip", showlegend=False,
        ))
    for spike in qsphere.spikes:
        traces.append(go.Scatter3d(
            x=spike.x, y=spike.y, z=spike.z, mode="lines",
            line=dict(color=spike.color, width=spike.width),
            opacity=spike.opacity, hoverinfo="skip", showlegend=False,
        ))
    for tip in qsphere.tips:
        traces.append(go.Scatter3d(
            x=[tip.x], y=[tip.y], z=[tip.z], mode="markers",
            marker=dict(size=tip.size, color=tip.color),
            text=tip.text, hoverinfo="text", showlegend=False,
        ))
    traces.append(go.Scatter3d(
        x=qsphere.labels.x, y=qsphere.labels.y, z=qsphere.labels.z,
        mode="text", text=qsphere.labels.text, textposition="top center",
        textfont=dict(size=11, color=label_color),
        hoverinfo="skip", showlegend=False,
    ))

    fig = go.Figure(data=traces)
    fig.update_layout(
        title=dict(text="Q-Sphere Visualization", font=dict(size=14, color=title_color)),
        margin=dict(l=0, r=0, b=0, t=40),
        scene=dict(
            aspectmode="cube",
            xaxis=_HIDDEN_AXIS,
            yaxis=_HIDDEN_AXIS,
            zaxis=_HIDDEN_AXIS,
            camera=dict(eye=dict(x=0.8, y=0.8, z=0.8)),
        ),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
    )
    return fig


@dataclass
class HistogramHandle:
    """Owned by the caller and passed back in to redraw in place."""
    figure: go.Figure
    scheme: ColorScheme


def _apply_histogram_colors(fig: go.Figure, scheme: ColorScheme) -> None:
    colors = HISTOGRAM_COLORS[scheme]
    fig.update_traces(marker=dict(color=colors["bar"], line=dict(color=colors["border"], width=1)))
    axis = dict(
        tickfont=dict(color=colors["text"]),
        title_font=dict(color=colors["text"]),
        gridcolor=colors["grid"],
    )
    fig.update_xaxes(**axis)
    fig.update_yaxes(**axis)
    fig.update_layout(title_font_color=colors["text"])


def draw_histogram(
    counts: Dict[str, int],
    scheme: ColorScheme = "light",
    handle: Optional[HistogramHandle] = None,
) -> HistogramHandle:
    labels = list(counts.keys())
    values = list(counts.values())

    if handle is not None:
        handle.figure.update_traces(x=labels, y=values)
        _apply_histogram_colors(handle.figure, scheme)
        handle.scheme = scheme
        return handle

    fig = go.Figure(go.Bar(x=labels, y=values, name="Measurement Counts"))
    fig.update_layout(
        title=dict(text="Measurement Results", font=dict(size=14)),
        showlegend=False,
        xaxis=dict(title=dict(text="Bitstring Outcome"), type="category", tickfont=dict(family="monospace", size=10)),
        yaxis=dict(title=dict(text="Counts"), rangemode="tozero"),
    )
    _apply_histogram_colors(fig, scheme)
    return HistogramHandle(figure=fig, scheme=scheme)
