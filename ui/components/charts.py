"""
Plotly network chart for the route planner.
"""

from __future__ import annotations

import numpy as np
import plotly.graph_objects as go

from route_planner.config import (
    CANVAS_HEIGHT,
    CANVAS_MARGIN,
    CANVAS_WIDTH,
    GRAPH_EDGE_WIDTH,
    GRAPH_NODE_SIZE,
    GRAPH_PATH_EDGE_WIDTH,
)
from route_planner.graph import Graph, canonical_key

EDGE_COLOR = "#94a3b8"
PATH_COLOR = "#0ea5e9"
NODE_COLOR = "#64748b"


def layout_positions(
    graph: Graph,
    positions: dict[str, tuple[float, float]] | None = None,
    width: float = CANVAS_WIDTH,
    height: float = CANVAS_HEIGHT,
) -> dict[str, tuple[float, float]]:
    """
    Positions for every city in the graph.

    Known positions are kept; cities without one are spread evenly on a
    ring around the canvas centre. Positions of removed cities are dropped.
    """
    positions = positions or {}
    placed = {name: positions[name] for name in graph if name in positions}
    missing = [name for name in graph if name not in placed]
    if not missing:
        return placed

    radius = min(width, height) / 2 - CANVAS_MARGIN * 2
    angles = np.linspace(0, 2 * np.pi, len(missing), endpoint=False)
    xs = width / 2 + radius * np.cos(angles)
    ys = height / 2 + radius * np.sin(angles)
    for name, x, y in zip(missing, xs, ys, strict=True):
        placed[name] = (float(x), float(y))
    return placed


def path_edge_keys(path: list[str]) -> set[tuple[str, str]]:
    """Canonical keys of the roads travelled along a path."""
    return {canonical_key(a, b) for a, b in zip(path, path[1:])}


def create_network_figure(
    graph: Graph,
    positions: dict[str, tuple[float, float]] | None = None,
    path: list[str] | None = None,
    weighted: bool = True,
) -> go.Figure:
    """Cities as markers, roads as lines, the current route highlighted."""
    path = path or []
    coords = layout_positions(graph, positions)
    on_path = path_edge_keys(path)

    road_x: list[float | None] = []
    road_y: list[float | None] = []
    route_x: list[float | None] = []
    route_y: list[float | None] = []
    label_x, label_y, labels = [], [], []

    for edge in graph.get_edges():
        (x0, y0), (x1, y1) = coords[edge.source], coords[edge.target]
        if edge.key in on_path:
            route_x += [x0, x1, None]
            route_y += [y0, y1, None]
        else:
            road_x += [x0, x1, None]
            road_y += [y0, y1, None]
        if weighted:
            label_x.append((x0 + x1) / 2)
            label_y.append((y0 + y1) / 2)
            labels.append(f"{edge.weight:g}")

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=road_x, y=road_y, mode="lines",
        line=dict(width=GRAPH_EDGE_WIDTH, color=EDGE_COLOR),
        hoverinfo="skip", name="roads",
    ))
    fig.add_trace(go.Scatter(
        x=route_x, y=route_y, mode="lines",
        line=dict(width=GRAPH_PATH_EDGE_WIDTH, color=PATH_COLOR),
        hoverinfo="skip", name="route",
    ))
    if labels:
        fig.add_trace(go.Scatter(
            x=label_x, y=label_y, mode="text", text=labels,
            textfont=dict(size=10), hoverinfo="skip", name="distances",
        ))

    names = list(graph)
    fig.add_trace(go.Scatter(
        x=[coords[n][0] for n in names],
        y=[coords[n][1] for n in names],
        mode="markers+text",
        text=names,
        textposition="top center",
        marker=dict(
            size=GRAPH_NODE_SIZE,
            color=[PATH_COLOR if n in path else NODE_COLOR for n in names],
            line=dict(width=1, color="#ffffff"),
        ),
        hovertemplate="<b>%{text}</b><extra></extra>",
        name="cities",
    ))

    fig.update_layout(
        showlegend=False,
        height=500,
        margin=dict(t=15, b=15, l=15, r=15),
        plot_bgcolor="#ffffff",
    )
    fig.update_xaxes(visible=False)
    # Canvas coordinates grow downwards
    fig.update_yaxes(visible=False, autorange="reversed")
    return fig
