from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple, Union

import plotly.graph_objects as go

from . import config
from .errors import PlottingError
from .logger import get_logger
from .report import equation_caption, format_number
from .solver import ComplexRoots, QuadraticSolution, Roots, round2

logger = get_logger(__name__)


@dataclass(frozen=True)
class PlotBounds:
    x_min: float
    x_max: float
    y_min: float
    y_max: float


def generate_x_samples(x_min: float, x_max: float, count: int) -> List[float]:
    if count < 2:
        return [x_min]
    step = (x_max - x_min) / (count - 1)
    return [x_min + i * step for i in range(count)]


def evaluate_quadratic(a: float, b: float, c: float, xs: Sequence[float]) -> List[float]:
    return [a * (x ** 2) + b * x + c for x in xs]


def plotted_roots(roots: Roots) -> List[float]:
    """Distinct real roots away from the origin; complex roots are never plotted."""
    if isinstance(roots, ComplexRoots):
        return []
    xs: List[float] = []
    for x in (roots.x1, roots.x2):
        if x != 0 and x not in xs:
            xs.append(x)
    return xs


def _vertex_window(xv: float) -> Tuple[float, float]:
    half = config.VERTEX_WINDOW_HALF_WIDTH
    return xv - half, xv + half


def compute_plot_bounds(solution: QuadraticSolution) -> PlotBounds:
    eq = solution.equation
    xv, yv = solution.vertex
    roots = solution.roots
    ratio = config.RANGE_PADDING_RATIO

    if isinstance(roots, ComplexRoots) or (roots.x1 == 0 and roots.x2 == 0):
        x_min, x_max = _vertex_window(xv)
    else:
        x_min = min(roots.x1, roots.x2, xv)
        x_max = max(roots.x1, roots.x2, xv)
        span = x_max - x_min
        if span > 0:
            x_min, x_max = x_min - ratio * span, x_max + ratio * span
        else:
            # repeated root on the vertex
            x_min, x_max = _vertex_window(xv)

    ys = (eq.evaluate(x_min), eq.evaluate(x_max), yv)
    y_min, y_max = min(ys), max(ys)
    y_span = y_max - y_min
    y_pad = ratio * y_span if y_span > 0 else config.VERTEX_WINDOW_HALF_WIDTH
    bounds = PlotBounds(x_min, x_max, y_min - y_pad, y_max + y_pad)
    logger.debug("plot bounds %s", bounds)
    return bounds


def point_label(x: float, y: float) -> str:
    return f"({format_number(round2(x))}, {format_number(round2(y))})"


def build_figure(solution: QuadraticSolution, bounds: PlotBounds) -> go.Figure:
    eq = solution.equation
    xs = generate_x_samples(bounds.x_min, bounds.x_max, config.NUM_SAMPLES)
    ys = evaluate_quadratic(eq.a, eq.b, eq.c, xs)
    xv, yv = solution.vertex
    root_xs = plotted_roots(solution.roots)

    traces = [
        go.Scatter(
            x=xs,
            y=ys,
            mode="lines",
            name="y = ax^2 + bx + c",
            line=dict(config.CURVE_LINE_STYLE),
        ),
        go.Scatter(
            x=[xv],
            y=[yv],
            mode="markers+text",
            name="Vertex",
            marker=dict(config.VERTEX_MARKER_STYLE),
            text=[point_label(xv, yv)],
            textposition="top right",
            textfont=dict(config.LABEL_FONT),
        ),
    ]
    if root_xs:
        traces.append(
            go.Scatter(
                x=root_xs,
                y=[0.0] * len(root_xs),
                mode="markers+text",
                name="Roots",
                marker=dict(config.ROOT_MARKER_STYLE),
                text=[point_label(x, 0.0) for x in root_xs],
                textposition="top right",
                textfont=dict(config.LABEL_FONT),
            )
        )

    fig = go.Figure(data=traces)
    fig.update_layout(
        width=config.IMAGE_WIDTH,
        height=config.IMAGE_HEIGHT,
        title=dict(text=equation_caption(eq), font=dict(config.TITLE_FONT)),
        margin=dict(l=48, r=16, t=72, b=40),
        paper_bgcolor=config.FIGURE_COLORS["background"],
        plot_bgcolor=config.FIGURE_COLORS["background"],
        xaxis=dict(
            title="x",
            range=[bounds.x_min, bounds.x_max],
            showgrid=True,
            zeroline=True,
            zerolinecolor=config.AXIS_LINE_STYLE["zerolinecolor"],
        ),
        yaxis=dict(
            title="y",
            range=[bounds.y_min, bounds.y_max],
            showgrid=True,
            zeroline=True,
            zerolinecolor=config.AXIS_LINE_STYLE["zerolinecolor"],
        ),
        showlegend=False,
    )
    return fig


def render(solution: QuadraticSolution, path: Union[str, Path] = config.OUTPUT_PATH) -> Path:
    """Draw the parabola and write it as a PNG, replacing any previous image."""
    out = Path(path)
    try:
        bounds = compute_plot_bounds(solution)
        fig = build_figure(solution, bounds)
        out.parent.mkdir(parents=True, exist_ok=True)
        fig.write_image(
            str(out),
            format="png",
            width=config.IMAGE_WIDTH,
            height=config.IMAGE_HEIGHT,
        )
    except Exception as exc:
        raise PlottingError(f"could not render plot to {out}: {exc}", cause=exc) from exc
    logger.debug("wrote %s", out)
    return out
