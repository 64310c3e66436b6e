from __future__ import annotations

from pathlib import Path

# Paths and filenames
OUTPUT_PATH = Path("parabola.png")

# Image size (pixels)
IMAGE_WIDTH = 800
IMAGE_HEIGHT = 700

# kaleido >= 1.0 exports through a local Chrome
RENDER_HINT = (
    "hint: PNG export uses kaleido, which needs Google Chrome; "
    "install it with `plotly_get_chrome` or `pip install 'kaleido<1'`"
)

# Quadratic sampling grid
NUM_SAMPLES = 100

# Plot range policy
VERTEX_WINDOW_HALF_WIDTH = 5.0
RANGE_PADDING_RATIO = 0.2

# Display precision
DISPLAY_DECIMALS = 2

# Logging
LOGGER_NAME = "quadratic_solver"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Plot palette and styles (Okabe–Ito)
FIGURE_COLORS = {
    "curve": "#0072B2",
    "vertex": "#D55E00",
    "roots": "#D55E00",
    "background": "#ffffff",
}
CURVE_LINE_STYLE = {"color": FIGURE_COLORS["curve"], "width": 2}
VERTEX_MARKER_STYLE = {
    "color": FIGURE_COLORS["vertex"],
    "size": 10,
    "symbol": "circle",
    "line": {"color": "#ffffff", "width": 1},
}
ROOT_MARKER_STYLE = {
    "color": FIGURE_COLORS["roots"],
    "size": 9,
    "symbol": "circle",
    "line": {"color": "#ffffff", "width": 1},
}
LABEL_FONT = {"family": "sans-serif", "size": 18}
TITLE_FONT = {"family": "sans-serif", "size": 28}
AXIS_LINE_STYLE = {"zerolinecolor": "#777777"}
