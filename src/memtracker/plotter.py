"""
Generates the memory usage chart for a finished monitoring run.

This module is the chart sink: it takes the finished time series, derives the
axis ranges, builds a Plotly figure with a single memory-over-time line and
writes it to disk.

Output format follows the file suffix of the output path:
- ``.html`` writes an interactive HTML page.
- Any other suffix (``.png``, ``.jpg``, ``.svg``, ...) is rendered as a
  static image through Kaleido.

Any failure to write the chart is raised as ``OutputWriteError``.
"""

import logging
from pathlib import Path
from typing import Optional, Union

# Third-party library imports
import plotly.graph_objects as go

from .models.results import AxisRanges, RunResult
from .models.samples import KB_PER_MB
from .storage import TimeSeriesStore
from .validation import OutputWriteError

logger = logging.getLogger(__name__)

# --- Module Constants ---

CHART_WIDTH = 1024
CHART_HEIGHT = 768
CHART_TITLE = "Memory Usage Over Time"
X_AXIS_TITLE = "Time (seconds)"
Y_AXIS_TITLE = "Memory (MB)"
LINE_COLOR = "blue"

# The y axis is padded by this fraction of the observed memory span on each side.
Y_MARGIN_FRACTION = 0.1


def compute_axis_ranges(result: RunResult, last_elapsed_seconds: float) -> AxisRanges:
    """
    Derive chart axis bounds from the run statistics.

    The y range (MB) is padded by a tenth of the max-min span on both sides
    and clamped at 0 from below. When max equals min (e.g. a single sample)
    the margin is 0 and the range collapses to a single value.

    Args:
        result: Statistics of the finished series.
        last_elapsed_seconds: Elapsed time of the final sample.

    Returns:
        The axis ranges for the chart.
    """
    max_mb = result.max_kb / KB_PER_MB
    min_mb = result.min_kb / KB_PER_MB
    y_margin = (max_mb - min_mb) * Y_MARGIN_FRACTION

    return AxisRanges(
        x_min=0.0,
        x_max=last_elapsed_seconds,
        y_min=max(0.0, min_mb - y_margin),
        y_max=max_mb + y_margin,
    )


def build_memory_figure(series: TimeSeriesStore, ranges: AxisRanges) -> go.Figure:
    """
    Build the Plotly figure for a series.

    Args:
        series: Samples to plot, in time order.
        ranges: Axis bounds from ``compute_axis_ranges``.

    Returns:
        The figure, ready to be written.
    """
    memory_mb = [value / KB_PER_MB for value in series.memory_values()]

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=series.elapsed_times(),
            y=memory_mb,
            # A lone point has no line segment, so show a marker for it.
            mode="lines" if len(series) > 1 else "lines+markers",
            name="Memory",
            line={"color": LINE_COLOR},
        )
    )

    fig.update_layout(
        title={"text": CHART_TITLE, "x": 0.5, "font": {"size": 24}},
        xaxis_title=X_AXIS_TITLE,
        yaxis_title=Y_AXIS_TITLE,
        width=CHART_WIDTH,
        height=CHART_HEIGHT,
        margin={"l": 60, "r": 10, "t": 60, "b": 40},
        paper_bgcolor="white",
        plot_bgcolor="white",
        showlegend=False,
    )
    fig.update_xaxes(range=[ranges.x_min, ranges.x_max], showgrid=True, gridcolor="lightgray")
    fig.update_yaxes(range=[ranges.y_min, ranges.y_max], showgrid=True, gridcolor="lightgray")
    return fig


def _save_plotly_figure(fig: go.Figure, output_path: Path) -> None:
    """
    Saves a Plotly figure as HTML or a static image depending on the suffix.

    Raises:
        OutputWriteError: If the figure cannot be written.
    """
    try:
        if output_path.suffix.lower() == ".html":
            fig.write_html(output_path)
        else:
            fig.write_image(output_path, width=CHART_WIDTH, height=CHART_HEIGHT)
    except Exception as e:
        logger.error(f"Failed to save chart {output_path} using Plotly: {e}")
        raise OutputWriteError(
            f"Failed to write chart file: {output_path}: {e}",
            path=output_path,
            sink="chart",
        ) from e
    logger.info(f"Chart saved to: {output_path}")


def generate_chart(
    series: TimeSeriesStore,
    output_path: Union[str, Path],
    result: Optional[RunResult] = None,
) -> Path:
    """
    Render the memory-over-time chart for a non-empty series.

    Args:
        series: The finished time series (must contain at least one sample).
        output_path: Destination file.
        result: Precomputed statistics; recomputed from the series when omitted.

    Returns:
        The path of the written chart.

    Raises:
        ValueError: If the series is empty.
        OutputWriteError: If the chart cannot be written.
    """
    if not series:
        raise ValueError("Cannot generate a chart for an empty series")

    output_path = Path(output_path)
    if result is None:
        result = series.summarize()

    ranges = compute_axis_ranges(result, series.last_elapsed_time())
    logger.debug(f"Chart axis ranges: {ranges}")

    fig = build_memory_figure(series, ranges)
    _save_plotly_figure(fig, output_path)
    return output_path
