"""Figures of radiochemical yields against LET or against time."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping, Sequence
from typing import BinaryIO, Union

from matplotlib.figure import Figure

from radioyield.let_yields import LetSeries
from radioyield.time_yields import TimeSeries

Output = Union[str, "os.PathLike[str]", BinaryIO]

G_AXIS_TITLE = "G value (molecules/100 eV)"
LET_AXIS_TITLE = "LET (keV/um)"
TIME_AXIS_TITLE = "Time (ns)"

PALETTE: tuple[str, ...] = (
    "#000000", "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728",
    "#bcbd22", "#9467bd", "#8c564b", "#e377c2", "#7f7f7f",
    "#c7c7c7", "#17becf", "#aec7e8", "#ffbb78", "#98df8a",
    "#ff9896", "#c5b0d5", "#c49c94", "#f7b6d2", "#9edae5",
)
"""Colours indexed by :func:`marker_color`."""

MARKERS: tuple[str, ...] = ("o", "s", "^", "v", "D", "*", "p", "h", "<", ">", "X", "P")

_SKIPPED_COLORS = frozenset({0, 5, 10})
_MAX_COLUMNS = 3


def marker_color(species_id: int, number_of_colors: int) -> int:
    """Return the colour index of a species, skipping hard-to-see colours."""
    if number_of_colors < 1:
        raise ValueError(f"need at least one colour, got {number_of_colors}")
    color = (2 + species_id) % number_of_colors
    if color in _SKIPPED_COLORS:
        color += 1
    return color


def _style(species_id: int) -> tuple[str, str]:
    color = PALETTE[marker_color(species_id, len(PALETTE)) % len(PALETTE)]
    marker = MARKERS[species_id % len(MARKERS)]
    return color, marker


def _grid(count: int) -> tuple[Figure, list]:
    columns = min(_MAX_COLUMNS, count)
    rows = math.ceil(count / columns)
    figure = Figure(figsize=(7 * columns, 5 * rows))
    axes = list(figure.subplots(rows, columns, squeeze=False).flat)
    for unused in axes[count:]:
        figure.delaxes(unused)
    return figure, axes[:count]


def _finish(axis, title: str, x_title: str) -> None:
    axis.set_title(title)
    axis.set_xscale("log")
    axis.set_xlabel(x_title)
    axis.set_ylabel(G_AXIS_TITLE)
    axis.tick_params(top=True, right=True, direction="in", which="both")


def plot_let_series(series: Mapping[int, LetSeries], output: Output) -> Figure:
    """Draw G value against LET, one panel per species, and save to ``output``."""
    if not series:
        raise ValueError("no species to plot")
    figure, axes = _grid(len(series))
    for axis, (species_id, entry) in zip(axes, sorted(series.items())):
        color, marker = _style(species_id)
        axis.errorbar(
            entry.let,
            entry.g,
            xerr=entry.let_err,
            yerr=entry.g_err,
            marker=marker,
            color=color,
            linestyle="none",
        )
        _finish(axis, entry.name, LET_AXIS_TITLE)
    figure.tight_layout()
    figure.savefig(output)
    return figure


def plot_time_series(series: Mapping[int, TimeSeries], output: Output) -> Figure:
    """Draw G value against time, one panel per species, and save to ``output``."""
    if not series:
        raise ValueError("no species to plot")
    figure, axes = _grid(len(series))
    for axis, (species_id, entry) in zip(axes, sorted(series.items())):
        color, marker = _style(species_id)
        errors: Sequence[float] = entry.g_err
        axis.errorbar(
            entry.time,
            entry.g,
            yerr=errors,
            marker=marker,
            color=color,
            linestyle="-",
        )
        _finish(axis, entry.name, TIME_AXIS_TITLE)
    figure.tight_layout()
    figure.savefig(output)
    return figure