import io

import pytest

from radioyield.let_yields import LetSeries
from radioyield.plotting import (
    G_AXIS_TITLE,
    LET_AXIS_TITLE,
    TIME_AXIS_TITLE,
    marker_color,
    plot_let_series,
    plot_time_series,
)
from radioyield.time_yields import TimeSeries

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


@pytest.mark.parametrize("species_id", range(40))
def test_marker_color_skips_hidden_colors(species_id):
    color = marker_color(species_id, 20)
    assert color not in {0, 5, 10}
    assert 0 < color <= 20


def test_marker_color_plain_case_matches_offset():
    assert marker_color(0, 50) == 2


def test_marker_color_bumps_skipped_index():
    assert marker_color(3, 50) == marker_color(4, 50)


def test_marker_color_rejects_no_colors():
    with pytest.raises(ValueError):
        marker_color(1, 0)


def _let_series():
    return {
        2: LetSeries("OH", g=[2.5, 2.1], g_err=[0.1, 0.1], let=[1.0, 10.0], let_err=[0.1, 1.0]),
        1: LetSeries("e_aq", g=[2.6, 2.0], g_err=[0.2, 0.1], let=[1.0, 10.0], let_err=[0.1, 1.0]),
    }


def test_plot_let_series_writes_png(tmp_path):
    out = tmp_path / "let.png"
    figure = plot_let_series(_let_series(), out)
    assert out.read_bytes().startswith(PNG_MAGIC)
    assert len(figure.axes) == 2


def test_plot_let_series_axes_in_tag_order():
    figure = plot_let_series(_let_series(), io.BytesIO())
    titles = [axis.get_title() for axis in figure.axes]
    assert titles == ["e_aq", "OH"]
    for axis in figure.axes:
        assert axis.get_xscale() == "log"
        assert axis.get_xlabel() == LET_AXIS_TITLE
        assert axis.get_ylabel() == G_AXIS_TITLE


def test_plot_let_series_rejects_empty():
    with pytest.raises(ValueError):
        plot_let_series({}, io.BytesIO())


def test_plot_time_series_many_species_grid(tmp_path):
    series = {
        i: TimeSeries(f"S{i}", time=[1.0, 10.0, 100.0], g=[3.0, 2.5, 2.0], g_err=[0.1, 0.1, 0.1])
        for i in range(5)
    }
    out = tmp_path / "time.png"
    figure = plot_time_series(series, out)
    assert out.read_bytes().startswith(PNG_MAGIC)
    assert [axis.get_title() for axis in figure.axes] == [f"S{i}" for i in range(5)]
    assert all(axis.get_xlabel() == TIME_AXIS_TITLE for axis in figure.axes)


def test_plot_time_series_rejects_empty():
    with pytest.raises(ValueError):
        plot_time_series({}, io.BytesIO())