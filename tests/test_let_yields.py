import io

import pytest

from radioyield.let_yields import LetSeries, parse_species_stream, read_species_file

SAMPLE = (
    "LET: 10.5 +- 0.2\n"
    "OH 0 e_aq 1\n"
    "2.5 0.1 2.6 0.2\n"
    "LET: 20 +- 0.3\n"
    "OH 0 H2O2 3\n"
    "2.0 0.1 0.7 0.05\n"
)


def test_series_keyed_by_tag_in_order():
    result = parse_species_stream(io.StringIO(SAMPLE))
    assert list(result) == [0, 1, 3]
    assert result[0].name == "OH"
    assert result[3].name == "H2O2"


def test_values_per_run():
    result = parse_species_stream(io.StringIO(SAMPLE))
    oh = result[0]
    assert oh.let == [10.5, 20.0]
    assert oh.let_err == [0.2, 0.3]
    assert oh.g == [2.5, 2.0]
    assert oh.g_err == [0.1, 0.1]


def test_species_missing_from_earlier_run_is_zero_padded():
    result = parse_species_stream(io.StringIO(SAMPLE))
    peroxide = result[3]
    assert peroxide.g == [0.0, 0.7]
    assert peroxide.let == [0.0, 20.0]
    assert len(peroxide) == 2


def test_species_only_in_first_run_keeps_one_entry():
    result = parse_species_stream(io.StringIO(SAMPLE))
    assert result[1].g == [2.6]
    assert len(result[1]) == 1


def test_incomplete_block_is_dropped():
    text = SAMPLE + "LET: 30 +- 0.4\nOH 0\n"
    result = parse_species_stream(io.StringIO(text))
    assert len(result[0]) == 2


def test_pairs_stop_at_shorter_line():
    text = "LET: 1 +- 0.1\nA 0 B 1 C 2\n1.0 0.1 2.0 0.2\n"
    result = parse_species_stream(io.StringIO(text))
    assert list(result) == [0, 1]


def test_bad_tag_stops_pairs():
    text = "LET: 1 +- 0.1\nA 0 B x C 2\n1.0 0.1 2.0 0.2 3.0 0.3\n"
    result = parse_species_stream(io.StringIO(text))
    assert list(result) == [0]


def test_malformed_header_raises():
    with pytest.raises(ValueError):
        parse_species_stream(io.StringIO("LET: abc +- 0.1\nA 0\n1 2\n"))


def test_short_header_raises():
    with pytest.raises(ValueError):
        parse_species_stream(io.StringIO("LET: 1\nA 0\n1 2\n"))


def test_empty_input_gives_nothing():
    assert parse_species_stream(io.StringIO("")) == {}


def test_read_species_file(tmp_path):
    path = tmp_path / "Species.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    result = read_species_file(path)
    assert result == parse_species_stream(io.StringIO(SAMPLE))
    assert isinstance(result[0], LetSeries)
    assert result[0].g == [2.5, 2.0]