import math

import pytest

from radioyield.time_yields import (
    COLUMNS,
    SpeciesRecord,
    TimeSeries,
    aggregate_records,
    read_records_csv,
)


def record(species_id, time, sum_g, sum_g2, n_event, name="OH", number=1):
    return SpeciesRecord(species_id, number, n_event, name, time, sum_g, sum_g2)


def test_records_at_same_time_are_merged():
    records = [record(0, 1.0, 2.0, 4.0, 1), record(0, 1.0, 2.0, 4.0, 1)]
    result = aggregate_records(records)
    series = result[0]
    assert series.time == [1.0]
    assert series.g == [pytest.approx(2.0)]
    assert series.g_err == [pytest.approx(0.0)]


def test_single_event_has_zero_error():
    result = aggregate_records([record(0, 1.0, 5.0, 25.0, 1)])
    assert result[0].g == [5.0]
    assert result[0].g_err == [0.0]
    assert result[0].relative_error == 0.0


def test_times_sorted_and_species_sorted():
    records = [
        record(4, 10.0, 1.0, 1.0, 1, name="H2"),
        record(2, 100.0, 3.0, 9.0, 1),
        record(2, 1.0, 2.0, 4.0, 1),
    ]
    result = aggregate_records(records)
    assert list(result) == [2, 4]
    assert result[2].time == [1.0, 100.0]
    assert result[2].g == [2.0, 3.0]
    assert result[4].name == "H2"


def test_error_is_non_negative_and_relative_error_accumulates():
    records = [record(0, 1.0, 3.0, 5.0, 2), record(0, 2.0, 4.0, 10.0, 2)]
    series = aggregate_records(records)[0]
    assert all(err >= 0 for err in series.g_err)
    expected = sum(e / (g + 1e-30) for e, g in zip(series.g_err, series.g))
    assert series.relative_error == pytest.approx(expected)
    assert series.g_err[0] > 0


def test_negative_variance_gives_nan():
    series = aggregate_records([record(0, 1.0, 4.0, 0.0, 2)])[0]
    assert series.time == [1.0]
    assert series.g == [pytest.approx(2.0)]
    assert len(series.g_err) == 1
    error = series.g_err[0]
    assert math.isnan(error) is True
    assert error != error


def test_empty_records_raise():
    with pytest.raises(ValueError):
        aggregate_records([])


def test_zero_events_raise():
    with pytest.raises(ValueError):
        aggregate_records([record(0, 1.0, 1.0, 1.0, 0)])


def test_csv_round_trip(tmp_path):
    path = tmp_path / "species.csv"
    rows = [",".join(COLUMNS), "1,3,2,e_aq,0.5,4.0,8.0", "1,2,1,e_aq,2.0,2.5,6.25"]
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    records = read_records_csv(path)
    assert records[0] == SpeciesRecord(1, 3, 2, "e_aq", 0.5, 4.0, 8.0)
    assert len(records) == 2
    result = aggregate_records(records)
    assert isinstance(result[1], TimeSeries)
    assert result[1].time == [0.5, 2.0]
    assert result[1].g == [2.0, 2.5]


def test_csv_missing_column_raises(tmp_path):
    path = tmp_path / "species.csv"
    path.write_text("speciesID,number\n1,2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_records_csv(path)


def test_csv_bad_value_raises(tmp_path):
    path = tmp_path / "species.csv"
    path.write_text(",".join(COLUMNS) + "\nx,3,2,OH,0.5,4.0,8.0\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_records_csv(path)