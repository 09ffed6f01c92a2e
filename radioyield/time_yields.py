"""Radiochemical yields as a function of time, from per-thread species records."""

from __future__ import annotations

import csv
import math
import os
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

RELATIVE_ERROR_EPSILON = 1e-30

COLUMNS = ("speciesID", "number", "nEvent", "speciesName", "time", "sumG", "sumG2")
"""Column names of a species record file."""


@dataclass(frozen=True)
class SpeciesRecord:
    """Sums of a species' G value over some events at one time."""

    species_id: int
    number: int
    n_event: int
    name: str
    time: float
    sum_g: float
    sum_g2: float


@dataclass
class TimeSeries:
    """Mean G value of one species at each recorded time, in time order."""

    name: str
    time: list[float] = field(default_factory=list)
    g: list[float] = field(default_factory=list)
    g_err: list[float] = field(default_factory=list)
    relative_error: float = 0.0

    def __len__(self) -> int:
        return len(self.time)


@dataclass
class _Accumulated:
    n_event: int = 0
    number: int = 0
    sum_g: float = 0.0
    sum_g2: float = 0.0
    name: str = ""


def _standard_error(total: _Accumulated, mean: float) -> float:
    if total.n_event <= 1:
        return 0.0
    variance = (total.sum_g2 / total.n_event - mean**2) / (total.n_event - 1)
    return math.sqrt(variance) if variance >= 0 else math.nan


def aggregate_records(records: Iterable[SpeciesRecord]) -> dict[int, TimeSeries]:
    """Merge records by species and time; return series keyed by species ID."""
    totals: dict[int, dict[float, _Accumulated]] = defaultdict(
        lambda: defaultdict(_Accumulated)
    )
    seen = False
    for record in records:
        seen = True
        total = totals[record.species_id][record.time]
        total.number += record.number
        total.sum_g += record.sum_g
        total.sum_g2 += record.sum_g2
        total.n_event += record.n_event
        total.name = record.name
    if not seen:
        raise ValueError("no species records found")

    result: dict[int, TimeSeries] = {}
    for species_id in sorted(totals):
        by_time = totals[species_id]
        times = sorted(by_time)
        series = TimeSeries(by_time[times[0]].name)
        for time in times:
            total = by_time[time]
            if total.n_event == 0:
                raise ValueError(
                    f"species {species_id} at time {time} was recorded over no events"
                )
            mean = total.sum_g / total.n_event
            error = _standard_error(total, mean)
            series.time.append(time)
            series.g.append(mean)
            series.g_err.append(error)
            series.relative_error += error / (mean + RELATIVE_ERROR_EPSILON)
        result[species_id] = series
    return result


def read_records_csv(path: str | os.PathLike[str]) -> list[SpeciesRecord]:
    """Read species records from a CSV file with a header of :data:`COLUMNS`."""
    with open(path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        missing = [name for name in COLUMNS if name not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"missing columns: {', '.join(missing)}")
        records = []
        for line_number, row in enumerate(reader, start=2):
            try:
                records.append(
                    SpeciesRecord(
                        species_id=int(row["speciesID"]),
                        number=int(row["number"]),
                        n_event=int(row["nEvent"]),
                        name=row["speciesName"],
                        time=float(row["time"]),
                        sum_g=float(row["sumG"]),
                        sum_g2=float(row["sumG2"]),
                    )
                )
            except (TypeError, ValueError) as error:
                raise ValueError(f"bad record on line {line_number}: {error}") from None
        return records