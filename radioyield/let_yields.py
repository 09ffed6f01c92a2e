"""Radiochemical yields as a function of LET, read from a species summary file.

The summary file holds one block per run::

    LET: <value> +- <sigma>
    <name> <tag> <name> <tag> ...
    <G> <G sigma> <G> <G sigma> ...

The first line of a block is whitespace separated. Its second and fourth
fields are the LET and its uncertainty, and anything after the fourth field
is ignored. A block whose key or value line is missing ends the reading.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class LetSeries:
    """G values of one species, one entry per run, with the LET of each run.

    A run in which the species did not appear holds zeros, as long as a
    later run records it.
    """

    name: str
    g: list[float] = field(default_factory=list)
    g_err: list[float] = field(default_factory=list)
    let: list[float] = field(default_factory=list)
    let_err: list[float] = field(default_factory=list)

    def _extend_to(self, size: int) -> None:
        for values in (self.g, self.g_err, self.let, self.let_err):
            values.extend([0.0] * (size - len(values)))
            del values[size:]

    def __len__(self) -> int:
        return len(self.g)


def _pairs(tokens: list[str]) -> Iterator[tuple[str, str]]:
    it = iter(tokens)
    return zip(it, it)


def _species_keys(line: str) -> Iterator[tuple[str, int]]:
    for name, tag in _pairs(line.split()):
        try:
            yield name, int(tag)
        except ValueError:
            return


def _species_values(line: str) -> Iterator[tuple[float, float]]:
    for g, sigma in _pairs(line.split()):
        try:
            yield float(g), float(sigma)
        except ValueError:
            return


def _parse_header(line: str) -> tuple[float, float]:
    tokens = line.split()
    if len(tokens) < 4:
        raise ValueError(f"LET header needs four fields, got {line.strip()!r}")
    try:
        return float(tokens[1]), float(tokens[3])
    except ValueError:
        raise ValueError(f"malformed LET header {line.strip()!r}") from None


def parse_species_stream(stream: Iterable[str]) -> dict[int, LetSeries]:
    """Parse a species summary into series keyed by species tag, in tag order."""
    lines = iter(stream)
    series: dict[int, LetSeries] = {}
    run = 0
    while True:
        header = next((line for line in lines if line.strip()), None)
        if header is None:
            break
        let, let_sigma = _parse_header(header)
        key_line = next(lines, None)
        if key_line is None:
            break
        value_line = next(lines, None)
        if value_line is None:
            break
        for (name, tag), (g, g_sigma) in zip(
            _species_keys(key_line), _species_values(value_line)
        ):
            entry = series.setdefault(tag, LetSeries(name))
            entry.name = name
            entry._extend_to(run + 1)
            entry.g[run] = g
            entry.g_err[run] = g_sigma
            entry.let[run] = let
            entry.let_err[run] = let_sigma
        run += 1
    return dict(sorted(series.items()))


def read_species_file(path: str | os.PathLike[str]) -> dict[int, LetSeries]:
    """Read a species summary file; see :func:`parse_species_stream`."""
    with open(path, encoding="utf-8") as handle:
        stream: TextIO = handle
        return parse_species_stream(stream)