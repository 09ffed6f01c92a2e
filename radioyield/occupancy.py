"""Electron occupancy of molecular orbitals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

MAX_ORBITS = 20
"""Number of orbitals tracked for a molecule."""

WATER_OCCUPIED_LEVELS = 5
"""Number of doubly occupied orbitals of a ground-state water molecule."""

ELECTRONS_PER_ORBIT = 2


class ElectronOccupancy:
    """Number of electrons held in each orbital of a molecule.

    Orbitals are numbered from 0. Changes are made in place; use
    :meth:`copy` to branch from a shared starting configuration.
    """

    __slots__ = ("_orbits",)

    def __init__(self, occupancies: Iterable[int] = (), size: int = MAX_ORBITS) -> None:
        if size < 1:
            raise ValueError(f"an occupancy needs at least one orbit, got {size}")
        values = list(occupancies)
        if len(values) > size:
            raise ValueError(f"{len(values)} occupancies given for {size} orbits")
        if any(value < 0 for value in values):
            raise ValueError("occupancies cannot be negative")
        self._orbits = values + [0] * (size - len(values))

    @classmethod
    def ground_state(cls) -> ElectronOccupancy:
        """Return the ground-state occupancy of a water molecule."""
        return cls([ELECTRONS_PER_ORBIT] * WATER_OCCUPIED_LEVELS)

    def _check_orbit(self, orbit: int) -> None:
        if not 0 <= orbit < len(self._orbits):
            raise IndexError(f"orbit {orbit} is outside 0..{len(self._orbits) - 1}")

    def remove_electron(self, orbit: int, count: int = 1) -> int:
        """Remove up to ``count`` electrons from ``orbit``; return how many were removed."""
        self._check_orbit(orbit)
        if count < 0:
            raise ValueError(f"cannot remove a negative number of electrons: {count}")
        removed = min(count, self._orbits[orbit])
        self._orbits[orbit] -= removed
        return removed

    def add_electron(self, orbit: int, count: int = 1) -> int:
        """Add ``count`` electrons to ``orbit``; return how many were added."""
        self._check_orbit(orbit)
        if count < 0:
            raise ValueError(f"cannot add a negative number of electrons: {count}")
        self._orbits[orbit] += count
        return count

    def total_occupancy(self) -> int:
        """Return the number of electrons over all orbitals."""
        return sum(self._orbits)

    def copy(self) -> ElectronOccupancy:
        """Return an independent copy."""
        return ElectronOccupancy(self._orbits, size=len(self._orbits))

    def __getitem__(self, orbit: int) -> int:
        self._check_orbit(orbit)
        return self._orbits[orbit]

    def __len__(self) -> int:
        return len(self._orbits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._orbits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElectronOccupancy):
            return NotImplemented
        return self._orbits == other._orbits

    def __hash__(self) -> int:
        return hash(tuple(self._orbits))

    def __repr__(self) -> str:
        last = max((i for i, n in enumerate(self._orbits) if n), default=-1)
        shown = ", ".join(str(n) for n in self._orbits[: last + 1])
        return f"ElectronOccupancy([{shown}])"