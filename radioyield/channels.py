"""Dissociation channels of excited and ionised water molecules."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from itertools import combinations, combinations_with_replacement

from radioyield.molecules import MolecularConfiguration, MoleculeTable
from radioyield.occupancy import WATER_OCCUPIED_LEVELS, ElectronOccupancy

EXCITED_ORBIT = 5
"""First unoccupied orbital of water, which receives excited electrons."""


class DisplacementType(enum.Enum):
    """How the products of a dissociation are placed around the parent."""

    NO_DISPLACEMENT = enum.auto()
    A1B1_DISSOCIATION_DECAY = enum.auto()
    B1A1_DISSOCIATION_DECAY = enum.auto()
    B1A1_DISSOCIATION_DECAY2 = enum.auto()
    AUTO_IONISATION = enum.auto()
    IONISATION_DISSOCIATION_DECAY = enum.auto()
    DOUBLE_IONISATION_DISSOCIATION_DECAY1 = enum.auto()
    DOUBLE_IONISATION_DISSOCIATION_DECAY2 = enum.auto()
    DOUBLE_IONISATION_DISSOCIATION_DECAY3 = enum.auto()
    TRIPLE_IONISATION_DISSOCIATION_DECAY = enum.auto()
    QUADRUPLE_IONISATION_DISSOCIATION_DECAY = enum.auto()
    DISSOCIATIVE_ATTACHMENT = enum.auto()


@dataclass(eq=False)
class DissociationChannel:
    """One way a molecular configuration can decay.

    A channel without products is a relaxation; ``energy`` then holds the
    energy released, when it is known.
    """

    name: str
    probability: float = 0.0
    products: list[MolecularConfiguration] = field(default_factory=list)
    energy: float | None = None
    displacement: DisplacementType = DisplacementType.NO_DISPLACEMENT

    def __post_init__(self) -> None:
        if not 0.0 <= self.probability <= 1.0:
            raise ValueError(
                f"probability of channel {self.name!r} must lie in [0, 1], "
                f"got {self.probability}"
            )
        self.products = list(self.products)

    def add_product(self, product: MolecularConfiguration) -> None:
        """Append a product molecule."""
        self.products.append(product)

    @property
    def product_tags(self) -> list[str]:
        """Tags of the products, in the order they were added."""
        return [product.tag for product in self.products]

    def copy(self) -> DissociationChannel:
        """Return an independent copy with its own product list."""
        return replace(self, products=list(self.products))


class WaterDecayScheme:
    """Named configurations of water with their electron occupancy and decay channels."""

    def __init__(self) -> None:
        self._occupancies: dict[str, ElectronOccupancy | None] = {}
        self._channels: dict[str, list[DissociationChannel]] = {}

    def add_configuration(
        self, name: str, occupancy: ElectronOccupancy | None = None
    ) -> None:
        """Register a configuration; ``occupancy`` may be left unset."""
        if name in self._occupancies:
            raise ValueError(f"a configuration named {name!r} already exists")
        self._occupancies[name] = occupancy.copy() if occupancy is not None else None
        self._channels[name] = []

    def add_channel(self, name: str, channel: DissociationChannel) -> None:
        """Attach a decay channel to a registered configuration."""
        self._require(name)
        self._channels[name].append(channel)

    def channels_for(self, name: str) -> list[DissociationChannel]:
        """Return the decay channels of a configuration, in the order added."""
        self._require(name)
        return list(self._channels[name])

    def occupancy_for(self, name: str) -> ElectronOccupancy | None:
        """Return a copy of a configuration's occupancy, or None if unset."""
        self._require(name)
        occupancy = self._occupancies[name]
        return occupancy.copy() if occupancy is not None else None

    def configurations(self) -> list[str]:
        """Return configuration names in the order they were registered."""
        return list(self._occupancies)

    def _require(self, name: str) -> None:
        if name not in self._occupancies:
            raise KeyError(f"no configuration named {name!r}")

    def __contains__(self, name: object) -> bool:
        return name in self._occupancies

    def __len__(self) -> int:
        return len(self._occupancies)


def _occupancy(holes: Iterable[int] = (), extra: Iterable[int] = ()) -> ElectronOccupancy:
    """Ground state with one electron removed per entry of ``holes``, added per ``extra``."""
    occupancy = ElectronOccupancy.ground_state()
    for orbit in holes:
        occupancy.remove_electron(orbit, 1)
    for orbit in extra:
        occupancy.add_electron(orbit, 1)
    return occupancy


def _register(
    scheme: WaterDecayScheme,
    name: str,
    occupancy: ElectronOccupancy | None,
    channels: Iterable[DissociationChannel],
) -> None:
    scheme.add_configuration(name, occupancy)
    for channel in channels:
        scheme.add_channel(name, channel)


def build_water_decay_scheme(
    table: MoleculeTable, excitation_energies: Sequence[float]
) -> WaterDecayScheme:
    """Return the decay scheme of water for the species in ``table``.

    ``excitation_energies`` holds the five excitation levels of water,
    from the highest orbital (index 0) down to the lowest (index 4).
    """
    energies = tuple(excitation_energies)
    if len(energies) < WATER_OCCUPIED_LEVELS:
        raise ValueError(
            f"{WATER_OCCUPIED_LEVELS} excitation energies are needed, got {len(energies)}"
        )

    oh = table.get_configuration("°OH")
    ohm = table.get_configuration("OHm")
    e_aq = table.get_configuration("e_aq")
    h2 = table.get_configuration("H2")
    h3o = table.get_configuration("H3Op")
    h = table.get_configuration("H")
    o = table.get_configuration("Oxy")

    D = DisplacementType
    scheme = WaterDecayScheme()

    def auto_ionisation(name: str) -> DissociationChannel:
        return DissociationChannel(name, 0.5, [oh, h3o, e_aq], displacement=D.AUTO_IONISATION)

    # Excitations
    _register(
        scheme,
        "A^1B_1",
        _occupancy([4], [EXCITED_ORBIT]),
        [
            DissociationChannel(
                "A^1B_1_Relax", 0.35, energy=energies[0], displacement=D.NO_DISPLACEMENT
            ),
            DissociationChannel(
                "A^1B_1_DissociDecay", 0.65, [oh, h], displacement=D.A1B1_DISSOCIATION_DECAY
            ),
        ],
    )
    _register(
        scheme,
        "B^1A_1",
        _occupancy([3], [EXCITED_ORBIT]),
        [
            DissociationChannel("B^1A_1_Relax_Channel", 0.175, energy=energies[1]),
            DissociationChannel(
                "B^1A_1_DissociDecay", 0.0325, [h2, oh, oh],
                displacement=D.B1A1_DISSOCIATION_DECAY,
            ),
            DissociationChannel(
                "B^1A_1_AutoIoni_Channel", 0.50, [oh, h3o, e_aq],
                displacement=D.AUTO_IONISATION,
            ),
            DissociationChannel(
                "A^1B_1_DissociDecay", 0.2535, [h, oh],
                displacement=D.A1B1_DISSOCIATION_DECAY,
            ),
            DissociationChannel(
                "B^1A_1_DissociDecay2", 0.039, [o, h, h],
                displacement=D.B1A1_DISSOCIATION_DECAY2,
            ),
        ],
    )
    for layer, orbit, energy_index in (("3rd", 2, 2), ("2nd", 1, 3), ("1st", 0, 4)):
        name = f"Exci{layer}Layer"
        _register(
            scheme,
            name,
            _occupancy([orbit], [EXCITED_ORBIT]),
            [
                auto_ionisation(f"{name}_AutoIoni_Channel"),
                DissociationChannel(
                    f"{name}_Relax_Channel", 0.5, energy=energies[energy_index]
                ),
            ],
        )

    # Single ionisation
    ionisation = DissociationChannel(
        "Ioni_Channel", 1.0, [h3o, oh], displacement=D.IONISATION_DISSOCIATION_DECAY
    )
    for level in range(WATER_OCCUPIED_LEVELS, 0, -1):
        _register(scheme, f"Ioni{level}", _occupancy([level - 1]), [ionisation.copy()])

    # Double ionisation
    double_channels = [
        DissociationChannel(
            "DoubleIonisation_Channel1", 0.29, [h3o, h3o, o],
            displacement=D.DOUBLE_IONISATION_DISSOCIATION_DECAY1,
        ),
        DissociationChannel(
            "DoubleIonisation_Channel2", 0.16, [h3o, h3o, h, oh, o],
            displacement=D.DOUBLE_IONISATION_DISSOCIATION_DECAY2,
        ),
        DissociationChannel(
            "DoubleIonisation_Channel3", 0.55, [h3o, h3o, o],
            displacement=D.DOUBLE_IONISATION_DISSOCIATION_DECAY3,
        ),
    ]
    orbits = range(WATER_OCCUPIED_LEVELS)
    double_holes = list(combinations_with_replacement(orbits, 2))
    for number, holes in reversed(list(enumerate(double_holes, start=1))):
        _register(
            scheme,
            f"DoubleIonisation{number}",
            _occupancy(holes),
            [channel.copy() for channel in double_channels],
        )

    # Triple ionisation
    triple = DissociationChannel(
        "TripleIonisation_Channel", 1.0, [h3o, h3o, h3o, oh, o],
        displacement=D.TRIPLE_IONISATION_DISSOCIATION_DECAY,
    )
    triple_holes = [
        (double, double, single)
        for double in orbits
        for single in orbits
        if single != double
    ] + list(combinations(orbits, 3))
    for number, holes in reversed(list(enumerate(triple_holes, start=1))):
        _register(scheme, f"TripleIonisation{number}", _occupancy(holes), [triple.copy()])

    # Quadruple ionisation
    quadruple = DissociationChannel(
        "QuadrupleIonisation_Channel", 1.0, [h3o, h3o, h3o, h3o, oh, oh, o],
        displacement=D.QUADRUPLE_IONISATION_DISSOCIATION_DECAY,
    )
    pairs = list(combinations(orbits, 2))
    quadruple_holes = (
        list(combinations(orbits, 4))
        + [(a, b, c, c) for a, b in pairs for c in orbits if c not in (a, b)]
        + [(a, a, b, b) for a, b in pairs]
    )
    for number, holes in enumerate(quadruple_holes, start=1):
        _register(
            scheme, f"QuadrupleIonisation{number}", _occupancy(holes), [quadruple.copy()]
        )

    # Dissociative attachment
    _register(
        scheme,
        "DissociAttachment_ch1",
        _occupancy(extra=[EXCITED_ORBIT]),
        [
            DissociationChannel(
                "DissociAttachment_ch1", 1.0, [h2, ohm, oh],
                displacement=D.DISSOCIATIVE_ATTACHMENT,
            )
        ],
    )

    # Electron-hole recombination
    _register(
        scheme,
        "H2Ovib",
        None,
        [
            DissociationChannel(
                "H2Ovib_DissociDecay1", 0.1365, [h2, oh, oh],
                displacement=D.B1A1_DISSOCIATION_DECAY,
            ),
            DissociationChannel(
                "H2Ovib_DissociDecay2", 0.3575, [oh, h],
                displacement=D.A1B1_DISSOCIATION_DECAY,
            ),
            DissociationChannel(
                "H2Ovib_DissociDecay3", 0.156, [o, h, h],
                displacement=D.B1A1_DISSOCIATION_DECAY2,
            ),
            DissociationChannel("H2Ovib_DissociDecay4", 0.35),
        ],
    )
    return scheme