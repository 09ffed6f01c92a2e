"""Molecule definitions and the table of tagged molecular configurations.

Units used throughout: molar masses in g/mol, diffusion coefficients in
m^2/s, radii in nanometres. A value of ``None`` means the quantity is not
fixed by this package.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

ANGSTROM_IN_NM = 0.1


@dataclass(frozen=True)
class MoleculeDefinition:
    """Species-level properties shared by every configuration built from it."""

    name: str
    molar_mass: float | None = None
    diffusion_coefficient: float | None = None
    charge: int | None = None
    electronic_levels: int | None = None
    radius: float | None = None
    atoms: int | None = None


@dataclass(eq=False)
class MolecularConfiguration:
    """A tagged state of a molecule, with its own charge and transport values."""

    tag: str
    definition: MoleculeDefinition
    charge: int | None = None
    diffusion_coefficient: float | None = None
    molar_mass: float | None = None
    van_der_waals_radius: float | None = None

    def __post_init__(self) -> None:
        if self.charge is None:
            self.charge = self.definition.charge
        if self.diffusion_coefficient is None:
            self.diffusion_coefficient = self.definition.diffusion_coefficient
        if self.molar_mass is None:
            self.molar_mass = self.definition.molar_mass
        if self.diffusion_coefficient is not None and self.diffusion_coefficient < 0:
            raise ValueError(
                f"diffusion coefficient of {self.tag!r} cannot be negative"
            )


@dataclass
class MoleculeTable:
    """Registry of molecular configurations, looked up by tag."""

    _configurations: dict[str, MolecularConfiguration] = field(
        default_factory=dict, repr=False
    )

    def create_configuration(
        self,
        tag: str,
        definition: MoleculeDefinition,
        charge: int | None = None,
        diffusion_coefficient: float | None = None,
    ) -> MolecularConfiguration:
        """Create and register a configuration under ``tag``.

        Charge and diffusion coefficient default to those of the definition.
        """
        if tag in self._configurations:
            raise ValueError(f"a configuration tagged {tag!r} already exists")
        configuration = MolecularConfiguration(
            tag=tag,
            definition=definition,
            charge=charge,
            diffusion_coefficient=diffusion_coefficient,
        )
        self._configurations[tag] = configuration
        return configuration

    def get_configuration(self, tag: str) -> MolecularConfiguration:
        """Return the configuration registered under ``tag``."""
        try:
            return self._configurations[tag]
        except KeyError:
            raise KeyError(f"no configuration tagged {tag!r}") from None

    def tags(self) -> list[str]:
        """Return the registered tags in the order they were created."""
        return list(self._configurations)

    def __contains__(self, tag: object) -> bool:
        return tag in self._configurations

    def __len__(self) -> int:
        return len(self._configurations)

    def __iter__(self) -> Iterator[MolecularConfiguration]:
        return iter(self._configurations.values())


def build_molecule_table() -> MoleculeTable:
    """Return the table of water-radiolysis species with their parameters."""
    water = MoleculeDefinition("H2O")
    hydrogen = MoleculeDefinition("H")
    hydronium = MoleculeDefinition("H3O")
    hydroxyl = MoleculeDefinition("OH")
    solvated_electron = MoleculeDefinition("e_aq")
    peroxide = MoleculeDefinition("H2O2")
    dihydrogen = MoleculeDefinition("H2")
    dioxygen = MoleculeDefinition("O2")
    hydroperoxyl = MoleculeDefinition("HO2")
    oxygen = MoleculeDefinition("O")
    ozone = MoleculeDefinition("O3")
    fake = MoleculeDefinition("NoneM")

    hydroxide = MoleculeDefinition(
        "OH",
        molar_mass=17.00734,
        diffusion_coefficient=2.8e-9,
        charge=-1,
        electronic_levels=5,
        radius=0.958 * ANGSTROM_IN_NM,
        atoms=2,
    )
    hydroperoxide = MoleculeDefinition(
        "HO_2",
        molar_mass=33.0034,
        diffusion_coefficient=2.3e-9,
        charge=-1,
        electronic_levels=0,
        radius=2.1 * ANGSTROM_IN_NM,
        atoms=3,
    )
    oxygen_anion = MoleculeDefinition(
        "O",
        molar_mass=15.99773,
        diffusion_coefficient=2.0e-9,
        charge=0,
        electronic_levels=0,
        radius=2.0 * ANGSTROM_IN_NM,
        atoms=1,
    )

    table = MoleculeTable()

    def add(
        tag: str,
        definition: MoleculeDefinition,
        *,
        charge: int | None = None,
        diffusion: float | None = None,
        mass: float | None = None,
        radius: float | None = None,
    ) -> None:
        configuration = table.create_configuration(tag, definition, charge, diffusion)
        if mass is not None:
            configuration.molar_mass = mass
        if radius is not None:
            configuration.van_der_waals_radius = radius

    add("H3Op", hydronium, diffusion=9.46e-9, radius=0.25)
    add("°OH", hydroxyl, diffusion=2.2e-9, radius=0.22)
    add("OHm", hydroxide, charge=-1, diffusion=5.3e-9, mass=17.0079, radius=0.33)
    add("e_aq", solvated_electron, radius=0.50)
    add("H", hydrogen, radius=0.19)
    add("H2", dihydrogen, diffusion=4.8e-9, radius=0.14)
    add("H2O2", peroxide, diffusion=2.3e-9, radius=0.21)
    add("HO2°", hydroperoxyl, radius=0.21)
    add("HO2m", hydroperoxide, charge=-1, diffusion=1.4e-9, mass=33.00396, radius=0.25)
    add("Oxy", oxygen, radius=0.20)
    add("Om", oxygen_anion, charge=-1, diffusion=2.0e-9, mass=15.99829, radius=0.25)
    add("O2", dioxygen, radius=0.17)
    add("O2m", dioxygen, charge=-1, diffusion=1.75e-9, mass=31.99602, radius=0.22)
    add("O3", ozone, radius=0.20)
    add("O3m", ozone, charge=-1, diffusion=2.0e-9, mass=47.99375, radius=0.20)
    add("H2O(B)", water, charge=0, diffusion=0.0)
    add("H3Op(B)", hydronium, charge=1, diffusion=0.0)
    add("OHm(B)", hydroxide, charge=-1, diffusion=0.0)
    add("NoneM", fake)
    return table