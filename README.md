# radioyield

Tools for the radiation chemistry of liquid water:

- `radioyield.occupancy`: the electron occupancy of a water molecule's
  orbitals (`ElectronOccupancy`);
- `radioyield.molecules`: the species produced in water radiolysis (H3O+,
  OH, OH-, e-aq, H, H2, H2O2, HO2, HO2-, O, O-, O2, O2-, O3, O3- and the
  bound H2O, H3O+ and OH-) with their charges, diffusion coefficients
  (m^2/s), molar masses (g/mol) and van der Waals radii (nm), collected in a
  `MoleculeTable`;
- `radioyield.channels`: the decay channels of excited, singly to
  quadruply ionised, dissociative-attachment and vibrationally excited
  water (`WaterDecayScheme`, `DissociationChannel`, `DisplacementType`);
- `radioyield.let_yields` and `radioyield.time_yields`: readers that turn
  species output into radiochemical yields (G values, molecules per
  100 eV), against LET or against time;
- `radioyield.plotting`: matplotlib figures of those yields;
- `radioyield.cli`: the `radioyield` command.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
radioyield --help
radioyield let  [--input Species.txt]  [--output G_LET.png]
radioyield time [--input Species0.csv] [--output G_time.png]
```

`let` reads a species summary file and draws G value against LET; `time`
reads a CSV file of species records and draws G value against time. Both
write one image with a panel per species, with a logarithmic x axis, and
print `wrote <output>`. On an unreadable or malformed input the command
prints the error to standard error and exits with status 1.

## Library use

### Molecular species and decay channels

```python
from radioyield.molecules import build_molecule_table
from radioyield.channels import build_water_decay_scheme

table = build_molecule_table()
print(table.tags())
hydroxyl = table.get_configuration("°OH")
print(hydroxyl.diffusion_coefficient, hydroxyl.van_der_waals_radius)

# Five excitation energies of water, index 0 to 4, in whatever unit you use.
scheme = build_water_decay_scheme(table, [8.22, 10.00, 11.24, 12.61, 13.77])
for name in scheme.configurations():
    for channel in scheme.channels_for(name):
        print(name, channel.name, channel.probability, channel.product_tags)
```

`build_water_decay_scheme` raises `ValueError` if fewer than five energies
are given. `MoleculeTable.get_configuration` and the scheme's lookups raise
`KeyError` for an unknown name.

Electronic configurations start from the ground state of water, five
doubly occupied orbitals:

```python
from radioyield.occupancy import ElectronOccupancy

occupancy = ElectronOccupancy.ground_state()
occupancy.remove_electron(4, 1)
occupancy.add_electron(5, 1)
print(occupancy.total_occupancy())  # 10
print(scheme.occupancy_for("A^1B_1") == occupancy)  # True
```

### Yields against LET

A species summary file holds one block of three lines per run:

```
LET: <value> +- <sigma>
<name> <tag> <name> <tag> ...
<G> <G sigma> <G> <G sigma> ...
```

```python
from radioyield.let_yields import read_species_file
from radioyield.plotting import plot_let_series

series = read_species_file("Species.txt")   # {tag: LetSeries}, in tag order
plot_let_series(series, "g_vs_let.pdf")
```

`parse_species_stream` does the same for any iterable of lines.

### Yields against time

Species records are read from a CSV file whose header holds the columns
`speciesID, number, nEvent, speciesName, time, sumG, sumG2`. Records for the
same species and time are summed, then turned into the mean G value and its
standard error at each time:

```python
from radioyield.time_yields import read_records_csv, aggregate_records
from radioyield.plotting import plot_time_series

series = aggregate_records(read_records_csv("Species0.csv"))  # {id: TimeSeries}
plot_time_series(series, "g_vs_time.pdf")
```

`aggregate_records` raises `ValueError` when there are no records.

Species colours follow `marker_color(species_id, number_of_colors)`, which
skips colour indices 0, 5 and 10.

## What it does not do

- It does not simulate radiation transport or chemical reactions; the
  species table and decay scheme are parameter sets for such a simulation.
- Time records are read from CSV only; other storage formats must be
  converted first.
- Figures are written to files; there is no interactive viewer.