"""Command-line entrypoints for tabthermo."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict

import numpy as np
import typer

from tabthermo.loader import load_phase
from tabthermo.thermo import TabulatedThermo

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
    ] = False,
) -> None:
    """Tabulated reference-state thermodynamics for constant-density phases."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _report(thermo: TabulatedThermo) -> Dict[str, Any]:
    k = thermo.tracked_index
    species = {}
    for i, name in enumerate(thermo.phase.species_names):
        species[name] = {
            "mole_fraction": thermo.phase.mole_fraction(i),
            "activity_concentration": thermo.activity_concentration(i),
            "activity_coefficient": thermo.activity_coefficient(i),
            "reference_enthalpy": thermo.reference_enthalpy(i),
            "reference_entropy": thermo.reference_entropy(i),
            "chemical_potential": thermo.chemical_potential(i),
        }
    return {
        "T": thermo.temperature,
        "P": thermo.pressure,
        "tracked_species": thermo.tracked_species,
        "tracked": {
            "mole_fraction": thermo.tracked_mole_fraction(),
            "reference_enthalpy": thermo.reference_enthalpy(k),
            "reference_entropy": thermo.reference_entropy(k),
            "reference_gibbs": thermo.reference_gibbs(k),
        },
        "standard_concentration": thermo.standard_concentration(),
        "molar_volume": thermo.molar_volume(),
        "enthalpy_mole": thermo.enthalpy_mole(),
        "entropy_mole": thermo.entropy_mole(),
        "gibbs_mole": thermo.gibbs_mole(),
        "species": species,
    }


def _emit(data: Dict[str, Any], output: Path | None) -> None:
    json_output = json.dumps(data, indent=2)
    typer.echo(json_output)

    if output:
        with open(output, "w") as f:
            f.write(json_output)


@app.command()
def evaluate(
    config_file: Annotated[
        Path, typer.Argument(help="Path to JSON phase definition.")
    ],
    mole_fraction: Annotated[
        float | None,
        typer.Option(help="Tracked species mole fraction; others are rescaled."),
    ] = None,
    temperature: Annotated[
        float | None, typer.Option(help="Temperature (K).")
    ] = None,
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
) -> None:
    """Evaluate phase properties at one composition."""
    thermo = load_phase(config_file)
    if temperature is not None:
        thermo.set_temperature(temperature)
    if mole_fraction is not None:
        thermo.set_tracked_mole_fraction(mole_fraction)

    _emit(_report(thermo), output)


@app.command()
def sweep(
    config_file: Annotated[
        Path, typer.Argument(help="Path to JSON phase definition.")
    ],
    points: Annotated[int, typer.Option(help="Number of compositions.")] = 11,
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
) -> None:
    """Tabulate the tracked species' reference state over composition."""
    if points < 2:
        raise typer.BadParameter("points must be at least 2", param_hint="--points")
    thermo = load_phase(config_file)
    k = thermo.tracked_index

    grid = np.linspace(0.0, 1.0, points)
    enthalpy = []
    entropy = []
    for x in grid:
        thermo.set_tracked_mole_fraction(float(x))
        enthalpy.append(thermo.reference_enthalpy(k))
        entropy.append(thermo.reference_entropy(k))
    logger.debug(f"Swept {points} compositions for {thermo.tracked_species}")

    data = {
        "tracked_species": thermo.tracked_species,
        "x": grid.tolist(),
        "reference_enthalpy": enthalpy,
        "reference_entropy": entropy,
    }
    _emit(data, output)
