"""Command-line entrypoints for reactsource."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Dict

import numpy as np
import typer
from pydantic import ValidationError

from reactsource.config import Settings
from reactsource.exceptions import PreconditionError
from reactsource.kinetics import ArrheniusKinetics, MassActionKinetics, PowerLawKinetics
from reactsource.log import get_logger
from reactsource.mixture import ChemicalMixture
from reactsource.models import Reaction, Species
from reactsource.reaction_set import ReactionSet
from reactsource.source import MassSourceComputer
from reactsource.thermo import IdealGasThermo, SpeciesProperties

app = typer.Typer(add_completion=False)


def _parse_mixture(data: Dict[str, Any]) -> ChemicalMixture:
    return ChemicalMixture(Species(name, float(p["mw"])) for name, p in data["species"].items())


def _parse_thermo(data: Dict[str, Any], mixture: ChemicalMixture) -> IdealGasThermo:
    props = {}
    for name, p in data["species"].items():
        props[name] = SpeciesProperties(
            heat_capacity=float(p["cp"]),
            heat_of_formation=float(p["h_form"]),
            entropy=float(p.get("s", 0.0)),
        )
    return IdealGasThermo(mixture, props)


def _parse_kinetics(data: Dict[str, Any] | None, mixture: ChemicalMixture) -> Any:
    if data is None:
        return None
    k_type = data.get("type", "mass_action").lower()
    arr_data = data["arrhenius"]
    arrhenius = ArrheniusKinetics(
        pre_exponential=float(arr_data["A"]),
        activation_energy=float(arr_data["Ea"]),
        temperature_exponent=float(arr_data.get("b", 0.0)),
    )

    if k_type == "mass_action":
        return MassActionKinetics(arrhenius=arrhenius)
    elif k_type == "power_law":
        exponents = {mixture.species_id(sp): float(a) for sp, a in data.get("exponents", {}).items()}
        return PowerLawKinetics(arrhenius=arrhenius, exponents=exponents)
    else:
        raise PreconditionError(f"Unknown kinetics type: {k_type}")


def _parse_reaction_set(data: Dict[str, Any], mixture: ChemicalMixture) -> ReactionSet:
    index = mixture.species_index
    reactions = [
        Reaction.from_equation(
            r["equation"],
            index,
            kinetics=_parse_kinetics(r.get("kinetics"), mixture),
        )
        for r in data.get("reactions", [])
    ]
    return ReactionSet(mixture, reactions)


def _load(config_file: Path) -> tuple[Dict[str, Any], ChemicalMixture, ReactionSet]:
    with open(config_file, "r") as f:
        config = json.load(f)
    try:
        mixture = _parse_mixture(config)
        return config, mixture, _parse_reaction_set(config, mixture)
    except KeyError as exc:
        raise PreconditionError(f"Missing key {exc} in {config_file}") from exc


def _parse_state(data: Dict[str, Any], mixture: ChemicalMixture) -> tuple[float, float, np.ndarray]:
    try:
        state = data["state"]
        T = float(state["T"])
        composition = state["mass_fractions"]
        Y = np.array([float(composition.get(name, 0.0)) for name in mixture.species_names])
        rho = float(state["rho"]) if "rho" in state else mixture.density(T, float(state["P"]), Y)
    except KeyError as exc:
        raise PreconditionError(f"Missing state key {exc}") from exc
    return T, rho, Y


@app.command()
def sources(
    config_file: Annotated[Path, typer.Argument(help="Path to JSON mechanism and state file.")],
    output: Annotated[Path | None, typer.Option(help="Path to save output JSON.")] = None,
    log_level: Annotated[str | None, typer.Option(help="Log level (DEBUG, INFO, ...).")] = None,
) -> None:
    """Evaluate species mass sources for the state given in a config file."""
    logger = get_logger(log_level)

    try:
        try:
            settings = Settings()
        except ValidationError as exc:
            raise PreconditionError(f"Invalid REACTSOURCE_* settings: {exc}") from exc

        config, mixture, reaction_set = _load(config_file)
        try:
            thermo = _parse_thermo(config, mixture)
        except KeyError as exc:
            raise PreconditionError(f"Missing thermo key {exc}") from exc
        T, rho, Y = _parse_state(config, mixture)

        R_mix = mixture.mixture_gas_constant(Y)
        molar_densities = mixture.molar_densities(rho, Y)

        computer = MassSourceComputer(reaction_set, settings)
        omega = computer.compute_mass_sources(
            T, rho, R_mix, Y, molar_densities, thermo.h_RT_minus_s_R(T)
        )
    except PreconditionError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=2) from exc

    data = {
        "T": T,
        "rho": rho,
        "R_mix": R_mix,
        "mass_sources": {name: float(omega[i]) for i, name in enumerate(mixture.species_names)},
        "net_rates": [float(w) for w in computer.net_reaction_rates],
        "total": float(np.sum(omega)),
    }
    logger.info("Evaluated %d reactions over %d species", computer.n_reactions(), computer.n_species())

    json_output = json.dumps(data, indent=2)
    typer.echo(json_output)

    if output:
        with open(output, "w") as f:
            f.write(json_output)


@app.command()
def inspect(
    config_file: Annotated[Path, typer.Argument(help="Path to JSON mechanism file.")],
) -> None:
    """List species and the net stoichiometry of each reaction."""
    try:
        _, mixture, reaction_set = _load(config_file)
    except PreconditionError as exc:
        get_logger().error("%s", exc)
        raise typer.Exit(code=2) from exc

    names = mixture.species_names
    matrix = reaction_set.stoichiometric_matrix()
    payload = {
        "species": {name: mixture.molar_mass(i) for i, name in enumerate(names)},
        "reactions": [
            {
                "equation": reaction.equation,
                "reversible": reaction.reversible,
                "net": {names[s]: int(matrix[s, r]) for s in range(len(names)) if matrix[s, r]},
            }
            for r, reaction in enumerate(reaction_set)
        ],
    }
    typer.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":
    app()
