"""Data structures for species and reactions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Sequence

import numpy as np

from reactsource.exceptions import PreconditionError

if TYPE_CHECKING:
    from reactsource.kinetics import KineticsModel


@dataclass(frozen=True)
class Species:
    name: str
    molar_mass: float  # kg/mol

    def __post_init__(self) -> None:
        if not self.molar_mass > 0:
            raise PreconditionError(f"Species {self.name!r}: molar mass must be > 0, got {self.molar_mass}")


@dataclass(frozen=True)
class StoichiometricEntry:
    species_id: int
    coefficient: int

    def __post_init__(self) -> None:
        if self.species_id < 0:
            raise PreconditionError(f"Species id must be >= 0, got {self.species_id}")
        if self.coefficient <= 0:
            raise PreconditionError(
                f"Stoichiometric coefficient must be > 0, got {self.coefficient} for species {self.species_id}"
            )


@dataclass(frozen=True)
class Reaction:
    """An elementary reaction with ordered reactant and product entries.

    Entries are stored as given. A species may show up on both sides, or more
    than once on one side; every entry contributes on its own.
    """

    equation: str
    reactants: tuple[StoichiometricEntry, ...]
    products: tuple[StoichiometricEntry, ...]
    kinetics: "KineticsModel | None" = None
    reversible: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "reactants", tuple(self.reactants))
        object.__setattr__(self, "products", tuple(self.products))

    @classmethod
    def from_equation(
        cls,
        equation: str,
        species_index: Mapping[str, int],
        kinetics: "KineticsModel | None" = None,
    ) -> "Reaction":
        from reactsource.equations import parse_equation

        reactants, products, reversible = parse_equation(equation, species_index)
        return cls(equation, reactants, products, kinetics=kinetics, reversible=reversible)

    def n_reactants(self) -> int:
        return len(self.reactants)

    def n_products(self) -> int:
        return len(self.products)

    def reactant_id(self, index: int) -> int:
        return self.reactants[index].species_id

    def reactant_stoichiometric_coefficient(self, index: int) -> int:
        return self.reactants[index].coefficient

    def product_id(self, index: int) -> int:
        return self.products[index].species_id

    def product_stoichiometric_coefficient(self, index: int) -> int:
        return self.products[index].coefficient

    def species_ids(self) -> set[int]:
        return {entry.species_id for entry in self.reactants + self.products}

    def net_coefficients(self, n_species: int) -> np.ndarray:
        """Products minus reactants per species, duplicates summed."""
        nu = np.zeros(n_species, dtype=int)
        for entry in self.reactants:
            nu[entry.species_id] -= entry.coefficient
        for entry in self.products:
            nu[entry.species_id] += entry.coefficient
        return nu


def entries(pairs: Sequence[tuple[int, int]]) -> tuple[StoichiometricEntry, ...]:
    """Build entries from ``(species_id, coefficient)`` pairs."""
    return tuple(StoichiometricEntry(int(species_id), int(coefficient)) for species_id, coefficient in pairs)
