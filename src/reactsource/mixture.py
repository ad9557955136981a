"""Species database for a gas mixture."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np

from reactsource.constants import R_GAS
from reactsource.exceptions import PreconditionError
from reactsource.models import Species

logger = logging.getLogger(__name__)


class ChemicalMixture:
    """Ordered, fixed set of species indexed ``0..n_species-1``.

    Instances are read-only after construction and can be shared between
    threads and between any number of reaction sets.
    """

    def __init__(self, species: Iterable[Species]):
        self._species: tuple[Species, ...] = tuple(species)
        if not self._species:
            raise PreconditionError("A mixture needs at least one species")

        self._index: dict[str, int] = {}
        for idx, sp in enumerate(self._species):
            if sp.name in self._index:
                raise PreconditionError(f"Duplicate species name {sp.name!r}")
            self._index[sp.name] = idx

        self._molar_masses = np.array([sp.molar_mass for sp in self._species])
        self._molar_masses.setflags(write=False)
        logger.debug("Built mixture with %d species", len(self._species))

    @classmethod
    def from_molar_masses(cls, molar_masses: Sequence[tuple[str, float]]) -> "ChemicalMixture":
        return cls(Species(name, molar_mass) for name, molar_mass in molar_masses)

    def __len__(self) -> int:
        return len(self._species)

    def __iter__(self):
        return iter(self._species)

    def n_species(self) -> int:
        return len(self._species)

    def molar_mass(self, species_id: int) -> float:
        """Molar mass of one species (kg/mol)."""
        return self._species[species_id].molar_mass

    @property
    def molar_masses(self) -> np.ndarray:
        return self._molar_masses

    @property
    def species_names(self) -> tuple[str, ...]:
        return tuple(sp.name for sp in self._species)

    @property
    def species_index(self) -> dict[str, int]:
        return dict(self._index)

    def species_id(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise PreconditionError(f"Unknown species {name!r}") from None

    def mixture_gas_constant(self, mass_fractions: Sequence[float]) -> float:
        """Specific gas constant of the mixture, R / M_mix (J/(kg·K))."""
        y = self._as_species_vector(mass_fractions, "mass_fractions")
        return float(R_GAS * np.sum(y / self._molar_masses))

    def molar_densities(self, density: float, mass_fractions: Sequence[float]) -> np.ndarray:
        """Species concentrations rho * Y_i / M_i (mol/m³)."""
        y = self._as_species_vector(mass_fractions, "mass_fractions")
        return density * y / self._molar_masses

    def density(self, temperature: float, pressure: float, mass_fractions: Sequence[float]) -> float:
        """Ideal gas density P / (R_mix T) (kg/m³)."""
        if temperature <= 0:
            raise PreconditionError(f"Temperature must be > 0, got {temperature}")
        return pressure / (self.mixture_gas_constant(mass_fractions) * temperature)

    def _as_species_vector(self, values: Sequence[float], label: str) -> np.ndarray:
        arr = np.asarray(values, dtype=float)
        if arr.shape != (self.n_species(),):
            raise PreconditionError(f"{label} must have length {self.n_species()}, got shape {arr.shape}")
        return arr
