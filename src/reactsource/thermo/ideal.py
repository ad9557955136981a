"""Ideal gas thermodynamics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

import numpy as np

from reactsource.constants import R_GAS, T_REFERENCE
from reactsource.exceptions import PreconditionError
from reactsource.mixture import ChemicalMixture
from reactsource.thermo.base import ThermoInterface


@dataclass(frozen=True)
class SpeciesProperties:
    heat_capacity: float  # J/mol/K (constant)
    heat_of_formation: float  # J/mol at T_REFERENCE
    entropy: float = 0.0  # J/mol/K at T_REFERENCE and P_STANDARD


class IdealGasThermo(ThermoInterface):
    """Ideal gas thermodynamics with constant Cp.

    h(T) = h_f + Cp (T - T_ref)
    s(T) = s_ref + Cp ln(T / T_ref)
    """

    def __init__(self, mixture: ChemicalMixture, properties: Mapping[str, SpeciesProperties]):
        missing = [name for name in mixture.species_names if name not in properties]
        if missing:
            raise PreconditionError(f"No thermo properties for species: {', '.join(missing)}")
        self.mixture = mixture
        self.properties = properties

        ordered = [properties[name] for name in mixture.species_names]
        self._cp = np.array([p.heat_capacity for p in ordered])
        self._h_form = np.array([p.heat_of_formation for p in ordered])
        self._s_ref = np.array([p.entropy for p in ordered])

    def enthalpy(self, temperature: float) -> np.ndarray:
        """Molar enthalpy per species (J/mol)."""
        return self._h_form + self._cp * (temperature - T_REFERENCE)

    def entropy(self, temperature: float) -> np.ndarray:
        """Molar entropy per species (J/mol/K)."""
        return self._s_ref + self._cp * np.log(temperature / T_REFERENCE)

    def h_RT(self, temperature: float) -> np.ndarray:
        return self.enthalpy(temperature) / (R_GAS * temperature)

    def s_R(self, temperature: float) -> np.ndarray:
        return self.entropy(temperature) / R_GAS
