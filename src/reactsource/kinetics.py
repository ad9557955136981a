"""Rate laws evaluated per reaction by a ``ReactionSet``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Protocol

import numpy as np

from reactsource.constants import P_STANDARD, R_GAS

if TYPE_CHECKING:
    from reactsource.models import Reaction


class KineticsModel(Protocol):
    def rate(
        self,
        reaction: Reaction,
        temperature: float,
        molar_densities: np.ndarray,
        h_RT_minus_s_R: np.ndarray,
    ) -> float:
        """Net rate of progress of ``reaction`` (mol/(m³·s)), forward minus reverse."""
        ...


@dataclass(frozen=True)
class ArrheniusKinetics:
    pre_exponential: float
    activation_energy: float  # J/mol
    temperature_exponent: float = 0.0

    def rate_constant(self, temperature: float) -> float:
        k = self.pre_exponential * np.exp(-self.activation_energy / (R_GAS * temperature))
        if self.temperature_exponent:
            k *= temperature**self.temperature_exponent
        return k


@dataclass(frozen=True)
class PowerLawKinetics:
    """Irreversible rate ``k(T) * prod(C_i^a_i)`` with exponents keyed by species index."""

    arrhenius: ArrheniusKinetics
    exponents: Mapping[int, float]

    def rate(self, reaction, temperature, molar_densities, h_RT_minus_s_R) -> float:
        rate = self.arrhenius.rate_constant(temperature)
        for species_id, exponent in self.exponents.items():
            rate *= molar_densities[species_id] ** exponent
        return rate


@dataclass(frozen=True)
class MassActionKinetics:
    """Elementary mass-action kinetics.

    Forward rate is ``k_f * prod(C_r^nu_r)`` over the reactant entries. For a
    reversible reaction the backward constant is ``k_f / Kc`` where

        ln Kc = -sum_i(nu_i * (h/RT - s/R)_i) + sum_i(nu_i) * ln(P0 / (R T))

    and ``nu`` are the net (product minus reactant) coefficients.
    """

    arrhenius: ArrheniusKinetics

    def rate(self, reaction, temperature, molar_densities, h_RT_minus_s_R) -> float:
        kf = self.arrhenius.rate_constant(temperature)
        forward = kf
        for entry in reaction.reactants:
            forward *= molar_densities[entry.species_id] ** entry.coefficient
        if not reaction.reversible:
            return forward

        kc = self.equilibrium_constant(reaction, temperature, h_RT_minus_s_R)
        backward = kf / kc
        for entry in reaction.products:
            backward *= molar_densities[entry.species_id] ** entry.coefficient
        return forward - backward

    @staticmethod
    def equilibrium_constant(reaction, temperature: float, h_RT_minus_s_R: np.ndarray) -> float:
        nu = reaction.net_coefficients(len(h_RT_minus_s_R))
        log_kc = -np.dot(nu, h_RT_minus_s_R) + nu.sum() * np.log(P_STANDARD / (R_GAS * temperature))
        return float(np.exp(log_kc))
