"""Species mass source terms from a set of reactions.

``MassSourceComputer`` turns the net rates of progress of every reaction into
a per-species net mass production rate (kg/(m³·s)):

    omega_s = M_s * sum_r (sum_{p in products(r), p = s} nu_p - sum_{q in reactants(r), q = s} nu_q) * w_r

Rates ``w_r`` come from the bound reaction set; this module only does the
stoichiometric bookkeeping and the molar mass scaling.

Thread safety: each instance owns a scratch buffer that every call
overwrites, so an instance must not be used from two threads at once. Give
each worker its own computer; the reaction set and mixture behind it are
read-only and can be shared.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from reactsource.config import Settings
from reactsource.exceptions import PreconditionError
from reactsource.reaction_set import ReactionRateAggregator

logger = logging.getLogger(__name__)


class MassSourceComputer:
    """Computes mass sources for a borrowed reaction set.

    The reaction set (and its mixture) is referenced, not copied. It must not
    be mutated while the computer is in use.
    """

    def __init__(self, reaction_set: ReactionRateAggregator, settings: Settings | None = None):
        if reaction_set is None:
            raise PreconditionError("A reaction set is required")
        try:
            n_reactions = int(reaction_set.n_reactions())
            mixture = reaction_set.chemical_mixture()
            n_species = int(mixture.n_species())
        except (AttributeError, TypeError) as exc:
            raise PreconditionError(f"Not a usable reaction set: {exc}") from exc
        if n_reactions < 0 or n_species <= 0:
            raise PreconditionError(
                f"Reaction set has undefined sizes: n_reactions={n_reactions}, n_species={n_species}"
            )

        self._settings = settings or Settings()
        self._reaction_set = reaction_set
        self._chem_mixture = mixture
        self._n_reactions = n_reactions
        self._n_species = n_species
        self._net_reaction_rates = np.zeros(n_reactions, dtype=self._settings.numpy_dtype)
        logger.debug(
            "MassSourceComputer bound to %d reactions, %d species (dtype=%s, validate=%s)",
            n_reactions,
            n_species,
            self._settings.dtype,
            self._settings.validate_inputs,
        )

    @property
    def net_reaction_rates(self) -> np.ndarray:
        """Rates from the most recent call. Overwritten by the next one."""
        return self._net_reaction_rates

    def reaction_set(self) -> ReactionRateAggregator:
        return self._reaction_set

    def n_species(self) -> int:
        return self._chem_mixture.n_species()

    def n_reactions(self) -> int:
        return self._reaction_set.n_reactions()

    def compute_mass_sources(
        self,
        temperature,
        density,
        mixture_gas_constant,
        mass_fractions: Sequence,
        molar_densities: Sequence,
        h_RT_minus_s_R: Sequence,
        mass_sources: np.ndarray | None = None,
    ) -> np.ndarray:
        """Compute species mass sources (kg/(m³·s)).

        Args:
            temperature: T (K), > 0.
            density: rho (kg/m³), > 0.
            mixture_gas_constant: R_mix (J/(kg·K)), > 0.
            mass_fractions: Y_s, length n_species.
            molar_densities: C_s (mol/m³), length n_species.
            h_RT_minus_s_R: h/RT - s/R per species, length n_species.
            mass_sources: Output array of length n_species. Overwritten in
                place, never accumulated into. Allocated when omitted.

        Returns:
            ``mass_sources``.

        Raises:
            PreconditionError: On a violated precondition, when validation is on.
        """
        if mass_sources is None:
            mass_sources = np.zeros(self._n_species, dtype=self._settings.numpy_dtype)

        if self._settings.validate_inputs:
            self._check_preconditions(
                temperature,
                density,
                mixture_gas_constant,
                mass_fractions,
                molar_densities,
                h_RT_minus_s_R,
                mass_sources,
            )

        mass_sources.fill(0)
        net_rates = self._net_reaction_rates

        self._reaction_set.compute_reaction_rates(
            temperature,
            density,
            mixture_gas_constant,
            mass_fractions,
            molar_densities,
            h_RT_minus_s_R,
            net_rates,
        )

        # molar sources, mol/(m³·s)
        reaction = self._reaction_set.reaction
        for rxn in range(self._n_reactions):
            current = reaction(rxn)
            rate = net_rates[rxn]

            for entry in current.reactants:
                mass_sources[entry.species_id] -= entry.coefficient * rate

            for entry in current.products:
                mass_sources[entry.species_id] += entry.coefficient * rate

        molar_mass = self._chem_mixture.molar_mass
        for s in range(self._n_species):
            mass_sources[s] *= molar_mass(s)

        return mass_sources

    def _check_preconditions(
        self,
        temperature,
        density,
        mixture_gas_constant,
        mass_fractions,
        molar_densities,
        h_RT_minus_s_R,
        mass_sources,
    ) -> None:
        for label, value in (
            ("T", temperature),
            ("rho", density),
            ("R_mix", mixture_gas_constant),
        ):
            if not value > 0:
                raise PreconditionError(f"{label} must be > 0, got {value}")

        n_species = self.n_species()
        for label, vector in (
            ("mass_fractions", mass_fractions),
            ("molar_densities", molar_densities),
            ("h_RT_minus_s_R", h_RT_minus_s_R),
            ("mass_sources", mass_sources),
        ):
            if len(vector) != n_species:
                raise PreconditionError(f"len({label}) must equal n_species={n_species}, got {len(vector)}")

        if not isinstance(mass_sources, np.ndarray):
            raise PreconditionError(f"mass_sources must be a numpy array, got {type(mass_sources).__name__}")
        if not (np.issubdtype(mass_sources.dtype, np.inexact) or mass_sources.dtype == object):
            raise PreconditionError(f"mass_sources must have a float, complex or object dtype, got {mass_sources.dtype}")
        if len(self._net_reaction_rates) != self.n_reactions():
            raise PreconditionError(
                f"Scratch buffer length {len(self._net_reaction_rates)} != n_reactions={self.n_reactions()}"
            )
