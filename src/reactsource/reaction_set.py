"""Reaction collections and the rate-aggregation contract consumed by the core."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Protocol, Sequence

import numpy as np

from reactsource.exceptions import PreconditionError
from reactsource.mixture import ChemicalMixture
from reactsource.models import Reaction

logger = logging.getLogger(__name__)


class ReactionRateAggregator(Protocol):
    """What ``MassSourceComputer`` needs from a reaction collection.

    ``compute_reaction_rates`` must be deterministic, must overwrite every
    entry of ``net_rates`` and must not touch anything owned by the caller.
    """

    def chemical_mixture(self) -> ChemicalMixture: ...

    def n_reactions(self) -> int: ...

    def reaction(self, index: int) -> Reaction: ...

    def compute_reaction_rates(
        self,
        temperature: float,
        density: float,
        mixture_gas_constant: float,
        mass_fractions: Sequence[float],
        molar_densities: Sequence[float],
        h_RT_minus_s_R: Sequence[float],
        net_rates: np.ndarray,
    ) -> None: ...


class ReactionSet:
    """Ordered reactions bound to a mixture.

    Read-only once built; one instance can back many ``MassSourceComputer``
    objects in different threads.
    """

    def __init__(self, mixture: ChemicalMixture, reactions: Iterable[Reaction]):
        self._mixture = mixture
        self._reactions: tuple[Reaction, ...] = tuple(reactions)

        n_species = mixture.n_species()
        for idx, reaction in enumerate(self._reactions):
            for species_id in reaction.species_ids():
                if species_id >= n_species:
                    raise PreconditionError(
                        f"Reaction {idx} ({reaction.equation!r}) references species {species_id},"
                        f" mixture has {n_species}"
                    )
        logger.debug("Built reaction set with %d reactions over %d species", len(self._reactions), n_species)

    def __len__(self) -> int:
        return len(self._reactions)

    def __iter__(self) -> Iterator[Reaction]:
        return iter(self._reactions)

    def chemical_mixture(self) -> ChemicalMixture:
        return self._mixture

    def n_reactions(self) -> int:
        return len(self._reactions)

    def reaction(self, index: int) -> Reaction:
        return self._reactions[index]

    def compute_reaction_rates(
        self,
        temperature,
        density,
        mixture_gas_constant,
        mass_fractions,
        molar_densities,
        h_RT_minus_s_R,
        net_rates: np.ndarray,
    ) -> None:
        """Fill ``net_rates`` with one net rate per reaction (mol/(m³·s)).

        Reactions without a kinetics model get a zero rate.
        """
        for idx, reaction in enumerate(self._reactions):
            if reaction.kinetics is None:
                net_rates[idx] = 0
            else:
                net_rates[idx] = reaction.kinetics.rate(reaction, temperature, molar_densities, h_RT_minus_s_R)

    def stoichiometric_matrix(self) -> np.ndarray:
        """Net coefficients, shape ``(n_species, n_reactions)``."""
        n_species = self._mixture.n_species()
        matrix = np.zeros((n_species, self.n_reactions()), dtype=int)
        for idx, reaction in enumerate(self._reactions):
            matrix[:, idx] = reaction.net_coefficients(n_species)
        return matrix
