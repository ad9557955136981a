"""reactsource core package."""

from reactsource.config import Settings
from reactsource.exceptions import PreconditionError
from reactsource.kinetics import ArrheniusKinetics, MassActionKinetics, PowerLawKinetics
from reactsource.mixture import ChemicalMixture
from reactsource.models import Reaction, Species, StoichiometricEntry
from reactsource.reaction_set import ReactionRateAggregator, ReactionSet
from reactsource.source import MassSourceComputer

__all__ = [
    "ArrheniusKinetics",
    "MassActionKinetics",
    "PowerLawKinetics",
    "ChemicalMixture",
    "Reaction",
    "Species",
    "StoichiometricEntry",
    "ReactionRateAggregator",
    "ReactionSet",
    "MassSourceComputer",
    "PreconditionError",
    "Settings",
]
