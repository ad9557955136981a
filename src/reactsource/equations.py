"""Parsing of reaction equation strings such as ``"2 H2 + O2 => 2 H2O"``."""

from __future__ import annotations

import re
from typing import Mapping

from reactsource.exceptions import PreconditionError
from reactsource.models import StoichiometricEntry

# Longest arrows first so "<=>" is not read as "=>".
_ARROWS = (("<=>", True), ("=>", False), ("->", False), ("=", True))
_TERM = re.compile(r"^(?:(\d+)\s*)?([A-Za-z(][\w()+\-*]*)$")


def parse_equation(
    equation: str,
    species_index: Mapping[str, int],
) -> tuple[tuple[StoichiometricEntry, ...], tuple[StoichiometricEntry, ...], bool]:
    """Split an equation into reactant entries, product entries and reversibility.

    Terms are separated by `` + `` (surrounding spaces required, so charged
    names like ``O2+`` are left alone). A term may carry a leading integer
    coefficient, optionally glued to the name (``2A``).
    """
    for arrow, reversible in _ARROWS:
        if arrow in equation:
            left, _, right = equation.partition(arrow)
            break
    else:
        raise PreconditionError(f"No reaction arrow in equation {equation!r}")

    reactants = _parse_side(left, species_index, equation)
    products = _parse_side(right, species_index, equation)
    return reactants, products, reversible


def _parse_side(
    side: str, species_index: Mapping[str, int], equation: str
) -> tuple[StoichiometricEntry, ...]:
    terms = [term.strip() for term in re.split(r"\s\+\s", side.strip())]
    if not terms or any(not term for term in terms):
        raise PreconditionError(f"Empty side in equation {equation!r}")

    parsed = []
    for term in terms:
        match = _TERM.match(term)
        if match is None:
            raise PreconditionError(f"Malformed term {term!r} in equation {equation!r}")
        coefficient = int(match.group(1)) if match.group(1) else 1
        name = match.group(2)
        if name not in species_index:
            raise PreconditionError(f"Unknown species {name!r} in equation {equation!r}")
        parsed.append(StoichiometricEntry(species_index[name], coefficient))
    return tuple(parsed)
