"""Base interface for thermodynamic models."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class ThermoInterface(ABC):
    """Per-species thermodynamic properties, in mixture species order."""

    @abstractmethod
    def h_RT(self, temperature: float) -> np.ndarray:
        """Dimensionless enthalpy h/(RT) for each species."""
        pass

    @abstractmethod
    def s_R(self, temperature: float) -> np.ndarray:
        """Dimensionless entropy s/R for each species at the standard pressure."""
        pass

    def h_RT_minus_s_R(self, temperature: float) -> np.ndarray:
        """The potential term h/RT - s/R consumed by reversible rate laws."""
        return self.h_RT(temperature) - self.s_R(temperature)
