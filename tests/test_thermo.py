import unittest

import numpy as np

from reactsource import ChemicalMixture, PreconditionError
from reactsource.constants import R_GAS, T_REFERENCE
from reactsource.thermo import IdealGasThermo, SpeciesProperties


class TestIdealGasThermo(unittest.TestCase):
    def setUp(self):
        self.mixture = ChemicalMixture.from_molar_masses([("A", 0.03), ("B", 0.04)])
        self.thermo = IdealGasThermo(
            self.mixture,
            {
                "B": SpeciesProperties(heat_capacity=40.0, heat_of_formation=-1000.0, entropy=200.0),
                "A": SpeciesProperties(heat_capacity=30.0, heat_of_formation=5000.0, entropy=150.0),
            },
        )

    def test_reference_state(self):
        np.testing.assert_allclose(self.thermo.enthalpy(T_REFERENCE), [5000.0, -1000.0])
        np.testing.assert_allclose(self.thermo.entropy(T_REFERENCE), [150.0, 200.0])

    def test_potential_term_in_mixture_order(self):
        T = 1200.0
        h = np.array([5000.0 + 30.0 * (T - T_REFERENCE), -1000.0 + 40.0 * (T - T_REFERENCE)])
        s = np.array([150.0 + 30.0 * np.log(T / T_REFERENCE), 200.0 + 40.0 * np.log(T / T_REFERENCE)])

        np.testing.assert_allclose(self.thermo.h_RT_minus_s_R(T), h / (R_GAS * T) - s / R_GAS)

    def test_missing_species(self):
        with self.assertRaises(PreconditionError):
            IdealGasThermo(self.mixture, {"A": SpeciesProperties(30.0, 0.0)})


if __name__ == '__main__':
    unittest.main()
