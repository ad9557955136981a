import unittest

import numpy as np

from reactsource.constants import P_STANDARD, R_GAS
from reactsource.kinetics import ArrheniusKinetics, MassActionKinetics, PowerLawKinetics
from reactsource.models import Reaction, entries


class TestKinetics(unittest.TestCase):
    def setUp(self):
        # A + B <=> 2C over species [A, B, C]
        self.reaction = Reaction("A + B <=> 2C", entries([(0, 1), (1, 1)]), entries([(2, 2)]), reversible=True)
        self.concentrations = np.array([2.0, 3.0, 0.5])

    def test_arrhenius_temperature_exponent(self):
        arr = ArrheniusKinetics(pre_exponential=10.0, activation_energy=0.0, temperature_exponent=2.0)
        self.assertAlmostEqual(arr.rate_constant(300.0), 10.0 * 300.0**2)

    def test_arrhenius_activation(self):
        arr = ArrheniusKinetics(pre_exponential=1.0, activation_energy=R_GAS * 1000.0)
        self.assertAlmostEqual(arr.rate_constant(1000.0), np.exp(-1.0))

    def test_power_law(self):
        # r = k * C_A^1
        arr = ArrheniusKinetics(pre_exponential=10.0, activation_energy=0.0)
        kin = PowerLawKinetics(arrhenius=arr, exponents={0: 1.0})

        rate = kin.rate(self.reaction, 300.0, self.concentrations, np.zeros(3))
        self.assertAlmostEqual(rate, 20.0)

    def test_mass_action_irreversible(self):
        reaction = Reaction("A + B => 2C", self.reaction.reactants, self.reaction.products)
        kin = MassActionKinetics(ArrheniusKinetics(5.0, 0.0))

        rate = kin.rate(reaction, 300.0, self.concentrations, np.zeros(3))
        self.assertAlmostEqual(rate, 5.0 * 2.0 * 3.0)

    def test_mass_action_reversible(self):
        # sum(nu) = 0, so Kc = exp(-sum(nu * g))
        g = np.array([0.5, -0.25, 1.0])
        kin = MassActionKinetics(ArrheniusKinetics(5.0, 0.0))
        kc = np.exp(-(2 * 1.0 - 0.5 + 0.25))

        rate = kin.rate(self.reaction, 300.0, self.concentrations, g)
        self.assertAlmostEqual(rate, 5.0 * 6.0 - 5.0 / kc * 0.25)

    def test_equilibrium_constant_pressure_term(self):
        # A <=> 2B, sum(nu) = 1
        reaction = Reaction("A <=> 2B", entries([(0, 1)]), entries([(1, 2)]), reversible=True)
        T = 1000.0
        kc = MassActionKinetics.equilibrium_constant(reaction, T, np.zeros(2))
        self.assertAlmostEqual(kc, P_STANDARD / (R_GAS * T))

    def test_mass_action_zero_at_equilibrium(self):
        reaction = Reaction("A <=> 2B", entries([(0, 1)]), entries([(1, 2)]), reversible=True)
        T = 1000.0
        g = np.array([0.3, -1.2])
        kc = MassActionKinetics.equilibrium_constant(reaction, T, g)
        conc = np.array([4.0, np.sqrt(kc * 4.0)])

        rate = MassActionKinetics(ArrheniusKinetics(7.0, 0.0)).rate(reaction, T, conc, g)
        self.assertAlmostEqual(rate, 0.0, places=9)


if __name__ == '__main__':
    unittest.main()
