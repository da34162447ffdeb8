# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
import pytest
import copy
import json
import numpy as np
import pandas as pd
import thermoliquid as tml
from thermoliquid._liquid_data import liquid_data
from thermoliquid.constants import R, TrMax
from thermoliquid.exceptions import (
    DimensionError, CompositionError, DomainError,
    UndefinedLiquid, MissingCoefficients, InvalidConfiguration,
)
from numpy.testing import assert_allclose

properties = ('rho', 'pv', 'hl', 'Cp', 'sigma', 'mu', 'K', 'D')

def pure_values(mixture, var, p, T):
    return np.array([getattr(i, var)(p, min(TrMax * i.Tc, T)) for i in mixture])

def test_mixture_registry():
    mixture = tml.LiquidMixture({'H2O': None, 'C7H16': {}, 'C8H18': {'defaultCoeffs': True}})
    assert mixture.size() == len(mixture) == 3
    assert mixture.components() == ('H2O', 'C7H16', 'C8H18')
    assert [i.ID for i in mixture.properties()] == ['H2O', 'C7H16', 'C8H18']
    assert mixture.index('C8H18') == 2
    assert mixture['C7H16'] is mixture.properties()[1]
    assert 'H2O' in mixture and 'Mercury' not in mixture
    assert mixture['H2O'] in mixture
    assert list(mixture) == list(mixture.properties())
    assert repr(mixture) == 'LiquidMixture([H2O, C7H16, C8H18])'
    with pytest.raises(KeyError):
        mixture.index('Mercury')
    with pytest.raises(KeyError):
        mixture['Mercury']

def test_mixture_configuration():
    coefficients = dict(liquid_data['C7H16'])
    coefficients['W'] = 100.
    mixture = tml.LiquidMixture({
        'H2O': {'default': True},
        'C7H16': {'default': False, 'coefficients': coefficients},
    })
    assert_allclose(mixture.constant_array('W'), [18.015, 100.])
    mixture = tml.LiquidMixture({
        'C7H16': {'defaultCoeffs': False, 'C7H16Coeffs': coefficients},
    })
    assert mixture['C7H16'].W == 100.
    with pytest.raises(UndefinedLiquid):
        tml.LiquidMixture({'H2O': None, 'Mercury': None})
    with pytest.raises(UndefinedLiquid):
        tml.LiquidMixture(['Mercury'])
    del coefficients['Tc']
    with pytest.raises(MissingCoefficients):
        tml.LiquidMixture({'C7H16': {'default': False, 'coefficients': coefficients}})
    with pytest.raises(InvalidConfiguration):
        tml.LiquidMixture({'C7H16': {'default': False}})
    with pytest.raises(InvalidConfiguration):
        tml.LiquidMixture({'C7H16': {'default': 'yes'}})
    with pytest.raises(InvalidConfiguration):
        tml.LiquidMixture({'C7H16': 1})
    with pytest.raises(InvalidConfiguration):
        tml.LiquidMixture({})
    with pytest.raises(InvalidConfiguration):
        tml.LiquidMixture('H2O')
    with pytest.raises(InvalidConfiguration):
        tml.LiquidMixture.from_liquids([tml.Liquid.default('H2O'), tml.Liquid.default('H2O')])
    with pytest.raises(InvalidConfiguration):
        tml.LiquidMixture.from_liquids(['H2O'])

def test_liquid_specification():
    spec = tml.liquid_specification('H2O', None)
    assert spec == tml.DefaultCoefficients('H2O')
    assert tml.liquid_specification('H2O', {}) == spec
    assert tml.liquid_specification('H2O', True) == spec
    assert tml.liquid_specification('H2O', {'default': True}) == spec
    assert tml.liquid_specification('H2O', spec) is spec
    spec = tml.liquid_specification('H2O', {'coefficients': {'W': 18.}})
    assert spec == tml.ExplicitCoefficients('H2O', {'W': 18.})
    with pytest.warns(UserWarning, match='disregarded'):
        spec = tml.liquid_specification('H2O', {'default': True, 'coefficients': {'W': 18.}})
    assert isinstance(spec, tml.DefaultCoefficients)
    with pytest.warns(UserWarning, match='color'):
        tml.liquid_specification('H2O', {'color': 'clear'})
    with pytest.raises(InvalidConfiguration):
        tml.liquid_specification('H2O', tml.DefaultCoefficients('C7H16'))
    with pytest.raises(InvalidConfiguration):
        tml.liquid_specification('H2O', {'default': True, 'defaultCoeffs': True})

def test_single_liquid_mixture():
    p = 101325.
    T = 350.
    x = [1.]
    for ID in tml.available_liquids():
        mixture = tml.LiquidMixture([ID])
        liquid = mixture[ID]
        for var in properties:
            assert_allclose(getattr(mixture, var)(p, T, x), getattr(liquid, var)(p, T), rtol=1e-12)
        assert_allclose(mixture.Tc(x), liquid.Tc)
        assert_allclose(mixture.Tpc(x), liquid.Tc)
        assert_allclose(mixture.Tpt(x), liquid.Tt)
        assert_allclose(mixture.omega(x), liquid.omega)
        assert_allclose(mixture.W(x), liquid.W)
        assert_allclose(mixture.Ppc(x), R * liquid.Zc * liquid.Tc / liquid.Vc)

def test_water_heptane_mixing_rules():
    mixture = tml.LiquidMixture(['H2O', 'C7H16'])
    Water, Heptane = mixture
    x = np.array([0.5, 0.5])
    assert_allclose(mixture.W(x), 0.5 * (Water.W + Heptane.W))
    assert_allclose(mixture.Tc(x), 0.5 * (Water.Tc + Heptane.Tc))
    assert_allclose(mixture.Tpt(x), 0.5 * (Water.Tt + Heptane.Tt))
    Zc = 0.5 * (Water.Zc + Heptane.Zc)
    Vc = 0.5 * (Water.Vc + Heptane.Vc)
    assert_allclose(mixture.Ppc(x), R * Zc * mixture.Tpc(x) / Vc)
    p = 101325.
    T = 330.
    W = mixture.constant_array('W')
    Wx = (x * W).sum()
    rho = pure_values(mixture, 'rho', p, T)
    assert_allclose(mixture.rho(p, T, x), Wx / (x * W / rho).sum())
    pv = pure_values(mixture, 'pv', p, T)
    assert_allclose(mixture.pv(p, T, x), (x * pv).sum())
    for var in ('hl', 'Cp'):
        values = pure_values(mixture, var, p, T)
        assert_allclose(getattr(mixture, var)(p, T, x), (x * W * values).sum() / Wx)
    mu = pure_values(mixture, 'mu', p, T)
    assert_allclose(mixture.mu(p, T, x), np.exp((x * np.log(mu)).sum()))
    D = pure_values(mixture, 'D', p, T)
    assert_allclose(mixture.D(p, T, x), 1. / (x / D).sum())
    sigma = pure_values(mixture, 'sigma', p, T)
    xs = x * pv / p
    xs /= xs.sum()
    assert_allclose(mixture.sigma(p, T, x), (xs * sigma).sum())
    K = pure_values(mixture, 'K', p, T)
    V = W / rho
    phi = x * V / (x * V).sum()
    Kij = 2. / (1. / K[:, None] + 1. / K[None, :])
    assert_allclose(mixture.K(p, T, x), (phi[:, None] * phi[None, :] * Kij).sum())

def test_linear_constant_mixing_rules():
    mixture = tml.LiquidMixture(['H2O', 'C7H16', 'C8H18'])
    x0 = np.array([0.2, 0.3, 0.5])
    x1 = np.array([0.6, 0.1, 0.3])
    a = 0.3
    for var in ('Tc', 'Tpc', 'Tpt', 'omega', 'W'):
        f = getattr(mixture, var)
        assert_allclose(f(a * x0 + (1 - a) * x1), a * f(x0) + (1 - a) * f(x1))

def test_mass_and_molar_fractions():
    mixture = tml.LiquidMixture(['H2O', 'C7H16', 'C8H18'])
    X0 = np.array([0.2, 0.3, 0.5])
    Y0 = np.array([0.1, 0.6, 0.3])
    assert_allclose(mixture.X(mixture.Y(X0)), X0)
    assert_allclose(mixture.Y(mixture.X(Y0)), Y0)
    assert_allclose(mixture.Y(X0).sum(), 1.)
    Y = mixture.Y([1., 0., 0.])
    assert_allclose(Y, [1., 0., 0.])

def test_zero_fractions_are_skipped():
    mixture = tml.LiquidMixture(['H2O', 'C7H16'])
    Heptane = mixture['C7H16']
    # Water correlations are not valid at 250 K
    p = 101325.
    T = 250.
    x = [0., 1.]
    for var in properties:
        assert_allclose(getattr(mixture, var)(p, T, x), getattr(Heptane, var)(p, T), rtol=1e-12)
    with pytest.raises(DomainError):
        mixture.rho(p, T, [0.5, 0.5])

def test_composition_errors():
    mixture = tml.LiquidMixture(['H2O', 'C7H16'])
    with pytest.raises(DimensionError):
        mixture.rho(101325, 300, [1.])
    with pytest.raises(DimensionError):
        mixture.W([0.2, 0.3, 0.5])
    with pytest.raises(DimensionError):
        mixture.Y([[0.5, 0.5]])
    with pytest.raises(CompositionError):
        mixture.W([1.5, -0.5])
    with pytest.raises(CompositionError):
        mixture.pv(101325, 300, [0., 0.])
    with pytest.raises(CompositionError):
        mixture.Tc([np.nan, 1.])

def test_domain_error_propagates():
    mixture = tml.LiquidMixture(['H2O', 'C7H16'])
    with pytest.raises(DomainError) as info:
        mixture.pv(101325, 260., [0.5, 0.5])
    assert info.value.var == 'H2O.pv'

def test_supercritical_clamping():
    mixture = tml.LiquidMixture(['H2O', 'C7H16'])
    Heptane = mixture['C7H16']
    T = 560.
    x = [0., 1.]
    assert_allclose(mixture.pv(101325, T, x), Heptane.pv(101325, TrMax * Heptane.Tc))

def test_evaluate_with_units():
    mixture = tml.LiquidMixture(['H2O', 'C7H16'])
    p = 101325.
    T = 320.
    x = [0.3, 0.7]
    assert_allclose(mixture.evaluate('hl', p, T, x, 'kJ/kg'), mixture.hl(p, T, x) / 1000.)
    assert_allclose(mixture.evaluate('mu', p, T, x, 'cP'), mixture.mu(p, T, x) * 1000.)
    assert_allclose(mixture.evaluate('pv', p, T, x, 'kPa'), mixture.pv(p, T, x) / 1000.)
    assert mixture.evaluate('rho', p, T, x) == mixture.rho(p, T, x)
    assert_allclose(mixture.evaluate('Tc', p, T, x, 'degC'), mixture.Tc(x) - 273.15)
    with pytest.raises(tml.exceptions.DimensionError):
        mixture.evaluate('rho', p, T, x, 'Pa')
    with pytest.raises(ValueError):
        mixture.evaluate('color', p, T, x)

def test_table():
    mixture = tml.LiquidMixture(['H2O', 'C7H16'])
    table = mixture.table(101325., 300.)
    assert isinstance(table, pd.DataFrame)
    assert list(table.columns) == ['H2O', 'C7H16']
    assert table.shape == (8, 2)
    assert_allclose(table.loc['rho [kg/m^3]', 'H2O'], mixture['H2O'].rho(101325., 300.))
    assert_allclose(table.loc['D [m^2/s]', 'C7H16'], mixture['C7H16'].D(101325., 300.))

def test_mixture_copy():
    mixture = tml.LiquidMixture(['H2O', 'C7H16'])
    for other in (mixture.copy(), mixture.clone(), copy.copy(mixture), copy.deepcopy(mixture)):
        assert other is not mixture
        assert other.components() == mixture.components()
        for a, b in zip(other, mixture):
            assert a is not b
            assert a.model('rho') is not b.model('rho')
        assert other.rho(101325, 300, [0.5, 0.5]) == mixture.rho(101325, 300, [0.5, 0.5])

def test_mixture_is_read_only():
    mixture = tml.LiquidMixture(['H2O', 'C7H16'])
    with pytest.raises(TypeError):
        mixture._IDs = ('C8H18',)
    with pytest.raises(TypeError):
        del mixture._liquids
    W = mixture.constant_array('W')
    with pytest.raises(ValueError):
        W[0] = 1.
    assert mixture.components() == ('H2O', 'C7H16')

def test_mixture_from_files(tmp_path):
    yaml = pytest.importorskip('yaml')
    file = tmp_path / 'mixture.yaml'
    with open(file, 'w') as stream:
        yaml.dump({'liquids': {'H2O': None, 'C8H18': {'default': True}}},
                  stream, sort_keys=False)
    mixture = tml.LiquidMixture.from_yaml(file)
    assert mixture.components() == ('H2O', 'C8H18')
    coefficients = dict(liquid_data['C7H16'])
    file = tmp_path / 'mixture.json'
    with open(file, 'w') as stream:
        json.dump({'C7H16': {'default': False, 'coefficients': coefficients}}, stream)
    mixture = tml.LiquidMixture.from_json(file)
    assert mixture.components() == ('C7H16',)
    assert mixture['C7H16'].W == coefficients['W']
    file = tmp_path / 'invalid.json'
    with open(file, 'w') as stream:
        json.dump(['H2O'], stream)
    with pytest.raises(InvalidConfiguration):
        tml.LiquidMixture.from_json(file)

def test_mixture_show(capsys):
    tml.LiquidMixture(['H2O', 'C7H16']).show()
    output = capsys.readouterr().out
    assert output.startswith('LiquidMixture:')
    assert '[1] C7H16' in output

if __name__ == '__main__':
    test_mixture_registry()
    test_mixture_configuration()
    test_single_liquid_mixture()
    test_water_heptane_mixing_rules()
    test_linear_constant_mixing_rules()
    test_mass_and_molar_fractions()
    test_composition_errors()
