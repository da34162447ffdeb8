# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
from ._liquid import Liquid, liquid_property_array
from ._liquid_specification import liquid_specification
from .boiling_point import BoilingPoint
from .surface_equilibrium import SurfaceEquilibrium
from .exceptions import (
    InvalidConfiguration, DimensionError, CompositionError
)
from .units_of_measure import convert_var, liquid_units_of_measure
from .base import var_with_units
from .constants import R
from .utils import read_only
from . import functional as fn
from collections.abc import Mapping, Sequence
import numpy as np
import pandas as pd

__all__ = ('LiquidMixture',)
setattr = object.__setattr__

_constant_vars = ('W', 'Tc', 'Pc', 'Vc', 'Zc', 'Tt', 'omega', 'Tmin', 'Tmax')
_composition_vars = ('Tc', 'Tpc', 'Ppc', 'Tpt', 'omega', 'W')
_property_vars = ('rho', 'pv', 'hl', 'Cp', 'sigma', 'mu', 'K', 'D')

# %% Functions

def liquid_data_array(liquids, attr):
    getfield = getattr
    data = np.asarray([getfield(i, attr) for i in liquids], dtype=float)
    data.setflags(0)
    return data


# %% Liquid mixture

@read_only
class LiquidMixture:
    """
    Create a LiquidMixture object that resolves an ordered set of liquids
    and estimates mixture properties given a composition of molar fractions.
    The mixture is read-only after creation.

    Parameters
    ----------
    data : Mapping[str, None|bool|Mapping] or Iterable[str]
        Configuration entries by liquid ID. Each entry may be None (or empty)
        for default coefficients, or a mapping with 'default' set to False
        and the explicit coefficient block under 'coefficients'. An iterable
        of IDs requests default coefficients for all liquids.

    Examples
    --------
    Create a mixture of water and heptane:

    >>> from thermoliquid import LiquidMixture
    >>> mixture = LiquidMixture({'H2O': None, 'C7H16': {'default': True}})
    >>> mixture
    LiquidMixture([H2O, C7H16])
    >>> mixture.components()
    ('H2O', 'C7H16')
    >>> mixture.size()
    2

    Mixing rules work on molar fractions in the order of the liquids:

    >>> round(mixture.W([0.5, 0.5]), 4)
    59.1095
    >>> round(mixture.Tc([0.5, 0.5]), 3)
    593.665

    The mixture is immutable:

    >>> mixture.liquids = None
    Traceback (most recent call last):
    TypeError: cannot set 'liquids'; 'LiquidMixture' object is read-only

    """
    __slots__ = ('_IDs', '_liquids', '_index', '_size',
                 *['_' + i for i in _constant_vars],
                 '_boiling_point', '_surface_equilibrium')

    def __init__(self, data):
        if isinstance(data, Mapping):
            entries = data.items()
        elif isinstance(data, Sequence) and not isinstance(data, str):
            entries = [(i, None) for i in data]
        else:
            raise InvalidConfiguration(
                "liquid mixture data must be a mapping of liquid IDs to "
                f"entries, not a '{type(data).__name__}' object"
            )
        specifications = [liquid_specification(ID, entry) for ID, entry in entries]
        self._load([i.create() for i in specifications])

    @classmethod
    def from_liquids(cls, liquids):
        """
        Create a LiquidMixture object from Liquid objects.

        Examples
        --------
        >>> from thermoliquid import LiquidMixture, Liquid
        >>> LiquidMixture.from_liquids([Liquid.default('C8H18')])
        LiquidMixture([C8H18])

        """
        self = cls.__new__(cls)
        self._load(liquids)
        return self

    @classmethod
    def from_yaml(cls, file):
        """Create a LiquidMixture object from a yaml file given its directory."""
        import yaml
        with open(file, 'r') as stream:
            data = yaml.full_load(stream)
        return cls(file_data(data, file))

    @classmethod
    def from_json(cls, file):
        """Create a LiquidMixture object from a json file given its directory."""
        import json
        with open(file, 'r') as stream:
            data = json.load(stream)
        return cls(file_data(data, file))

    def _load(self, liquids):
        liquids = tuple(liquids)
        if not liquids:
            raise InvalidConfiguration("liquid mixture must have at least one liquid")
        for i in liquids:
            if not isinstance(i, Liquid):
                raise InvalidConfiguration(
                    f"liquids must be 'Liquid' objects, not '{type(i).__name__}' objects"
                )
        IDs = tuple([i.ID for i in liquids])
        index = {ID: n for n, ID in enumerate(IDs)}
        if len(index) != len(IDs):
            duplicates = sorted(set([i for i in IDs if IDs.count(i) > 1]))
            raise InvalidConfiguration(
                f"liquid mixture has duplicate liquids: {', '.join(duplicates)}"
            )
        setattr(self, '_IDs', IDs)
        setattr(self, '_liquids', liquids)
        setattr(self, '_index', index)
        setattr(self, '_size', len(liquids))
        for var in _constant_vars:
            setattr(self, '_' + var, liquid_data_array(liquids, var))
        boiling_point = BoilingPoint(self)
        setattr(self, '_boiling_point', boiling_point)
        setattr(self, '_surface_equilibrium',
                SurfaceEquilibrium(self, boiling_point=boiling_point))

    ### Registry ###

    def size(self):
        """Return the number of liquids."""
        return self._size

    def components(self):
        """Return the IDs of all liquids in order."""
        return self._IDs

    def properties(self):
        """Return all Liquid objects in order."""
        return self._liquids

    def index(self, ID):
        """
        Return index of liquid.

        Examples
        --------
        >>> from thermoliquid import LiquidMixture
        >>> mixture = LiquidMixture(['H2O', 'C7H16'])
        >>> mixture.index('C7H16')
        1

        """
        try:
            return self._index[ID]
        except (KeyError, TypeError):
            raise KeyError(f"{repr(ID)} is not in {repr(self)}")

    def constant_array(self, var):
        """
        Return a read-only array of pure liquid constants.

        Examples
        --------
        >>> from thermoliquid import LiquidMixture
        >>> mixture = LiquidMixture(['H2O', 'C7H16'])
        >>> mixture.constant_array('W')
        array([ 18.015, 100.204])

        """
        if var not in _constant_vars:
            raise ValueError(f"{repr(var)} is not a constant of liquids")
        return getattr(self, '_' + var)

    def copy(self):
        """Return a deep copy of the mixture; no Liquid objects are shared."""
        return self.from_liquids([i.copy() for i in self._liquids])
    clone = __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def __getitem__(self, ID):
        return self._liquids[self.index(ID)]

    def __len__(self):
        return self._size

    def __contains__(self, liquid):
        if isinstance(liquid, str):
            return liquid in self._index
        elif isinstance(liquid, Liquid):
            return liquid in self._liquids
        else:
            return False

    def __iter__(self):
        return iter(self._liquids)

    ### Compositions ###

    def as_composition(self, x, name='x'):
        """
        Return `x` as an array of molar (or mass) fractions. Raise a
        DimensionError if the number of fractions does not match the number
        of liquids and a CompositionError for negative or empty compositions.

        """
        x = np.array(x, dtype=float)
        if x.ndim != 1 or x.size != self._size:
            raise DimensionError(
                f"{name} must be a 1-d array with {self._size} fractions, "
                f"not an array of shape {x.shape}"
            )
        if not np.isfinite(x).all():
            raise CompositionError(f"{name} fractions must be finite")
        if (x < 0.).any():
            raise CompositionError(f"{name} fractions cannot be negative")
        if not (x > 0.).any():
            raise CompositionError(f"{name} must have at least one positive fraction")
        return x

    def _nonzero(self, x):
        x = self.as_composition(x)
        index = np.flatnonzero(x)
        return x[index], index

    def _property_array(self, var, p, T, index):
        liquids = self._liquids
        return liquid_property_array([liquids[i] for i in index], var, p, T)

    ### Constant mixing rules ###

    def Tc(self, x):
        """Critical temperature by Kay's rule [K]."""
        return fn.mixing_simple(self.as_composition(x), self._Tc)

    def Tpc(self, x):
        """Pseudocritical temperature by Kay's rule [K]."""
        return fn.mixing_simple(self.as_composition(x), self._Tc)

    def Ppc(self, x):
        """Pseudocritical pressure by the modified Prausnitz and Gunn rule [Pa]."""
        x = self.as_composition(x)
        Zc = fn.mixing_simple(x, self._Zc)
        Vc = fn.mixing_simple(x, self._Vc)
        return R * Zc * fn.mixing_simple(x, self._Tc) / Vc

    def Tpt(self, x):
        """Pseudo triple point temperature [K]."""
        return fn.mixing_simple(self.as_composition(x), self._Tt)

    def omega(self, x):
        """Acentric factor [-]."""
        return fn.mixing_simple(self.as_composition(x), self._omega)

    def W(self, x):
        """Molecular weight [kg/kmol]."""
        return fn.mixing_simple(self.as_composition(x), self._W)

    def Y(self, X):
        """
        Return mass fractions given molar fractions.

        Examples
        --------
        >>> from thermoliquid import LiquidMixture
        >>> mixture = LiquidMixture(['H2O', 'C7H16'])
        >>> mixture.Y([0.5, 0.5]).round(4)
        array([0.1524, 0.8476])

        """
        return fn.mole_to_mass_fractions(self.as_composition(X, 'X'), self._W)

    def X(self, Y):
        """Return molar fractions given mass fractions."""
        return fn.mass_to_mole_fractions(self.as_composition(Y, 'Y'), self._W)

    ### Property mixing rules ###

    def rho(self, p, T, x):
        """Density assuming ideal (volume additive) mixing [kg/m^3]."""
        x, index = self._nonzero(x)
        rho = self._property_array('rho', p, T, index)
        return fn.mixing_volumetric(x, self._W[index], rho)

    def pv(self, p, T, x):
        """Vapor pressure by Raoult's law [Pa]."""
        x, index = self._nonzero(x)
        return fn.mixing_simple(x, self._property_array('pv', p, T, index))

    def hl(self, p, T, x):
        """Mass weighted latent heat of vaporization [J/kg]."""
        x, index = self._nonzero(x)
        hl = self._property_array('hl', p, T, index)
        return fn.mixing_mass(x, self._W[index], hl)

    def Cp(self, p, T, x):
        """Mass weighted heat capacity [J/kg/K]."""
        x, index = self._nonzero(x)
        Cp = self._property_array('Cp', p, T, index)
        return fn.mixing_mass(x, self._W[index], Cp)

    def sigma(self, p, T, x):
        """Surface tension weighted by Raoult's surface molar fractions [N/m]."""
        x, index = self._nonzero(x)
        pv = self._property_array('pv', p, T, index)
        sigma = self._property_array('sigma', p, T, index)
        return fn.mixing_surface(x, pv, sigma, p)

    def mu(self, p, T, x):
        """Dynamic viscosity by logarithmic mixing [Pa*s]."""
        x, index = self._nonzero(x)
        return fn.mixing_logarithmic(x, self._property_array('mu', p, T, index))

    def K(self, p, T, x):
        """Thermal conductivity by Li's method [W/m/K]."""
        x, index = self._nonzero(x)
        rho = self._property_array('rho', p, T, index)
        K = self._property_array('K', p, T, index)
        return fn.mixing_Li(x, self._W[index] / rho, K)

    def D(self, p, T, x):
        """Vapor diffusivity by Blanc's law [m^2/s]."""
        x, index = self._nonzero(x)
        return fn.mixing_harmonic(x, self._property_array('D', p, T, index))

    def evaluate(self, var, p, T, x, units=None):
        """
        Return a mixture property converted to `units`.

        Parameters
        ----------
        var : str
            Name of property.
        p : float
            Pressure [Pa].
        T : float
            Temperature [K].
        x : Iterable[float]
            Molar fractions.
        units : str, optional
            Units of measure of the result. Defaults to SI units.

        Examples
        --------
        >>> from thermoliquid import LiquidMixture
        >>> mixture = LiquidMixture(['H2O', 'C7H16'])
        >>> round(mixture.evaluate('W', 101325, 300, [0.5, 0.5], 'g/mol'), 4)
        59.1095

        """
        if var in _property_vars:
            value = getattr(self, var)(p, T, x)
        elif var in _composition_vars:
            value = getattr(self, var)(x)
        else:
            raise ValueError(f"{repr(var)} is not a property of liquid mixtures")
        return convert_var(value, var, units)

    def table(self, p, T):
        """
        Return a DataFrame of pure liquid properties at `p` and `T`, each
        evaluated at no more than `TrMax` times its critical temperature.

        """
        liquids = self._liquids
        data = {var_with_units(i): liquid_property_array(liquids, i, p, T)
                for i in _property_vars}
        return pd.DataFrame(data, index=pd.Index(self._IDs, name='Liquid')).T

    ### Solvers ###

    def pvInvert(self, p, x):
        """
        Return the temperature at which the vapor pressure of the mixture
        equals `p` [K]. See :class:`~thermoliquid.BoilingPoint`.

        """
        return self._boiling_point(p, x)

    def Xs(self, p, Tg, Tl, xg, xl):
        """
        Return the liquid molar fractions at a gas-liquid interface.
        See :class:`~thermoliquid.SurfaceEquilibrium`.

        """
        return self._surface_equilibrium(p, Tg, Tl, xg, xl)

    ### Representation ###

    def show(self):
        """Print all liquids and their critical constants."""
        info = f"{type(self).__name__}:"
        W = liquid_units_of_measure['W']
        T = liquid_units_of_measure['Tc']
        P = liquid_units_of_measure['Pc']
        for n, i in enumerate(self._liquids):
            info += (f"\n [{n}] {i.ID}: W={i.W:.5g} {W}, Tc={i.Tc:.5g} {T}, "
                     f"Pc={i.Pc:.5g} {P}")
        print(info)

    _ipython_display_ = show

    def __repr__(self):
        return f"{type(self).__name__}([{', '.join(self._IDs)}])"


def file_data(data, file):
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"{file} must hold a mapping of liquids")
    liquids = data.get('liquids')
    return data if liquids is None else liquids
