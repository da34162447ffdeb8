# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
from .base import display_asfunctor, required_params
from .functors.dippr import (
    DIPPR_EQ100, DIPPR_EQ101, DIPPR_EQ105, DIPPR_EQ106, API_diffusivity
)
from .units_of_measure import liquid_units_of_measure
from .exceptions import (
    DomainError, UndefinedLiquid, MissingCoefficients, InvalidConfiguration,
    raise_error_with_object_stamp,
)
from .utils import check_valid_ID
from ._liquid_data import liquid_data
from .constants import R, TrMax
from collections.abc import Mapping, Sequence
from warnings import warn
from copy import deepcopy
import numpy as np

__all__ = ('Liquid', 'available_liquids', 'register_liquid',
           'liquid_property_array')

# %% Fields

_constants = ('W', 'Tc', 'Pc', 'Vc', 'Zc', 'Tt', 'Pt', 'Tb',
              'dipole', 'omega', 'delta')
_required_constants = ('W', 'Tc', 'Pc', 'Vc', 'Tt', 'omega')
_correlations = ('rho', 'pv', 'hl', 'Cp', 'sigma', 'mu', 'K', 'D')
_limits = ('Tmin', 'Tmax')
_fields = frozenset([*_constants, *_correlations, *_limits])
_correlation_forms = {
    'rho': DIPPR_EQ105,
    'pv': DIPPR_EQ101,
    'hl': DIPPR_EQ106,
    'Cp': DIPPR_EQ100,
    'sigma': DIPPR_EQ106,
    'mu': DIPPR_EQ101,
    'K': DIPPR_EQ100,
    'D': API_diffusivity,
}

# %% Utilities

def liquid_property_array(liquids, var, p, T):
    """
    Return an array of pure liquid properties at `p` and `T`, evaluating
    each liquid at no more than `TrMax` times its critical temperature.

    """
    getfield = getattr
    return np.array([getfield(i, var)(p, min(TrMax * i._Tc, T)) for i in liquids],
                    dtype=float)

def as_float(ID, name, value):
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidConfiguration(
            f"{ID} {name} must be a number, not {value!r}"
        ) from None

def create_correlation(ID, var, data, Tc):
    form = _correlation_forms[var]
    Functor = form.functor
    required = required_params(form)
    if isinstance(data, Mapping):
        data = dict(data)
        if 'Tc' in required and 'Tc' not in data: data['Tc'] = Tc
        unknown = [i for i in data if i not in Functor.params]
        if unknown:
            raise InvalidConfiguration(
                f"{ID} {var} coefficients {', '.join(unknown)} are not "
                f"parameters of {form.__name__}"
            )
        missing = [f"{var}.{i}" for i in required if i not in data]
        if missing: raise MissingCoefficients(ID, missing)
        return Functor(**{i: as_float(ID, f"{var}.{i}", j)
                          for i, j in data.items()})
    elif isinstance(data, Sequence) and not isinstance(data, str):
        if len(data) < len(required):
            missing = [f"{var}.{i}" for i in required[len(data):]]
            raise MissingCoefficients(ID, missing)
        elif len(data) > len(Functor.params):
            raise InvalidConfiguration(
                f"{ID} {var} coefficients exceed the {len(Functor.params)} "
                f"parameters of {form.__name__}"
            )
        return Functor(*[as_float(ID, f"{var}.{i}", j)
                         for i, j in zip(Functor.params, data)])
    elif callable(data):
        return data
    else:
        raise InvalidConfiguration(
            f"{ID} {var} coefficients must be a mapping or a sequence, "
            f"not a '{type(data).__name__}' object"
        )


# %% Pure liquid

class Liquid:
    """
    Create a Liquid object that evaluates thermophysical properties of a
    pure liquid. All correlations are functions of temperature and pressure;
    evaluating them outside the valid temperature range raises a
    :class:`~thermoliquid.exceptions.DomainError`.

    Parameters
    ----------
    ID : str
        Name of liquid.
    W : float
        Molecular weight [kg/kmol].
    Tc : float
        Critical temperature [K].
    Pc : float
        Critical pressure [Pa].
    Vc : float
        Critical molar volume [m^3/kmol].
    Tt : float
        Triple point temperature [K].
    omega : float
        Acentric factor [-].
    rho, pv, hl, Cp, sigma, mu, K, D : function(T, P)
        Density [kg/m^3], vapor pressure [Pa], latent heat [J/kg],
        heat capacity [J/kg/K], surface tension [N/m], viscosity [Pa*s],
        thermal conductivity [W/m/K] and vapor diffusivity [m^2/s].
    Zc : float, optional
        Critical compressibility factor [-]. Defaults to Pc*Vc/(R*Tc).
    Pt : float, optional
        Triple point pressure [Pa].
    Tb : float, optional
        Normal boiling point [K].
    dipole : float, optional
        Dipole moment [C*m].
    delta : float, optional
        Solubility parameter [(J/m^3)^0.5].
    Tmin : float, optional
        Minimum valid temperature [K]. Defaults to the triple point temperature.
    Tmax : float, optional
        Maximum valid temperature [K]. Defaults to the critical temperature.

    Examples
    --------
    Create a liquid with default coefficients:

    >>> from thermoliquid import Liquid
    >>> Water = Liquid.default('H2O')
    >>> Water
    Liquid('H2O')
    >>> 990 < Water.rho(101325, 300) < 1000
    True

    Properties are only evaluated within the valid temperature range:

    >>> Water.rho(101325, 200)
    Traceback (most recent call last):
    thermoliquid.exceptions.DomainError: H2O.rho is only valid from 273.16 to 647.13 K; T=200 K is outside the domain

    """
    __slots__ = ('_ID', '_Tmin', '_Tmax',
                 *['_' + i for i in _constants],
                 *['_' + i for i in _correlations])

    def __init__(self, ID, W, Tc, Pc, Vc, Tt, omega,
                 rho, pv, hl, Cp, sigma, mu, K, D,
                 Zc=None, Pt=None, Tb=None, dipole=None, delta=None,
                 Tmin=None, Tmax=None):
        check_valid_ID(ID)
        self._ID = ID
        self._W = W
        self._Tc = Tc
        self._Pc = Pc
        self._Vc = Vc
        self._Zc = Pc * Vc / (R * Tc) if Zc is None else Zc
        self._Tt = Tt
        self._Pt = Pt
        self._Tb = Tb
        self._dipole = dipole
        self._omega = omega
        self._delta = delta
        self._rho = rho
        self._pv = pv
        self._hl = hl
        self._Cp = Cp
        self._sigma = sigma
        self._mu = mu
        self._K = K
        self._D = D
        self._Tmin = Tt if Tmin is None else Tmin
        self._Tmax = Tc if Tmax is None else Tmax
        if self._Tmin >= self._Tmax:
            raise InvalidConfiguration(
                f"{ID} minimum temperature must be less than its maximum temperature"
            )

    @classmethod
    def from_coefficients(cls, ID, coefficients):
        """
        Return a Liquid object from an explicit coefficient block.

        Parameters
        ----------
        ID : str
            Name of liquid.
        coefficients : Mapping
            Constants and correlation coefficients. Each correlation may be
            given as a mapping of parameter names or as a sequence of
            parameters in the order of its correlation form.

        Examples
        --------
        >>> from thermoliquid import Liquid
        >>> from thermoliquid._liquid_data import liquid_data
        >>> Heptane = Liquid.from_coefficients('Heptane', liquid_data['C7H16'])
        >>> Heptane.W
        100.204

        Missing fields are reported all at once:

        >>> Liquid.from_coefficients('Heptane', {'W': 100.204})
        Traceback (most recent call last):
        thermoliquid.exceptions.MissingCoefficients: Heptane coefficients missing Tc, Pc, Vc, Tt, omega, rho, pv, hl, Cp, sigma, mu, K, D

        """
        if not isinstance(coefficients, Mapping):
            raise InvalidConfiguration(
                f"{ID} coefficients must be a mapping, "
                f"not a '{type(coefficients).__name__}' object"
            )
        missing = [i for i in (*_required_constants, *_correlations)
                   if coefficients.get(i) is None]
        if missing: raise MissingCoefficients(ID, missing)
        unknown = [i for i in coefficients if i not in _fields]
        if unknown:
            warn(f"{ID} coefficients {', '.join(map(str, unknown))} disregarded",
                 stacklevel=2)
        data = {i: as_float(ID, i, coefficients[i]) for i in (*_constants, *_limits)
                if coefficients.get(i) is not None}
        Tc = data['Tc']
        for i in _correlations:
            data[i] = create_correlation(ID, i, coefficients[i], Tc)
        return cls(ID, **data)

    @classmethod
    def default(cls, ID):
        """
        Return a Liquid object with default coefficients.

        Examples
        --------
        >>> from thermoliquid import Liquid
        >>> Liquid.default('C7H16')
        Liquid('C7H16')
        >>> Liquid.default('Mercury')
        Traceback (most recent call last):
        thermoliquid.exceptions.UndefinedLiquid: 'Mercury'

        """
        try:
            coefficients = liquid_data[ID]
        except (KeyError, TypeError):
            raise UndefinedLiquid(ID)
        return cls.from_coefficients(ID, coefficients)

    def copy(self, ID=None):
        """
        Return a copy of the liquid that shares no correlation objects
        with the original.

        Examples
        --------
        >>> from thermoliquid import Liquid
        >>> Water = Liquid.default('H2O')
        >>> Steam = Water.copy('Steam')
        >>> assert Steam.W == Water.W and Steam.model('rho') is not Water.model('rho')

        """
        new = self.__new__(self.__class__)
        setfield = setattr
        getfield = getattr
        for field in self.__slots__:
            setfield(new, field, copy_maybe(getfield(self, field)))
        if ID is not None:
            check_valid_ID(ID)
            new._ID = ID
        return new
    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    ### Constants ###

    @property
    def ID(self):
        """[str] Name of liquid."""
        return self._ID
    @property
    def W(self):
        """Molecular weight [kg/kmol]."""
        return self._W
    @property
    def Tc(self):
        """Critical temperature [K]."""
        return self._Tc
    @property
    def Pc(self):
        """Critical pressure [Pa]."""
        return self._Pc
    @property
    def Vc(self):
        """Critical molar volume [m^3/kmol]."""
        return self._Vc
    @property
    def Zc(self):
        """Critical compressibility factor [-]."""
        return self._Zc
    @property
    def Tt(self):
        """Triple point temperature [K]."""
        return self._Tt
    @property
    def Pt(self):
        """Triple point pressure [Pa]."""
        return self._Pt
    @property
    def Tb(self):
        """Normal boiling point [K]."""
        return self._Tb
    @property
    def dipole(self):
        """Dipole moment [C*m]."""
        return self._dipole
    @property
    def omega(self):
        """Acentric factor [-]."""
        return self._omega
    @property
    def delta(self):
        """Solubility parameter [(J/m^3)^0.5]."""
        return self._delta
    @property
    def Tmin(self):
        """Minimum temperature of correlations [K]."""
        return self._Tmin
    @property
    def Tmax(self):
        """Maximum temperature of correlations [K]."""
        return self._Tmax

    ### Correlations ###

    def model(self, var):
        """Return the correlation functor of a property."""
        if var not in _correlations:
            raise ValueError(f"{repr(var)} is not a correlation of {repr(self)}")
        return getattr(self, '_' + var)

    def evaluate(self, var, p, T):
        """
        Return a property at `p` and `T`. Raise a DomainError if `T` is outside
        the valid temperature range.

        """
        if not self._Tmin <= T <= self._Tmax:
            raise DomainError(f"{self._ID}.{var}", T, self._Tmin, self._Tmax)
        model = self.model(var)
        try:
            return model(T, p)
        except (ValueError, ArithmeticError) as error:
            raise_error_with_object_stamp(self, error)

    def rho(self, p, T):
        """Density [kg/m^3]."""
        return self.evaluate('rho', p, T)

    def pv(self, p, T):
        """Vapor pressure [Pa]."""
        return self.evaluate('pv', p, T)

    def hl(self, p, T):
        """Latent heat of vaporization [J/kg]."""
        return self.evaluate('hl', p, T)

    def Cp(self, p, T):
        """Heat capacity [J/kg/K]."""
        return self.evaluate('Cp', p, T)

    def sigma(self, p, T):
        """Surface tension [N/m]."""
        return self.evaluate('sigma', p, T)

    def mu(self, p, T):
        """Dynamic viscosity [Pa*s]."""
        return self.evaluate('mu', p, T)

    def K(self, p, T):
        """Thermal conductivity [W/m/K]."""
        return self.evaluate('K', p, T)

    def D(self, p, T):
        """Vapor diffusivity [m^2/s]."""
        return self.evaluate('D', p, T)

    ### Representation ###

    def show(self):
        """Print all constants and correlations."""
        info = f"Liquid: {self._ID}\n[Data]   "
        section = []
        for field in (*_constants, *_limits):
            value = getattr(self, '_' + field)
            if value is None:
                line = f"{field}: None"
            else:
                line = f"{field}: {value:.5g}"
                units = liquid_units_of_measure.get(field, "")
                if units: line += f' {units}'
            section.append(line)
        info += ("\n" + 9*" ").join(section)
        section = [display_asfunctor(getattr(self, '_' + i), name=i, var=i, show_var=False)
                   for i in _correlations]
        info += "\n[Models] " + ("\n" + 9*" ").join(section)
        print(info)

    _ipython_display_ = show

    def __str__(self):
        return self._ID

    def __repr__(self):
        return f"Liquid('{self}')"


def copy_maybe(obj):
    try:
        return obj.copy()
    except AttributeError:
        return obj

# %% Default liquids

def available_liquids():
    """
    Return IDs of all liquids with default coefficients.

    Examples
    --------
    >>> from thermoliquid import available_liquids
    >>> available_liquids()
    ('H2O', 'C7H16', 'C8H18')

    """
    return tuple(liquid_data)

def register_liquid(ID, coefficients):
    """
    Register default coefficients for a liquid. The coefficients are
    validated by creating a Liquid object, which is returned.

    """
    liquid = Liquid.from_coefficients(ID, coefficients)
    if ID in liquid_data:
        warn(f"default coefficients of {ID} replaced", stacklevel=2)
    liquid_data[ID] = deepcopy(dict(coefficients))
    return liquid
