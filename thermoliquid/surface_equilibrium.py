# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
import numpy as np
import flexsolve as flx
from .boiling_point import BoilingPoint
from ._liquid import liquid_property_array
from .exceptions import InfeasibleRegion, ConvergenceError
from . import functional as fn

__all__ = ('SurfaceEquilibrium',)

# %% Surface equilibrium calculation

class SurfaceEquilibrium:
    """
    Create a SurfaceEquilibrium object that returns the liquid molar
    fractions at a gas-liquid interface when called with a pressure, the
    gas and liquid temperatures, and the gas and liquid molar fractions.

    The gas at the interface holds the vapor of the bulk liquid, with
    partial pressures `xl_i * pv_i(Tl)` by Raoult's law, and the bulk gas
    fills the rest of the pressure (none when the vapor pressure of the bulk
    liquid exceeds the pressure). At the interface, the partial pressure
    of each species over the surface liquid, `xs_i * pv_i(Ts)`, equals its
    partial pressure in the interface gas, `y_i * p`. The interface
    temperature, `Ts`, is the boiling point of the surface liquid bounded by
    the gas and liquid temperatures. The composition is solved by successive
    substitution starting from the bulk liquid.

    Parameters
    ----------
    mixture : :class:`~thermoliquid.LiquidMixture`
    maxiter : int, optional
        Maximum number of iterations. Defaults to 100.
    xtol : float, optional
        Tolerance of the molar fractions. Defaults to 1e-10.
    boiling_point : :class:`~thermoliquid.BoilingPoint`, optional
        Solver of the interface temperature. Defaults to a new BoilingPoint
        object of the mixture.

    Examples
    --------
    >>> from thermoliquid import LiquidMixture, SurfaceEquilibrium
    >>> mixture = LiquidMixture(['H2O', 'C7H16'])
    >>> SE = SurfaceEquilibrium(mixture)
    >>> xs = SE(101325, 400, 300, [0.5, 0.5], [0.5, 0.5])
    >>> round(float(xs.sum()), 12)
    1.0
    >>> bool((xs >= 0).all())
    True

    """
    __slots__ = ('mixture', 'boiling_point', 'maxiter', 'xtol')

    def __init__(self, mixture, maxiter=100, xtol=1e-10, boiling_point=None):
        self.mixture = mixture
        self.boiling_point = BoilingPoint(mixture) if boiling_point is None else boiling_point
        self.maxiter = maxiter
        self.xtol = xtol

    def interface_temperature(self, p, xs, Tmin, Tmax):
        """Return the boiling point of `xs` bounded by `Tmin` and `Tmax` [K]."""
        if Tmin == Tmax: return Tmin
        try:
            T, _ = self.boiling_point.solve(p, xs)
        except InfeasibleRegion:
            # Boiling point is below the lowest valid temperature
            return Tmin
        if T < Tmin: return Tmin
        elif T > Tmax: return Tmax
        return T

    def interface_gas(self, p, Tl, xg, xl):
        """
        Return the molar fractions of the gas at the interface given the
        bulk gas and liquid compositions.
        """
        index = np.flatnonzero(xl)
        liquids = self.mixture.properties()
        pv = liquid_property_array([liquids[i] for i in index], 'pv', p, Tl)
        y = np.zeros_like(xl)
        y[index] = xl[index] * pv / p
        y_vapor = y.sum()
        if y_vapor >= 1.: return y / y_vapor
        return y + (1. - y_vapor) * fn.normalize(xg)

    def _iter_xs(self, xs, p, Tmin, Tmax, y_p, index, counter):
        counter[0] += 1
        Ts = self.interface_temperature(p, xs, Tmin, Tmax)
        liquids = self.mixture.properties()
        pv = liquid_property_array([liquids[i] for i in index], 'pv', p, Ts)
        xs = np.zeros_like(xs)
        xs[index] = y_p / pv
        return fn.normalize(xs)

    def __call__(self, p, Tg, Tl, xg, xl):
        if p <= 0: raise InfeasibleRegion('non-positive pressure')
        mixture = self.mixture
        xg = mixture.as_composition(xg, 'xg')
        xl = mixture.as_composition(xl, 'xl')
        y = self.interface_gas(p, Tl, xg, xl)
        index = np.flatnonzero(y)
        xs = fn.normalize(xl)
        counter = [0]
        args = (p, min(Tl, Tg), max(Tl, Tg), y[index] * p, index, counter)
        xs = flx.fixed_point(self._iter_xs, xs, xtol=self.xtol, args=args,
                             checkconvergence=False,
                             checkiter=False,
                             maxiter=self.maxiter)
        iterations = counter[0]
        xs_new = self._iter_xs(xs, *args)
        step = np.abs(xs_new - xs).max()
        if step > 10. * self.xtol:
            raise ConvergenceError('surface composition', iterations, step)
        return xs_new

    def __repr__(self):
        return f"{type(self).__name__}({self.mixture!r})"
