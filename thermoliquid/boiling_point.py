# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
import flexsolve as flx
from .exceptions import InfeasibleRegion, ConvergenceError
from .constants import TrMax
from warnings import warn

__all__ = ('BoilingPoint',)

# %% Boiling point calculation

class BoilingPoint:
    """
    Create a BoilingPoint object that returns the temperature at which the
    vapor pressure of a liquid mixture equals a given pressure, when called
    with a pressure and a composition of molar fractions.

    The temperature is bracketed between the pseudo triple point (or the
    highest minimum temperature of the liquids present) and the critical
    temperature of the mixture, and solved by inverse quadratic interpolation.
    Liquids with a maximum temperature below their supercritical cutoff,
    `TrMax*Tc`, lower the upper bound to that maximum temperature.

    Parameters
    ----------
    mixture : :class:`~thermoliquid.LiquidMixture`
    maxiter : int, optional
        Maximum number of iterations. Defaults to 100.
    T_tol : float, optional
        Temperature tolerance [K]. Defaults to 1e-9.
    rtol : float, optional
        Relative tolerance of the vapor pressure. Defaults to 1e-8.

    Examples
    --------
    >>> from thermoliquid import LiquidMixture, BoilingPoint
    >>> mixture = LiquidMixture(['H2O', 'C7H16'])
    >>> BP = BoilingPoint(mixture)
    >>> x = [0.5, 0.5]
    >>> T = BP(101325, x)
    >>> abs(mixture.pv(101325, T, x) / 101325 - 1) < 1e-8
    True

    Pressures above the vapor pressure at the upper bound return the upper
    bound (here the critical temperature of the mixture) with a warning:

    >>> import warnings
    >>> with warnings.catch_warnings():
    ...     warnings.simplefilter('ignore')
    ...     BP(1e9, x) == mixture.Tc(x)
    True

    """
    __slots__ = ('mixture', 'maxiter', 'T_tol', 'rtol')

    def __init__(self, mixture, maxiter=100, T_tol=1e-9, rtol=1e-8):
        self.mixture = mixture
        self.maxiter = maxiter
        self.T_tol = T_tol
        self.rtol = rtol

    def _pv_error(self, T, p, x, trace):
        f = self.mixture.pv(p, T, x) / p - 1.
        trace.append((T, f))
        return f

    def bounds(self, x):
        """Return the lower and upper temperature bounds of the mixture [K]."""
        mixture = self.mixture
        x = mixture.as_composition(x)
        present = x > 0.
        Tlo = max(mixture.Tpt(x), mixture.constant_array('Tmin')[present].max())
        Thi = mixture.Tc(x)
        Tmax = mixture.constant_array('Tmax')[present]
        Tc = mixture.constant_array('Tc')[present]
        # Evaluations above TrMax*Tc are clamped and never reach Tmax
        Tmax = Tmax[Tmax < TrMax * Tc]
        if Tmax.size: Thi = min(Thi, float(Tmax.min()))
        return Tlo, Thi

    def solve(self, p, x):
        """
        Return the boiling point [K] and whether it was limited to the upper
        temperature bound.
        """
        if p <= 0: raise InfeasibleRegion('non-positive pressure')
        x = self.mixture.as_composition(x)
        Tlo, Thi = self.bounds(x)
        if Tlo >= Thi:
            raise InfeasibleRegion(
                'temperature bracket',
                f"lowest valid temperature {Tlo:.5g} K is not below the "
                f"upper temperature bound {Thi:.5g} K of the mixture"
            )
        trace = []
        args = (p, x, trace)
        f = self._pv_error
        fhi = f(Thi, *args)
        if fhi <= 0.: return Thi, True
        flo = f(Tlo, *args)
        if flo > 0.:
            raise InfeasibleRegion(
                'pressure below the pseudo triple point vapor pressure',
                f"pressure {p:.5g} Pa is below the vapor pressure of the "
                f"mixture at its lowest valid temperature {Tlo:.5g} K"
            )
        elif flo == 0.:
            return Tlo, False
        try:
            T = flx.IQ_interpolation(f, Tlo, Thi, flo, fhi,
                                     None, self.T_tol, 5e-12, args,
                                     checkiter=True,
                                     checkbounds=False,
                                     maxiter=self.maxiter)
        except RuntimeError:
            raise self._convergence_error(trace, Tlo, Thi) from None
        residual = abs(f(T, *args))
        if residual > self.rtol:
            raise self._convergence_error(trace, Tlo, Thi)
        return T, False

    def __call__(self, p, x):
        T, bounded = self.solve(p, x)
        if bounded:
            warn(f"pressure {p:.5g} Pa is above the vapor pressure at the "
                 f"upper temperature bound; the upper bound {T:.5g} K "
                 f"is returned", RuntimeWarning, stacklevel=2)
        return T

    def _convergence_error(self, trace, Tlo, Thi):
        # The first two entries are the bracket evaluations.
        for T, f in trace[2:]:
            if f < 0.:
                if T > Tlo: Tlo = T
            elif T < Thi:
                Thi = T
        residual = abs(trace[-1][1])
        return ConvergenceError('boiling point', len(trace) - 2,
                                residual, (Tlo, Thi))

    def __repr__(self):
        return f"{type(self).__name__}({self.mixture!r})"
