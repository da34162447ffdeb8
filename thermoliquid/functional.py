# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
Mixing rules and composition conversions. All functions work on arrays of
nonzero fractions aligned with arrays of pure component values.

"""
from numba import njit
import numpy as np

__all__ = ('normalize', 'mixing_simple', 'mixing_logarithmic',
           'mixing_harmonic', 'mixing_mass', 'mixing_volumetric',
           'mixing_surface', 'mixing_Li', 'mole_to_mass_fractions',
           'mass_to_mole_fractions')

@njit(cache=True)
def normalize(array, sum_array=None, minimum=1e-16):
    """
    Return a normalized array to a magnitude of 1.
    If magnitude is zero, all fractions will have equal value.
    """
    if sum_array is None: sum_array = array.sum()
    if sum_array < minimum:
        size = array.size
        return np.ones(size)/size
    else:
        return array/sum_array

@njit(cache=True)
def mixing_simple(z, y):
    r'''
    Return a weighted average of `y` given the weights, `z`.

    Examples
    --------
    >>> import numpy as np
    >>> mixing_simple(np.array([0.1, 0.9]), np.array([0.01, 0.02]))
    0.019000000000000003

    '''
    return (z * y).sum()

@njit(cache=True)
def mixing_logarithmic(z, y):
    r'''
    Return the logarithmic weighted average `y` given weights, `z`.

    .. math::

        y = \exp \sum_i z_i \cdot \log(y_i)

    Notes
    -----
    Does not work on negative values.

    Examples
    --------
    >>> import numpy as np
    >>> mixing_logarithmic(np.array([0.1, 0.9]), np.array([0.01, 0.02]))
    0.01866065983073615

    '''
    return np.exp((z*np.log(y)).sum())

@njit(cache=True)
def mixing_harmonic(z, y):
    r'''
    Return the harmonic weighted average of `y` given weights, `z`
    (Blanc's law for diffusivities).

    .. math::

        y = \frac{1}{\sum_i z_i / y_i}

    '''
    return 1. / (z / y).sum()

@njit(cache=True)
def mixing_mass(z, MW, y):
    r'''
    Return the mass weighted average of specific properties `y` given molar
    weights, `z`, and molecular weights, `MW`.

    .. math::

        y = \frac{\sum_i z_i MW_i y_i}{\sum_i z_i MW_i}

    '''
    return (z * MW * y).sum() / (z * MW).sum()

@njit(cache=True)
def mixing_volumetric(z, MW, rho):
    r'''
    Return the density of an ideal mixture (additive molar volumes) given
    molar weights, `z`, molecular weights, `MW`, and pure component
    densities, `rho`.

    .. math::

        \rho = \frac{\sum_i z_i MW_i}{\sum_i z_i MW_i / \rho_i}

    '''
    return (z * MW).sum() / (z * MW / rho).sum()

@njit(cache=True)
def mixing_surface(z, Psat, y, P):
    r'''
    Return the average of `y` weighted by surface molar fractions estimated
    with Raoult's law.

    .. math::

        x_{s,i} = \frac{z_i P_{sat,i} / P}{\sum_j z_j P_{sat,j} / P}

        y = \sum_i x_{s,i} y_i

    Notes
    -----
    The bulk composition is used when vapor pressures are negligible.

    '''
    zs = z * Psat / P
    total = zs.sum()
    if total < 1e-16:
        zs = z / z.sum()
    else:
        zs = zs / total
    return (zs * y).sum()

@njit(cache=True)
def mixing_Li(z, V, kappa):
    r'''
    Return the thermal conductivity of a liquid mixture by Li's method given
    molar weights, `z`, molar volumes, `V`, and pure component thermal
    conductivities, `kappa`.

    .. math::

        \phi_i = \frac{z_i V_i}{\sum_j z_j V_j}

        \kappa_{ij} = 2 \left(\frac{1}{\kappa_i} + \frac{1}{\kappa_j}\right)^{-1}

        \kappa = \sum_i \sum_j \phi_i \phi_j \kappa_{ij}

    References
    ----------
    .. [1] Reid, R. C.; Prausnitz, J. M.; Poling, B. E. The Properties of
       Gases and Liquids, 4th ed.; McGraw-Hill, 1987; Eq. 10-12.

    '''
    phi = z * V
    phi = phi / phi.sum()
    N = phi.size
    kappa_mix = 0.
    for i in range(N):
        for j in range(N):
            kappa_mix += phi[i] * phi[j] * 2. / (1. / kappa[i] + 1. / kappa[j])
    return kappa_mix

@njit(cache=True)
def mole_to_mass_fractions(X, MW):
    """
    Return mass fractions given molar fractions and molecular weights.

    Examples
    --------
    >>> import numpy as np
    >>> mole_to_mass_fractions(np.array([0.5, 0.5]), np.array([1., 3.]))
    array([0.25, 0.75])

    """
    Y = X * MW
    return Y / Y.sum()

@njit(cache=True)
def mass_to_mole_fractions(Y, MW):
    """
    Return molar fractions given mass fractions and molecular weights.

    Examples
    --------
    >>> import numpy as np
    >>> mass_to_mole_fractions(np.array([0.25, 0.75]), np.array([1., 3.]))
    array([0.5, 0.5])

    """
    X = Y / MW
    return X / X.sum()
