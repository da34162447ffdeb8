# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
__all__ = ['DIPPR_EQ100', 'DIPPR_EQ101', 'DIPPR_EQ105', 'DIPPR_EQ106',
           'API_diffusivity']

from ..base.functor import functor
from math import log, exp, sqrt

@functor
def DIPPR_EQ100(T, A=0., B=0., C=0., D=0., E=0., F=0., G=0.):
    r'''Used in calculating the heat capacities and thermal conductivities
    of liquids. All parameters default to zero. As this is a straightforward 
    polynomial, no restrictions on parameters apply. Note that high-order 
    polynomials like this may need large numbers of decimal places to avoid 
    unnecessary error.

    .. math::
        Y = A + BT + CT^2 + DT^3 + ET^4 + FT^5 + GT^6

    Parameters
    ----------
    T : float
        Temperature, [K]
    A-G : float
        Parameter for the equation; chemical and property specific [-]

    Returns
    -------
    Y : float
        Property [constant-specific]

    Examples
    --------
    Water liquid heat capacity; DIPPR coefficients normally listed in J/kmol/K.

    >>> DIPPR_EQ100(300, 276370., -2090.1, 8.125, -0.014116, 0.0000093701)
    75355.81000000003

    References
    ----------
    .. [1] Design Institute for Physical Properties, 1996. DIPPR Project 801
       DIPPR/AIChE
    '''
    return A + T*(B + T*(C + T*(D + T*(E + T*(F + G*T)))))

@functor
def DIPPR_EQ101(T, A, B, C=0., D=0., E=0.):
    r'''Used in calculating vapor pressures and liquid viscosities.

    .. math::
        Y = \exp\left(A + \frac{B}{T} + C\cdot \ln T + D \cdot T^E\right)

    '''
    return exp(A + B/T + C*log(T) + D*T**E)

@functor
def DIPPR_EQ105(T, A, B, C, D):
    r'''Used in calculating liquid densities.

    .. math::
        Y = \frac{A}{B^{1 + (1 - T/C)^D}}

    '''
    return A/B**(1. + (1. - T/C)**D)

@functor
def DIPPR_EQ106(T, Tc, A, B, C=0., D=0., E=0.):
    r'''Used in calculating heats of vaporization and surface tensions.

    .. math::
        Y = A (1 - T_r)^{B + C T_r + D T_r^2 + E T_r^3}

    '''
    Tr = T/Tc
    return A*(1. - Tr)**(B + Tr*(C + Tr*(D + E*Tr)))

@functor
def API_diffusivity(T, P, a, b, wf, wa):
    r'''Return the binary diffusivity of a vapor in a gas by the correlation
    of the API Technical Data Book (Fuller, Schettler and Giddings 
    form in SI units).

    .. math::
        D = \frac{3.6059\times 10^{-3} (1.8 T)^{1.75} 
        \sqrt{1/w_f + 1/w_a}}{P (a^{1/3} + b^{1/3})^2}

    Parameters
    ----------
    T : float
        Temperature, [K]
    P : float
        Pressure, [Pa]
    a : float
        Diffusion volume of the vapor, [-]
    b : float
        Diffusion volume of the gas, [-]
    wf : float
        Molecular weight of the vapor, [kg/kmol]
    wa : float
        Molecular weight of the gas, [kg/kmol]

    '''
    alpha = sqrt(1./wf + 1./wa)
    beta = (a**(1./3.) + b**(1./3.))**2
    return 3.6059e-3*(1.8*T)**1.75*alpha/(P*beta)
