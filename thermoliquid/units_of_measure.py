# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
__all__ = ('liquid_units_of_measure',
           'ureg', 'convert', 'Quantity', 
           'get_units', 'convert_var')

from .exceptions import DimensionError
from pint import UnitRegistry, DimensionalityError

# %% Import unit registry

ureg = UnitRegistry()
convert = ureg.convert
Quantity = ureg.Quantity
del UnitRegistry

# %% Units of measure

liquid_units_of_measure = {
    'T': 'K',
    'p': 'Pa',
    'W': 'kg/kmol',
    'Tc': 'K',
    'Tpc': 'K',
    'Pc': 'Pa',
    'Ppc': 'Pa',
    'Vc': 'm^3/kmol',
    'Zc': '',
    'Tt': 'K',
    'Tpt': 'K',
    'Pt': 'Pa',
    'Tb': 'K',
    'dipole': 'C*m',
    'omega': '',
    'delta': 'J^0.5/m^1.5',
    'rho': 'kg/m^3',
    'pv': 'Pa',
    'hl': 'J/kg',
    'Cp': 'J/kg/K',
    'sigma': 'N/m',
    'mu': 'Pa*s',
    'K': 'W/m/K',
    'D': 'm^2/s',
}

# %% Functions

def get_units(var):
    return liquid_units_of_measure.get(var)

def convert_var(value, var, units):
    """
    Return value of a liquid property converted from its default units of 
    measure to `units`.
    
    Examples
    --------
    >>> convert_var(2000.0, 'hl', 'kJ/kg')
    2.0
    
    """
    if units is None: return value
    try:
        default_units = liquid_units_of_measure[var]
    except KeyError:
        raise ValueError(f"no units of measure defined for {repr(var)}")
    try:
        return convert(value, default_units or 'dimensionless', units)
    except DimensionalityError:
        raise DimensionError(f"dimensions for {repr(var)} must be in {default_units}, "
                             f"not {units}")
