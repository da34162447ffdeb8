# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
Thermophysical properties of liquid mixtures from pure liquid correlations.

"""
__version__ = "0.1.0"

from . import (
    constants,
    base,
    utils,
    exceptions,
    functional,
    units_of_measure,
    functors,
)
from .base import functor
from ._liquid import Liquid, available_liquids, register_liquid
from ._liquid_specification import (
    DefaultCoefficients, ExplicitCoefficients, liquid_specification
)
from .boiling_point import BoilingPoint
from .surface_equilibrium import SurfaceEquilibrium
from ._liquid_mixture import LiquidMixture

__all__ = ('constants', 'base', 'utils', 'exceptions', 'functional',
           'units_of_measure', 'functors', 'functor', 'Liquid',
           'available_liquids', 'register_liquid', 'DefaultCoefficients',
           'ExplicitCoefficients', 'liquid_specification', 'BoilingPoint',
           'SurfaceEquilibrium', 'LiquidMixture')
