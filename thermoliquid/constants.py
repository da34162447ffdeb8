# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""

__all__ = ('R', 'TrMax')

# Obtained from SciPy 0.19 (2014 CODATA), per kmol to match molecular 
# weights in kg/kmol and critical volumes in m^3/kmol

#: Universal gas constant [J/kmol/K]
R = 8314.4598

#: Maximum reduced temperature at which pure liquid properties are evaluated
TrMax = 0.999
