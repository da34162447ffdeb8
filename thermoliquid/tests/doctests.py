# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
This module contains all doctests for thermoliquid.

"""
from doctest import testmod

__all__ = ('test_functional',
           'test_units_of_measure',
           'test_functor',
           'test_liquid',
           'test_liquid_specification',
           'test_liquid_mixture',
           'test_solvers',
           'test_thermoliquid',
)

def test_functional():
    from thermoliquid import functional
    testmod(functional)

def test_units_of_measure():
    from thermoliquid import units_of_measure
    testmod(units_of_measure)

def test_functor():
    from thermoliquid.base import functor_module
    from thermoliquid.functors import dippr
    testmod(functor_module)
    testmod(dippr)

def test_liquid():
    from thermoliquid import _liquid
    testmod(_liquid)

def test_liquid_specification():
    from thermoliquid import _liquid_specification
    testmod(_liquid_specification)

def test_liquid_mixture():
    from thermoliquid import _liquid_mixture
    testmod(_liquid_mixture)

def test_solvers():
    from thermoliquid import boiling_point, surface_equilibrium
    testmod(boiling_point)
    testmod(surface_equilibrium)

def test_thermoliquid():
    test_functional()
    test_units_of_measure()
    test_functor()
    test_liquid()
    test_liquid_specification()
    test_liquid_mixture()
    test_solvers()
