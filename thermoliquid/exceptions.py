# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""

__all__ = ('InvalidConfiguration',
           'UndefinedLiquid',
           'MissingCoefficients',
           'DomainError',
           'DimensionError',
           'CompositionError',
           'InfeasibleRegion',
           'ConvergenceError',
           'message_with_object_stamp',
           'raise_error_with_object_stamp')

class InvalidConfiguration(ValueError):
    """ValueError regarding a liquid mixture configuration that cannot be resolved."""

class UndefinedLiquid(InvalidConfiguration):
    """Exception regarding liquids without default coefficients."""
    def __init__(self, ID): 
        self.ID = ID
        super().__init__(repr(ID))

class MissingCoefficients(InvalidConfiguration):
    """Exception regarding explicit coefficient blocks with missing fields."""
    def __init__(self, ID, fields):
        self.ID = ID
        self.fields = tuple(fields)
        super().__init__(f"{ID} coefficients missing {', '.join(self.fields)}")

class DomainError(ValueError):
    """ValueError regarding a temperature outside the valid range of a correlation."""
    def __init__(self, var, T, Tmin, Tmax, msg=None):
        self.var = var
        self.T = T
        self.Tmin = Tmin
        self.Tmax = Tmax
        if msg is None: 
            msg = (f"{var} is only valid from {Tmin:.5g} to {Tmax:.5g} K; "
                   f"T={T:.5g} K is outside the domain")
        super().__init__(msg)

class DimensionError(ValueError):
    """ValueError regarding wrong dimensions."""

class CompositionError(ValueError):
    """ValueError regarding compositions that cannot be mixed."""

class InfeasibleRegion(RuntimeError):
    """Runtime error regarding infeasible conditions."""
    def __init__(self, region, msg=None): 
        self.region = region
        if msg is None: msg = region + ' is infeasible'
        super().__init__(msg)

class ConvergenceError(RuntimeError):
    """Runtime error regarding iterative solutions that failed to converge."""
    def __init__(self, variable, iterations, residual, bracket=None, msg=None):
        self.variable = variable
        self.iterations = iterations
        self.residual = residual
        self.bracket = bracket
        if msg is None:
            msg = (f"{variable} failed to converge after {iterations} "
                   f"iterations (residual={residual:.3g}")
            if bracket: msg += f", bracket=[{bracket[0]:.6g}, {bracket[1]:.6g}]"
            msg += ')'
        super().__init__(msg)
    
def message_with_object_stamp(object, msg):
    object_name = str(repr(object))
    if object_name in msg:
        return msg
    else:
        return object_name + ' ' + msg

def raise_error_with_object_stamp(object, error):
    try: 
        msg, *args = error.args
        error.args = (message_with_object_stamp(object, msg), *args)
    except ValueError: pass
    raise error
