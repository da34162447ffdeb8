# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
from ..units_of_measure import get_units
from .. import functors
from inspect import signature

__all__ = ("functor", "Functor",  "TFunctor",
           "TPFunctor", 'display_asfunctor',
           'functor_matching_params', 'required_params',
           'var_with_units')

REGISTERED_ARGS = set()
REGISTERED_FUNCTORS = []

# %% Utilities

def functor_name(functor):
    return functor.__name__ if hasattr(functor, "__name__") else type(functor).__name__

def display_asfunctor(functor, var=None, name=None, show_var=True):
    name = name or functor_name(functor)
    info = f"{name}{str(signature(functor)).replace('self, ', '')}"
    var = var or (functor.var if hasattr(functor, 'var') else None)
    if var:
        if show_var:
            info += " -> " + var_with_units(var)
        else:
            units = get_units(var)
            if units: info += f" -> {units}"
    return info

def functor_matching_params(params):
    N_total = len(params)
    for base in REGISTERED_FUNCTORS:
        N = base._N_args
        if N <= N_total and base._args == params[:N]: return base
    raise ValueError("could not match function signature to registered functors")

def functor_arguments(params):
    base = functor_matching_params(params)
    return base, params[base._N_args:]

def required_params(f):
    """Return names of coefficients without default values."""
    base, params = functor_arguments(tuple(signature(f).parameters))
    parameters = signature(f).parameters
    return tuple([i for i in params if parameters[i].default is parameters[i].empty])

def var_with_units(var):
    units = get_units(var)
    if units: var += f' [{units}]'
    return var

# %% Decorator

def functor(f=None, var=None):
    """
    Decorate a function of temperature, or both temperature and pressure
    to have an attribute, `functor`, that serves to create its functor counterpart.

    Parameters
    ----------
    f : function(T, *args) or function(T, P, *args)
        Function that calculates a thermodynamic property based on temperature,
        or both temperature and pressure.
    var : str, optional
        Name of variable returned (useful for bookkeeping).

    Returns
    -------
    f : function(T, *args) or function(T, P, *args)
        Same function, but with an attribute `functor` that can create
        its `Functor` counterpart.

    Notes
    -----
    The functor decorator checks the signature of the function to find the
    names of the parameters that should be stored as data.

    Examples
    --------
    Create a functor of temperature that returns the vapor pressure
    in Pascal:

    >>> import thermoliquid as tml
    >>> @tml.functor(var='pv')
    ... def Antoine(T, a, b, c):
    ...     return 10.0**(a - b / (T + c))
    >>> f = Antoine.functor(a=10.116, b=1687.5, c=-42.98)
    >>> f
    <Antoine(T, P=None) -> pv [Pa]>
    >>> round(f(T=373.15))
    101157

    All functors are saved in the `functors` module:

    >>> tml.functors.Antoine
    <class 'thermoliquid.functors.Antoine'>

    """
    if f:
        params = tuple(signature(f).parameters)
        base, params = functor_arguments(params)
        dct = {'__slots__': (),
               'function': staticmethod(f),
               'params': params,
               'var': var}
        name = f.__name__
        f.functor = cls = type(name, (base,), dct)
        cls.__module__ = functors.__name__
        setattr(functors, name, cls)
    else:
        return lambda f: functor(f, var)
    return f


# %% Functors

class Functor:
    __slots__ = ('__dict__',)

    def __init_subclass__(cls, args=None):
        if args:
            cls._args = args = tuple(args)
            cls._N_args = N_args = len(args)
            assert args not in REGISTERED_ARGS, (
                f"abstract functor with args={args} already implemented")
            REGISTERED_ARGS.add(args)
            index = 0
            for index, Functor in enumerate(REGISTERED_FUNCTORS):
                if Functor._N_args <= N_args: break
            REGISTERED_FUNCTORS.insert(index, cls)

    def __init__(self, *args, **kwargs):
        for i, j in zip(self.params, args): kwargs[i] = j
        self.__dict__ = kwargs

    def copy(self):
        cls = self.__class__
        new = cls.__new__(cls)
        new.__dict__ = self.__dict__.copy()
        return new
    __copy__ = copy

    def __str__(self):
        return display_asfunctor(self).replace(', **kwargs', '')

    def __repr__(self):
        return f"<{self}>"

    def show(self):
        info = f"Functor: {self}"
        data = self.__dict__
        for key, value in data.items():
            if callable(value):
                value = display_asfunctor(value, show_var=False)
                info += f"\n {key}: {value}"
                continue
            try:
                info += f"\n {key}: {value:.5g}"
            except (TypeError, ValueError):
                info += f"\n {key}: {value}"
        print(info)

    _ipython_display_ = show


class TFunctor(Functor, args=('T',)):
    __slots__ = ()
    kind = "functor of temperature (T; in K)"

    def __call__(self, T, P=None, **kwargs):
        return self.function(T, **self.__dict__, **kwargs)


class TPFunctor(Functor, args=('T', 'P')):
    __slots__ = ()
    kind = "functor of temperature (T; in K) and pressure (P; in Pa)"

    def __call__(self, T, P, **kwargs):
        return self.function(T, P, **self.__dict__, **kwargs)
