# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
Configuration entries of a liquid mixture. Each entry is either a request
for built-in coefficients or an explicit coefficient block.

Examples
--------
>>> from thermoliquid import liquid_specification
>>> liquid_specification('H2O', None)
DefaultCoefficients('H2O')
>>> liquid_specification('H2O', {'default': False, 'coefficients': {'W': 18.015}})
ExplicitCoefficients('H2O', W=18.015)

"""
from ._liquid import Liquid
from .exceptions import InvalidConfiguration
from .utils import check_valid_ID
from collections.abc import Mapping
from warnings import warn

__all__ = ('DefaultCoefficients', 'ExplicitCoefficients',
           'liquid_specification')

_default_keys = ('default', 'defaultCoeffs')


class DefaultCoefficients:
    """Request for the built-in coefficients of a liquid."""
    __slots__ = ('ID',)

    def __init__(self, ID):
        check_valid_ID(ID)
        self.ID = ID

    def create(self):
        """Return a Liquid object with default coefficients."""
        return Liquid.default(self.ID)

    def __eq__(self, other):
        return type(self) is type(other) and self.ID == other.ID

    def __repr__(self):
        return f"{type(self).__name__}('{self.ID}')"


class ExplicitCoefficients:
    """Explicit coefficient block of a liquid."""
    __slots__ = ('ID', 'coefficients')

    def __init__(self, ID, coefficients):
        check_valid_ID(ID)
        if not isinstance(coefficients, Mapping):
            raise InvalidConfiguration(
                f"{ID} coefficients must be a mapping, "
                f"not a '{type(coefficients).__name__}' object"
            )
        self.ID = ID
        self.coefficients = dict(coefficients)

    def create(self):
        """Return a Liquid object with explicit coefficients."""
        return Liquid.from_coefficients(self.ID, self.coefficients)

    def __eq__(self, other):
        return (type(self) is type(other)
                and self.ID == other.ID
                and self.coefficients == other.coefficients)

    def __repr__(self):
        data = ', '.join([f"{i}={j!r}" for i, j in self.coefficients.items()])
        return f"{type(self).__name__}('{self.ID}', {data})"


def liquid_specification(ID, entry):
    """
    Parse a configuration entry into a DefaultCoefficients or an
    ExplicitCoefficients object.

    Parameters
    ----------
    ID : str
        Name of liquid.
    entry : None, bool, Mapping, DefaultCoefficients, or ExplicitCoefficients
        Either None, True, an empty mapping, or a mapping with 'default'
        (or 'defaultCoeffs') set to True for default coefficients; or
        a mapping with 'default' set to False and the coefficient block
        under 'coefficients' (or '<ID>Coeffs').

    """
    if isinstance(entry, (DefaultCoefficients, ExplicitCoefficients)):
        if entry.ID != ID:
            raise InvalidConfiguration(
                f"{repr(entry)} does not match liquid ID {repr(ID)}"
            )
        return entry
    elif entry is None or entry is True:
        return DefaultCoefficients(ID)
    elif not isinstance(entry, Mapping):
        raise InvalidConfiguration(
            f"{ID} entry must be a mapping, not a '{type(entry).__name__}' object"
        )
    keys = [i for i in _default_keys if i in entry]
    if len(keys) == 2:
        raise InvalidConfiguration(
            f"{ID} entry may only have one of {', '.join(_default_keys)}"
        )
    elif keys:
        default = entry[keys[0]]
        if not isinstance(default, bool):
            raise InvalidConfiguration(
                f"{ID} entry '{keys[0]}' must be a boolean, "
                f"not a '{type(default).__name__}' object"
            )
    else:
        default = None
    blocks = [i for i in ('coefficients', ID + 'Coeffs') if i in entry]
    if len(blocks) == 2:
        raise InvalidConfiguration(
            f"{ID} entry may only have one of 'coefficients' or '{ID}Coeffs'"
        )
    unknown = [i for i in entry if i not in keys and i not in blocks]
    if unknown:
        warn(f"{ID} entry keys {', '.join(map(str, unknown))} disregarded",
             stacklevel=3)
    if default is None: default = not blocks
    if default:
        if blocks:
            warn(f"{ID} uses default coefficients; '{blocks[0]}' disregarded",
                 stacklevel=3)
        return DefaultCoefficients(ID)
    elif blocks:
        return ExplicitCoefficients(ID, entry[blocks[0]])
    else:
        raise InvalidConfiguration(
            f"{ID} entry requests explicit coefficients but has no "
            f"'coefficients' block"
        )
