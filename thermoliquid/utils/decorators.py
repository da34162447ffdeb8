# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""

__all__ = ('read_only',)

def read_only(cls):
    """
    Decorate class to deny setting and deleting attributes. Instances must
    be initialized with `object.__setattr__`.
    
    """
    name = cls.__name__
    
    def __setattr__(self, field, value):
        raise TypeError(f"cannot set '{field}'; '{name}' object is read-only")
    
    def __delattr__(self, field):
        raise TypeError(f"cannot delete '{field}'; '{name}' object is read-only")
    
    cls.__setattr__ = __setattr__
    cls.__delattr__ = __delattr__
    return cls
