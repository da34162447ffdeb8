# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
from ..exceptions import InvalidConfiguration

__all__ = ('check_valid_ID',)


def check_valid_ID(ID):
    if not isinstance(ID, str):
        raise InvalidConfiguration(f"ID must be a string, not a '{type(ID).__name__}' object")
    if not ID or not ID[0].isalpha():
        raise InvalidConfiguration("ID must start with a letter")
    if not all([word.isalnum() for word in ID.split('_') if word]):
        raise InvalidConfiguration(
            'ID may only contain letters, numbers, and/or underscores; '
            'no special characters or spaces'
        )
