# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
Default coefficients of pure liquids. Each entry follows the format of an
explicit coefficient block: constants in SI units (molecular weights in
kg/kmol, critical volumes in m^3/kmol) and one coefficient set per
correlation. Correlation forms are fixed per property:

* rho: DIPPR 105 [kg/m^3]
* pv: DIPPR 101 [Pa]
* hl: DIPPR 106 [J/kg]
* Cp: DIPPR 100 [J/kg/K]
* sigma: DIPPR 106 [N/m]
* mu: DIPPR 101 [Pa*s]
* K: DIPPR 100 [W/m/K]
* D: API diffusivity [m^2/s]

References
----------
.. [1] Perry, R. H.; Green, D. W. Perry's Chemical Engineers' Handbook,
   7th ed.; McGraw-Hill, 1997.
.. [2] Design Institute for Physical Properties, 1996. DIPPR Project 801
   DIPPR/AIChE

"""

__all__ = ('liquid_data',)

liquid_data = {
    'H2O': {
        'W': 18.015,
        'Tc': 647.13,
        'Pc': 2.2055e+7,
        'Vc': 0.05595,
        'Zc': 0.229,
        'Tt': 273.16,
        'Pt': 6.113e+2,
        'Tb': 373.15,
        'dipole': 6.1709e-30,
        'omega': 0.3449,
        'delta': 4.7813e+4,
        'rho': {'A': 98.343885, 'B': 0.30542, 'C': 647.13, 'D': 0.081},
        'pv': {'A': 73.649, 'B': -7258.2, 'C': -7.3037, 'D': 4.1653e-06, 'E': 2},
        'hl': {'Tc': 647.13, 'A': 2889425.47876769, 'B': 0.3199, 'C': -0.212,
               'D': 0.25795},
        'Cp': {'A': 15341.1046350264, 'B': -116.019983347211,
               'C': 0.451013044684985, 'D': -0.000783569247849015,
               'E': 5.20127671384957e-07},
        'sigma': {'Tc': 647.13, 'A': 0.18548, 'B': 2.717, 'C': -3.554, 'D': 2.047},
        'mu': {'A': -51.964, 'B': 3670.6, 'C': 5.7331, 'D': -5.3495e-29, 'E': 10},
        'K': {'A': -0.4267, 'B': 0.0056903, 'C': -8.0065e-06, 'D': 1.815e-09},
        'D': {'a': 15.0, 'b': 15.0, 'wf': 18.015, 'wa': 28},
    },
    'C7H16': {
        'W': 100.204,
        'Tc': 540.2,
        'Pc': 2.74e+6,
        'Vc': 0.428,
        'Zc': 0.261,
        'Tt': 182.57,
        'Pt': 0.183,
        'Tb': 371.58,
        'dipole': 0.,
        'omega': 0.3494,
        'delta': 1.52e+4,
        'rho': {'A': 61.38396836, 'B': 0.26211, 'C': 540.2, 'D': 0.28141},
        'pv': {'A': 87.829, 'B': -6996.4, 'C': -9.8802, 'D': 7.2099e-06, 'E': 2},
        'hl': {'Tc': 540.2, 'A': 499121.791545248, 'B': 0.38795},
        'Cp': {'A': 1230.3, 'B': 2.5, 'C': 0.003},
        'sigma': {'Tc': 540.2, 'A': 0.054143, 'B': 1.2512},
        'mu': {'A': -24.451, 'B': 1533.1, 'C': 2.0087},
        'K': {'A': 0.215, 'B': -0.000303},
        'D': {'a': 147.18, 'b': 20.1, 'wf': 100.204, 'wa': 28},
    },
    'C8H18': {
        'W': 114.231,
        'Tc': 568.7,
        'Pc': 2.49e+6,
        'Vc': 0.492,
        'Zc': 0.259,
        'Tt': 216.38,
        'Pt': 2.11,
        'Tb': 398.83,
        'dipole': 0.,
        'omega': 0.3996,
        'delta': 1.54e+4,
        'rho': {'A': 61.37754, 'B': 0.26115, 'C': 568.7, 'D': 0.28034},
        'pv': {'A': 96.084, 'B': -7900.2, 'C': -11.003, 'D': 7.1802e-06, 'E': 2},
        'hl': {'Tc': 568.7, 'A': 483056.95, 'B': 0.38467},
        'Cp': {'A': 1968.2, 'B': -1.6338, 'C': 0.0083945},
        'sigma': {'Tc': 568.7, 'A': 0.052789, 'B': 1.2157},
        'mu': {'A': -20.463, 'B': 1497.4, 'C': 1.379},
        'K': {'A': 0.2156, 'B': -0.00029483},
        'D': {'a': 167.64, 'b': 20.1, 'wf': 114.231, 'wa': 28},
    },
}
