# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
from setuptools import setup

setup(
    name='thermoliquid',
    packages=['thermoliquid',
              'thermoliquid.base',
              'thermoliquid.functors',
              'thermoliquid.utils',
              'thermoliquid.tests'],
    license='MIT',
    version='0.1.0',
    description="Thermophysical properties of liquid mixtures",
    long_description=open('README.rst', encoding='utf-8').read(),
    author='Yoel Cortes-Pena',
    install_requires=['pint>=0.9',
                      'pandas>=0.25.2',
                      'numpy>=1.18.1',
                      'flexsolve>=0.5.3',
                      'numba>=0.53.1'],
    extras_require={
        'dev': [
            'pyyaml',
            'pytest',
            'pytest-cov',
        ]
    },
    python_requires='>=3.8',
    platforms=['Windows', 'Mac', 'Linux'],
    author_email='yoelcortes@gmail.com',
    classifiers=['Development Status :: 3 - Alpha',
                 'Environment :: Console',
                 'License :: OSI Approved :: University of Illinois/NCSA Open Source License',
                 'License :: OSI Approved :: MIT License',
                 'Topic :: Scientific/Engineering',
                 'Topic :: Scientific/Engineering :: Chemistry',
                 'Topic :: Scientific/Engineering :: Physics',
                 'Intended Audience :: Developers',
                 'Intended Audience :: Science/Research',
                 'Natural Language :: English',
                 'Operating System :: MacOS',
                 'Operating System :: Microsoft :: Windows',
                 'Operating System :: POSIX :: Linux',
                 'Programming Language :: Python :: 3',
                 'Programming Language :: Python :: Implementation :: CPython'],
    keywords=['thermodynamics', 'liquid mixtures', 'mixing rules', 'material properties', 'boiling point'],
)
