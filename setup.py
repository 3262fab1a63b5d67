#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re

from setuptools import find_packages, setup

# read the version without importing serhex, its dependencies are not available at build time
with open('serhex/version.py') as fp:
    __version__ = re.search(r"^BASE_VERSION = '([^']+)'", fp.read(), re.MULTILINE).group(1)

install_requires = [
    'pydantic>=2.0',
    'result>=0.16',
    'structlog>=22.0',
    'typing_extensions>=4.4',
]

setup(
    name='serhex',
    version=__version__,
    description='Hexadecimal serialization of fixed and variable width binary values',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(exclude=('tests', 'tests.*')),
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
)
