#!/usr/bin/env python
#
# Lara Maia <dev@lara.monster> 2024
#
# The Steam Idler is free software: you can redistribute it and/or
# modify it under the terms of the GNU General Public License as
# published by the Free Software Foundation, either version 3 of
# the License, or (at your option) any later version.
#
# The Steam Idler is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see http://www.gnu.org/licenses/.
#
from setuptools import setup, find_namespace_packages

with open('README.md', encoding='utf-8') as readme_file:
    long_description = readme_file.read()

setup(
    name='steam-idler',
    version='1.0.0',
    description='Keep a Steam app running for a while to farm playtime and cards',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Lara Maia',
    author_email='dev@lara.monster',
    license='GPLv3',
    python_requires='>=3.10',
    package_dir={'': 'src'},
    packages=find_namespace_packages(where='src', include=['steam_idler*']),
    install_requires=[
        'stlib',
        'aiohttp>=3.9',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-asyncio>=0.23',
        ],
    },
    entry_points={
        'console_scripts': [
            'steam-idler = steam_idler.cli:main',
        ],
    },
    classifiers=[
        'Environment :: Console',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Topic :: Games/Entertainment',
    ],
)
