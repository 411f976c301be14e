"""This file is part of LVGRIDEXT, the Low Voltage GRID EXTension planner.
LVGRIDEXT determines where an additional cable relieves thermal overloads
and voltage bound violations in low voltage distribution grids, based on
the results of a power flow calculation."""

__copyright__  = "LVGRIDEXT development group"
__license__    = "GNU Affero General Public License Version 3 (AGPL-3.0)"
__author__     = "LVGRIDEXT development group"


from setuptools import find_packages, setup
import os


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()

with open('requirements.txt') as f:
    requirements = f.read().splitlines()
with open('dev_requirements.txt') as f:
    dev_requirements = f.read().splitlines()

setup(name='lvgridext',
      version='v0.1.0',
      author='LVGRIDEXT development group',
      description='Low Voltage GRID EXTension planner',
      long_description=read('README.md'),
      long_description_content_type='text/markdown',
      license='GNU AGPLv3',
      packages=find_packages(exclude=['tests', 'tests.*']),
      install_requires=requirements,
      package_data={
          'lvgridext': [
              os.path.join('config',
                           '*.cfg'),
          ]},
      extras_require={
        'dev': dev_requirements},
      classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU Affero General Public License v3",
        "Natural Language :: English",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering"],
      )
