"""This file is part of LVGRIDEXT, the Low Voltage GRID EXTension planner.
LVGRIDEXT determines where an additional cable relieves thermal overloads
and voltage bound violations in low voltage distribution grids, based on
the results of a power flow calculation.

This module provides a highlevel layer for reading and writing config files.
The config files are located in `lvgridext/config` and have to be of the
following structure to be imported correctly.

::

    [grid_extension] \n
        relieve_factor_current = 0.4 \n
        relieve_factor_voltage = 0.7 \n
    \n
    [SectionName] \n
        OptionName = value \n
        Option2 = value2 \n
"""

__copyright__  = "LVGRIDEXT development group"
__license__    = "GNU Affero General Public License Version 3 (AGPL-3.0)"
__author__     = "LVGRIDEXT development group"


import configparser as cp
import logging
import os.path as path

import lvgridext

logger = logging.getLogger(__name__)

cfg = cp.RawConfigParser()
_loaded_files = []


def config_file_path(filename):
    """Return the absolute path of config file `filename`

    Parameters
    ----------
    filename : :obj:`str`
        Name of the file inside of the package's config directory

    Returns
    -------
    :obj:`str`
        Path to config file
    """
    package_path = lvgridext.__path__[0]
    return path.join(package_path, 'config', filename)


def load_config(filename):
    """ Read config file specified by `filename`

    Parameters
    ----------
    filename : :obj:`str`
        Name of the file inside of the package's config directory, e.g.
        'config_calc.cfg'
    """
    file = config_file_path(filename)

    if not cfg.read(file):
        logger.error("configfile {} not found.".format(file))
    elif file not in _loaded_files:
        _loaded_files.append(file)


def get(section, key):
    """Returns the value of a given key of a given section of the loaded
    config files.

    Parameters
    ----------
    section : :obj:`str`
        the section.
    key : :obj:`str`
        the key

    Returns
    -------
    :any:`float`
        the value which will be casted to float, int or boolean.
        if no cast is successful, the raw string will be returned.

    See Also
    --------
    set :
    """
    try:
        return cfg.getfloat(section, key)
    except ValueError:
        try:
            return cfg.getint(section, key)
        except ValueError:
            try:
                return cfg.getboolean(section, key)
            except ValueError:
                return cfg.get(section, key)


def set(section, key, value, filename=None):
    """Sets a value to a [section] key - pair.

    if the section doesn't exist yet, it will be created. If `filename` is
    given, the config is written to this file afterwards.

    Parameters
    ----------
    section: :obj:`str`
        the section.
    key: :obj:`str`
        the key.
    value: float, int, str
        the value.
    filename: :obj:`str`
        Name of the config file to write to, optional

    See Also
    --------
    get :
    """
    if not cfg.has_section(section):
        cfg.add_section(section)

    cfg.set(section, key, str(value))

    if filename is not None:
        with open(config_file_path(filename), 'w') as configfile:
            cfg.write(configfile)
