"""This file is part of LVGRIDEXT, the Low Voltage GRID EXTension planner.
LVGRIDEXT determines where an additional cable relieves thermal overloads
and voltage bound violations in low voltage distribution grids, based on
the results of a power flow calculation."""

__copyright__  = "LVGRIDEXT development group"
__license__    = "GNU Affero General Public License Version 3 (AGPL-3.0)"
__author__     = "LVGRIDEXT development group"


from lvgridext.tools import config as cfg_lvgridext
cfg_lvgridext.load_config('config_files.cfg')

import os
import logging


def create_dir(dirpath):
    """
    Create directory and report about it

    Parameters
    ----------
    dirpath : str
        Directory including path
    """

    if not os.path.isdir(dirpath):
        os.makedirs(dirpath)

        print("We create a directory for you and your LVGRIDEXT data: {}".format(
            dirpath))


def get_default_home_dir():
    """
    Return default home directory of LVGRIDEXT

    Returns
    -------
    homedir : str
        Default home directory including its path
    """
    lvgridext_dir = str(cfg_lvgridext.get('config',
                                          'config_dir'))
    return os.path.join(os.path.expanduser('~'), lvgridext_dir)


def setup_logger(log_dir=None, loglevel=logging.DEBUG):
    """
    Instantiate logger

    Parameters
    ----------
    log_dir : str
        Directory to save log, default: ~/.lvgridext/log/
    loglevel : int
        Level of the logger itself, the stream handler prints from INFO on

    Returns
    -------
    :obj:`logging.Logger`
        The package logger 'lvgridext'
    """

    if log_dir is None:
        log_dir = os.path.join(get_default_home_dir(), 'log')
    create_dir(log_dir)

    logger = logging.getLogger('lvgridext')
    logger.setLevel(loglevel)

    # create a file handler
    handler = logging.FileHandler(
        os.path.join(log_dir, cfg_lvgridext.get('output', 'log_file')))
    handler.setLevel(logging.DEBUG)
    formatter = logging.Formatter(
        '%(asctime)s-%(funcName)s-%(message)s (%(levelname)s)')
    handler.setFormatter(formatter)

    # create a stream handler (print to prompt)
    stream = logging.StreamHandler()
    stream.setLevel(logging.INFO)
    stream_formatter = logging.Formatter(
        '%(message)s (%(levelname)s)')
    stream.setFormatter(stream_formatter)

    # add the handlers to the logger
    logger.addHandler(handler)
    logger.addHandler(stream)

    logger.info('########## New run of LVGRIDEXT issued #############')

    return logger
