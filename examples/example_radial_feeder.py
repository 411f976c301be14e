#!/usr/bin/env python3

"""This is a simple example file for LVGRIDEXT.

__copyright__ = "LVGRIDEXT development group"
__license__ = "GNU AGPLv3"
__author__ = "LVGRIDEXT development group"
"""

# ===== IMPORTS AND CONFIGURATION =====

# import required modules of LVGRIDEXT
from lvgridext.core.network.navigators import GraphNavigator
from lvgridext.flexopt.reinforce_grid import reinforce_grid, build_extension
from lvgridext.flexopt.reinforce_measures import LVGridExtension
from lvgridext.tools import config as cfg_lvgridext, results, example_grids
from lvgridext.tools.logger import setup_logger

# define logger
logger = setup_logger()

# load parameters from configs
cfg_lvgridext.load_config('config_calc.cfg')
cfg_lvgridext.load_config('config_files.cfg')

# ===== MAIN =====

# power flow snapshot of a grid with two radial feeders
grid = example_grids.radial_grid_voltage_deviation()
print(results.calculate_bus_voltage_stats(grid))

# plan the new cable, routing by cable length
extension = LVGridExtension(GraphNavigator(grid, weight='length'))
buses = reinforce_grid(grid, extension)

# add the new cable to the grid
if buses is not None:
    build_extension(grid, buses, name='extension_1')
    print(results.calculate_section_loading_stats(grid))
