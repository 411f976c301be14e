"""This file is part of LVGRIDEXT, the Low Voltage GRID EXTension planner.
LVGRIDEXT determines where an additional cable relieves thermal overloads
and voltage bound violations in low voltage distribution grids, based on
the results of a power flow calculation."""

__copyright__  = "LVGRIDEXT development group"
__license__    = "GNU Affero General Public License Version 3 (AGPL-3.0)"
__author__     = "LVGRIDEXT development group"


__version__ = '0.1.0'
