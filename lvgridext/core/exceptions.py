"""This file is part of LVGRIDEXT, the Low Voltage GRID EXTension planner.
LVGRIDEXT determines where an additional cable relieves thermal overloads
and voltage bound violations in low voltage distribution grids, based on
the results of a power flow calculation."""

__copyright__  = "LVGRIDEXT development group"
__license__    = "GNU Affero General Public License Version 3 (AGPL-3.0)"
__author__     = "LVGRIDEXT development group"


class InvalidParameterError(ValueError):
    """Raised if a relieve factor outside of [0, 1] is to be set.

    The previously set value is retained.
    """


class DisconnectedSectionError(ValueError):
    """Raised if the opposing end of a section is requested for a bus that
    is not connected to this section.

    Reflects inconsistent grid data; it is not recoverable.
    """
