"""This file is part of LVGRIDEXT, the Low Voltage GRID EXTension planner.
LVGRIDEXT determines where an additional cable relieves thermal overloads
and voltage bound violations in low voltage distribution grids, based on
the results of a power flow calculation."""

__copyright__  = "LVGRIDEXT development group"
__license__    = "GNU Affero General Public License Version 3 (AGPL-3.0)"
__author__     = "LVGRIDEXT development group"


from .check_tech_constraints import check_load, check_voltage
from .reinforce_measures import LVGridExtension
from lvgridext.core.network import SectionExt
from lvgridext.core.network.navigators import GraphNavigator
import logging


logger = logging.getLogger('lvgridext')


def reinforce_grid(grid, extension=None):
    """ Evaluates the need of a new cable in a LV grid snapshot

    All sections and buses violating technical constraints (see
    :mod:`~.lvgridext.flexopt.check_tech_constraints`) are reported to
    `extension` which determines where a new cable has to be built.
    Thermal overloads are prioritized over voltage bound violations.

    Parameters
    ----------
    grid : :class:`~.lvgridext.core.network.GridExt`
        Grid with power flow results
    extension : :class:`~.lvgridext.flexopt.reinforce_measures.LVGridExtension`
        Grid extension to use. If None, a new one routing on `grid` with
        :class:`~.lvgridext.core.network.navigators.GraphNavigator` and
        default relieve factors is used.

    Returns
    -------
    :obj:`tuple`
        2-tuple of :class:`~.lvgridext.core.network.BusExt` objects between
        which the new cable is to be built, None if there are no issues.

    Note
    -----
    The reported overloads of `extension` are removed afterwards, so it can
    be reused for the next snapshot.
    """
    if extension is None:
        extension = LVGridExtension(GraphNavigator(grid))

    crit_sections = check_load(grid)
    crit_buses = check_voltage(grid)

    for crit_section in crit_sections:
        extension.report_current_overload(crit_section['section'])
    for crit_bus in crit_buses:
        extension.report_voltage_overload(crit_bus['bus'])

    try:
        buses = extension.find_buses_to_extend_between()
    finally:
        extension.reset()

    if buses is None:
        logger.info('==> No issues in {grid}, no extension required.'.format(
            grid=grid))

    return buses


def build_extension(grid, buses, **kwargs):
    """
    Adds a new section between `buses` to `grid`

    Parameters
    ----------
    grid : :class:`~.lvgridext.core.network.GridExt`
        Grid to extend
    buses : :obj:`tuple`
        2-tuple of :class:`~.lvgridext.core.network.BusExt` objects as
        returned by :func:`reinforce_grid`
    **kwargs
        Further attributes of the new
        :class:`~.lvgridext.core.network.SectionExt`, e.g. `length` or
        `name`. The specific current is 0 until the next power flow.

    Returns
    -------
    :class:`~.lvgridext.core.network.SectionExt`
        The new section, None if both buses are the same. This happens for
        voltage bound violations resolved with a relieve factor of 0, where
        both ends are the bus closest to nominal voltage.
    """
    bus_0, bus_1 = buses
    if bus_0 is bus_1:
        logger.warning('==> No cable built in {grid}, both ends are '
                       '{bus}.'.format(grid=grid, bus=bus_0))
        return None

    section = SectionExt(buses=buses, **kwargs)
    grid.add_section(section)

    logger.info('==> New cable {section} built in {grid}.'.format(
        section=section, grid=grid))

    return section
