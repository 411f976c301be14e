"""This file is part of LVGRIDEXT, the Low Voltage GRID EXTension planner.
LVGRIDEXT determines where an additional cable relieves thermal overloads
and voltage bound violations in low voltage distribution grids, based on
the results of a power flow calculation."""

__copyright__  = "LVGRIDEXT development group"
__license__    = "GNU Affero General Public License Version 3 (AGPL-3.0)"
__author__     = "LVGRIDEXT development group"


# check technical constraints of a LV grid power flow snapshot
import logging

from lvgridext.tools import config as cfg_lvgridext

cfg_lvgridext.load_config('config_calc.cfg')

logger = logging.getLogger('lvgridext')


def get_critical_section_loading(grid):
    """
    Finds sections carrying more than the tolerable specific current

    The tolerable specific current is given by `load_factor_lv_cable` in
    section `assumptions` of config_calc.cfg.

    Parameters
    ----------
    grid : :class:`~.lvgridext.core.network.GridExt`
        Grid with power flow results

    Returns
    -------
    :obj:`list`
        List of dicts {'section': section, 'loading': specific current},
        worst loading first
    """
    load_factor = cfg_lvgridext.get('assumptions', 'load_factor_lv_cable')

    critical_sections = [{'section': section,
                          'loading': section.abs_specific_current}
                         for section in grid.sections()
                         if section.abs_specific_current > load_factor]

    return sorted(critical_sections, key=lambda _: _['loading'], reverse=True)


def get_critical_voltage_at_buses(grid):
    """
    Finds buses whose voltage deviates too much from nominal voltage

    The tolerable deviation is given by `lv_max_v_deviation` in section
    `assumptions` of config_calc.cfg. Over-voltage and under-voltage are
    treated alike.

    Parameters
    ----------
    grid : :class:`~.lvgridext.core.network.GridExt`
        Grid with power flow results

    Returns
    -------
    :obj:`list`
        List of dicts {'bus': bus, 'v_diff': deviation in p.u.}, largest
        deviation first
    """
    v_diff_tolerable = cfg_lvgridext.get('assumptions', 'lv_max_v_deviation')

    critical_buses = [{'bus': bus,
                       'v_diff': abs(bus.pu_voltage - 1)}
                      for bus in grid.buses()
                      if abs(bus.pu_voltage - 1) > v_diff_tolerable]

    return sorted(critical_buses, key=lambda _: _['v_diff'], reverse=True)


def check_load(grid):
    """
    Checks for thermal overloading of sections

    Parameters
    ----------
    grid : :class:`~.lvgridext.core.network.GridExt`
        Grid with power flow results

    Returns
    -------
    :obj:`list`
        List of critical sections, see :func:`get_critical_section_loading`
    """
    crit_sections = get_critical_section_loading(grid)

    if crit_sections:
        logger.info('==> {} sections have load issues.'.format(
            len(crit_sections)))

    return crit_sections


def check_voltage(grid):
    """
    Checks for voltage bound violations at buses

    Parameters
    ----------
    grid : :class:`~.lvgridext.core.network.GridExt`
        Grid with power flow results

    Returns
    -------
    :obj:`list`
        List of critical buses, see :func:`get_critical_voltage_at_buses`
    """
    crit_buses = get_critical_voltage_at_buses(grid)

    if crit_buses:
        logger.info('==> {} buses have voltage issues.'.format(
            len(crit_buses)))

    return crit_buses
