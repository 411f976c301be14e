"""This file is part of LVGRIDEXT, the Low Voltage GRID EXTension planner.
LVGRIDEXT determines where an additional cable relieves thermal overloads
and voltage bound violations in low voltage distribution grids, based on
the results of a power flow calculation."""

__copyright__  = "LVGRIDEXT development group"
__license__    = "GNU Affero General Public License Version 3 (AGPL-3.0)"
__author__     = "LVGRIDEXT development group"


import pandas as pd


def calculate_bus_voltage_stats(grid):
    """
    Summarizes the power flow voltages of all buses of a grid

    Parameters
    ----------
    grid : :class:`~.lvgridext.core.network.GridExt`
        Grid with power flow results

    Returns
    -------
    :pandas:`pandas.DataFrame<dataframe>`
        Indexed by representative of bus, sorted. Columns:

        * v_pu : voltage in p.u.
        * v_diff : absolute deviation from nominal voltage in p.u.
        * slack : True for the slack bus
    """
    buses_data = [{'bus': repr(bus),
                   'v_pu': bus.pu_voltage,
                   'v_diff': abs(bus.pu_voltage - 1),
                   'slack': bus.slack}
                  for bus in grid.buses()]

    buses_df = pd.DataFrame(buses_data,
                            columns=['bus', 'v_pu', 'v_diff', 'slack'])

    return buses_df.set_index('bus').sort_index()


def calculate_section_loading_stats(grid):
    """
    Summarizes the power flow loading of all sections of a grid

    Parameters
    ----------
    grid : :class:`~.lvgridext.core.network.GridExt`
        Grid with power flow results

    Returns
    -------
    :pandas:`pandas.DataFrame<dataframe>`
        Indexed by representative of section, sorted. Columns:

        * bus_0, bus_1 : representatives of connected buses
        * abs_specific_current : current divided by rated current
        * length : length in m
    """
    sections_data = [{'section': repr(section),
                      'bus_0': repr(section.connected_buses[0]),
                      'bus_1': repr(section.connected_buses[1]),
                      'abs_specific_current': section.abs_specific_current,
                      'length': section.length}
                     for section in grid.sections()]

    sections_df = pd.DataFrame(sections_data,
                               columns=['section', 'bus_0', 'bus_1',
                                        'abs_specific_current', 'length'])

    return sections_df.set_index('section').sort_index()
