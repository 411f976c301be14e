"""This file is part of LVGRIDEXT, the Low Voltage GRID EXTension planner.
LVGRIDEXT determines where an additional cable relieves thermal overloads
and voltage bound violations in low voltage distribution grids, based on
the results of a power flow calculation.

Example LV grids with power flow results

All grids consist of two feeders of six cables each, starting at the
slack bus (substation bus bar, 1.0 p.u.)::

    slack - 1 - 2 - 3 - 4 - 5 - 6
      |
      7 - 8 - 9 - 10 - 11 - 12

The loop grids additionally connect bus 6 with bus 12, the meshed grids
connect the feeders by cross ties 1-8, 2-9, 3-10, 4-11 and 5-12. Currents
are given in A for cables rated with 275 A.
"""

__copyright__  = "LVGRIDEXT development group"
__license__    = "GNU Affero General Public License Version 3 (AGPL-3.0)"
__author__     = "LVGRIDEXT development group"


from lvgridext.core.network import GridExt, BusExt, SectionExt

I_RATED = 275

RADIAL_TOPOLOGY = [('slack', 1), ('slack', 7), (1, 2), (2, 3), (3, 4),
                   (4, 5), (5, 6), (7, 8), (8, 9), (9, 10), (10, 11),
                   (11, 12)]
LOOP_TOPOLOGY = RADIAL_TOPOLOGY + [(6, 12)]
MESHED_TOPOLOGY = RADIAL_TOPOLOGY + [(1, 8), (2, 9), (3, 10), (4, 11),
                                     (5, 12)]


def build_grid(name, voltages, currents):
    """
    Creates a grid from power flow results

    Parameters
    ----------
    name : :obj:`str`
        Name of the grid
    voltages : :obj:`dict`
        Voltage in p.u. by bus name, bus 'slack' is the slack bus
    currents : :obj:`list`
        List of tuples (bus name, bus name, current in A), one per section

    Returns
    -------
    :class:`~.lvgridext.core.network.GridExt`
    """
    grid = GridExt(name=name)

    buses = {}
    for bus_name, v_pu in voltages.items():
        buses[bus_name] = BusExt(name=bus_name, pu_voltage=v_pu,
                                 slack=(bus_name == 'slack'))
        grid.add_bus(buses[bus_name])

    for bus_name_0, bus_name_1, current in currents:
        grid.add_section(SectionExt(
            buses=(buses[bus_name_0], buses[bus_name_1]),
            abs_specific_current=current / I_RATED))

    return grid


def get_bus(grid, name):
    """Returns the bus of `grid` named `name`"""
    for bus in grid.buses():
        if bus.name == name:
            return bus
    raise KeyError('{} has no bus {}.'.format(grid, name))


def get_section(grid, name_0, name_1):
    """Returns the first section of `grid` between the buses named `name_0`
    and `name_1`"""
    for section in grid.sections():
        if {bus.name for bus in section.connected_buses} == {name_0, name_1}:
            return section
    raise KeyError('{} has no section between {} and {}.'.format(
        grid, name_0, name_1))


def _currents(topology, amps):
    return [(bus_0, bus_1, current)
            for (bus_0, bus_1), current in zip(topology, amps)]


def radial_grid_current_overload():
    """Radial grid, the cable slack-7 is the most loaded one"""
    voltages = {'slack': 1.0, 1: 0.990464103, 2: 0.982502702,
                3: 0.976123884, 4: 0.971334115, 5: 0.968138244,
                6: 0.966539502, 7: 0.982924914, 8: 0.968646276,
                9: 0.957191007, 10: 0.94858068, 11: 0.942831478,
                12: 0.939954184}
    amps = [40.99259916, 73.18490378, 34.26192197, 27.47661157,
            20.64691148, 13.78351268, 6.897451658, 61.31659695,
            49.27282644, 37.0846535, 24.78574048, 12.41180751]
    return build_grid('radial_current', voltages,
                      _currents(RADIAL_TOPOLOGY, amps))


def loop_grid_current_overload():
    """Loop grid, the cable slack-7 is the most loaded one"""
    voltages = {'slack': 1.0, 1: 0.988389006, 2: 0.978344568,
                3: 0.969885733, 4: 0.963028838, 5: 0.957787327,
                6: 0.954171602, 7: 0.985036178, 8: 0.972824883,
                9: 0.963406995, 10: 0.956814725, 11: 0.953070979,
                12: 0.952188901}
    amps = [49.77579465, 64.14341095, 43.03129665, 36.21758883,
            29.34463677, 22.42300371, 15.46375556, 52.30033834,
            40.30886681, 28.2007319, 16.00976495, 3.771321928,
            8.47835391]
    return build_grid('loop_current', voltages,
                      _currents(LOOP_TOPOLOGY, amps))


def meshed_grid_current_overload():
    """Meshed grid, the cable slack-1 is the most loaded one"""
    voltages = {'slack': 1.0, 1: 0.984680818, 2: 0.973897989,
                3: 0.966056279, 4: 0.960612259, 5: 0.957288653,
                6: 0.955671862, 7: 0.988886683, 8: 0.980525585,
                9: 0.972003567, 10: 0.964938024, 11: 0.959892528,
                12: 0.957158856}
    amps = [65.78612203, 47.73623652, 46.38849452, 33.77675505,
            23.46934726, 14.33610058, 6.975392047, 35.93912163,
            36.66898614, 30.43365246, 21.75063583, 11.79093736,
            12.62765834, 5.766775958, 3.406897916, 2.193670902,
            0.397094649]
    return build_grid('meshed_current', voltages,
                      _currents(MESHED_TOPOLOGY, amps))


def radial_grid_voltage_deviation():
    """Radial grid, bus 12 has the lowest voltage"""
    voltages = {'slack': 1.0, 1: 0.990455618, 2: 0.982473953,
                3: 0.976070076, 4: 0.971256251, 5: 0.9680418,
                6: 0.966432997, 7: 0.98545917, 8: 0.973276432,
                9: 0.963486696, 10: 0.956118634, 11: 0.951194195,
                12: 0.94872823}
    amps = [40.99259916, 62.30298268, 34.26192197, 27.47661157,
            20.64691148, 13.78351268, 6.897451658, 52.15625275,
            41.88268079, 31.50517837, 21.04825056, 10.53765251]
    return build_grid('radial_voltage', voltages,
                      _currents(RADIAL_TOPOLOGY, amps))


def loop_grid_voltage_deviation():
    """Loop grid, bus 12 has the lowest voltage"""
    voltages = {'slack': 1.0, 1: 0.989086221, 2: 0.979737679,
                3: 0.971972052, 4: 0.965804272, 5: 0.961246362,
                6: 0.958307301, 7: 0.986860542, 8: 0.976075209,
                9: 0.967674769, 10: 0.961683642, 11: 0.95811949,
                12: 0.95699292}
    amps = [46.81769445, 56.36144563, 40.07793907, 33.2740025,
            26.41595043, 19.51439042, 12.58037464, 46.22903062,
            35.98497712, 25.65250215, 15.25616534, 4.821516533,
            5.625292141]
    return build_grid('loop_voltage', voltages,
                      _currents(LOOP_TOPOLOGY, amps))


def meshed_grid_voltage_deviation():
    """Meshed grid, bus 6 has the lowest voltage"""
    voltages = {'slack': 1.0, 1: 0.985995263, 2: 0.976106792,
                3: 0.968886946, 4: 0.963841894, 5: 0.96071197,
                6: 0.959088802, 7: 0.99002215, 8: 0.982389553,
                9: 0.974578585, 10: 0.968078141, 11: 0.963414961,
                12: 0.960872325}
    amps = [60.08866967, 42.8340611, 42.40127271, 30.94174157,
            21.61240689, 13.40418069, 6.949517207, 32.73384303,
            33.48177734, 27.85230156, 19.97354626, 10.88833183,
            10.92649086, 4.630341629, 2.449534804, 1.292680945,
            0.483235252]
    return build_grid('meshed_voltage', voltages,
                      _currents(MESHED_TOPOLOGY, amps))
