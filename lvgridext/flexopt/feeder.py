"""This file is part of LVGRIDEXT, the Low Voltage GRID EXTension planner.
LVGRIDEXT determines where an additional cable relieves thermal overloads
and voltage bound violations in low voltage distribution grids, based on
the results of a power flow calculation."""

__copyright__  = "LVGRIDEXT development group"
__license__    = "GNU Affero General Public License Version 3 (AGPL-3.0)"
__author__     = "LVGRIDEXT development group"


# walks along LV feeders towards increasing or decreasing voltages
import logging

from lvgridext.core.exceptions import DisconnectedSectionError

logger = logging.getLogger('lvgridext')


def get_bus_at_opposing_end(section, bus):
    """ Returns the bus at the other end of `section`

    Parameters
    ----------
    section : :class:`~.lvgridext.core.network.SectionExt`
        Section connected to `bus`
    bus : :class:`~.lvgridext.core.network.BusExt`
        Already known bus, not the one to be returned

    Returns
    -------
    :class:`~.lvgridext.core.network.BusExt`
        Bus at the opposing end

    Raises
    ------
    :class:`~.lvgridext.core.exceptions.DisconnectedSectionError`
        If `bus` is not connected to `section`
    """
    bus_0, bus_1 = section.connected_buses
    if bus_0 is bus:
        return bus_1
    if bus_1 is bus:
        return bus_0
    raise DisconnectedSectionError(
        '{section} does not contain {bus} and consequently no bus at the '
        'other end can be found.'.format(section=section, bus=bus))


def get_high_voltage_bus(section):
    """Returns the bus of `section` with the higher voltage. On equal
    voltages the first of the connected buses is returned."""
    bus_0, bus_1 = section.connected_buses
    if bus_1.pu_voltage > bus_0.pu_voltage:
        return bus_1
    return bus_0


def get_low_voltage_bus(section):
    """Returns the bus of `section` with the lower voltage. On equal
    voltages the second of the connected buses is returned, the opposite of
    :func:`get_high_voltage_bus`."""
    bus_0, bus_1 = section.connected_buses
    if bus_0.pu_voltage < bus_1.pu_voltage:
        return bus_0
    return bus_1


def find_next_section(bus, search_up):
    """
    Finds the section along which the feeder continues at `bus`

    Candidates are all sections connected to `bus` whose opposing bus has a
    strictly higher (`search_up`) or strictly lower voltage than `bus`.
    Out of these the section carrying the highest specific current is
    chosen, the first one encountered on equal currents.

    Parameters
    ----------
    bus : :class:`~.lvgridext.core.network.BusExt`
        Bus to continue from
    search_up : :obj:`bool`
        True to follow increasing voltages, False for decreasing voltages

    Returns
    -------
    :class:`~.lvgridext.core.network.SectionExt`
        Next section of the feeder, None if `bus` is a local voltage
        extremum
    """
    next_section = None
    for section in bus.connected_sections:
        other_bus = get_bus_at_opposing_end(section, bus)
        if search_up:
            continues_feeder = other_bus.pu_voltage > bus.pu_voltage
        else:
            continues_feeder = other_bus.pu_voltage < bus.pu_voltage

        if continues_feeder and (
                next_section is None or
                section.abs_specific_current >
                next_section.abs_specific_current):
            next_section = section

    return next_section


def extend_along_feeder(overloaded_section, search_up, relieve_factor):
    """
    Finds the bus at which a cable relieving `overloaded_section` ends

    Starting at the end of `overloaded_section` in search direction, the
    feeder is followed (see :func:`find_next_section`) as long as the next
    section still carries at least
    `(1 - relieve_factor) * overloaded_section.abs_specific_current`.

    Parameters
    ----------
    overloaded_section : :class:`~.lvgridext.core.network.SectionExt`
        Section with the worst thermal overload
    search_up : :obj:`bool`
        True to follow the feeder towards increasing voltages, False for
        decreasing voltages
    relieve_factor : :obj:`float`
        Relieve factor for thermal overloads, between 0 and 1

    Returns
    -------
    :class:`~.lvgridext.core.network.BusExt`
        The bus at which the extension cable should be connected

    Note
    -----
    Voltage plateaus forming a loop of strictly increasing voltages do not
    occur in power flow results and are not guarded against.
    """
    i_min = overloaded_section.abs_specific_current * (1 - relieve_factor)

    if search_up:
        bus = get_high_voltage_bus(overloaded_section)
    else:
        bus = get_low_voltage_bus(overloaded_section)

    while True:
        next_section = find_next_section(bus, search_up)

        # local voltage extremum reached
        if next_section is None:
            break

        # next section is relieved enough to not be extended anymore
        if next_section.abs_specific_current < i_min:
            break

        bus = get_bus_at_opposing_end(next_section, bus)
        logger.debug('Extension continues to {}.'.format(bus))

    return bus


def find_feeder_end(bus, search_up):
    """
    Follows the feeder from `bus` to the local voltage maximum or minimum

    Parameters
    ----------
    bus : :class:`~.lvgridext.core.network.BusExt`
        Bus to start at
    search_up : :obj:`bool`
        True to find the local maximum, False for the local minimum

    Returns
    -------
    :class:`~.lvgridext.core.network.BusExt`
        Bus with the local voltage extremum
    :obj:`list`
        Sections passed on the way from `bus` to the extremum, in order
    """
    sections = []
    while True:
        next_section = find_next_section(bus, search_up)
        if next_section is None:
            return bus, sections
        sections.append(next_section)
        bus = get_bus_at_opposing_end(next_section, bus)


def find_main_feeder(bus):
    """
    Determines the feeder `bus` is part of

    Parameters
    ----------
    bus : :class:`~.lvgridext.core.network.BusExt`
        Bus with voltage bound violation

    Returns
    -------
    :class:`~.lvgridext.core.network.BusExt`
        low_voltage_end : Local voltage minimum
    :class:`~.lvgridext.core.network.BusExt`
        high_voltage_end : Local voltage maximum
    :obj:`list`
        Sections from `low_voltage_end` to `high_voltage_end`, in order
    """
    high_voltage_end, sections_up = find_feeder_end(bus, search_up=True)
    low_voltage_end, sections_down = find_feeder_end(bus, search_up=False)

    return (low_voltage_end,
            high_voltage_end,
            list(reversed(sections_down)) + sections_up)


def route_buses(route, start_bus):
    """Returns the buses along `route` including `start_bus`"""
    buses = [start_bus]
    for section in route:
        buses.append(get_bus_at_opposing_end(section, buses[-1]))
    return buses


def find_centre_bus(route, low_voltage_end):
    """
    Finds the bus on `route` whose voltage is closest to nominal voltage

    The route is followed from `low_voltage_end` as long as the deviation
    from nominal voltage does not increase.

    Parameters
    ----------
    route : :obj:`list`
        Sections from `low_voltage_end` to the high voltage end of the feeder
    low_voltage_end : :class:`~.lvgridext.core.network.BusExt`
        First bus of `route`

    Returns
    -------
    :class:`~.lvgridext.core.network.BusExt`
        centre bus
    :obj:`int`
        Position of the centre bus on `route`, 0 is `low_voltage_end` and
        `len(route)` the last bus
    """
    if low_voltage_end.pu_voltage >= 1:
        return low_voltage_end, 0

    buses = route_buses(route, low_voltage_end)
    position = 0
    v_delta = abs(low_voltage_end.pu_voltage - 1)
    for candidate_position, bus in enumerate(buses[1:], start=1):
        v_delta_candidate = abs(bus.pu_voltage - 1)
        if v_delta_candidate > v_delta:
            break
        position = candidate_position
        v_delta = v_delta_candidate

    return buses[position], position


def find_low_extension_bus(route, position, low_voltage_end, relieve_factor):
    """
    Finds the bus on the low voltage side at which the extension cable ends

    The route is followed from the centre bus back towards
    `low_voltage_end` as long as the voltage does not fall below
    `1 - relieve_factor * (1 - low_voltage_end.pu_voltage)`.

    Parameters
    ----------
    route : :obj:`list`
        Sections from `low_voltage_end` to the high voltage end of the feeder
    position : :obj:`int`
        Position of the centre bus on `route`
    low_voltage_end : :class:`~.lvgridext.core.network.BusExt`
        First bus of `route`
    relieve_factor : :obj:`float`
        Relieve factor for voltage bound violations, between 0 and 1

    Returns
    -------
    :class:`~.lvgridext.core.network.BusExt`
    """
    buses = route_buses(route, low_voltage_end)
    v_min = 1 - relieve_factor * (1 - low_voltage_end.pu_voltage)

    while position > 0:
        if buses[position - 1].pu_voltage < v_min:
            break
        position -= 1

    return buses[position]


def find_high_extension_bus(route, position, low_voltage_end,
                            high_voltage_end, relieve_factor):
    """
    Finds the bus on the high voltage side at which the extension cable ends

    The route is followed from the centre bus towards `high_voltage_end`
    as long as the voltage does not rise above
    `1 + relieve_factor * (high_voltage_end.pu_voltage - 1)`. This mirrors
    :func:`find_low_extension_bus`: the walk advances while the voltage stays
    on the nominal side of the threshold and stops before the first bus
    beyond it.

    Parameters
    ----------
    route : :obj:`list`
        Sections from `low_voltage_end` to `high_voltage_end`
    position : :obj:`int`
        Position of the centre bus on `route`
    low_voltage_end : :class:`~.lvgridext.core.network.BusExt`
        First bus of `route`
    high_voltage_end : :class:`~.lvgridext.core.network.BusExt`
        Last bus of `route`
    relieve_factor : :obj:`float`
        Relieve factor for voltage bound violations, between 0 and 1

    Returns
    -------
    :class:`~.lvgridext.core.network.BusExt`
    """
    buses = route_buses(route, low_voltage_end)
    v_max = 1 + relieve_factor * (high_voltage_end.pu_voltage - 1)

    while position < len(route):
        if buses[position + 1].pu_voltage > v_max:
            break
        position += 1

    return buses[position]
