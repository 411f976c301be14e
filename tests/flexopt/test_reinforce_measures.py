import math

import pytest

from lvgridext.core.exceptions import InvalidParameterError
from lvgridext.core.network import BusExt, SectionExt
from lvgridext.core.network.navigators import GridNavigator, GraphNavigator
from lvgridext.flexopt.feeder import find_next_section, route_buses
from lvgridext.flexopt.reinforce_measures import LVGridExtension
from lvgridext.tools.example_grids import radial_grid_current_overload, \
    loop_grid_current_overload, meshed_grid_current_overload, \
    radial_grid_voltage_deviation, loop_grid_voltage_deviation, \
    meshed_grid_voltage_deviation, get_bus, get_section


class RouteTableNavigator(GridNavigator):
    """Returns predefined routes and records the requested ones"""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.requests = []

    def shortest_route(self, start_bus, goal_bus):
        self.requests.append((start_bus, goal_bus))
        return self.routes[(start_bus, goal_bus)]


def feeder_route(grid, bus_names):
    """Returns the sections between consecutive buses named `bus_names`"""
    return [get_section(grid, name_0, name_1)
            for name_0, name_1 in zip(bus_names[:-1], bus_names[1:])]


class TestRelieveFactors(object):

    @pytest.fixture
    def extension(self):
        return LVGridExtension(GridNavigator())

    def test_defaults(self, extension):
        assert extension.get_relieve_factor_current() == pytest.approx(0.4)
        assert extension.get_relieve_factor_voltage() == pytest.approx(0.7)

    def test_constructor(self):
        extension = LVGridExtension(GridNavigator(),
                                    relieve_factor_current=0.1,
                                    relieve_factor_voltage=0.9)
        assert extension.relieve_factor_current == 0.1
        assert extension.relieve_factor_voltage == 0.9

    def test_constructor_invalid(self):
        with pytest.raises(InvalidParameterError):
            LVGridExtension(GridNavigator(), relieve_factor_current=1.5)
        with pytest.raises(InvalidParameterError):
            LVGridExtension(GridNavigator(), relieve_factor_voltage=-0.5)

    @pytest.mark.parametrize('relieve_factor', [0.0, 0.25, 0.5, 1.0])
    def test_set_valid(self, extension, relieve_factor):
        extension.set_relieve_factor_current(relieve_factor)
        extension.set_relieve_factor_voltage(relieve_factor)
        assert extension.get_relieve_factor_current() == relieve_factor
        assert extension.get_relieve_factor_voltage() == relieve_factor

    @pytest.mark.parametrize('relieve_factor', [-0.01, 1.01, 5, math.nan])
    def test_set_invalid_current(self, extension, relieve_factor):
        extension.set_relieve_factor_current(0.3)
        with pytest.raises(InvalidParameterError):
            extension.set_relieve_factor_current(relieve_factor)
        assert extension.get_relieve_factor_current() == 0.3

    @pytest.mark.parametrize('relieve_factor', [-0.01, 1.01, 5, math.nan])
    def test_set_invalid_voltage(self, extension, relieve_factor):
        extension.relieve_factor_voltage = 0.3
        with pytest.raises(InvalidParameterError):
            extension.relieve_factor_voltage = relieve_factor
        assert extension.relieve_factor_voltage == 0.3

    def test_invalid_parameter_is_value_error(self, extension):
        with pytest.raises(ValueError):
            extension.set_relieve_factor_voltage(2)


class TestOverloadReports(object):

    @pytest.fixture
    def extension(self):
        return LVGridExtension(GridNavigator())

    def test_has_overloads(self, extension):
        assert not extension.has_overloads()
        extension.report_current_overload(
            SectionExt(buses=(BusExt(), BusExt()), abs_specific_current=1.0))
        assert extension.has_overloads()

        extension = LVGridExtension(GridNavigator())
        extension.report_voltage_overload(BusExt(pu_voltage=0.9))
        assert extension.has_overloads()

    def test_reset(self, extension):
        extension.report_current_overload(
            SectionExt(buses=(BusExt(), BusExt()), abs_specific_current=1.0))
        extension.report_voltage_overload(BusExt(pu_voltage=0.9))
        extension.reset()
        assert not extension.has_overloads()
        assert extension.worst_current_overload is None
        assert extension.worst_voltage_overload is None

    def test_no_overload_pending(self, extension):
        assert extension.find_buses_to_extend_between() is None

    def test_current_overload_first(self):
        grid = radial_grid_current_overload()
        navigator = RouteTableNavigator()
        extension = LVGridExtension(navigator)
        extension.report_voltage_overload(get_bus(grid, 12))
        extension.report_current_overload(get_section(grid, 'slack', 7))

        buses = extension.find_buses_to_extend_between()

        assert buses == (get_bus(grid, 9), get_bus(grid, 'slack'))
        assert navigator.requests == []

    def test_worst_current_overload_is_resolved(self):
        grid = radial_grid_current_overload()
        extension = LVGridExtension(GridNavigator())
        extension.report_current_overload(get_section(grid, 'slack', 1))
        extension.report_current_overload(get_section(grid, 'slack', 7))
        extension.report_current_overload(get_section(grid, 8, 9))
        assert extension.worst_current_overload is \
            get_section(grid, 'slack', 7)


class TestCurrentOverloads(object):

    @pytest.mark.parametrize('build_grid, section, expected', [
        (radial_grid_current_overload, ('slack', 7), (9, 'slack')),
        (loop_grid_current_overload, ('slack', 7), (9, 'slack')),
        (meshed_grid_current_overload, ('slack', 1), (2, 'slack'))])
    def test_example_grids(self, build_grid, section, expected):
        grid = build_grid()
        extension = LVGridExtension(GraphNavigator(grid))
        extension.report_current_overload(get_section(grid, *section))

        low, high = extension.find_buses_to_extend_between()

        assert low is get_bus(grid, expected[0])
        assert high is get_bus(grid, expected[1])

    def test_section_order_irrelevant(self):
        grid = radial_grid_current_overload()
        section = get_section(grid, 'slack', 7)
        flipped = SectionExt(buses=tuple(reversed(section.connected_buses)),
                             abs_specific_current=section.abs_specific_current)
        extension = LVGridExtension(GraphNavigator(grid))
        extension.report_current_overload(flipped)

        assert extension.find_buses_to_extend_between() == \
            (get_bus(grid, 9), get_bus(grid, 'slack'))

    def test_meshed_differs_from_radial(self):
        radial = radial_grid_current_overload()
        meshed = meshed_grid_current_overload()
        results = []
        for grid in (radial, meshed):
            extension = LVGridExtension(GraphNavigator(grid))
            extension.report_current_overload(get_section(grid, 'slack', 1))
            extension.set_relieve_factor_current(0.5)
            low, high = extension.find_buses_to_extend_between()
            results.append((low.name, high.name))

        assert results[0] != results[1]


class TestVoltageOverloads(object):

    @pytest.mark.parametrize('build_grid, bus, expected', [
        (radial_grid_voltage_deviation, 12, (8, 'slack')),
        (loop_grid_voltage_deviation, 6, (8, 'slack')),
        (meshed_grid_voltage_deviation, 12, (2, 'slack'))])
    def test_example_grids(self, build_grid, bus, expected):
        grid = build_grid()
        extension = LVGridExtension(GraphNavigator(grid))
        extension.report_voltage_overload(get_bus(grid, bus))

        low, high = extension.find_buses_to_extend_between()

        assert low is get_bus(grid, expected[0])
        assert high is get_bus(grid, expected[1])

    @pytest.mark.parametrize('build_grid, bus, route, expected', [
        (radial_grid_voltage_deviation, 12,
         [12, 11, 10, 9, 8, 7, 'slack'], (8, 'slack')),
        (loop_grid_voltage_deviation, 6,
         [12, 11, 10, 9, 8, 7, 'slack'], (8, 'slack')),
        (meshed_grid_voltage_deviation, 12,
         [6, 5, 4, 3, 2, 1, 'slack'], (2, 'slack'))])
    def test_navigator_route(self, build_grid, bus, route, expected):
        grid = build_grid()
        start = get_bus(grid, route[0])
        goal = get_bus(grid, route[-1])
        navigator = RouteTableNavigator(
            {(start, goal): feeder_route(grid, route)})
        extension = LVGridExtension(navigator)
        extension.report_voltage_overload(get_bus(grid, bus))

        low, high = extension.find_buses_to_extend_between()

        assert navigator.requests == [(start, goal)]
        assert low is get_bus(grid, expected[0])
        assert high is get_bus(grid, expected[1])

    def test_navigator_route_is_authoritative(self):
        grid = meshed_grid_voltage_deviation()
        start = get_bus(grid, 6)
        goal = get_bus(grid, 'slack')
        # detour via the second feeder
        route = feeder_route(grid, [6, 5, 12, 11, 10, 9, 8, 7, 'slack'])
        extension = LVGridExtension(RouteTableNavigator({(start, goal): route}))
        extension.report_voltage_overload(start)

        low, high = extension.find_buses_to_extend_between()

        assert low is get_bus(grid, 9)
        assert high is goal

    @pytest.mark.parametrize('relieve_factor', [0.0, 0.3, 0.7, 1.0])
    def test_extension_between_feeder_ends(self, relieve_factor):
        grid = radial_grid_voltage_deviation()
        navigator = GraphNavigator(grid)
        extension = LVGridExtension(navigator,
                                    relieve_factor_voltage=relieve_factor)
        extension.report_voltage_overload(get_bus(grid, 10))

        low, high = extension.find_buses_to_extend_between()

        low_end = get_bus(grid, 12)
        high_end = get_bus(grid, 'slack')
        assert find_next_section(low_end, False) is None
        assert find_next_section(high_end, True) is None
        buses = route_buses(navigator.shortest_route(low_end, high_end),
                            low_end)
        assert buses.index(low) <= buses.index(high)

    def test_relieve_factor_one_reaches_feeder_end(self):
        grid = radial_grid_voltage_deviation()
        extension = LVGridExtension(GraphNavigator(grid),
                                    relieve_factor_voltage=1.0)
        extension.report_voltage_overload(get_bus(grid, 12))

        assert extension.find_buses_to_extend_between() == \
            (get_bus(grid, 12), get_bus(grid, 'slack'))

    def test_over_voltage(self):
        grid = radial_grid_voltage_deviation()
        # feed-in turns the second feeder into an over-voltage feeder
        for name, v in zip([7, 8, 9, 10, 11, 12],
                           [1.01, 1.02, 1.03, 1.04, 1.05, 1.06]):
            get_bus(grid, name).pu_voltage = v
        extension = LVGridExtension(GraphNavigator(grid))
        extension.report_voltage_overload(get_bus(grid, 12))

        # the first feeder with under-voltage is the low voltage side
        assert extension.find_buses_to_extend_between() == \
            (get_bus(grid, 2), get_bus(grid, 10))

    def test_over_voltage_only(self):
        grid = radial_grid_voltage_deviation()
        for name in [1, 2, 3, 4, 5, 6]:
            get_bus(grid, name).pu_voltage = 1.0 + name / 1000
        for name, v in zip([7, 8, 9, 10, 11, 12],
                           [1.01, 1.02, 1.03, 1.04, 1.05, 1.06]):
            get_bus(grid, name).pu_voltage = v
        extension = LVGridExtension(GraphNavigator(grid))
        extension.report_voltage_overload(get_bus(grid, 12))

        assert extension.find_buses_to_extend_between() == \
            (get_bus(grid, 'slack'), get_bus(grid, 10))
